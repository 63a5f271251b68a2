from django.db import models
from django.contrib.auth.models import AbstractUser


class User(AbstractUser):
    ROLE_CHOICES = (
        ('admin', 'Admin'),
        ('teacher', 'Teacher'),
        ('student', 'Student'),
        ('parent', 'Parent'),
    )
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default='student')
    mobile = models.CharField(max_length=20, blank=True)

    # students only
    grade = models.CharField(max_length=20, blank=True)
    section = models.CharField(max_length=20, blank=True)
    parent = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='children',
    )

    # teachers only
    subject = models.CharField(max_length=100, blank=True)

    @property
    def name(self):
        return self.get_full_name() or self.username

    def __str__(self):
        return self.username
