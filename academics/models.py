# academics/models.py
from django.db import models


class Result(models.Model):
    student_id = models.CharField(max_length=50)
    student = models.CharField(max_length=200)
    subject = models.CharField(max_length=100)
    exam = models.CharField(max_length=100)
    score = models.DecimalField(max_digits=5, decimal_places=2)
    grade = models.CharField(max_length=5)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.student} - {self.subject} ({self.exam}): {self.score}"


class Timetable(models.Model):
    day = models.CharField(max_length=15)
    period = models.CharField(max_length=20)
    class_name = models.CharField(max_length=50)
    subject = models.CharField(max_length=100)
    teacher = models.CharField(max_length=100)
    room = models.CharField(max_length=30)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.class_name} {self.day} {self.period}: {self.subject}"
