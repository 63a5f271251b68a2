from django.db import models


class Fee(models.Model):
    STATUS_CHOICES = [
        ('PAID', 'Paid'),
        ('DUE', 'Due'),
        ('PENDING', 'Pending'),
    ]
    FEE_TYPE_CHOICES = [
        ('Term Fee', 'Term Fee'),
        ('Registration Fee', 'Registration Fee'),
        ('Other Fee', 'Other Fee'),
    ]
    PAYMENT_METHOD_CHOICES = [
        ('CARD', 'Card'),
        ('BANK', 'Bank Transfer'),
        ('CASH', 'Cash'),
    ]

    student_id = models.CharField(max_length=50)
    student = models.CharField(max_length=200)
    term = models.CharField(max_length=50, null=True, blank=True, default=None)
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='DUE')
    date = models.CharField(max_length=30)
    fee_type = models.CharField(max_length=30, choices=FEE_TYPE_CHOICES, default='Term Fee')
    payment_method = models.CharField(max_length=10, choices=PAYMENT_METHOD_CHOICES, blank=True)
    paid_date = models.DateTimeField(null=True, blank=True)
    verified_by = models.CharField(max_length=100, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return f"{self.student} - {self.fee_type} ({self.status})"
