from django.db import models


class Notice(models.Model):
    title = models.CharField(max_length=200)
    message = models.TextField()
    posted_by = models.CharField(max_length=100)
    date = models.CharField(max_length=30)

    class Meta:
        ordering = ['id']

    def __str__(self):
        return self.title
