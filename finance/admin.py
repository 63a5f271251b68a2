from django.contrib import admin
from .models import Fee

admin.site.register(Fee)
