from django.contrib import admin
from .models import Result, Timetable

admin.site.register(Result)
admin.site.register(Timetable)
