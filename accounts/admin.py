from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from .models import User


@admin.register(User)
class SchoolUserAdmin(UserAdmin):
    list_display = ('username', 'email', 'role', 'grade', 'section')
    list_filter = ('role',)
    fieldsets = UserAdmin.fieldsets + (
        ('School', {'fields': ('role', 'mobile', 'grade', 'section', 'parent', 'subject')}),
    )
