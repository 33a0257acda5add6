from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import CustomUser

class CustomUserAdmin(UserAdmin):
    model = CustomUser
    list_display = ['email', 'username', 'name', 'role', 'status', 'is_staff']
    list_filter = ['role', 'status', 'is_staff']
    fieldsets = UserAdmin.fieldsets + (
        ('Portal', {'fields': ('name', 'phone', 'role', 'status', 'approved_at')}),
    )

admin.site.register(CustomUser, CustomUserAdmin)
