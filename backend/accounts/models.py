# backend/accounts/models.py

from django.contrib.auth.models import AbstractUser
from django.db import models

class CustomUser(AbstractUser):
    ROLE_CHOICES = [
        ('admin', 'Admin'),
        ('user', 'User'),
    ]
    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('approved', 'Approved'),
        ('deleted', 'Deleted'),
    ]
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='user')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    name = models.CharField(max_length=255, blank=True, default='')
    phone = models.CharField(max_length=64, blank=True, default='')
    approved_at = models.DateTimeField(blank=True, null=True)

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username

    @property
    def has_profile(self) -> bool:
        """Approved, active client accounts may submit shipment requests."""
        return self.is_active and self.status == 'approved'

    def __str__(self):
        return f"{self.username} ({self.get_role_display()})"
