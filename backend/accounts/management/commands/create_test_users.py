from django.core.management.base import BaseCommand
from django.contrib.auth.hashers import make_password
from django.utils import timezone
from accounts.models import CustomUser

class Command(BaseCommand):
    help = 'Create test users: one portal admin, one approved client and one pending client'

    def handle(self, *args, **options):
        users_data = [
            {
                'username': 'portal_admin',
                'password': 'admin_password',
                'role': 'admin',
                'status': 'approved',
                'name': 'Portal Admin',
            },
            {
                'username': 'client_user',
                'password': 'client_password',
                'role': 'user',
                'status': 'approved',
                'name': 'Approved Client',
            },
            {
                'username': 'pending_user',
                'password': 'pending_password',
                'role': 'user',
                'status': 'pending',
                'name': 'Pending Client',
            },
        ]

        for user_data in users_data:
            if CustomUser.objects.filter(username=user_data['username']).exists():
                self.stdout.write(
                    self.style.WARNING(f"User {user_data['username']} already exists")
                )
                continue

            user = CustomUser.objects.create(
                username=user_data['username'],
                password=make_password(user_data['password']),
                role=user_data['role'],
                status=user_data['status'],
                name=user_data['name'],
                is_staff=user_data['role'] == 'admin',
                approved_at=timezone.now() if user_data['status'] == 'approved' else None,
            )

            self.stdout.write(
                self.style.SUCCESS(f"Successfully created {user_data['role']} user: {user.username} ({user.status})")
            )

        self.stdout.write(
            self.style.SUCCESS("All test users created successfully!")
        )
