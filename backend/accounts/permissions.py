from rest_framework import permissions

class IsApprovedClient(permissions.BasePermission):
    """
    Allow only authenticated users whose account has been approved.
    """
    message = "Your account is pending approval."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'has_profile', False))
