import logging

from django.contrib.auth import authenticate
from django.contrib.auth.hashers import make_password
from django.views.decorators.csrf import csrf_exempt
from django.http import JsonResponse
from rest_framework.authtoken.models import Token
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from .models import CustomUser

logger = logging.getLogger(__name__)

def _error(detail: str, status_code: int):
    """Consistent error payload shape across API: {'detail': ...}."""
    return JsonResponse({'detail': detail}, status=status_code)

def _user_payload(user, token):
    return {
        'token': token.key,
        'role': user.role,
        'status': user.status,
        'username': user.username,
        'name': user.display_name,
    }

@csrf_exempt
@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    """
    Login endpoint that returns a token, role and approval status
    """
    data = request.data
    username = data.get('username')
    password = data.get('password')

    if not username or not password:
        return _error('Username and password required', 400)

    user = authenticate(username=username, password=password)
    if not user:
        return _error('Invalid credentials', 401)
    if user.status == 'deleted':
        return _error('This account has been deleted', 403)

    token, created = Token.objects.get_or_create(user=user)

    return JsonResponse(_user_payload(user, token))

@csrf_exempt
@api_view(['POST'])
@permission_classes([AllowAny])
def register_view(request):
    """
    Registration endpoint; new client accounts start as pending until an admin approves them
    """
    data = request.data
    username = data.get('username')
    password = data.get('password')

    if not username or not password:
        return _error('Username and password required', 400)

    if CustomUser.objects.filter(username=username).exists():
        return _error('Username already exists', 400)

    user = CustomUser.objects.create(
        username=username,
        password=make_password(password),
        email=data.get('email') or '',
        name=data.get('name') or '',
        phone=data.get('phone') or '',
        role='user',
        status='pending',
    )
    token = Token.objects.create(user=user)
    logger.info("Registered client account %s (pending approval)", user.username)

    return JsonResponse(_user_payload(user, token), status=201)

@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    """
    Profile of the signed-in user; `has_profile` tells the client whether
    shipment requests can be submitted yet
    """
    user = request.user
    return JsonResponse({
        'username': user.username,
        'name': user.display_name,
        'email': user.email,
        'role': user.role,
        'status': user.status,
        'has_profile': user.has_profile,
    })
