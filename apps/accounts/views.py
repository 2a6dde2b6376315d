from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
import logging

from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    DisplayNameUpdateSerializer,
    PlanUsageSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    update_display_name,
    upgrade_to_pro,
    get_plan_usage,
    auth_error_message,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
)

logger = logging.getLogger(__name__)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField(required=False)


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token issued at login")


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def _auth_error_response(error, http_status):
    return Response({
        'error': auth_error_message(error.code),
        'code': error.code,
    }, status=http_status)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Create a new shop account (free plan) and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Create account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        logger.warning("Registration failed (%s): %s", e.code, e)
        return _auth_error_response(e, status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Conta criada com sucesso.',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return _auth_error_response(e, status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return _auth_error_response(e, status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login realizado com sucesso.',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Sign out. The refresh token, when given, must be valid.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({
                'error': 'Token inválido.'
            }, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Logout realizado com sucesso.'
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated account's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=DisplayNameUpdateSerializer,
    responses={
        200: UserSerializer,
        400: ErrorResponseSerializer,
    },
    description="Update the current account's display name.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Update display name."""
    serializer = DisplayNameUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_display_name(
        user_id=request.user.id,
        display_name=serializer.validated_data['display_name'],
    )
    return Response(UserSerializer(user).data)


@extend_schema(
    responses={200: PlanUsageSerializer},
    description="Get the account's plan, its caps, current usage and the upgrade link.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def plan_status(request):
    """Plan tier and usage."""
    return Response(get_plan_usage(request.user))


@extend_schema(
    request=None,
    responses={200: UserSerializer},
    description="Post-upgrade return route: switch the account to the Pro plan.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def confirm_upgrade(request):
    """Mark the account as Pro after checkout."""
    user = upgrade_to_pro(user_id=request.user.id)
    return Response(UserSerializer(user).data)
