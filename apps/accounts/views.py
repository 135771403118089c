from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import CurrentUserSerializer, UserSerializer


@extend_schema(
    responses=CurrentUserSerializer,
    description="Get the current user's profile and household memberships.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current user profile."""
    user = (
        type(request.user).objects
        .prefetch_related('household_memberships__household')
        .get(pk=request.user.pk)
    )
    return Response(CurrentUserSerializer(user).data)


@extend_schema(
    request=UserSerializer,
    responses=UserSerializer,
    description="Update the current user's display name.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Update current user profile."""
    serializer = UserSerializer(request.user, data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(serializer.data)
