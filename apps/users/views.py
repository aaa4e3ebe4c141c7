from rest_framework.views import APIView
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.permissions import AllowAny, IsAuthenticated
from drf_yasg.utils import swagger_auto_schema, no_body
from drf_yasg import openapi
from django.utils import timezone
from core.utils import envelope
from apps.gigs.serializers import GigSerializer
from apps.gigs.services import favorite_gigs, add_favorite, remove_favorite
from .serializers import LoginSerializer, UserSerializer, UserUpdateSerializer
import logging

logger = logging.getLogger(__name__)


class AuthLoginView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        request_body=LoginSerializer,
        responses={
            200: openapi.Response(
                description='Login successful',
                schema=openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    properties={
                        'token': openapi.Schema(type=openapi.TYPE_STRING),
                        'user': openapi.Schema(type=openapi.TYPE_OBJECT),
                    }
                )
            ),
            400: 'Bad Request'
        }
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])
        token, _ = Token.objects.get_or_create(user=user)
        logger.info(f"Login successful for user {user.id}")
        return envelope({"token": token.key, "user": UserSerializer(user).data})


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Revoke the authenticated user's API token.",
        request_body=no_body,
        responses={200: 'Logged out', 401: 'Unauthorized'}
    )
    def post(self, request):
        Token.objects.filter(user=request.user).delete()
        return envelope(message="Logged out", status=status.HTTP_200_OK)


class UserProfileView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Profile of the authenticated user.",
        responses={200: UserSerializer, 401: 'Unauthorized'}
    )
    def get(self, request):
        return envelope(UserSerializer(request.user).data)

    @swagger_auto_schema(
        operation_description="Update name, email or phone number of the authenticated user.",
        request_body=UserUpdateSerializer,
        responses={200: UserSerializer, 400: 'Bad Request', 401: 'Unauthorized'}
    )
    def patch(self, request):
        serializer = UserUpdateSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"User {user.id} updated profile fields {sorted(serializer.validated_data)}")
        return envelope(UserSerializer(user).data, message="Profile updated")


class FavoritesView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Gigs the authenticated user marked as favorite.",
        responses={200: GigSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        return envelope(GigSerializer(favorite_gigs(request.user), many=True).data)


class FavoriteGigView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Add a gig to the authenticated user's favorites.",
        request_body=no_body,
        responses={200: GigSerializer(many=True), 400: 'Bad Request', 401: 'Unauthorized', 404: 'Not Found'}
    )
    def post(self, request, gig_id):
        favorites = add_favorite(request.user, gig_id)
        return envelope(GigSerializer(favorites, many=True).data)

    @swagger_auto_schema(
        operation_description="Remove a gig from the authenticated user's favorites.",
        responses={200: GigSerializer(many=True), 400: 'Bad Request', 401: 'Unauthorized', 404: 'Not Found'}
    )
    def delete(self, request, gig_id):
        favorites = remove_favorite(request.user, gig_id)
        return envelope(GigSerializer(favorites, many=True).data)
