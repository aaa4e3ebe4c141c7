from rest_framework.views import APIView
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, AllowAny
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
from core.constants import GIG_CATEGORY_CHOICES
from core.utils import envelope
from .models import Gig
from .serializers import GigSerializer, GigStatusUpdateSerializer
from .services import get_gig_or_404, change_gig_status, public_gigs
import logging

logger = logging.getLogger(__name__)


class GigCreateView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Create a new gig owned by the authenticated user. Images are paths of already stored files.",
        request_body=GigSerializer,
        responses={
            201: GigSerializer,
            400: 'Bad Request',
            401: 'Unauthorized'
        }
    )
    def post(self, request):
        serializer = GigSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        gig = serializer.save()
        logger.info(f"User {request.user.id} created gig {gig.id}")
        return envelope(GigSerializer(gig).data, message="Gig created successfully", status=status.HTTP_201_CREATED)


class GigDetailView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description="Public gig detail. Each call counts as one view.",
        responses={200: GigSerializer, 404: 'Not Found'}
    )
    def get(self, request, pk):
        gig = get_gig_or_404(pk)
        Gig.increment_views(gig.pk)
        gig.refresh_from_db(fields=['views'])
        return envelope(GigSerializer(gig).data)


class MyGigsView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="List gigs owned by the authenticated user, newest first.",
        responses={200: GigSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        gigs = Gig.objects.filter(created_by=request.user).select_related('created_by').order_by('-created_at')
        return envelope(GigSerializer(gigs, many=True).data)


class GigStatusUpdateView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Change a gig's status (owner or admin; only admins may reject).",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['status'],
            properties={
                'status': openapi.Schema(type=openapi.TYPE_STRING, enum=['draft', 'pending', 'active', 'paused', 'rejected'])
            },
        ),
        responses={
            200: GigSerializer,
            400: 'Bad Request',
            401: 'Unauthorized',
            403: 'Forbidden',
            404: 'Not Found'
        }
    )
    def patch(self, request, pk):
        gig = get_gig_or_404(pk)
        serializer = GigStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        gig = change_gig_status(gig, request.user, serializer.validated_data['status'])
        return envelope(GigSerializer(gig).data, message="Gig status updated")


class PublicGigListView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description="Browse active gigs, newest first.",
        manual_parameters=[
            openapi.Parameter('category', openapi.IN_QUERY, type=openapi.TYPE_STRING,
                              enum=[value for value, _ in GIG_CATEGORY_CHOICES]),
            openapi.Parameter('search', openapi.IN_QUERY, type=openapi.TYPE_STRING,
                              description='Case-insensitive match on the title'),
        ],
        responses={200: GigSerializer(many=True), 400: 'Bad Request'}
    )
    def get(self, request):
        gigs = public_gigs(
            category=request.query_params.get('category'),
            search=request.query_params.get('search'),
        )
        return envelope(GigSerializer(gigs, many=True).data)


class GigCategoriesView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description="Gig categories with their display labels.",
        responses={200: 'List of {value, label}'}
    )
    def get(self, request):
        return envelope([{'value': value, 'label': label} for value, label in GIG_CATEGORY_CHOICES])
