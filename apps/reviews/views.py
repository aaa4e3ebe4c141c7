from rest_framework.views import APIView
from rest_framework import status
from rest_framework.permissions import IsAuthenticated, AllowAny
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
from core.utils import envelope
from .serializers import ReviewSerializer, CreateReviewSerializer
from . import services


class ReviewCreateView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Review a gig (1 to 5 stars). Updates the gig's average rating and review count.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['gigId', 'rating', 'comment'],
            properties={
                'gigId': openapi.Schema(type=openapi.TYPE_INTEGER),
                'rating': openapi.Schema(type=openapi.TYPE_INTEGER, minimum=1, maximum=5),
                'comment': openapi.Schema(type=openapi.TYPE_STRING),
            },
        ),
        responses={
            201: ReviewSerializer,
            400: 'Bad Request',
            401: 'Unauthorized',
            404: 'Not Found'
        }
    )
    def post(self, request):
        serializer = CreateReviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        review = services.post_review(request.user, data['gigId'], data['rating'], data['comment'])
        return envelope(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


class GigReviewsView(APIView):
    permission_classes = [AllowAny]

    @swagger_auto_schema(
        operation_description="Reviews of a gig, newest first.",
        responses={200: ReviewSerializer(many=True), 404: 'Not Found'}
    )
    def get(self, request, gig_id):
        reviews = services.reviews_for_gig(gig_id)
        return envelope(ReviewSerializer(reviews, many=True).data)
