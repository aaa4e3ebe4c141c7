from rest_framework import serializers
from core.constants import REVIEW_MIN_RATING, REVIEW_MAX_RATING
from apps.users.serializers import UserSummarySerializer
from .models import Review

REVIEW_FIELDS_REQUIRED = 'Rating, comment, and gigId are required'


class ReviewSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    gig = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Review
        fields = ['id', 'gig', 'user', 'rating', 'comment', 'created_at']
        read_only_fields = fields


class CreateReviewSerializer(serializers.Serializer):
    gigId = serializers.IntegerField(error_messages={'required': REVIEW_FIELDS_REQUIRED, 'null': REVIEW_FIELDS_REQUIRED})
    rating = serializers.IntegerField(
        min_value=REVIEW_MIN_RATING,
        max_value=REVIEW_MAX_RATING,
        error_messages={'required': REVIEW_FIELDS_REQUIRED, 'null': REVIEW_FIELDS_REQUIRED}
    )
    comment = serializers.CharField(
        error_messages={'required': REVIEW_FIELDS_REQUIRED, 'blank': REVIEW_FIELDS_REQUIRED, 'null': REVIEW_FIELDS_REQUIRED}
    )
