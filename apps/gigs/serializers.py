from rest_framework import serializers
from core.constants import GIG_STATUS_CHOICES, GIG_CATEGORY_CHOICES, GIG_MIN_PRICE, GIG_MIN_DELIVERY_DAYS
from apps.users.serializers import UserSummarySerializer
from .models import Gig


class GigSerializer(serializers.ModelSerializer):
    created_by = UserSummarySerializer(read_only=True)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=GIG_MIN_PRICE)
    delivery_time = serializers.IntegerField(min_value=GIG_MIN_DELIVERY_DAYS)
    category = serializers.ChoiceField(choices=GIG_CATEGORY_CHOICES)
    images = serializers.ListField(child=serializers.CharField(max_length=500), allow_empty=False)

    class Meta:
        model = Gig
        fields = [
            'id', 'title', 'description', 'price', 'delivery_time', 'category',
            'images', 'created_by', 'status', 'views', 'orders', 'rating',
            'review_count', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'created_by', 'status', 'views', 'orders', 'rating',
            'review_count', 'created_at', 'updated_at'
        ]

    def create(self, validated_data):
        return Gig.objects.create(created_by=self.context['request'].user, **validated_data)


class GigSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Gig
        fields = ['id', 'title', 'price', 'category', 'images', 'status']
        read_only_fields = fields


class GigStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=GIG_STATUS_CHOICES)
