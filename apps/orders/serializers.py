from rest_framework import serializers
from core.constants import ORDER_STATUS_CHOICES
from apps.gigs.serializers import GigSummarySerializer
from apps.users.serializers import UserSummarySerializer
from .models import Order


class OrderSerializer(serializers.ModelSerializer):
    gig = GigSummarySerializer(read_only=True)
    client = UserSummarySerializer(read_only=True)
    freelancer = UserSummarySerializer(read_only=True)

    class Meta:
        model = Order
        fields = ['id', 'gig', 'client', 'freelancer', 'amount', 'status', 'created_at', 'updated_at']
        read_only_fields = fields


class CreateOrderSerializer(serializers.Serializer):
    gigId = serializers.IntegerField(error_messages={'required': 'Gig ID is required'})


class CreateOrdersSerializer(serializers.Serializer):
    gigIds = serializers.ListField(
        child=serializers.JSONField(),
        allow_empty=False,
        error_messages={
            'required': 'Gig IDs array is required',
            'empty': 'Gig IDs array is required',
            'not_a_list': 'Gig IDs array is required',
        }
    )


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(
        choices=ORDER_STATUS_CHOICES,
        error_messages={'invalid_choice': 'Invalid status value', 'required': 'Invalid status value'}
    )


class RejectOrderSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
