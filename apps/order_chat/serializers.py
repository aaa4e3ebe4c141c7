from rest_framework import serializers
from apps.orders.serializers import OrderSerializer
from apps.users.serializers import UserSummarySerializer
from .models import OrderMessage


class OrderMessageSerializer(serializers.ModelSerializer):
    order = serializers.PrimaryKeyRelatedField(read_only=True)
    sender = UserSummarySerializer(read_only=True)
    receiver = UserSummarySerializer(read_only=True)

    class Meta:
        model = OrderMessage
        fields = ['id', 'order', 'sender', 'receiver', 'content', 'is_read', 'created_at']
        read_only_fields = fields


class SendMessageSerializer(serializers.Serializer):
    content = serializers.CharField(
        error_messages={
            'required': 'Content is required',
            'blank': 'Content is required',
            'null': 'Content is required',
        }
    )


class ConversationSerializer(serializers.Serializer):
    order = OrderSerializer(read_only=True)
    last_message = OrderMessageSerializer(read_only=True, allow_null=True)
    unread_count = serializers.IntegerField(read_only=True)
