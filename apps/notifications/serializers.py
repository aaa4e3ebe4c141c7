from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    order = serializers.SerializerMethodField()
    gig = serializers.SerializerMethodField()
    sender = serializers.SerializerMethodField()

    class Meta:
        model = Notification
        fields = ['id', 'type', 'title', 'message', 'order', 'gig', 'sender', 'is_read', 'created_at']
        read_only_fields = fields

    def get_order(self, obj):
        if obj.order is None:
            return None
        return {'id': obj.order.id, 'status': obj.order.status, 'amount': str(obj.order.amount)}

    def get_gig(self, obj):
        if obj.gig is None:
            return None
        return {'id': obj.gig.id, 'title': obj.gig.title}

    def get_sender(self, obj):
        if obj.sender is None:
            return None
        return {'id': obj.sender.id, 'name': obj.sender.display_name}
