from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
from core.utils import envelope
from .serializers import NotificationSerializer
from . import services


class NotificationListView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Up to 50 most recent notifications of the authenticated user, newest first.",
        responses={200: NotificationSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        notifications = services.list_notifications(request.user)
        return envelope(NotificationSerializer(notifications, many=True).data)


class NotificationMarkReadView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Mark a notification as read. Marking an already read notification is a no-op.",
        responses={
            200: NotificationSerializer,
            401: 'Unauthorized',
            403: 'Forbidden',
            404: 'Not Found'
        }
    )
    def patch(self, request, notification_id):
        notification = services.mark_as_read(notification_id, request.user)
        return envelope(NotificationSerializer(notification).data)


class UnreadNotificationCountView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Number of unread notifications of the authenticated user.",
        responses={
            200: openapi.Response(
                description='Unread count',
                schema=openapi.Schema(
                    type=openapi.TYPE_OBJECT,
                    properties={'count': openapi.Schema(type=openapi.TYPE_INTEGER)}
                )
            ),
            401: 'Unauthorized'
        }
    )
    def get(self, request):
        return envelope({'count': services.unread_count(request.user)})
