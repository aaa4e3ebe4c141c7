from rest_framework.views import APIView
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from drf_yasg.utils import swagger_auto_schema, no_body
from drf_yasg import openapi
from core.utils import envelope
from .serializers import OrderMessageSerializer, SendMessageSerializer, ConversationSerializer
from . import services


class OrderMessagesView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Messages of an order's chat, oldest first (order participants only).",
        responses={200: OrderMessageSerializer(many=True), 401: 'Unauthorized', 403: 'Forbidden', 404: 'Not Found'}
    )
    def get(self, request, order_id):
        messages = services.order_messages(order_id, request.user)
        return envelope(OrderMessageSerializer(messages, many=True).data)

    @swagger_auto_schema(
        operation_description="Send a message to the other participant of the order.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['content'],
            properties={'content': openapi.Schema(type=openapi.TYPE_STRING)},
        ),
        responses={
            201: OrderMessageSerializer,
            400: 'Bad Request',
            401: 'Unauthorized',
            403: 'Forbidden',
            404: 'Not Found'
        }
    )
    def post(self, request, order_id):
        serializer = SendMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = services.send_message(order_id, request.user, serializer.validated_data['content'])
        return envelope(OrderMessageSerializer(message).data, status=status.HTTP_201_CREATED)


class OrderMessagesReadView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Mark every message received on this order as read.",
        request_body=no_body,
        responses={200: 'Messages marked as read', 401: 'Unauthorized', 403: 'Forbidden', 404: 'Not Found'}
    )
    def patch(self, request, order_id):
        updated = services.mark_messages_read(order_id, request.user)
        return envelope({'updated': updated}, message='Messages marked as read')


class OrderConversationsView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="The authenticated user's orders with their latest message and unread count.",
        responses={200: ConversationSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        return envelope(ConversationSerializer(services.conversations(request.user), many=True).data)
