from rest_framework.views import APIView
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
from core.utils import envelope
from .serializers import (
    OrderSerializer, CreateOrderSerializer, CreateOrdersSerializer,
    OrderStatusUpdateSerializer, RejectOrderSerializer
)
from .state_machine import ACCEPT, REJECT, SET_STATUS
from . import services

ORDER_ERROR_RESPONSES = {
    400: 'Bad Request',
    401: 'Unauthorized',
    403: 'Forbidden',
    404: 'Not Found'
}


class CreateOrderView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Place an order for a gig. The order amount is the gig price at this moment.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['gigId'],
            properties={'gigId': openapi.Schema(type=openapi.TYPE_INTEGER)},
        ),
        responses={201: OrderSerializer, **ORDER_ERROR_RESPONSES}
    )
    def post(self, request):
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.create_order(request.user, serializer.validated_data['gigId'])
        return envelope(
            OrderSerializer(order).data,
            message='Order placed successfully!',
            status=status.HTTP_201_CREATED
        )


class CreateOrdersView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description=(
            "Place one order per gig (cart checkout). Gigs that cannot be ordered are skipped; "
            "fails only if no order could be placed."
        ),
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['gigIds'],
            properties={
                'gigIds': openapi.Schema(type=openapi.TYPE_ARRAY, items=openapi.Schema(type=openapi.TYPE_INTEGER))
            },
        ),
        responses={201: OrderSerializer(many=True), 400: 'Bad Request', 401: 'Unauthorized'}
    )
    def post(self, request):
        serializer = CreateOrdersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        orders = services.create_orders(request.user, serializer.validated_data['gigIds'])
        return envelope(
            OrderSerializer(orders, many=True).data,
            message=f'{len(orders)} order(s) placed successfully!',
            status=status.HTTP_201_CREATED
        )


class MyOrdersView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Orders where the authenticated user is the client or the freelancer, newest first.",
        responses={200: OrderSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        orders = services.orders_for_user(request.user)
        return envelope(OrderSerializer(orders, many=True).data)


class FreelancerOrdersView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Orders received by the authenticated user as freelancer, newest first.",
        responses={200: OrderSerializer(many=True), 401: 'Unauthorized'}
    )
    def get(self, request):
        orders = services.orders_for_freelancer(request.user)
        return envelope(OrderSerializer(orders, many=True).data)


class OrderDetailView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Order details (client or freelancer of the order only).",
        responses={200: OrderSerializer, 401: 'Unauthorized', 403: 'Forbidden', 404: 'Not Found'}
    )
    def get(self, request, order_id):
        order = services.get_order_for_participant(order_id, request.user)
        return envelope(OrderSerializer(order).data)


class OrderStatusUpdateView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Set the order status (client or freelancer). No transition guard is applied.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            required=['status'],
            properties={
                'status': openapi.Schema(
                    type=openapi.TYPE_STRING, enum=['pending', 'in-progress', 'completed', 'cancelled']
                )
            },
        ),
        responses={200: OrderSerializer, **ORDER_ERROR_RESPONSES}
    )
    def patch(self, request, order_id):
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.change_order_status(
            order_id, request.user, SET_STATUS, target_status=serializer.validated_data['status']
        )
        return envelope(OrderSerializer(order).data, message='Order status updated')


class AcceptOrderView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Accept a pending order (freelancer only).",
        responses={200: OrderSerializer, **ORDER_ERROR_RESPONSES}
    )
    def patch(self, request, order_id):
        order = services.change_order_status(order_id, request.user, ACCEPT)
        return envelope(OrderSerializer(order).data, message='Order accepted successfully')


class RejectOrderView(APIView):
    permission_classes = [IsAuthenticated]

    @swagger_auto_schema(
        operation_description="Reject a pending order (freelancer only). The optional reason is forwarded to the client.",
        request_body=openapi.Schema(
            type=openapi.TYPE_OBJECT,
            properties={'reason': openapi.Schema(type=openapi.TYPE_STRING, x_nullable=True)},
        ),
        responses={200: OrderSerializer, **ORDER_ERROR_RESPONSES}
    )
    def patch(self, request, order_id):
        serializer = RejectOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.change_order_status(
            order_id, request.user, REJECT, reason=serializer.validated_data.get('reason')
        )
        return envelope(OrderSerializer(order).data, message='Order rejected successfully')
