from django.urls import path
from apps.notifications.views import (
    NotificationListView, NotificationMarkReadView, UnreadNotificationCountView
)
from .views import (
    CreateOrderView, CreateOrdersView, MyOrdersView, FreelancerOrdersView,
    OrderDetailView, OrderStatusUpdateView, AcceptOrderView, RejectOrderView
)

urlpatterns = [
    path('create-order/', CreateOrderView.as_view(), name='create_order'),
    path('create-orders/', CreateOrdersView.as_view(), name='create_orders'),
    path('my-orders/', MyOrdersView.as_view(), name='my_orders'),
    path('freelancer-orders/', FreelancerOrdersView.as_view(), name='freelancer_orders'),

    # Notifications live under /orders/ and must precede the order id routes
    path('notifications/', NotificationListView.as_view(), name='notification_list'),
    path('notifications/unread-count/', UnreadNotificationCountView.as_view(), name='notification_unread_count'),
    path('notifications/<int:notification_id>/read/', NotificationMarkReadView.as_view(), name='notification_mark_read'),

    path('<int:order_id>/', OrderDetailView.as_view(), name='order_detail'),
    path('<int:order_id>/status/', OrderStatusUpdateView.as_view(), name='order_status_update'),
    path('<int:order_id>/accept/', AcceptOrderView.as_view(), name='order_accept'),
    path('<int:order_id>/reject/', RejectOrderView.as_view(), name='order_reject'),
]
