from django.urls import path
from .views import OrderMessagesView, OrderMessagesReadView, OrderConversationsView

urlpatterns = [
    path('conversations/', OrderConversationsView.as_view(), name='order_conversations'),
    path('<int:order_id>/messages/', OrderMessagesView.as_view(), name='order_messages'),
    path('<int:order_id>/messages/read/', OrderMessagesReadView.as_view(), name='order_messages_read'),
]
