"""
Per-order chat between the client and the freelancer of an order.

Only the two participants may read or write a thread; the receiver of a
message is always the other participant.
"""
import logging

from django.db.models import Count, OuterRef, Q, Subquery

from apps.orders.services import get_order, orders_for_user
from apps.orders.state_machine import ROLE_CLIENT
from core.exceptions import Forbidden, InvalidInput
from .models import OrderMessage

logger = logging.getLogger(__name__)


def _participant_order(order_id, user, message):
    order = get_order(order_id)
    role = order.role_of(user)
    if role is None:
        raise Forbidden(message)
    return order, role


def send_message(order_id, user, content):
    content = (content or '').strip()
    if not content:
        raise InvalidInput("Content is required")

    order, role = _participant_order(order_id, user, "Not authorized to chat in this order")
    receiver = order.freelancer if role == ROLE_CLIENT else order.client
    message = OrderMessage.objects.create(order=order, sender=user, receiver=receiver, content=content)
    logger.info(f"Message {message.id} sent by user {user.id} on order {order.id}")
    return message


def order_messages(order_id, user):
    order, _ = _participant_order(order_id, user, "Not authorized to view messages for this order")
    return OrderMessage.objects.filter(order=order).select_related('sender', 'receiver')


def mark_messages_read(order_id, user):
    order, _ = _participant_order(order_id, user, "Not authorized to view messages for this order")
    return OrderMessage.objects.filter(order=order, receiver=user, is_read=False).update(is_read=True)


def conversations(user):
    """
    Every order of ``user`` with its latest message and the number of
    messages ``user`` has not read yet.
    """
    latest = OrderMessage.objects.filter(order=OuterRef('pk')).order_by('-created_at', '-id').values('id')[:1]
    orders = list(
        orders_for_user(user).annotate(
            unread_count=Count('messages', filter=Q(messages__receiver=user, messages__is_read=False)),
            last_message_id=Subquery(latest),
        )
    )
    last_messages = OrderMessage.objects.select_related('sender', 'receiver').in_bulk(
        [order.last_message_id for order in orders if order.last_message_id]
    )
    return [
        {
            'order': order,
            'last_message': last_messages.get(order.last_message_id),
            'unread_count': order.unread_count,
        }
        for order in orders
    ]
