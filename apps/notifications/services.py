import logging

from django.conf import settings
from core.constants import (
    NOTIFICATION_NEW_ORDER, NOTIFICATION_ORDER_ACCEPTED,
    NOTIFICATION_ORDER_REJECTED, NOTIFICATION_ORDER_COMPLETED,
)
from core.exceptions import Forbidden, NotFound
from .models import Notification

logger = logging.getLogger(__name__)

# type -> (title, message template)
NOTIFICATION_TEMPLATES = {
    NOTIFICATION_NEW_ORDER: (
        'New Order Received',
        'You have received a new order for "{gig_title}" from {sender_name}',
    ),
    NOTIFICATION_ORDER_ACCEPTED: (
        'Order Accepted',
        'Your order for "{gig_title}" has been accepted by {sender_name}',
    ),
    NOTIFICATION_ORDER_REJECTED: (
        'Order Rejected',
        'Your order for "{gig_title}" has been rejected by {sender_name}',
    ),
    NOTIFICATION_ORDER_COMPLETED: (
        'Order Completed',
        'Your order for "{gig_title}" has been completed by {sender_name}',
    ),
}


def build_message(notification_type, gig_title, sender_name, reason=None):
    title, template = NOTIFICATION_TEMPLATES[notification_type]
    message = template.format(gig_title=gig_title, sender_name=sender_name)
    if reason:
        message = f"{message}: {reason}"
    return title, message


def notify(recipient, notification_type, order, sender, reason=None):
    """Persist one notification about ``order`` for ``recipient``."""
    title, message = build_message(notification_type, order.gig.title, sender.display_name, reason)
    notification = Notification.objects.create(
        user=recipient,
        type=notification_type,
        title=title,
        message=message,
        order=order,
        gig=order.gig,
        sender=sender,
    )
    logger.info(f"Notification {notification.id} ({notification_type}) created for user {recipient.id} on order {order.id}")
    return notification


def list_notifications(user):
    limit = getattr(settings, 'NOTIFICATION_LIST_LIMIT', 50)
    return (
        Notification.objects.filter(user=user)
        .select_related('order', 'gig', 'sender')
        .order_by('-created_at', '-id')[:limit]
    )


def mark_as_read(notification_id, user):
    try:
        notification = Notification.objects.get(pk=notification_id)
    except Notification.DoesNotExist:
        raise NotFound("Notification not found")

    if notification.user_id != user.id:
        raise Forbidden("Not authorized to mark this notification as read")

    if not notification.is_read:
        Notification.objects.filter(pk=notification.pk, is_read=False).update(is_read=True)
        notification.is_read = True
    return notification


def unread_count(user):
    return Notification.objects.filter(user=user, is_read=False).count()
