"""
Order lifecycle: placing orders, moving them through the status state
machine, and emitting the notifications each step implies.
"""
import logging

from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from apps.gigs.models import Gig
from apps.gigs.services import find_gig
from apps.notifications.services import notify
from core.constants import ORDER_STATUS_PENDING, NOTIFICATION_NEW_ORDER
from core.exceptions import InvalidInput, InvalidState, NotFound, Forbidden
from .models import Order
from .state_machine import transition, REJECT

logger = logging.getLogger(__name__)


def _place_order(client, gig):
    order = Order.objects.create(
        gig=gig,
        client=client,
        freelancer=gig.created_by,
        amount=gig.price,
        status=ORDER_STATUS_PENDING,
    )
    Gig.increment_orders(gig.pk)
    notify(gig.created_by, NOTIFICATION_NEW_ORDER, order, sender=client)
    logger.info(f"Order {order.id} placed by user {client.id} for gig {gig.id} ({order.amount})")
    return order


def create_order(client, gig_id):
    if not gig_id:
        raise InvalidInput("Gig ID is required")

    gig = find_gig(gig_id)
    if gig is None:
        raise NotFound("Gig not found")
    if gig.created_by_id is None:
        raise InvalidState("Gig creator information missing")
    if gig.created_by_id == client.id:
        raise InvalidInput("You cannot order your own gig")

    with transaction.atomic():
        return _place_order(client, gig)


def _parse_gig_id(value):
    """Integer gig id from a batch entry, or None. Booleans and floats are not ids."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def create_orders(client, gig_ids):
    """
    Best-effort checkout of several gigs at once.

    Gigs that cannot be ordered (unknown id, no owner, owned by the client)
    are skipped. The call fails only when nothing at all could be ordered.
    """
    if not isinstance(gig_ids, (list, tuple)) or len(gig_ids) == 0:
        raise InvalidInput("Gig IDs array is required")

    orders = []
    with transaction.atomic():
        for entry in gig_ids:
            gig_id = _parse_gig_id(entry)
            gig = find_gig(gig_id) if gig_id is not None else None
            if gig is None or gig.created_by_id is None or gig.created_by_id == client.id:
                logger.info(f"Skipping gig {entry!r} in batch order for user {client.id}")
                continue
            orders.append(_place_order(client, gig))

        if not orders:
            raise InvalidInput("No valid gigs found to create orders")

    return orders


def _participant_orders():
    return Order.objects.select_related('gig', 'client', 'freelancer')


def get_order(order_id):
    try:
        return _participant_orders().get(pk=order_id)
    except Order.DoesNotExist:
        raise NotFound("Order not found")


def get_order_for_participant(order_id, user):
    order = get_order(order_id)
    if order.role_of(user) is None:
        raise Forbidden("Not authorized to view this order")
    return order


def orders_for_user(user):
    return _participant_orders().filter(Q(client=user) | Q(freelancer=user)).order_by('-created_at', '-id')


def orders_for_freelancer(user):
    return _participant_orders().filter(freelancer=user).order_by('-created_at', '-id')


def change_order_status(order_id, user, action, target_status=None, reason=None):
    """
    Run ``action`` on an order on behalf of ``user``.

    The status write only lands if the order still holds the status the
    transition was computed from, so of two racing calls the second one fails
    with InvalidState and emits nothing.
    """
    order = get_order(order_id)
    observed_status = order.status
    result = transition(observed_status, action, order.role_of(user), target_status)

    with transaction.atomic():
        now = timezone.now()
        updated = Order.objects.filter(pk=order.pk, status=observed_status).update(
            status=result.next_status, updated_at=now
        )
        if not updated:
            raise InvalidState("Order status changed in the meantime, please reload the order")
        order.status = result.next_status
        order.updated_at = now

        if result.notification_type:
            notify(
                order.client,
                result.notification_type,
                order,
                sender=user,
                reason=reason if action == REJECT else None,
            )

    logger.info(f"Order {order.id}: {observed_status} -> {order.status} ({action}) by user {user.id}")
    return order
