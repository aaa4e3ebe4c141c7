"""
Order status state machine.

Every status change goes through :func:`transition`, which decides, from the
current status, the requested action and the caller's role on the order,
which status the order moves to and which notification (if any) the client
receives. ``accept`` and ``reject`` are guarded (freelancer only, from
``pending`` only); ``set_status`` is the unguarded administrative update that
either participant may use.
"""
from collections import namedtuple

from core.constants import (
    ORDER_STATUSES, ORDER_STATUS_PENDING, ORDER_STATUS_IN_PROGRESS,
    ORDER_STATUS_COMPLETED, ORDER_STATUS_CANCELLED,
    NOTIFICATION_ORDER_ACCEPTED, NOTIFICATION_ORDER_REJECTED, NOTIFICATION_ORDER_COMPLETED,
)
from core.exceptions import Forbidden, InvalidInput, InvalidState

ACCEPT = 'accept'
REJECT = 'reject'
SET_STATUS = 'set_status'

ROLE_CLIENT = 'client'
ROLE_FREELANCER = 'freelancer'

Transition = namedtuple('Transition', ['next_status', 'notification_type'])

# Notification sent to the client when an order lands in a given status.
NOTIFICATION_FOR_STATUS = {
    ORDER_STATUS_IN_PROGRESS: NOTIFICATION_ORDER_ACCEPTED,
    ORDER_STATUS_CANCELLED: NOTIFICATION_ORDER_REJECTED,
    ORDER_STATUS_COMPLETED: NOTIFICATION_ORDER_COMPLETED,
}

# Guarded actions: action -> (required current status, resulting status)
GUARDED_ACTIONS = {
    ACCEPT: (ORDER_STATUS_PENDING, ORDER_STATUS_IN_PROGRESS),
    REJECT: (ORDER_STATUS_PENDING, ORDER_STATUS_CANCELLED),
}


def transition(current_status, action, caller_role, target_status=None):
    if caller_role not in (ROLE_CLIENT, ROLE_FREELANCER):
        raise Forbidden("Not authorized to update this order")

    if action in GUARDED_ACTIONS:
        if caller_role != ROLE_FREELANCER:
            raise Forbidden(f"Only the freelancer can {action} this order")
        required_status, next_status = GUARDED_ACTIONS[action]
        if current_status != required_status:
            raise InvalidState(f"Order is not in {required_status} status")
    elif action == SET_STATUS:
        if target_status not in ORDER_STATUSES:
            raise InvalidInput("Invalid status value")
        next_status = target_status
    else:
        raise InvalidInput(f"Unknown order action: {action}")

    return Transition(next_status, NOTIFICATION_FOR_STATUS.get(next_status))
