import logging

from core.constants import GIG_ADMIN_ONLY_STATUSES, GIG_CATEGORY_CHOICES, GIG_STATUS_ACTIVE
from core.exceptions import Forbidden, InvalidInput, NotFound
from .models import Gig

logger = logging.getLogger(__name__)


def find_gig(gig_id):
    """Gig lookup used by order creation. Returns None for unknown or malformed ids."""
    try:
        return Gig.objects.select_related('created_by').get(pk=gig_id)
    except (Gig.DoesNotExist, ValueError, TypeError):
        return None


def get_gig_or_404(gig_id):
    gig = find_gig(gig_id)
    if gig is None:
        raise NotFound("Gig not found")
    return gig


def change_gig_status(gig, user, new_status):
    is_admin = user.is_staff or user.is_superuser
    if not is_admin and not gig.is_owned_by(user):
        raise Forbidden("Not authorized to change the status of this gig")
    if new_status in GIG_ADMIN_ONLY_STATUSES and not is_admin:
        raise Forbidden(f"Only an administrator can set a gig to '{new_status}'")

    gig.status = new_status
    gig.save(update_fields=['status', 'updated_at'])
    logger.info(f"Gig {gig.id} status set to {new_status} by user {user.id}")
    return gig


def public_gigs(category=None, search=None):
    """Active gigs for browsing, newest first, optionally narrowed by category and title search."""
    gigs = Gig.objects.filter(status=GIG_STATUS_ACTIVE).select_related('created_by')
    if category:
        if category not in dict(GIG_CATEGORY_CHOICES):
            raise InvalidInput("Invalid category")
        gigs = gigs.filter(category=category)
    if search:
        gigs = gigs.filter(title__icontains=search)
    return gigs.order_by('-created_at', '-id')


def favorite_gigs(user):
    return user.favorite_gigs.select_related('created_by').order_by('-created_at', '-id')


def add_favorite(user, gig_id):
    gig = get_gig_or_404(gig_id)
    if gig.favorited_by.filter(pk=user.pk).exists():
        raise InvalidInput("Gig already in favorites")
    gig.favorited_by.add(user)
    logger.info(f"User {user.id} added gig {gig.id} to favorites")
    return favorite_gigs(user)


def remove_favorite(user, gig_id):
    gig = get_gig_or_404(gig_id)
    if not gig.favorited_by.filter(pk=user.pk).exists():
        raise InvalidInput("Gig not in favorites")
    gig.favorited_by.remove(user)
    logger.info(f"User {user.id} removed gig {gig.id} from favorites")
    return favorite_gigs(user)
