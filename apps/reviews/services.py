import logging

from django.db import transaction
from django.db.models import Avg, Count

from apps.gigs.models import Gig
from apps.gigs.services import get_gig_or_404
from core.exceptions import InvalidInput
from .models import Review

logger = logging.getLogger(__name__)


def post_review(user, gig_id, rating, comment):
    """
    Store a review and recompute the gig's ``rating`` and ``review_count``.

    The gig row is locked while the aggregate is recomputed so concurrent
    reviews of the same gig cannot overwrite each other's totals.
    """
    gig = get_gig_or_404(gig_id)
    if gig.is_owned_by(user):
        raise InvalidInput("You cannot review your own gig")

    with transaction.atomic():
        Gig.objects.select_for_update().get(pk=gig.pk)
        if Review.objects.filter(gig=gig, user=user).exists():
            raise InvalidInput("You have already reviewed this gig")

        review = Review.objects.create(gig=gig, user=user, rating=rating, comment=comment)

        stats = Review.objects.filter(gig=gig).aggregate(average_rating=Avg('rating'), rating_count=Count('id'))
        Gig.objects.filter(pk=gig.pk).update(
            rating=round(stats['average_rating'] or 0.0, 2),
            review_count=stats['rating_count'],
        )

    logger.info(f"User {user.id} reviewed gig {gig.id} ({rating}/5)")
    return review


def reviews_for_gig(gig_id):
    gig = get_gig_or_404(gig_id)
    return Review.objects.filter(gig=gig).select_related('user')
