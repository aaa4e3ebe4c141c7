from django.db import models
from django.conf import settings
from core.constants import REVIEW_RATING_CHOICES
from apps.gigs.models import Gig


class Review(models.Model):
    gig = models.ForeignKey(Gig, on_delete=models.CASCADE, related_name='reviews')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')
    rating = models.IntegerField(choices=REVIEW_RATING_CHOICES)
    comment = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at', '-id']
        constraints = [
            models.UniqueConstraint(fields=['gig', 'user'], name='unique_review_per_user_and_gig'),
        ]

    def __str__(self):
        return f"Review by {self.user.username} on {self.gig.title} ({self.rating}/5)"
