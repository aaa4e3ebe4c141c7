from django.db import models
from django.db.models import F
from django.conf import settings
from django.core.validators import MinValueValidator
from core.constants import (
    GIG_STATUS_ACTIVE, GIG_STATUS_CHOICES, GIG_CATEGORY_CHOICES, GIG_MIN_PRICE, GIG_MIN_DELIVERY_DAYS
)


class Gig(models.Model):
    title = models.CharField(max_length=200)
    description = models.TextField()
    price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(GIG_MIN_PRICE)])
    delivery_time = models.PositiveIntegerField(validators=[MinValueValidator(GIG_MIN_DELIVERY_DAYS)])
    category = models.CharField(max_length=50, choices=GIG_CATEGORY_CHOICES)
    images = models.JSONField(default=list)
    # Nullable so orders keep their gig when the owner account goes away
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name='gigs'
    )
    status = models.CharField(max_length=20, choices=GIG_STATUS_CHOICES, default=GIG_STATUS_ACTIVE)
    views = models.PositiveIntegerField(default=0)
    orders = models.PositiveIntegerField(default=0)
    rating = models.FloatField(default=0)
    review_count = models.PositiveIntegerField(default=0)
    favorited_by = models.ManyToManyField(settings.AUTH_USER_MODEL, blank=True, related_name='favorite_gigs')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def is_owned_by(self, user):
        return self.created_by_id is not None and self.created_by_id == user.id

    @classmethod
    def increment_views(cls, gig_id):
        return cls.objects.filter(pk=gig_id).update(views=F('views') + 1)

    @classmethod
    def increment_orders(cls, gig_id):
        return cls.objects.filter(pk=gig_id).update(orders=F('orders') + 1)
