from django.db import models
from django.conf import settings
from core.constants import ORDER_STATUS_CHOICES, ORDER_STATUS_PENDING
from apps.gigs.models import Gig
from .state_machine import ROLE_CLIENT, ROLE_FREELANCER


class Order(models.Model):
    gig = models.ForeignKey(Gig, on_delete=models.PROTECT, related_name='gig_orders')
    client = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='client_orders')
    freelancer = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='freelancer_orders')
    # Snapshot of gig.price when the order was placed
    amount = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=20, choices=ORDER_STATUS_CHOICES, default=ORDER_STATUS_PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Order #{self.pk} - {self.gig.title} ({self.status})"

    def role_of(self, user):
        """Return ROLE_CLIENT, ROLE_FREELANCER or None for the given user."""
        if user.id == self.freelancer_id:
            return ROLE_FREELANCER
        if user.id == self.client_id:
            return ROLE_CLIENT
        return None
