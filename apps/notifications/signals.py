from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver
from .delivery import deliver
from .models import Notification


@receiver(post_save, sender=Notification)
def deliver_new_notification(sender, instance, created, **kwargs):
    """Send email/SMS for a new notification once its transaction commits."""
    if not created:
        return
    transaction.on_commit(lambda: deliver(instance), robust=True)
