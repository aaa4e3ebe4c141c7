import logging
import re

from django.conf import settings
from django.core.mail import send_mail
from twilio.rest import Client as TwilioClient

from core.constants import PHONE_NUMBER_REGEX

logger = logging.getLogger(__name__)

PHONE_NUMBER_PATTERN = re.compile(PHONE_NUMBER_REGEX)


def sms_configured():
    return bool(settings.TWILIO_ACCOUNT_SID and settings.TWILIO_AUTH_TOKEN and settings.TWILIO_PHONE_NUMBER)


def send_notification(user, subject, email_message, sms_message):
    """
    Mirror an in-app notification to the user's email and phone.

    Delivery is best effort: failures are logged and never raised, the
    persisted notification is the source of truth.
    """
    if user.email:
        try:
            send_mail(
                subject=subject,
                message=email_message,
                from_email=settings.DEFAULT_FROM_EMAIL,
                recipient_list=[user.email],
                fail_silently=False,
            )
            logger.info(f"Email notification sent to user {user.id}")
        except Exception as e:
            logger.error(f"Failed to send email to {user.email}: {str(e)}")

    if not user.phone_number or not sms_configured():
        return

    if not PHONE_NUMBER_PATTERN.match(user.phone_number):
        logger.warning(f"Invalid phone number format for user {user.id}: {user.phone_number}")
        return

    try:
        twilio_client = TwilioClient(settings.TWILIO_ACCOUNT_SID, settings.TWILIO_AUTH_TOKEN)
        twilio_client.messages.create(
            body=sms_message,
            from_=settings.TWILIO_PHONE_NUMBER,
            to=user.phone_number
        )
        logger.info(f"SMS notification sent to user {user.id}")
    except Exception as e:
        logger.error(f"Failed to send SMS to {user.phone_number}: {str(e)}")


def deliver(notification):
    if not getattr(settings, 'NOTIFICATION_DELIVERY_ENABLED', True):
        return
    user = notification.user
    email_message = (
        f"Dear {user.display_name},\n\n"
        f"{notification.message}\n\n"
        f"Best regards,\nGigMarket Team"
    )
    send_notification(user, notification.title, email_message, notification.message)
