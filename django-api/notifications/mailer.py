"""Transactional email through Django's mail API."""

import logging

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


class Mailer:
    def send(self, to: str, subject: str, message: str) -> None:
        """Send a plain-text email. Delivery errors propagate to the caller."""
        send_mail(subject, message, settings.DEFAULT_FROM_EMAIL, [to], fail_silently=False)
        logger.info("Sent email %r to %s", subject, to)
