"""E-mail notifier."""

import logging

logger = logging.getLogger(__name__)


class SMTPEmailNotifier:
    """A notifier that records outgoing e-mails in the log."""

    def send(self, to: str, subject: str, body: str) -> None:
        """Log the e-mail that would be sent."""
        logger.info("sending email to %s with subject %s: %s", to, subject, body)