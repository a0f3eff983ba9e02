"""
Module: connectors.notifications

Provides dummy SMS and email services that can be registered as stock alert listeners.
"""

import logging

logger = logging.getLogger(__name__)


class DummySmsService:
    """
    Dummy in-memory SMS gateway. Records each message instead of sending it.
    """

    def __init__(self, phone_number: str):
        self.phone_number = phone_number
        self.sent_messages: list[str] = []

    def on_alert(self, message: str) -> None:
        self.sent_messages.append(message)
        logger.info(f"[DummySmsService] SMS to {self.phone_number}: {message}")


class DummyEmailService:
    """
    Dummy in-memory email gateway.
    """

    def __init__(self, recipient: str, subject: str = "Inventory alert"):
        self.recipient = recipient
        self.subject = subject
        self.sent_messages: list[dict[str, str]] = []

    def on_alert(self, message: str) -> None:
        self.sent_messages.append({"to": self.recipient, "subject": self.subject, "body": message})
        logger.info(f"[DummyEmailService] Email to {self.recipient}: {self.subject}")
