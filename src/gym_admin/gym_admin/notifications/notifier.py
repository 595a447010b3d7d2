from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.exceptions import ConfigurationError, NotificationError

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send(self, recipient: str, subject: str, html: str) -> str:
        """Deliver one message; returns the provider message id."""

        raise NotImplementedError


class EmailNotifier:
    """Sends HTML email through the Resend HTTP API."""

    API_URL = "https://api.resend.com/emails"

    def __init__(
        self,
        api_key: str,
        sender: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self._sender = sender
        self._session = session or requests.Session()
        self._timeout = timeout

    def send(self, recipient: str, subject: str, html: str) -> str:
        if not self._api_key:
            raise ConfigurationError("RESEND_API_KEY is not configured")

        try:
            resp = self._session.post(
                self.API_URL,
                json={"from": self._sender, "to": recipient, "subject": subject, "html": html},
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise NotificationError(f"Failed to send email to {recipient}: {e}") from e

        if resp.status_code >= 400:
            raise NotificationError(f"Email provider returned {resp.status_code}: {resp.text}")

        try:
            message_id = str(resp.json().get("id", ""))
        except (ValueError, AttributeError):
            # Accepted (2xx) but no usable JSON body: the mail is queued, only the id is lost.
            logger.warning("Email provider returned %s without a message id", resp.status_code)
            message_id = ""
        logger.info("Sent email %r to %s (id=%s)", subject, recipient, message_id)
        return message_id


class LogNotifier:
    """Used when no email provider is configured: messages only go to the log."""

    def send(self, recipient: str, subject: str, html: str) -> str:
        logger.info("Notification (not delivered) to=%s subject=%r", recipient, subject)
        return ""
