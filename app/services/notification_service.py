"""
Notification Service - transactional welcome emails through SendGrid.

Sends are best-effort:
- Never raise: every provider failure is logged and returned as an outcome
- No retry, no queue, nothing recorded in the database
- Without an API key the service is disabled and sends are skipped

One instance is built at app startup (see app.main lifespan) and handed to
routes through the get_notifier dependency. Routes schedule sends with
BackgroundTasks so the HTTP response never waits on SendGrid.
"""

import logging
from dataclasses import dataclass
from html import escape
from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

logger = logging.getLogger(__name__)


@dataclass
class NotificationOutcome:
    sent: bool
    status_code: Optional[int] = None
    message_id: Optional[str] = None
    error: Optional[str] = None


TALENT_WELCOME_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #000;">Welcome to {brand}!</h1>
  <p>Dear {full_name},</p>
  <p>Thank you for registering with {brand}. We're excited to have you join our talent pool!</p>
  <p>Our team will review your profile and CV, and we'll be in touch with relevant opportunities that match your skills and experience.</p>
  <p>In the meantime, if you have any questions, feel free to reach out to us.</p>
  <div style="margin-top: 30px;">
    <p>Best regards,</p>
    <p>The {brand} Team</p>
  </div>
</div>
"""

COMPANY_WELCOME_HTML = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #000;">Welcome to {brand}!</h1>
  <p>Dear {contact_person},</p>
  <p>Thank you for registering {company_name} with {brand}. We're excited to help you find exceptional talent!</p>
  <p>Our team will review your company profile and will be in touch shortly to discuss your hiring needs.</p>
  <p>If you have any immediate questions or requirements, please don't hesitate to contact us.</p>
  <div style="margin-top: 30px;">
    <p>Best regards,</p>
    <p>The {brand} Team</p>
  </div>
</div>
"""


class NotificationService:
    """
    Wrapper around the SendGrid client with one method per email.
    """

    def __init__(self, api_key: str, from_email: str, brand: str = "Urswat"):
        self.from_email = from_email
        self.brand = brand
        self.client: Optional[SendGridAPIClient] = SendGridAPIClient(api_key) if api_key else None
        if self.client is None:
            logger.warning("SendGrid API key not configured, email sending is disabled")

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def _send(self, to_email: str, subject: str, html: str) -> NotificationOutcome:
        """
        Send one email. Returns an outcome, never raises.
        """
        if self.client is None:
            logger.info("Email to %s skipped (sending disabled)", to_email)
            return NotificationOutcome(sent=False, error="disabled")

        message = Mail(
            from_email=self.from_email,
            to_emails=to_email,
            subject=subject,
            html_content=html,
        )
        try:
            response = self.client.send(message)
        except Exception as e:
            body = getattr(e, "body", None)
            logger.error("Failed to send %r to %s: %s %s", subject, to_email, e, body or "")
            return NotificationOutcome(sent=False, status_code=getattr(e, "status_code", None), error=str(e))

        message_id = response.headers.get("X-Message-Id") if response.headers else None
        logger.info(
            "Email %r sent to %s (status=%s, message_id=%s)",
            subject, to_email, response.status_code, message_id
        )
        return NotificationOutcome(sent=True, status_code=response.status_code, message_id=message_id)

    def send_talent_welcome(self, full_name: str, email: str) -> NotificationOutcome:
        subject = f"Welcome to {self.brand} - Registration Confirmation"
        html = TALENT_WELCOME_HTML.format(brand=self.brand, full_name=escape(full_name))
        return self._send(email, subject, html)

    def send_company_welcome(self, company_name: str, contact_person: str, email: str) -> NotificationOutcome:
        subject = f"Welcome to {self.brand} - Company Registration Confirmation"
        html = COMPANY_WELCOME_HTML.format(
            brand=self.brand, company_name=escape(company_name), contact_person=escape(contact_person)
        )
        return self._send(email, subject, html)

    def verify(self) -> bool:
        """Check the API key against SendGrid without sending anything."""
        if self.client is None:
            return False
        try:
            response = self.client.client.scopes.get()
            return 200 <= response.status_code < 300
        except Exception as e:
            logger.warning("SendGrid API key verification failed: %s", e)
            return False

    def close(self) -> None:
        """Drop the client; later sends are skipped."""
        self.client = None
