"""
Messaging provider using Twilio
Phone number lookup and scheduled SMS reminders
"""
from datetime import datetime, timezone
from typing import List, Literal, Optional, Protocol

import requests
from pydantic import BaseModel
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from app.config import settings
from app.logging_config import get_logger

logger = get_logger(__name__)


class ProviderError(BaseModel):
    """Single error entry reported by the messaging provider"""

    code: str
    description: str


class LookupResult(BaseModel):
    """Outcome of a phone number lookup"""

    status: Literal["success", "invalid_format", "error"]
    phone_number: Optional[str] = None
    errors: List[ProviderError] = []


class ScheduleResult(BaseModel):
    """Outcome of scheduling a message"""

    status: Literal["success", "error"]
    message_ids: List[str] = []
    errors: List[ProviderError] = []
    note: Optional[str] = None


class MessagingProvider(Protocol):
    """Phone verification and message scheduling"""

    def lookup(self, phone_number: str, country_code: str) -> LookupResult:
        ...

    def schedule_message(
        self,
        sender_id: str,
        recipients: List[str],
        body: str,
        scheduled_at: datetime,
    ) -> ScheduleResult:
        ...


def _provider_error(exc: TwilioRestException) -> ProviderError:
    code = exc.code if exc.code is not None else exc.status
    return ProviderError(code=str(code), description=exc.msg)


def _transport_error(exc: Exception) -> ProviderError:
    return ProviderError(code="network", description=str(exc) or type(exc).__name__)


class TwilioService:
    """Service to verify numbers and schedule SMS using Twilio"""

    def __init__(self, client: Optional[Client] = None):
        self.account_sid = settings.twilio_account_sid
        self.auth_token = settings.twilio_auth_token
        self.messaging_service_sid = settings.twilio_messaging_service_sid
        self.client = client
        if self.client is None:
            self._init_client()

    def _init_client(self):
        """Initialize Twilio client"""
        if self.account_sid and self.auth_token:
            self.client = Client(self.account_sid, self.auth_token)
            if not self.messaging_service_sid:
                logger.warning("twilio_not_configured", missing="messaging_service_sid")
        else:
            logger.warning("twilio_not_configured", mode="test")

    def lookup(self, phone_number: str, country_code: str) -> LookupResult:
        """
        Validate and normalize a phone number with Twilio Lookup.

        Args:
            phone_number: Number as entered by the customer
            country_code: ISO country used for numbers in national format

        Returns:
            LookupResult with the E.164 number on success
        """
        if not self.client:
            return LookupResult(status="success", phone_number=phone_number.strip())

        try:
            result = self.client.lookups.v2.phone_numbers(phone_number).fetch(
                country_code=country_code
            )
        except TwilioRestException as e:
            # Lookup answers 404 for numbers it cannot parse at all
            if e.status == 404:
                return LookupResult(status="invalid_format", errors=[_provider_error(e)])
            logger.warning("phone_lookup_failed", code=e.code, status=e.status, error=e.msg)
            return LookupResult(status="error", errors=[_provider_error(e)])
        except (TwilioException, requests.RequestException) as e:
            logger.warning("phone_lookup_failed", error=str(e))
            return LookupResult(status="error", errors=[_transport_error(e)])

        if not result.valid:
            return LookupResult(
                status="invalid_format",
                errors=[
                    ProviderError(code="validation", description=reason)
                    for reason in (result.validation_errors or [])
                ],
            )

        return LookupResult(status="success", phone_number=result.phone_number)

    def schedule_message(
        self,
        sender_id: str,
        recipients: List[str],
        body: str,
        scheduled_at: datetime,
    ) -> ScheduleResult:
        """
        Schedule an SMS for each recipient.

        Args:
            sender_id: Alphanumeric sender shown to the recipient
            recipients: E.164 phone numbers
            body: Message text
            scheduled_at: Send time; naive values are local time

        Returns:
            ScheduleResult, "error" if any recipient failed
        """
        if not self.client:
            return ScheduleResult(
                status="success",
                note="Twilio not configured - running in test mode",
            )

        send_at = scheduled_at.astimezone(timezone.utc)
        sender = {"from_": sender_id}
        if self.messaging_service_sid:
            sender["messaging_service_sid"] = self.messaging_service_sid
        message_ids = []
        errors = []

        for recipient in recipients:
            try:
                message = self.client.messages.create(
                    to=recipient,
                    body=body,
                    schedule_type="fixed",
                    send_at=send_at,
                    **sender,
                )
                message_ids.append(message.sid)
            except TwilioRestException as e:
                logger.warning("message_schedule_failed", to=recipient, code=e.code, error=e.msg)
                errors.append(_provider_error(e))
            except (TwilioException, requests.RequestException) as e:
                logger.warning("message_schedule_failed", to=recipient, error=str(e))
                errors.append(_transport_error(e))

        if errors:
            return ScheduleResult(status="error", message_ids=message_ids, errors=errors)
        return ScheduleResult(status="success", message_ids=message_ids)


# Global instance
_twilio_service = None


def get_twilio_service() -> TwilioService:
    """Get or create Twilio service instance"""
    global _twilio_service
    if _twilio_service is None:
        _twilio_service = TwilioService()
    return _twilio_service
