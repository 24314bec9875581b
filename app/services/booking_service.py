"""
Booking workflow
Validates the booking form, verifies the phone number and schedules the SMS reminder
"""
from datetime import datetime, timedelta
from typing import List, Optional

from app.config import Settings, settings as default_settings
from app.logging_config import get_logger
from app.models import (
    Appointment,
    BookingErrorKind,
    BookingForm,
    BookingOutcome,
    ConfirmationView,
    ErrorView,
)
from app.services.appointment_store import AppointmentStore
from app.services.sms_service import MessagingProvider

logger = get_logger(__name__)

MIN_LEAD_TIME = timedelta(hours=3, minutes=5)
REMINDER_OFFSET = timedelta(hours=3)
DEFAULT_FORM_OFFSET = timedelta(hours=3, minutes=10)

INPUT_FORMAT = "%Y-%m-%d %H:%M"

MESSAGES = {
    BookingErrorKind.INPUT_INCOMPLETE: "Please fill all required fields!",
    BookingErrorKind.INPUT_INVALID_FORMAT: "Please enter a valid date and time!",
    BookingErrorKind.INPUT_TOO_SOON: "You can only book appointments that are at least 3 hours in the future!",
    BookingErrorKind.PHONE_INVALID_FORMAT: "You need to enter a valid phone number!",
    BookingErrorKind.PHONE_PROVIDER_ERROR: "Something went wrong while checking your phone number!",
}


def _reject(kind: BookingErrorKind, form: BookingForm) -> ErrorView:
    logger.info("booking_rejected", kind=kind.value)
    return ErrorView(kind=kind, errors=MESSAGES[kind], form=form)


def reminder_body(name: str, treatment: str, appointment_dt: datetime) -> str:
    return (
        f"{name}, here's a reminder that you have a {treatment} scheduled for "
        f"{appointment_dt.strftime('%H:%M')}. See you soon!"
    )


def home_form(now: Optional[datetime] = None) -> BookingForm:
    """
    Blank booking form with a default appointment time.

    The default is 3:10 hours from now so the form can be submitted
    as-is when testing.
    """
    default_dt = (now or datetime.now()) + DEFAULT_FORM_OFFSET
    return BookingForm(
        date=default_dt.strftime("%Y-%m-%d"),
        time=default_dt.strftime("%H:%M"),
    )


def submit_booking(
    form: BookingForm,
    provider: MessagingProvider,
    store: AppointmentStore,
    settings: Settings = default_settings,
    now: Optional[datetime] = None,
) -> BookingOutcome:
    """
    Validate a booking and schedule its reminder.

    Args:
        form: Fields as entered by the customer
        provider: Phone lookup and message scheduling
        store: Where confirmed appointments are appended
        settings: Supplies country code and sender id
        now: Current local time, defaults to datetime.now()

    Returns:
        ConfirmationView for a stored appointment, or ErrorView describing
        the first check that failed
    """
    name = form.name.strip()
    treatment = form.treatment.strip()
    number = form.number.strip()
    date = form.date.strip()
    time = form.time.strip()

    # Check if user has provided input for all form fields
    if not all([name, treatment, number, date, time]):
        return _reject(BookingErrorKind.INPUT_INCOMPLETE, form)

    try:
        appointment_dt = datetime.strptime(f"{date} {time}", INPUT_FORMAT)
    except ValueError:
        return _reject(BookingErrorKind.INPUT_INVALID_FORMAT, form)

    # Appointment must be at least 3:05 hours in the future
    earliest_possible_dt = (now or datetime.now()) + MIN_LEAD_TIME
    if appointment_dt < earliest_possible_dt:
        return _reject(BookingErrorKind.INPUT_TOO_SOON, form)

    lookup = provider.lookup(number, settings.country_code)
    if lookup.status == "invalid_format":
        return _reject(BookingErrorKind.PHONE_INVALID_FORMAT, form)
    if lookup.status != "success":
        return _reject(BookingErrorKind.PHONE_PROVIDER_ERROR, form)

    reminder_dt = appointment_dt - REMINDER_OFFSET
    body = reminder_body(name, treatment, appointment_dt)

    result = provider.schedule_message(
        settings.sender_id, [lookup.phone_number], body, appointment_dt
    )
    if result.status != "success":
        errors = "\n".join(
            f"Error code {error.code}: {error.description}" for error in result.errors
        )
        logger.warning("reminder_schedule_failed", error_count=len(result.errors))
        # Entered values are not carried over on this path
        return ErrorView(
            kind=BookingErrorKind.SCHEDULING_PROVIDER_ERROR,
            errors=errors,
            form=BookingForm(),
        )

    appointment = Appointment(
        name=name,
        treatment=treatment,
        number=number,
        appointment_dt=appointment_dt,
        reminder_dt=reminder_dt,
    )
    store.append(appointment)
    logger.info(
        "appointment_booked",
        treatment=treatment,
        appointment_dt=appointment.appointment_display,
        message_ids=result.message_ids,
        note=result.note,
    )

    return ConfirmationView(appointment=appointment)


class BookingService:
    """Booking workflow bound to a provider, store and settings"""

    def __init__(
        self,
        provider: MessagingProvider,
        store: AppointmentStore,
        settings: Settings = default_settings,
    ):
        self.provider = provider
        self.store = store
        self.settings = settings

    def home_form(self) -> BookingForm:
        return home_form()

    def submit(self, form: BookingForm, now: Optional[datetime] = None) -> BookingOutcome:
        return submit_booking(form, self.provider, self.store, self.settings, now=now)

    def appointments(self) -> List[Appointment]:
        return self.store.list()
