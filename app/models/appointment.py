from datetime import datetime
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, computed_field

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


class BookingForm(BaseModel):
    """Raw booking form fields, exactly as entered"""

    name: str = ""
    treatment: str = ""
    number: str = ""
    date: str = ""  # YYYY-MM-DD
    time: str = ""  # HH:MM


class Appointment(BaseModel):
    """A confirmed appointment with its scheduled reminder"""

    model_config = ConfigDict(frozen=True)

    name: str
    treatment: str
    number: str
    appointment_dt: datetime
    reminder_dt: datetime

    @computed_field
    @property
    def appointment_display(self) -> str:
        return self.appointment_dt.strftime(DISPLAY_FORMAT)

    @computed_field
    @property
    def reminder_display(self) -> str:
        return self.reminder_dt.strftime(DISPLAY_FORMAT)


class BookingErrorKind(str, Enum):
    """Why a booking submission was rejected"""

    INPUT_INCOMPLETE = "input_incomplete"
    INPUT_INVALID_FORMAT = "input_invalid_format"
    INPUT_TOO_SOON = "input_too_soon"
    PHONE_INVALID_FORMAT = "phone_invalid_format"
    PHONE_PROVIDER_ERROR = "phone_provider_error"
    SCHEDULING_PROVIDER_ERROR = "scheduling_provider_error"


class ErrorView(BaseModel):
    """Booking form re-rendered with an error message"""

    kind: BookingErrorKind
    errors: str
    form: BookingForm


class ConfirmationView(BaseModel):
    """Confirmation page for a stored appointment"""

    appointment: Appointment


BookingOutcome = Union[ConfirmationView, ErrorView]
