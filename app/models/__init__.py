from app.models.appointment import (
    Appointment,
    BookingErrorKind,
    BookingForm,
    BookingOutcome,
    ConfirmationView,
    ErrorView,
)

__all__ = [
    "Appointment",
    "BookingErrorKind",
    "BookingForm",
    "BookingOutcome",
    "ConfirmationView",
    "ErrorView",
]
