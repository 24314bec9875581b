from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse

from app.api.templates import get_confirm_html, get_home_html
from app.config import settings
from app.models import BookingForm, ConfirmationView
from app.services.appointment_store import get_appointment_store
from app.services.booking_service import BookingService
from app.services.sms_service import get_twilio_service

router = APIRouter()


def get_booking_service() -> BookingService:
    """Booking workflow wired to Twilio and the shared store"""
    return BookingService(get_twilio_service(), get_appointment_store(), settings)


@router.get("/", response_class=HTMLResponse)
def home(service: BookingService = Depends(get_booking_service)):
    """Display the booking form with a default appointment time"""
    return HTMLResponse(content=get_home_html(settings.app_name, service.home_form()))


@router.post("/book", response_class=HTMLResponse)
def book(
    name: str = Form(""),
    treatment: str = Form(""),
    number: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    service: BookingService = Depends(get_booking_service),
):
    """
    Handle a booking form submission.

    Renders the confirmation page, or the form again with the error
    message when any check fails.
    """
    form = BookingForm(name=name, treatment=treatment, number=number, date=date, time=time)
    outcome = service.submit(form)

    if isinstance(outcome, ConfirmationView):
        return HTMLResponse(content=get_confirm_html(settings.app_name, outcome.appointment))

    return HTMLResponse(
        content=get_home_html(settings.app_name, outcome.form, errors=outcome.errors)
    )


@router.get("/appointments")
def get_appointments(service: BookingService = Depends(get_booking_service)):
    """
    Get all appointments in booking order.

    Exposes customer names and numbers, so it only exists in debug mode.
    """
    if not settings.debug:
        raise HTTPException(status_code=404, detail="Not Found")

    return [appointment.model_dump(mode="json") for appointment in service.appointments()]


@router.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "ok", "app": settings.app_name}
