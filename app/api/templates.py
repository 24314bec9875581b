"""
HTML Templates for the booking pages

Booking form and confirmation page. Every user supplied value is escaped.
"""
from html import escape
from typing import Optional

from app.models import Appointment, BookingForm

STYLE = '''
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: #fdf2f8;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            padding: 20px;
        }

        .container {
            background: white;
            border-radius: 16px;
            padding: 32px 24px;
            max-width: 420px;
            width: 100%;
            box-shadow: 0 20px 60px rgba(0,0,0,0.15);
        }

        h1 {
            font-size: 24px;
            color: #831843;
            margin-bottom: 16px;
            text-align: center;
        }

        .form-group {
            margin-bottom: 16px;
        }

        label {
            display: block;
            font-size: 14px;
            color: #333;
            margin-bottom: 6px;
        }

        input {
            width: 100%;
            padding: 10px 12px;
            border: 1px solid #ddd;
            border-radius: 8px;
            font-size: 15px;
        }

        .error-message {
            background: #fee2e2;
            color: #b91c1c;
            padding: 12px;
            border-radius: 8px;
            font-size: 14px;
            margin-bottom: 16px;
            white-space: pre-line;
        }

        .submit-btn {
            width: 100%;
            padding: 12px;
            border: none;
            border-radius: 8px;
            background: #db2777;
            color: white;
            font-size: 16px;
            cursor: pointer;
        }

        dt {
            font-size: 12px;
            color: #666;
            margin-top: 12px;
        }

        dd {
            font-size: 16px;
            color: #1a1a2e;
        }
'''


def _page(title: str, body: str) -> str:
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{STYLE}</style>
</head>
<body>
    <div class="container">
{body}
    </div>
</body>
</html>'''


def get_home_html(
    app_name: str,
    form: BookingForm,
    errors: Optional[str] = None,
) -> str:
    """Generate the booking form HTML, optionally with an error message."""

    error_block = ""
    if errors:
        error_block = f'        <div class="error-message">{escape(errors)}</div>\n'

    return _page(
        f"Book an appointment - {escape(app_name)}",
        f'''        <h1>{escape(app_name)}</h1>
{error_block}        <form method="post" action="/book">
            <div class="form-group">
                <label for="name">Your name</label>
                <input type="text" id="name" name="name" value="{escape(form.name)}">
            </div>
            <div class="form-group">
                <label for="treatment">Desired treatment</label>
                <input type="text" id="treatment" name="treatment" value="{escape(form.treatment)}">
            </div>
            <div class="form-group">
                <label for="number">Mobile number (for SMS reminder)</label>
                <input type="tel" id="number" name="number" value="{escape(form.number)}">
            </div>
            <div class="form-group">
                <label for="date">Date</label>
                <input type="date" id="date" name="date" value="{escape(form.date)}">
            </div>
            <div class="form-group">
                <label for="time">Time</label>
                <input type="time" id="time" name="time" value="{escape(form.time)}">
            </div>
            <button type="submit" class="submit-btn">Book appointment</button>
        </form>''',
    )


def get_confirm_html(app_name: str, appointment: Appointment) -> str:
    """Generate the confirmation page HTML."""

    return _page(
        f"Appointment confirmed - {escape(app_name)}",
        f'''        <h1>Thanks, your appointment is booked!</h1>
        <dl>
            <dt>Name</dt>
            <dd>{escape(appointment.name)}</dd>
            <dt>Treatment</dt>
            <dd>{escape(appointment.treatment)}</dd>
            <dt>Phone number</dt>
            <dd>{escape(appointment.number)}</dd>
            <dt>Appointment</dt>
            <dd>{appointment.appointment_display}</dd>
            <dt>SMS reminder</dt>
            <dd>{appointment.reminder_display}</dd>
        </dl>''',
    )
