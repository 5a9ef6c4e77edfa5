"""
HTML bodies for outgoing emails.

All interpolated values must already be sanitized (see validation.sanitize_input).
"""
from typing import Optional

BRAND = "Open Door Professionals"
ACCENT = "#77C249"

_WRAPPER = '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px;">{content}</div>'
_HEADING = f'<h1 style="color: {ACCENT}; border-bottom: 2px solid {ACCENT}; padding-bottom: 10px;">{{title}}</h1>'
_PANEL = '<div style="background-color: #f8f9fa; padding: 20px; border-radius: 8px; margin: 20px 0;"><h2 style="color: #333; margin-top: 0;">{title}</h2>{rows}</div>'
_NOTE = '<div style="margin-top: 30px; padding: 20px; background-color: #e8f5e8; border-radius: 8px;"><p style="margin: 0; color: #333;">{text}</p></div>'


def _row(label: str, value: str) -> str:
    return f"<p><strong>{label}:</strong> {value}</p>"


def booking_notification(
    name: str,
    email: str,
    phone: str,
    service_type: str,
    formatted_date: str,
    preferred_time: str,
    message: Optional[str] = None,
) -> tuple:
    """Business-facing booking email. Returns (subject, html)."""
    subject = f"New Service Booking Request - {service_type}"

    details = _row("Service Type", service_type) + _row("Preferred Date", formatted_date) + _row("Preferred Time", preferred_time)
    if message:
        details += _row("Additional Message", message)

    content = (
        _HEADING.format(title="New Booking Request")
        + _PANEL.format(title="Client Information", rows=_row("Name", name) + _row("Email", email) + _row("Phone", phone))
        + _PANEL.format(title="Service Details", rows=details)
        + _NOTE.format(text="Please contact the client within 24 hours to confirm the appointment and discuss details.")
        + f'<div style="margin-top: 30px; text-align: center; color: #666; font-size: 12px;"><p>This is an automated message from the {BRAND} booking system.</p></div>'
    )
    return subject, _WRAPPER.format(content=content)


def booking_confirmation(name: str, service_type: str, formatted_date: str, preferred_time: str) -> tuple:
    """Customer-facing booking confirmation. Returns (subject, html)."""
    subject = f"Booking Confirmation - {BRAND}"

    content = (
        _HEADING.format(title="Thank You for Your Booking Request!")
        + f"<p>Dear {name},</p>"
        + f"<p>Thank you for your interest in our {service_type} services. We have received your booking request "
          "and our team will contact you within 24 hours to confirm your appointment.</p>"
        + _PANEL.format(
            title="Your Booking Details",
            rows=_row("Service", service_type) + _row("Requested Date", formatted_date) + _row("Requested Time", preferred_time),
        )
        + "<p>If you have any urgent questions, please don't hesitate to contact us directly.</p>"
        + _NOTE.format(text=f"<strong>{BRAND}</strong><br>Your trusted partner for HR, BPO, and business solutions in the Philippines.")
    )
    return subject, _WRAPPER.format(content=content)


def contact_notification(name: str, company: str, email: str, phone: str, message: str) -> tuple:
    subject = f"New Contact Form Submission from {name}"
    html = (
        "<h2>New Inquiry</h2>"
        + _row("Name", name)
        + _row("Company", company or "N/A")
        + _row("Email", email)
        + _row("Phone", phone or "N/A")
        + _row("Message", message)
    )
    return subject, html


def contact_confirmation(name: str) -> tuple:
    subject = f"Thank you for contacting {BRAND}"
    html = (
        f"<p>Hi {name},</p>"
        "<p>Thanks for reaching out! We'll get back to you within one business day.</p>"
        f"<p>Warm regards,<br>{BRAND} Team</p>"
    )
    return subject, html
