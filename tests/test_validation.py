import pytest
from datetime import date, datetime, timedelta, timezone

from app.models.booking_models import BookingRequest
from app.services.validation import (
    format_long_date,
    parse_preferred_date,
    sanitize_input,
    validate_booking,
)

NOW = datetime(2026, 10, 16, 12, 0, tzinfo=timezone.utc)


def make_request(**overrides):
    data = {
        "name": "Maria Santos",
        "email": "maria@example.com",
        "phone": "+63 912 345 6789",
        "serviceType": "Virtual Assistant",
        "preferredDate": "2026-10-20",
        "preferredTime": "10:30 AM",
        "message": "Hello",
    }
    data.update(overrides)
    return BookingRequest.model_validate(data)


def test_valid_request_passes():
    result = validate_booking(make_request(), now=NOW)
    assert result.is_valid
    assert result.errors == []


def test_violations_are_collected_independently():
    result = validate_booking(make_request(name=None, email="not-an-email"), now=NOW)
    assert result.errors == [
        "Name must be at least 2 characters long",
        "Valid email address is required",
    ]


def test_empty_payload_reports_every_required_field():
    result = validate_booking(BookingRequest(), now=NOW)
    assert result.errors == [
        "Name must be at least 2 characters long",
        "Valid email address is required",
        "Service type is required",
        "Preferred date is required",
        "Preferred time is required",
    ]


def test_non_string_values_count_as_missing():
    data = BookingRequest.model_validate({"name": 42, "email": ["a@b.co"], "serviceType": True})
    assert data.name is None and data.email is None and data.serviceType is None


def test_short_name_after_trim():
    result = validate_booking(make_request(name="  A  "), now=NOW)
    assert result.errors == ["Name must be at least 2 characters long"]


@pytest.mark.parametrize("email", ["maria@example", "maria example@x.com", "@example.com", "maria@@example.com"])
def test_bad_email(email):
    assert "Valid email address is required" in validate_booking(make_request(email=email), now=NOW).errors


def test_yesterday_fails_validation():
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    result = validate_booking(make_request(preferredDate=yesterday))
    assert result.errors == ["Valid future date is required"]


def test_date_at_midnight_before_now_fails():
    # A bare date is midnight UTC, already past at noon
    result = validate_booking(make_request(preferredDate="2026-10-16"), now=NOW)
    assert result.errors == ["Valid future date is required"]


@pytest.mark.parametrize("value", ["2026-02-30", "next tuesday", "16/10/2026"])
def test_unparseable_date_fails(value):
    result = validate_booking(make_request(preferredDate=value), now=NOW)
    assert result.errors == ["Valid future date is required"]


def test_phone_is_optional():
    assert validate_booking(make_request(phone=None), now=NOW).is_valid
    assert validate_booking(make_request(phone=""), now=NOW).is_valid


@pytest.mark.parametrize("phone", ["12345", "+63 912 345 6789 ext 5", "0912-345-6789-0000-0000"])
def test_bad_phone(phone):
    assert validate_booking(make_request(phone=phone), now=NOW).errors == ["Phone number format is invalid"]


@pytest.mark.parametrize("field,value", [
    ("name", "<script>alert(1)</script>"),
    ("message", "click javascript:void(0)"),
    ("serviceType", "BPO <img onerror=alert(1)>"),
    ("message", "<b ONCLICK = x>"),
])
def test_markup_injection_flagged(field, value):
    result = validate_booking(make_request(**{field: value}), now=NOW)
    assert "Invalid characters detected" in result.errors


def test_injection_in_several_fields_reported_once():
    result = validate_booking(make_request(name="Jo <script>", message="javascript:x"), now=NOW)
    assert result.errors.count("Invalid characters detected") == 1


def test_sanitize_strips_script_tags():
    cleaned = sanitize_input("<script>alert(1)</script>Hello")
    assert "<" not in cleaned and ">" not in cleaned
    assert "Hello" in cleaned


def test_sanitize_removes_scheme_and_handlers():
    assert sanitize_input("JavaScript:alert(1)") == "alert(1)"
    assert sanitize_input('img onload="x"') == 'img "x"'


def test_sanitize_repeats_until_nothing_left_to_strip():
    assert sanitize_input("javajavascript:script:x") == "x"
    assert sanitize_input("oonclick=nclick=alert(1)") == "alert(1)"
    assert sanitize_input("<<script>>") == "script"
    assert sanitize_input("java<>script:go") == "go"


def test_sanitize_truncates_to_1000():
    assert len(sanitize_input("a" * 5000)) == 1000


def test_sanitize_empty():
    assert sanitize_input(None) == ""
    assert sanitize_input("") == ""
    assert sanitize_input("   padded   ") == "padded"


def test_parse_preferred_date_variants():
    assert parse_preferred_date("2026-10-20") == datetime(2026, 10, 20, tzinfo=timezone.utc)
    assert parse_preferred_date("2026-10-20T09:00:00Z") == datetime(2026, 10, 20, 9, tzinfo=timezone.utc)
    assert parse_preferred_date("2026-10-20T09:00:00") == datetime(2026, 10, 20, 9, tzinfo=timezone.utc)


def test_format_long_date():
    assert format_long_date("2026-10-16") == "Friday, October 16, 2026"
    assert format_long_date("2027-01-05") == "Tuesday, January 5, 2027"


def test_trailing_newline_does_not_sneak_past_email_check():
    result = validate_booking(make_request(email="maria@example.com\n"), now=NOW)
    assert "Valid email address is required" in result.errors


def test_format_long_date_names_every_weekday_and_month():
    # 2026-10-12 is a Monday
    weekdays = [format_long_date(f"2026-10-{day}").split(",")[0] for day in range(12, 19)]
    assert weekdays == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

    months = [format_long_date(f"2027-{month:02d}-01").split(", ")[1].split(" ")[0] for month in range(1, 13)]
    assert months == [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]


@pytest.mark.parametrize("name", ["de_DE.UTF-8", "fr_FR.UTF-8", "es_ES.UTF-8"])
def test_format_long_date_ignores_host_locale(name):
    import locale

    saved = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, name)
    except locale.Error:
        pytest.skip(f"{name} locale not installed")
    try:
        assert format_long_date("2026-10-18") == "Sunday, October 18, 2026"
    finally:
        locale.setlocale(locale.LC_TIME, saved)
