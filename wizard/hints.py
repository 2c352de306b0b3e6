"""Non-blocking input hints for the profile step."""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email

EMAIL_HINT = "This does not look like an email address yet."


def email_hint(value: str | None) -> str | None:
    """Return a hint when ``value`` is not shaped like an email address.

    Blank values produce no hint; the profile gate already covers them.
    """

    if value is None or not value.strip():
        return None
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return EMAIL_HINT
    return None
