# src/services/contact_form.py

"""Validate and submit the site's contact form to the form relay."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings

logger = logging.getLogger("catalog.contact")

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ContactFormResult:
    """Outcome of a contact form submission."""

    success: bool
    message: str = ""
    error: str = ""
    errors: dict[str, str] = field(
        default_factory=lambda: dict[str, str]()
    )


def validate_contact_form(data: dict[str, Any]) -> dict[str, str]:
    """Return field errors keyed by field name; empty when valid."""
    errors: dict[str, str] = {}
    if not data.get("name"):
        errors["name"] = "Name is required"
    email = data.get("email")
    if not email:
        errors["email"] = "Email is required"
    elif not _EMAIL_PATTERN.match(str(email)):
        errors["email"] = "Email is invalid"
    return errors


def submit_contact_form(
    data: dict[str, Any],
    session: curl_requests.Session | None = None,
) -> ContactFormResult:
    """Validate, then POST the form once as JSON. No retries.

    A caller-supplied session is left open; one created here is closed
    after the request.
    """
    errors = validate_contact_form(data)
    if errors:
        return ContactFormResult(success=False, errors=errors)

    if session is not None:
        return _post_form(session, data)
    with curl_requests.Session(
        impersonate=Settings.IMPERSONATE_BROWSER
    ) as http:
        return _post_form(http, data)


def _post_form(
    http: curl_requests.Session, data: dict[str, Any],
) -> ContactFormResult:
    try:
        resp = http.post(
            Settings.CONTACT_FORM_ENDPOINT,
            json=data,
            headers={"Content-Type": "application/json"},
            timeout=Settings.REQUEST_TIMEOUT,
        )
        if not 200 <= resp.status_code < 300:
            msg = f"Failed to submit form (HTTP {resp.status_code})"
            raise RuntimeError(msg)
    except Exception as exc:
        logger.error("Contact form submission failed: %s", exc, exc_info=True)
        return ContactFormResult(success=False, error=str(exc))

    logger.info("Contact form submitted for %s", data.get("email"))
    return ContactFormResult(
        success=True, message="Form submitted successfully!"
    )
