"""Values typed into the sign-up form during a scenario."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .random_data import PASSWORD_LENGTH, build_work_email, generate_random_password

DEFAULT_FIRST_NAME = "Jane"
DEFAULT_LAST_NAME = "Doe"
DEFAULT_EMAIL_LOCAL_PART = "user"
DEFAULT_EMAIL_DOMAIN = "facebook.com"
DEFAULT_PHONE_NUMBER = "+46701234567"
DEFAULT_COMPANY_NAME = "Acme"
DEFAULT_INFORMATION_MEDIA = "LinkedIn"
DEFAULT_COUNTRY_QUERY = "Swe"
DEFAULT_COUNTRY_NAME = "Sweden"
DEFAULT_COUNTRY_CODE = "SE"


@dataclass(slots=True)
class SignUpData:
    first_name: str
    last_name: str
    work_email: str
    phone_number: str
    password: str
    company_name: str
    information_media: str
    country_query: str


def build_sign_up_data(
    *,
    country_query: str = DEFAULT_COUNTRY_QUERY,
    email_domain: str = DEFAULT_EMAIL_DOMAIN,
    tag: Optional[str] = None,
) -> SignUpData:
    """Return scenario values with a fresh e-mail tag and password."""
    return SignUpData(
        first_name=DEFAULT_FIRST_NAME,
        last_name=DEFAULT_LAST_NAME,
        work_email=build_work_email(DEFAULT_EMAIL_LOCAL_PART, email_domain, tag),
        phone_number=DEFAULT_PHONE_NUMBER,
        password=generate_random_password(PASSWORD_LENGTH),
        company_name=DEFAULT_COMPANY_NAME,
        information_media=DEFAULT_INFORMATION_MEDIA,
        country_query=country_query,
    )


__all__ = [
    "SignUpData",
    "build_sign_up_data",
    "DEFAULT_COUNTRY_NAME",
    "DEFAULT_COUNTRY_CODE",
    "DEFAULT_COUNTRY_QUERY",
]
