"""Randomized values that keep repeated sign-up runs independent."""

from __future__ import annotations

import logging
import secrets
import string
from typing import Optional

LOGGER = logging.getLogger(__name__)

UPPERCASE_LETTERS = string.ascii_uppercase
LOWERCASE_LETTERS = string.ascii_lowercase
NUMBERS = string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()_+[]{}|;:,.<>?"

TAG_LENGTH = 2
TAG_ALPHABET = UPPERCASE_LETTERS + NUMBERS
PASSWORD_GROUPS = 3
PASSWORD_CLASSES = (UPPERCASE_LETTERS, LOWERCASE_LETTERS, NUMBERS, SPECIAL_CHARACTERS)
PASSWORD_LENGTH = PASSWORD_GROUPS * len(PASSWORD_CLASSES)


def generate_random_string() -> str:
    """Return a two character uppercase alphanumeric tag."""
    return "".join(secrets.choice(TAG_ALPHABET) for _ in range(TAG_LENGTH))


def generate_random_password(requested_length: Optional[int] = None) -> str:
    """Return a 12 character password covering every character class.

    Each group holds one uppercase letter, one lowercase letter, one digit and
    one special character. ``requested_length`` is accepted for callers that
    pass one but the result is always ``PASSWORD_LENGTH`` long.
    """
    if requested_length is not None and requested_length != PASSWORD_LENGTH:
        LOGGER.debug(
            "Ignoring requested password length %s; using %d",
            requested_length,
            PASSWORD_LENGTH,
        )
    password = []
    for _ in range(PASSWORD_GROUPS):
        for alphabet in PASSWORD_CLASSES:
            password.append(secrets.choice(alphabet))
    return "".join(password)


def build_work_email(local_part: str, domain: str, tag: Optional[str] = None) -> str:
    prefix = tag if tag is not None else generate_random_string()
    return f"{prefix}_{local_part}@{domain}"


__all__ = [
    "SPECIAL_CHARACTERS",
    "PASSWORD_LENGTH",
    "generate_random_string",
    "generate_random_password",
    "build_work_email",
]
