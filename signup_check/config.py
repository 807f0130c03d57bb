"""Where the sign-up form lives."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

BASE_URL_ENV = "SIGNUP_CHECK_BASE_URL"
SIGN_UP_PATH_ENV = "SIGNUP_CHECK_SIGN_UP_PATH"
REGISTRATION_PATH_ENV = "SIGNUP_CHECK_REGISTRATION_PATH"

DEFAULT_BASE_URL = "https://circula-qa-challange.vercel.app/"
DEFAULT_SIGN_UP_PATH = "users/sign_up"
DEFAULT_REGISTRATION_PATH = "registration/register"
DEFAULT_COOKIE_BUTTON_TEST_ID = "uc-accept-all-button"


@dataclass(frozen=True)
class SiteConfig:
    base_url: str = DEFAULT_BASE_URL
    sign_up_path: str = DEFAULT_SIGN_UP_PATH
    # Matched as a substring of the outgoing request URL.
    registration_path: str = DEFAULT_REGISTRATION_PATH
    cookie_button_test_id: str = DEFAULT_COOKIE_BUTTON_TEST_ID

    @classmethod
    def from_env(cls, base_url: Optional[str] = None) -> "SiteConfig":
        return cls(
            base_url=base_url or os.getenv(BASE_URL_ENV, DEFAULT_BASE_URL),
            sign_up_path=os.getenv(SIGN_UP_PATH_ENV, DEFAULT_SIGN_UP_PATH),
            registration_path=os.getenv(
                REGISTRATION_PATH_ENV, DEFAULT_REGISTRATION_PATH
            ),
        )

    def sign_up_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.sign_up_path.lstrip('/')}"
