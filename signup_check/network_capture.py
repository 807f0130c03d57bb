"""Capture the registration request the form sends on submit."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from playwright.sync_api import Page, Request

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class RegistrationPayload:
    url: str
    method: str
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def country(self) -> Optional[str]:
        value = self.body.get("country")
        return None if value is None else str(value)

    @classmethod
    def from_request(cls, request: Request) -> "RegistrationPayload":
        raw = request.post_data
        body: Dict[str, Any] = {}
        if raw:
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                LOGGER.warning("Registration request body is not JSON: %.80s", raw)
            else:
                if isinstance(parsed, dict):
                    body = parsed
        return cls(url=request.url, method=request.method, body=body)

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "method": self.method, "body": _mask_body(self.body)}


def capture_registration_request(
    page: Page,
    action: Callable[[], None],
    *,
    url_fragment: str,
    timeout_ms: int = 15000,
) -> RegistrationPayload:
    """Run ``action`` and return the first request whose URL contains ``url_fragment``."""
    fragment = url_fragment.lower()

    def matches(request: Request) -> bool:
        return fragment in request.url.lower()

    with page.expect_request(matches, timeout=timeout_ms) as request_info:
        action()
    payload = RegistrationPayload.from_request(request_info.value)
    LOGGER.debug(
        "Captured %s %s (country=%s)", payload.method, payload.url, payload.country
    )
    return payload


def _mask_body(body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: "***" if "password" in key.lower() else value
        for key, value in body.items()
    }


__all__ = ["RegistrationPayload", "capture_registration_request"]
