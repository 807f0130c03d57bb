"""Evaluate outcome of a submitted sign-up."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

SUCCESS_TEXT = "You signed up to Circula."
ERROR_SELECTORS = (
    "[role='alert']",
    ".Mui-error",
    ".error",
)


@dataclass(slots=True)
class SubmissionOutcome:
    status: str
    validation_message: Optional[str] = None
    success_message: Optional[str] = None


def evaluate_sign_up_result(
    page: Page,
    *,
    success_text: str = SUCCESS_TEXT,
    timeout_ms: int = 10000,
    logger: Optional[logging.Logger] = None,
) -> SubmissionOutcome:
    log = logger or logging.getLogger(__name__)
    try:
        page.get_by_text(success_text).first.wait_for(
            state="visible", timeout=timeout_ms
        )
    except PlaywrightTimeoutError:
        error_message = _first_error_text(page)
        if error_message:
            log.info("Detected validation failure: %s", error_message)
            return SubmissionOutcome(
                status="validation_failed", validation_message=error_message
            )
        log.info("Submission completed without clear success/failure signals")
        return SubmissionOutcome(status="submitted_no_signal")

    log.info("Detected sign-up success: %s", success_text)
    return SubmissionOutcome(status="registered", success_message=success_text)


def _first_error_text(page: Page) -> Optional[str]:
    for selector in ERROR_SELECTORS:
        try:
            entries = page.locator(selector).all_inner_texts()
        except Exception:  # noqa: BLE001
            entries = []
        for entry in entries:
            entry = entry.strip()
            if entry:
                return _clean_snippet(entry)
    return None


def _clean_snippet(text: str, limit: int = 280) -> str:
    snippet = text.strip()
    if len(snippet) <= limit:
        return snippet
    return f"{snippet[:limit]}…"


__all__ = ["SubmissionOutcome", "evaluate_sign_up_result", "SUCCESS_TEXT"]
