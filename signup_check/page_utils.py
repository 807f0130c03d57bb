from __future__ import annotations

import logging
from typing import Optional

from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from .config import SiteConfig


def _log_fallback(logger) -> None:
    if logger:
        logger.debug("load state timed out, retrying with domcontentloaded")


def safe_goto(
    page,
    url: str,
    *,
    wait_until: str = "load",
    timeout_ms: int = 20000,
    logger=None,
):
    try:
        return page.goto(url, wait_until=wait_until, timeout=timeout_ms)
    except PlaywrightTimeoutError:
        if wait_until != "load":
            raise
        _log_fallback(logger)
        return page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)


def accept_cookie_consent(
    page: Page,
    test_id: str,
    *,
    timeout_ms: int = 5000,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Click the consent banner's accept button; return False if it never showed up."""
    button = page.get_by_test_id(test_id)
    try:
        button.click(timeout=timeout_ms)
    except PlaywrightTimeoutError:
        if logger:
            logger.debug("No cookie consent button %r appeared", test_id)
        return False
    if logger:
        logger.debug("Accepted cookie consent")
    return True


def open_sign_up_page(
    page: Page,
    site: SiteConfig,
    *,
    logger: Optional[logging.Logger] = None,
) -> Page:
    url = site.sign_up_url()
    if logger:
        logger.debug("Opening sign-up page %s", url)
    safe_goto(page, url, logger=logger)
    accept_cookie_consent(page, site.cookie_button_test_id, logger=logger)
    return page
