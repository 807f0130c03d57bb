"""Capability interface over the browser plus its Playwright implementation."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from .errors import ElementResolutionError

LOGGER = logging.getLogger(__name__)


class ElementHandle(Protocol):
    def fill(self, text: str) -> None: ...

    def click(self, *, force: bool = False) -> None: ...

    def check(self, *, force: bool = False) -> None: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def text_content(self) -> Optional[str]: ...

    def input_value(self) -> str: ...


class Driver(Protocol):
    """What the page object needs from a browser session.

    Each handle operation waits for its target to become interactable and
    raises ``ElementResolutionError`` when it does not.
    """

    def resolve_by_semantic_label(self, label: str) -> ElementHandle: ...

    def resolve_by_structural_query(self, query: str) -> ElementHandle: ...

    def press_key(self, key: str) -> None: ...


class PlaywrightElement:
    """Wraps a Playwright locator and translates its failures."""

    def __init__(self, locator: Locator, description: str) -> None:
        self.locator = locator
        self.description = description

    def __repr__(self) -> str:
        return f"PlaywrightElement({self.description})"

    def fill(self, text: str) -> None:
        try:
            self.locator.fill(text)
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc

    def click(self, *, force: bool = False) -> None:
        try:
            self.locator.click(force=force)
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc

    def check(self, *, force: bool = False) -> None:
        try:
            self.locator.check(force=force)
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc

    def get_attribute(self, name: str) -> Optional[str]:
        try:
            return self.locator.get_attribute(name)
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc

    def text_content(self) -> Optional[str]:
        try:
            return self.locator.text_content()
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc

    def input_value(self) -> str:
        try:
            return self.locator.input_value()
        except PlaywrightError as exc:
            raise ElementResolutionError(self.description, exc.message) from exc


class PlaywrightDriver:
    """Driver backed by a live Playwright page."""

    def __init__(self, page: Page) -> None:
        self.page = page

    def resolve_by_semantic_label(self, label: str) -> PlaywrightElement:
        LOGGER.debug("Resolving field by label %r", label)
        return PlaywrightElement(self.page.get_by_label(label), f"label {label!r}")

    def resolve_by_structural_query(self, query: str) -> PlaywrightElement:
        LOGGER.debug("Resolving element by query %r", query)
        return PlaywrightElement(self.page.locator(query), f"locator {query!r}")

    def press_key(self, key: str) -> None:
        self.page.keyboard.press(key)


__all__ = [
    "Driver",
    "ElementHandle",
    "PlaywrightDriver",
    "PlaywrightElement",
]
