"""Keyboard-driven resolution of the country typeahead."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .driver import Driver, ElementHandle
from .errors import NoCandidateResolvedError

LOGGER = logging.getLogger(__name__)

ACTIVE_DESCENDANT_ATTRIBUTE = "aria-activedescendant"
NEXT_CANDIDATE_KEY = "ArrowDown"
COMMIT_KEY = "Enter"


class AutocompleteState(str, Enum):
    IDLE = "idle"
    QUERYING = "querying"
    RESOLVED = "resolved"
    NO_CANDIDATE = "no_candidate"


@dataclass(slots=True)
class DropdownState:
    query: str
    active_descendant: Optional[str] = None
    state: AutocompleteState = AutocompleteState.IDLE
    _option_label: Optional[str] = field(default=None, init=False, repr=False)

    def start(self) -> None:
        if self.state is not AutocompleteState.IDLE:
            raise RuntimeError(f"Cannot query from state {self.state.value}")
        self.state = AutocompleteState.QUERYING

    def observe_active_descendant(self, value: Optional[str]) -> None:
        if self.state is not AutocompleteState.QUERYING:
            raise RuntimeError(f"Nothing is being queried (state {self.state.value})")
        if value:
            self.active_descendant = value
            self.state = AutocompleteState.RESOLVED
        else:
            self.state = AutocompleteState.NO_CANDIDATE

    @property
    def resolved(self) -> bool:
        return self.state is AutocompleteState.RESOLVED

    @property
    def option_label(self) -> str:
        if not self.resolved or self._option_label is None:
            raise RuntimeError(f"No option label in state {self.state.value}")
        return self._option_label

    def record_option_label(self, label: str) -> None:
        if not self.resolved:
            raise RuntimeError(f"No active option in state {self.state.value}")
        self._option_label = label


def option_selector(option_id: str) -> str:
    """Attribute selector for ``option_id``; generated ids may hold ``:`` or quotes."""
    escaped = option_id.replace("\\", "\\\\").replace('"', '\\"')
    return f'[id="{escaped}"]'


class CountryAutocomplete:
    """Drives a combobox that is only selectable through the keyboard.

    The control filters its own candidates (case-insensitively) as text is
    typed. ``aria-activedescendant`` appears once a candidate is highlighted;
    its absence after moving to the next candidate means nothing matched.
    """

    def __init__(
        self,
        driver: Driver,
        control: ElementHandle,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.driver = driver
        self.control = control
        self.logger = logger or LOGGER

    def search(self, query: str) -> str:
        """Return the text of the candidate highlighted for ``query`` without selecting it."""
        dropdown = self._query(query)
        option = self.driver.resolve_by_structural_query(
            option_selector(dropdown.active_descendant)
        )
        label = option.text_content()
        if not label or not label.strip():
            raise NoCandidateResolvedError(query)
        dropdown.record_option_label(label)
        self.logger.debug("Query %r highlights %r", query, label)
        return dropdown.option_label

    def commit(self, query: str) -> str:
        """Select the candidate highlighted for ``query`` and return the control's value."""
        self._query(query)
        self.driver.press_key(COMMIT_KEY)
        value = self.control.input_value()
        self.logger.debug("Query %r committed as %r", query, value)
        return value

    def _query(self, query: str) -> DropdownState:
        dropdown = DropdownState(query=query)
        dropdown.start()
        self.control.click()
        self.control.fill("")
        self.control.fill(query)
        self.driver.press_key(NEXT_CANDIDATE_KEY)
        dropdown.observe_active_descendant(
            self.control.get_attribute(ACTIVE_DESCENDANT_ATTRIBUTE)
        )
        if not dropdown.resolved:
            self.logger.debug("Query %r produced no candidate", query)
            raise NoCandidateResolvedError(query)
        return dropdown


__all__ = [
    "AutocompleteState",
    "DropdownState",
    "CountryAutocomplete",
    "option_selector",
]
