"""Errors raised while driving the sign-up form."""

from __future__ import annotations


class SignUpCheckError(Exception):
    """Base class for sign-up automation failures."""


class ElementResolutionError(SignUpCheckError):
    """A locator matched no element, several elements, or never became interactable."""

    def __init__(self, description: str, reason: str | None = None) -> None:
        self.description = description
        self.reason = reason
        message = f"Could not interact with {description}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class NoCandidateResolvedError(SignUpCheckError):
    """An autocomplete query left no active option."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(
            f"aria-activedescendant attribute is not set after typing {query!r}"
        )


__all__ = ["SignUpCheckError", "ElementResolutionError", "NoCandidateResolvedError"]
