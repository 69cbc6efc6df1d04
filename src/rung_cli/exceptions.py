"""Custom exception hierarchy for rung-cli.

All exceptions that cross layer boundaries must inherit from
:class:`RungCliError`.  Filesystem and network errors raised while
reading answers (e.g. ``File`` parameters) are deliberately *not*
wrapped; they propagate to the CLI error boundary unchanged.

Hierarchy
---------
RungCliError
├── ConfigurationError
├── ExtensionLoadError
├── ProjectGenerationError
├── PromptAbortedError
└── EnvironmentError
"""

from __future__ import annotations


class RungCliError(Exception):
    """Base exception for all rung-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parameter declarations ------------------------------------------------

class ConfigurationError(RungCliError):
    """Raised when a parameter declaration cannot be compiled.

    The only fatal case is an ``AutoComplete`` parameter without a
    matching suggestion source.
    """


class ExtensionLoadError(RungCliError):
    """Raised when an extension module cannot be imported or lacks ``params``."""


# --- Boilerplate -----------------------------------------------------------

class ProjectGenerationError(RungCliError):
    """Raised when the boilerplate project folder cannot be created."""


# --- Interaction -----------------------------------------------------------

class PromptAbortedError(RungCliError):
    """Raised when the user cancels an interactive prompt."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RungCliError):
    """Raised when a required runtime dependency is not available."""
