"""Exception types for panchayat-election.

Expected domain outcomes (duplicate registration, unknown candidate, double
voting, under-age voter) are never raised; they come back as ``False`` or
through the ``on_error`` callback.  The exceptions here cover misuse of the
library itself.
"""
from __future__ import annotations


class ElectionError(Exception):
    """Base class for all panchayat-election exceptions."""


class RegistryUnavailableError(ElectionError):
    """Raised when an operation is called on a degraded registry.

    A registry built from something that is not a candidate sequence has no
    usable operations.  Check ``ElectionRegistry.available`` first.

    Attributes
    ----------
    operation:
        Name of the operation that was attempted.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Election registry is unavailable: cannot call '{operation}' "
            "on a registry built without a candidate list."
        )


class ElectionConfigError(ElectionError, ValueError):
    """Raised when an election YAML config is missing or invalid.

    Attributes
    ----------
    config_path:
        The path to the config file that caused the error, if known.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.config_path = config_path
        prefix = f"[{config_path}] " if config_path else ""
        super().__init__(f"{prefix}{message}")
