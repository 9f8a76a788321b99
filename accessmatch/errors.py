"""Exception hierarchy shared by the access-control helpers."""

from __future__ import annotations


class CasbinError(Exception):
    """Base class for every error raised by this package."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CasbinAdapterError(CasbinError):
    """A policy storage adapter was used in a way it does not allow."""


class CasbinEnforcerError(CasbinError, RuntimeError):
    """An enforcer failed while evaluating or managing policy."""


class CasbinRBACError(CasbinError, ValueError):
    """A role-based access control operation got an invalid argument."""


class IllegalArgumentError(CasbinError, ValueError):
    """A function was called with an argument it cannot accept."""


class CasbinIOError(CasbinError, OSError):
    """Reading or writing a model or policy source failed."""


class MissingRequiredSectionsError(CasbinError, ValueError):
    """A model definition lacks one or more required sections."""


class UnsupportedOperationError(CasbinError, NotImplementedError):
    """The requested operation is not supported by this component."""


class ParserError(CasbinError, ValueError):
    """An IP address or CIDR block could not be parsed."""