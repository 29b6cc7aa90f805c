"""Exception hierarchy used throughout the server."""

from __future__ import annotations


class ServerError(Exception):
    """Base class for every error the server reports."""

    prefix = "Server error"

    def __init__(self, message: object = "") -> None:
        super().__init__(message)
        self.message = str(message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ConfigError(ServerError):
    """Configuration could not be read, parsed or written."""

    prefix = "Configuration error"


class NetworkError(ServerError):
    """A network operation failed."""

    prefix = "Network error"


class PluginError(ServerError):
    """A plugin could not be registered or run."""

    prefix = "Plugin error"


class ProtocolError(ServerError):
    """A client violated the wire protocol."""

    prefix = "Protocol error"


class LoggingError(ServerError):
    """Logging could not be set up."""

    prefix = "Logging error"


class ServerIOError(ServerError):
    """An input/output operation failed."""

    prefix = "I/O error"

    @classmethod
    def from_os_error(cls, err: OSError) -> "ServerIOError":
        """Wrap an operating-system error."""
        return cls(str(err))


class AuthError(ServerError):
    """Authentication or authorization failed."""

    prefix = "Authentication error"


class InitError(ServerError):
    """A component failed to initialize."""

    prefix = "Initialization error"