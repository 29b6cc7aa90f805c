"""Errors raised by plugins while they run."""

from __future__ import annotations


class PluginFailure(Exception):
    """Base class for failures inside a plugin."""

    prefix = "Plugin failure"

    def __init__(self, message: object = "") -> None:
        super().__init__(message)
        self.message = str(message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class PluginInitError(PluginFailure):
    """The plugin could not initialize."""

    prefix = "Plugin initialization error"


class PluginExecutionError(PluginFailure):
    """The plugin failed while executing."""

    prefix = "Plugin execution error"


class PluginCommunicationError(PluginFailure):
    """The plugin could not communicate with the server."""

    prefix = "Plugin communication error"


class PluginResourceError(PluginFailure):
    """The plugin ran out of, or mishandled, a resource."""

    prefix = "Plugin resource error"