"""Registry of server plugins and their lifecycle."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from rxserver.core.errors import PluginError


class Plugin(ABC):
    """Interface every plugin implements."""

    @abstractmethod
    def name(self) -> str:
        """The unique name the plugin is registered under."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the plugin for use."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release whatever the plugin holds."""


class PluginRegistry:
    """Holds plugins by name; a plugin is initialized when it is registered."""

    def __init__(self) -> None:
        self._plugins: dict[str, Plugin] = {}

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __iter__(self) -> Iterator[Plugin]:
        return iter(list(self._plugins.values()))

    def register(self, plugin: Plugin) -> None:
        """Initialize *plugin* and add it.

        Raises PluginError if a plugin of the same name is already registered;
        errors from initialization propagate and the plugin is not added.
        """
        name = plugin.name()
        if name in self._plugins:
            raise PluginError(f"Plugin '{name}' is already registered")
        plugin.initialize()
        self._plugins[name] = plugin

    def get_plugin(self, name: str) -> Plugin | None:
        return self._plugins.get(name)

    def initialize_all(self) -> None:
        """Initialize every plugin, stopping at the first failure."""
        for plugin in list(self._plugins.values()):
            plugin.initialize()

    def shutdown_all(self) -> None:
        """Shut down every plugin, stopping at the first failure."""
        for plugin in list(self._plugins.values()):
            plugin.shutdown()