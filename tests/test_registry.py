import pytest

from rxserver.core.errors import InitError, PluginError
from rxserver.plugins.registry import Plugin, PluginRegistry


class RecordingPlugin(Plugin):
    def __init__(self, plugin_name, fail_init=False, fail_shutdown=False):
        self._name = plugin_name
        self.fail_init = fail_init
        self.fail_shutdown = fail_shutdown
        self.init_calls = 0
        self.shutdown_calls = 0

    def name(self):
        return self._name

    def initialize(self):
        self.init_calls += 1
        if self.fail_init:
            raise InitError(f"{self._name} failed")

    def shutdown(self):
        self.shutdown_calls += 1
        if self.fail_shutdown:
            raise PluginError(f"{self._name} shutdown failed")


def test_plugin_is_abstract():
    with pytest.raises(TypeError):
        Plugin()


def test_register_initializes_plugin():
    registry = PluginRegistry()
    plugin = RecordingPlugin("alpha")
    registry.register(plugin)
    assert plugin.init_calls == 1
    assert registry.get_plugin("alpha") is plugin
    assert "alpha" in registry


def test_duplicate_registration_raises():
    registry = PluginRegistry()
    registry.register(RecordingPlugin("alpha"))
    second = RecordingPlugin("alpha")
    with pytest.raises(PluginError) as info:
        registry.register(second)
    assert "Plugin 'alpha' is already registered" in str(info.value)
    assert second.init_calls == 0
    assert len(registry) == 1


def test_failed_initialization_is_not_registered():
    registry = PluginRegistry()
    with pytest.raises(InitError):
        registry.register(RecordingPlugin("broken", fail_init=True))
    assert registry.get_plugin("broken") is None
    assert len(registry) == 0


def test_get_unknown_plugin_returns_none():
    assert PluginRegistry().get_plugin("missing") is None


def test_initialize_all_initializes_again():
    registry = PluginRegistry()
    for name in ("a", "b"):
        registry.register(RecordingPlugin(name))
    registry.initialize_all()
    assert [registry.get_plugin(name).init_calls for name in ("a", "b")] == [2, 2]


def test_shutdown_all_shuts_every_plugin_down():
    registry = PluginRegistry()
    for name in ("a", "b"):
        registry.register(RecordingPlugin(name))
    registry.shutdown_all()
    assert [registry.get_plugin(name).shutdown_calls for name in ("a", "b")] == [1, 1]


def test_shutdown_all_propagates_failure():
    registry = PluginRegistry()
    registry.register(RecordingPlugin("bad", fail_shutdown=True))
    with pytest.raises(PluginError):
        registry.shutdown_all()


def test_iteration_yields_registered_plugins():
    registry = PluginRegistry()
    plugins = [RecordingPlugin("a"), RecordingPlugin("b")]
    for plugin in plugins:
        registry.register(plugin)
    assert list(registry) == plugins