"""Tests for the handler registry."""

import pytest

from nmeadecode import GGAData, HandlerRegistry


def _noop(_record):
    pass


class TestHandlerRegistry:
    def test_register_by_code_and_class(self):
        registry = HandlerRegistry()
        registry.register("rmc", _noop)
        registry.register(GGAData, print)
        assert registry["RMC"] is _noop
        assert registry["GGA"] is print
        assert set(registry) == {"RMC", "GGA"}
        assert len(registry) == 2

    def test_register_replaces_previous_handler(self):
        registry = HandlerRegistry({"RMC": print})
        registry.register("RMC", _noop)
        assert registry["RMC"] is _noop

    def test_handles_decorator(self):
        registry = HandlerRegistry()

        @registry.handles("GSV")
        def on_gsv(_gsv):
            pass

        assert registry["GSV"] is on_gsv

    def test_unregister(self):
        registry = HandlerRegistry({"RMC": _noop})
        registry.unregister("RMC")
        registry.unregister("GGA")
        assert "RMC" not in registry
        assert registry.get("RMC") is None

    def test_unsupported_type_rejected(self):
        registry = HandlerRegistry()
        with pytest.raises(ValueError, match="XYZ"):
            registry.register("XYZ", _noop)

    def test_marker_type_accepted(self):
        registry = HandlerRegistry({"WPL": _noop})
        assert "WPL" in registry

    def test_lookup_is_case_insensitive(self):
        registry = HandlerRegistry()
        registry.register("rmc", _noop)
        assert "rmc" in registry
        assert "RMC" in registry
        assert registry["rmc"] is _noop

    def test_lookup_by_record_class(self):
        registry = HandlerRegistry({"GGA": _noop})
        assert registry[GGAData] is _noop

    def test_non_string_key_is_missing(self):
        assert 1 not in HandlerRegistry({"RMC": _noop})
