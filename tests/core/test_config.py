"""
Test global configuration and module level helpers

Tests for the default factory, extpack.register_type, extpack.pack /
extpack.unpack and environment driven defaults.
"""
import msgpack
import pytest

import extpack
from extpack.core.config import (
    clear_config,
    get_allow_unknown_ext,
    get_config,
    get_default_factory,
    register_type,
    set_allow_unknown_ext,
    set_default_factory,
)
from extpack.core.errors import UnknownExtTypeError
from extpack.core.factory import Factory


class Celsius:
    def __init__(self, degrees):
        self.degrees = degrees

    def __eq__(self, other):
        return isinstance(other, Celsius) and other.degrees == self.degrees

    def to_msgpack_ext(self):
        return self.degrees.to_bytes(2, "big", signed=True)

    @classmethod
    def from_msgpack_ext(cls, data):
        return cls(int.from_bytes(data, "big", signed=True))


class TestDefaultFactory:
    def test_default_factory_is_shared(self):
        assert get_default_factory() is get_default_factory()
        assert get_config().get_default_factory() is get_default_factory()

    def test_register_type_uses_default_factory(self):
        register_type(10, Celsius)
        assert get_default_factory().is_type_registered(Celsius)

    def test_clear_config_replaces_default_factory(self):
        before = get_default_factory()
        register_type(10, Celsius)
        clear_config()

        assert get_default_factory() is not before
        assert not get_default_factory().is_type_registered(Celsius)

    def test_set_default_factory(self):
        factory = Factory()
        factory.register_type(10, Celsius)
        set_default_factory(factory)
        assert extpack.unpack(extpack.pack(Celsius(-4))) == Celsius(-4)

    def test_set_default_factory_type_check(self):
        with pytest.raises(TypeError):
            set_default_factory(object())


class TestModuleHelpers:
    def test_pack_unpack(self):
        extpack.register_type(10, Celsius)
        value = {"inside": Celsius(21), "outside": Celsius(-3)}
        assert extpack.unpack(extpack.pack(value)) == value

    def test_aliases(self):
        assert extpack.load(extpack.dump([1, "a"])) == [1, "a"]

    def test_unknown_ext_is_strict_by_default(self):
        data = extpack.Packer().write_ext(10, b"\x00\x01").to_bytes()
        with pytest.raises(UnknownExtTypeError):
            extpack.unpack(data)

    def test_unknown_ext_allowed_per_call(self):
        data = extpack.Packer().write_ext(10, b"\x00\x01").to_bytes()
        assert extpack.unpack(data, allow_unknown_ext=True) == msgpack.ExtType(10, b"\x00\x01")

    def test_unknown_ext_allowed_globally(self):
        set_allow_unknown_ext(True)
        data = extpack.Packer().write_ext(10, b"\x00\x01").to_bytes()
        assert extpack.unpack(data) == msgpack.ExtType(10, b"\x00\x01")


class TestEnvironment:
    @pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
    def test_allow_unknown_ext_env(self, monkeypatch, value, expected):
        monkeypatch.setenv("EXTPACK_ALLOW_UNKNOWN_EXT", value)
        clear_config()
        assert get_allow_unknown_ext() is expected

    def test_allow_unknown_ext_default(self, monkeypatch):
        monkeypatch.delenv("EXTPACK_ALLOW_UNKNOWN_EXT", raising=False)
        clear_config()
        assert get_allow_unknown_ext() is False
