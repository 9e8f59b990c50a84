"""
Test registration argument validation
"""
import abc
from types import MappingProxyType
from typing import Protocol

import pytest

from extpack.core.errors import ExtTypeRangeError, TypeMismatchError
from extpack.core.extensions.validation import (
    validate_ext_class,
    validate_ext_code,
    validate_registration_options,
)


class Shape(abc.ABC):
    @abc.abstractmethod
    def area(self):
        ...


class Rect(Shape):
    def area(self):
        return 0


class Encodable(Protocol):
    def to_msgpack_ext(self) -> bytes:
        ...


class EncodableImpl(Encodable):
    def to_msgpack_ext(self) -> bytes:
        return b""


class TestValidateExtCode:
    @pytest.mark.parametrize("code", [-128, -1, 0, 1, 127])
    def test_in_range(self, code):
        assert validate_ext_code(code) == code

    @pytest.mark.parametrize("code", [-129, 128, 256, -1000, 2 ** 40])
    def test_out_of_range(self, code):
        with pytest.raises(ExtTypeRangeError) as exc_info:
            validate_ext_code(code)
        assert isinstance(exc_info.value, ValueError)

    @pytest.mark.parametrize("code", ["1", 1.0, None, True])
    def test_not_an_integer(self, code):
        with pytest.raises(TypeMismatchError):
            validate_ext_code(code)


class TestValidateExtClass:
    @pytest.mark.parametrize("cls", [int, dict, Rect, EncodableImpl])
    def test_concrete_classes(self, cls):
        assert validate_ext_class(cls) is cls

    @pytest.mark.parametrize("value", [Rect(), "Rect", 1, None, len])
    def test_non_classes(self, value):
        with pytest.raises(TypeMismatchError):
            validate_ext_class(value)

    def test_abstract_class(self):
        with pytest.raises(TypeMismatchError, match="abstract"):
            validate_ext_class(Shape)

    def test_protocol(self):
        with pytest.raises(TypeMismatchError, match="Protocol"):
            validate_ext_class(Encodable)


class TestValidateRegistrationOptions:
    def test_dict(self):
        options = validate_registration_options({"packer": len, "unpacker": "load"})
        assert options.packer is len
        assert options.unpacker == "load"

    def test_missing_entries_default_to_none(self):
        options = validate_registration_options({})
        assert options.packer is None
        assert options.unpacker is None

    def test_any_mapping(self):
        options = validate_registration_options(MappingProxyType({"packer": len}))
        assert options.packer is len

    def test_unknown_keys_ignored(self):
        options = validate_registration_options({"packer": len, "optimized": True})
        assert options.packer is len

    @pytest.mark.parametrize("value", [[("packer", len)], "packer", 1, None, len])
    def test_non_mapping(self, value):
        with pytest.raises(TypeMismatchError):
            validate_registration_options(value)
