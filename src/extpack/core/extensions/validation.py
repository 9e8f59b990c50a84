"""
Argument validation for extension type registration

These checks run before anything is written to a registry. None of them
mutate state, so a failed registration never leaves a partial entry behind.
"""

import inspect
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from extpack.core.errors import ExtTypeRangeError, TypeMismatchError
from extpack.core.extensions.options import TypeRegistrationOptions
from extpack.core.types import EXT_CODE_MAX, EXT_CODE_MIN, is_valid_ext_code


def validate_ext_code(code: Any) -> int:
    """
    Check an extension type code

    Args:
        code: Candidate code

    Returns:
        The code as int

    Raises:
        TypeMismatchError: If code is not an integer
        ExtTypeRangeError: If code does not fit a signed byte
    """
    # bool is an int subclass but never a meaningful type code
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeMismatchError(
            f"extension type code must be an Integer, got {type(code).__name__}"
        )
    if not is_valid_ext_code(code):
        raise ExtTypeRangeError(
            f"integer {code} too big to convert to signed char "
            f"(expected {EXT_CODE_MIN}..{EXT_CODE_MAX})"
        )
    return int(code)


def validate_ext_class(cls: Any) -> type:
    """
    Check that cls is a concrete, instantiable class

    Raises:
        TypeMismatchError: For non-classes, abstract classes and Protocols
    """
    if not isinstance(cls, type):
        raise TypeMismatchError(f"expected Class but found {type(cls).__name__}")
    if inspect.isabstract(cls):
        raise TypeMismatchError(f"expected a concrete Class but {cls.__name__} is abstract")
    if getattr(cls, "_is_protocol", False):
        raise TypeMismatchError(f"expected a concrete Class but {cls.__name__} is a Protocol")
    return cls


def validate_registration_options(options: Any) -> TypeRegistrationOptions:
    """
    Check and parse the options argument of register_type

    Raises:
        TypeMismatchError: If options is not a mapping
    """
    if not isinstance(options, Mapping):
        raise TypeMismatchError(f"expected Hash but found {type(options).__name__}")
    try:
        return TypeRegistrationOptions.model_validate(
            {str(key): value for key, value in options.items()}
        )
    except ValidationError as e:
        raise TypeMismatchError(f"invalid register_type options: {e}") from e


__all__ = [
    "validate_ext_code",
    "validate_ext_class",
    "validate_registration_options",
]
