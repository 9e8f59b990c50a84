"""
Exception types raised by extpack

Every error derives from ExtPackError and also from the closest builtin
exception, so callers may catch either ``ExtPackError`` or e.g. ``TypeError``.
"""


class ExtPackError(Exception):
    """Base class for all extpack errors"""


class ArityError(ExtPackError, TypeError):
    """Wrong number of arguments (register_type takes 2..3, Factory takes 0)"""


class ExtTypeRangeError(ExtPackError, ValueError):
    """Extension type code outside the signed byte range [-128, 127]"""


class TypeMismatchError(ExtPackError, TypeError):
    """An argument has the wrong kind of value (non-class, non-mapping, ...)"""


class HookResolutionError(TypeMismatchError, AttributeError):
    """A hook given by name does not exist on the associated type"""


class UnsetHookError(ExtPackError):
    """
    A registered extension type was used in a direction that has no hook

    Raised at pack time when the type was registered without a packer, and
    at unpack time when the code was registered without an unpacker.
    """


class UnknownExtTypeError(ExtPackError):
    """An ext frame carries a code with no registered decoder"""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"unexpected extension type {code}")


class MalformedFormatError(ExtPackError, ValueError):
    """Input bytes are not a single well-formed MessagePack object"""


__all__ = [
    "ExtPackError",
    "ArityError",
    "ExtTypeRangeError",
    "TypeMismatchError",
    "HookResolutionError",
    "UnsetHookError",
    "UnknownExtTypeError",
    "MalformedFormatError",
]
