import types
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union, get_args, get_origin


class InvalidConfiguration(ValueError):
    """
    Raised when a stringifier, generator or options object is built with
    values it cannot honour (e.g. a cell length below 4).
    """


STRING_TYPES: frozenset[type] = frozenset({str})

PRIMITIVE_TYPES: frozenset[type] = frozenset({
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
})


def nullable(tp: Any) -> Any:
    """
    Widen a type tag to its optional form. Already-optional tags and
    ``NoneType`` are returned unchanged.
    """
    if tp is None or tp is type(None) or tp is Any:
        return tp
    if type(None) in get_args(tp):
        return tp
    return Optional[tp]


def unwrap_optional(tp: Any) -> Any:
    """
    ``Optional[int]`` -> ``int``. Any other union (or a plain type) is
    returned as-is.
    """
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def is_string_like(tp: Any) -> bool:
    return unwrap_optional(tp) in STRING_TYPES


def is_primitive_like(tp: Any) -> bool:
    return unwrap_optional(tp) in PRIMITIVE_TYPES
