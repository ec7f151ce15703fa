# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueDescriptor`, the typed and named description of a handler
parameter awaiting a value, and `can_bind`, the compatibility predicate used to
match a parsed symbol against such a descriptor.

Both `ValueDescriptor` and the parsed `Symbol` satisfy the
`ValueDescriptorLike` protocol, so either side of `can_bind` can be a symbol or
a descriptor.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import UnionType
from typing import Any, Protocol, Union, get_args, get_origin, runtime_checkable

from bindery.definitions import remove_prefix


@runtime_checkable
class ValueDescriptorLike(Protocol):
    """Anything with a value name and a value type."""

    @property
    def value_name(self) -> str: ...

    @property
    def value_type(self) -> Any: ...


@dataclass(frozen=True)
class ValueDescriptor:
    """
    Describes a parameter that needs a value.

    Attributes:
        value_name (str): Logical name of the parameter.
        value_type (Any): Expected type of the value. `object` accepts anything.
        has_default (bool): True if the parameter declares a default value.
        default (Any): The default value, if any.
    """

    value_name: str
    value_type: Any = object
    has_default: bool = False
    default: Any = None


def normalize_name(name: str) -> str:
    """Fold an alias or parameter name into a comparable form."""
    return remove_prefix(name).replace("-", "").replace("_", "").casefold()


def is_type_compatible(source_type: Any, target_type: Any) -> bool:
    if target_type in (object, Any):
        return True
    if source_type == target_type:
        return True
    if get_origin(target_type) in (Union, UnionType):
        return any(
            is_type_compatible(source_type, member) for member in get_args(target_type)
        )
    source = get_origin(source_type) or source_type
    target = get_origin(target_type) or target_type
    if not isinstance(source, type) or not isinstance(target, type):
        return False
    if not issubclass(source, target):
        return False
    target_args = get_args(target_type)
    if not target_args:
        return True
    source_args = get_args(source_type)
    if len(source_args) != len(target_args):
        return False
    return all(
        is_type_compatible(source_arg, target_arg)
        for source_arg, target_arg in zip(source_args, target_args)
    )


def can_bind(from_: ValueDescriptorLike, to: ValueDescriptorLike) -> bool:
    """
    Return True if a value described by `from_` can satisfy `to`.

    Names match once option prefixes, dashes and underscores are removed and
    case is folded. Types match when `to` accepts anything, is the same type, or
    is a base class of `from_`'s type. A union target matches if any member
    does, and parameterized generics also compare their arguments pairwise.
    """
    if not from_.value_name or not to.value_name:
        return False
    if normalize_name(from_.value_name) != normalize_name(to.value_name):
        return False
    return is_type_compatible(from_.value_type, to.value_type)
