# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the value sources a `BindingContext` can resolve a descriptor to.

The set of sources is closed:
- `SymbolValueSource`: reads the values captured by a parsed `Symbol`.
- `ServiceProviderValueSource`: asks the context's `ServiceRegistry` for a value
  of the descriptor's type.

Each source makes exactly one retrieval attempt per call and reports the
outcome as `(found, value)`. A miss is not an exception.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from bindery.binding.value_descriptor import ValueDescriptorLike
from bindery.parse_result import Symbol

if TYPE_CHECKING:
    from bindery.binding.binding_context import BindingContext


class ValueSource(ABC):
    """A capability that can attempt to produce a value for a descriptor."""

    @abstractmethod
    def try_get_value(
        self, value_descriptor: ValueDescriptorLike, context: BindingContext
    ) -> tuple[bool, Any]:
        raise NotImplementedError("try_get_value must be implemented by subclasses")


class SymbolValueSource(ValueSource):
    """Supplies the value captured by a parsed symbol."""

    def __init__(self, symbol: Symbol) -> None:
        self.symbol = symbol

    def try_get_value(
        self, value_descriptor: ValueDescriptorLike, context: BindingContext
    ) -> tuple[bool, Any]:
        return self.symbol.try_get_value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolValueSource):
            return False
        return self.symbol is other.symbol

    def __hash__(self) -> int:
        return hash((SymbolValueSource, id(self.symbol)))

    def __repr__(self) -> str:
        return f"SymbolValueSource(symbol={self.symbol.name!r})"


class ServiceProviderValueSource(ValueSource):
    """Supplies a value from the context's service registry, keyed by type."""

    def try_get_value(
        self, value_descriptor: ValueDescriptorLike, context: BindingContext
    ) -> tuple[bool, Any]:
        registry = context.service_registry
        if value_descriptor.value_type not in registry:
            return False, None
        return True, registry.get_service(value_descriptor.value_type)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ServiceProviderValueSource)

    def __hash__(self) -> int:
        return hash(ServiceProviderValueSource)

    def __repr__(self) -> str:
        return "ServiceProviderValueSource()"
