# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `BindingContext`, the single point of truth for how a handler
parameter obtains its value during one parse/resolve cycle.

Resolution is a two step pipeline:

1. `try_get_value_source(descriptor)` picks a source. Parsed symbols are tried
   first, in traversal order, and the first symbol that `can_bind` to the
   descriptor wins. When no symbol matches and the service registry knows the
   descriptor's type, the registry becomes the source.
2. `try_bind(descriptor, source)` asks that source for the value exactly once.

Neither step raises when nothing is found; both return `None` and leave the
fallback (a default value, a "missing argument" message) to the caller.

The context also owns the output console. A console factory, when set, is
consumed on the first read of `console` and its result is kept for the rest of
the context's lifetime.

A context is not synchronized. Share it across threads only with external
locking.

Example:
    context = BindingContext(parse_result)
    context.add_service(Database, lambda: Database(url))
    source = context.try_get_value_source(ValueDescriptor("db", Database))
    bound = context.try_bind(descriptor, source) if source else None
"""
from __future__ import annotations

from typing import Any, Callable

from rich.console import Console

from bindery.binding.bound_value import BoundValue
from bindery.binding.service_registry import ServiceFactory, ServiceRegistry
from bindery.binding.value_descriptor import ValueDescriptorLike, can_bind
from bindery.binding.value_source import (
    ServiceProviderValueSource,
    SymbolValueSource,
    ValueSource,
)
from bindery.console import console as default_console
from bindery.exceptions import InvalidArgumentError
from bindery.help import HelpBuilder
from bindery.logger import logger
from bindery.parse_result import ParseResult

ConsoleFactory = Callable[["BindingContext"], Console]


class BindingContext:
    """
    Resolves value descriptors against a parse result and a service registry.

    Attributes:
        parse_result (ParseResult): The parsed command line being bound.
        service_registry (ServiceRegistry): Fallback lookup by value type.
        console_factory (ConsoleFactory | None): Pending console factory. Cleared
            on the first read of `console`.

    Default services:
        `ParseResult`, `BindingContext`, `Console` and `HelpBuilder` are always
        registered, so a handler parameter annotated with one of these types
        resolves without an explicit `add_service`.
    """

    def __init__(
        self,
        parse_result: ParseResult,
        console: Console | None = None,
        console_factory: ConsoleFactory | None = None,
    ) -> None:
        if parse_result is None:
            raise InvalidArgumentError("parse_result must not be None.")
        self.parse_result: ParseResult = parse_result
        self._console: Console = console or default_console
        self.console_factory: ConsoleFactory | None = console_factory
        self.service_registry = ServiceRegistry()
        self._add_default_services()

    def _add_default_services(self) -> None:
        self.service_registry.add(ParseResult, lambda: self.parse_result)
        self.service_registry.add(BindingContext, lambda: self)
        self.service_registry.add(Console, lambda: self.console)
        self.service_registry.add(HelpBuilder, lambda: HelpBuilder(self.console))

    @property
    def console(self) -> Console:
        if self.console_factory is not None:
            console_factory = self.console_factory
            self.console_factory = None
            self._console = console_factory(self)
            logger.debug("Materialized console from factory %r", console_factory)
        return self._console

    @property
    def help_builder(self) -> HelpBuilder:
        return self.service_registry.get_service(HelpBuilder)

    def add_service(self, service_type: Any, factory: ServiceFactory) -> None:
        """
        Register a factory producing values of `service_type`.

        The factory is not called here. It runs each time a descriptor of that
        type is bound through the service registry.

        Raises:
            InvalidArgumentError: If `service_type` or `factory` is None, or
                `factory` is not callable.
        """
        if service_type is None:
            raise InvalidArgumentError("service_type must not be None.")
        if factory is None:
            raise InvalidArgumentError("factory must not be None.")
        if not callable(factory):
            raise InvalidArgumentError(f"factory {factory!r} is not callable.")
        self.service_registry.add(service_type, factory)
        logger.debug("Registered service factory for %s", service_type)

    def try_get_value_source(
        self, value_descriptor: ValueDescriptorLike
    ) -> ValueSource | None:
        """
        Find where the value for `value_descriptor` should come from.

        Returns:
            ValueSource | None: A `SymbolValueSource` for the first compatible
                parsed symbol, else a `ServiceProviderValueSource` if the
                descriptor's type is registered, else None.
        """
        for symbol in self.parse_result.value_descriptors():
            if can_bind(from_=symbol, to=value_descriptor):
                logger.debug(
                    "Resolved '%s' to parsed symbol '%s'",
                    value_descriptor.value_name,
                    symbol.name,
                )
                return SymbolValueSource(symbol)

        if value_descriptor.value_type in self.service_registry.available_types:
            logger.debug(
                "Resolved '%s' to registered service %s",
                value_descriptor.value_name,
                value_descriptor.value_type,
            )
            return ServiceProviderValueSource()

        logger.debug("No value source for '%s'", value_descriptor.value_name)
        return None

    def try_bind(
        self, value_descriptor: ValueDescriptorLike, value_source: ValueSource
    ) -> BoundValue | None:
        """
        Ask `value_source` for a value once and wrap it in a `BoundValue`.

        Returns:
            BoundValue | None: The bound value, or None if the source produced
                nothing. No other source is tried.
        """
        found, value = value_source.try_get_value(value_descriptor, self)
        if not found:
            logger.debug(
                "%r produced no value for '%s'",
                value_source,
                value_descriptor.value_name,
            )
            return None
        return BoundValue(
            value=value,
            value_descriptor=value_descriptor,
            value_source=value_source,
        )

    def __repr__(self) -> str:
        return (
            f"BindingContext(parse_result={self.parse_result}, "
            f"services={self.service_registry!r})"
        )
