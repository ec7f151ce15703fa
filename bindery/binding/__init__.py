"""
Bindery CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binding_context import BindingContext, ConsoleFactory
from .bound_value import BoundValue
from .handler import bind_handler, descriptors_from_callable, invoke_handler
from .service_registry import ServiceRegistry
from .value_descriptor import ValueDescriptor, ValueDescriptorLike, can_bind
from .value_source import ServiceProviderValueSource, SymbolValueSource, ValueSource

__all__ = [
    "BindingContext",
    "BoundValue",
    "ConsoleFactory",
    "ServiceProviderValueSource",
    "ServiceRegistry",
    "SymbolValueSource",
    "ValueDescriptor",
    "ValueDescriptorLike",
    "ValueSource",
    "bind_handler",
    "can_bind",
    "descriptors_from_callable",
    "invoke_handler",
]
