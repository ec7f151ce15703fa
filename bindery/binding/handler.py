# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Binds the parameters of a plain Python callable through a `BindingContext`.

Each parameter becomes a `ValueDescriptor` named after the parameter and typed
by its annotation. Parameters are resolved one by one with the context's
resolve-then-bind pipeline, falling back to the parameter default.

Functions:
- descriptors_from_callable: Build value descriptors from a callable's signature.
- bind_handler: Resolve every parameter to a keyword argument.
- invoke_handler: Resolve every parameter and call the handler.
"""
from __future__ import annotations

import inspect
from typing import Any, Callable, get_type_hints

from bindery.binding.binding_context import BindingContext
from bindery.binding.value_descriptor import ValueDescriptor
from bindery.exceptions import InvalidArgumentError, MissingArgumentError
from bindery.logger import logger

_BINDABLE_KINDS = (
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def descriptors_from_callable(func: Callable[..., Any]) -> list[ValueDescriptor]:
    """
    Infer one `ValueDescriptor` per keyword-bindable parameter of `func`.

    Parameters without an annotation accept any type. `*args`, `**kwargs` and
    positional-only parameters are skipped.

    Raises:
        InvalidArgumentError: If `func` is not callable.
    """
    if not callable(func):
        raise InvalidArgumentError(f"{func!r} is not callable.")

    signature = inspect.signature(func)
    try:
        hints = get_type_hints(func)
    except (NameError, TypeError):
        logger.debug("Could not evaluate type hints of %r", func)
        hints = {}

    descriptors = []
    for name, param in signature.parameters.items():
        if param.kind not in _BINDABLE_KINDS:
            continue
        if name in hints:
            value_type = hints[name]
        elif param.annotation is inspect.Parameter.empty:
            value_type = object
        else:
            value_type = param.annotation
        has_default = param.default is not inspect.Parameter.empty
        descriptors.append(
            ValueDescriptor(
                value_name=name,
                value_type=value_type,
                has_default=has_default,
                default=param.default if has_default else None,
            )
        )
    return descriptors


def bind_handler(context: BindingContext, func: Callable[..., Any]) -> dict[str, Any]:
    """
    Resolve every parameter of `func` to a keyword argument.

    Raises:
        MissingArgumentError: If a parameter has neither a value source that
            produces a value nor a default.
    """
    kwargs: dict[str, Any] = {}
    for descriptor in descriptors_from_callable(func):
        value_source = context.try_get_value_source(descriptor)
        bound_value = (
            context.try_bind(descriptor, value_source) if value_source else None
        )
        if bound_value is not None:
            kwargs[descriptor.value_name] = bound_value.value
        elif descriptor.has_default:
            kwargs[descriptor.value_name] = descriptor.default
        else:
            raise MissingArgumentError(descriptor.value_name)
    return kwargs


def invoke_handler(context: BindingContext, func: Callable[..., Any]) -> Any:
    """Bind the parameters of `func` and call it."""
    kwargs = bind_handler(context, func)
    logger.debug("Invoking %s with %s", getattr(func, "__name__", func), kwargs)
    return func(**kwargs)
