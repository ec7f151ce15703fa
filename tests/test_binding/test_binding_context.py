from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from bindery.binding import (
    BindingContext,
    BoundValue,
    ServiceProviderValueSource,
    SymbolValueSource,
    ValueDescriptor,
    ValueSource,
)
from bindery.console import console as default_console
from bindery.definitions import (
    ArgumentArity,
    ArgumentDefinition,
    CommandDefinition,
    SymbolDefinition,
)
from bindery.exceptions import InvalidArgumentError
from bindery.help import HelpBuilder
from bindery.parse_result import ParseResult, Symbol


class Database:
    pass


class FailingValueSource(ValueSource):
    def __init__(self):
        self.calls = 0

    def try_get_value(self, value_descriptor, context):
        self.calls += 1
        return False, None


def test_requires_parse_result():
    with pytest.raises(InvalidArgumentError):
        BindingContext(None)


def test_invalid_argument_error_is_value_error():
    with pytest.raises(ValueError):
        BindingContext(None)


def test_resolves_matching_symbol(tool_parse_result):
    context = BindingContext(tool_parse_result)
    name_symbol = tool_parse_result.root.children[0]

    source = context.try_get_value_source(ValueDescriptor("name", str))

    assert isinstance(source, SymbolValueSource)
    assert source.symbol is name_symbol


@pytest.mark.parametrize(
    "descriptor,expected",
    [
        (ValueDescriptor("name", str), "alice"),
        (ValueDescriptor("count", int), 3),
        (ValueDescriptor("verbose", bool), True),
        (ValueDescriptor("path", list[Path]), [Path("a"), Path("b")]),
        (ValueDescriptor("path", object), [Path("a"), Path("b")]),
    ],
)
def test_binds_symbol_values(tool_parse_result, descriptor, expected):
    context = BindingContext(tool_parse_result)

    source = context.try_get_value_source(descriptor)
    bound = context.try_bind(descriptor, source)

    assert isinstance(bound, BoundValue)
    assert bound.value == expected
    assert bound.value_descriptor is descriptor
    assert bound.value_source is source


def test_match_is_independent_of_surrounding_symbols():
    target = SymbolDefinition(
        ("--target",), argument=ArgumentDefinition("target", arity=ArgumentArity.ONE)
    )
    noise = [SymbolDefinition((f"--noise-{index}",)) for index in range(5)]
    command = CommandDefinition("cmd", children=[*noise[:2], target, *noise[2:]])
    target_symbol = Symbol(target, values=["x"])
    parse_result = ParseResult(
        Symbol(
            command,
            children=[
                *(Symbol(definition) for definition in noise[:2]),
                target_symbol,
                *(Symbol(definition) for definition in noise[2:]),
            ],
        )
    )
    context = BindingContext(parse_result)

    source = context.try_get_value_source(ValueDescriptor("target", str))

    assert source == SymbolValueSource(target_symbol)


def test_first_compatible_symbol_in_traversal_order_wins():
    inner_name = SymbolDefinition(
        ("--name",), argument=ArgumentDefinition("name", arity=ArgumentArity.ONE)
    )
    outer_name = SymbolDefinition(
        ("--name",), argument=ArgumentDefinition("name", arity=ArgumentArity.ONE)
    )
    sub = CommandDefinition("sub", children=[inner_name])
    root = CommandDefinition("root", children=[sub, outer_name])
    inner_symbol = Symbol(inner_name, values=["inner"])
    parse_result = ParseResult(
        Symbol(
            root,
            children=[
                Symbol(sub, children=[inner_symbol]),
                Symbol(outer_name, values=["outer"]),
            ],
        )
    )
    context = BindingContext(parse_result)
    descriptor = ValueDescriptor("name", str)

    source = context.try_get_value_source(descriptor)

    assert source.symbol is inner_symbol
    assert context.try_bind(descriptor, source).value == "inner"


def test_symbol_takes_precedence_over_service(tool_parse_result):
    context = BindingContext(tool_parse_result)
    context.add_service(str, lambda: "from service")

    source = context.try_get_value_source(ValueDescriptor("name", str))

    assert isinstance(source, SymbolValueSource)


def test_falls_back_to_registered_service(tool_parse_result):
    context = BindingContext(tool_parse_result)
    database = Database()
    calls = []

    def factory():
        calls.append(1)
        return database

    context.add_service(Database, factory)
    descriptor = ValueDescriptor("db", Database)

    source = context.try_get_value_source(descriptor)

    assert isinstance(source, ServiceProviderValueSource)
    assert calls == []

    bound = context.try_bind(descriptor, source)
    assert bound.value is database
    assert calls == [1]


def test_service_factory_runs_on_every_bind(tool_parse_result):
    context = BindingContext(tool_parse_result)
    context.add_service(Database, Database)
    descriptor = ValueDescriptor("db", Database)
    source = context.try_get_value_source(descriptor)

    first = context.try_bind(descriptor, source).value
    second = context.try_bind(descriptor, source).value

    assert isinstance(first, Database)
    assert first is not second


def test_add_service_overwrites_previous_factory(tool_parse_result):
    context = BindingContext(tool_parse_result)
    context.add_service(Database, lambda: "first")
    context.add_service(Database, lambda: "second")
    descriptor = ValueDescriptor("db", Database)

    bound = context.try_bind(descriptor, context.try_get_value_source(descriptor))

    assert bound.value == "second"


def test_no_source_returns_none(tool_parse_result):
    context = BindingContext(tool_parse_result)

    assert context.try_get_value_source(ValueDescriptor("db", Database)) is None
    assert context.try_get_value_source(ValueDescriptor("missing", str)) is None


def test_incompatible_type_is_not_matched(tool_parse_result):
    context = BindingContext(tool_parse_result)

    assert context.try_get_value_source(ValueDescriptor("count", str)) is None


def test_try_bind_returns_none_when_source_fails(tool_parse_result):
    context = BindingContext(tool_parse_result)
    source = FailingValueSource()

    assert context.try_bind(ValueDescriptor("name", str), source) is None
    assert source.calls == 1


def test_try_bind_returns_none_for_symbol_without_value():
    option = SymbolDefinition(
        ("--output",), argument=ArgumentDefinition("file", arity=ArgumentArity.ONE)
    )
    command = CommandDefinition("cmd", children=[option])
    parse_result = ParseResult(Symbol(command, children=[Symbol(option)]))
    context = BindingContext(parse_result)
    descriptor = ValueDescriptor("output", str)

    source = context.try_get_value_source(descriptor)

    assert isinstance(source, SymbolValueSource)
    assert context.try_bind(descriptor, source) is None


def test_try_bind_returns_none_for_unregistered_service(tool_parse_result):
    context = BindingContext(tool_parse_result)

    bound = context.try_bind(
        ValueDescriptor("db", Database), ServiceProviderValueSource()
    )

    assert bound is None


@pytest.mark.parametrize(
    "service_type,factory",
    [
        (None, lambda: None),
        (Database, None),
        (Database, "not callable"),
    ],
)
def test_add_service_rejects_invalid_input(tool_parse_result, service_type, factory):
    context = BindingContext(tool_parse_result)

    with pytest.raises(InvalidArgumentError):
        context.add_service(service_type, factory)


def test_default_console(tool_parse_result):
    context = BindingContext(tool_parse_result)

    assert context.console is default_console


def test_explicit_console(tool_parse_result):
    console = Console(file=StringIO())
    context = BindingContext(tool_parse_result, console=console)

    assert context.console is console


def test_console_factory_is_invoked_once(tool_parse_result):
    created = []

    def console_factory(context):
        console = Console(file=StringIO())
        created.append((context, console))
        return console

    context = BindingContext(tool_parse_result, console_factory=console_factory)
    assert created == []

    first = context.console
    second = context.console

    assert first is second
    assert created == [(context, first)]
    assert context.console_factory is None


def test_console_factory_reentrant_read(tool_parse_result):
    fallback = Console(file=StringIO())
    seen = []

    def console_factory(context):
        seen.append(context.console)
        return Console(file=StringIO())

    context = BindingContext(
        tool_parse_result, console=fallback, console_factory=console_factory
    )

    materialized = context.console

    assert seen == [fallback]
    assert materialized is not fallback
    assert context.console is materialized


def test_default_services(tool_parse_result):
    console = Console(file=StringIO())
    context = BindingContext(tool_parse_result, console=console)

    for value_type, expected in [
        (ParseResult, tool_parse_result),
        (BindingContext, context),
        (Console, console),
    ]:
        descriptor = ValueDescriptor("service", value_type)
        source = context.try_get_value_source(descriptor)
        assert isinstance(source, ServiceProviderValueSource)
        assert context.try_bind(descriptor, source).value is expected


def test_help_builder_uses_context_console(tool_parse_result):
    console = Console(file=StringIO())
    context = BindingContext(tool_parse_result, console=console)

    help_builder = context.help_builder

    assert isinstance(help_builder, HelpBuilder)
    assert help_builder.console is console


def test_optional_descriptor_binds_parsed_value(tool_parse_result):
    context = BindingContext(tool_parse_result)
    descriptor = ValueDescriptor("count", int | None)

    source = context.try_get_value_source(descriptor)

    assert isinstance(source, SymbolValueSource)
    assert context.try_bind(descriptor, source).value == 3


def test_generic_arguments_must_match(tool_parse_result):
    context = BindingContext(tool_parse_result)

    assert context.try_get_value_source(ValueDescriptor("path", list[int])) is None
