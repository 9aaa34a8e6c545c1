"""
Strawberry integration.

`ClientMutationIdExtension` applies the Relay input/payload contract to a
Strawberry mutation whose resolver takes a single `input` argument:

    @strawberry.input
    class IntroduceShipInput:
        ship_name: str
        client_mutation_id: str | None = None

    @strawberry.type
    class IntroduceShipPayload:
        ship: Ship
        client_mutation_id: str | None = None

    @strawberry.type
    class Mutation:
        @strawberry.mutation(extensions=[ClientMutationIdExtension()])
        def introduce_ship(self, input: IntroduceShipInput) -> IntroduceShipPayload:
            return IntroduceShipPayload(ship=Ship(name=input.ship_name))

The resolver receives the input without its client mutation id, and the
payload it returns is echoed the caller's id (or a generated one).
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any

import strawberry
from strawberry.extensions import FieldExtension

from ..envelope import INPUT_ARGUMENT
from ..mutation import resolve_with_input
from ..results import CLIENT_MUTATION_ID, Ok


def _input_fields(input_obj: Any) -> Any:
    """Mapping view of a Strawberry input object.

    Values that are neither dataclasses nor mappings are returned as is, and
    are discarded as malformed input by the adapter.
    """
    if dataclasses.is_dataclass(input_obj) and not isinstance(input_obj, type):
        values = {f.name: getattr(input_obj, f.name) for f in dataclasses.fields(input_obj)}
    elif isinstance(input_obj, Mapping):
        values = dict(input_obj)
    else:
        return input_obj

    if values.get(CLIENT_MUTATION_ID) is strawberry.UNSET:
        values[CLIENT_MUTATION_ID] = None
    return values


def _init_field_names(obj: Any) -> set[str]:
    return {f.name for f in dataclasses.fields(obj) if f.init}


class _MutationCall:
    """State of one resolution of an extended field."""

    def __init__(self, source: Any, kwargs: dict[str, Any]):
        self.source = source
        self.has_input = INPUT_ARGUMENT in kwargs
        self.input_obj = kwargs.pop(INPUT_ARGUMENT, None)
        self.kwargs = kwargs
        self.payload: Any = None

    @property
    def arguments(self) -> dict[str, Any]:
        if self.input_obj is None:
            return {}
        return {INPUT_ARGUMENT: _input_fields(self.input_obj)}

    def call_kwargs(self, inner_input: dict[str, Any]) -> dict[str, Any]:
        """Resolver keyword arguments with the input rebuilt from `inner_input`."""
        if not self.has_input:
            return dict(self.kwargs)

        input_obj = self.input_obj
        if dataclasses.is_dataclass(input_obj) and not isinstance(input_obj, type):
            names = _init_field_names(input_obj)
            changes = {key: value for key, value in inner_input.items() if key in names}
            if CLIENT_MUTATION_ID in names:
                changes[CLIENT_MUTATION_ID] = None
            input_obj = dataclasses.replace(input_obj, **changes)
        elif isinstance(input_obj, Mapping):
            input_obj = dict(inner_input)

        return {**self.kwargs, INPUT_ARGUMENT: input_obj}

    def to_result(self, value: Any) -> Ok[Any]:
        """Wrap the resolver's return value, exposing dataclass payloads as mappings."""
        if (
            dataclasses.is_dataclass(value)
            and not isinstance(value, type)
            and CLIENT_MUTATION_ID in _init_field_names(value)
        ):
            self.payload = value
            return Ok({f.name: getattr(value, f.name) for f in dataclasses.fields(value) if f.init})

        return Ok(value)

    def from_result(self, result: Any) -> Any:
        """Unwrap the adapted result back into what Strawberry should return."""
        if not isinstance(result, Ok):
            return result

        if self.payload is not None and isinstance(result.value, Mapping):
            return dataclasses.replace(
                self.payload, **{CLIENT_MUTATION_ID: result.value[CLIENT_MUTATION_ID]}
            )

        return result.value


class ClientMutationIdExtension(FieldExtension):
    """Echo (or generate) the client mutation id of a Relay input mutation."""

    def __init__(self, generate_id: Callable[[], str] | None = None):
        self.generate_id = generate_id

    def resolve(
        self, next_: Callable[..., Any], source: Any, info: strawberry.Info, **kwargs: Any
    ) -> Any:
        call = _MutationCall(source, kwargs)

        def designer_resolver(inner_input: dict[str, Any], info: strawberry.Info) -> Ok[Any]:
            return call.to_result(next_(call.source, info, **call.call_kwargs(inner_input)))

        adapted = resolve_with_input(designer_resolver, generate_id=self.generate_id)
        return call.from_result(adapted(call.arguments, info))

    async def resolve_async(
        self, next_: Callable[..., Any], source: Any, info: strawberry.Info, **kwargs: Any
    ) -> Any:
        call = _MutationCall(source, kwargs)

        async def designer_resolver(
            inner_input: dict[str, Any], info: strawberry.Info
        ) -> Ok[Any]:
            value = await next_(call.source, info, **call.call_kwargs(inner_input))
            return call.to_result(value)

        adapted = resolve_with_input(designer_resolver, generate_id=self.generate_id)
        return call.from_result(await adapted(call.arguments, info))
