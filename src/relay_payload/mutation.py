"""
Relay input object mutations.

`resolve_with_input` wraps a designer resolver so that it can be exposed as a
mutation field taking a single `input` argument with a client mutation id.
The designer resolver only sees the business fields of the input; the client
mutation id is echoed back in the payload, or generated when the caller did
not send one.

    def simple_mutation(input, info):
        return Ok({"result": input["input_data"] * 2})

    resolver = resolve_with_input(simple_mutation)
    resolver({"input": {"input_data": 2, "client_mutation_id": "abc"}}, info)
    # Ok(value={"result": 4, "client_mutation_id": "abc"})
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from .envelope import InputEnvelope, has_malformed_input
from .ids import default_id_generator
from .logging import get_logger, reset_client_mutation_id, set_client_mutation_id
from .results import attach_client_mutation_id

logger = get_logger(__name__)

DesignerResolver = Callable[[dict[str, Any], Any], Any]
MutationResolver = Callable[[Mapping[str, Any], Any], Any]


def resolve_with_input(
    designer_resolver: DesignerResolver,
    *,
    generate_id: Callable[[], str] | None = None,
) -> MutationResolver:
    """Apply the Relay input/payload contract to `designer_resolver`.

    Args:
        designer_resolver: Called as `designer_resolver(inner_input, info)` and
            expected to return an `Ok` or `Err` result, or an awaitable of one
        generate_id: Produces a client mutation id when the caller omitted it.
            Defaults to an id of the configured length.

    Returns:
        Resolver called as `resolver(arguments, info)`. It is async exactly
        when the designer resolver returns an awaitable.
    """
    make_id = generate_id or default_id_generator

    @functools.wraps(designer_resolver)
    def resolver(arguments: Mapping[str, Any], info: Any) -> Any:
        envelope = InputEnvelope.from_arguments(arguments)

        if envelope is None:
            if has_malformed_input(arguments):
                logger.warning(
                    "Discarding malformed mutation input",
                    resolver=_resolver_name(designer_resolver),
                    input_type=type(arguments["input"]).__name__,
                )
            return designer_resolver({}, info)

        client_mutation_id = envelope.client_mutation_id
        if client_mutation_id is None:
            client_mutation_id = make_id()
            logger.debug(
                "Generated client mutation id",
                resolver=_resolver_name(designer_resolver),
                client_mutation_id=client_mutation_id,
            )

        token = set_client_mutation_id(client_mutation_id)
        try:
            result = designer_resolver(envelope.inner_input, info)
        finally:
            reset_client_mutation_id(token)

        if inspect.isawaitable(result):
            return _attach_when_resolved(result, client_mutation_id)

        return attach_client_mutation_id(result, client_mutation_id)

    return resolver


async def _attach_when_resolved(pending: Awaitable[Any], client_mutation_id: str) -> Any:
    token = set_client_mutation_id(client_mutation_id)
    try:
        result = await pending
    finally:
        reset_client_mutation_id(token)

    return attach_client_mutation_id(result, client_mutation_id)


def _resolver_name(resolver: Callable[..., Any]) -> str:
    return getattr(resolver, "__qualname__", None) or repr(resolver)
