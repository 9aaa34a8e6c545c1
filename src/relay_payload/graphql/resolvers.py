"""
graphql-core integration.

graphql-core resolvers return plain values and signal failures by raising.
`field_resolver` adapts a designer resolver written against `Ok`/`Err`
results into a resolver that can be set on a `GraphQLField`.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from graphql import GraphQLResolveInfo

from ..errors import MutationError
from ..logging import get_logger
from ..mutation import DesignerResolver, resolve_with_input
from ..results import Err, Ok

logger = get_logger(__name__)


def unwrap_result(result: Any) -> Any:
    """Convert a resolution result to what graphql-core expects.

    `Ok` yields its value. `Err` raises its reason when that is an exception,
    and a `MutationError` carrying the reason's text otherwise. Other values
    are returned as they are.
    """
    if isinstance(result, Ok):
        return result.value

    if isinstance(result, Err):
        reason = result.reason
        if isinstance(reason, Exception):
            raise reason
        logger.info("Mutation resolver returned an error", reason=str(reason))
        raise MutationError(str(reason))

    return result


async def _unwrap_when_resolved(pending: Awaitable[Any]) -> Any:
    return unwrap_result(await pending)


def field_resolver(
    designer_resolver: DesignerResolver,
    *,
    generate_id: Callable[[], str] | None = None,
) -> Callable[..., Any]:
    """Build a graphql-core field resolver for a Relay input mutation.

    The field must declare a single `input` argument whose input object maps
    the client mutation id to `client_mutation_id` (for instance with
    `GraphQLInputField(GraphQLString, out_name="client_mutation_id")`).
    """
    adapted = resolve_with_input(designer_resolver, generate_id=generate_id)

    def resolve(root: Any, info: GraphQLResolveInfo, **arguments: Any) -> Any:
        _ = root

        result = adapted(arguments, info)
        if inspect.isawaitable(result):
            return _unwrap_when_resolved(result)

        return unwrap_result(result)

    return resolve
