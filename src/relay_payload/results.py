"""
Resolution results and payload shapes.

A designer resolver reports its outcome as `Ok(value)` or `Err(reason)`.
Only a successful value that is mapping-shaped can carry a client mutation
id; every other value is opaque to the adapter.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

CLIENT_MUTATION_ID = "client_mutation_id"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful resolution."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed resolution carrying an arbitrary reason."""

    reason: E


ResolutionResult = Ok[Any] | Err[Any]


@dataclass(frozen=True)
class MappingPayload:
    """Payload a client mutation id can be attached to."""

    mapping: Mapping[str, Any]


@dataclass(frozen=True)
class OpaquePayload:
    """Payload passed through untouched."""

    value: Any


def classify_payload(value: Any) -> MappingPayload | OpaquePayload:
    """Tag a successful value by whether it is mapping-shaped."""
    if isinstance(value, Mapping):
        return MappingPayload(value)
    return OpaquePayload(value)


def attach_client_mutation_id(result: Any, client_mutation_id: str) -> Any:
    """Echo `client_mutation_id` into a successful mapping result.

    The returned mapping is a new dict; an existing `client_mutation_id` key
    is overwritten. Failures, non-mapping values and anything that is not a
    resolution result are returned unchanged.
    """
    if not isinstance(result, Ok):
        return result

    payload = classify_payload(result.value)
    if isinstance(payload, OpaquePayload):
        return result

    return Ok({**payload.mapping, CLIENT_MUTATION_ID: client_mutation_id})
