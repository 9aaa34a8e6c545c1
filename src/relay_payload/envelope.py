"""Input envelope of a Relay mutation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .results import CLIENT_MUTATION_ID

INPUT_ARGUMENT = "input"


@dataclass(frozen=True)
class InputEnvelope:
    """The single `input` argument of a mutation, split into its parts."""

    fields: Mapping[str, Any] = field(default_factory=dict)
    client_mutation_id: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any] | None) -> InputEnvelope | None:
        """Build the envelope from raw field arguments.

        Returns None when there is no mapping-shaped `input` argument. A null
        client mutation id counts as absent.
        """
        if not isinstance(arguments, Mapping):
            return None

        raw = arguments.get(INPUT_ARGUMENT)
        if not isinstance(raw, Mapping):
            return None

        return cls(
            fields={key: value for key, value in raw.items() if key != CLIENT_MUTATION_ID},
            client_mutation_id=raw.get(CLIENT_MUTATION_ID),
        )

    @property
    def inner_input(self) -> dict[str, Any]:
        """Business fields handed to the designer resolver."""
        return dict(self.fields)


def has_malformed_input(arguments: Mapping[str, Any] | None) -> bool:
    """True when `input` is present and non-null but not a mapping."""
    if not isinstance(arguments, Mapping):
        return False
    raw = arguments.get(INPUT_ARGUMENT)
    return raw is not None and not isinstance(raw, Mapping)
