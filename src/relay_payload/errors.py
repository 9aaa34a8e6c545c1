"""Exceptions raised by relay-payload."""

from graphql import GraphQLError


class RelayPayloadError(Exception):
    """Base exception for relay-payload."""

    pass


class EntropyUnavailableError(RelayPayloadError):
    """Raised when no random bytes can be drawn for a client mutation id."""

    pass


class MutationError(GraphQLError):
    """Failure reason of a mutation resolver that is not itself an exception."""

    pass
