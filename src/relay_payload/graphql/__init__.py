"""GraphQL engine integrations for Relay input mutations."""

from .extensions import ClientMutationIdExtension
from .resolvers import field_resolver, unwrap_result

__all__ = ["ClientMutationIdExtension", "field_resolver", "unwrap_result"]
