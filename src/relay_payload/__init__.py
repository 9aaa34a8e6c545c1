"""
relay-payload
Relay input object mutations with client mutation ids
"""

__version__ = "0.1.0"

from .config import settings
from .envelope import InputEnvelope
from .errors import EntropyUnavailableError, MutationError, RelayPayloadError
from .ids import generate_client_mutation_id
from .mutation import resolve_with_input
from .results import Err, MappingPayload, Ok, OpaquePayload, ResolutionResult, classify_payload

__all__ = [
    "settings",
    "__version__",
    "InputEnvelope",
    "EntropyUnavailableError",
    "MutationError",
    "RelayPayloadError",
    "generate_client_mutation_id",
    "resolve_with_input",
    "Err",
    "MappingPayload",
    "Ok",
    "OpaquePayload",
    "ResolutionResult",
    "classify_payload",
]
