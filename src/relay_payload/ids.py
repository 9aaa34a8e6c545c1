"""
Client mutation id generation
"""

import base64
import secrets
from collections.abc import Callable

from .config import settings
from .errors import EntropyUnavailableError

DEFAULT_LENGTH = 32


def generate_client_mutation_id(
    length: int = DEFAULT_LENGTH,
    random_bytes: Callable[[int], bytes] = secrets.token_bytes,
) -> str:
    """Generate an opaque, URL-safe client mutation id.

    Draws `length` bytes from `random_bytes`, encodes them as base64 with the
    URL-safe alphabet and no padding, and keeps the first `length` characters.
    The encoding of n bytes is always at least n characters long.

    Args:
        length: Number of characters in the generated id
        random_bytes: Entropy source returning the requested number of bytes

    Returns:
        Generated id

    Raises:
        ValueError: If length is not a positive integer
        EntropyUnavailableError: If the entropy source fails or runs short
    """
    if length < 1:
        raise ValueError(f"Client mutation id length must be positive, got {length}")

    try:
        raw = random_bytes(length)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailableError(f"Entropy source unavailable: {e}") from e

    if len(raw) < length:
        raise EntropyUnavailableError(
            f"Entropy source returned {len(raw)} bytes, expected {length}"
        )

    encoded = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    return encoded[:length]


def default_id_generator() -> str:
    """Generate a client mutation id of the configured length."""
    return generate_client_mutation_id(settings.client_mutation_id_length)
