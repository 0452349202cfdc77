from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for turning a flattened record into bytes of a
    single wire format, and back.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    - safe against malformed input: library failures are reported as
      EncodeFailed / DecodeFailed, never as the library's own exceptions
    """

    def serialize(self, message: dict[str, Any]) -> bytes:
        """Encode a plain mapping into the format's byte representation."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes of this format into a plain Python object."""
