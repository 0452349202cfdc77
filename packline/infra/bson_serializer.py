from typing import Any

import bson
from bson.errors import BSONError

from packline.core.errors import DecodeFailed, EncodeFailed
from packline.core.ports.serializer import Serializer


class BsonSerializer(Serializer):
    """
    BSON implementation of the Serializer interface
    (self-describing document format).

    Every element carries its own type tag, so an absent key and a key
    holding an empty string are distinct on the wire.
    """
    def serialize(self, message: dict[str, Any]) -> bytes:
        try:
            return bson.encode(message)
        except (BSONError, TypeError, ValueError, OverflowError) as ex:
            raise EncodeFailed(f"bson: {ex}") from ex

    HEADER_SIZE: int = 4

    def deserialize(self, data: bytes) -> Any:
        data = bytes(data)

        # the document must span the whole buffer
        if len(data) < self.HEADER_SIZE:
            raise DecodeFailed(f"bson: {len(data)} byte(s) is too short for a document")

        size = int.from_bytes(data[:self.HEADER_SIZE], "little", signed=True)
        if size != len(data):
            raise DecodeFailed(f"bson: document size {size} does not match buffer size {len(data)}")

        try:
            return bson.decode(data)
        except (BSONError, TypeError, ValueError) as ex:
            raise DecodeFailed(f"bson: {ex}") from ex
