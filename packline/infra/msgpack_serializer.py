import msgpack
from typing import Any

from packline.core.errors import DecodeFailed, EncodeFailed
from packline.core.ports.serializer import Serializer


class MsgPackSerializer(Serializer):
    """
    MsgPack-based implementation of the Serializer interface
    (compact binary map format).

    - deterministic binary encoding
    - compact, length-prefixed strings: no escaping
    - str and bin are kept distinct (use_bin_type)
    - a buffer must hold exactly one object
    """
    def serialize(self, message: dict[str, Any]) -> bytes:
        try:
            return msgpack.packb(message, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as ex:
            raise EncodeFailed(f"msgpack: {ex}") from ex

    def deserialize(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False, strict_map_key=True)
        except (ValueError, TypeError, msgpack.UnpackException) as ex:
            raise DecodeFailed(f"msgpack: {ex or 'incomplete input'}") from ex
