import json
from typing import Any

from packline.core.errors import DecodeFailed, EncodeFailed
from packline.core.ports.serializer import Serializer


class JsonSerializer(Serializer):
    """
    JSON implementation of the Serializer interface (plain text format).

    - human readable
    - compact separators, no ASCII escaping: output is UTF-8
    - input must be valid UTF-8; other JSON encodings are rejected
    - repeated keys in an object are rejected
    """
    SEPARATORS = (",", ":")

    @staticmethod
    def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        for key, value in pairs:
            if key in obj:
                raise ValueError(f"duplicate key {key!r}")
            obj[key] = value
        return obj

    def serialize(self, message: dict[str, Any]) -> bytes:
        try:
            text = json.dumps(
                message,
                ensure_ascii=False,
                allow_nan=False,
                separators=self.SEPARATORS,
            )
            return text.encode("utf-8")
        except (TypeError, ValueError) as ex:
            raise EncodeFailed(f"json: {ex}") from ex

    def deserialize(self, data: bytes) -> Any:
        try:
            return json.loads(
                bytes(data).decode("utf-8"),
                object_pairs_hook=self._unique_keys,
            )
        except (ValueError, RecursionError) as ex:
            raise DecodeFailed(f"json: {ex}") from ex
