from typing import Any

from packline.core.errors import DecodeFailed, EncodeFailed
from packline.core.models.options import FormatKind
from packline.core.models.record import Record
from packline.core.ports.serializer import Serializer


class Codec:
    """
    Converts a Record to and from the bytes of one of the supported formats.

    The format set is closed: each FormatKind maps to exactly one injected
    Serializer. Decoding is total, any malformed input surfaces as
    DecodeFailed.
    """

    def __init__(
        self,
        plain_text: Serializer,
        compact_binary_map: Serializer,
        self_describing_document: Serializer,
    ) -> None:
        self._plain_text = plain_text
        self._compact_binary_map = compact_binary_map
        self._self_describing_document = self_describing_document

    def serializer_for(self, format: FormatKind) -> Serializer:
        match FormatKind(format):
            case FormatKind.PLAIN_TEXT:
                return self._plain_text
            case FormatKind.COMPACT_BINARY_MAP:
                return self._compact_binary_map
            case FormatKind.SELF_DESCRIBING_DOCUMENT:
                return self._self_describing_document

    def encode(self, record: Record, format: FormatKind) -> bytes:
        if not isinstance(record, Record):
            raise EncodeFailed(
                f"expected a Record, got {type(record).__name__}",
                format=format
            )

        try:
            record.check()
        except (TypeError, ValueError) as ex:
            raise EncodeFailed(str(ex), format=format) from ex

        return self.serializer_for(format).serialize(record.to_dict())

    def decode(self, data: bytes, format: FormatKind) -> Record:
        message: Any = self.serializer_for(format).deserialize(data)

        try:
            return Record.from_dict(message)
        except (TypeError, ValueError) as ex:
            raise DecodeFailed(f"{format}: {ex}", format=format) from ex
