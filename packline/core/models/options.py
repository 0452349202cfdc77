from dataclasses import dataclass, replace
from enum import IntEnum, StrEnum
from typing import Any


class FormatKind(StrEnum):
    """
    Closed set of wire formats a Record can be serialized to.
    """
    PLAIN_TEXT = "plain_text"                              # JSON
    COMPACT_BINARY_MAP = "compact_binary_map"              # MessagePack
    SELF_DESCRIBING_DOCUMENT = "self_describing_document"  # BSON


class CompressionLevel(IntEnum):
    """
    Named gzip effort presets. Any integer in [MIN, MAX] is also valid.
    """
    NONE    = 0
    FASTEST = 1
    DEFAULT = 6
    BEST    = 9

    @classmethod
    def bounds(cls) -> tuple[int, int]:
        return cls.NONE.value, cls.BEST.value


class Alphabet(StrEnum):
    """
    Base64 variant used to turn compressed bytes into transportable text.
    """
    STANDARD = "standard"   # A-Z a-z 0-9 + /, padded with '='
    URL_SAFE = "url_safe"   # A-Z a-z 0-9 - _, no padding


def check_level(level: Any) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"compression level must be an int, got {type(level).__name__}")

    low, high = CompressionLevel.bounds()
    if not low <= level <= high:
        raise ValueError(f"compression level must be within [{low}, {high}], got {level}")

    return int(level)


@dataclass(frozen=True)
class Options:
    """
    Per-call configuration of the pipeline.

    Options are immutable: use `replace()` to derive a variant. The same
    Options value must be used to encode and to decode a payload, since
    neither the format nor the alphabet is recorded in the output.

    Decoding with the other alphabet is unsupported. It is rejected when
    the text holds padding or a character specific to one alphabet
    (`+/` or `-_`); a text made only of the shared characters, with no
    padding, is valid in both and decodes to the same bytes either way.
    """
    format: FormatKind = FormatKind.PLAIN_TEXT
    """
    Serialization format of the record.
    """

    level: int = CompressionLevel.DEFAULT
    """
    gzip compression level, 0 (store) to 9 (best).
    """

    alphabet: Alphabet = Alphabet.STANDARD
    """
    Base64 variant used on both the encode and the decode path.
    """

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "format", FormatKind(self.format))
        object.__setattr__(self, "level", check_level(self.level))
        object.__setattr__(self, "alphabet", Alphabet(self.alphabet))

    def replace(self, **changes: Any) -> "Options":
        return replace(self, **changes)
