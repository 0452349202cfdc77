from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class Record:
    """
    The structured value carried through the pipeline.

    A record is flattened to a plain mapping before serialization so that
    every wire format sees the same shape:

        {"value": "<text>"}
    """
    value: str
    """
    Arbitrary text payload. Empty strings are valid and round-trip as-is.
    """

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.field_names()}

    def check(self) -> None:
        """
        Raise TypeError if a field holds something other than text, and
        ValueError if the text cannot be represented as UTF-8 (e.g. lone
        surrogates), which every supported format requires.
        """
        for name in self.field_names():
            v = getattr(self, name)
            if not isinstance(v, str):
                raise TypeError(
                    f"field '{name}' must be str, got {type(v).__name__}"
                )
            if not v.isascii():
                try:
                    v.encode("utf-8")
                except UnicodeEncodeError as ex:
                    raise ValueError(
                        f"field '{name}' is not valid UTF-8 text: {ex.reason}"
                    ) from ex

    @classmethod
    def from_dict(cls, data: Any) -> "Record":
        """
        Build a record from a decoded mapping.

        Matching is strict: the mapping must hold exactly the known fields,
        each of them a str. A missing field is an error, an empty string
        is not.
        """
        if not isinstance(data, dict):
            raise TypeError(f"expected a map, got {type(data).__name__}")

        expected = cls.field_names()

        unknown = [k for k in data if k not in expected]
        if unknown:
            raise ValueError(f"unknown field(s): {', '.join(map(repr, unknown))}")

        missing = [name for name in expected if name not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(map(repr, missing))}")

        record = cls(**data)
        record.check()
        return record
