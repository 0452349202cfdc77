"""
Convenience entry points bound to the default pipeline.

    >>> from packline.api import encode, decode
    >>> from packline.core.models.record import Record
    >>> decode(encode(Record(value="hello"))) == Record(value="hello")
    True
"""
from packline.bootstrap.deps import get_pipeline
from packline.core.models.options import Options
from packline.core.models.record import Record


def encode(record: Record, options: Options | None = None) -> str:
    return get_pipeline().run_encode(record, options)


def decode(text: str, options: Options | None = None) -> Record:
    return get_pipeline().run_decode(text, options)
