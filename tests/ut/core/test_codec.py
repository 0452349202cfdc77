import json
import struct

import bson
import msgpack
import pytest

from packline.core.errors import DecodeFailed, EncodeFailed
from packline.core.models.options import FormatKind
from packline.core.models.record import Record

FORMATS = list(FormatKind)

TEXTS = [
    "",
    "hello",
    'quotes " and \\ backslashes \\"',
    "line\nbreaks\r\n\ttabs \x00 nul",
    "unicode: héllo wörld ✓ 日本語 🚀",
    '{"value":"nested json"}',
]


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
@pytest.mark.parametrize("text", TEXTS)
def test_codec_round_trip(codec, fmt, text):
    record = Record(value=text)
    assert codec.decode(codec.encode(record, fmt), fmt) == record


@pytest.mark.ut
def test_codec_plain_text_is_compact_json(codec):
    assert codec.encode(Record(value="hello"), FormatKind.PLAIN_TEXT) == b'{"value":"hello"}'


@pytest.mark.ut
def test_codec_plain_text_keeps_utf8(codec):
    data = codec.encode(Record(value="é"), FormatKind.PLAIN_TEXT)
    assert data == '{"value":"é"}'.encode("utf-8")


@pytest.mark.ut
def test_codec_compact_binary_map_is_msgpack(codec):
    data = codec.encode(Record(value="hello"), FormatKind.COMPACT_BINARY_MAP)
    assert data == b"\x81\xa5value\xa5hello"


@pytest.mark.ut
def test_codec_self_describing_document_is_bson(codec):
    data = codec.encode(Record(value="hello"), FormatKind.SELF_DESCRIBING_DOCUMENT)
    assert bson.decode(data) == {"value": "hello"}
    assert struct.unpack("<i", data[:4])[0] == len(data)


@pytest.mark.ut
def test_codec_formats_produce_distinct_bytes(codec):
    record = Record(value="hello")
    encoded = {fmt: codec.encode(record, fmt) for fmt in FORMATS}

    assert len(set(encoded.values())) == len(FORMATS)
    for fmt, data in encoded.items():
        assert codec.decode(data, fmt) == record


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
@pytest.mark.parametrize("value", [None, 5, 1.5, b"bytes", ["a"], {"a": "b"}])
def test_codec_encode_rejects_unsupported_value(codec, fmt, value):
    with pytest.raises(EncodeFailed):
        codec.encode(Record(value=value), fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_encode_rejects_non_record(codec, fmt):
    with pytest.raises(EncodeFailed):
        codec.encode({"value": "hello"}, fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_encode_rejects_invalid_utf8_text(codec, fmt):
    with pytest.raises(EncodeFailed):
        codec.encode(Record(value="bad \udcff"), fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_decode_empty_input(codec, fmt):
    with pytest.raises(DecodeFailed):
        codec.decode(b"", fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_decode_truncated_at_every_offset(codec, fmt):
    data = codec.encode(Record(value="hello world"), fmt)

    for end in range(len(data)):
        with pytest.raises(DecodeFailed):
            codec.decode(data[:end], fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_decode_garbage(codec, fmt):
    with pytest.raises(DecodeFailed):
        codec.decode(b"\xff\xfe\xfd\xfc", fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_decode_trailing_bytes(codec, fmt):
    data = codec.encode(Record(value="hello"), fmt)
    with pytest.raises(DecodeFailed):
        codec.decode(data + b"\x00\x00", fmt)


@pytest.mark.ut
@pytest.mark.parametrize(
    "fmt, data",
    [
        (FormatKind.PLAIN_TEXT, b'{"value":"\xff"}'),
        (FormatKind.COMPACT_BINARY_MAP, b"\x81\xa5value\xa1\xff"),
        (
            FormatKind.SELF_DESCRIBING_DOCUMENT,
            struct.pack("<i", 18) + b"\x02value\x00" + struct.pack("<i", 2) + b"\xff\x00" + b"\x00",
        ),
    ],
)
def test_codec_decode_invalid_utf8(codec, fmt, data):
    with pytest.raises(DecodeFailed):
        codec.decode(data, fmt)


def _pack(fmt, message):
    match fmt:
        case FormatKind.PLAIN_TEXT:
            return json.dumps(message).encode()
        case FormatKind.COMPACT_BINARY_MAP:
            return msgpack.packb(message, use_bin_type=True)
        case FormatKind.SELF_DESCRIBING_DOCUMENT:
            return bson.encode(message)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
@pytest.mark.parametrize(
    "message",
    [
        {},
        {"other": "hello"},
        {"value": "hello", "extra": "field"},
        {"value": 1},
        {"value": None},
        {"value": ["hello"]},
    ],
)
def test_codec_decode_strict_schema(codec, fmt, message):
    with pytest.raises(DecodeFailed):
        codec.decode(_pack(fmt, message), fmt)


@pytest.mark.ut
@pytest.mark.parametrize("data", [b'{"value":1,"value":"a"}', b'{"value":"a","value":"b"}'])
def test_codec_decode_plain_text_repeated_field(codec, data):
    with pytest.raises(DecodeFailed):
        codec.decode(data, FormatKind.PLAIN_TEXT)


@pytest.mark.ut
def test_codec_decode_binary_value_is_not_text(codec):
    data = msgpack.packb({"value": b"hello"}, use_bin_type=True)
    with pytest.raises(DecodeFailed):
        codec.decode(data, FormatKind.COMPACT_BINARY_MAP)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", [FormatKind.PLAIN_TEXT, FormatKind.COMPACT_BINARY_MAP])
def test_codec_decode_top_level_not_a_map(codec, fmt):
    with pytest.raises(DecodeFailed):
        codec.decode(_pack(fmt, ["hello"]), fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_decode_empty_value_distinct_from_absent(codec, fmt):
    assert codec.decode(_pack(fmt, {"value": ""}), fmt) == Record(value="")

    with pytest.raises(DecodeFailed):
        codec.decode(_pack(fmt, {}), fmt)


@pytest.mark.ut
@pytest.mark.parametrize("fmt", FORMATS)
def test_codec_serializer_for_each_format(codec, fmt):
    assert codec.serializer_for(fmt) is codec.serializer_for(fmt.value)
