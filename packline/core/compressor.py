import base64
import binascii
import re
import zlib

from packline.core.errors import (
    CompressionInternalError,
    CorruptStream,
    InvalidCharacter,
    InvalidPadding,
)
from packline.core.models.options import Alphabet, check_level


class Compressor:
    """
    gzip compression of byte buffers plus the base64 text transcoder.

    Compressed payloads are single gzip members (RFC 1952): a 10-byte
    header, a raw deflate stream, then CRC32 and ISIZE trailers. The
    header and both trailers are verified on decompression.
    """
    GZIP_WBITS: int = 16 + zlib.MAX_WBITS
    PAD: str = "="

    _INVALID = {
        Alphabet.STANDARD: re.compile(r"[^A-Za-z0-9+/]"),
        Alphabet.URL_SAFE: re.compile(r"[^A-Za-z0-9\-_]"),
    }

    def compress(self, data: bytes, level: int) -> bytes:
        level = check_level(level)

        try:
            compressor = zlib.compressobj(level, zlib.DEFLATED, self.GZIP_WBITS)
            return compressor.compress(data) + compressor.flush()
        except (zlib.error, MemoryError) as ex:
            raise CompressionInternalError(f"gzip: {ex}", level=level) from ex

    def decompress(self, data: bytes) -> bytes:
        if not data:
            return b""

        decompressor = zlib.decompressobj(self.GZIP_WBITS)
        try:
            out = decompressor.decompress(data)
            out += decompressor.flush()
        except zlib.error as ex:
            raise CorruptStream(f"gzip: {ex}") from ex

        if not decompressor.eof:
            raise CorruptStream("gzip: truncated stream")

        if decompressor.unused_data:
            raise CorruptStream(
                f"gzip: {len(decompressor.unused_data)} trailing byte(s) after stream"
            )

        return out

    def encode_text(self, data: bytes, alphabet: Alphabet) -> str:
        match Alphabet(alphabet):
            case Alphabet.STANDARD:
                return base64.b64encode(data).decode("ascii")
            case Alphabet.URL_SAFE:
                return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")

    def decode_text(self, text: str, alphabet: Alphabet) -> bytes:
        alphabet = Alphabet(alphabet)
        body = text.rstrip(self.PAD)
        padding = len(text) - len(body)

        if m := self._INVALID[alphabet].search(body):
            if m.group() == self.PAD:
                raise InvalidPadding(f"unexpected padding at position {m.start()}")
            raise InvalidCharacter(
                f"invalid character {m.group()!r} at position {m.start()}",
                position=m.start(),
                character=m.group(),
            )

        # a single leftover symbol never encodes a whole byte
        if len(body) % 4 == 1:
            raise InvalidPadding(f"invalid length {len(body)}")

        match alphabet:
            case Alphabet.STANDARD:
                if padding != -len(body) % 4:
                    raise InvalidPadding(
                        f"expected {-len(body) % 4} padding character(s), got {padding}"
                    )
                decoder = base64.b64decode
            case Alphabet.URL_SAFE:
                if padding:
                    raise InvalidPadding("padding is not allowed in url-safe text")
                text = body + self.PAD * (-len(body) % 4)
                decoder = base64.urlsafe_b64decode

        try:
            data = decoder(text)
        except (binascii.Error, ValueError) as ex:
            raise InvalidPadding(str(ex)) from ex

        # unused low bits of the last symbol must be zero
        if body and self.encode_text(data, alphabet).rstrip(self.PAD) != body:
            position = len(body) - 1
            raise InvalidCharacter(
                f"non-canonical trailing character {body[position]!r} at position {position}",
                position=position,
                character=body[position],
            )

        return data
