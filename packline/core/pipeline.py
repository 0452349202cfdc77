from collections.abc import Callable
from typing import TypeVar

from packline.core.codec import Codec
from packline.core.compressor import Compressor
from packline.core.errors import PacklineError, PipelineError, Stage
from packline.core.models.options import Options
from packline.core.models.record import Record

T = TypeVar("T")


class Pipeline:
    """
    Composes the Codec and the Compressor in both directions:

        encode: Record -> serialize -> gzip -> base64 -> str
        decode: str -> base64 -> gunzip -> deserialize -> Record

    Each call is synchronous and stateless: buffers are owned by the call,
    nothing is cached, and the pipeline can be shared between threads.
    The first failing step aborts the call with a PipelineError naming
    the stage; no partial result is ever returned.
    """

    def __init__(self, codec: Codec, compressor: Compressor) -> None:
        self._codec = codec
        self._compressor = compressor

    @property
    def codec(self) -> Codec:
        return self._codec

    @property
    def compressor(self) -> Compressor:
        return self._compressor

    def run_encode(self, record: Record, options: Options | None = None) -> str:
        options = options or Options()

        serialized = self._stage(
            Stage.SERIALIZATION, self._codec.encode, record, options.format
        )
        compressed = self._stage(
            Stage.COMPRESSION, self._compressor.compress, serialized, options.level
        )
        return self._stage(
            Stage.TEXT_ENCODING, self._compressor.encode_text, compressed, options.alphabet
        )

    def run_decode(self, text: str, options: Options | None = None) -> Record:
        options = options or Options()

        compressed = self._stage(
            Stage.TEXT_DECODING, self._compressor.decode_text, text, options.alphabet
        )
        serialized = self._stage(
            Stage.DECOMPRESSION, self._compressor.decompress, compressed
        )
        return self._stage(
            Stage.DESERIALIZATION, self._codec.decode, serialized, options.format
        )

    @staticmethod
    def _stage(stage: Stage, func: Callable[..., T], *args) -> T:
        try:
            return func(*args)
        except PacklineError as ex:
            raise PipelineError(stage, ex) from ex
