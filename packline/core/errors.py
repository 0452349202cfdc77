from enum import StrEnum


class Stage(StrEnum):
    """
    Step of the pipeline a failure happened in.
    """
    SERIALIZATION = "serialization"
    COMPRESSION = "compression"
    TEXT_ENCODING = "text_encoding"
    TEXT_DECODING = "text_decoding"
    DECOMPRESSION = "decompression"
    DESERIALIZATION = "deserialization"


class PacklineError(Exception):
    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.message = message
        self.context = kwargs


class CodecError(PacklineError):
    pass


class EncodeFailed(CodecError):
    pass


class DecodeFailed(CodecError):
    pass


class CompressionError(PacklineError):
    pass


class CompressionInternalError(CompressionError):
    """
    The compression library failed on an in-memory buffer.
    This signals a defect, not bad input.
    """


class CorruptStream(CompressionError):
    pass


class TextDecodeError(PacklineError):
    pass


class InvalidCharacter(TextDecodeError):
    def __init__(self, message: str, position: int, character: str, **kwargs):
        super().__init__(message, **kwargs)
        self.position = position
        self.character = character


class InvalidPadding(TextDecodeError):
    pass


class PipelineError(PacklineError):
    def __init__(self, stage: Stage, cause: PacklineError, **kwargs):
        super().__init__(f"{stage} failed: {cause.message}", **kwargs)
        self.stage = stage
        self.cause = cause


class BridgeError(PacklineError):
    """
    Host-visible failure raised by the bridge when a pipeline call fails.
    """
    def __init__(self, message: str, stage: Stage | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage
