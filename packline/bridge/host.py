import json
import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from packline.bridge.worker import Callback, PipelineWorker
from packline.core.errors import BridgeError, PipelineError
from packline.core.models.options import Options, check_level
from packline.core.models.record import Record
from packline.core.pipeline import Pipeline


class HostBridge:
    """
    Boundary between a host runtime and the pipeline.

    The bridge receives host-native values (a JSON payload string and a
    numeric compression level for encoding, a text for decoding), checks
    and converts them into a Record and Options, and converts pipeline
    failures into a BridgeError. Argument problems are reported the way a
    host would: TypeError for a wrong type, ValueError for a bad value.

    Format and alphabet come from the bridge's base Options, so encode and
    decode are always symmetric.
    """

    def __init__(
        self,
        pipeline: Pipeline,
        options: Options | None = None,
        worker: PipelineWorker | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._options = options or Options()
        self._worker = worker
        self._logger = logging.getLogger("packline.bridge.host")

    @property
    def options(self) -> Options:
        return self._options

    def serialize(self, payload: str, level: int | float) -> str:
        record, options = self._encode_args(payload, level)
        return self._call(self._pipeline.run_encode, record, options)

    def deserialize(self, text: str) -> str:
        self._check_text(text)
        record = self._call(self._pipeline.run_decode, text, self._options)
        return record.value

    def serialize_async(self, payload: str, level: int | float, callback: Callback) -> Future:
        record, options = self._encode_args(payload, level)
        return self._require_worker().submit(
            self._call, self._pipeline.run_encode, record, options, callback=callback
        )

    def deserialize_async(self, text: str, callback: Callback) -> Future:
        self._check_text(text)
        return self._require_worker().submit(self.deserialize, text, callback=callback)

    def _call(self, func: Callable[..., Any], *args: Any) -> Any:
        self._logger.debug(f"Calling {func.__name__} with {args[-1]}")
        try:
            return func(*args)
        except PipelineError as ex:
            self._logger.warning(f"{func.__name__} failed: {ex.message}")
            raise BridgeError(ex.message, stage=ex.stage) from ex

    def _encode_args(self, payload: str, level: int | float) -> tuple[Record, Options]:
        return self._parse_payload(payload), self._options.replace(level=self._parse_level(level))

    def _require_worker(self) -> PipelineWorker:
        if self._worker is None:
            raise RuntimeError("No worker configured for asynchronous calls")
        return self._worker

    @staticmethod
    def _check_text(text: Any) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")

    @staticmethod
    def _parse_payload(payload: Any) -> Record:
        if not isinstance(payload, str):
            raise TypeError(f"payload must be a string, got {type(payload).__name__}")

        try:
            data = json.loads(payload)
        except (ValueError, RecursionError) as ex:
            raise ValueError(f"payload is not valid JSON: {ex}") from ex

        try:
            return Record.from_dict(data)
        except (TypeError, ValueError) as ex:
            raise ValueError(f"payload does not describe a record: {ex}") from ex

    @staticmethod
    def _parse_level(level: Any) -> int:
        if isinstance(level, bool) or not isinstance(level, (int, float)):
            raise TypeError(f"level must be a number, got {type(level).__name__}")

        if isinstance(level, float):
            if not level.is_integer():
                raise ValueError(f"level must be an integral number, got {level}")
            level = int(level)

        return check_level(level)
