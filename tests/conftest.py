import pytest

from packline.bridge.worker import PipelineWorker
from packline.core.codec import Codec
from packline.core.compressor import Compressor
from packline.core.pipeline import Pipeline
from packline.infra.bson_serializer import BsonSerializer
from packline.infra.json_serializer import JsonSerializer
from packline.infra.msgpack_serializer import MsgPackSerializer
from packline.bootstrap.config.loader import CONFIG_ENV


@pytest.fixture
def codec() -> Codec:
    return Codec(
        plain_text=JsonSerializer(),
        compact_binary_map=MsgPackSerializer(),
        self_describing_document=BsonSerializer(),
    )


@pytest.fixture
def compressor() -> Compressor:
    return Compressor()


@pytest.fixture
def pipeline(codec, compressor) -> Pipeline:
    return Pipeline(codec, compressor)


@pytest.fixture
def worker(pipeline):
    w = PipelineWorker(pipeline, max_workers=2)
    try:
        yield w
    finally:
        w.close()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """
    Run with no configuration file and no PACKLINE_* variables in scope.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    for name in (
        "PACKLINE_CODEC__FORMAT",
        "PACKLINE_COMPRESSION__LEVEL",
        "PACKLINE_TEXT__ALPHABET",
        "PACKLINE_WORKER__MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
