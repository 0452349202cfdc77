import json
from functools import lru_cache

from pydantic import ValidationError

from packline.bootstrap.config.settings import PacklineConfig
from packline.bridge.host import HostBridge
from packline.bridge.worker import PipelineWorker
from packline.core.codec import Codec
from packline.core.compressor import Compressor
from packline.core.pipeline import Pipeline
from packline.infra.bson_serializer import BsonSerializer
from packline.infra.json_serializer import JsonSerializer
from packline.infra.msgpack_serializer import MsgPackSerializer


@lru_cache
def get_codec() -> Codec:
    return Codec(
        plain_text=JsonSerializer(),
        compact_binary_map=MsgPackSerializer(),
        self_describing_document=BsonSerializer(),
    )


@lru_cache
def get_pipeline() -> Pipeline:
    return Pipeline(get_codec(), Compressor())


@lru_cache
def get_worker() -> PipelineWorker:
    config = get_config()
    return PipelineWorker(get_pipeline(), max_workers=config.worker.max_workers)


@lru_cache
def get_bridge() -> HostBridge:
    config = get_config()
    return HostBridge(
        pipeline=get_pipeline(),
        options=config.to_options(),
        worker=get_worker(),
    )


@lru_cache
def get_config() -> PacklineConfig:
    try:
        return PacklineConfig()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(map(str, err['loc']))}: {err['msg']}")
        raise SystemExit("\n".join(msg))
