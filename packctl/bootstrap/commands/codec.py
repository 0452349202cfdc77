import argparse

from packctl.bootstrap.deps import get_dispatcher
from packctl.core.model import Reply
from packline.core.models.options import Options
from packline.core.models.record import Record
from packline.core.pipeline import Pipeline

dispatcher = get_dispatcher()


@dispatcher.command("encode")
def cmd_encode(
    pipeline: Pipeline,
    options: Options,
    namespace: argparse.Namespace
) -> Reply:
    text = pipeline.run_encode(Record(value=namespace.value), options)
    return Reply(
        type="ok",
        data={"text": text}
    )


@dispatcher.command("decode")
def cmd_decode(
    pipeline: Pipeline,
    options: Options,
    namespace: argparse.Namespace
) -> Reply:
    record = pipeline.run_decode(namespace.text, options)
    return Reply(
        type="ok",
        data={"record": record.to_dict()}
    )
