import argparse

from packctl.bootstrap.deps import get_dispatcher
from packctl.core.model import Reply
from packline.bootstrap.config.loader import get_configfile
from packline.core.models.options import Options
from packline.core.pipeline import Pipeline

dispatcher = get_dispatcher()


@dispatcher.command("config", "show")
def cmd_show(
    pipeline: Pipeline,
    options: Options,
    namespace: argparse.Namespace
) -> Reply:
    _ = pipeline, namespace
    configfile = get_configfile()
    return Reply(
        type="ok",
        data={
            "configfile": str(configfile) if configfile else None,
            "options": {
                "format": options.format,
                "level": options.level,
                "alphabet": options.alphabet,
            },
        }
    )
