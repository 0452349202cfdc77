from functools import lru_cache

from packctl.core.cmd import PackCmd
from packctl.core.dispatcher import CommandDispatcher
from packctl.infra.format_renderer import RENDERERS
from packline.bootstrap.deps import get_pipeline


@lru_cache
def get_dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@lru_cache
def get_cli() -> PackCmd:
    renderers = {name: factory() for name, factory in RENDERERS.items()}
    return PackCmd(get_pipeline(), get_dispatcher(), renderers)
