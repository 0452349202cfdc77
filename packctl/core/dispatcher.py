import argparse
import functools
from typing import Protocol

from packctl.core.model import Reply
from packline.core.models.options import Options
from packline.core.pipeline import Pipeline


class CommandHandler(Protocol):
    def __call__(
        self,
        pipeline: Pipeline,
        options: Options,
        namespace: argparse.Namespace,
    ) -> Reply:
        ...


class CommandDispatcher:
    def __init__(self) -> None:
        self._commands: dict[tuple[str, ...], CommandHandler] = {}

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return list(self._commands)

    def dispatch(
        self,
        *arguments: str,
        pipeline: Pipeline,
        options: Options,
        namespace: argparse.Namespace
    ) -> Reply:
        command = self._commands.get(arguments)
        if command is None:
            raise RuntimeError(f"Unknown '{' '.join(arguments)}' Command")
        return command(pipeline, options, namespace)

    def command(self, *arguments: str):
        def decorator(func: CommandHandler):

            @functools.wraps(func)
            def wrapper(
                pipeline: Pipeline,
                options: Options,
                namespace: argparse.Namespace,
            ) -> Reply:
                return func(pipeline, options, namespace)

            self._commands[arguments] = wrapper

            return wrapper

        return decorator
