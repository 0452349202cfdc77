import argparse
import cmd
import logging
import os
import shlex
from collections.abc import Mapping, Sequence
from typing import IO

from packctl.core.dispatcher import CommandDispatcher
from packctl.core.ports.render import Renderer
from packline.bootstrap.config.loader import CONFIG_ENV
from packline.bootstrap.config.settings import PacklineConfig
from packline.core.models.options import Alphabet, FormatKind, Options
from packline.core.pipeline import Pipeline


class PackCmd(cmd.Cmd):
    intro = "Entering packctl interactive mode. Type 'exit' or 'quit' to leave."
    prompt = "packctl> "

    def __init__(
        self,
        pipeline: Pipeline,
        dispatcher: CommandDispatcher,
        renderers: Mapping[str, Renderer],
        argv: Sequence[str] | None = None,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)

        self._pipeline = pipeline
        self._dispatcher = dispatcher
        self._argparser = self._argparse(sorted(renderers))
        self._args = self._argparser.parse_args(argv)
        self._renderer = renderers[self._args.output]
        self._logger = logging.getLogger("packctl.cmd")
        self._failed = False

        # Priority: CLI > ENV > default file in current working directory
        if self._args.config:
            os.environ[CONFIG_ENV] = self._args.config

    @property
    def args(self) -> argparse.Namespace:
        return self._args

    @property
    def interactive(self) -> bool:
        return self._args.namespace is None

    @property
    def failed(self) -> bool:
        return self._failed

    def options(self) -> Options:
        config = PacklineConfig()
        overrides = {
            name: getattr(self._args, name)
            for name in ("format", "level", "alphabet")
            if getattr(self._args, name) is not None
        }
        return config.to_options().replace(**overrides)

    def handle(self, *arguments: str) -> None:
        try:
            reply = self._dispatcher.dispatch(
                *arguments,
                pipeline=self._pipeline,
                options=self.options(),
                namespace=self.args
            )
            self._print(self._renderer.render(reply.to_dict()))
        except Exception as ex:
            self._failed = True
            self._logger.debug(f"Command {' '.join(arguments)} failed", exc_info=ex)
            self._print(str(ex))

    def do_encode(self, line):
        value = (line or None) if self.interactive else self.args.value
        if value is None:
            self._print("Usage: encode <value|->")
            return

        self._args.value = self._read_stdin() if value == "-" else value
        self.handle("encode")
        self._args.value = None

    def do_decode(self, line):
        text = line.strip() if self.interactive else self.args.text
        if not text:
            self._print("Usage: decode <text|->")
            return

        self._args.text = self._read_stdin().strip() if text == "-" else text
        self.handle("decode")
        self._args.text = None

    def do_config(self, line):
        config_cmd = getattr(self.args, "config_cmd", None)
        if config_cmd is None:
            argv = shlex.split(line)
            if not argv:
                self._print(
                    "Usage: config [argument <show>]\n"
                    "config argument is required."
                )
                return

            config_cmd = argv[0]

        self.handle("config", config_cmd)

    def do_exit(self, arg):
        return True

    def do_quit(self, arg):
        return True

    def do_EOF(self, arg):
        self._print()
        return True

    def emptyline(self):
        return False

    def _read_stdin(self) -> str:
        return self.stdin.read()

    def _print(self, *values: str) -> None:
        print(*values, file=self.stdout)

    @staticmethod
    def _argparse(outputs: list[str]) -> argparse.ArgumentParser:
        global_opts = argparse.ArgumentParser(
            prog="packctl",
            description="Encode records into compressed base64 text, and back."
        )
        global_opts.add_argument("--config", help="Path to a packline configuration file")
        global_opts.add_argument(
            "--log-level",
            default="WARNING",
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        )
        global_opts.add_argument("--output", default="yaml", choices=outputs)
        global_opts.add_argument("--format", choices=[f.value for f in FormatKind])
        global_opts.add_argument("--level", type=int, help="gzip level, 0 to 9")
        global_opts.add_argument("--alphabet", choices=[a.value for a in Alphabet])

        sub = global_opts.add_subparsers(dest="namespace")

        encode = sub.add_parser("encode", help="Encode a value, '-' reads stdin")
        encode.add_argument("value")

        decode = sub.add_parser("decode", help="Decode a text, '-' reads stdin")
        decode.add_argument("text")

        cfg = sub.add_parser("config")
        cfg_sub = cfg.add_subparsers(dest="config_cmd", required=True)
        cfg_sub.add_parser("show")

        return global_opts
