from __future__ import annotations

import argparse
import sys
from typing import List, NoReturn, Optional, Sequence

from bitmap.controllers.app_controller import EXIT_FAILURE, AppController
from bitmap.models.image_model import Option
from bitmap.ui import console


class _Parser(argparse.ArgumentParser):
    """argparse с кодом выхода 1 при ошибке аргументов (вместо 2)."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        console.print_error(message)
        self.exit(EXIT_FAILURE)


class _HelpAction(argparse.Action):
    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, text="", help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)
        self.text = text

    def __call__(self, parser, namespace, values, option_string=None):
        console.print_help(self.text)
        parser.exit()


class _OrderedOption(argparse.Action):
    """Складывает все опции преобразований в общий список `options` в порядке появления."""

    def __call__(self, parser, namespace, values, option_string=None):
        options: List[Option] = list(getattr(namespace, "options", None) or [])
        options.append(Option(name=self.dest, value=values))
        setattr(namespace, "options", options)


class BitmapApp:
    def __init__(self, controller: Optional[AppController] = None) -> None:
        self._controller = controller or AppController()
        self._parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _Parser(prog="bitmap", usage="bitmap <command> [arguments]", add_help=False)
        parser.add_argument("-h", "--help", action=_HelpAction, text=console.GENERAL_HELP)
        commands = parser.add_subparsers(dest="command")

        header_parser = commands.add_parser("header", usage="bitmap header <source_file>", add_help=False)
        header_parser.add_argument("-h", "--help", action=_HelpAction, text=console.HEADER_HELP)
        header_parser.add_argument("source")

        apply_parser = commands.add_parser(
            "apply", usage="bitmap apply [options] <source_file> <output_file>", add_help=False
        )
        apply_parser.add_argument("-h", "--help", action=_HelpAction, text=console.APPLY_HELP)
        for name in self._controller.pipeline_service.option_names:
            apply_parser.add_argument(f"--{name}", dest=name, action=_OrderedOption, default=argparse.SUPPRESS)
        apply_parser.add_argument("source")
        apply_parser.add_argument("output")
        return parser

    def run(self, argv: Sequence[str]) -> int:
        args = self._parser.parse_args(list(argv))
        if args.command == "header":
            return self._controller.run_header(args.source)
        if args.command == "apply":
            return self._controller.run_apply(getattr(args, "options", []), args.source, args.output)
        console.print_help(console.GENERAL_HELP)
        return EXIT_FAILURE
