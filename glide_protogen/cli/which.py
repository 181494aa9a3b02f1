# SPDX-License-Identifier: Apache-2.0
import argparse

from glide_protogen import envs
from glide_protogen.cli.types import CLISubcommand
from glide_protogen.compiler import resolve_compiler


class WhichSubcommand(CLISubcommand):
    """Print the protoc that generation would use."""

    name = "which"

    @staticmethod
    def cmd(args: argparse.Namespace) -> None:
        compiler = resolve_compiler(envs.PROTOC_PATH)
        print(f"{compiler.source}: {compiler.describe()}")

    def subparser_init(
        self, subparsers: argparse._SubParsersAction
    ) -> argparse.ArgumentParser:
        return subparsers.add_parser(
            self.name,
            help="Show which protoc would be used and where it came from.",
        )


def cmd_init() -> list[CLISubcommand]:
    return [WhichSubcommand()]
