# SPDX-License-Identifier: Apache-2.0
import argparse


class CLISubcommand:
    """Base class for CLI subcommands"""

    name: str

    @staticmethod
    def cmd(args: argparse.Namespace) -> None:
        raise NotImplementedError("Subclasses should implement this method")

    def validate(self, args: argparse.Namespace) -> None:
        # No validation by default
        pass

    def subparser_init(
        self, subparsers: argparse._SubParsersAction
    ) -> argparse.ArgumentParser:
        raise NotImplementedError("Subclasses should implement this method")
