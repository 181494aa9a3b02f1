# SPDX-License-Identifier: Apache-2.0
import argparse
from pathlib import Path

from glide_protogen.build import plan_generation, run_step
from glide_protogen.cli.types import CLISubcommand
from glide_protogen.config import BuildSettings


class GenerateSubcommand(CLISubcommand):
    """Regenerate the protobuf bindings when generation is enabled."""

    name = "generate"

    @staticmethod
    def cmd(args: argparse.Namespace) -> None:
        settings = BuildSettings.from_env(
            args.project_root,
            proto_enabled=args.proto,
            generated_root=args.generated_root,
        )
        run_step(plan_generation(settings))

    def validate(self, args: argparse.Namespace) -> None:
        if not args.project_root.is_dir():
            raise ValueError(f"project root {args.project_root} is not a directory")

    def subparser_init(
        self, subparsers: argparse._SubParsersAction
    ) -> argparse.ArgumentParser:
        parser = subparsers.add_parser(
            self.name,
            help="Compile the client schemas into Python bindings.",
            description=(
                "Compile the client schemas into Python bindings. Generation "
                "only runs when enabled with --proto or GLIDE_BUILD_PROTO=1; "
                "PROTOC_PATH overrides the compiler location."
            ),
        )
        parser.add_argument(
            "--proto",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Enable or disable generation (default: GLIDE_BUILD_PROTO).",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            default=Path.cwd(),
            help="Directory holding schemas/protobuf (default: cwd).",
        )
        parser.add_argument(
            "--generated-root",
            type=Path,
            default=None,
            help="Generated-artifact root; bindings go to <root>/protobuf "
            "(default: GLIDE_GENERATED_ROOT or <project-root>/generated).",
        )
        return parser


def cmd_init() -> list[CLISubcommand]:
    return [GenerateSubcommand()]
