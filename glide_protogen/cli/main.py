# SPDX-License-Identifier: Apache-2.0
"""The `glide-protogen` command line."""

import argparse
import sys

from glide_protogen.exceptions import GenerationError
from glide_protogen.logger import init_logger
from glide_protogen.version import __version__

logger = init_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    import glide_protogen.cli.generate
    import glide_protogen.cli.which

    CMD_MODULES = [
        glide_protogen.cli.generate,
        glide_protogen.cli.which,
    ]

    parser = argparse.ArgumentParser(
        prog="glide-protogen",
        description="Build-time protobuf binding generator for the client.",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    subparsers = parser.add_subparsers(required=False, dest="subparser")
    cmds = {}
    for cmd_module in CMD_MODULES:
        for cmd in cmd_module.cmd_init():
            cmd.subparser_init(subparsers).set_defaults(dispatch_function=cmd.cmd)
            cmds[cmd.name] = cmd

    args = parser.parse_args(argv)
    if not hasattr(args, "dispatch_function"):
        parser.print_help()
        return 0

    try:
        cmds[args.subparser].validate(args)
        args.dispatch_function(args)
    except (GenerationError, ValueError) as e:
        # Compiler diagnostics are logged unmodified.
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
