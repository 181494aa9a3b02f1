# SPDX-License-Identifier: Apache-2.0
"""Locate the protoc binary used to compile the schemas.

Resolution order:

1. An explicit override (``PROTOC_PATH``), used verbatim.
2. ``protoc`` on ``PATH``.
3. The protoc bundled with ``grpcio-tools``, run as
   ``python -m grpc_tools.protoc``.
"""

import importlib.util
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Literal, Optional

from glide_protogen.exceptions import CompilerNotFound
from glide_protogen.logger import init_logger

logger = init_logger(__name__)

PROTOC_BINARY = "protoc"

CompilerSource = Literal["override", "path", "bundled"]


@dataclass(frozen=True)
class ResolvedCompiler:
    command: tuple[str, ...]
    """argv prefix that runs the compiler."""
    source: CompilerSource
    include_paths: tuple[str, ...] = ()
    """Extra `--proto_path` roots this compiler needs, e.g. well-known types."""

    def describe(self) -> str:
        return " ".join(self.command)


Lookup = Callable[[str], Optional[str]]
BundledLookup = Callable[[], Optional[ResolvedCompiler]]


def bundled_compiler() -> ResolvedCompiler | None:
    if importlib.util.find_spec("grpc_tools") is None:
        return None
    well_known_types = resources.files("grpc_tools") / "_proto"
    return ResolvedCompiler(
        command=(sys.executable, "-m", "grpc_tools.protoc"),
        source="bundled",
        include_paths=(str(well_known_types),),
    )


def resolve_compiler(
    override: Path | str | None,
    lookup: Lookup = shutil.which,
    bundled: BundledLookup = bundled_compiler,
) -> ResolvedCompiler:
    if override is not None:
        # Not checked for existence here; a bad path fails when it is run.
        logger.info("Using protoc from PROTOC_PATH: %s", override)
        return ResolvedCompiler(command=(str(override),), source="override")

    found = lookup(PROTOC_BINARY)
    if found:
        logger.info("Using protoc found on PATH: %s", found)
        return ResolvedCompiler(command=(found,), source="path")

    fallback = bundled()
    if fallback is not None:
        logger.info("Using protoc bundled with grpcio-tools")
        return fallback

    raise CompilerNotFound(
        "protoc was not found: it is not on PATH and grpcio-tools is not "
        "installed. Install protoc or set PROTOC_PATH to its absolute path."
    )
