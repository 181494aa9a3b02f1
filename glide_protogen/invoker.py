# SPDX-License-Identifier: Apache-2.0
"""Run protoc over the client schemas and publish the bindings.

Generation is all-or-nothing: protoc writes into a private staging directory
next to the output directory, and the staged tree only replaces the output
directory once every step has succeeded. A failed run leaves whatever was in
the output directory before untouched.
"""

import os
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path

from glide_protogen.compiler import Lookup, ResolvedCompiler, resolve_compiler
from glide_protogen.config import CompilerInvocation, GenerationPolicy
from glide_protogen.exceptions import (
    CompilerNotFound,
    GenerationError,
    OutputWriteError,
    SchemaSyntaxError,
)
from glide_protogen.logger import init_logger
from glide_protogen.logging_utils import logtime
from glide_protogen.postprocess import finalize_package

logger = init_logger(__name__)

DESCRIPTOR_SET_NAME = "descriptors.binpb"

RunLambda = Callable[[Sequence[str]], tuple[int, str, str]]


def run_command(command: Sequence[str]) -> tuple[int, str, str]:
    """Run ``command`` to completion, returning (returncode, stdout, stderr).

    ``OSError`` from starting the process propagates to the caller.
    """
    proc = subprocess.run(
        list(command),
        capture_output=True,
        text=True,
        check=False,
    )
    return proc.returncode, proc.stdout, proc.stderr


def build_protoc_args(
    compiler: ResolvedCompiler,
    invocation: CompilerInvocation,
    policy: GenerationPolicy,
    out_dir: Path,
) -> list[str]:
    args = list(compiler.command)
    args.append(f"--proto_path={invocation.include_directory}")
    args += [f"--proto_path={path}" for path in compiler.include_paths]
    args.append(f"--python_out={out_dir}")
    if not policy.lite_runtime_enabled:
        args.append(f"--pyi_out={out_dir}")
        args += [
            f"--descriptor_set_out={out_dir / DESCRIPTOR_SET_NAME}",
            "--include_imports",
            "--include_source_info",
        ]
    # Absolute inputs under an absolute --proto_path are mapped back to their
    # include-relative names, so nothing location-specific ends up in the
    # generated code.
    args += [str(path) for path in invocation.input_files]
    return args


def _make_staging_dir(output_directory: Path) -> Path:
    try:
        output_directory.parent.mkdir(parents=True, exist_ok=True)
        staging = Path(
            tempfile.mkdtemp(
                prefix=f".{output_directory.name}-staging-",
                dir=output_directory.parent,
            )
        )
        os.chmod(staging, 0o755)
    except OSError as e:
        raise OutputWriteError(output_directory, e) from e
    return staging


def _publish(staging: Path, output_directory: Path) -> None:
    """Swap ``staging`` in for ``output_directory``.

    The previous output is moved aside and only deleted once the new tree is in
    place, so a failed swap can put it back.
    """
    previous = None
    try:
        if os.path.lexists(output_directory):
            previous = staging.with_name(
                staging.name.replace("-staging-", "-previous-", 1)
            )
            output_directory.rename(previous)
        staging.rename(output_directory)
    except OSError as e:
        if previous is not None and not os.path.lexists(output_directory):
            try:
                previous.rename(output_directory)
            except OSError:
                logger.error(
                    "Could not restore %s; previous bindings are in %s",
                    output_directory,
                    previous,
                )
        raise OutputWriteError(output_directory, e) from e

    if previous is None:
        return
    try:
        if previous.is_dir() and not previous.is_symlink():
            shutil.rmtree(previous)
        else:
            previous.unlink()
    except OSError as e:
        logger.warning("Could not remove old bindings at %s: %s", previous, e)


@logtime(logger, msg="Binding generation")
def generate(
    invocation: CompilerInvocation,
    policy: GenerationPolicy,
    *,
    lookup: Lookup = shutil.which,
    run_lambda: RunLambda = run_command,
) -> None:
    """Compile every schema of ``invocation`` into ``output_directory``.

    Blocks until protoc finishes. Raises ``CompilerNotFound``,
    ``SchemaSyntaxError`` or ``OutputWriteError``; on any error the output
    directory is left as it was.
    """
    compiler = resolve_compiler(invocation.compiler_path_override, lookup=lookup)
    virtual_paths = invocation.virtual_paths()
    logger.info(
        "Generating bindings for %s into %s",
        ", ".join(virtual_paths),
        invocation.output_directory,
    )

    staging = _make_staging_dir(invocation.output_directory)
    try:
        command = build_protoc_args(compiler, invocation, policy, staging)
        logger.debug("Running %s", " ".join(command))
        try:
            returncode, _, stderr = run_lambda(command)
        except OSError as e:
            raise CompilerNotFound(
                f"failed to run protoc ({compiler.describe()}): {e}",
                candidate=compiler.command[0],
            ) from e
        if returncode != 0:
            raise SchemaSyntaxError(stderr, returncode)
        if stderr:
            logger.warning("protoc: %s", stderr.rstrip())

        try:
            modules = finalize_package(staging, virtual_paths, policy)
        except FileNotFoundError as e:
            raise GenerationError(
                f"protoc reported success but did not emit {e.filename}"
            ) from e
        except OSError as e:
            raise OutputWriteError(invocation.output_directory, e) from e

        _publish(staging, invocation.output_directory)
    finally:
        if staging.exists():
            shutil.rmtree(staging, ignore_errors=True)

    logger.info(
        "Generated %d binding modules in %s",
        len(modules),
        invocation.output_directory,
    )
