# SPDX-License-Identifier: Apache-2.0
from pathlib import Path


class GenerationError(Exception):
    """Base class for every failure of the binding generation step.

    None of these are recoverable: the bindings are a prerequisite of the
    client build, so callers let them abort the build.
    """


class CompilerNotFound(GenerationError):
    """No usable protoc binary could be resolved or executed."""

    def __init__(self, message: str, candidate: str | None = None) -> None:
        super().__init__(message)
        self.candidate = candidate


class SchemaSyntaxError(GenerationError):
    """protoc rejected one of the schemas.

    ``diagnostics`` is the compiler's stderr, unmodified, so file, line and
    column information survive.
    """

    def __init__(self, diagnostics: str, returncode: int) -> None:
        super().__init__(diagnostics)
        self.diagnostics = diagnostics
        self.returncode = returncode

    def __str__(self) -> str:
        if self.diagnostics.strip():
            return self.diagnostics
        return f"protoc exited with status {self.returncode} and no diagnostics"


class OutputWriteError(GenerationError):
    """The output directory could not be created, cleared or written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"cannot write generated bindings to {path}: {cause}")
        self.path = path
        self.cause = cause
