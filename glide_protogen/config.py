# SPDX-License-Identifier: Apache-2.0
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic.dataclasses import dataclass
from typing_extensions import Self

from glide_protogen import envs
from glide_protogen.logger import init_logger

logger = init_logger(__name__)

SCHEMA_FILES = (
    "command_request.proto",
    "response.proto",
    "connection_request.proto",
)
"""Schemas that make up the client wire protocol, relative to the include dir."""

SCHEMA_INCLUDE_DIR = Path("schemas") / "protobuf"
GENERATED_ROOT = Path("generated")
OUTPUT_SUBDIR = "protobuf"
"""Bindings are always written to this directory under the generated root."""


@dataclass(frozen=True)
class GenerationPolicy:
    """Code-generation options applied to every compiler invocation."""

    lite_runtime_enabled: bool = False
    """
    Skip reflection metadata. When disabled, typed `.pyi` stubs are emitted
    for every schema together with a shared `FileDescriptorSet`.
    """
    use_zero_copy_byte_buffers: bool = True
    """
    Emit the `_buffers` support module, which decodes messages from any
    buffer-protocol object and exposes byte payloads as `memoryview`s.
    """


DEFAULT_POLICY = GenerationPolicy(
    lite_runtime_enabled=False,
    use_zero_copy_byte_buffers=True,
)


@dataclass
class CompilerInvocation:
    """One run of the schema compiler."""

    include_directory: Path
    """Import-resolution root handed to protoc as `--proto_path`."""
    input_files: list[Path]
    """Schemas to compile, relative to `include_directory` or absolute."""
    output_directory: Path
    """Replaced wholesale by every successful run."""
    compiler_path_override: Path | None = None
    """Used verbatim when set; an unusable path only fails at execution."""

    @field_validator("include_directory")
    @classmethod
    def _check_include_directory(cls, value: Path) -> Path:
        value = value.resolve()
        if not value.is_dir():
            raise ValueError(f"include directory {value} does not exist")
        return value

    @field_validator("output_directory")
    @classmethod
    def _absolute_output_directory(cls, value: Path) -> Path:
        return value.absolute()

    @model_validator(mode="after")
    def _check_input_files(self) -> Self:
        if not self.input_files:
            raise ValueError("at least one schema file is required")

        resolved: list[Path] = []
        for path in self.input_files:
            if not path.is_absolute():
                path = self.include_directory / path
            path = path.resolve()
            if not path.is_relative_to(self.include_directory):
                raise ValueError(
                    f"schema {path} is outside include directory "
                    f"{self.include_directory}"
                )
            if not path.is_file():
                raise ValueError(f"schema {path} does not exist")
            if path in resolved:
                raise ValueError(f"schema {path} is listed more than once")
            resolved.append(path)

        self.input_files = resolved
        return self

    def virtual_paths(self) -> list[str]:
        """Input paths as protoc names them: relative to the include dir."""
        return [
            path.relative_to(self.include_directory).as_posix()
            for path in self.input_files
        ]


@dataclass
class BuildSettings:
    """Build-wide configuration, resolved once before generation is planned."""

    project_root: Path
    proto_enabled: bool = False
    """Activation flag: bindings are only regenerated when this is set."""
    include_directory: Path = SCHEMA_INCLUDE_DIR
    """Relative paths are taken from `project_root`."""
    schema_files: tuple[str, ...] = SCHEMA_FILES
    generated_root: Path = GENERATED_ROOT
    """Relative paths are taken from `project_root`."""
    compiler_path_override: Path | None = None

    @model_validator(mode="after")
    def _anchor_paths(self) -> Self:
        self.project_root = self.project_root.absolute()
        self.include_directory = self.project_root / self.include_directory
        self.generated_root = self.project_root / self.generated_root
        return self

    @property
    def output_directory(self) -> Path:
        return self.generated_root / OUTPUT_SUBDIR

    @classmethod
    def from_env(cls, project_root: Path, **overrides) -> "BuildSettings":
        """Read the build environment once.

        Keyword arguments that are not ``None`` win over the environment, which
        is how command-line flags are layered on top. Unset values fall back to
        the field defaults.
        """
        kwargs = {
            "project_root": project_root,
            "proto_enabled": envs.GLIDE_BUILD_PROTO,
            "generated_root": envs.GLIDE_GENERATED_ROOT,
            "compiler_path_override": envs.PROTOC_PATH,
        }
        kwargs.update(overrides)
        settings = cls(**{k: v for k, v in kwargs.items() if v is not None})
        logger.debug(
            "Build settings: proto_enabled=%s output=%s protoc_override=%s",
            settings.proto_enabled,
            settings.output_directory,
            settings.compiler_path_override,
        )
        return settings
