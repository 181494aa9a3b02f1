# SPDX-License-Identifier: Apache-2.0
import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    PROTOC_PATH: str | None = None
    GLIDE_BUILD_PROTO: bool = False
    GLIDE_GENERATED_ROOT: str | None = None
    GLIDE_PROTOGEN_LOGGING_LEVEL: str = "INFO"

_TRUTHY = ("1", "true", "yes", "on")


def _get_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _get_optional(name: str) -> str | None:
    value = os.getenv(name)
    return value or None


# Values are read from the environment on every attribute access, so callers
# that need a stable value resolve it once and pass it along.
environment_variables: dict[str, Callable[[], Any]] = {
    # Absolute path to the protoc binary. Takes precedence over PATH lookup
    # and over the compiler bundled with grpcio-tools.
    "PROTOC_PATH": lambda: _get_optional("PROTOC_PATH"),
    # Build-time switch that turns binding generation on.
    "GLIDE_BUILD_PROTO": lambda: _get_bool("GLIDE_BUILD_PROTO"),
    # Root of the generated-artifact tree; bindings land in <root>/protobuf.
    "GLIDE_GENERATED_ROOT": lambda: _get_optional("GLIDE_GENERATED_ROOT"),
    "GLIDE_PROTOGEN_LOGGING_LEVEL": lambda: os.getenv(
        "GLIDE_PROTOGEN_LOGGING_LEVEL", "INFO"
    ).upper(),
}


def __getattr__(name: str):
    if name in environment_variables:
        return environment_variables[name]()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return list(environment_variables.keys())
