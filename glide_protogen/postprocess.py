# SPDX-License-Identifier: Apache-2.0
"""Turn raw protoc output into an importable, self-contained package.

protoc emits absolute imports between generated modules (``import
response_pb2``), which only resolve when the output directory itself is on
``sys.path``. These are rewritten to package-relative imports, and a
deterministic ``__init__.py`` is written so consumers can import the bindings
from wherever the output directory is placed.
"""

from pathlib import Path

import regex as re

from glide_protogen.config import GenerationPolicy

GENERATED_HEADER = "# Generated by glide-protogen. DO NOT EDIT.\n"
BUFFERS_MODULE_NAME = "_buffers"
BUFFER_HELPERS = ("parse", "payload_view")

_IMPORT_RE = re.compile(
    r"^import (?P<module>\w+_pb2) as (?P<alias>\w+)$", re.MULTILINE
)
_FROM_IMPORT_RE = re.compile(
    r"^from (?P<package>[\w.]+) import (?P<module>\w+_pb2) as (?P<alias>\w+)$",
    re.MULTILINE,
)

BUFFERS_MODULE = GENERATED_HEADER + '''"""Buffer helpers for byte and string payloads of the generated messages."""

from typing import TypeVar, Union

from google.protobuf.message import Message

_M = TypeVar("_M", bound=Message)

Buffer = Union[bytes, bytearray, memoryview]


def parse(message_type: "type[_M]", data: Buffer) -> _M:
    """Decode ``data`` into a new ``message_type`` instance.

    Any buffer-protocol object is accepted, so a received buffer can be handed
    over as is instead of being copied into ``bytes`` first.
    """
    message = message_type()
    message.ParseFromString(data)
    return message


def payload_view(message: Message, field: str) -> memoryview:
    """Return a read-only view over a ``bytes`` or ``string`` field.

    ``bytes`` fields are viewed in place. ``string`` fields are UTF-8 encoded
    first, so the view is over a new copy of their contents.
    """
    value = getattr(message, field)
    if isinstance(value, str):
        value = value.encode("utf-8")
    if not isinstance(value, bytes):
        raise TypeError(
            f"{type(message).__name__}.{field} is not a bytes or string field"
        )
    return memoryview(value)
'''


def module_name_for(virtual_path: str) -> str:
    """Dotted module name protoc generates for a schema, e.g. ``a.b_pb2``."""
    *packages, filename = virtual_path.split("/")
    stem = filename[: -len(".proto")] if filename.endswith(".proto") else filename
    return ".".join([*packages, stem.replace("-", "_") + "_pb2"])


def module_path_for(root: Path, module: str, suffix: str = ".py") -> Path:
    return root.joinpath(*module.split(".")).with_suffix(suffix)


def rewrite_imports(source: str, depth: int, generated: set[str]) -> str:
    """Make imports of other generated modules relative.

    ``depth`` is how many packages below the output root the importing module
    lives. Imports of modules that were not generated in this run (for
    example ``google.protobuf``) are left untouched.
    """
    dots = "." * (depth + 1)

    def _relative(target: str, alias: str, original: str) -> str:
        if target not in generated:
            return original
        package, _, name = target.rpartition(".")
        return f"from {dots}{package} import {name} as {alias}"

    source = _IMPORT_RE.sub(
        lambda m: _relative(m["module"], m["alias"], m[0]), source
    )
    return _FROM_IMPORT_RE.sub(
        lambda m: _relative(f"{m['package']}.{m['module']}", m["alias"], m[0]),
        source,
    )


def render_package_init(modules: list[str], policy: GenerationPolicy) -> str:
    exports = sorted({module.split(".", 1)[0] for module in modules})
    lines = [
        GENERATED_HEADER.rstrip("\n"),
        '"""Python bindings for the client wire protocol schemas."""',
        "",
    ]
    lines += [f"from . import {name}" for name in exports]
    if policy.use_zero_copy_byte_buffers:
        lines.append(
            f"from .{BUFFERS_MODULE_NAME} import {', '.join(BUFFER_HELPERS)}"
        )
        exports += BUFFER_HELPERS
    lines += ["", "__all__ = ["]
    lines += [f'    "{name}",' for name in exports]
    lines += ["]", ""]
    return "\n".join(lines)


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8", newline="\n")


def finalize_package(
    root: Path, virtual_paths: list[str], policy: GenerationPolicy
) -> list[str]:
    """Post-process protoc output under ``root`` in place.

    Returns the dotted names of the generated modules. Raises
    ``FileNotFoundError`` if protoc did not emit a module for some schema.
    """
    modules = sorted(module_name_for(path) for path in virtual_paths)
    generated = set(modules)

    for module in modules:
        depth = module.count(".")
        for suffix in (".py", ".pyi"):
            path = module_path_for(root, module, suffix)
            if suffix == ".pyi" and not path.exists():
                continue
            source = path.read_text(encoding="utf-8")
            _write(path, rewrite_imports(source, depth, generated))

        parent = path.parent
        while parent != root:
            init = parent / "__init__.py"
            if not init.exists():
                _write(init, GENERATED_HEADER)
            parent = parent.parent

    if policy.use_zero_copy_byte_buffers:
        _write(root / f"{BUFFERS_MODULE_NAME}.py", BUFFERS_MODULE)
    _write(root / "__init__.py", render_package_init(modules, policy))
    return modules
