# SPDX-License-Identifier: Apache-2.0
from collections.abc import Sequence
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
SCHEMA_DIR = REPO_ROOT / "schemas" / "protobuf"
SCHEMA_FILES = ["command_request.proto", "response.proto", "connection_request.proto"]


def _flag_value(command: Sequence[str], flag: str) -> str | None:
    prefix = f"--{flag}="
    for arg in command:
        if arg.startswith(prefix):
            return arg[len(prefix):]
    return None


class FakeProtoc:
    """Stands in for protoc: records every argv and writes placeholder output."""

    def __init__(self, returncode: int = 0, stderr: str = "", emit: bool = True):
        self.returncode = returncode
        self.stderr = stderr
        self.emit = emit
        self.calls: list[list[str]] = []

    def __call__(self, command: Sequence[str]) -> tuple[int, str, str]:
        self.calls.append(list(command))
        if self.returncode != 0 or not self.emit:
            return self.returncode, "", self.stderr

        include = Path(_flag_value(command, "proto_path"))
        python_out = Path(_flag_value(command, "python_out"))
        pyi_out = _flag_value(command, "pyi_out")
        descriptor_set = _flag_value(command, "descriptor_set_out")

        for arg in command:
            if arg.startswith("--") or not arg.endswith(".proto"):
                continue
            rel = Path(arg).relative_to(include)
            module = rel.with_name(rel.stem + "_pb2.py")
            body = f"# generated from {rel.as_posix()}\n"
            if rel.stem != "response":
                body += "import response_pb2 as response__pb2\n"
            target = python_out / module
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(body)
            if pyi_out is not None:
                (Path(pyi_out) / module.with_suffix(".pyi")).write_text(body)
        if descriptor_set is not None:
            Path(descriptor_set).write_bytes(b"\x0a\x00")
        return 0, "", self.stderr


def snapshot(directory: Path) -> dict[str, bytes]:
    return {
        path.relative_to(directory).as_posix(): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }
