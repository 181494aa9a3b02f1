# SPDX-License-Identifier: Apache-2.0
"""End-to-end runs against the protoc bundled with grpcio-tools."""

import importlib

import pytest

from glide_protogen.config import DEFAULT_POLICY, CompilerInvocation, GenerationPolicy
from glide_protogen.exceptions import SchemaSyntaxError
from glide_protogen.invoker import DESCRIPTOR_SET_NAME, generate
from tests.utils import SCHEMA_FILES, snapshot

pytest.importorskip("grpc_tools")
descriptor_pb2 = pytest.importorskip("google.protobuf.descriptor_pb2")

LITE = GenerationPolicy(lite_runtime_enabled=True, use_zero_copy_byte_buffers=True)
MODULES = ["command_request_pb2", "connection_request_pb2", "response_pb2"]


def _bundled_only(name):
    # Keep the test independent of whatever protoc happens to be on PATH.
    return None


def _invocation(schema_dir, output_directory):
    return CompilerInvocation(
        include_directory=schema_dir,
        input_files=SCHEMA_FILES,
        output_directory=output_directory,
    )


def _messages(descriptor_set: bytes) -> dict[str, list[str]]:
    files = descriptor_pb2.FileDescriptorSet.FromString(descriptor_set)
    return {
        f"{proto.package}.{message.name}": [field.name for field in message.field]
        for proto in files.file
        for message in proto.message_type
    }


def test_scenario_default_policy(schema_dir, tmp_path):
    out = tmp_path / "generated" / "protobuf"

    generate(_invocation(schema_dir, out), DEFAULT_POLICY, lookup=_bundled_only)

    names = set(snapshot(out))
    for module in MODULES:
        assert f"{module}.py" in names
        assert f"{module}.pyi" in names
    assert {"__init__.py", "_buffers.py", DESCRIPTOR_SET_NAME} <= names

    messages = _messages((out / DESCRIPTOR_SET_NAME).read_bytes())
    assert messages["response.Response"] == [
        "callback_idx",
        "resp_pointer",
        "constant_response",
        "request_error",
        "closing_error",
        "is_push",
    ]
    assert "addresses" in messages["connection_request.ConnectionRequest"]
    assert "route" in messages["command_request.CommandRequest"]


def test_generated_package_imports(schema_dir, tmp_path, monkeypatch):
    monkeypatch.syspath_prepend(str(tmp_path))
    generate(
        _invocation(schema_dir, tmp_path / "glide_bindings_e2e"),
        DEFAULT_POLICY,
        lookup=_bundled_only,
    )

    bindings = importlib.import_module("glide_bindings_e2e")

    assert set(MODULES) <= set(bindings.__all__)
    response = bindings.response_pb2.Response(callback_idx=7, is_push=True)
    decoded = bindings.parse(
        bindings.response_pb2.Response, bytearray(response.SerializeToString())
    )
    assert decoded == response

    scan = bindings.command_request_pb2.ClusterScan(
        cursor="0", match_pattern=b"user:*"
    )
    view = bindings.payload_view(scan, "match_pattern")
    assert isinstance(view, memoryview)
    assert view.readonly
    assert view.tobytes() == b"user:*"
    assert bindings.payload_view(scan, "cursor").tobytes() == b"0"
    with pytest.raises(TypeError):
        bindings.payload_view(scan, "count")


def test_regeneration_is_byte_identical(schema_dir, tmp_path):
    out = tmp_path / "protobuf"
    invocation = _invocation(schema_dir, out)

    generate(invocation, DEFAULT_POLICY, lookup=_bundled_only)
    first = snapshot(out)
    generate(invocation, DEFAULT_POLICY, lookup=_bundled_only)

    assert snapshot(out) == first


def test_lite_runtime_changes_shape_not_fields(schema_dir, tmp_path):
    full = tmp_path / "full" / "protobuf"
    lite = tmp_path / "lite" / "protobuf"

    generate(_invocation(schema_dir, full), DEFAULT_POLICY, lookup=_bundled_only)
    generate(_invocation(schema_dir, lite), LITE, lookup=_bundled_only)

    full_files = snapshot(full)
    lite_files = snapshot(lite)
    assert not any(name.endswith(".pyi") for name in lite_files)
    assert DESCRIPTOR_SET_NAME not in lite_files
    for module in MODULES:
        assert lite_files[f"{module}.py"] == full_files[f"{module}.py"]


def test_invalid_schema_fails_whole_run(schema_dir, tmp_path):
    out = tmp_path / "protobuf"
    out.mkdir()
    (out / "response_pb2.py").write_text("# checked in\n")
    with open(schema_dir / "command_request.proto", "a") as f:
        f.write("\nmessage Broken {\n    uint32 missing_semicolon = 1\n}\n")

    with pytest.raises(SchemaSyntaxError) as excinfo:
        generate(_invocation(schema_dir, out), DEFAULT_POLICY, lookup=_bundled_only)

    assert "command_request.proto:" in str(excinfo.value)
    assert excinfo.value.returncode != 0
    assert snapshot(out) == {"response_pb2.py": b"# checked in\n"}
