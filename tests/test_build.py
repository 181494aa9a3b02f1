# SPDX-License-Identifier: Apache-2.0
import pytest
from pydantic import ValidationError

from glide_protogen import build
from glide_protogen.build import Run, Skip, plan_generation, run_step
from glide_protogen.config import DEFAULT_POLICY, BuildSettings, GenerationPolicy


@pytest.fixture
def recorded_generate(monkeypatch):
    calls = []
    monkeypatch.setattr(
        build, "generate", lambda invocation, policy: calls.append((invocation, policy))
    )
    return calls


def test_disabled_build_skips(project_root):
    settings = BuildSettings(project_root=project_root, proto_enabled=False)
    assert plan_generation(settings) == Skip()


def test_disabled_build_does_not_need_schemas(tmp_path):
    # no schemas/ directory at all
    settings = BuildSettings(project_root=tmp_path)
    assert isinstance(plan_generation(settings), Skip)


def test_skip_never_generates(project_root, recorded_generate):
    out = project_root / "generated" / "protobuf"
    out.mkdir(parents=True)
    (out / "response_pb2.py").write_text("# checked in\n")
    settings = BuildSettings.from_env(project_root)

    run_step(plan_generation(settings))

    assert recorded_generate == []
    assert [p.name for p in out.iterdir()] == ["response_pb2.py"]
    assert (out / "response_pb2.py").read_text() == "# checked in\n"


def test_enabled_build_runs(project_root):
    settings = BuildSettings(project_root=project_root, proto_enabled=True)

    step = plan_generation(settings)

    assert isinstance(step, Run)
    assert step.policy == DEFAULT_POLICY
    assert step.invocation.virtual_paths() == [
        "command_request.proto",
        "response.proto",
        "connection_request.proto",
    ]
    assert step.invocation.output_directory == settings.output_directory
    assert step.invocation.compiler_path_override is None


def test_enabled_from_env_carries_override(monkeypatch, project_root):
    monkeypatch.setenv("GLIDE_BUILD_PROTO", "true")
    monkeypatch.setenv("PROTOC_PATH", "/opt/protoc/bin/protoc")

    step = plan_generation(BuildSettings.from_env(project_root))

    assert isinstance(step, Run)
    assert str(step.invocation.compiler_path_override) == "/opt/protoc/bin/protoc"


def test_run_step_generates(project_root, recorded_generate):
    policy = GenerationPolicy(lite_runtime_enabled=True)
    step = plan_generation(
        BuildSettings(project_root=project_root, proto_enabled=True), policy
    )

    run_step(step)

    assert recorded_generate == [(step.invocation, policy)]


def test_enabled_build_with_missing_schema(tmp_path):
    (tmp_path / "schemas" / "protobuf").mkdir(parents=True)
    settings = BuildSettings(project_root=tmp_path, proto_enabled=True)

    with pytest.raises(ValidationError):
        plan_generation(settings)
