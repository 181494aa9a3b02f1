# SPDX-License-Identifier: Apache-2.0
import pytest

from glide_protogen.cli.main import main


def test_no_subcommand_prints_help(capsys):
    assert main([]) == 0
    assert "generate" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("glide-protogen ")


def test_generate_disabled_by_default(project_root):
    assert main(["generate", "--project-root", str(project_root)]) == 0
    assert not (project_root / "generated").exists()


def test_generate_flag_beats_env(monkeypatch, project_root):
    monkeypatch.setenv("GLIDE_BUILD_PROTO", "1")
    monkeypatch.setenv("PROTOC_PATH", str(project_root / "missing-protoc"))

    assert main(["generate", "--no-proto", "--project-root", str(project_root)]) == 0
    assert not (project_root / "generated").exists()


def test_generate_failure_exit_status(monkeypatch, project_root):
    monkeypatch.setenv("PROTOC_PATH", str(project_root / "missing-protoc"))

    status = main(["generate", "--proto", "--project-root", str(project_root)])

    assert status == 1
    assert not (project_root / "generated" / "protobuf").exists()


def test_generate_rejects_missing_project_root(tmp_path):
    assert main(["generate", "--project-root", str(tmp_path / "nope")]) == 1


def test_which_reports_override(monkeypatch, capsys):
    monkeypatch.setenv("PROTOC_PATH", "/pinned/protoc")
    assert main(["which"]) == 0
    assert capsys.readouterr().out == "override: /pinned/protoc\n"
