# SPDX-License-Identifier: Apache-2.0
import shutil
from pathlib import Path

import pytest

from tests.utils import SCHEMA_DIR, FakeProtoc


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PROTOC_PATH", "GLIDE_BUILD_PROTO", "GLIDE_GENERATED_ROOT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_protoc() -> FakeProtoc:
    return FakeProtoc()


@pytest.fixture
def fake_lookup():
    return lambda name: "/opt/fake/bin/protoc"


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A throwaway project holding a copy of the client schemas."""
    root = tmp_path / "project"
    shutil.copytree(SCHEMA_DIR, root / "schemas" / "protobuf")
    return root


@pytest.fixture
def schema_dir(project_root: Path) -> Path:
    return project_root / "schemas" / "protobuf"
