import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Run every test from an empty directory with no user or env configuration."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("DEVIL_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield workdir
    pkg_logger = logging.getLogger("devil")
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)
        handler.close()
    pkg_logger.setLevel(logging.NOTSET)


def make_tree(root: Path, layout: dict) -> Path:
    """Create files (str values) and directories (dict values) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        if isinstance(content, dict):
            make_tree(root / name, content)
        else:
            (root / name).write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    return make_tree(tmp_path / "root", {
        "b.txt": "b",
        "a.txt": "a",
        "node_modules": {"x.txt": "x"},
    })


@pytest.fixture
def tree_factory(tmp_path: Path):
    def _make(layout: dict, name: str = "root") -> Path:
        return make_tree(tmp_path / name, layout)
    return _make
