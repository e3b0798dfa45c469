import pytest

from paraaudit import layout
from paraaudit.core import ParaError


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    monkeypatch.delenv("CLICOLOR_FORCE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def test_new_creates_files(tmp_path, capsys):
    module = tmp_path / "my_module"
    layout.new(module)
    assert (module / "README.md").read_text() == "# my_module\n"
    assert (module / "para.yaml").read_text() == 'open: ["code", "."]\n'
    assert capsys.readouterr().err.splitlines() == [
        "created module",
        "created readme",
        "created para.yaml",
    ]


def test_new_existing_module_fails(tmp_path):
    module = tmp_path / "exists"
    module.mkdir()
    with pytest.raises(ParaError):
        layout.new(module)
    assert list(module.iterdir()) == []


def test_new_missing_parent_fails(tmp_path):
    with pytest.raises(ParaError):
        layout.new(tmp_path / "no" / "parent")


def test_mv_moves_module(tmp_path, capsys):
    source_root = tmp_path / "projects"
    dest_root = tmp_path / "archive"
    source_root.mkdir()
    dest_root.mkdir()
    module = source_root / "thing"
    module.mkdir()
    (module / "README.md").write_text("# thing\n")

    layout.mv(module, dest_root)

    assert not module.exists()
    assert (dest_root / "thing" / "README.md").read_text() == "# thing\n"
    assert f"moved to {dest_root / 'thing'}" in capsys.readouterr().err


def test_mv_refuses_existing_destination(tmp_path):
    module = tmp_path / "projects" / "thing"
    module.mkdir(parents=True)
    dest_root = tmp_path / "archive"
    (dest_root / "thing").mkdir(parents=True)
    with pytest.raises(ParaError, match="path exists"):
        layout.mv(module, dest_root)
    assert module.exists()