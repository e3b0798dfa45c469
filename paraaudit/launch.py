"""Opening modules and their notes in external programs."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

from paraaudit.core import ParaError, paint, read_yaml


def open_module(module: Path) -> None:
    """Run the module's ``open`` command, fetch its git repo, then start a shell."""
    module = Path(module)
    print(paint(f"opening: {module.name}", "green italic"), file=sys.stderr)

    doc = read_yaml(module)
    if doc is not None:
        settings = doc if isinstance(doc, dict) else {}
        command = settings.get("open")
        if isinstance(command, list):
            if not command or not isinstance(command[0], str):
                raise ParaError("couldn't parse command argument")
            if not all(isinstance(arg, str) for arg in command[1:]):
                raise ParaError("failed to parse command arguments in para.yaml")
            try:
                subprocess.run(command, cwd=module)
            except OSError as exc:
                raise ParaError("failed to spawn `open` command from para.yaml") from exc
        else:
            print(
                paint("couldn't parse para.yaml `open` as command sequence", "red italic"),
                file=sys.stderr,
            )
        git = settings.get("git")
        if isinstance(git, str):
            init_git(git, module)

    try:
        subprocess.run(["zsh"], cwd=module)
    except OSError as exc:
        raise ParaError("couldn't start zsh") from exc


def edit_note(note: Path) -> None:
    """Open a note in the editor."""
    try:
        subprocess.run(["code", str(note)])
    except OSError as exc:
        raise ParaError("Couldn't start vim") from exc


def init_git(git: str, module: Path) -> None:
    """Link the module to a clone of ``git`` kept in ``~/Downloads``."""
    module = Path(module)
    name = git.split("/")[-1]
    while name.endswith(".git"):
        name = name[: -len(".git")]

    link = module / name
    if link.exists():
        return

    home = os.environ.get("HOME")
    if home is None:
        raise ParaError("HOME env var not defined")
    original = Path(home) / "Downloads" / name
    if not original.exists():
        try:
            result = subprocess.run(["git", "clone", git, str(original)])
        except OSError as exc:
            raise ParaError("failed to start git") from exc
        if result.returncode != 0:
            raise ParaError("git clone failed")

    try:
        os.symlink(original, link)
    except OSError as exc:
        raise ParaError(str(exc)) from exc