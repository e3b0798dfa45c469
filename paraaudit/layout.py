"""Creating and moving modules."""

from __future__ import annotations

import sys
from pathlib import Path

from paraaudit.core import CONFIG_NAME, ParaError, paint

README_NAME = "README.md"
DEFAULT_CONFIG = 'open: ["code", "."]\n'


def _report(message: str) -> None:
    print(paint(message, "green italic"), file=sys.stderr)


def new(module: Path) -> None:
    """Create a module directory with a README and a default ``para.yaml``."""
    module = Path(module)
    try:
        module.mkdir()
    except OSError as exc:
        raise ParaError(str(exc)) from exc
    _report("created module")

    try:
        (module / README_NAME).write_text(f"# {module.name}\n", encoding="utf-8")
    except OSError as exc:
        raise ParaError(str(exc)) from exc
    _report("created readme")

    try:
        (module / CONFIG_NAME).write_text(DEFAULT_CONFIG, encoding="utf-8")
    except OSError as exc:
        raise ParaError(str(exc)) from exc
    _report("created para.yaml")


def mv(module: Path, root: Path) -> None:
    """Move a module into another root, refusing to overwrite."""
    module, root = Path(module), Path(root)
    destination = root / module.name
    if destination.exists():
        raise ParaError(f"cannot move {module} to {destination}, path exists")
    try:
        destination.mkdir()
        module.rename(destination)
    except OSError as exc:
        raise ParaError(str(exc)) from exc
    _report(f"moved to {destination}")