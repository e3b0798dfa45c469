"""Locating the PARA tree, walking it and printing modules."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml

ROOT_NAMES = ("projects", "areas", "resources", "archive")
CONFIG_NAME = "para.yaml"

_STYLES = {
    "bold": "1",
    "dimmed": "2",
    "italic": "3",
    "underline": "4",
}
_COLOURS = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}


class ParaError(Exception):
    """A failure reported to the user of the PARA tools."""


def _use_colour() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def paint(text: str, color: str | tuple[int, int, int]) -> str:
    """Wrap text in ANSI codes.

    ``color`` is either space separated names such as ``"green italic"``
    or an ``(r, g, b)`` triple.
    """
    if not _use_colour():
        return text
    if isinstance(color, tuple):
        r, g, b = color
        codes = [f"38;2;{r};{g};{b}"]
    else:
        words = color.split()
        unknown = [w for w in words if w not in _STYLES and w not in _COLOURS]
        if unknown:
            raise ValueError(f"unknown colour or style: {unknown[0]}")
        codes = [_STYLES[w] for w in words if w in _STYLES]
        codes += [_COLOURS[w] for w in words if w in _COLOURS]
    if not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"


def get_home_path() -> Path:
    """Return the PARA home directory taken from ``PARA_HOME``."""
    home = os.environ.get("PARA_HOME")
    if home is None:
        raise ParaError("PARA_HOME environment variable not defined")
    return Path(home)


def get_root_paths() -> list[Path]:
    """Return the four root directories under the home directory."""
    home = get_home_path()
    return [home / name for name in ROOT_NAMES]


def get_module_paths() -> list[Path]:
    """Return every module directory found directly inside a root."""
    modules: list[Path] = []
    for root in get_root_paths():
        try:
            entries = sorted(root.iterdir())
        except OSError as exc:
            raise ParaError("failed to read root dirs") from exc
        modules.extend(entry for entry in entries if entry.is_dir())
    return modules


def visit_all(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Yield every path below ``path``, children before parents, ``path`` last.

    Symbolic links to directories are yielded but not descended into.
    """
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        for child in sorted(path.iterdir()):
            yield from visit_all(child)
    yield path


def eprint_modules(modules: Iterable[Path]) -> None:
    """Print module paths to standard error."""
    for module in modules:
        print(paint(str(module), "italic"), file=sys.stderr)


def print_modules(modules: Iterable[Path], colorised: bool) -> None:
    """Print module paths, optionally shading home, root and module name."""
    for module in modules:
        module = Path(module)
        if colorised:
            print(
                "{}/{}/{}".format(
                    paint(str(module.parent.parent), (100, 100, 100)),
                    paint(module.parent.name, (100, 140, 100)),
                    paint(module.name, (100, 255, 100)),
                )
            )
        else:
            print(module)


def print_count(item: str, count: int) -> None:
    """Print a count padded to five columns followed by its label."""
    print(f"{paint(f'{count:<5}', 'yellow')} {paint(item, 'green')}")


def read_yaml(module: str | os.PathLike[str]) -> Any:
    """Return the parsed ``para.yaml`` of a module, or None if unreadable."""
    try:
        with open(Path(module) / CONFIG_NAME, encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return None