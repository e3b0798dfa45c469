"""Checking a PARA tree against its conventions and reporting fixes."""

from __future__ import annotations

import re
import sys
from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from paraaudit.core import (
    CONFIG_NAME,
    ParaError,
    get_home_path,
    get_module_paths,
    get_root_paths,
    paint,
    print_count,
    visit_all,
)
from paraaudit.search import find_root, get_module_tags, jaro

REQUIRED_FILES = ("README.md", CONFIG_NAME)
DISALLOWED_FILES = frozenset(
    {
        ".git",
        ".svn",
        "package-lock.json",
        ".gitignore",
        "node_modules",
        "venv",
        "build",
        "target",
        ".mypy_cache",
        "__pycache__",
        "tmp",
    }
)
MAX_MODULE_FILES = 1000
DUPLICATE_SIMILARITY = 0.96
_BAD_MODULE_NAME = re.compile(r"[-, .A-Z]")


class ViolationKind(Enum):
    """The kinds of convention breaches an audit can report."""

    ROOT_DIR_CLUTTER = auto()
    MOD_DIR_CLUTTER = auto()
    MOD_DIR_NAME = auto()
    MOD_REQUIRED_FILE_MISSING = auto()
    DISALLOWED_FILE = auto()
    EMPTY_MODULE = auto()
    DUPLICATE_MODULES = auto()
    TOO_MANY_FILES = auto()
    NO_TAGS = auto()


_LEVELS = {
    ViolationKind.ROOT_DIR_CLUTTER: 1,
    ViolationKind.MOD_DIR_CLUTTER: 1,
    ViolationKind.MOD_DIR_NAME: 2,
    ViolationKind.MOD_REQUIRED_FILE_MISSING: 3,
    ViolationKind.DISALLOWED_FILE: 2,
    ViolationKind.EMPTY_MODULE: 1,
    ViolationKind.DUPLICATE_MODULES: 1,
    ViolationKind.TOO_MANY_FILES: 3,
    ViolationKind.NO_TAGS: 4,
}


class FixKind(Enum):
    """The kinds of shell commands proposed to repair a violation."""

    MOVE_FILE = auto()
    MOD_NAME = auto()
    CREATE_FILE = auto()
    DELETE = auto()
    EDIT_FILE = auto()
    NONE = auto()


@dataclass(frozen=True)
class Fix:
    """A proposed repair, rendered as a shell command line."""

    kind: FixKind
    path: Path | None = None
    file: str | None = None

    def __str__(self) -> str:
        path = self.path
        if self.kind is FixKind.NONE or path is None:
            return ""
        if self.kind is FixKind.MOVE_FILE:
            projects = find_root("projects")
            if projects is None:
                raise ParaError("can't find `projects` folder")
            destination = projects / "CLUTTER" / path.name
            return f'mv "{path}" "{destination}"\n'
        if self.kind is FixKind.MOD_NAME:
            new_name = path.name
            for ch in "- .":
                new_name = new_name.replace(ch, "_")
            destination = path.parent / new_name.lower()
            return f'mv "{path}" "{destination}"\n'
        if self.kind is FixKind.CREATE_FILE:
            return f'touch "{path / (self.file or "")}"\n'
        if self.kind is FixKind.DELETE:
            flag = "-rf " if path.is_dir() else ""
            return f'rm {flag}"{path}"\n'
        return f"vim {path}\n"


@dataclass(frozen=True)
class Violation:
    """One breach of the PARA conventions."""

    kind: ViolationKind
    path: Path
    other: Path | None = None
    file: str | None = None
    filecount: int = 0

    def level(self) -> int:
        """Return the verbosity level at which this violation is shown."""
        return _LEVELS[self.kind]

    def fix(self) -> Fix:
        """Return the repair proposed for this violation."""
        kind = self.kind
        if kind in (ViolationKind.ROOT_DIR_CLUTTER, ViolationKind.MOD_DIR_CLUTTER):
            return Fix(FixKind.MOVE_FILE, self.path)
        if kind is ViolationKind.MOD_DIR_NAME:
            return Fix(FixKind.MOD_NAME, self.path)
        if kind is ViolationKind.MOD_REQUIRED_FILE_MISSING:
            return Fix(FixKind.CREATE_FILE, self.path, self.file)
        if kind in (ViolationKind.DISALLOWED_FILE, ViolationKind.EMPTY_MODULE):
            return Fix(FixKind.DELETE, self.path)
        if kind is ViolationKind.NO_TAGS:
            return Fix(FixKind.EDIT_FILE, self.path)
        return Fix(FixKind.NONE)

    def __str__(self) -> str:
        kind = self.kind
        if kind is ViolationKind.ROOT_DIR_CLUTTER:
            return f"{paint('root dir clutter', 'red')}: {self.path}"
        if kind is ViolationKind.MOD_DIR_CLUTTER:
            return f"{paint('module dir clutter', 'red')}: {self.path}"
        if kind is ViolationKind.MOD_DIR_NAME:
            return f"{paint('invalid module name', 'red')}: {self.path}"
        if kind is ViolationKind.MOD_REQUIRED_FILE_MISSING:
            return (
                f"{paint('module missing', 'red')} "
                f"{paint(self.file or '', 'yellow')}: {self.path}"
            )
        if kind is ViolationKind.DISALLOWED_FILE:
            return f"{paint('disallowed file', 'red')}: {self.path}"
        if kind is ViolationKind.EMPTY_MODULE:
            return f"{paint('empty module', 'red')}: {self.path}"
        if kind is ViolationKind.DUPLICATE_MODULES:
            return f"{paint('duplicate module', 'red')}: {self.path} {self.other}"
        if kind is ViolationKind.TOO_MANY_FILES:
            return (
                f"{paint('too many files', 'red')}: "
                f"{paint(str(self.filecount), 'yellow')} {self.path}"
            )
        return f"{paint('no tags', 'red')}: {self.path}"


def _list_dir(path: Path, message: str) -> list[Path]:
    try:
        return sorted(path.iterdir())
    except OSError as exc:
        raise ParaError(message) from exc


def get_violations() -> list[Violation]:
    """Inspect the whole PARA tree and return every violation found."""
    violations: list[Violation] = []
    home = get_home_path()
    roots = get_root_paths()

    for entry in _list_dir(home, "failed to read dir"):
        if entry not in roots:
            violations.append(Violation(ViolationKind.ROOT_DIR_CLUTTER, entry))

    for root in roots:
        for entry in _list_dir(root, "failed to read dir"):
            if not entry.is_dir():
                violations.append(Violation(ViolationKind.MOD_DIR_CLUTTER, entry))

    modules = get_module_paths()
    violations.extend(
        Violation(ViolationKind.MOD_DIR_NAME, module)
        for module in modules
        if _BAD_MODULE_NAME.search(module.name)
    )

    for module in modules:
        names = {entry.name for entry in _list_dir(module, "failed to read module")}
        if not names:
            violations.append(Violation(ViolationKind.EMPTY_MODULE, module))
        violations.extend(
            Violation(ViolationKind.MOD_REQUIRED_FILE_MISSING, module, file=required)
            for required in REQUIRED_FILES
            if required not in names
        )
        if not get_module_tags(module):
            violations.append(Violation(ViolationKind.NO_TAGS, module / CONFIG_NAME))

    violations.extend(
        Violation(ViolationKind.DISALLOWED_FILE, path)
        for path in visit_all(home)
        if path.name in DISALLOWED_FILES
    )

    for index, first in enumerate(modules):
        for second in modules[index:]:
            if first == second:
                continue
            if jaro(first.name, second.name) > DUPLICATE_SIMILARITY:
                violations.append(
                    Violation(ViolationKind.DUPLICATE_MODULES, first, other=second)
                )

    for module in modules:
        count = sum(1 for _ in visit_all(module))
        if count > MAX_MODULE_FILES:
            violations.append(
                Violation(ViolationKind.TOO_MANY_FILES, module, filecount=count)
            )

    return violations


def propose_fixes(level: int) -> None:
    """Print a shell command for each violation at or below ``level``."""
    for violation in get_violations():
        if violation.level() <= level:
            print(violation.fix(), end="")


def audit(level: int) -> None:
    """Print violations at or below ``level`` and a summary count."""
    violations = get_violations()
    for violation in violations:
        if violation.level() <= level:
            print(violation)
    if violations:
        summary = f"{paint(str(len(violations)), 'red')} violations"
    else:
        summary = f"{paint('zero', 'green')} violations"
    print(f"para: {summary}")
    sys.stdout.flush()


def _extension(name: str) -> str:
    before, dot, after = name.rpartition(".")
    if not dot or not before:
        return "none"
    return after


def extension_counts() -> Counter[str]:
    """Count the files under the home directory by extension."""
    return Counter(
        _extension(path.name) for path in visit_all(get_home_path()) if path.is_file()
    )


def stats(min_count: int) -> None:
    """Print the total path count and the extensions seen at least ``min_count`` times."""
    total = sum(1 for _ in visit_all(get_home_path()))
    print_count("total files", total)
    counts = [(ext, n) for ext, n in extension_counts().items() if n >= min_count]
    for ext, n in sorted(counts, key=lambda item: -item[1]):
        print_count(ext, n)