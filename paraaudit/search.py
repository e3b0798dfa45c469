"""Finding modules by name, root and tag."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from paraaudit.core import (
    ParaError,
    get_module_paths,
    get_root_paths,
    paint,
    read_yaml,
)


def jaro(a: str, b: str) -> float:
    """Return the Jaro similarity of two strings, between 0.0 and 1.0."""
    a_len, b_len = len(a), len(b)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(max(a_len, b_len) // 2 - 1, 0)
    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0
    for i, a_char in enumerate(a):
        low = max(i - search_range, 0)
        high = min(b_len, i + search_range + 1)
        for j in range(low, high):
            if not b_flags[j] and b[j] == a_char:
                a_flags[i] = b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    matched_b = (ch for ch, flag in zip(b, b_flags) if flag)
    matched_a = (ch for ch, flag in zip(a, a_flags) if flag)
    transpositions = sum(x != y for x, y in zip(matched_a, matched_b)) // 2

    return (
        matches / a_len + matches / b_len + (matches - transpositions) / matches
    ) / 3.0


def get_module_tags(module: Path) -> list[str]:
    """Return the string tags listed in a module's ``para.yaml``."""
    doc = read_yaml(module)
    if not isinstance(doc, dict):
        return []
    tags = doc.get("tags")
    if not isinstance(tags, list):
        return []
    return [tag for tag in tags if isinstance(tag, str)]


def search_by_tag(tag: str) -> list[Path]:
    """Return the modules carrying ``tag``."""
    return [module for module in get_module_paths() if tag in get_module_tags(module)]


def search_modules(s: str, precision: float) -> list[Path]:
    """Return tag matches first, then modules whose name resembles ``s``."""
    matches = search_by_tag(s)
    others = [
        module
        for module in get_module_paths()
        if module not in matches
        and (jaro(module.name, s) > precision or s in module.name)
    ]
    return matches + others


def find_module(s: str) -> Path | None:
    """Return the first module named exactly ``s``."""
    return next((p for p in get_module_paths() if p.name == s), None)


def find_root(s: str) -> Path | None:
    """Return the root directory named exactly ``s``."""
    return next((p for p in get_root_paths() if p.name == s), None)


def list_rooted_modules(root: str) -> list[Path]:
    """Return the modules inside the named root."""
    root_path = find_root(root)
    if root_path is None:
        raise ParaError(f"{paint('invalid root', 'red')}: {root}")
    return [p for p in get_module_paths() if p.parent == root_path]


def get_all_tags() -> list[tuple[str, int]]:
    """Return each tag in use with the number of modules carrying it."""
    counts: Counter[str] = Counter()
    for module in get_module_paths():
        counts.update(get_module_tags(module))
    return list(counts.items())