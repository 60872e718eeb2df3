"""Exclusion pattern handling.

A user pattern names a path or a directory the way a .gitignore entry does.
Each pattern is expanded into two glob patterns, one matching the path
itself at any depth and one matching everything nested under it, and paths
are matched with gitignore wildmatch rules.
"""

from typing import Iterable, Optional

from pathspec import GitIgnoreSpec


def expand_pattern(pattern: str) -> list[str]:
    """Expand a user pattern into its path and subtree glob patterns.

    Args:
        pattern: A user pattern such as ``docs``, ``*.md`` or ``**/build``.

    Returns:
        The two glob patterns the user pattern stands for.
    """
    subtree = f"{pattern}/**/*"

    if pattern.startswith("**"):
        return [pattern, subtree]
    if pattern.startswith("*"):
        return ["*" + pattern, subtree]
    return ["**/" + pattern, subtree]


def expand_patterns(patterns: Iterable[str]) -> list[str]:
    """Expand every non-blank user pattern, keeping their order."""
    expanded = []
    for pattern in patterns:
        pattern = pattern.strip()
        if not pattern:
            continue
        expanded.extend(expand_pattern(pattern))
    return expanded


def split_exclude_option(value: Optional[str]) -> list[str]:
    """Split a comma separated --exclude value into user patterns.

    Args:
        value: Raw option value, e.g. ``"README.md,docs"``.

    Returns:
        The non-blank patterns, stripped.
    """
    if not value:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


def merge_patterns(*pattern_lists: Iterable[str]) -> list[str]:
    """Concatenate pattern lists, dropping duplicates but keeping order."""
    merged = []
    for patterns in pattern_lists:
        for pattern in patterns:
            if pattern not in merged:
                merged.append(pattern)
    return merged


def build_exclude_spec(globs: list[str]) -> GitIgnoreSpec:
    """Build a matcher for already expanded glob patterns."""
    return GitIgnoreSpec.from_lines(globs)


def is_excluded(path: str, spec: GitIgnoreSpec) -> bool:
    """Check whether a path is matched by an exclusion spec."""
    return spec.match_file(path.replace("\\", "/"))


def filter_excluded(paths: list[str], patterns: Iterable[str]) -> list[str]:
    """Drop every path matched by any of the user patterns.

    Patterns are matched against the paths exactly as given, which for the
    CLI are the printed, directory-joined paths.

    Args:
        paths: Paths to filter, returned in their original order.
        patterns: User patterns (unexpanded).

    Returns:
        The paths not matched by any pattern.
    """
    globs = expand_patterns(patterns)
    if not globs:
        return list(paths)

    spec = build_exclude_spec(globs)
    return [path for path in paths if not is_excluded(path, spec)]
