# mdwrap/utils/gitignore.py
import os
from typing import List, Tuple

import pathspec


def get_gitignore(path: str) -> Tuple[pathspec.PathSpec, str]:
    """
    Return a PathSpec compiled from the nearest .gitignore found by walking
    upward from `path` (file or directory), together with the directory the
    patterns are relative to. Always ignores '.git/'. If no .gitignore exists
    or it cannot be read, the spec still ignores '.git/' and is anchored at
    `path` itself.
    """
    defaults: List[str] = ['.git/']
    lines: List[str] = list(defaults)

    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)
    anchor = base

    cur = base
    while True:
        gi = os.path.join(cur, ".gitignore")
        try:
            if os.path.exists(gi):
                with open(gi, "r", encoding="utf-8", errors="ignore") as f:
                    lines.extend(f.read().splitlines())
                anchor = cur
                break
        except OSError:
            # Unreadable .gitignore: keep walking upward
            pass
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines), anchor
    except Exception:
        return pathspec.PathSpec.from_lines("gitwildmatch", defaults), anchor


def is_ignored(spec: pathspec.PathSpec, anchor: str, path: str) -> bool:
    """True when `path` matches `spec`; paths outside `anchor` are never ignored."""
    rel = os.path.relpath(os.path.abspath(path), anchor)
    if rel.startswith(".."):
        return False
    rel = rel.replace(os.sep, "/")
    if os.path.isdir(path):
        rel += "/"
    return spec.match_file(rel)
