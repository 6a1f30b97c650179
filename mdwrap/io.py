# mdwrap/io.py
"""File helpers: rewrite Markdown files in place and find them under directories."""
import logging
import os
from typing import Iterable, Iterator, Optional

from .errors import RewriteError
from .process import Options, process_text
from .utils.gitignore import get_gitignore, is_ignored

log = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def read_markdown(path: "str | os.PathLike") -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise RewriteError(path, "read", e) from e


def rewrite(path: "str | os.PathLike", options: Optional[Options] = None) -> bool:
    """
    Process the Markdown file at `path` and write the result back.

    Returns True when the content changed. The file is left untouched when
    nothing changed. Raises RewriteError if it cannot be read or written.
    """
    original = read_markdown(path)
    fixed = process_text(original, options)
    if fixed == original:
        log.debug("unchanged: %s", path)
        return False
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(fixed)
    except OSError as e:
        raise RewriteError(path, "write", e) from e
    log.info("rewrote %s", path)
    return True


def iter_markdown_files(paths: Iterable["str | os.PathLike"]) -> Iterator[str]:
    """
    Yield the files named by `paths`, expanding directories.

    Files given explicitly are yielded as-is, whatever their suffix.
    Directories are walked in sorted order for `*.md` / `*.markdown` files,
    skipping anything matched by the nearest `.gitignore` (and `.git/`).
    """
    for raw in paths:
        path = os.fspath(raw)
        if not os.path.isdir(path):
            yield path
            continue

        spec, anchor = get_gitignore(path)
        for root, dirs, files in os.walk(path):
            # Prune ignored directories in place so os.walk skips them.
            dirs[:] = sorted(d for d in dirs if not is_ignored(spec, anchor, os.path.join(root, d)))
            for name in sorted(files):
                if not name.lower().endswith(MARKDOWN_SUFFIXES):
                    continue
                full = os.path.join(root, name)
                if is_ignored(spec, anchor, full):
                    log.debug("ignored by .gitignore: %s", full)
                    continue
                yield full
