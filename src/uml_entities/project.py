from __future__ import annotations

import logging
from pathlib import Path

from .csharp.types import CSharpTarget

logger = logging.getLogger(__name__)

# ============================================================================
# Project writer
#
# Places a generated `{file name: source}` map into a project directory:
# `.cs` units under the model subdirectory, everything else at the root.
# Files are only rewritten when their content changed, so re-running the
# generator on the same diagram touches nothing.
# ============================================================================


def target_path(root: Path, file_name: str, model_dir: str) -> Path:
    """Where `file_name` lives inside the project rooted at `root`."""
    if file_name.endswith(".cs"):
        return root / model_dir / file_name
    return root / file_name


def write_project(
    root: str | Path,
    files: dict[str, str],
    target: CSharpTarget,
) -> list[str]:
    """Write `files` below `root`.

    Returns the POSIX-style relative paths that were created or changed,
    sorted. OSError propagates to the caller.
    """
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)

    updated: list[str] = []
    for file_name, content in files.items():
        path = target_path(root, file_name, target.model_dir)
        relative = path.relative_to(root).as_posix()
        if _write_if_changed(path, content):
            logger.debug("Created/updated %s", relative)
            updated.append(relative)
        else:
            logger.debug("Content unchanged: %s", relative)

    logger.info(
        "Wrote %d of %d generated files to %s", len(updated), len(files), root
    )
    return sorted(updated)


def _write_if_changed(path: Path, content: str) -> bool:
    if path.exists() and path.read_bytes() == content.encode("utf-8"):
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    # Keep "\n" line endings as generated
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return True
