"""Detect the project type and sample its source files.

Each ecosystem is recognised by a marker file in the project root. When the
marker exists it is included, followed by up to ``max_files`` files per
extension from the ecosystem's source directory. Only the directory itself
is listed; subdirectories are never entered.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from quickstart_context.data.models import ProjectFile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ecosystem:
    """A project type, identified by its marker file."""

    name: str
    marker: str
    source_dir: str
    extensions: Tuple[str, ...]


# Checked in this order; several can match in a polyglot repository
ECOSYSTEMS: Tuple[Ecosystem, ...] = (
    Ecosystem("rust", "Cargo.toml", "src", ("rs",)),
    Ecosystem("python", "pyproject.toml", "src", ("py",)),
    Ecosystem("node", "package.json", "src", ("js", "ts")),
    Ecosystem("go", "go.mod", ".", ("go",)),
)


def _resolve_root(root: Optional[Path]) -> Path:
    return Path.cwd() if root is None else Path(root)


def _relative_to(path: Path, root: Path) -> Path:
    try:
        return path.relative_to(root)
    except ValueError:
        return path


def find_source_files(
    directory: Path,
    extension: str,
    max_files: int,
    root: Optional[Path] = None,
) -> List[Path]:
    """List up to max_files files in directory with the given extension.

    Names are sorted before the cap is applied so the sample is stable across
    runs. A missing or unreadable directory yields an empty list.

    Args:
        directory: Directory whose direct entries are examined.
        extension: Extension without the leading dot, e.g. "rs".
        max_files: Maximum number of paths returned for this lookup.
        root: Base used to make the returned paths relative.
    """
    base = _resolve_root(root)
    if max_files <= 0:
        return []

    try:
        with os.scandir(directory) as entries:
            candidates = sorted(
                entry.name
                for entry in entries
                if _is_regular_file(entry) and Path(entry.name).suffix == f".{extension}"
            )
    except OSError as exc:
        logger.debug("Cannot list %s: %s", directory, exc)
        return []

    return [_relative_to(Path(directory) / name, base) for name in candidates[:max_files]]


def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def detect_ecosystems(root: Optional[Path] = None) -> List[Ecosystem]:
    """Return the ecosystems whose marker file exists in root, in check order."""
    base = _resolve_root(root)
    return [eco for eco in ECOSYSTEMS if (base / eco.marker).exists()]


def find_project_files(max_files: int, root: Optional[Path] = None) -> List[Path]:
    """Identify the manifest and a sample of source files for each detected ecosystem.

    The cap applies to each extension lookup independently, not to the
    whole result.

    Returns:
        Paths relative to root, markers first within each ecosystem.
    """
    base = _resolve_root(root)
    files: List[Path] = []

    for eco in detect_ecosystems(base):
        files.append(Path(eco.marker))
        source_dir = base / eco.source_dir
        for extension in eco.extensions:
            files.extend(find_source_files(source_dir, extension, max_files, root=base))

    return files


def read_project_files_content(files: Iterable[Path], root: Optional[Path] = None) -> List[ProjectFile]:
    """Read each file as text. Unreadable files yield empty content."""
    base = _resolve_root(root)
    contents: List[ProjectFile] = []

    for file_path in files:
        path = Path(file_path)
        full_path = path if path.is_absolute() else base / path
        try:
            content = full_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.warning("Could not read %s: %s", full_path, exc)
            content = ""
        contents.append(ProjectFile(file_path=path, content=content))

    return contents
