"""Utilities for choosing where generated files go and how they import each other."""

import os
from pathlib import Path

from velo_assist.naming import to_snake_case


def get_target_directory(
    explicit: Path | None = None,
    active_document: Path | None = None,
    workspace_folders: list[Path] | None = None,
) -> Path | None:
    """Resolve the directory that receives generated files.

    Resolution order:
    - an explicitly chosen directory
    - the directory of the active document
    - the first workspace folder

    Args:
        explicit: Directory chosen by the user
        active_document: Path of the document being edited
        workspace_folders: Open workspace folders

    Returns:
        Target directory, or None if nothing can be resolved
    """
    if explicit is not None:
        return explicit

    if active_document is not None:
        return active_document.parent

    if workspace_folders:
        return workspace_folders[0]

    return None


def create_file_path(directory: Path, name: str, extension: str = ".dart") -> Path:
    """Build the path of a generated file with a snake_case file name.

    Examples:
        >>> create_file_path(Path("/lib"), "CounterVelo")
        PosixPath('/lib/counter_velo.dart')
    """
    return directory / f"{to_snake_case(name)}{extension}"


def get_relative_import_path(from_file: Path, to_file: Path) -> str:
    """Return the import path of to_file as seen from from_file's directory.

    Separators are always forward slashes, as Dart imports require.
    """
    relative = os.path.relpath(to_file, from_file.parent)
    return relative.replace("\\", "/")


def file_exists(path: Path) -> bool:
    return path.exists()
