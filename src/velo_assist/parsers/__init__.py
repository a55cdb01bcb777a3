from pathlib import Path

from velo_assist.parsers.base import BaseAnalyzer
from velo_assist.parsers.dart_analyzer import DartAnalyzer

_ANALYZERS: dict[str, type[BaseAnalyzer]] = {
    ".dart": DartAnalyzer,
}


def get_analyzer_for_file(file_path: Path) -> BaseAnalyzer | None:
    """Return an analyzer instance for the file's language.

    Args:
        file_path: Path of the file to analyze (only the suffix is used)

    Returns:
        Analyzer instance, or None if the file type is not supported
    """
    analyzer_cls = _ANALYZERS.get(file_path.suffix.lower())
    if analyzer_cls is None:
        return None
    return analyzer_cls()


__all__ = ["BaseAnalyzer", "DartAnalyzer", "get_analyzer_for_file"]
