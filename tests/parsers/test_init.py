from pathlib import Path

import pytest

from velo_assist.parsers import get_analyzer_for_file
from velo_assist.parsers.base import BaseAnalyzer
from velo_assist.parsers.dart_analyzer import DartAnalyzer


def test_get_analyzer_for_dart_file():
    analyzer = get_analyzer_for_file(Path("counter_page.dart"))

    assert analyzer is not None
    assert isinstance(analyzer, DartAnalyzer)


def test_get_analyzer_for_uppercase_extension():
    analyzer = get_analyzer_for_file(Path("counter_page.DART"))

    assert analyzer is not None
    assert isinstance(analyzer, DartAnalyzer)


def test_get_analyzer_for_unsupported_file():
    analyzer = get_analyzer_for_file(Path("notes.txt"))

    assert analyzer is None


def test_get_analyzer_for_python_file():
    analyzer = get_analyzer_for_file(Path("script.py"))

    assert analyzer is None


ANALYZER_OPERATIONS = {
    "find_type_bindings",
    "has_velo_import",
    "list_imports",
    "find_state_properties",
    "find_methods",
    "find_context_usages",
}


def test_base_analyzer_declares_recognizer_operations():
    assert BaseAnalyzer.__abstractmethods__ == ANALYZER_OPERATIONS


@pytest.mark.parametrize("missing", sorted(ANALYZER_OPERATIONS))
def test_analyzer_missing_one_operation_cannot_be_created(missing):
    methods = {name: (lambda self, *args: None) for name in ANALYZER_OPERATIONS - {missing}}
    PartialAnalyzer = type("PartialAnalyzer", (BaseAnalyzer,), methods)

    with pytest.raises(TypeError) as exc_info:
        PartialAnalyzer()

    assert missing in str(exc_info.value)


def test_dart_analyzer_implements_every_operation():
    analyzer = DartAnalyzer()

    assert isinstance(analyzer, BaseAnalyzer)
    assert DartAnalyzer.__abstractmethods__ == frozenset()
