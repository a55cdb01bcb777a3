import re
from enum import Enum

from velo_assist.models import ContextUsage, MethodDescriptor, PropertyDescriptor, TypeBinding
from velo_assist.parsers.base import BaseAnalyzer
from velo_assist.scanning import find_matching_delimiter

VELO_IMPORT_PATH = "package:velo/velo.dart"

WIDGET_INDICATORS = (
    "Widget",
    "StatelessWidget",
    "StatefulWidget",
    "Container",
    "Text",
    "Column",
    "Row",
    "Scaffold",
    "AppBar",
    "FloatingActionButton",
    "ElevatedButton",
    "TextButton",
    "IconButton",
)

_VELO_CLASS_PATTERN = re.compile(r"class\s+(\w+)\s+extends\s+Velo<(\w+)>")
_VELO_WIDGET_PATTERN = re.compile(r"Velo(?:Builder|Consumer|Listener)<(\w+),\s*(\w+)>")
_VELO_IMPORT_PATTERN = re.compile(r"import\s+['\"]" + re.escape(VELO_IMPORT_PATH) + r"['\"]")
_IMPORT_PATTERN = re.compile(r"import\s+['\"]([^'\"]+)['\"];")
_CLASS_OPEN_PATTERN = re.compile(r"^class\s+\w+")
_FINAL_FIELD_PATTERN = re.compile(r"final\s+(\w+(?:\?|<[^>]*>)*)\s+(\w+);")
_METHOD_PATTERN = re.compile(r"(Future<[\w<>?, ]*>|void)\s+(\w+)\s*\([^)]*\)\s*(?:async)?\s*\{")
_WIDGET_TYPE_PATTERN = re.compile(r"(\w+)\s*\(")
_CONTEXT_PATTERNS = (
    ("read", re.compile(r"context\.read<(\w+)>\(\)")),
    ("watch", re.compile(r"context\.watch<(\w+)>\(\)")),
)


class _ScanState(Enum):
    """Where the property scanner currently is relative to the target class."""
    OUTSIDE = "outside"
    INSIDE_TARGET = "inside_target"


class DartAnalyzer(BaseAnalyzer):
    """Line-oriented regex analyzer for Dart sources using Velo.

    Recognition is deliberately shallow: declarations are matched on a single
    line and class bodies are delimited heuristically. A miss yields an empty
    result, never an error.
    """

    def find_type_bindings(self, source_code: str) -> list[TypeBinding]:
        """Find Velo class declarations and Velo widget usages.

        Recognizes `class X extends Velo<S>` and
        `VeloBuilder|VeloConsumer|VeloListener<X, S>` on a single line.

        Args:
            source_code: Dart source code

        Returns:
            List of TypeBinding objects in line order
        """
        bindings = []

        for line_number, line in enumerate(source_code.split("\n")):
            class_match = _VELO_CLASS_PATTERN.search(line)
            if class_match:
                bindings.append(TypeBinding(
                    primary_type=class_match.group(1),
                    state_type=class_match.group(2),
                    line_number=line_number,
                ))

            widget_match = _VELO_WIDGET_PATTERN.search(line)
            if widget_match:
                bindings.append(TypeBinding(
                    primary_type=widget_match.group(1),
                    state_type=widget_match.group(2),
                    line_number=line_number,
                ))

        return bindings

    def has_velo_import(self, source_code: str) -> bool:
        """Check whether the source imports the Velo library."""
        return _VELO_IMPORT_PATTERN.search(source_code) is not None

    def list_imports(self, source_code: str) -> list[str]:
        """Extract quoted paths of `import '...';` statements, duplicates kept."""
        return [match.group(1) for match in _IMPORT_PATTERN.finditer(source_code)]

    def find_state_properties(self, source_code: str, class_name: str) -> list[PropertyDescriptor]:
        """Find `final` fields declared inside an Equatable state class.

        The scan enters the class on a line containing
        `class <class_name> extends Equatable` and leaves it on the next
        line starting a class declaration that does not mention class_name.

        Args:
            source_code: Dart source code
            class_name: Name of the state class

        Returns:
            List of PropertyDescriptor objects in declaration order
        """
        properties = []
        class_header = f"class {class_name} extends Equatable"
        state = _ScanState.OUTSIDE

        for line in source_code.split("\n"):
            if class_header in line:
                state = _ScanState.INSIDE_TARGET
                continue

            if state is _ScanState.INSIDE_TARGET:
                if _CLASS_OPEN_PATTERN.match(line) and class_name not in line:
                    state = _ScanState.OUTSIDE
                    continue

                field_match = _FINAL_FIELD_PATTERN.search(line)
                if field_match:
                    properties.append(PropertyDescriptor(
                        name=field_match.group(2),
                        type=field_match.group(1),
                    ))

        return properties

    def find_methods(self, source_code: str, class_name: str) -> list[MethodDescriptor]:
        """Find method signatures in the body of a Velo class.

        Only `void` and `Future<...>` return types are recognized. The
        constructor is excluded.

        Args:
            source_code: Dart source code
            class_name: Name of the Velo class

        Returns:
            List of MethodDescriptor objects in declaration order
        """
        body = self._extract_velo_class_body(source_code, class_name)
        if body is None:
            return []

        methods = []
        for match in _METHOD_PATTERN.finditer(body):
            return_type = match.group(1)
            method_name = match.group(2)
            if method_name == class_name:
                continue
            methods.append(MethodDescriptor(
                name=method_name,
                is_asynchronous=return_type.startswith("Future"),
            ))

        return methods

    def _extract_velo_class_body(self, source_code: str, class_name: str) -> str | None:
        """Return the text between a Velo class's opening brace and its matching close.

        An unterminated body runs to the end of the text.
        """
        header = re.compile(
            rf"class\s+{re.escape(class_name)}\s+extends\s+Velo<[^>]+>\s*\{{",
            re.DOTALL,
        )
        match = header.search(source_code)
        if match is None:
            return None

        close_index = find_matching_delimiter(source_code, match.end() - 1, "{", "}")
        if close_index is None:
            return source_code[match.end():]
        return source_code[match.end():close_index]

    def looks_like_widget(self, text: str) -> bool:
        """Check whether text mentions any well-known Flutter widget name."""
        return any(indicator in text for indicator in WIDGET_INDICATORS)

    def extract_widget_type_name(self, text: str) -> str | None:
        """Return the identifier directly preceding the first `(`, if any."""
        match = _WIDGET_TYPE_PATTERN.search(text)
        return match.group(1) if match else None

    def find_context_usages(self, source_code: str) -> list[ContextUsage]:
        """Find `context.read<T>()` and `context.watch<T>()` call sites.

        On each line a read match is reported before a watch match.
        """
        usages = []

        for line_number, line in enumerate(source_code.split("\n")):
            for kind, pattern in _CONTEXT_PATTERNS:
                match = pattern.search(line)
                if match:
                    usages.append(ContextUsage(
                        kind=kind,
                        primary_type=match.group(1),
                        line_number=line_number,
                    ))

        return usages
