from dataclasses import dataclass


@dataclass
class Position:
    """A zero-based line/character position in a document."""
    line: int
    character: int


@dataclass
class Range:
    """A selection between two positions (end exclusive)."""
    start: Position
    end: Position


@dataclass
class TypeBinding:
    """A Velo type paired with its state type, found on a single line."""
    primary_type: str
    state_type: str
    line_number: int


@dataclass
class PropertyDescriptor:
    """A field declared in a state class."""
    name: str
    type: str
    default_value: str | None = None  # Only used when generating code


@dataclass
class MethodDescriptor:
    """A method signature found in a Velo class body."""
    name: str
    is_asynchronous: bool


@dataclass
class ContextUsage:
    """A context.read<T>() or context.watch<T>() call site."""
    kind: str  # "read" or "watch"
    primary_type: str
    line_number: int


@dataclass
class CodeActionCandidate:
    """A labelled replacement proposed for the current selection."""
    label: str
    replacement_text: str
