"""Rewrites between related Velo widget shapes.

The input is assumed to already have the recognized shape; anything the
patterns do not match is returned unchanged.
"""

import re

from velo_assist.scanning import find_matching_delimiter
from velo_assist.templates import LISTENER_PLACEHOLDER

_BUILDER_PATTERN = re.compile(r"VeloBuilder<([^>]+)>\s*\(\s*builder:\s*\(([^)]+)\)\s*\{")
_LISTENER_BLOCK_PATTERN = re.compile(r"listener:\s*\([^)]+\)\s*\{[^}]*\},?\s*", re.DOTALL)
_PROVIDER_PATTERN = re.compile(r"Provider<([^>]+)>\s*\(", re.DOTALL)
_CHILD_PATTERN = re.compile(r"child:\s*([^,}]+)", re.DOTALL)


def builder_to_consumer(text: str) -> str:
    """Turn a single-line `VeloBuilder<...>(builder: (...) {` opening into a VeloConsumer.

    A placeholder listener callback is inserted before the builder, reusing
    the builder's parameter names.
    """
    def _replace(match: re.Match) -> str:
        type_args = match.group(1)
        params = match.group(2)
        return (
            f"VeloConsumer<{type_args}>(\n"
            f"  listener: ({params}) {{\n"
            f"    {LISTENER_PLACEHOLDER}\n"
            f"  }},\n"
            f"  builder: ({params}) {{"
        )

    return _BUILDER_PATTERN.sub(_replace, text, count=1)


def consumer_to_builder(text: str) -> str:
    """Rename VeloConsumer to VeloBuilder and drop the first listener callback."""
    renamed = text.replace("VeloConsumer", "VeloBuilder", 1)
    return _LISTENER_BLOCK_PATTERN.sub("", renamed, count=1)


def extract_provider_child(text: str) -> str:
    """Return the expression after `child:` up to the next comma or brace.

    Falls back to the literal "child" when there is no child argument.
    """
    match = _CHILD_PATTERN.search(text)
    return match.group(1).strip() if match else "child"


def provider_to_multi_provider(text: str) -> str:
    """Nest a `Provider<T>(...)` call inside a MultiProvider.

    The original call becomes the single providers entry and its child
    expression becomes the MultiProvider's child.
    """
    match = _PROVIDER_PATTERN.search(text)
    if match is None:
        return text

    close_index = find_matching_delimiter(text, match.end() - 1, "(", ")")
    if close_index is None:
        return text

    provider_type = match.group(1)
    args = text[match.end():close_index].strip().rstrip(",")

    return f"""MultiProvider(
  providers: [
    Provider<{provider_type}>({args}),
  ],
  child: {extract_provider_child(text)},
)"""
