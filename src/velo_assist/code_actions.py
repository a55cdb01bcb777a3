"""Quick-fix proposals for a selection in a Dart document."""

import logging

from velo_assist.config import VeloConfig
from velo_assist.conversions import builder_to_consumer, consumer_to_builder, provider_to_multi_provider
from velo_assist.document import TextDocument
from velo_assist.models import CodeActionCandidate, Range
from velo_assist.parsers.dart_analyzer import DartAnalyzer
from velo_assist.templates import WrapKind, generate_provider, generate_wrap_expression

logger = logging.getLogger(__name__)

WRAP_WITH_BUILDER = "Wrap with VeloBuilder"
WRAP_WITH_LISTENER = "Wrap with VeloListener"
WRAP_WITH_CONSUMER = "Wrap with VeloConsumer"
WRAP_WITH_PROVIDER = "Wrap with Provider"
CONVERT_TO_CONSUMER = "Convert to VeloConsumer"
CONVERT_TO_BUILDER = "Convert to VeloBuilder"
CONVERT_TO_MULTI_PROVIDER = "Convert to MultiProvider"


class CodeActionProposer:
    """Builds the labelled replacements offered for a selection.

    Wrap actions are always offered for a non-blank selection. Conversion
    actions are offered when the selected text contains the widget they
    convert from.
    """

    def __init__(self, analyzer: DartAnalyzer | None = None, config: VeloConfig | None = None):
        self.analyzer = analyzer or DartAnalyzer()
        self.config = config or VeloConfig()

    def propose(self, document: TextDocument, selection: Range) -> list[CodeActionCandidate]:
        """Propose code actions for the selected text.

        Args:
            document: Document containing the selection
            selection: Selected range

        Returns:
            Wrap candidates followed by applicable conversion candidates;
            empty if the selection is blank
        """
        selected_text = document.get_text(selection).strip()
        if not selected_text:
            return []

        candidates = self._wrap_candidates(document, selected_text)
        candidates.extend(self._conversion_candidates(selected_text))

        logger.debug(f"Proposed {len(candidates)} code actions")
        return candidates

    def _wrap_candidates(self, document: TextDocument, selected_text: str) -> list[CodeActionCandidate]:
        bindings = self.analyzer.find_type_bindings(document.get_text())
        if bindings:
            velo_type = bindings[0].primary_type
            state_type = bindings[0].state_type
        else:
            velo_type = self.config.default_velo_type
            state_type = self.config.default_state_type

        return [
            CodeActionCandidate(
                WRAP_WITH_BUILDER,
                generate_wrap_expression(WrapKind.BUILDER, selected_text, velo_type, state_type),
            ),
            CodeActionCandidate(
                WRAP_WITH_LISTENER,
                generate_wrap_expression(WrapKind.LISTENER, selected_text, velo_type, state_type),
            ),
            CodeActionCandidate(
                WRAP_WITH_CONSUMER,
                generate_wrap_expression(WrapKind.CONSUMER, selected_text, velo_type, state_type),
            ),
            CodeActionCandidate(WRAP_WITH_PROVIDER, generate_provider(selected_text, velo_type)),
        ]

    def _conversion_candidates(self, selected_text: str) -> list[CodeActionCandidate]:
        candidates = []

        if "VeloBuilder" in selected_text:
            candidates.append(CodeActionCandidate(CONVERT_TO_CONSUMER, builder_to_consumer(selected_text)))

        if "VeloConsumer" in selected_text:
            candidates.append(CodeActionCandidate(CONVERT_TO_BUILDER, consumer_to_builder(selected_text)))

        if "Provider<" in selected_text and "MultiProvider" not in selected_text:
            candidates.append(
                CodeActionCandidate(CONVERT_TO_MULTI_PROVIDER, provider_to_multi_provider(selected_text))
            )

        return candidates
