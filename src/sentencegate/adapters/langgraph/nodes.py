"""LangGraph node factories for SentenceGate integration."""

from langchain_core.runnables import RunnableLambda
from ...runtime.sentence_gate import SentenceGate
from .state_keys import DOCUMENT_TEXT, SENTENCEGATE_OUTPUT

def make_sentence_gate_node(gate: SentenceGate, text_key: str = DOCUMENT_TEXT):
    """
    Create a LangGraph node that filters a document before indexing.

    Args:
        gate: Configured SentenceGate instance
        text_key: State key containing the document text

    Returns:
        RunnableLambda: Node that adds the filter result to state
    """
    def _filter_document(state):
        text = state.get(text_key, "")
        result = gate.filter_text(text)

        return {SENTENCEGATE_OUTPUT: {
            "kept_text": result.kept_text,
            "sentences": [token.text for token in result.tokens],
            "offsets": [(token.start_offset, token.end_offset) for token in result.tokens],
            "emitted": result.emitted,
            "skipped": result.skipped,
            "skip_ratio": result.skip_ratio,
        }}

    return RunnableLambda(_filter_document)
