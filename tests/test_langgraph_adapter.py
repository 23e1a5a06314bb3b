"""Test the LangGraph node adapter."""

import pytest

pytest.importorskip("langchain_core")

from sentencegate.adapters.langgraph.nodes import make_sentence_gate_node
from sentencegate.adapters.langgraph.state_keys import DOCUMENT_TEXT, SENTENCEGATE_OUTPUT


class TestSentenceGateNode:
    """Test the node factory."""

    def test_node_filters_document(self, filtering_gate):
        node = make_sentence_gate_node(filtering_gate)
        state = {DOCUMENT_TEXT: "First sentence. Should ignore this sentence ignore. Another sentence with some more words."}

        output = node.invoke(state)[SENTENCEGATE_OUTPUT]

        assert output["sentences"] == ["First sentence. ", "Another sentence with some more words."]
        assert output["offsets"] == [(0, 16), (52, 90)]
        assert output["emitted"] == 2
        assert output["skipped"] == 1

    def test_custom_text_key(self, plain_gate):
        node = make_sentence_gate_node(plain_gate, text_key="body")

        output = node.invoke({"body": "One. Two."})[SENTENCEGATE_OUTPUT]

        assert output["kept_text"] == "One. Two."
        assert output["skip_ratio"] == 0.0

    def test_missing_text_is_empty_document(self, plain_gate):
        output = make_sentence_gate_node(plain_gate).invoke({})[SENTENCEGATE_OUTPUT]

        assert output["sentences"] == []
