"""Default state key names for LangGraph integration."""

# Standard state keys used by SentenceGate nodes
DOCUMENT_TEXT = "document_text"
SENTENCEGATE_OUTPUT = "sentencegate_output"
