"""
SentenceGate - Sentence segmentation & information-gain filtering for search indexing.

Splits a document into sentence-like spans and drops the spans that are mostly
stopwords. The host pipeline injects stopwords, logging and metrics at runtime.
"""

__version__ = "0.1.0"
