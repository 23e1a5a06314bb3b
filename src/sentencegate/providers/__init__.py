"""
SentenceGate Providers Package

This package contains the stopword providers injected into a SentenceGate.
All providers follow the StopwordProvider protocol from ``core.abc``.
"""

from .wordlist import StopwordSet, StopwordLoadError, load_word_set
from .stopwords import StaticStopwordProvider, FileStopwordProvider, create_stopword_provider

__all__ = [
    'StopwordSet',
    'StopwordLoadError',
    'load_word_set',
    'StaticStopwordProvider',
    'FileStopwordProvider',
    'create_stopword_provider',
]
