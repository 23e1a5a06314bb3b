#!/usr/bin/env python3
"""
SentenceGate Demo - Shows sentence segmentation with stopword filtering.
Runs the same documents through a plain gate and a filtering gate.
"""

import sys
from pathlib import Path

# Add src to path so we can import sentencegate
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sentencegate.config.schema import GateConfig
from sentencegate.core.util import ConsoleLogger
from sentencegate.providers.stopwords import StaticStopwordProvider
from sentencegate.runtime.sentence_gate import SentenceGate

GERMAN_STOPWORDS = [
    "der", "die", "das", "und", "oder", "ist", "sind", "ein", "eine", "mit",
    "für", "auf", "zu", "im", "in", "wir", "sie", "es", "nicht", "auch",
]

DOCUMENTS = [
    "Bequemer Sneaker aus Leder. Wir sind für Sie da und es ist auch nicht zu spät. Sohle aus Naturkautschuk.",
    "90% Baumwolle, 10% Elasthan, Größe 42, waschbar bei 30 Grad.",
    "Das ist es und das ist die eine oder die andere.",
]


def main():
    provider = StaticStopwordProvider(GERMAN_STOPWORDS)
    plain = SentenceGate(config=GateConfig(), provider=provider)
    filtering = SentenceGate(config=GateConfig(filter_enabled=True, min_sentence_length=4),
                             provider=provider, logger=ConsoleLogger())

    for text in DOCUMENTS:
        print("=" * 60)
        print(f"Document: {text}")

        print("\n🧪 Segments:")
        for token in plain.tokenize(text):
            print(f"   [{token.start_offset:3d}-{token.end_offset:3d}] {token.text!r}")

        print("\n🧹 Filtered:")
        result = filtering.filter_text(text)
        for token in result.tokens:
            print(f"   [{token.start_offset:3d}-{token.end_offset:3d}] {token.text!r}")
        print(f"   📊 kept {result.emitted}, dropped {result.skipped}")
        print()


if __name__ == "__main__":
    main()
