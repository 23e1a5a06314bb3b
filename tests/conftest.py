"""Test configuration and fixtures."""

import pytest

from sentencegate.config.loader import load_config_from_string
from sentencegate.config.schema import GateConfig
from sentencegate.providers.stopwords import StaticStopwordProvider
from sentencegate.runtime.sentence_gate import SentenceGate


STOPWORDS = ["stopword", "ignore", "this", "word"]


@pytest.fixture
def stopword_provider():
    """Provide the small stopword list used throughout the tests."""
    return StaticStopwordProvider(STOPWORDS)


@pytest.fixture
def filtering_gate(stopword_provider):
    """Provide a gate with filtering enabled and default thresholds."""
    return SentenceGate(config=GateConfig(filter_enabled=True), provider=stopword_provider)


@pytest.fixture
def plain_gate():
    """Provide a gate with default config (no filtering, no stopwords)."""
    return SentenceGate(config=GateConfig(), provider=StaticStopwordProvider())


@pytest.fixture
def stopword_file(tmp_path):
    """Provide a stopword file with comments and blank lines."""
    path = tmp_path / "stopwords.txt"
    path.write_text("# common words\nStopword\nignore\n\nthis\n  word  \n", encoding="utf-8")
    return path


@pytest.fixture
def sample_config_yaml():
    """Provide a sample gate configuration as YAML."""
    return """
filter_enabled: true
comma_word_threshold: 0.25
max_stopword_ratio: 0.3
min_sentence_length: 4
stopword_source: stopwords.txt
normalization: german
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(tmp_path, sample_config_yaml, stopword_file):
    """Provide a config file next to its stopword file."""
    path = tmp_path / "sentencegate.yaml"
    path.write_text(sample_config_yaml, encoding="utf-8")
    return path


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def events(self, msg: str):
        """Return the key-value context of every message with this name."""
        return [kv for _, m, kv in self.messages if m == msg]


class SimpleTestMeter:
    """Meter that records counters and observations in dicts."""

    def __init__(self):
        self.counters = {}
        self.observations = {}

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.setdefault(name, []).append(value)


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
