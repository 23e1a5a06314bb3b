"""Test configuration loading and validation."""

import pytest
from pathlib import Path

from sentencegate.config.loader import (
    load_config, load_config_from_string, load_config_from_args, ConfigLoadError
)
from sentencegate.config.schema import (
    GateConfig, DEFAULT_COMMA_WORD_THRESHOLD, DEFAULT_MAX_STOPWORD_RATIO, DEFAULT_MIN_SENTENCE_LENGTH
)


class TestConfigLoading:
    """Test config loading from YAML files, strings and argument maps."""

    def test_load_valid_config_from_string(self, sample_config_yaml):
        """Test loading valid config from YAML string."""
        config = load_config_from_string(sample_config_yaml)

        assert isinstance(config, GateConfig)
        assert config.filter_enabled is True
        assert config.comma_word_threshold == 0.25
        assert config.max_stopword_ratio == 0.3
        assert config.min_sentence_length == 4
        assert config.stopword_source == "stopwords.txt"
        assert config.normalization == "german"

    def test_load_valid_config_from_file(self, temp_config_file):
        """Test loading valid config from file."""
        config = load_config(temp_config_file)

        assert isinstance(config, GateConfig)
        assert config.filter_enabled is True

    def test_empty_yaml_gives_defaults(self):
        """An empty document means 'all defaults'."""
        config = load_config_from_string("")

        assert config == GateConfig()

    def test_load_invalid_yaml(self):
        """Test loading invalid YAML."""
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config_from_string(invalid_yaml)

    def test_load_non_mapping(self):
        """Test that a YAML list is rejected."""
        with pytest.raises(ConfigLoadError, match="YAML mapping"):
            load_config_from_string("- filter_enabled\n- true\n")

    def test_load_malformed_threshold(self):
        """Unparseable numbers are fatal at build time."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("comma_word_threshold: lots\n")

    def test_load_out_of_range_values(self):
        """Test loading config with invalid threshold values."""
        invalid_yaml = """
        max_stopword_ratio: 1.5   # Invalid - should be <= 1.0
        min_sentence_length: -1   # Invalid - should be >= 0
        """

        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string(invalid_yaml)

    def test_load_unknown_normalization(self):
        """Only the registered lowercasing strategies are accepted."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("normalization: klingon\n")

    def test_load_extra_forbidden_fields(self):
        """Test that extra fields are forbidden."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("filter_enabled: true\nextra_field: not_allowed\n")

    def test_load_nonexistent_file(self):
        """Test loading from non-existent file."""
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(Path("/does/not/exist.yaml"))

    def test_load_from_factory_args(self):
        """String argument maps with camelCase names are parsed."""
        config = load_config_from_args({
            "filter": "true",
            "commaWordThreshold": "0.3",
            "maxStopwordRatio": "0.5",
            "minSentenceLength": "3",
            "stopwordfile": "stopwords.txt",
        })

        assert config.filter_enabled is True
        assert config.comma_word_threshold == 0.3
        assert config.max_stopword_ratio == 0.5
        assert config.min_sentence_length == 3
        assert config.stopword_source == "stopwords.txt"

    def test_load_from_factory_args_malformed(self):
        """A non-numeric argument is a fatal configuration error."""
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_args({"minSentenceLength": "five"})


class TestConfigSchema:
    """Test the config schema defaults and soft validation."""

    def test_defaults(self):
        """Test default values."""
        config = GateConfig()

        assert config.filter_enabled is False
        assert config.comma_word_threshold == DEFAULT_COMMA_WORD_THRESHOLD == 0.2
        assert config.max_stopword_ratio == DEFAULT_MAX_STOPWORD_RATIO == 0.21
        assert config.min_sentence_length == DEFAULT_MIN_SENTENCE_LENGTH == 5
        assert config.stopword_source is None
        assert config.ignore_case is True
        assert config.normalization == "german"

    def test_snake_and_camel_case_names(self):
        """Both spellings of an option build the same config."""
        assert GateConfig(filter_enabled=True) == GateConfig.model_validate({"filterEnabled": True})

    def test_missing_stopword_source_issue(self):
        """A config without stopwords reports a soft issue."""
        issues = GateConfig(filter_enabled=True).validate_settings()

        assert any("stopword_source is not set" in issue for issue in issues)

    def test_unused_stopwords_issue(self):
        """Stopwords without filtering are reported too."""
        issues = GateConfig(stopword_source="stopwords.txt").validate_settings()

        assert issues == ["stopword_source is set but filtering is disabled"]

    def test_clean_config_has_no_issues(self, sample_config):
        """A complete config has nothing to report."""
        assert sample_config.validate_settings() == []
