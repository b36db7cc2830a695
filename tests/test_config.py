"""Tests for config loading."""

import pytest

from career_compass.config import AppConfig, LLMConfig, UsageConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.model == "claude-haiku-4-5-20251001"
        assert config.pipeline.completion_attempts == 2
        assert config.github.api_base == "https://api.github.com"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.pipeline.deadline_seconds == 90.0

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "llm:\n  model: test-model\npipeline:\n  completion_attempts: 3\n  enrich_resources_with_llm: false\n"
        )
        config = load_config(yaml_path)
        assert config.llm.model == "test-model"
        assert config.pipeline.completion_attempts == 3
        assert config.pipeline.enrich_resources_with_llm is False
        # Defaults for unspecified
        assert config.github.max_repos == 10

    def test_empty_yaml_gives_defaults(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("")
        assert load_config(yaml_path) == AppConfig()

    def test_usage_resolved_path(self):
        usage = UsageConfig(db_path="~/test.db")
        assert "~" not in str(usage.resolved_db_path)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.model = "changed"
