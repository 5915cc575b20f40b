"""Tests for runtime settings."""

import pytest
from pydantic import ValidationError

from bender_rank.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.api_prefix == "/api"
        assert settings.recommended_limit == 3
        assert settings.finder_result_limit == 3

    def test_log_level_is_normalized(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None, log_level="loud")

    @pytest.mark.parametrize("field", ["recommended_limit", "finder_result_limit"])
    def test_limits_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})

    def test_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CATALOG_PATH", "/data/benders.json")
        monkeypatch.setenv("FINDER_RESULT_LIMIT", "5")
        settings = Settings(_env_file=None)
        assert settings.catalog_path == "/data/benders.json"
        assert settings.finder_result_limit == 5
