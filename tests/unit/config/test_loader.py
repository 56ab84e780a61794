"""Tests for configuration models and the loader."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError
import pytest

from momentum.core.animation.easing.description import EasingLibrary
from momentum.core.animation.specs import SpringSpec
from momentum.core.animation.spring.description import (
    PhysicalSpringParameters,
    VisualSpringParameters,
)
from momentum.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from momentum.core.config.models import AppConfig, LoggingConfig

YAML_CONFIG = """
logging:
  level: DEBUG
animation:
  frame_rate: 120
  easing:
    easing: sine
    duration: 450
springs:
  wobbly:
    duration: 0.8
    bounce: 0.6
  stiff:
    damping: 40
    stiffness: 400
"""


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        "path,expected",
        [("config.json", "json"), ("config.yaml", "yaml"), ("CONFIG.YML", "yaml")],
    )
    def test_known_formats(self, path: str, expected: str) -> None:
        """Formats are detected from the extension."""
        assert detect_format(path) == expected

    def test_unknown_format(self) -> None:
        """Unsupported extensions raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("config.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_yaml(self, tmp_path) -> None:
        """YAML files load into dictionaries."""
        path = tmp_path / "momentum.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        data = load_config(path)

        assert data["animation"]["frame_rate"] == 120
        assert data["springs"]["stiff"] == {"damping": 40, "stiffness": 400}

    def test_load_json(self, tmp_path) -> None:
        """JSON files load into dictionaries."""
        path = tmp_path / "momentum.json"
        path.write_text(json.dumps({"logging": {"level": "WARNING"}}), encoding="utf-8")

        assert load_config(path) == {"logging": {"level": "WARNING"}}

    def test_empty_yaml(self, tmp_path) -> None:
        """An empty YAML file is an empty mapping."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_missing_file(self, tmp_path) -> None:
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_json(self, tmp_path) -> None:
        """Broken JSON raises ValueError naming the file."""
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path) -> None:
        """Broken YAML raises ValueError naming the file."""
        path = tmp_path / "broken.yaml"
        path.write_text("logging: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path) -> None:
        """The YAML root must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config and AppConfig."""

    def test_defaults_without_path(self) -> None:
        """No path yields the built-in defaults."""
        config = load_app_config()

        assert config == AppConfig()
        assert config.logging.level == "INFO"
        assert config.animation.frame_rate == 60.0
        assert config.animation.easing.easing == EasingLibrary.QUAD
        assert sorted(config.springs) == ["bouncy", "smooth", "snappy"]

    def test_load_yaml(self, tmp_path) -> None:
        """Values from the file override the defaults."""
        path = tmp_path / "momentum.yaml"
        path.write_text(YAML_CONFIG, encoding="utf-8")

        config = load_app_config(path)

        assert config.logging.level == "DEBUG"
        assert config.animation.frame_rate == 120.0
        assert config.animation.easing.easing == EasingLibrary.SINE
        assert config.animation.easing.duration == 450.0
        assert isinstance(config.springs["wobbly"], VisualSpringParameters)
        assert isinstance(config.springs["stiff"], PhysicalSpringParameters)

    def test_rejects_unknown_sections(self, tmp_path) -> None:
        """Unknown top-level keys fail validation."""
        path = tmp_path / "momentum.json"
        path.write_text(json.dumps({"render": {}}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_rejects_bad_log_level(self) -> None:
        """Log levels are validated."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_spring_preset(self) -> None:
        """Presets become spring specs."""
        spec = AppConfig().spring_preset("bouncy")

        assert isinstance(spec, SpringSpec)
        assert spec.spring.bounce == pytest.approx(0.3)

    def test_unknown_spring_preset(self) -> None:
        """Unknown presets raise KeyError listing the available ones."""
        with pytest.raises(KeyError, match="snappy"):
            AppConfig().spring_preset("wobbly")


class TestConfigureLogging:
    """Tests for configure_logging from app config."""

    def test_applies_level(self) -> None:
        """The configured level is applied to the root logger."""
        configure_logging(AppConfig(logging=LoggingConfig(level="WARNING")))
        assert logging.getLogger().level == logging.WARNING

    def test_defaults(self) -> None:
        """Without a config the defaults apply."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO
