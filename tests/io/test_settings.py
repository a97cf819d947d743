"""Unit tests for loading parser settings from YAML files."""

from pathlib import Path

import pytest

from typed_pddl.io.settings import DEFAULT_MAX_NESTING_DEPTH, ParserSettings, load_settings


def test_default_settings() -> None:
    """Verify the default parser settings."""
    settings = ParserSettings()

    assert settings.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH == 40
    assert settings.require_complete_input
    assert settings.log_level == "WARNING"


def test_load_settings(tmp_path: Path) -> None:
    """Verify that settings are loaded from a YAML file."""
    # Arrange
    yaml_path = tmp_path / "settings.yaml"
    yaml_path.write_text("max_nesting_depth: 8\nrequire_complete_input: false\nlog_level: DEBUG\n")

    # Act
    settings = load_settings(yaml_path)

    # Assert
    assert settings == ParserSettings(
        max_nesting_depth=8,
        require_complete_input=False,
        log_level="DEBUG",
    )


def test_load_settings_from_empty_file(tmp_path: Path) -> None:
    """Verify that an empty YAML file yields the default settings."""
    yaml_path = tmp_path / "empty.yaml"
    yaml_path.write_text("")

    assert load_settings(str(yaml_path)) == ParserSettings()


@pytest.mark.parametrize(
    "contents",
    [
        "max_nesting_depth: 0\n",
        "max_nesting_depth: deep\n",
        "log_level: VERBOSE\n",
        "strict_requirements: true\n",
        "- max_nesting_depth\n",
        "max_nesting_depth: [1\n",
    ],
)
def test_load_invalid_settings(contents: str, tmp_path: Path) -> None:
    """Verify that invalid YAML or invalid setting values raise a RuntimeError."""
    # Arrange
    yaml_path = tmp_path / "invalid.yaml"
    yaml_path.write_text(contents)

    # Act/Assert
    with pytest.raises(RuntimeError):
        load_settings(yaml_path)


def test_load_settings_from_missing_file(tmp_path: Path) -> None:
    """Verify that loading settings from a nonexistent file raises a FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")
