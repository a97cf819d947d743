"""Define the Pydantic model configuring the PDDL parser, loadable from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing_extensions import Annotated

DEFAULT_MAX_NESTING_DEPTH = 40
"""Default ceiling on how deeply recursive grammar rules may nest."""

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ParserSettings(BaseModel):
    """Settings controlling how PDDL text is parsed and reported."""

    max_nesting_depth: Annotated[
        int,
        Field(gt=0, description="Deepest nesting of expressions before parsing is aborted"),
    ] = DEFAULT_MAX_NESTING_DEPTH
    require_complete_input: bool = Field(
        default=True,
        description="Whether anything but whitespace and comments may follow a definition",
    )
    log_level: LogLevel = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> ParserSettings:
        """Validate a parser settings YAML file and return the resulting settings.

        An empty file yields the default settings.

        :param yaml_path: Path to a YAML file to be validated
        :return: Validated ParserSettings instance
        :raises FileNotFoundError: If the YAML file does not exist
        :raises RuntimeError: If the file cannot be loaded or its contents fail validation
        """
        yaml_data = load_settings_data(yaml_path)

        try:
            return ParserSettings.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err


def load_settings_data(yaml_path: Path) -> dict[str, Any]:
    """Load the mapping of setting names to values stored in a YAML file.

    :param yaml_path: Path to the YAML file to be imported
    :return: Dictionary mapping setting names to values (empty if the file is empty)
    :raises FileNotFoundError: If the YAML file does not exist
    :raises RuntimeError: If the file is not valid YAML or does not hold a mapping
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load settings from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to load from YAML file: {yaml_path}") from error

    if yaml_data is None:
        return {}
    if not isinstance(yaml_data, dict):
        raise RuntimeError(f"Expected a mapping of settings in {yaml_path}.")
    return yaml_data


def load_settings(yaml_path: Path | str) -> ParserSettings:
    """Load parser settings from the given YAML file."""
    return ParserSettings.from_yaml(Path(yaml_path))
