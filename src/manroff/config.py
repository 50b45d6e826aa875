"""Declarative page configuration schema and parsing."""

from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from manroff.exceptions import ConfigurationError


class SectionConfig(BaseModel):
    """One section of a configured page."""

    title: str = Field(..., description="Section title, uppercased on render")
    content: list[str] = Field(
        default_factory=list, description="Roff fragments, concatenated in order"
    )


class PageConfig(BaseModel):
    """Complete page description.

    Mirrors the ManPage header fields; sections are appended in the
    order they are listed.
    """

    title: str = Field(..., description="Page title, usually the command name")
    section: int = Field(default=1, ge=-128, le=127, description="Manual section number")
    footer: str = Field(default="", description="Left footer, usually the version")
    current: str = Field(default="", description="Center footer, usually the date")
    header: str = Field(default="", description="Center header, e.g. 'User Commands'")
    sections: list[SectionConfig] = Field(default_factory=list)


def parse_page_config(source: str) -> PageConfig:
    """Parse a YAML page description.

    Args:
        source: YAML text describing one page

    Returns:
        Validated PageConfig

    Raises:
        ConfigurationError: If the YAML is invalid or does not match the schema

    Example:
        config = parse_page_config('''
        title: mytool
        section: 1
        sections:
          - title: name
            content: ["mytool - do things"]
        ''')
        page = ManPage.from_config(config)
    """
    try:
        raw_config: Any = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in page config: {e}") from e

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            f"Page config must be a mapping, got {type(raw_config).__name__}"
        )

    try:
        return PageConfig.model_validate(raw_config)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid page config: {e}") from e
