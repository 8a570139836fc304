"""Configuration for naked text scanning."""

from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from naked_text_lint.errors import ConfigError
from naked_text_lint.models import DiagnosticSeverity

_DEFAULT_TEXT_COMPONENTS = ["Text", "TextComponent"]


class NakedTextLintConfig(BaseModel):
    """Configuration for the extractor and reporter with Pydantic validation.

    The first entry of ``text_components`` is the primary text component and
    is the one named in diagnostic messages; the rest are accepted aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
    )

    text_components: list[str] = Field(
        default_factory=lambda: list(_DEFAULT_TEXT_COMPONENTS),
        description="Tag names that are allowed to render text",
        min_length=1,
    )
    severity: DiagnosticSeverity = Field(
        default=DiagnosticSeverity.WARNING,
        description="Severity of published diagnostics",
    )

    @field_validator("text_components")
    @classmethod
    def validate_text_components(cls, v: list[str]) -> list[str]:
        """Strip tag names and reject empty ones."""
        names = [name.strip() for name in v]
        if not all(names):
            raise ValueError("Text component names must be non-empty strings")
        return names

    @property
    def primary_text_component(self) -> str:
        """Return the text component named in diagnostic messages."""
        return self.text_components[0]

    @property
    def exempt_tags(self) -> frozenset[str]:
        """Return every tag name whose text content is exempt."""
        return frozenset(self.text_components)

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from a properties dictionary.

        Args:
            properties: Raw properties containing:
                - text_components (list[str], optional): Exempt tag names.
                - severity (str, optional): Diagnostic severity.

        Returns:
            Validated configuration object

        Raises:
            ConfigError: If validation fails

        """
        try:
            return cls.model_validate(properties)
        except ValidationError as e:
            raise ConfigError(f"Invalid naked text configuration: {e}") from e

    @classmethod
    def from_yaml_file(cls, config_path: Path) -> Self:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to a YAML mapping of configuration properties

        Returns:
            Validated configuration object

        Raises:
            ConfigError: If the file cannot be read, parsed or validated

        """
        try:
            with open(config_path, encoding="utf-8") as f:
                properties = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse YAML config {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

        if properties is None:
            properties = {}
        if not isinstance(properties, dict):
            raise ConfigError(f"Invalid configuration format in {config_path}")

        return cls.from_properties(properties)  # type: ignore[arg-type]
