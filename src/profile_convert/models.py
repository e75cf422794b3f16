from __future__ import annotations

"""
models.py – profile and conversion-policy documents
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Typed view of the two JSON documents the converter consumes: a cache
server profile (parameters + descriptive metadata) and the rule document
that rewrites it to a newer schema version.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class RuleAction(str, Enum):
    """Non-replacement operations a conversion rule may request."""

    DELETE = "delete"


# ---------------------------------------------------------------------------
# Profile document
# ---------------------------------------------------------------------------


class Parameter(BaseModel):
    """Single configuration entry scoped to a config file.

    Identity is the ``(name, config_file)`` pair; ``value`` is not part of it.
    Instances are immutable, transformations go through ``model_copy``.
    """

    name: str = Field("", description="Parameter name, e.g. *CONFIG proxy.config.http.server_ports*.")
    config_file: str = Field("", description="Config file the parameter lives in.")
    value: str = Field("", description="Raw string value.")

    model_config = ConfigDict(extra="ignore", frozen=True)

    # ----- validators --------------------------------------------------------
    @field_validator("name", "config_file", "value", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def identity(self) -> tuple[str, str]:
        return (self.name, self.config_file)

    def __str__(self) -> str:
        return f'{{"{self.name}", "{self.config_file}", "{self.value}"}}'


class ProfileDescription(BaseModel):
    """Descriptive metadata of a profile (the ``profile`` JSON object)."""

    description: str = Field("", description="Free-text description.")
    name: str = Field("", description="Profile name.")
    type: str = Field("", description="Profile type, e.g. *ATS_PROFILE*.")

    model_config = ConfigDict(extra="ignore")

    @field_validator("description", "name", "type", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class Profile(BaseModel):
    """A server role's configuration: ordered parameters plus metadata."""

    parameters: List[Parameter] = Field(
        default_factory=list,
        description="Parameters in source-document order.",
    )
    description: ProfileDescription = Field(
        default_factory=ProfileDescription,
        alias="profile",
        description="Profile name, description and type.",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("parameters", mode="before")
    @classmethod
    def _null_is_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("description", mode="before")
    @classmethod
    def _null_is_empty_description(cls, v: Any) -> Any:
        return {} if v is None else v

    def to_document(self) -> Dict[str, Any]:
        """Return the profile as a plain dict in the on-disk key order."""
        return self.model_dump(by_alias=True)


# ---------------------------------------------------------------------------
# Conversion policy document
# ---------------------------------------------------------------------------


class ReplaceRule(BaseModel):
    """Literal substring replacement applied to profile metadata."""

    old: str = ""
    new: str = ""

    model_config = ConfigDict(extra="ignore")

    @field_validator("old", "new", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    def apply(self, text: str) -> str:
        # An empty ``old`` inserts ``new`` around every character.
        return text.replace(self.old, self.new)


class ConversionRule(BaseModel):
    """One pattern-matched transformation or deletion instruction.

    The fields of ``match_parameter`` are regular expressions. Empty
    ``new_*`` fields leave the corresponding parameter field untouched.
    """

    match_parameter: Parameter = Field(
        default_factory=Parameter,
        description="Regex patterns for name, config_file and value.",
    )
    new_name: str = ""
    new_config_file: str = ""
    new_value: str = ""
    action: str = Field(
        "",
        description="Optional action; only `RuleAction` literals are honoured.",
    )

    model_config = ConfigDict(extra="ignore")

    @field_validator("new_name", "new_config_file", "new_value", "action", mode="before")
    @classmethod
    def _null_is_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def is_delete(self) -> bool:
        return self.action == RuleAction.DELETE.value


class ConversionPolicy(BaseModel):
    """The rule document describing how to validate and transform a profile."""

    validate_parameters: List[Parameter] = Field(
        default_factory=list,
        description="Parameters that must exist in the profile with these exact values.",
    )
    replace_name: ReplaceRule = Field(default_factory=ReplaceRule)
    replace_description: ReplaceRule = Field(default_factory=ReplaceRule)
    conversion_rules: List[ConversionRule] = Field(
        default_factory=list,
        alias="conversion_actions",
        description="Rules in priority order; the first match wins.",
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("validate_parameters", "conversion_rules", mode="before")
    @classmethod
    def _null_is_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v
