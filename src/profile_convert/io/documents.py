"""Decode loaded documents into profile / policy models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from ..exceptions import DocumentParseError
from ..models import ConversionPolicy, Profile
from .file_loader import FileLoader

logger = logging.getLogger(__name__)


def parse_profile(data: Dict[str, Any], source: str | Path | None = None) -> Profile:
    """Build a `Profile` from an already-loaded mapping."""
    try:
        return Profile.model_validate(data)
    except ValidationError as exc:
        logger.error("Cannot parse input profile")
        raise DocumentParseError(
            f"Invalid profile document: {exc}", document="profile", path=source
        ) from exc


def parse_policy(data: Dict[str, Any], source: str | Path | None = None) -> ConversionPolicy:
    """Build a `ConversionPolicy` from an already-loaded mapping."""
    try:
        return ConversionPolicy.model_validate(data)
    except ValidationError as exc:
        logger.error("Cannot parse conversion rules")
        raise DocumentParseError(
            f"Invalid conversion rules: {exc}", document="rules", path=source
        ) from exc


def load_profile(path: str | Path) -> Profile:
    return parse_profile(FileLoader.load(path), source=path)


def load_policy(path: str | Path) -> ConversionPolicy:
    return parse_policy(FileLoader.load(path), source=path)
