"""Concrete Loader for local profile / rule documents (JSON, or YAML by extension)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

from ruamel.yaml import YAML

from ..exceptions import DocumentLoadError, DocumentParseError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read a profile or rule document from disk and return a Python `dict`.

    ``.yaml`` / ``.yml`` files go through the YAML parser; any other path,
    with or without an extension, is parsed as JSON. Invalid UTF-8 bytes
    are replaced with U+FFFD rather than rejected.
    """

    yaml_exts: set[str] = _YAML_EXTS

    @staticmethod
    def is_yaml(path: str | Path) -> bool:
        return Path(path).suffix.lower() in FileLoader.yaml_exts

    @staticmethod
    def load(path: str | Path) -> Dict[str, Any]:
        file_path = Path(path)

        # validation
        if not file_path.exists():
            logger.error("Cannot open input file: %s", file_path)
            raise DocumentLoadError(f"File not found: {file_path}", path=file_path)

        try:
            raw_text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            logger.error("Cannot open input file: %s", file_path)
            raise DocumentLoadError(
                f"Cannot read {file_path.name}: {exc}", path=file_path
            ) from exc

        # parse
        try:
            if FileLoader.is_yaml(file_path):
                data: Dict[str, Any] = _yaml_parser.load(raw_text)
            else:
                data = json.loads(raw_text)
        except Exception as exc:
            raise DocumentParseError(
                f"Cannot parse {file_path.name}: {exc}", path=file_path
            ) from exc

        if not isinstance(data, dict):
            raise DocumentParseError("Top-level object must be a mapping", path=file_path)

        logger.debug("Document %s loaded (%d root keys)", file_path, len(data))
        return data
