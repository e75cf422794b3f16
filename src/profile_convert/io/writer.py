"""Serialisation of the converted profile."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from ..exceptions import OutputWriteError
from ..models import Profile

logger = logging.getLogger(__name__)


class ProfileWriter:
    """
    Render a profile as indented JSON and write it to a file or a stream.

    Characters such as ``<``, ``>`` and ``&`` as well as non-ASCII text are
    written literally. The document is rendered in full before anything is
    written so a failed run never leaves a truncated output behind.
    """

    def __init__(self, indent: int = 4) -> None:
        self.indent = indent

    def render(self, profile: Profile) -> str:
        return json.dumps(profile.to_document(), indent=self.indent, ensure_ascii=False) + "\n"

    def write(self, profile: Profile, out: Path | None = None, stream: TextIO | None = None) -> None:
        """
        Write ``profile`` to ``out`` or, when no path is given, to ``stream``
        (stdout by default).

        Raises:
            OutputWriteError: If the output file cannot be written.
        """
        text = self.render(profile)

        if out is None:
            (stream or sys.stdout).write(text)
            return

        try:
            out.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write output file %s", out)
            raise OutputWriteError(f"Cannot write output file: {exc}", path=out) from exc

        logger.debug("Converted profile written to %s", out)
