from __future__ import annotations

from dataclasses import dataclass
import logging
import os


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayConfig:
    use_braille: bool = True
    # Rich style applied to the whole canvas, eg. "bold green"
    style: str = ""

    @classmethod
    def detect_terminal(cls, style: str = "") -> DisplayConfig:
        # Guess from TERM and LANG: dumb terminals, non-UTF-8 locales and the
        # Linux console (whose default fonts lack the Braille block) get ASCII
        term = os.environ.get("TERM", "").lower()
        lang = os.environ.get("LANG", "").lower()

        is_dumb = term in ("dumb", "unknown")
        is_linux_console = term == "linux"
        supports_utf8 = "utf-8" in lang or "utf8" in lang

        config = cls(
            use_braille=supports_utf8 and not (is_dumb or is_linux_console),
            style=style,
        )
        logger.debug("Detected %s for TERM=%r LANG=%r", config, term, lang)
        return config
