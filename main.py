from __future__ import annotations

"""Command-line entry point: romaja keys in, Hangul out.

    python main.py hangug mal
    echo "seoul" | python main.py --compound
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from hangul_ime.controllers.input_controller import InputController
from hangul_ime.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def transliterate(text: str, *, store: SettingsStore, compound_double_chars: Optional[bool] = None) -> str:
    """Transliterate one piece of text with a fresh controller."""
    controller = InputController.from_settings(store, compound_double_chars=compound_double_chars)
    return controller.transliterate(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Compose Hangul syllables from romaja keys.")
    parser.add_argument("text", nargs="*", help="Keys to transliterate (reads stdin when omitted).")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument(
        "--compound",
        action="store_true",
        default=None,
        help="Enable compound-double-chars mode (oo, ee and generic vowel merges).",
    )
    parser.add_argument("--debug", action="store_true", help="Log automaton decisions.")
    args = parser.parse_args(argv)

    store = SettingsStore(settings_path=args.settings)
    _configure_logging("DEBUG" if args.debug else store.get_log_level())
    logger.debug("Settings: %s", store.path)

    if args.text:
        print(transliterate(" ".join(args.text), store=store, compound_double_chars=args.compound))
        return 0

    for line in sys.stdin:
        print(transliterate(line.rstrip("\n"), store=store, compound_double_chars=args.compound))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
