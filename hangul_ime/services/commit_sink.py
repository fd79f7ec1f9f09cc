from __future__ import annotations

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class TextCommitSink:
    """Collects committed blocks into host text.

    Callable, so it can be passed straight to CompositionAutomaton(sink=...).
    An optional listener is notified after each commit.
    """

    def __init__(self, on_commit: Optional[Callable[[str], None]] = None) -> None:
        self._parts: list[str] = []
        self._on_commit = on_commit

    def __call__(self, text: str) -> None:
        self.commit(text)

    def commit(self, text: str) -> None:
        self._parts.append(text)
        if self._on_commit is not None:
            try:
                self._on_commit(text)
            except (AttributeError, RuntimeError, TypeError):
                # Listener is injected; keep the commit path resilient.
                logger.exception("Commit listener failed")

    def write(self, text: str) -> None:
        """Append host text that did not go through the automaton (passthrough)."""
        self._parts.append(text)

    @property
    def parts(self) -> list[str]:
        return list(self._parts)

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()
