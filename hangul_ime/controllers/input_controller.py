from __future__ import annotations

import logging
from typing import Optional

from hangul_ime.domain.automaton import CompositionAutomaton, StepResult
from hangul_ime.domain.keymap import KeyMap, load_keymap
from hangul_ime.services.commit_sink import TextCommitSink
from hangul_ime.services.settings_store import DEFAULT_PASSTHROUGH, SettingsStore

logger = logging.getLogger(__name__)


class InputController:
    """Drives the automaton from raw keys.

    Responsibilities:
    - map each key to a classified event through the KeyMap
    - flush and emit passthrough characters (whitespace, punctuation) verbatim
    - turn any other out-of-alphabet key into a RESET

    This class does not compose syllables itself.
    """

    def __init__(
        self,
        *,
        keymap: Optional[KeyMap] = None,
        sink: Optional[TextCommitSink] = None,
        compound_double_chars: bool = False,
        passthrough: str = DEFAULT_PASSTHROUGH,
    ) -> None:
        self._keymap = keymap or KeyMap()
        self._sink = sink or TextCommitSink()
        self._passthrough = passthrough
        self._automaton = CompositionAutomaton(
            sink=self._sink,
            compound_double_chars=compound_double_chars,
        )

    @classmethod
    def from_settings(cls, store: SettingsStore, *, compound_double_chars: Optional[bool] = None) -> "InputController":
        settings = store.get_ime_settings()
        compound = settings.compound_double_chars if compound_double_chars is None else compound_double_chars
        return cls(
            keymap=load_keymap(settings.keymap_path),
            compound_double_chars=compound,
            passthrough=settings.passthrough,
        )

    @property
    def automaton(self) -> CompositionAutomaton:
        return self._automaton

    @property
    def sink(self) -> TextCommitSink:
        return self._sink

    @property
    def text(self) -> str:
        """Committed text followed by the live preview of the open block."""
        return self._sink.text + self._automaton.preview()

    def press(self, key: str) -> StepResult:
        if key in self._keymap:
            return self._automaton.feed(self._keymap.lookup(key))

        if key in self._passthrough:
            committed = self._automaton.flush()
            self._sink.write(key)
            return StepResult(committed=committed, preview=self._automaton.preview())

        logger.debug("Out-of-alphabet key %r: resetting open block", key)
        return self._automaton.feed(None)

    def backspace(self) -> bool:
        return self._automaton.backspace()

    def finish(self) -> str:
        """Commit whatever is open and return the full text."""
        self._automaton.flush()
        return self._sink.text

    def transliterate(self, text: str) -> str:
        for key in text:
            self.press(key)
        return self.finish()
