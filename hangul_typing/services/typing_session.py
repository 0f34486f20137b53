"""Typing session state for Hangul_typing.

This module holds the caller-clocked part of a typing animation so a UI layer
can stay thin and tests can drive it without any timer:

- reveal the disassembled units one at a time (`advance()`)
- pause / resume / restart
- fire start/end hooks exactly once per run
- decide whether the cursor is visible in each frame

It does not schedule anything. The caller decides *when* to call
`advance()`; the session only decides *what* is shown after each call.

Hooks are injected:
  - `on_typing_start()` before the first unit is revealed
  - `on_typing_end()` after the last unit is revealed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from hangul_typing.domain.assembler import Assembler, assemble
from hangul_typing.domain.disassembler import disassemble
from hangul_typing.domain.units import BREAK, Unit

logger = logging.getLogger(__name__)

VoidFn = Callable[[], None]

DEFAULT_CURSOR = "|"


@dataclass(frozen=True)
class TypingConfig:
    """Configuration for a typing session."""

    show_cursor: bool = True
    cursor_after_typing: bool = False
    cursor: str = DEFAULT_CURSOR
    start_paused: bool = False
    incremental: bool = True

    def normalised(self) -> "TypingConfig":
        cursor = str(self.cursor or "")
        if not cursor:
            cursor = DEFAULT_CURSOR

        return TypingConfig(
            show_cursor=bool(self.show_cursor),
            cursor_after_typing=bool(self.cursor_after_typing),
            cursor=cursor,
            start_paused=bool(self.start_paused),
            incremental=bool(self.incremental),
        )


@dataclass(frozen=True)
class TypingFrame:
    """What should be on screen after `index` units have been revealed."""

    index: int
    text: str
    done: bool
    cursor_visible: bool
    cursor: str = DEFAULT_CURSOR

    def display(self) -> str:
        if self.cursor_visible:
            return self.text + self.cursor
        return self.text

    def lines(self) -> list[str]:
        """Split the text at line breaks (one entry per rendered line)."""
        return self.text.split(BREAK.text)


class TypingSession:
    """Reveals the units of one text, one `advance()` at a time.

    Typical flow:
        session = TypingSession("안녕하세요", on_typing_end=done)
        while (frame := session.advance()) is not None:
            draw(frame.display())

    `advance()` returns None while paused and once every unit is revealed.
    `restart()` rewinds (optionally with new text) and re-arms the hooks.
    """

    def __init__(
        self,
        text: str,
        config: Optional[TypingConfig] = None,
        *,
        on_typing_start: Optional[VoidFn] = None,
        on_typing_end: Optional[VoidFn] = None,
    ) -> None:
        self._config: TypingConfig = (config or TypingConfig()).normalised()
        self._on_typing_start: Optional[VoidFn] = on_typing_start
        self._on_typing_end: Optional[VoidFn] = on_typing_end

        self._units: list[Unit] = disassemble(text)
        self._text: str = text
        self._assembler: Assembler = Assembler()
        self._index: int = 0
        self._rendered: str = ""
        self._started: bool = False
        self._ended: bool = False
        self._paused: bool = False

        self.restart()

    # ----------------------------
    # Public API
    # ----------------------------

    @property
    def config(self) -> TypingConfig:
        return self._config

    @property
    def text(self) -> str:
        return self._text

    @property
    def units(self) -> tuple[Unit, ...]:
        return tuple(self._units)

    def __len__(self) -> int:
        return len(self._units)

    def is_paused(self) -> bool:
        return self._paused

    def is_done(self) -> bool:
        return self._index >= len(self._units)

    def is_running(self) -> bool:
        return self._started and not self._ended and not self._paused

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def restart(self, text: Optional[str] = None) -> None:
        """Rewind to the first unit; `text` replaces the current text if given."""
        if text is not None:
            self._units = disassemble(text)
            self._text = text

        self._assembler.reset()
        self._index = 0
        self._rendered = ""
        self._started = False
        self._ended = False
        self._paused = self._config.start_paused
        logger.debug("Typing session ready: %d units", len(self._units))

    def advance(self) -> Optional[TypingFrame]:
        """Reveal one more unit and return the resulting frame."""
        if self._paused or self.is_done():
            return None

        if not self._started:
            self._started = True
            self._safe_call(self._on_typing_start, "on_typing_start")

        unit = self._units[self._index]
        self._index += 1
        if self._config.incremental:
            self._rendered = self._assembler.feed(unit)
        else:
            self._rendered = assemble(self._units[: self._index])

        if self.is_done() and not self._ended:
            self._ended = True
            self._safe_call(self._on_typing_end, "on_typing_end")

        return self.frame()

    def frame(self) -> TypingFrame:
        """The frame for the current position (does not advance)."""
        done = self.is_done()
        visible = self._config.show_cursor and (not done or self._config.cursor_after_typing)
        return TypingFrame(
            index=self._index,
            text=self._rendered,
            done=done,
            cursor_visible=visible,
            cursor=self._config.cursor,
        )

    def frames(self) -> Iterator[TypingFrame]:
        """Yield a frame for every remaining unit, ignoring the paused flag."""
        was_paused = self._paused
        self._paused = False
        try:
            while not self.is_done():
                frame = self.advance()
                if frame is None:
                    break
                yield frame
        finally:
            # A pause requested by the consumer mid-iteration is kept.
            self._paused = was_paused or self._paused

    # ----------------------------
    # Internal
    # ----------------------------

    @staticmethod
    def _safe_call(fn: Optional[VoidFn], name: str) -> None:
        if fn is None:
            return
        try:
            fn()
        except Exception:
            logger.exception("TypingSession hook %s failed", name)


__all__ = [
    "TypingConfig",
    "TypingFrame",
    "TypingSession",
]
