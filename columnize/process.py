"""
Two-pass column alignment over a single stream of lines.

Header lines are written straight away. Body lines go through a tail buffer so the
last footer lines never reach column inference; the lines it releases are observed
by the layout and kept. Once input ends the kept lines are rendered against the
final columns, then whatever the tail buffer still holds is written unchanged.
"""

from enum import Enum
from typing import Iterable, TextIO

import structlog

from columnize.errors import InputReadError, PhaseError
from columnize.layouts import layout_for
from columnize.settings import Settings
from columnize.tail_buffer import TailBuffer

log = structlog.get_logger(__name__)


class Phase(Enum):
    AWAITING_HEADER = "awaiting_header"
    COLLECTING_BODY = "collecting_body"
    REPLAYING = "replaying"
    DRAINING = "draining"
    DONE = "done"


def strip_newline(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


class Columnizer:
    def __init__(self, out: TextIO, settings: Settings = Settings()):
        self.out = out
        self.settings = settings
        self.layout = layout_for(settings.strategy, settings.justification)
        self.tail = TailBuffer(settings.footer_lines)
        self.lines: list[str] = []
        self._headers_seen = 0
        self.phase = Phase.AWAITING_HEADER if settings.header_lines else Phase.COLLECTING_BODY

    def feed(self, line: str) -> None:
        """Accept one input line, with or without its line terminator."""
        line = strip_newline(line)

        if self.phase is Phase.AWAITING_HEADER:
            self.out.write(line + "\n")
            self._headers_seen += 1
            if self._headers_seen == self.settings.header_lines:
                log.debug("header passed through", lines=self._headers_seen)
                self.phase = Phase.COLLECTING_BODY
            return

        if self.phase is not Phase.COLLECTING_BODY:
            raise PhaseError(f"cannot accept input while {self.phase.value}")

        if (released := self.tail.push(line)) is None:
            return
        self.layout.observe(released)
        self.lines.append(released)

    def finish(self) -> None:
        if self.phase is Phase.DONE:
            raise PhaseError("columnizer already finished")

        self.phase = Phase.REPLAYING
        log.debug("replaying lines", lines=len(self.lines), columns=len(self.layout.widths))
        for line in self.lines:
            self.out.write(self.layout.render(line, self.settings.delimiter))
        self.lines = []

        self.phase = Phase.DRAINING
        footer = self.tail.drain()
        log.debug("draining footer", lines=len(footer))
        for line in footer:
            self.out.write(line + "\n")

        self.phase = Phase.DONE

    def run(self, lines: Iterable[str]) -> None:
        lines = iter(lines)
        while True:
            # only reading is wrapped; write failures on out propagate as they are
            try:
                line = next(lines)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as err:
                raise InputReadError(f"cannot read input: {err}") from err
            self.feed(line)
        self.finish()


def columnize(lines: Iterable[str], out: TextIO, settings: Settings = Settings()) -> None:
    Columnizer(out, settings).run(lines)
