"""Terminal output for rendered generations."""

import sys
from typing import Optional, TextIO

# Erase display, move cursor to row 1 column 1
CLEAR_SCREEN = '\x1b[2J\x1b[1;1H'


class TerminalDisplay:
    """Writes frames to a text stream, clearing the screen before each one."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames_shown = 0

    def show(self, frame: str) -> None:
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(frame)
        self.stream.write('\n')
        self.stream.flush()
        self.frames_shown += 1
