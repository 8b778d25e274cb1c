"""ANSI terminal renderer.

Draws one frame per generation: a status line with the generation number
and population, then the grid inside a box-drawn border. Each cell shows
its transition from the previous generation:

    *   survived   (light green)
    +   born       (green)
    x   died       (red)
        empty
"""

import sys
from typing import Dict, List, Optional, TextIO
import logging

from ..core.transitions import CellTransition, FrameSummary

logger = logging.getLogger(__name__)

CLEAR_SCREEN = '\033[2J\033[H'  # Clear, then home cursor
RESET = '\033[0m'

COLORS: Dict[str, str] = {
    'status': '\033[94m',    # Light blue
    'survived': '\033[92m',  # Light green
    'born': '\033[32m',      # Green
    'died': '\033[31m',      # Red
}

MARKS: Dict[CellTransition, str] = {
    CellTransition.SURVIVED: '*',
    CellTransition.BORN: '+',
    CellTransition.DIED: 'x',
    CellTransition.EMPTY: ' ',
}


class TerminalRenderer:
    """Writes frames to a text stream, optionally with ANSI colors."""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True,
                 clear_screen: bool = True):
        """Initialize renderer.

        Args:
            stream: Output stream (sys.stdout if None)
            use_color: Emit ANSI color codes around marks and the status line
            clear_screen: Clear the terminal before each frame
        """
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color
        self.clear_screen = clear_screen
        self.frames_drawn = 0

    def _paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{COLORS[color]}{text}{RESET}"

    def status_line(self, frame: FrameSummary) -> str:
        return self._paint(f"Generation {frame.generation} | Population {frame.population}", 'status')

    def cell(self, transition: CellTransition) -> str:
        """Three-character cell body for one transition."""
        mark = MARKS[transition]
        if transition is CellTransition.EMPTY:
            return f" {mark} "
        return f" {self._paint(mark, transition.value)} "

    def render(self, frame: FrameSummary) -> str:
        """Build the complete frame text."""
        separator = '+' + '---+' * frame.size
        lines: List[str] = [self.status_line(frame), '', separator]

        for row in frame.transitions:
            lines.append('|' + '|'.join(self.cell(t) for t in row) + '|')
            lines.append(separator)

        text = '\n'.join(lines) + '\n'
        if self.clear_screen:
            text = CLEAR_SCREEN + text
        return text

    def display(self, frame: FrameSummary) -> None:
        """Render the frame to the stream."""
        self.stream.write(self.render(frame))
        self.stream.flush()
        self.frames_drawn += 1

    def restore(self) -> None:
        """Reset terminal colors, e.g. after an interrupted frame."""
        if self.use_color:
            self.stream.write(RESET)
            self.stream.flush()
