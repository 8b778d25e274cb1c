"""Tests for the ANSI terminal renderer."""

import io
import pytest
from termlife.core.grid import Grid
from termlife.core.conway import next_generation
from termlife.core.transitions import CellTransition, summarize
from termlife.render.terminal import CLEAR_SCREEN, COLORS, RESET, TerminalRenderer


def blinker_frame(generation=0):
    previous = Grid.from_cells(5, [(2, 1), (2, 2), (2, 3)])
    return summarize(previous, next_generation(previous), generation)


class TestPlainRendering:
    """Rendering without colors."""

    def setup_method(self):
        self.renderer = TerminalRenderer(io.StringIO(), use_color=False, clear_screen=False)

    def test_layout(self):
        text = self.renderer.render(blinker_frame(generation=4))
        lines = text.rstrip('\n').split('\n')

        assert lines[0] == "Generation 4 | Population 3"
        assert lines[1] == ""
        separator = "+---+---+---+---+---+"
        assert lines[2] == separator
        # Header, blank line, top border, then a row and a separator per grid row
        assert len(lines) == 3 + 2 * 5
        assert all(line == separator for line in lines[4::2])

    def test_cell_marks(self):
        lines = self.renderer.render(blinker_frame()).split('\n')
        row1 = lines[5]   # grid row 1
        row2 = lines[7]   # grid row 2

        assert row1 == "|   |   | + |   |   |"
        assert row2 == "|   | x | * | x |   |"

    def test_no_escape_codes(self):
        assert '\033' not in self.renderer.render(blinker_frame())

    @pytest.mark.parametrize("transition,mark", [
        (CellTransition.BORN, " + "),
        (CellTransition.SURVIVED, " * "),
        (CellTransition.DIED, " x "),
        (CellTransition.EMPTY, "   "),
    ])
    def test_cell_body(self, transition, mark):
        assert self.renderer.cell(transition) == mark


class TestColorRendering:

    def test_colored_marks(self):
        renderer = TerminalRenderer(io.StringIO(), use_color=True)
        assert renderer.cell(CellTransition.BORN) == f" {COLORS['born']}+{RESET} "
        assert renderer.cell(CellTransition.SURVIVED) == f" {COLORS['survived']}*{RESET} "
        assert renderer.cell(CellTransition.DIED) == f" {COLORS['died']}x{RESET} "
        assert renderer.cell(CellTransition.EMPTY) == "   "

    def test_distinct_colors(self):
        assert len({COLORS['born'], COLORS['survived'], COLORS['died']}) == 3

    def test_status_line_colored(self):
        renderer = TerminalRenderer(io.StringIO())
        text = renderer.render(blinker_frame(generation=2))
        assert text.startswith(CLEAR_SCREEN + COLORS['status'] + "Generation 2 | Population 3" + RESET)


class TestDisplay:

    def test_display_writes_stream(self):
        stream = io.StringIO()
        renderer = TerminalRenderer(stream, use_color=False)

        renderer.display(blinker_frame())
        renderer.display(blinker_frame(generation=1))

        output = stream.getvalue()
        assert output.count(CLEAR_SCREEN) == 2
        assert "Generation 1 | Population 3" in output
        assert renderer.frames_drawn == 2

    def test_defaults_to_stdout(self, capsys):
        renderer = TerminalRenderer(use_color=False, clear_screen=False)
        renderer.display(blinker_frame())
        assert capsys.readouterr().out.startswith("Generation 0 | Population 3")

    def test_restore_resets_colors(self):
        stream = io.StringIO()
        TerminalRenderer(stream).restore()
        assert stream.getvalue() == RESET

        stream = io.StringIO()
        TerminalRenderer(stream, use_color=False).restore()
        assert stream.getvalue() == ""
