"""Tests for core data structures and grid rendering."""

import pytest

from ansi_console.core.grid import BLANK, Grid, Point
from ansi_console.core.style import Style
from ansi_console.display.grid import GridRenderer, render, style_sequence

PREFIX = "\x1b[H\x1b[0m"
SUFFIX = "\x1b[0m"


def body(output: str) -> str:
    assert output.startswith(PREFIX)
    assert output.endswith(SUFFIX)
    return output[len(PREFIX):-len(SUFFIX)]


class TestStyle:
    """Tests for Style dataclass."""

    def test_default_style(self) -> None:
        style = Style()
        assert style.bold is False
        assert style.foreground == -1
        assert style.background == -1
        assert style.is_blank()

    def test_style_equality(self) -> None:
        assert Style(bold=True, foreground=1) == Style(bold=True, foreground=1)
        assert Style(bold=True) != Style(underlined=True)

    def test_with_changes(self) -> None:
        style = Style(bold=True).with_changes(foreground=3)
        assert style == Style(bold=True, foreground=3)

    def test_invalid_color(self) -> None:
        with pytest.raises(ValueError):
            Style(foreground=256)
        with pytest.raises(ValueError):
            Style(background=-2)


class TestGrid:
    """Tests for Grid."""

    def test_default_grid(self) -> None:
        grid = Grid()
        assert grid.columns == 80
        assert grid.rows == 25
        assert len(grid) == 25
        assert all(len(row) == 80 for row in grid)
        assert grid.get(0, 0) == BLANK

    def test_get_set_point(self) -> None:
        grid = Grid(columns=10, rows=3)
        grid.set(4, 2, Point('A', Style(foreground=1)))
        assert grid.get(4, 2).char == 'A'
        assert grid[4, 2].style.foreground == 1

    def test_indexing(self) -> None:
        grid = Grid(columns=10, rows=3)
        grid[5, 1] = Point('B')
        assert grid[5, 1].char == 'B'

    def test_put_text_clips(self) -> None:
        grid = Grid(columns=5, rows=1)
        grid.put_text(2, 0, "Hello", Style(bold=True))
        assert ''.join(p.char for p in next(iter(grid))) == "  Hel"
        assert grid[2, 0].style.bold is True

    def test_out_of_bounds(self) -> None:
        grid = Grid(columns=5, rows=2)
        with pytest.raises(IndexError):
            grid.get(5, 0)
        with pytest.raises(IndexError):
            grid.get(0, 2)
        with pytest.raises(IndexError):
            grid.get(-1, 0)

    def test_from_lines(self) -> None:
        grid = Grid.from_lines(["ab", "cde"])
        assert (grid.columns, grid.rows) == (3, 2)
        assert grid[2, 0] == BLANK
        assert grid[2, 1].char == 'e'

    def test_buffer_not_accepted(self) -> None:
        with pytest.raises(TypeError):
            Grid(columns=2, rows=2, _buffer=[[BLANK] * 5])

    def test_rows_match_size(self) -> None:
        grid = Grid(columns=2, rows=3)
        assert [len(row) for row in grid] == [2, 2, 2]

    def test_fill(self) -> None:
        grid = Grid(columns=3, rows=2)
        grid.fill(Point('#'))
        assert all(p.char == '#' for row in grid for p in row)


class TestRender:
    """Tests for rendering grids to escape sequences."""

    def test_blank_grid(self) -> None:
        grid = Grid(columns=3, rows=2)
        assert render(grid) == PREFIX + "      " + SUFFIX

    def test_uniform_style_emits_one_sequence(self) -> None:
        for columns, rows in ((1, 1), (4, 3), (80, 25)):
            grid = Grid(columns=columns, rows=rows)
            grid.fill(Point('x', Style(bold=True, foreground=2)))
            out = body(render(grid))
            assert out.count("\x1b[") == 1
            assert out == "\x1b[0;1;32m" + "x" * (columns * rows)

    def test_style_changes_only(self) -> None:
        red = Style(foreground=1)
        grid = [[Point('a', red), Point('b', red), Point('c'), Point('d', red)]]
        assert body(render(grid)) == "\x1b[0;31mab\x1b[0mc\x1b[0;31md"

    def test_style_carries_across_rows(self) -> None:
        red = Style(foreground=1)
        grid = [[Point('a', red)], [Point('b', red)]]
        assert body(render(grid)) == "\x1b[0;31mab"

    def test_style_sequence(self) -> None:
        assert style_sequence(Style()) == "\x1b[0m"
        assert style_sequence(Style(bold=True, underlined=True, blink=True, inverse=True, hidden=True)) == (
            "\x1b[0;1;4;5;7;8m"
        )
        assert style_sequence(Style(foreground=7, background=0)) == "\x1b[0;37;40m"
        assert style_sequence(Style(foreground=12, background=200)) == "\x1b[0;38;5;12;48;5;200m"

    def test_without_cursor_home(self) -> None:
        out = GridRenderer(home=False).render([[Point('z')]])
        assert out == "\x1b[0mz\x1b[0m"

    def test_empty_grid(self) -> None:
        assert render([]) == PREFIX + SUFFIX
