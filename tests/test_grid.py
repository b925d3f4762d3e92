"""Tests for the dirty-cell grid renderer."""

import pytest

from grid_shooter.grid import BLACK, DEFAULT_COLOR, RED, Grid, InvalidDimension


def make_grid(surface, rows=8, cols=16):
    grid = Grid(rows, cols, surface)
    grid.render()
    surface.writes.clear()
    surface.flushes = 0
    return grid


class TestConstruction:
    """Tests for size validation and the initial buffer."""

    @pytest.mark.parametrize('rows,cols', [(8, 16), (32, 64), (24, 48), (8, 64), (32, 16)])
    def test_valid_sizes(self, surface, rows, cols):
        grid = Grid(rows, cols, surface)

        assert grid.height == rows + 3
        assert grid.width == cols + 3

    @pytest.mark.parametrize('rows,cols', [(7, 16), (33, 16), (8, 15), (8, 65), (0, 0)])
    def test_invalid_sizes(self, surface, rows, cols):
        with pytest.raises(InvalidDimension):
            Grid(rows, cols, surface)
        assert surface.writes == []

    def test_invalid_dimension_is_value_error(self, surface):
        with pytest.raises(ValueError, match='rows'):
            Grid(40, 20, surface)
        with pytest.raises(ValueError, match='columns'):
            Grid(10, 10, surface)

    @pytest.mark.parametrize('rows,cols', [(8, 16), (24, 48), (32, 64)])
    def test_border_glyphs(self, surface, rows, cols):
        grid = Grid(rows, cols, surface)
        bottom = rows + 2
        right = cols + 2

        assert grid.char_at(1, 1) == '╔'
        assert grid.char_at(1, right) == '╗'
        assert grid.char_at(bottom, 1) == '╚'
        assert grid.char_at(bottom, right) == '╝'
        for row in range(2, bottom):
            assert grid.char_at(row, 1) == '║'
            assert grid.char_at(row, right) == '║'
        for col in range(2, right):
            assert grid.char_at(1, col) == '═'
            assert grid.char_at(bottom, col) == '═'
        assert grid.color_at(1, 1) == DEFAULT_COLOR

    def test_margins_and_interior_blank(self, surface):
        grid = Grid(8, 16, surface)

        assert grid.char_at(0, 0) == ' '
        assert grid.char_at(0, 5) == ' '
        assert grid.char_at(5, 0) == ' '
        assert grid.char_at(2, 2) == ' '

    def test_every_cell_queued(self, surface):
        """Construction queues a full initial paint."""
        grid = Grid(8, 16, surface)
        assert grid.pending == grid.height * grid.width


class TestFillPixel:
    """Tests for fill_pixel() and dirty tracking."""

    def test_writes_at_offset(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('x', RED, 0, 0)

        assert grid.char_at(2, 2) == 'x'
        assert grid.color_at(2, 2) == RED
        assert list(grid.dirty) == [(2, 2)]

    def test_identical_write_queued_once(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('x', RED, 3, 4)
        grid.fill_pixel('x', RED, 3, 4)

        assert grid.pending == 1

    def test_colour_change_requeues(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('x', RED, 3, 4)
        grid.fill_pixel('x', BLACK, 3, 4)

        assert grid.pending == 2

    def test_unchanged_blank_is_noop(self, surface):
        """Writing what is already there does not queue the cell."""
        grid = make_grid(surface)
        grid.fill_pixel(' ', DEFAULT_COLOR, 1, 1)

        assert grid.pending == 0

    @pytest.mark.parametrize('row,col', [(-1, 0), (0, -1), (8, 0), (0, 16)])
    def test_outside_playfield(self, surface, row, col):
        grid = make_grid(surface)
        with pytest.raises(IndexError):
            grid.fill_pixel('x', RED, row, col)


class TestRender:
    """Tests for render()."""

    def test_initial_render_paints_everything(self, surface):
        grid = Grid(8, 16, surface)
        grid.render()

        assert len(surface.writes) == grid.height * grid.width
        assert (1, 1, '╔', DEFAULT_COLOR) in surface.writes
        assert grid.pending == 0

    def test_fifo_order(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('a', RED, 3, 4)
        grid.fill_pixel('b', RED, 0, 0)
        grid.render()

        assert surface.writes == [(5, 6, 'a', RED), (2, 2, 'b', RED)]

    def test_queue_empty_after_render(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('a', RED, 1, 1)
        grid.render()

        assert grid.pending == 0

    def test_second_render_writes_nothing(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('a', RED, 1, 1)
        grid.render()
        writes = len(surface.writes)
        flushes = surface.flushes

        grid.render()

        assert len(surface.writes) == writes
        assert surface.flushes == flushes

    def test_restores_foreground(self, surface):
        grid = make_grid(surface)
        surface.foreground = 3
        grid.fill_pixel('a', RED, 1, 1)
        grid.render()

        assert surface.writes[-1][3] == RED
        assert surface.foreground == 3


class TestClear:
    """Tests for clear() and initialize_window()."""

    def test_clear_repaints_everything(self, surface):
        grid = make_grid(surface)
        grid.fill_pixel('a', RED, 1, 1)
        grid.render()
        surface.writes.clear()

        grid.clear()

        assert grid.pending == 0
        assert len(surface.writes) == grid.height * grid.width
        assert grid.char_at(3, 3) == ' '
        assert grid.char_at(1, 1) == '╔'
        assert grid.char_at(grid.height - 1, grid.width - 1) == '╝'

    def test_initialize_window(self, surface):
        grid = make_grid(surface)
        grid.initialize_window()

        assert surface.screen_clears == 1
        assert surface.cursor_hidden
