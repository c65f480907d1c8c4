from ishido.components.board_position import Position
from ishido.constants import TILE_HEIGHT, TILE_WIDTH
from ishido.rendering.context import build_render_context
from ishido.rendering.status_renderer import tally_bars
from ishido.systems.board_ops import get_board, get_valid_positions
from ishido.systems.render import RenderSystem
from ishido.utils.deck import ANCHOR_POSITIONS

from helpers import DummyWindow, start_session


def make_render_system():
    bus, world, session, _ = start_session()
    window = DummyWindow()
    rs = RenderSystem(world, bus, window)
    return world, session, window, rs


def test_render_context_reflects_session():
    _, world, _, _ = start_session()
    ctx = build_render_context(world, 788, 528)
    assert len(ctx.tiles) == 96
    assert ctx.stack_size == 65
    assert ctx.next_stone == get_board(world).next_stone
    assert ctx.score == 0
    assert ctx.hint_positions == frozenset()


def test_no_highlight_until_hint_visible():
    world, session, _, rs = make_render_system()
    rs.process()
    assert rs.highlighted_positions() == set()

    session.set_hint(True)
    rs.process()
    assert rs.highlighted_positions() == set(get_valid_positions(world).positions)


def test_headless_layout_marks_anchor_cells_occupied():
    _, _, _, rs = make_render_system()
    rs.process()
    occupied = {p for p, entry in rs._last_cell_layout.items() if entry["occupied"]}
    assert occupied == set(ANCHOR_POSITIONS)


def test_cell_lookup_by_point():
    _, _, window, rs = make_render_system()
    rs.process()
    assert rs.get_cell_at_point(TILE_WIDTH / 2, window.height - TILE_HEIGHT / 2) == Position(0, 0)
    assert rs.get_cell_at_point(TILE_WIDTH * 5.5, TILE_HEIGHT / 2) == Position(5, 7)
    assert rs.get_cell_at_point(760, 300) is None


def test_tally_has_one_bar_per_stone():
    assert tally_bars(0, 528) == []
    bars = tally_bars(65, 528)
    assert len(bars) == 65
    # Ten bars per row; the eleventh starts the next row up.
    assert bars[10].left == bars[0].left
    assert bars[10].bottom > bars[0].bottom
