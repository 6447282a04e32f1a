from samegame.commands import Click, Hover
from samegame.events.bus import EVENT_HOVER_CHANGED

from tests.helpers import make_game


def test_hover_previews_group_without_mutating():
    game = make_game([
        "120",
        "001",
        "221",
    ])
    before = game.snapshot()
    sizes_before = game.component_sizes()
    game.update(Hover(0, 1))
    assert game.hover_connected_count == 2
    assert game.hover_score == 0
    assert game.hover_component_id == game.cell(0, 1).component_id
    assert game.snapshot() == before
    assert game.component_sizes() == sizes_before
    assert game.score == 0


def test_hover_on_large_group_projects_points():
    game = make_game(["0000", "0111"])
    game.update(Hover(3, 0))
    assert game.hover_connected_count == 5
    assert game.hover_score == 9


def test_hover_on_empty_cell_reports_no_selection():
    game = make_game(["0.", "00"])
    game.update(Hover(1, 0))
    assert game.hover_connected_count == 0
    assert game.hover_score == -1
    assert game.hover_component_id == -1


def test_hover_defaults_before_any_preview():
    game = make_game(["00", "00"])
    assert game.hover_score == 0
    assert game.hover_connected_count == 0
    assert game.hover_component_id == -1


def test_preview_refreshes_after_resolution():
    game = make_game([
        "120",
        "001",
        "221",
    ])
    game.update(Hover(1, 2))
    assert game.hover_connected_count == 2
    game.update(Click(0, 1))
    # The hovered cell now belongs to a group of three 2s.
    assert game.hover_connected_count == 3
    assert game.hover_score == 1
    assert game.hover_component_id == game.cell(1, 2).component_id


def test_hover_emits_preview_event():
    game = make_game(["00", "01"])
    received = {}
    game.event_bus.subscribe(EVENT_HOVER_CHANGED, lambda sender, **payload: received.update(payload))
    game.update(Hover(0, 0))
    assert received == {"x": 0, "y": 0, "score": 1, "count": 3, "component_id": 0}
