import random

import pytest
from esper import World

from samegame.commands import Click, Hover
from samegame.components.game_state import GameMode
from samegame.events.bus import EVENT_GAME_MODE_CHANGED, EventBus
from samegame.game import Game
from samegame.systems.board_ops import count_active_tiles
from samegame.utils.game_state import set_game_mode
from samegame.world import create_world

from tests.helpers import make_game


def test_clearing_the_board_enters_cleared():
    game = make_game(["00", "00"])
    changes = []
    game.event_bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **payload: changes.append(payload))
    game.update(Click(0, 0))
    assert game.is_clear
    assert not game.is_over
    assert game.mode == GameMode.CLEARED
    assert game.score == 4
    assert changes == [{"previous_mode": GameMode.PLAYING, "new_mode": GameMode.CLEARED}]


def test_no_removable_group_enters_over():
    game = make_game([
        "120",
        "001",
        "221",
    ])
    game.update(Click(0, 1))
    assert game.mode == GameMode.PLAYING
    game.update(Click(1, 2))
    assert game.mode == GameMode.PLAYING
    game.update(Click(0, 2))
    assert game.snapshot() == ["...", "...", "0.."]
    assert game.is_over
    assert not game.is_clear
    assert game.score == 2


def test_noop_click_does_not_end_the_game():
    game = make_game(["01", "00"])
    game.update(Click(1, 0))
    assert game.mode == GameMode.PLAYING


def test_terminal_modes_ignore_commands():
    game = make_game(["00", "12"])
    game.update(Click(0, 0))
    assert game.is_over
    before = game.snapshot()
    game.update(Hover(0, 1))
    game.update(Click(0, 1))
    assert game.snapshot() == before
    assert game.score == 0
    assert game.hover_score == 0


def test_none_command_is_accepted():
    game = make_game(["00", "00"])
    game.update(None)
    assert game.snapshot() == ["00", "00"]


def test_unknown_command_is_rejected():
    game = make_game(["00", "00"])
    with pytest.raises(TypeError):
        game.update((0, 0))


def test_reset_returns_to_playing_with_full_board():
    game = make_game(["00", "00"], seed=5)
    game.update(Hover(0, 0))
    game.update(Click(0, 0))
    assert game.is_clear
    game.reset(seed=8)
    assert game.mode == GameMode.PLAYING
    assert game.seed == 8
    assert game.score == 0
    assert game.hover_score == 0
    assert game.hover_component_id == -1
    assert count_active_tiles(game.world) == 4
    assert sum(game.component_sizes().values()) == 4
    assert game.snapshot() == Game(seed=8, cols=2, rows=2).snapshot()


def test_same_seed_gives_same_board():
    assert Game(seed=1234).snapshot() == Game(seed=1234).snapshot()
    assert Game.new(seed=1234).seed == 1234


def test_seed_defaults_to_wall_clock(monkeypatch):
    monkeypatch.delenv("SAMEGAME_SEED", raising=False)
    monkeypatch.setattr("samegame.game.time.time", lambda: 1700000000.5)
    assert Game().seed == 1700000000


def test_seed_can_be_fixed_from_environment(monkeypatch):
    monkeypatch.setenv("SAMEGAME_SEED", "77")
    game = Game()
    assert game.seed == 77
    assert game.snapshot() == Game(seed=77).snapshot()


def test_malformed_seed_in_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("SAMEGAME_SEED", "12a")
    with pytest.raises(ValueError, match="SAMEGAME_SEED"):
        Game()


def test_reset_from_playing_clears_the_preview():
    game = make_game(["001", "011"], seed=2)
    game.update(Hover(0, 0))
    assert game.hover_score == 1
    assert game.hover_connected_count == 3
    assert game.hover_component_id != -1
    game.reset(seed=4)
    assert game.mode == GameMode.PLAYING
    assert game.hover_score == 0
    assert game.hover_connected_count == 0
    assert game.hover_component_id == -1
    assert game.score == 0


def test_mode_change_on_reset_sees_the_refilled_board():
    game = make_game(["00", "00"])
    game.update(Click(0, 0))
    assert game.is_clear
    seen = []
    game.event_bus.subscribe(
        EVENT_GAME_MODE_CHANGED,
        lambda sender, **payload: seen.append((payload["new_mode"], count_active_tiles(game.world))),
    )
    game.reset(seed=3)
    assert seen == [(GameMode.PLAYING, 4)]


def test_set_game_mode_requires_a_session():
    with pytest.raises(RuntimeError, match="GameState not found"):
        set_game_mode(World(), EventBus(), GameMode.OVER)


def test_create_world_seeds_its_random_source():
    world = create_world(seed=11)
    assert world.random.random() == random.Random(11).random()
