from samegame.commands import Click, Hover
from samegame.constants import CELL_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH
from samegame.events.bus import EVENT_MOUSE_MOVE, EVENT_MOUSE_PRESS
from samegame.game import Game
from samegame.systems.input import InputSystem
from samegame.ui.layout import cell_at_point, cell_rect


class DummyWindow:
    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.width = width
        self.height = height


def test_point_to_cell_flips_y_against_window_top():
    assert cell_at_point(1, SCREEN_HEIGHT - 1, SCREEN_HEIGHT) == (0, 0)
    assert cell_at_point(CELL_SIZE + 5, SCREEN_HEIGHT - 2 * CELL_SIZE - 5, SCREEN_HEIGHT) == (1, 2)
    left, right, bottom, top = cell_rect(1, 2, SCREEN_HEIGHT)
    assert (left, right) == (CELL_SIZE, 2 * CELL_SIZE)
    assert (bottom, top) == (SCREEN_HEIGHT - 3 * CELL_SIZE, SCREEN_HEIGHT - 2 * CELL_SIZE)


def test_mouse_press_becomes_click_command():
    game = Game(seed=1)
    window = DummyWindow()
    input_system = InputSystem(game.event_bus, window, game)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=CELL_SIZE * 3 + 1, y=SCREEN_HEIGHT - 1, button=1)
    assert input_system.consume_command() == Click(3, 0)
    assert input_system.consume_command() is None


def test_mouse_move_becomes_hover_and_last_command_wins():
    game = Game(seed=1)
    window = DummyWindow()
    input_system = InputSystem(game.event_bus, window, game)
    game.event_bus.emit(EVENT_MOUSE_MOVE, x=5, y=SCREEN_HEIGHT - 5, dx=1, dy=0)
    assert input_system.pending_command == Hover(0, 0)
    game.event_bus.emit(EVENT_MOUSE_MOVE, x=CELL_SIZE * 19 + 5, y=SCREEN_HEIGHT - CELL_SIZE * 9 - 5, dx=1, dy=0)
    assert input_system.consume_command() == Hover(19, 9)


def test_points_over_the_score_panel_are_ignored():
    game = Game(seed=1)
    window = DummyWindow()
    input_system = InputSystem(game.event_bus, window, game)
    game.event_bus.emit(EVENT_MOUSE_PRESS, x=10, y=10, button=1)
    game.event_bus.emit(EVENT_MOUSE_MOVE, x=10, y=10, dx=0, dy=0)
    assert input_system.consume_command() is None


def test_payload_without_coordinates_is_ignored():
    game = Game(seed=1)
    input_system = InputSystem(game.event_bus, DummyWindow(), game)
    game.event_bus.emit(EVENT_MOUSE_PRESS, button=1)
    assert input_system.consume_command() is None
