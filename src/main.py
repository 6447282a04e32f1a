"""Entry point for the samegame tile-elimination puzzle.

Sets up the Game (ECS world + event bus), input/render systems and the Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, key
from samegame.constants import BACKGROUND_COLOR, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from samegame.events.bus import EVENT_MOUSE_MOVE, EVENT_MOUSE_PRESS
from samegame.game import Game
from samegame.systems.input import InputSystem
from samegame.systems.render import RenderSystem

class SameGameWindow(Window):
    def __init__(self):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1 / FPS)
        self.game = Game.new()
        self.event_bus = self.game.event_bus
        self.input_system = InputSystem(self.event_bus, self, self.game)
        self.render_system = RenderSystem(self.game, self)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.game.update(self.input_system.consume_command())

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.ESCAPE:
            self.close()
        elif symbol == key.SPACE:
            # Restart is only offered once the round has ended.
            if self.game.is_over or self.game.is_clear:
                self.game.reset()

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = SameGameWindow()
    run()

if __name__ == "__main__":
    main()
