import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
import logging
from samegame.commands import Click
from samegame.events.bus import EVENT_GROUP_REMOVED, EVENT_GAME_MODE_CHANGED
from samegame.game import Game
from samegame.systems.labeling import component_members

logging.basicConfig(level=logging.INFO)

seed = int(sys.argv[1]) if len(sys.argv) > 1 else 0
game = Game(seed=seed)

received = []
for ev in [EVENT_GROUP_REMOVED, EVENT_GAME_MODE_CHANGED]:
    game.event_bus.subscribe(ev, lambda s, _ev=ev, **k: received.append(_ev))

print('seed', game.seed)
print('\n'.join(game.snapshot()))

# Greedy play: always take the largest group, lowest id first.
move = 0
while not (game.is_over or game.is_clear):
    sizes = game.component_sizes()
    component_id = max(sizes, key=lambda cid: (sizes[cid], -cid))
    x, y = component_members(game.world, component_id)[0]
    game.update(Click(x, y))
    move += 1
    print(f'move {move}: click ({x}, {y}) size {sizes[component_id]} -> score {game.score}')

print('\n'.join(game.snapshot()))
print('final', game.mode.name, 'score', game.score, 'events', len(received))
