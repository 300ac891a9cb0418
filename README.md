# arenalegends

The cards of a two-player real-time card battle arena game, and the small
scene-based engine they run on. Drawing, input and sound go through pygame.

## Modules

- `arenalegends.point`: `Point`, a 2D coordinate and vector dataclass with
  `+`, `-`, `*` and `/` by a scalar, `normalize()`, `dot()`, `magnitude()` and
  `magnitude_squared()`.
- `arenalegends.collider`: hit tests: `is_point_in_rect` (half-open
  rectangle), `is_rect_overlap`, `is_circle_overlap` and
  `is_point_in_bitmap` (non-transparent pixel of a surface).
- `arenalegends.log`: `LogType`, `set_config(enabled, log_verbose, file_path)`
  and `log(level, *parts)`, which writes labelled lines to standard output and
  to the log file. Logging is off until `set_config` turns it on; verbose lines
  need `log_verbose`.
- `arenalegends.userdata`: `UserData` (one player's chosen deck, draw pile,
  upcoming-card queue, elixir and selected card) and `GameData` (players `a`
  and `b`, and `elixir_speed`).
- `arenalegends.objects`: `GameObject`, `Control`, `Group` and the abstract
  `Scene`.
- `arenalegends.resources`: `Resources`, a cache of images, fonts and sounds
  with `release_unused()`, and `default_resources()` for the shared cache.
- `arenalegends.audio`: `AudioPlayer` for sound effects, looping music and
  controllable sound instances.
- `arenalegends.engine`: `GameEngine`, which owns the window, the scenes and
  the event loop, and `get_engine()` for the shared engine.
- `arenalegends.errors`: `EngineError`, raised when the backend cannot be set
  up or a resource cannot be loaded.
- `arenalegends.card`: the `Card` base class, `CardType`, `ArmyDeployment` and
  `format_float`.
- `arenalegends.cards`: the twelve cards (`Knight`, `Archers`, `Musketeer`,
  `Skeletons`, `Giant`, `Pekka`, `Wizard`, `HogRider`, `Barbarians`, `Zap`,
  `Poison`, `Heal`), `SpellCard`, `SpellPlacement` and `create_card()`.

## Geometry and collisions

```python
from arenalegends.point import Point
from arenalegends.collider import is_point_in_rect, is_circle_overlap

p = Point(3, 4)
p.magnitude()    # 5.0
p.normalize()    # Point(x=0.6, y=0.8)

is_point_in_rect(Point(10, 10), Point(0, 0), Point(20, 20))   # True
is_circle_overlap(Point(0, 0), 1.0, Point(3, 0), 1.0)         # False
```

## Decks

A player's deck starts as the card ids `{0, 1, 2, 3, 4, 5, 9, 10}`.
`init_game` sets the elixir to 7 and the selected card to 0, shuffles the
deck into the draw pile with the random generator it is given (a
`random.SystemRandom` when none is), and moves four cards into the queue.

```python
import random
from arenalegends.userdata import GameData

data = GameData()
data.a.init_game(random.Random(42))
list(data.a.next_card_queue)   # four card ids
len(data.a.available_cards)    # 4
```

## Cards

`create_card(card_id, x, y, in_play=False, selected=False)` builds card 0 to 11
at a position; other ids raise `ValueError`. A card with `in_play=False` is the
deck-editor form (with its description); `in_play=True` is the larger in-hand
form, whose speed and some other figures differ.

```python
from arenalegends.cards import create_card

knight = create_card(0, x=110, y=900, in_play=True)
command, troops = knight.place_army(10.0, 5.0, game_time=12.0, first_instance_id=100)
# command == "0 21 5 11.500000\n"; one ArmyDeployment per troop, ids 100, 101, ...

zap = create_card(9, x=510, y=900, in_play=True)
spell = zap.place_spell(7, 10.0, 5.0, game_time=12.0)   # a SpellPlacement
```

`deploy_command` gives the text line announcing where and when a card was
played. Army cards raise `TypeError` from `place_army` if asked to on a spell
card; a plain `Card` returns `None` from `place_spell`.

Building a card reads the mouse position from the engine unless a `mouse`
point is passed to the `Card` constructor. A left click toggles a deck-editor
card and its id in the `deck` set given to it, or, in play, selects it among
the `hand` list given to it and sets `selected_card` of player `a`. An
`on_change` callback is called after either.

## Writing a scene

```python
from arenalegends.objects import Scene
from arenalegends.engine import get_engine


class TitleScene(Scene):
    def initialize(self):
        ...  # add objects and controls here


engine = get_engine()
engine.add_new_scene("title", TitleScene())
engine.start("title", 60, 600, 1200, 1000, "Arena Legends", "icon.png", False, 0.05)
```

A `Group` forwards `update` and `draw` to its visible objects and the mouse and
keyboard callbacks to its controls, in the order they were added. The engine
caps each update step at `delta_time_threshold`, and
`engine.change_scene(name)` switches scenes at the next update, terminating
the old one and initializing the new one. Mouse buttons reach scenes as
1 = left, 2 = right, 3 = middle.

## Resources

Images are looked up under `Resource/images/`, fonts under `Resource/fonts/`
and sounds under `Resource/audios/`, relative to the working directory; a
different root can be given to `Resources(root)`. Loaders can be passed to
`Resources` as keyword arguments in place of the pygame ones. Loading failures
raise `EngineError`.

## What this package does not do

It contains no scenes of its own: no title screen, deck editor or battle
screen, and no command to start the game. It does not simulate the battle:
`place_army` and `place_spell` describe the troops and spells to put on the
field but nothing moves or fights them. It does not talk to an opponent over
the network; the deploy command lines are only returned as text. Decks are
not saved anywhere.

## Tests

The tests use pytest and live in `tests/`; the `test` extra installs pytest.