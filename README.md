# termage

A small game engine for the terminal. Games are made of entities placed in a
world with borders. Entities have shapes, animations, hitboxes and movement
components. An event bus carries collisions, border hits, sounds and game-over
notices. Drawing goes through curses; sound can go through pygame's mixer,
the terminal bell, or nowhere at all.

Two sample arcade games come with it: Flappy Bird and Space Invaders.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
termage        # Flappy Bird (same as: termage -g1)
termage -g2    # Space Invaders
```

Any other argument starts nothing and exits.

Controls:

- Flappy Bird: `SPACE`, `w` or the up arrow to flap. Hitting a pipe or the
  bottom of the field ends the game; each gap passed scores a point.
- Space Invaders: `w`/`s` or the up/down arrows to move, `SPACE` to shoot.
  The ship sits at the left edge and the invaders advance from the right.
  There are two levels; clearing both wins.
- In both: `m` toggles mute, `q` quits.

Sound files are read from `assets/sounds/flappy_bird/` and
`assets/sounds/space_invaders/` relative to the working directory. When a file
is missing, or the mixer cannot start, the game runs without that sound.

## Writing a game

The pieces live in these modules:

| Module | What it holds |
| --- | --- |
| `termage.position`, `termage.hitbox` | `Position` and axis-aligned `Hitbox` |
| `termage.shape`, `termage.drawable` | text `Shape` sprites and `Drawable` placements |
| `termage.animation` | `Frame` and `Animation` |
| `termage.input_event` | `NoInput`, `KeyboardInput`, `is_no_input`, `is_keyboard_input`, `get_keyboard_input` |
| `termage.events` | `CollisionEvent`, `BorderEvent`, `SoundEvent`, `GameOverEvent` |
| `termage.event_manager` | the queued `EventManager` |
| `termage.entity` | `Entity`, `Solidity`, and `StraightMovement`, `CycleMovement`, `GravityMovement`, `PlayerControlledMovement` |
| `termage.world` | `World` and `BorderMode` |
| `termage.resources` | `ResourceManager` for shapes |
| `termage.sound` | `MixerSoundSystem`, `TerminalSoundSystem`, `NullSoundSystem` and `create_sound_system` |
| `termage.controller`, `termage.view` | `CursesController` and `CursesView` |
| `termage.model`, `termage.engine` | the `Model` base and the `Engine` loop |
| `termage.clock` | the fixed-rate `Clock` |

A short sketch:

```python
from termage.controller import CursesController
from termage.engine import Engine
from termage.entity import GravityMovement, Solidity
from termage.input_event import get_keyboard_input
from termage.position import Position
from termage.shape import Shape
from termage.view import CursesView

engine = Engine()
ball = Shape("ball", ["()"])
hero = engine.world.create_entity(1, "hero", Position(10, 2), ball)
hero.add_movement(GravityMovement(0.5))
hero.solidity = Solidity.SOLID

def on_tick(dt, input_event):
    key = get_keyboard_input(input_event)
    if key is not None and key.key == ord(" "):
        hero.move(0, -3)

engine.set_game_update(on_tick)
engine.events.subscribe("border", lambda event: engine.add_score(1))

with CursesView() as view:
    engine.add_view(view)
    engine.controller = CursesController()
    engine.run()
```

Each tick the engine reads input (`q` quits, `m` toggles mute), calls your
update function and updates the world (movement, animation, borders,
collisions) unless the game is over, dispatches queued events, redraws every
view and waits for the next tick. The engine itself plays every `SoundEvent`
through its sound system and marks the game over on a `GameOverEvent`.

How the world treats entities:

- `Solidity.SOLID` entities that overlap are both put back where they were
  before the tick and a collision is reported; `TRIGGER` entities only report;
  `GHOST` entities take no part in collisions.
- Crossing a border emits a `BorderEvent` per side. With `BorderMode.SOLID`,
  entities whose `clamp_to_borders` is set are kept inside; otherwise an
  entity is killed once it is wholly outside.
- An entity's `height` is its draw depth; higher values are drawn on top.
- Dead entities are dropped at the end of each tick.

## What it does not do

Drawing is to a curses terminal only: there is no graphical window, and the
input comes from the keyboard through curses alone. The two games keep no high
scores or saved state between runs.