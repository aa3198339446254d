# robodefense

Game logic for a lane-based robot defense game, with no graphics or sound
backend attached. Each module covers one part of the game that can be used
and tested on its own:

- `robodefense.catalog`: the `RobotType`, `SquadMemberType` and
  `ProjectileType` enums; `RobotCatalog` (robot names, which types have a
  configuration, uniform random choice) and `SquadCatalog` (names, costs,
  upgrade costs, unlocking and whether a cell lies on the grid). The functions
  `robot_weights_for_wave` and `random_robot_type_for_wave` give a wave's
  robot weights and pick a type by those weights.
- `robodefense.waves`: `calculate_total_robots` and `generate_wave`, which
  returns a `WaveComposition` with per-type counts and a shuffled spawn order.
- `robodefense.wave_manager`: `WaveManager` runs a level's three waves. It
  shows a countdown (`countdown_text`, `countdown_alpha`), spawns robots
  through a spawner you supply and completes waves. `create_wave` builds a
  `WaveData`.
- `robodefense.drops`: `CollectibleFactory` decides what a destroyed robot
  drops (`determine_outcome`, `drops_for_robot`) and creates `Collectible`
  coins and health packs.
- `robodefense.projectiles`: `ProjectileManager` takes damage and spawn
  offsets from a configuration mapping, fires `Projectile`s up to a limit and
  removes finished ones. `parse_spawn_offset` and
  `projectile_for_squad_member` are helpers.
- `robodefense.physics`: `FixedStepWorld` collects frame time and calls a step
  function in fixed timesteps.
- `robodefense.highscores`: `HighScoreTable` keeps a ranked, size-limited
  list of `HighScore` entries in a comma-separated text file. It supports
  export and import, and comes with `serialize_scores`, `parse_scores` and
  `reason_text`.
- `robodefense.audio`: `AudioMixer` applies `AudioSettings` to work out final
  volumes per `AudioCategory` and whether a category may play.
- `robodefense.settings`: `GameSettings` and INI text through
  `serialize_settings` and `parse_settings`. `SettingsStore` keeps settings in
  a file, handles the resolution list and clamps volumes.
- `robodefense.animation`: `Animation` lays out sprite-sheet frames.
  `AnimationPlayer` steps through them, runs frame and completion callbacks
  and works out the sprite's scale and flip.
- `robodefense.resources`: `ResourceCache` loads assets by name through a
  loader function you supply, with optional fallback paths.
- `robodefense.state_machine`: `StateMachine` keeps a stack of `State`
  objects. Push, pop, change and clear are queued and take effect before the
  next event or update.

## Installation

```
pip install .
```

## Example

```python
import random

from robodefense.waves import generate_wave

rng = random.Random(1)
wave = generate_wave(level=1, wave=1, rng=rng)
print(wave.total_robots, wave.spawn_order)
```

Every function or class that involves chance accepts a `random.Random`. Pass
a seeded one to get the same results on every run.

## What the package does not do

- It draws nothing, plays no sound and reads no input. `StateMachine.render`
  passes whatever target you give it to your states. `AudioMixer` only
  computes volumes. `ResourceCache` stores whatever your loader returns.
- It does not place squad members on the lane grid and does not keep track of
  robots on the field. `WaveManager` expects a spawner object that provides
  `spawn_robot(robot_type, lane)` and `active_count()`, and you write that
  object.
- There is no command-line program and no game loop. You call `update(dt)` on
  the managers and the state machine yourself.

## Running the tests

```
pip install ".[test]"
pytest
```