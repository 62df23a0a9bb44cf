# tombeau

The rules engine of a gamebook-style role-playing adventure. It has no
third-party dependencies. It holds the game logic and the layout arithmetic,
and a front end renders the result.

## What is inside

- `tombeau.errors`: `ErrorCode`, the `GameError` exception (it carries a `code`
  and a `message`), and `describe(code)`, which returns the text that introduces
  an error of that kind.
- `tombeau.item`: `Stat`, `Modifier` and `Item`. `Item.add_modifier(stat, value)`
  appends a modifier and raises `GameError` for an unknown statistic. Items are
  written with `Item.save(stream)` as a `name count` line followed by one
  `\tstat value` line per modifier. `Item.load(stream)` reads that format back.
- `tombeau.character`: `Character`, `StatLimits`, `roll`, `attack`, `fight`,
  `lockpick` and `assemble_line`. `Character.assign(...)` sets every statistic;
  a statistic given as zero takes a default of one fifth of its maximum.
  `Character.describe(kind, line_width)` returns an aligned stat sheet.
  `fight` alternates blows until one side falls and returns `True` if the player
  wins. It can pass a text report of each blow that lands to a callback.
- `tombeau.npc`: `NPC` and `parse_npc`, which reads an enemy written as
  `Name{strength,intelligence,critical,armour,hp}`.
- `tombeau.question`: `parse_question(line, allowed_codes)` reads lines such as
  `[Title]{Label:Xaction}...`, where `X` must be one of `allowed_codes` and
  `?` is reserved. `Question.labels` lists the buttons with `Quitter` last.
  `Question.answer(index)` returns `(code, action)`; an index past the answer
  buttons gives `("?", None)`.
- `tombeau.trial`: `TrialKind`, `parse_trial`, `agility_difficulty`,
  `distance_to_line`, `AgilityCourse` and `run_combat`. `AgilityCourse` is the
  tracing game: feed it cursor positions with `move(point)` and read
  `succeeded`, `failed`, `finished` and `counter`.
- `tombeau.geometry`: `Rect`, `merge_rects`, `grow_to`, `fit_within` and `place`
  for positioning, shrinking and merging images and text.
- `tombeau.ui`: `Color`, `Button` and `Window`. A `Window` keeps its buttons,
  widgets and background colour. `Window.clicked_button(point)` returns
  `(index, button)` for the first visible button under a point, or `None`.
- `tombeau.selection`: `ItemSelection`. It picks exactly `count` items with
  `toggle(index)`. `apply(inventory)` then appends the picked items to the
  inventory, or, when `count` is negative, deletes those positions from it.
- `tombeau.mouse`: `Click`, `Library`, `click_from_buttons(mask)` and
  `libraries_to_close(initialised)`.

## Example

```python
import io
import random

from tombeau.item import Item, Stat
from tombeau.character import Character, StatLimits, fight
from tombeau.npc import parse_npc

sword = Item("sword")
sword.add_modifier(Stat.STRENGTH, 5)

buffer = io.StringIO()
sword.save(buffer)
buffer.seek(0)
assert Item.load(buffer).name == "sword"

limits = StatLimits()
hero = Character()
hero.assign(3, 3, 15, 2, 2, 3, "hero")
enemy = parse_npc("Goblin{2,1,1,1,5}", limits)
hero_won = fight(hero, enemy, limits, random.Random(1), print)
```

## What it does not do

- It opens no window and draws, plays and loads nothing. There are no images,
  fonts or sounds. `Window`, `Button` and the geometry helpers only keep state
  and compute positions.
- It has no command to run. There is no game loop and nothing that reads
  chapter or book files. The player has no inventory or save file; only
  single items can be saved and loaded.

## Tests

```
pip install -e .[test]
pytest
```