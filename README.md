# doce

Building blocks for **DoCe**, a two-player card game where each player tries
to reach 12 points first by playing power cards from a three-card hand.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `doce.config`

Game settings and enumerations.

- Constants: `GROUP_CODE`, `REPORT_PREFIX`, `REPORT_EXTENSION`,
  `PLAYER_COUNT` (2), `HAND_SIZE` (3), `DECK_SIZE` (40),
  `WINNING_SCORE` (12) and `TITLE`.
- `Profile` — who controls a player: `HUMANO`, `IA_FACIL`, `IA_NORMAL`,
  `IA_DIFICIL`. The `is_ai` property is true for every profile except
  `HUMANO`.
- `Power` — the card powers: `SUMAR_2`, `SUMAR_1`, `RESTAR_1`, `RESTAR_2`,
  `REP_TURNO`, `ESPEJO`.
- `MenuOption` — the main-menu choices, keyed by the letter typed:
  `JUGAR` (`"A"`), `VER_RANKING` (`"B"`), `SALIR` (`"C"`).
- `deck_composition()` — a new dict mapping each `Power` to how many cards
  of it make up the 40-card deck.
- `menu_entries()` — a list of `(MenuOption, label)` pairs in display order.

### `doce.models`

Game data.

- `Card` — a frozen dataclass holding a `power`.
- `Hand` — holds exactly `HAND_SIZE` cards (a `ValueError` is raised
  otherwise) and supports `len`, iteration and indexing.
- `Player` — `name`, `score` (default 0) and an optional `hand`. Names
  longer than 49 characters raise `ValueError`. The `is_winner` property is
  true once `score` reaches `WINNING_SCORE`.
- `Play` — a frozen record of one move: `number`, `player_name`,
  `card_played` and `accumulated_score`.

### `doce.dynamic_queue`

`Queue`, a FIFO queue with `enqueue`, `dequeue`, `peek`, `clear` and
`consume(func)`, which removes every item in order and passes each to
`func`. It supports `len`, truth testing and iteration. `dequeue`, `peek`
and `consume` on an empty queue raise `EmptyQueueError`.

### `doce.linked_list`

`LinkedList`, a sequence worked on at its front: `push_front`, `pop_front`,
`peek_front`, `clear`, and `map(action, param)`, which calls
`action(item, param)` on every item front to back (a non-callable `action`
raises `TypeError`). It supports `len`, truth testing and iteration.

`insert_sorted_unique_desc(item, compare, on_duplicate, param)` keeps items
in descending order: `compare(existing, item)` returns a positive number
while `existing` belongs before `item`. When an equal item is found,
`on_duplicate(existing, param)` is called (if given) and `False` is
returned; otherwise the item is inserted and `True` is returned.

`pop_front` and `peek_front` on an empty list raise `EmptyListError`.

## Example

```python
from doce.config import deck_composition
from doce.dynamic_queue import Queue
from doce.linked_list import LinkedList

deck = deck_composition()
print(sum(deck.values()))  # 40

plays = Queue()
plays.enqueue("first")
plays.enqueue("second")
print(plays.dequeue())  # first

scores = LinkedList()
for value in (5, 9, 7, 9):
    scores.insert_sorted_unique_desc(value, lambda a, b: a - b, None)
print(list(scores))  # [9, 7, 5]
```

## What this package does not do

It provides the pieces of the game only. There is no command to run, no
game loop or turn logic, no computer opponents, no dealing or shuffling of
a deck, no ranking storage or display, no game report files and no network
access.