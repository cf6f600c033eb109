# cardmatch

This package holds the game logic of a card matching puzzle. It draws no graphics.
Cards sit on a playfield, in a stock pile and on a tray. A card can go onto the tray
when its face value is one above or one below the face of the card on top of the
tray. You can record each move and undo it later.

## Installation

```
pip install .
```

The package needs only the standard library.

## Cards

`cardmatch.cards` defines the following:

- `Vec2`: an immutable point with `x` and `y`. It supports `+` and `-`, and `Vec2.ZERO` is the origin.
- `CardFace`: face values from `ACE` (0) to `KING` (12), plus `NONE` (-1).
- `CardSuit`: `CLUBS` (0), `DIAMONDS` (1), `HEARTS` (2), `SPADES` (3), plus `NONE` (-1).
- `Card(id, face, suit, position)`: a single card. `card.can_match(other)` is true when the two faces differ by exactly one. It is false when `other` is `None`.

## Levels

A level is a JSON object that holds two arrays, `Playfield` and `Stack`:

```json
{
  "Playfield": [
    {"CardFace": 12, "CardSuit": 0, "Position": {"x": 250, "y": 1000}},
    {"CardFace": 2,  "CardSuit": 1, "Position": {"x": 300, "y": 800}}
  ],
  "Stack": [
    {"CardFace": 2, "CardSuit": 0},
    {"CardFace": 0, "CardSuit": 2}
  ]
}
```

`cardmatch.level_config` reads this format into a `LevelConfig`. A `LevelConfig` holds two lists of `CardConfig(face, suit, position)`: `playfield_cards` and `stock_cards`.

- `parse_level_config(text)` parses a JSON string. From each playfield position it subtracts the card width (182) and the card height (282).
- `load_level_config(level_id, base_dir=".")` reads `levels/level_<id>.json` under `base_dir` and parses it the same way.
- `LevelConfig().load_from_file(path)` appends the cards of a file and keeps each position exactly as written.

If a `Playfield` or `Stack` member is missing, or is not an array, that pile is empty. Stock cards always get position `Vec2.ZERO`. Any of these problems raises `LevelConfigError`:

- a file is missing, empty or malformed
- the document is not an object
- an entry lacks `CardFace`, `CardSuit` or `Position`
- a value has the wrong type

## Building a game

```python
from cardmatch.generator import generate_game_model

model = generate_game_model(1, "path/to/resources")
```

If you already have a `LevelConfig`, call `cardmatch.generator.build_game_model(config)`. The generator does three things:

- It numbers the cards from 0, playfield cards first and stock cards after them.
- It builds a `Card` for each one.
- It draws the top stock card onto the tray.

It raises `GameModelGenerationError` in these cases:

- the level cannot be loaded
- a face or suit is out of range
- the stock is empty, so no card can be drawn

## Playing

`cardmatch.game_model.GameModel` keeps the three piles.

- Read them through `playfield_cards`, `stock_cards` and `tray_cards`. Each is a tuple.
- `top_tray_card()` returns the card on top of the tray.
- `card_by_id(card_id)` and `card_position(card_id)` look cards up.

`cardmatch.undo.UndoManager` is a last-in, first-out stack of `UndoAction(type, card_id, position)` records:

```python
from cardmatch.undo import UndoAction, UndoActionType, UndoManager

undo = UndoManager()
card_id = model.playfield_cards[0].id

if model.can_move_to_tray(card_id):
    before = model.card_position(card_id)
    model.match_card_to_tray(card_id)
    undo.record_action(UndoAction(UndoActionType.CARD_MATCHED, card_id, before))

action = undo.undo()
if action is not None and action.type is UndoActionType.CARD_MATCHED:
    model.undo_card_match(action.card_id, action.position)
```

`match_card_to_tray` also stores the card's previous position in `model.position_history`.

To draw from the stock, call `model.stock_to_tray()`. To put a drawn card back, call `model.undo_card_replace(card_id)`.

Both undo methods remove the top tray card and put the given card back. They raise `KeyError` for an unknown id and `IndexError` when the tray is empty.

## Artwork paths

`cardmatch.resources` builds relative resource paths:

- `card_path`
- `suit_path`
- `number_path`
- `ui_path`
- `font_path`
- `level_config_path`

`cardmatch.appearance` names the sprites for a card:

- `background_path()` gives the card background.
- `suit_sprite_path(suit)` gives the suit icon.
- `number_sprite_path(face, suit, big)` gives the large or small number. Clubs and spades use black numbers and the other suits use red.

The same module gives the card and glyph sizes as constants.

## What it does not do

This package has no window and no rendering. It does not handle input, and it has no command to start a game. It also does not decide when a move is allowed or when to record an undo action. The caller combines `GameModel` and `UndoManager` as shown above. The package ships no level files or artwork. It only computes where they are expected to be.

## Tests

```
pip install .[test]
pytest
```