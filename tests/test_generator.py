import json

import pytest

from cardmatch.cards import CardFace, CardSuit, Vec2
from cardmatch.generator import (
    GameModelGenerationError,
    build_game_model,
    generate_game_model,
)
from cardmatch.level_config import CardConfig, LevelConfig, parse_level_config
from cardmatch.resources import level_config_path


def _config():
    return LevelConfig(
        playfield_cards=[
            CardConfig(12, 0, Vec2(10, 20)),
            CardConfig(2, 3, Vec2(30, 40)),
        ],
        stock_cards=[CardConfig(2, 0), CardConfig(0, 2), CardConfig(3, 1)],
    )


def test_ids_are_sequential_playfield_first():
    model = build_game_model(_config())
    assert [c.id for c in model.playfield_cards] == [0, 1]
    assert [c.id for c in model.stock_cards] == [2, 3]
    assert [c.id for c in model.tray_cards] == [4]


def test_last_stock_card_becomes_tray_top():
    config = _config()
    model = build_game_model(config)
    top = model.top_tray_card()
    assert (top.face, top.suit) == (CardFace(config.stock_cards[-1].face), CardSuit(config.stock_cards[-1].suit))


def test_playfield_positions_and_values_are_kept():
    config = _config()
    model = build_game_model(config)
    for card, card_config in zip(model.playfield_cards, config.playfield_cards):
        assert card.position == card_config.position
        assert int(card.face) == card_config.face
        assert int(card.suit) == card_config.suit


def test_stock_positions_are_zero():
    config = _config()
    config.stock_cards[0] = CardConfig(2, 0, Vec2(7, 7))
    model = build_game_model(config)
    assert all(card.position == Vec2.ZERO for card in model.stock_cards)


def test_every_card_is_registered():
    model = build_game_model(_config())
    total = len(model.playfield_cards) + len(model.stock_cards) + len(model.tray_cards)
    assert all(model.card_by_id(i) is not None for i in range(total))
    assert model.card_by_id(total) is None


def test_empty_stock_fails():
    config = LevelConfig(playfield_cards=[CardConfig(1, 1, Vec2(0, 0))])
    with pytest.raises(GameModelGenerationError):
        build_game_model(config)


def test_invalid_face_fails():
    config = LevelConfig(stock_cards=[CardConfig(40, 0)])
    with pytest.raises(GameModelGenerationError):
        build_game_model(config)


def test_generate_from_file(tmp_path):
    data = {
        "Playfield": [{"CardFace": 5, "CardSuit": 2, "Position": {"x": 400, "y": 900}}],
        "Stack": [{"CardFace": 4, "CardSuit": 1}],
    }
    path = tmp_path / level_config_path(1)
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    model = generate_game_model(1, tmp_path)
    expected = parse_level_config(json.dumps(data))
    assert model.playfield_cards[0].position == expected.playfield_cards[0].position
    assert model.stock_cards == ()
    assert model.can_move_to_tray(0) is True


def test_generate_missing_level(tmp_path):
    with pytest.raises(GameModelGenerationError):
        generate_game_model(7, tmp_path)