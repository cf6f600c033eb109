import pytest

from cardmatch.cards import Card, CardFace, CardSuit, Vec2
from cardmatch.game_model import GameModel


@pytest.fixture
def model():
    m = GameModel()
    m.add_card_to_playfield(Card(0, CardFace.FIVE, CardSuit.HEARTS, Vec2(100.0, 200.0)))
    m.add_card_to_playfield(Card(1, CardFace.NINE, CardSuit.CLUBS, Vec2(300.0, 400.0)))
    m.add_card_to_stock(Card(2, CardFace.KING, CardSuit.SPADES))
    m.add_card_to_stock(Card(3, CardFace.FOUR, CardSuit.DIAMONDS))
    return m


def ids(cards):
    return [c.id for c in cards]


def test_piles_after_adding(model):
    assert ids(model.playfield_cards) == [0, 1]
    assert ids(model.stock_cards) == [2, 3]
    assert model.tray_cards == ()
    assert model.top_tray_card() is None


def test_add_none_is_ignored(model):
    model.add_card_to_playfield(None)
    model.add_card_to_stock(None)
    model.add_card_to_tray(None)
    assert len(model.playfield_cards) == 2
    assert len(model.stock_cards) == 2
    assert model.tray_cards == ()


def test_stock_to_tray_moves_last_stock_card(model):
    assert model.stock_to_tray() is True
    assert model.top_tray_card().id == 3
    assert ids(model.stock_cards) == [2]


def test_stock_to_tray_on_empty_stock(model):
    assert model.stock_to_tray()
    assert model.stock_to_tray()
    assert model.stock_to_tray() is False
    assert ids(model.tray_cards) == [3, 2]


def test_playfield_to_tray_unknown_card(model):
    assert model.playfield_to_tray(99) is False
    assert ids(model.playfield_cards) == [0, 1]


def test_playfield_to_tray_ignores_matching(model):
    assert model.playfield_to_tray(1) is True
    assert ids(model.playfield_cards) == [0]
    assert model.top_tray_card().id == 1


def test_can_move_requires_tray(model):
    assert model.can_move_to_tray(0) is False


def test_can_move_to_tray(model):
    model.stock_to_tray()  # four on top
    assert model.can_move_to_tray(0) is True
    assert model.can_move_to_tray(1) is False
    assert model.can_move_to_tray(99) is False


def test_match_card_to_tray_records_position(model):
    model.stock_to_tray()
    assert model.match_card_to_tray(0) is True
    assert model.top_tray_card().id == 0
    assert not model.is_card_in_playfield(0)
    assert model.position_history[0] == Vec2(100.0, 200.0)


def test_match_fails_without_change(model):
    model.stock_to_tray()
    assert model.match_card_to_tray(1) is False
    assert model.is_card_in_playfield(1)
    assert model.top_tray_card().id == 3
    assert model.position_history == {}


def test_undo_card_match_restores_state(model):
    model.stock_to_tray()
    model.match_card_to_tray(0)
    model.card_by_id(0).position = Vec2(680.0, 20.0)
    model.undo_card_match(0, Vec2(100.0, 200.0))
    assert model.is_card_in_playfield(0)
    assert model.card_position(0) == Vec2(100.0, 200.0)
    assert model.top_tray_card().id == 3


def test_undo_card_replace_returns_card_to_stock(model):
    model.stock_to_tray()
    model.undo_card_replace(3)
    assert ids(model.stock_cards) == [2, 3]
    assert model.top_tray_card() is None


def test_undo_unknown_card_raises(model):
    model.stock_to_tray()
    with pytest.raises(KeyError):
        model.undo_card_match(99, Vec2.ZERO)
    with pytest.raises(KeyError):
        model.undo_card_replace(99)


def test_undo_with_empty_tray_raises(model):
    with pytest.raises(IndexError):
        model.undo_card_replace(2)


def test_card_lookup(model):
    assert model.card_by_id(2).face is CardFace.KING
    assert model.card_by_id(42) is None
    assert model.card_position(42) == Vec2.ZERO
    assert model.card_position(1) == Vec2(300.0, 400.0)


def test_restore_card_position(model):
    model.restore_card_position(1, Vec2(7.0, 8.0))
    assert model.card_position(1) == Vec2(7.0, 8.0)
    model.restore_card_position(42, Vec2(7.0, 8.0))
    assert model.card_by_id(42) is None


def test_record_card_position_overwrites(model):
    model.record_card_position(5, Vec2(1.0, 1.0))
    model.record_card_position(5, Vec2(2.0, 2.0))
    assert model.position_history == {5: Vec2(2.0, 2.0)}


def test_reset_clears_everything(model):
    model.stock_to_tray()
    model.record_card_position(0, Vec2(1.0, 1.0))
    model.reset()
    assert model.playfield_cards == ()
    assert model.stock_cards == ()
    assert model.tray_cards == ()
    assert model.position_history == {}
    assert model.card_by_id(0) is None


def test_card_in_tray_is_tracked(model):
    tray_card = Card(10, CardFace.SIX, CardSuit.HEARTS)
    model.add_card_to_tray(tray_card)
    assert model.top_tray_card() is tray_card
    assert model.card_by_id(10) is tray_card
    assert model.can_move_to_tray(0) is True