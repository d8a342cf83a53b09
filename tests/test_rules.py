"""Tests covering the game session state machine."""

from samurai_tactics.game.board import Board
from samurai_tactics.game.pieces import Kind, Owner, Piece
from samurai_tactics.game.rules import GameSession, Phase


def _assert_initial(session: GameSession) -> None:
    state = session.get_render_state()
    assert state.board == Board.initial()
    assert state.current_player is Owner.RED
    assert state.phase is Phase.SELECTING
    assert state.selected is None
    assert state.legal_destinations == frozenset()
    assert state.winner is None
    assert state.move_count == 0
    assert state.last_move is None


def _daimyo_duel_session() -> GameSession:
    board = Board.from_pieces(
        [
            ((3, 3), Piece(Kind.SAMURAI, Owner.BLUE)),
            ((2, 2), Piece(Kind.DAIMYO, Owner.RED)),
            ((5, 2), Piece(Kind.DAIMYO, Owner.BLUE)),
            ((0, 0), Piece(Kind.RONIN, Owner.RED)),
        ]
    )
    return GameSession(board=board, current_player=Owner.BLUE)


def test_new_session_starts_with_red():
    session = GameSession()
    _assert_initial(session)
    assert session.get_render_state().status_text == "Current player: Red"


def test_clicking_empty_or_enemy_square_is_ignored():
    session = GameSession()

    assert session.select(2, 2).action == "ignored"
    assert session.select(4, 0).action == "ignored"
    assert session.select(9, 9).action == "ignored"
    assert session.phase is Phase.SELECTING


def test_select_then_jump_passes_turn():
    session = GameSession()

    selected = session.select(1, 2)
    assert selected.action == "selected"
    state = session.get_render_state()
    assert state.phase is Phase.PIECE_SELECTED
    assert state.selected == (1, 2)
    assert (3, 2) in state.legal_destinations

    moved = session.select(3, 2)
    assert moved.action == "moved"
    assert moved.move is not None and moved.move.captured is None

    state = session.get_render_state()
    assert state.board.piece_at(1, 2) is None
    assert state.board.piece_at(3, 2) == Piece(Kind.NINJA, Owner.RED)
    assert state.current_player is Owner.BLUE
    assert state.selected is None
    assert state.legal_destinations == frozenset()
    assert state.move_count == 1
    assert state.last_move == moved.move


def test_clicking_selected_piece_toggles_selection_off():
    session = GameSession()
    session.select(1, 2)

    assert session.select(1, 2).action == "deselected"
    assert session.phase is Phase.SELECTING
    assert session.current_player is Owner.RED


def test_clicking_another_own_piece_reselects():
    session = GameSession()
    session.select(1, 2)

    assert session.select(1, 3).action == "selected"
    state = session.get_render_state()
    assert state.selected == (1, 3)
    assert state.legal_destinations == frozenset({(3, 1), (3, 3)})


def test_invalid_target_clears_selection():
    session = GameSession()
    session.select(1, 2)

    assert session.select(2, 2).action == "deselected"
    assert session.select(-1, 0).action == "ignored"
    state = session.get_render_state()
    assert state.selected is None
    assert state.board == Board.initial()
    assert state.current_player is Owner.RED


def test_blue_pieces_cannot_move_on_red_turn():
    session = GameSession()

    session.select(4, 2)

    assert session.selected is None
    assert session.board == Board.initial()


def test_capturing_daimyo_ends_game():
    session = _daimyo_duel_session()

    session.select(3, 3)
    result = session.select(2, 2)

    assert result.move is not None and result.move.winner is Owner.BLUE
    state = session.get_render_state()
    assert state.winner is Owner.BLUE
    assert state.phase is Phase.GAME_OVER
    assert state.status_text == "Blue wins!"


def test_no_input_accepted_after_game_over():
    session = _daimyo_duel_session()
    session.select(3, 3)
    session.select(2, 2)
    board = session.board

    for row, col in [(0, 0), (2, 2), (5, 2), (1, 1)]:
        assert session.select(row, col).action == "ignored"

    assert session.board == board
    assert session.winner is Owner.BLUE


def test_reset_after_game_over():
    session = _daimyo_duel_session()
    session.select(3, 3)
    session.select(2, 2)

    session.reset()

    _assert_initial(session)


def test_reset_while_piece_selected():
    session = GameSession()
    session.select(1, 2)
    session.select(3, 2)
    session.select(4, 0)

    session.reset()

    _assert_initial(session)


def test_render_state_is_a_snapshot():
    session = GameSession()
    before = session.get_render_state()

    session.select(1, 0)
    session.select(3, 0)

    assert before.board == Board.initial()
    assert before.current_player is Owner.RED
