"""Tests for board occupancy and the board string parser."""

import pytest

from chessmoves.game.board import Board
from chessmoves.game.board_parser import board_to_string, parse_board_string
from chessmoves.game.pieces import Piece, PieceType, Side
from chessmoves.game.position import Position


class TestBoard:
    """Tests for the Board class."""

    def test_create_standard(self):
        board = Board.create_standard()

        assert len(board.squares) == 32
        assert board.piece_at(Position(5, 1)) == Piece(PieceType.KING, Side.WHITE)
        assert board.piece_at(Position(4, 8)) == Piece(PieceType.QUEEN, Side.BLACK)
        assert board.piece_at(Position(5, 4)) is None
        assert len(board.pieces_for_side(Side.WHITE)) == 16

    def test_occupancy(self):
        board = Board.create_empty()
        board.place(Position(4, 4), Piece(PieceType.ROOK, Side.BLACK))

        assert board.is_occupied(Position(4, 4)) is True
        assert board.is_occupied(Position(4, 5)) is False
        assert board.is_occupied_by_opponent(Position(4, 4), Side.WHITE) is True
        assert board.is_occupied_by_opponent(Position(4, 4), Side.BLACK) is False
        assert board.is_occupied_by_opponent(Position(4, 5), Side.WHITE) is False

    def test_remove(self):
        board = Board.create_empty()
        rook = Piece(PieceType.ROOK, Side.BLACK)
        board.place(Position(4, 4), rook)

        assert board.remove(Position(4, 4)) == rook
        assert board.remove(Position(4, 4)) is None
        assert board.is_occupied(Position(4, 4)) is False

    def test_copy_is_independent(self):
        board = Board.create_standard()
        copy = board.copy()
        copy.remove(Position(1, 1))

        assert board.is_occupied(Position(1, 1)) is True

    def test_positions_of(self):
        board = Board.create_standard()

        assert board.positions_of(PieceType.KNIGHT, Side.BLACK) == [Position(2, 8), Position(7, 8)]
        assert len(board.positions_of(PieceType.PAWN, Side.WHITE)) == 8


class TestParseBoardString:
    """Tests for parse_board_string."""

    def test_parse_standard_layout(self):
        board_str = """
RBNBBBQBKBBBNBRB
PBPBPBPBPBPBPBPB
0000000000000000
0000000000000000
0000000000000000
0000000000000000
PWPWPWPWPWPWPWPW
RWNWBWQWKWBWNWRW
"""
        assert parse_board_string(board_str).squares == Board.create_standard().squares

    def test_first_row_is_rank_eight(self):
        board_str = """
KB00000000000000
0000000000000000
0000000000000000
0000000000000000
0000000000000000
0000000000000000
0000000000000000
00000000000000KW
"""
        board = parse_board_string(board_str)

        assert board.piece_at(Position(1, 8)) == Piece(PieceType.KING, Side.BLACK)
        assert board.piece_at(Position(8, 1)) == Piece(PieceType.KING, Side.WHITE)

    def test_wrong_row_count(self):
        with pytest.raises(ValueError, match="Expected 8 rows"):
            parse_board_string("0000000000000000\n" * 7)

    def test_wrong_row_length(self):
        rows = ["0000000000000000"] * 7 + ["00000000"]
        with pytest.raises(ValueError, match="wrong length"):
            parse_board_string("\n".join(rows))

    def test_unknown_piece(self):
        rows = ["0000000000000000"] * 7 + ["XW00000000000000"]
        with pytest.raises(ValueError, match="Unknown piece type"):
            parse_board_string("\n".join(rows))

    def test_unknown_side(self):
        rows = ["0000000000000000"] * 7 + ["K100000000000000"]
        with pytest.raises(ValueError, match="Invalid side"):
            parse_board_string("\n".join(rows))

    def test_board_to_string(self):
        board = Board.create_standard()
        assert parse_board_string(board_to_string(board)).squares == board.squares
        assert board_to_string(board).splitlines()[0] == "RBNBBBQBKBBBNBRB"
