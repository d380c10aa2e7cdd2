"""Board string parser."""

from chessmoves.game.board import Board
from chessmoves.game.pieces import Piece
from chessmoves.game.position import MAX_COORDINATE, Position

EMPTY_CELL = "00"


def parse_board_string(board_str: str) -> Board:
    """Parse a text diagram into a Board.

    Board string format:
        - 8 rows, the first row is rank 8 and the last is rank 1
        - Each square = 2 characters: piece type + side
        - "00" = empty square
        - Piece types: P (pawn), N (knight), B (bishop), R (rook), Q (queen), K (king)
        - Sides: W (white), B (black)

    Args:
        board_str: Multi-line string with 2 chars per square

    Returns:
        Board object with pieces placed

    Raises:
        ValueError: If the board string format is invalid
    """
    lines = [line.strip() for line in board_str.strip().splitlines() if line.strip()]

    if len(lines) != MAX_COORDINATE:
        raise ValueError(f"Expected {MAX_COORDINATE} rows, got {len(lines)}")

    board = Board.create_empty()

    for row, line in enumerate(lines):
        if len(line) != MAX_COORDINATE * 2:
            raise ValueError(
                f"Row {row} has wrong length: {len(line)}, expected {MAX_COORDINATE * 2}"
            )

        rank = MAX_COORDINATE - row
        for col in range(MAX_COORDINATE):
            cell = line[col * 2 : col * 2 + 2]
            if cell == EMPTY_CELL:
                continue

            board.place(Position(col + 1, rank), Piece.from_code(cell))

    return board


def board_to_string(board: Board) -> str:
    """Render a Board in the format accepted by ``parse_board_string``."""
    lines = []
    for rank in range(MAX_COORDINATE, 0, -1):
        cells = []
        for file in range(1, MAX_COORDINATE + 1):
            piece = board.piece_at(Position(file, rank))
            cells.append(EMPTY_CELL if piece is None else str(piece))
        lines.append("".join(cells))
    return "\n".join(lines)
