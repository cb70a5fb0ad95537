"""CLI for evaluating a board file."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import tyro
import yaml

from tictactoe4.board import BoardError, Player, TicTacToe, format_board, parse_board
from tictactoe4.config import OUTPUT_FORMATS, AppConfig, load_config
from tictactoe4.registry import get_pattern_table


def result_to_dict(game: TicTacToe) -> Dict[str, Any]:
    """JSON-ready view of an evaluated board."""
    status = game.check_winner()
    return {
        "winner": status.winner.symbol or None,
        "win_code": status.win_code,
        "win_description": status.win_description,
        "game_over": game.is_game_over(),
        "remaining_moves": [
            {"row": cell.row, "column": cell.column} for cell in game.any_moves_left()
        ],
    }


def format_result(game: TicTacToe) -> str:
    """Human-readable summary of an evaluated board."""
    status = game.check_winner()
    if game.is_game_over():
        if status.winner is not Player.NONE:
            return f"Game over, player {status.winner.symbol} wins: {status.win_description}."
        return "Game over, no winner and no moves remaining."

    lines = ["No winner, remaining moves:"]
    for cell in game.any_moves_left():
        lines.append(f"  row {cell.row}, column {cell.column}")
    return "\n".join(lines)


def evaluate_board(
    board_path: tyro.conf.Positional[str],
    config_path: Optional[str] = None,
    output_format: Optional[Literal["text", "json"]] = None,
    show_board: Optional[bool] = None,
    pattern_table: Optional[str] = None,
):
    """
    Evaluate a 4x4 tic-tac-toe board stored in a text file.

    Args:
        board_path: Path to the board file
        config_path: Optional YAML config (see configs/default.yaml)
        output_format: Overrides output.format from the config ('text' or 'json')
        show_board: Overrides output.show_board from the config
        pattern_table: Overrides patterns.table from the config ('standard' or 'unique')
    """
    try:
        cfg = load_config(config_path) if config_path else AppConfig()
        patterns = get_pattern_table(pattern_table or cfg.patterns.table)
        fmt = output_format or cfg.output.format
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {fmt} (expected one of {', '.join(OUTPUT_FORMATS)})"
            )
    except (OSError, ValueError, KeyError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        board_str = Path(board_path).resolve().read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading game file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        board = parse_board(board_str)
        game = TicTacToe(board, patterns=patterns)
    except BoardError as e:
        print(f"Error processing game board: {e}", file=sys.stderr)
        sys.exit(1)

    if show_board is None:
        show_board = cfg.output.show_board

    if show_board:
        print(format_board(board))
        print()

    if fmt == "json":
        print(json.dumps(result_to_dict(game), indent=2))
    else:
        print(format_result(game))


def main() -> None:
    tyro.cli(evaluate_board)


if __name__ == "__main__":
    main()
