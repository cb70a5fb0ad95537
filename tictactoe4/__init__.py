"""4x4 tic-tac-toe board evaluation."""
