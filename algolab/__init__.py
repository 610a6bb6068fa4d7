"""Classic algorithms by design technique: backtracking, dynamic programming, divide and conquer, greedy."""

__version__ = "0.1.0"