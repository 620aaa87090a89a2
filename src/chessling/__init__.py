"""Chessling — a friendly chess trainer for young players.

Play White against a computer opponent with three difficulty levels,
earn experience points for good moves, and read a coach's plain-language
commentary on every turn.
"""

__version__ = "0.1.0"
