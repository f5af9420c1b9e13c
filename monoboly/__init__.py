"""
Monoboly - Card game session engine

The authoritative state machine for a Monoboly Deal table:
- Player roster and dealing
- Turn ownership and drawing
- Choosing cards and banking them
- A directory of live games, one transition at a time per game
"""

__version__ = "0.1.0"
