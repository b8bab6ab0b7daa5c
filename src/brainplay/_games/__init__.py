# Area: Games
"""
Concrete game variants.

Each module provides one GameRules implementation:
- math_sprint: arithmetic challenge
- color_stroop: color/word conflict challenge
- card_flip: memory pair matching
- pattern_echo: sequence recall
"""

from .math_sprint import MathSprintRules, MathProblem
from .color_stroop import ColorStroopRules, StroopChallenge
from .card_flip import CardFlipRules, Card, CardFlipBoard
from .pattern_echo import PatternEchoRules, PatternEchoLevel, Tile

__all__ = [
    "MathSprintRules",
    "MathProblem",
    "ColorStroopRules",
    "StroopChallenge",
    "CardFlipRules",
    "Card",
    "CardFlipBoard",
    "PatternEchoRules",
    "PatternEchoLevel",
    "Tile",
]
