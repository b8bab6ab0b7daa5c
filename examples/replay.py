"""
replay.py — Watch the scripted player
======================================

Plays every registered game with the demo player and prints one line
per game. Same seed and accuracy always give the same results.

    python replay.py [accuracy]
"""

import sys

from brainplay import DemoPlayer, list_games

accuracy = float(sys.argv[1]) if len(sys.argv) > 1 else 0.85

for info in list_games():
    player = DemoPlayer.for_config({"game_id": info.id, "seed": 2026}, accuracy=accuracy)
    with player.engine:
        result = player.play()
    print(
        f"{info.icon} {info.name:<14} {result.outcome:<10} "
        f"score={result.score:<5} stars={'★' * result.stars:<5} "
        f"levels={result.levels_completed}/{result.max_level}"
    )
