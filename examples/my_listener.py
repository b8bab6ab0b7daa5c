"""
my_listener.py — YOUR RENDERER
===============================

This is the file you edit to show a game in your own front end.

The engine never draws anything. It calls the three methods below and
you decide what to do with them:
- on_state_change(state): status, level, score and lives changed
- on_progress(progress): a level ended (or the game did)
- on_complete(result): the game is over; store the result

Read the current level content from ``engine.content()`` or from the
game's rules (``engine.rules.current_problem`` etc.).
"""

from brainplay import GameListener


class MyListener(GameListener):

    def __init__(self):
        self.last_level = None

    def on_state_change(self, state):
        """
        Called after every state mutation with a copy of GameState.

        state fields:
            status, level, max_level, score, lives, max_lives,
            start_time, end_time, accuracy
        """
        # ─── YOUR RENDERING HERE ───
        if state.level != self.last_level:
            print(f"── Level {state.level}/{state.max_level} ──")
            self.last_level = state.level
        print(f"   score={state.score}  lives={'♥' * state.lives}")

    def on_progress(self, progress):
        print(f"   level {progress.level} done in {progress.timestamp / 1000:.1f}s")

    def on_complete(self, result):
        """
        Called exactly once with the GameResult.

        result.to_dict() is ready for any stats store.
        """
        print()
        print(f"{result.outcome.upper()}: {result.score} points, {'★' * result.stars}")
        print(f"accuracy {result.accuracy:.0%}, levels {result.levels_completed}/{result.max_level}")
