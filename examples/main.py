"""
main.py — Play today's challenge in the terminal
=================================================

Runs the daily challenge when it is a typed game (math-sprint or
color-stroop), otherwise falls back to math-sprint with today's seed.

    python main.py

Type your answer and press Enter. An empty line counts as a timeout.
Press Ctrl+C to stop.
"""

import logging

from brainplay import (
    GameConfig,
    create_engine,
    get_daily_challenge,
    get_game_seed,
    setup_logging,
)
from my_listener import MyListener

# ── Setup logging (so you can see what's happening) ──
setup_logging(level=logging.INFO)

TYPED_GAMES = ("math-sprint", "color-stroop")

# ── Configuration ──
challenge = get_daily_challenge()
if challenge.game.id in TYPED_GAMES:
    config = challenge.to_config()
    print(f"Daily challenge: {challenge.game.name} ({challenge.theme})")
else:
    config = GameConfig(
        game_id="math-sprint",
        seed=get_game_seed("math-sprint"),
        difficulty=challenge.difficulty,
    )
    print(f"Today's pick is {challenge.game.name}; playing Math Sprint instead")


def prompt(engine):
    rules = engine.rules
    if engine.game_id == "math-sprint":
        return rules.current_problem.display
    challenge = rules.current_challenge
    return f"{challenge.word} (ink?) [{' / '.join(challenge.options)}]"


def parse(engine, text):
    if engine.game_id == "math-sprint":
        try:
            return int(text)
        except ValueError:
            return None
    return text


# ── Create the engine and play ──
with create_engine(config, listeners=[MyListener()]) as engine:
    engine.init()
    engine.start()
    try:
        while engine.is_playing:
            text = input(f"{prompt(engine)}  > ").strip()
            remaining = engine.time_remaining()
            if not text or remaining == 0:
                engine.handle_timeout()
            else:
                engine.handle_input(parse(engine, text))
    except KeyboardInterrupt:
        print("\nStopped.")
