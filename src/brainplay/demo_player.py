# Area: Demo
"""
brainplay.demo_player — Scripted demo player
=============================================

A ready-to-use player that drives any registered game to its end
without a human. It reads the correct answer from the game's rules and
gets it right with probability ``accuracy``, drawn from its own seeded
stream, so the same config, seed and accuracy always replay the same
game.

Usage:
    from brainplay import DemoPlayer

    player = DemoPlayer.for_config({"game_id": "math-sprint", "seed": 42})
    result = player.play()

Time is simulated: the player owns a ManualScheduler whose clock the
engine reads, and advances it by ``think_ms`` before every action.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from ._config import GameConfig
from ._core.game_result import GameResult
from ._core.rng import SeededRNG
from ._core.scheduler import ManualScheduler
from ._core.session import GameSession
from ._games.card_flip import RESOLUTION_DELAY_MS, Card, CardFlipRules
from ._games.color_stroop import ColorStroopRules
from ._games.math_sprint import MathSprintRules
from ._games.pattern_echo import PatternEchoRules, Tile
from .listeners import GameListener
from .registry import DEFAULT_REGISTRY, GameRegistry

logger = logging.getLogger("brainplay.demo")

DEFAULT_ACCURACY = 0.9
DEFAULT_THINK_MS = 1200
DEFAULT_MAX_ACTIONS = 20000


class DemoPlayer:
    """
    Scripted player for one engine.

    Attributes:
        engine: The session being played
        scheduler: ManualScheduler the engine was built with
        accuracy: Probability (0-1) of each action being correct
        think_ms: Simulated time spent before each action
        actions: Number of actions taken so far
    """

    def __init__(
        self,
        engine: GameSession,
        scheduler: ManualScheduler,
        accuracy: float = DEFAULT_ACCURACY,
        seed: Optional[int] = None,
        think_ms: float = DEFAULT_THINK_MS,
    ):
        """
        Initialize DemoPlayer.

        Args:
            engine: Session built with ``scheduler`` and its clock
            scheduler: The ManualScheduler driving simulated time
            accuracy: Probability of a correct action, 0-1
            seed: Seed for the player's own choices. Defaults to the
                engine seed.
            think_ms: Simulated delay before each action

        Raises:
            ValueError: If accuracy is outside 0-1 or the game has no
                scripted strategy
        """
        if not 0.0 <= accuracy <= 1.0:
            raise ValueError(f"accuracy must be within 0-1, got {accuracy}")

        self.engine = engine
        self.scheduler = scheduler
        self.accuracy = accuracy
        self.think_ms = think_ms
        self.actions = 0
        self._rng = SeededRNG(engine.seed if seed is None else seed)
        self._memory: Dict[int, str] = {}
        self._memory_level = 0

        strategies: Dict[str, Callable[[Any], None]] = {
            MathSprintRules.game_id: self._play_math_sprint,
            ColorStroopRules.game_id: self._play_color_stroop,
            CardFlipRules.game_id: self._play_card_flip,
            PatternEchoRules.game_id: self._play_pattern_echo,
        }
        strategy = strategies.get(engine.rules.game_id)
        if strategy is None:
            raise ValueError(f"No demo strategy for game {engine.rules.game_id}")
        self._strategy = strategy

    @classmethod
    def for_config(
        cls,
        config: Union[GameConfig, Mapping[str, Any]],
        accuracy: float = DEFAULT_ACCURACY,
        seed: Optional[int] = None,
        think_ms: float = DEFAULT_THINK_MS,
        registry: Optional[GameRegistry] = None,
        listeners: Iterable[GameListener] = (),
    ) -> "DemoPlayer":
        """Build an engine on simulated time and a player for it."""
        scheduler = ManualScheduler()
        engine = (registry or DEFAULT_REGISTRY).create_engine(
            config,
            clock=lambda: scheduler.now_ms,
            scheduler=scheduler,
            listeners=listeners,
        )
        return cls(engine, scheduler, accuracy=accuracy, seed=seed, think_ms=think_ms)

    # ── Driving ──────────────────────────────────────────────

    def play(self, max_actions: int = DEFAULT_MAX_ACTIONS) -> GameResult:
        """
        Play the game to its end.

        Raises:
            RuntimeError: If the game is still running after max_actions
        """
        self.engine.init()
        self.engine.start()
        while self.engine.get_result() is None:
            if self.actions >= max_actions:
                raise RuntimeError(
                    f"Demo of {self.engine.game_id} unfinished after {max_actions} actions"
                )
            self.step()

        result = self.engine.get_result()
        logger.info(
            f"[{self.engine.game_id}] Demo finished: {result.outcome} "
            f"score={result.score} stars={result.stars}"
        )
        return result

    def step(self) -> None:
        """Take one action on the current content."""
        if not self.engine.is_playing:
            return
        self.actions += 1
        self._strategy(self.engine.rules)

    def _hit(self) -> bool:
        return self._rng.chance(self.accuracy)

    def _think(self) -> None:
        self.scheduler.advance(self.think_ms)

    # ── Strategies ───────────────────────────────────────────

    def _play_math_sprint(self, rules: MathSprintRules) -> None:
        problem = rules.current_problem
        self._think()
        if self._hit():
            answer = problem.answer
        else:
            answer = problem.answer + self._rng.next_int(1, 9)
        self.engine.handle_input(answer)

    def _play_color_stroop(self, rules: ColorStroopRules) -> None:
        challenge = rules.current_challenge
        self._think()
        if self._hit():
            answer = challenge.correct_answer
        else:
            answer = self._rng.pick(
                [o for o in challenge.options if o != challenge.correct_answer]
            )
        self.engine.handle_input(answer)

    def _play_pattern_echo(self, rules: PatternEchoRules) -> None:
        if rules.showing_sequence:
            self.scheduler.advance(rules.playback_duration())
            rules.finish_playback(self.engine)
            return

        level = rules.current_level
        expected = level.sequence[rules.player_progress]
        self.scheduler.advance(level.time_per_tile)
        if self._hit():
            tile = expected
        else:
            size = level.grid_size
            others = [
                Tile(r, c) for r in range(size) for c in range(size)
                if Tile(r, c) != expected
            ]
            tile = self._rng.pick(others)
        self.engine.handle_input(tile)

    def _play_card_flip(self, rules: CardFlipRules) -> None:
        if not rules.can_flip:
            self.scheduler.advance(RESOLUTION_DELAY_MS)
            return

        if self._memory_level != self.engine.level:
            self._memory = {}
            self._memory_level = self.engine.level

        board = rules.get_board()
        hidden = [c for c in board.cards if not c.is_flipped and not c.is_matched]
        target: Optional[int] = None

        if board.flipped_cards:
            first = board.flipped_cards[0]
            symbol = next(c.symbol for c in board.cards if c.id == first)
            if self._hit():
                target = self._remembered(hidden, symbol)
        elif self._hit():
            target = self._known_pair(hidden)

        if target is None:
            target = self._unseen(hidden)

        self._think()
        self.engine.handle_input(target)
        for card in rules.get_board().cards:
            if card.is_flipped or card.is_matched:
                self._memory[card.id] = card.symbol

    def _remembered(self, hidden: List[Card], symbol: str) -> Optional[int]:
        for card in hidden:
            if self._memory.get(card.id) == symbol:
                return card.id
        return None

    def _known_pair(self, hidden: List[Card]) -> Optional[int]:
        seen: Dict[str, int] = {}
        for card in hidden:
            symbol = self._memory.get(card.id)
            if symbol is None:
                continue
            if symbol in seen:
                return seen[symbol]
            seen[symbol] = card.id
        return None

    def _unseen(self, hidden: List[Card]) -> int:
        fresh = [c for c in hidden if c.id not in self._memory]
        return self._rng.pick(fresh or hidden).id
