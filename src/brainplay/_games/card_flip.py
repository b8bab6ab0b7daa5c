# Area: Games
"""
brainplay._games.card_flip — Memory pair matching
==================================================

Cards are dealt face down on a grid that grows per level. The player
flips two at a time; after the second flip the pair stays visible for
a fixed resolution delay and is then either marked matched or turned
back over.

The resolution delay is the only timer an engine owns. It runs as a
ScheduledTask under the session lock and is cancelled by cleanup(), so
nothing touches the board once the session is disposed. A resolution
that falls due while paused is parked and rescheduled once on resume.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .batch import whole_number
from .._core.enums import GameCategory, GameStatus
from .._core.scheduler import ScheduledTask
from ..types import CardFlipBoardDict

if TYPE_CHECKING:
    from .._core.session import GameSession

logger = logging.getLogger("brainplay.games.card_flip")

SYMBOLS: Tuple[str, ...] = (
    "🍎", "🍊", "🍋", "🍇", "🍓", "🍒", "🥝", "🍑",
    "🌟", "🌙", "💎", "🔷", "🔶", "🟣", "🟢", "🔴",
)

# (rows, cols, pairs) per level; the last tier repeats
GRID_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (2, 2, 2),
    (2, 3, 3),
    (2, 4, 4),
    (3, 4, 6),
    (4, 4, 8),
    (4, 5, 10),
    (4, 6, 12),
    (5, 6, 15),
    (6, 6, 18),
    (6, 6, 18),
)

RESOLUTION_DELAY_MS = 800
MATCH_POINTS = 25


@dataclass
class Card:
    id: int
    symbol: str
    is_flipped: bool = False
    is_matched: bool = False


@dataclass(frozen=True)
class CardFlipBoard:
    """Read-only copy of the board for rendering."""
    cards: Tuple[Card, ...]
    flipped_cards: Tuple[int, ...]
    matched_pairs: int
    total_pairs: int
    moves: int
    can_flip: bool
    last_match_correct: Optional[bool]
    rows: int
    cols: int

    def to_dict(self) -> "CardFlipBoardDict":
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cards": [
                {"id": c.id, "symbol": c.symbol,
                 "is_flipped": c.is_flipped, "is_matched": c.is_matched}
                for c in self.cards
            ],
            "flipped_cards": list(self.flipped_cards),
            "matched_pairs": self.matched_pairs,
            "total_pairs": self.total_pairs,
            "moves": self.moves,
            "can_flip": self.can_flip,
            "last_match_correct": self.last_match_correct,
        }


def grid_for_level(level: int) -> Tuple[int, int, int]:
    return GRID_TABLE[min(level - 1, len(GRID_TABLE) - 1)]


def efficiency_bonus(moves: int) -> int:
    return max(0, 20 - moves) * 2


class CardFlipRules:
    """Rules for the memory pair matching challenge."""

    game_id = "card-flip"
    category = GameCategory.MEMORY
    max_levels = 10
    reference_score = 3500
    time_limit: Optional[int] = None
    turn_started_at: Optional[float] = None

    def __init__(self) -> None:
        self.cards: List[Card] = []
        self.flipped_cards: List[int] = []
        self.matched_pairs = 0
        self.total_pairs = 0
        self.moves = 0
        self.can_flip = True
        self.last_match_correct: Optional[bool] = None
        self.rows, self.cols = 2, 2
        self._pending: Optional[ScheduledTask] = None
        self._parked = False

    def generate_level(self, session: "GameSession") -> None:
        self.cleanup()
        rows, cols, pairs = grid_for_level(session.level)
        rng = session.rng

        symbols = rng.shuffle(SYMBOLS)[:pairs]
        if pairs > len(symbols):
            symbols += rng.shuffle(SYMBOLS)[:pairs - len(symbols)]

        cards: List[Card] = []
        for symbol in symbols:
            cards.append(Card(id=len(cards), symbol=symbol))
            cards.append(Card(id=len(cards), symbol=symbol))

        self.cards = rng.shuffle(cards)
        self.flipped_cards = []
        self.matched_pairs = 0
        self.total_pairs = pairs
        self.moves = 0
        self.can_flip = True
        self.last_match_correct = None
        self.rows, self.cols = rows, cols

    def _find(self, card_id: int) -> Optional[Card]:
        for card in self.cards:
            if card.id == card_id:
                return card
        return None

    def handle_input(self, session: "GameSession", value: Any) -> None:
        if not self.can_flip:
            return
        card_id = whole_number(value)
        if card_id is None:
            return
        card = self._find(card_id)
        if card is None or card.is_flipped or card.is_matched:
            return
        if len(self.flipped_cards) >= 2:
            return

        card.is_flipped = True
        self.flipped_cards.append(card.id)
        self.last_match_correct = None

        if len(self.flipped_cards) == 2:
            self.moves += 1
            self.can_flip = False
            self._schedule_resolution(session)

        session.notify_state_change()

    def _schedule_resolution(self, session: "GameSession") -> None:
        self._pending = session.call_later(RESOLUTION_DELAY_MS, lambda: self._resolve(session))

    def _resolve(self, session: "GameSession") -> None:
        self._pending = None
        if session.disposed or session.status.is_terminal:
            return
        if session.status == GameStatus.PAUSED:
            # picked up again by on_resume
            self._parked = True
            return

        first, second = (self._find(card_id) for card_id in self.flipped_cards)
        if first.symbol == second.symbol:
            first.is_matched = second.is_matched = True
            self.matched_pairs += 1
            self.last_match_correct = True
            session.correct(MATCH_POINTS + efficiency_bonus(self.moves))

            if self.matched_pairs == self.total_pairs:
                self.flipped_cards = []
                session.level_complete((self.total_pairs * 100) // self.moves)
                return
        else:
            first.is_flipped = second.is_flipped = False
            self.last_match_correct = False
            session.record_miss()

        self.flipped_cards = []
        self.can_flip = True
        if session.is_playing:
            session.notify_state_change()

    def handle_timeout(self, session: "GameSession") -> None:
        session.mistake()

    def get_board(self) -> CardFlipBoard:
        return CardFlipBoard(
            cards=tuple(replace(c) for c in self.cards),
            flipped_cards=tuple(self.flipped_cards),
            matched_pairs=self.matched_pairs,
            total_pairs=self.total_pairs,
            moves=self.moves,
            can_flip=self.can_flip,
            last_match_correct=self.last_match_correct,
            rows=self.rows,
            cols=self.cols,
        )

    def progress(self) -> Dict[str, int]:
        return {"current": self.matched_pairs, "total": self.total_pairs, "moves": self.moves}

    def content(self) -> Optional[dict]:
        return self.get_board().to_dict() if self.cards else None

    def on_resume(self, session: "GameSession", paused_ms: float) -> None:
        if self._parked:
            self._parked = False
            self._schedule_resolution(session)

    def cleanup(self) -> None:
        self._parked = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
