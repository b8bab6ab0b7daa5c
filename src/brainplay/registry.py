# Area: Registry
"""
brainplay.registry — Game registry and engine factory
======================================================

Maps game ids to catalog metadata and to a factory for the game's
rules. ``create_engine`` validates a config, looks up the game and
returns a fresh GameSession:

    engine = create_engine({"game_id": "card-flip", "seed": 7, "difficulty": 3})

Unknown ids raise UnknownGameError; invalid configs raise
InvalidConfigError. Both happen before any engine exists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from ._config import GameConfig, build_config
from ._core.enums import GameCategory
from ._core.rules import GameRules
from ._core.scheduler import Scheduler
from ._core.session import Clock, GameSession
from ._games import CardFlipRules, ColorStroopRules, MathSprintRules, PatternEchoRules
from .errors import InvalidConfigError, UnknownGameError
from .listeners import GameListener
from .types import GameInfoDict

logger = logging.getLogger("brainplay.registry")

RulesFactory = Callable[[], GameRules]


@dataclass(frozen=True)
class GameInfo:
    """
    Catalog entry for one game.

    Attributes:
        id: Registry id
        name: Display name
        category: Catalog category
        description: One-line pitch
        duration: Rough play time, e.g. "~3 min"
        icon: Emoji icon
        max_levels: Number of levels
    """
    id: str
    name: str
    category: GameCategory
    description: str
    duration: str
    icon: str
    max_levels: int

    def to_dict(self) -> "GameInfoDict":
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "duration": self.duration,
            "icon": self.icon,
            "max_levels": self.max_levels,
        }


class GameRegistry:
    """
    Registry of playable games keyed by id.

    Usage:
        registry = GameRegistry()
        registry.register(info, MathSprintRules)
        engine = registry.create_engine({"game_id": "math-sprint"})
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._games: Dict[str, GameInfo] = {}
        self._factories: Dict[str, RulesFactory] = {}

    def register(self, info: GameInfo, factory: RulesFactory) -> None:
        """
        Register a game.

        Args:
            info: Catalog metadata
            factory: Zero-argument callable building fresh rules
        """
        self._games[info.id] = info
        self._factories[info.id] = factory
        logger.debug(f"Registered game {info.id}")

    def __contains__(self, game_id: str) -> bool:
        return game_id in self._games

    @property
    def game_ids(self) -> List[str]:
        return list(self._games)

    def get_info(self, game_id: str) -> Optional[GameInfo]:
        return self._games.get(game_id)

    def list_games(self) -> List[GameInfo]:
        return list(self._games.values())

    def games_by_category(self, category: GameCategory) -> List[GameInfo]:
        return [g for g in self._games.values() if g.category == category]

    def create_engine(
        self,
        config: Union[GameConfig, Mapping[str, Any]],
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
        listeners: Iterable[GameListener] = (),
    ) -> GameSession:
        """
        Build a new engine for one play session.

        Args:
            config: GameConfig or a mapping validated into one
            clock: Millisecond clock override
            scheduler: Scheduler override for delayed tasks
            listeners: Listeners attached before the session is returned

        Raises:
            UnknownGameError: If no game is registered under config.game_id
            InvalidConfigError: If the config is invalid for that game
        """
        config = build_config(config)
        factory = self._factories.get(config.game_id)
        if factory is None:
            raise UnknownGameError(config.game_id, self.game_ids)

        rules = factory()
        if config.level is not None and config.level > rules.max_levels:
            raise InvalidConfigError(
                input_payload=config.model_dump(mode="json"),
                validation_errors=[
                    f"level: must be at most {rules.max_levels} for {config.game_id}"
                ],
                game_id=config.game_id,
            )

        session = GameSession(config, rules, clock=clock, scheduler=scheduler)
        for listener in listeners:
            session.add_listener(listener)
        logger.info(f"Created engine for {config.game_id}")
        return session


def _build_default_registry() -> GameRegistry:
    registry = GameRegistry()
    registry.register(
        GameInfo(
            id=PatternEchoRules.game_id,
            name="Pattern Echo",
            category=PatternEchoRules.category,
            description="Watch the sequence and repeat it",
            duration="~3 min",
            icon="🔮",
            max_levels=PatternEchoRules.max_levels,
        ),
        PatternEchoRules,
    )
    registry.register(
        GameInfo(
            id=CardFlipRules.game_id,
            name="Card Flip",
            category=CardFlipRules.category,
            description="Match pairs of cards",
            duration="~3 min",
            icon="🃏",
            max_levels=CardFlipRules.max_levels,
        ),
        CardFlipRules,
    )
    registry.register(
        GameInfo(
            id=ColorStroopRules.game_id,
            name="Color Stroop",
            category=ColorStroopRules.category,
            description="Name the color, not the word",
            duration="~2 min",
            icon="🎨",
            max_levels=ColorStroopRules.max_levels,
        ),
        ColorStroopRules,
    )
    registry.register(
        GameInfo(
            id=MathSprintRules.game_id,
            name="Math Sprint",
            category=MathSprintRules.category,
            description="Solve equations quickly",
            duration="~3 min",
            icon="🔢",
            max_levels=MathSprintRules.max_levels,
        ),
        MathSprintRules,
    )
    return registry


DEFAULT_REGISTRY = _build_default_registry()


def create_engine(
    config: Union[GameConfig, Mapping[str, Any]],
    clock: Optional[Clock] = None,
    scheduler: Optional[Scheduler] = None,
    listeners: Iterable[GameListener] = (),
) -> GameSession:
    """Build an engine from the default registry."""
    return DEFAULT_REGISTRY.create_engine(
        config, clock=clock, scheduler=scheduler, listeners=listeners
    )


def get_game_info(game_id: str) -> Optional[GameInfo]:
    return DEFAULT_REGISTRY.get_info(game_id)


def list_games() -> List[GameInfo]:
    return DEFAULT_REGISTRY.list_games()


def get_games_by_category(category: GameCategory) -> List[GameInfo]:
    return DEFAULT_REGISTRY.games_by_category(category)
