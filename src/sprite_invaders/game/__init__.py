"""Game simulation and rendering core."""

from .animator import Animator
from .atlas import SpriteAtlas
from .collision import collides
from .controller import GameLoopController, TickResult
from .events import EventQueue, InputEvent, parse_event
from .formation import Formation
from .game_state import GameSession, SessionState, SessionSummary
from .projectiles import ProjectileSet
from .renderer import FrameCompositor
from .spawn import SpawnPolicy
from .sprite import Sprite, SpriteKind, Variant, create_bomb, create_enemy
from .strategies.base_strategy import BaseStrategy
from .strategies.hunter_strategy import HunterStrategy
from .strategies.random_strategy import RandomStrategy

__all__ = [
    "Animator",
    "SpriteAtlas",
    "collides",
    "GameLoopController",
    "TickResult",
    "EventQueue",
    "InputEvent",
    "parse_event",
    "Formation",
    "GameSession",
    "SessionState",
    "SessionSummary",
    "ProjectileSet",
    "FrameCompositor",
    "SpawnPolicy",
    "Sprite",
    "SpriteKind",
    "Variant",
    "create_bomb",
    "create_enemy",
    "BaseStrategy",
    "HunterStrategy",
    "RandomStrategy",
]
