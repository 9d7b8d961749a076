# 游戏流程控制模块
from .player import Player
from .pile import PlayPile, AddResult, RejectReason
from .config import GameConfig, ENDGAME_THRESHOLD
from .game_state import GameState, GamePhase, GameEvent
from .controller import GameController, AIStrategy
