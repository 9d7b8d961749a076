"""游戏状态 - 一局锄大地的阶段、出牌堆与事件记录"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from big2.engine.hand_type import Hand
from big2.game.pile import PlayPile
from big2.game.player import Player


class GamePhase(str, Enum):
    """游戏阶段"""
    WAITING = "WAITING"         # 等待开始
    DEALING = "DEALING"         # 发牌中
    PLAYING = "PLAYING"         # 出牌中
    FINISHED = "FINISHED"       # 已结束


@dataclass
class GameEvent:
    """游戏事件记录"""
    phase: GamePhase
    player_id: int
    action: str                  # "play", "pass", "clear"
    data: Any = None             # Hand / None


@dataclass
class GameState:
    """一局游戏的完整状态"""
    players: List[Player]
    phase: GamePhase = GamePhase.WAITING
    pile: PlayPile = field(default_factory=PlayPile)

    # 出牌相关
    turn: int = 0                    # 已进行的回合数
    current_player: int = 0          # 当前出牌玩家座位号

    # 结算相关
    winner: Optional[int] = None

    # 事件日志
    events: List[GameEvent] = field(default_factory=list)
    play_history: List[Tuple[int, Hand]] = field(default_factory=list)

    @property
    def last_play(self) -> Optional[Hand]:
        """本轮需要压过的牌，None 表示自由出牌"""
        return self.pile.top

    @property
    def cards_left(self) -> List[int]:
        """按座位号排列的各玩家剩余牌数"""
        return [p.hand_size for p in self.players]
