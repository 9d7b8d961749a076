"""游戏控制器 - 驱动一局锄大地的完整流程"""

import logging
import random
from typing import Callable, List, Optional, Protocol

from big2.engine.card import Card, create_deck, divide_deck, shuffle_deck
from big2.engine.errors import InvalidHand
from big2.game.config import GameConfig
from big2.game.player import Player
from big2.game.game_state import GameState, GamePhase, GameEvent

logger = logging.getLogger(__name__)


class AIStrategy(Protocol):
    """AI 决策接口（策略模式）"""

    def decide_play(self, player: Player, state: GameState) -> Optional[List[Card]]:
        """决定出牌：返回要出的牌列表，None=不出(PASS)"""
        ...


class GameController:
    """游戏控制器：驱动一局锄大地的完整流程"""

    def __init__(
        self,
        player_names: List[str],
        strategies: List[AIStrategy],
        config: Optional[GameConfig] = None,
    ):
        assert len(player_names) == len(strategies)
        self.config = config or GameConfig(n_players=len(player_names))
        self.config.check_house_rules()

        self.players = [
            Player(id=i, name=name) for i, name in enumerate(player_names)
        ]
        self.strategies = strategies
        self.state = GameState(players=self.players)
        self._rng = random.Random(self.config.seed)
        self._callbacks: List[Callable[[GameEvent], None]] = []  # 事件回调（用于 UI 通知）

    @property
    def n_players(self) -> int:
        return len(self.players)

    def on_event(self, callback: Callable[[GameEvent], None]) -> None:
        """注册事件回调"""
        self._callbacks.append(callback)

    def _emit(self, event: GameEvent) -> None:
        """触发事件通知"""
        self.state.events.append(event)
        for cb in self._callbacks:
            cb(event)

    # ============================================================
    #  发牌阶段
    # ============================================================

    def deal(self) -> None:
        """洗牌并均分给所有玩家（人数不能整除 52 时抛出 DeckError）"""
        self.state.phase = GamePhase.DEALING
        deck = shuffle_deck(create_deck(), self._rng)
        chunks = divide_deck(deck, self.n_players)

        for player, chunk in zip(self.players, chunks):
            player.hand = chunk
            player.sort_hand()

        # 持起始牌者先出尚未实现，随机选首个出牌玩家
        self.state.current_player = self._rng.randrange(self.n_players)
        self.state.phase = GamePhase.PLAYING

    # ============================================================
    #  出牌阶段
    # ============================================================

    def run_playing(self) -> None:
        """执行出牌流程，直到有人出完牌"""
        s = self.state
        while s.phase == GamePhase.PLAYING:
            self._play_one_turn()

    def _play_one_turn(self) -> None:
        """执行一个玩家的出牌回合"""
        s = self.state
        pid = s.current_player
        player = self.players[pid]
        s.turn += 1

        # 最大一手牌转了一圈无人压过：本轮结束，由该玩家自由出牌
        if s.pile.owner == pid:
            s.pile.clear()
            self._emit(GameEvent(GamePhase.PLAYING, pid, "clear"))

        cards = self.strategies[pid].decide_play(player, s)

        if cards is None:
            if s.pile.is_empty:
                logger.warning("玩家%d 自由出牌时选择不出，改出最小单张", pid)
                self._handle_play(pid, [player.hand[0]])
            else:
                self._handle_pass(pid)
        else:
            self._handle_play(pid, cards)

    def _next_player(self, pid: int) -> int:
        return (pid + 1) % self.n_players

    def _handle_pass(self, pid: int) -> None:
        """处理不出"""
        s = self.state
        self._emit(GameEvent(GamePhase.PLAYING, pid, "pass"))
        s.current_player = self._next_player(pid)

    def _reject(self, pid: int, reason: str) -> None:
        """非法出牌：自由出牌时改出最小单张，否则视为不出"""
        logger.warning("玩家%d 出牌非法 (%s)", pid, reason)
        player = self.players[pid]
        if self.state.pile.is_empty:
            self._handle_play(pid, [player.hand[0]])
        else:
            self._handle_pass(pid)

    def _handle_play(self, pid: int, cards: List[Card]) -> None:
        """处理出牌"""
        s = self.state
        player = self.players[pid]

        # 验证手牌中有这些牌
        if not player.has_cards(cards):
            self._reject(pid, "手牌中不包含所出的牌")
            return

        try:
            result = s.pile.add(cards, pid)
        except InvalidHand as e:
            self._reject(pid, f"牌型非法: {e.reason}")
            return

        if not result.accepted:
            self._reject(pid, result.reason.value)
            return

        # 合法出牌
        player.remove_cards(cards)
        player.play_count += 1

        s.play_history.append((pid, result.hand))
        self._emit(GameEvent(GamePhase.PLAYING, pid, "play", result.hand))

        # 检查是否出完
        if player.hand_size == 0:
            self._finish_game(pid)
            return

        s.current_player = self._next_player(pid)

    # ============================================================
    #  结算阶段
    # ============================================================

    def _finish_game(self, winner_id: int) -> None:
        """游戏结束"""
        s = self.state
        s.phase = GamePhase.FINISHED
        s.winner = winner_id
        logger.info("玩家%d 出完手牌，共 %d 回合", winner_id, s.turn)

    # ============================================================
    #  完整游戏入口
    # ============================================================

    def run_game(self) -> GameState:
        """运行一局完整游戏"""
        self._reset_round()
        self.deal()
        self.run_playing()
        return self.state

    def _reset_round(self) -> None:
        """重置一局的状态"""
        for p in self.players:
            p.reset_for_new_game()
        self.state = GameState(players=self.players)
