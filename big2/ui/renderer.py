"""终端可视化渲染器 - 在终端中展示锄大地对局过程"""

import time
from typing import List

from big2.engine.card import Card, Suit
from big2.engine.hand_type import ComboType, Hand, HandKind
from big2.game.player import Player
from big2.game.game_state import GameState, GamePhase, GameEvent


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
MAGENTA = "\033[95m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型中文名
HAND_KIND_NAME = {
    HandKind.SINGLE: "单张",
    HandKind.DOUBLE: "对子",
    HandKind.COMBO: "组合",
}

COMBO_TYPE_NAME = {
    ComboType.STRAIGHT: "顺子",
    ComboType.FLUSH: "同花",
    ComboType.FULL_HOUSE: "葫芦",
    ComboType.BOMB: "炸弹 💣",
    ComboType.STRAIGHT_FLUSH: "同花顺",
    ComboType.ROYAL_FLUSH: "皇家同花顺 👑",
}


class TerminalRenderer:
    """终端可视化渲染器"""

    def __init__(self, delay: float = 0.8):
        self.delay = delay  # 每步之间的延迟（秒）

    def pause(self, seconds: float = 0) -> None:
        """暂停"""
        if self.delay > 0:
            time.sleep(seconds or self.delay)

    # ============================================================
    #  牌面渲染
    # ============================================================

    @staticmethod
    def format_cards(cards: List[Card]) -> str:
        """将牌列表格式化为彩色字符串"""
        parts = []
        for c in cards:
            if c.suit in (Suit.HEART, Suit.DIAMOND):
                parts.append(f"{RED}{c.display}{RESET}")
            else:
                parts.append(c.display)
        return " ".join(parts)

    @staticmethod
    def hand_name(hand: Hand) -> str:
        if hand.combo is not None:
            return COMBO_TYPE_NAME[hand.combo]
        return HAND_KIND_NAME[hand.kind]

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        print(f"\n{YELLOW}{BOLD}{'═' * 60}{RESET}")
        print(f"{YELLOW}{BOLD}  {title}{RESET}")
        print(f"{YELLOW}{BOLD}{'═' * 60}{RESET}\n")

    # ============================================================
    #  各阶段展示
    # ============================================================

    def show_deal(self, players: List[Player]) -> None:
        """展示发牌结果"""
        self.print_header("🃏 发牌完成")
        for p in players:
            print(f"  {BOLD}{p.name}{RESET} ({p.hand_size}张): {self.format_cards(p.hand)}")
        print()

    def show_play(self, player: Player, hand: Hand) -> None:
        """展示一次出牌"""
        cards_str = self.format_cards(list(hand.cards))
        print(
            f"  {BOLD}{player.name}{RESET} 出牌 [{self.hand_name(hand)}]: {cards_str}"
            f"  (剩余{player.hand_size}张)"
        )

    def show_pass(self, player: Player) -> None:
        """展示不出"""
        print(f"  {BOLD}{player.name}{RESET}: {DIM}不出{RESET}")

    def show_clear(self, player: Player) -> None:
        """展示一轮结束"""
        print(f"  {MAGENTA}── 无人压过，{player.name} 重新出牌 ──{RESET}")

    def show_result(self, state: GameState, players: List[Player]) -> None:
        """展示游戏结果"""
        self.print_header("🏆 游戏结束")
        winner = players[state.winner]
        print(f"  胜利方: {GREEN}{BOLD}{winner.name}{RESET}  (共 {state.turn} 回合)")
        print(f"\n  {'玩家':<12} {'剩余张数':<8} {'出牌次数':<8}")
        for p in players:
            print(f"  {p.name:<12} {p.hand_size:<10} {p.play_count:<8}")
        print()

    # ============================================================
    #  事件回调（注册到 GameController）
    # ============================================================

    def make_event_callback(self, players: List[Player]):
        """创建事件回调函数，供 GameController.on_event() 使用"""
        renderer = self

        def callback(event: GameEvent) -> None:
            if event.phase != GamePhase.PLAYING:
                return
            player = players[event.player_id]
            if event.action == "play":
                renderer.show_play(player, event.data)
                renderer.pause()
            elif event.action == "pass":
                renderer.show_pass(player)
                renderer.pause(0.3)
            elif event.action == "clear":
                renderer.show_clear(player)

        return callback
