"""玩家模型 - 锄大地玩家的数据结构"""

from dataclasses import dataclass, field
from typing import List

from big2.engine.card import Card, sort_cards


@dataclass
class Player:
    """一个玩家"""
    id: int                          # 座位号
    name: str                        # 显示名
    hand: List[Card] = field(default_factory=list)
    play_count: int = 0              # 本局出牌次数

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def sort_hand(self) -> None:
        """手牌排序"""
        self.hand = sort_cards(self.hand)

    def remove_cards(self, cards: List[Card]) -> None:
        """从手牌中移除指定的牌"""
        for card in cards:
            self.hand.remove(card)

    def has_cards(self, cards: List[Card]) -> bool:
        """检查手牌中是否包含指定的牌"""
        hand_copy = list(self.hand)
        for card in cards:
            if card in hand_copy:
                hand_copy.remove(card)
            else:
                return False
        return True

    def reset_for_new_game(self) -> None:
        """新一局重置"""
        self.hand.clear()
        self.play_count = 0
