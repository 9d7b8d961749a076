"""牌的定义 - 锄大地52张扑克牌的数据模型"""

from enum import IntEnum
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Optional
import random

from .errors import DeckError


class Rank(IntEnum):
    """点数枚举（权重越大牌越大，2 最大）"""
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12
    TWO = 13


class Suit(IntEnum):
    """花色枚举：♦ < ♣ < ♥ < ♠"""
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    SPADE = 4


# 点数显示映射
RANK_DISPLAY = {
    Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "10", Rank.JACK: "J",
    Rank.QUEEN: "Q", Rank.KING: "K", Rank.ACE: "A",
    Rank.TWO: "2",
}

# 花色显示映射
SUIT_DISPLAY = {
    Suit.DIAMOND: "♦", Suit.CLUB: "♣",
    Suit.HEART: "♥", Suit.SPADE: "♠",
}

DECK_SIZE = len(Rank) * len(Suit)


@total_ordering
@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    rank: Rank
    suit: Suit

    @property
    def value(self) -> float:
        """牌值 = 点数权重 + 花色权重/10，52张牌各不相同（1.1 ~ 13.4）"""
        return int(self.rank) + int(self.suit) / 10

    @property
    def display(self) -> str:
        return f"{SUIT_DISPLAY[self.suit]}{RANK_DISPLAY[self.rank]}"

    def __repr__(self) -> str:
        return self.display

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))


def create_deck() -> List[Card]:
    """创建一副52张标准扑克牌（固定顺序）"""
    deck = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
    assert len(deck) == DECK_SIZE, f"牌数错误: {len(deck)}"
    return deck


def shuffle_deck(deck: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """洗牌：返回打乱后的副本，原牌堆不变"""
    shuffled = deck.copy()
    (rng or random).shuffle(shuffled)
    return shuffled


def divide_deck(deck: List[Card], n_chunks: int) -> List[List[Card]]:
    """
    把牌堆切成 n_chunks 份连续、等长的牌。
    不能整除时报错（不均分发牌的规则尚未实现）。
    """
    if n_chunks <= 0:
        raise DeckError(f"分牌份数必须为正数: {n_chunks}")
    if n_chunks > len(deck):
        raise DeckError(f"分牌份数 {n_chunks} 超过牌数 {len(deck)}")
    if len(deck) % n_chunks != 0:
        raise DeckError(f"{len(deck)} 张牌无法均分为 {n_chunks} 份")

    size = len(deck) // n_chunks
    return [deck[i:i + size] for i in range(0, len(deck), size)]


def sort_cards(cards: List[Card]) -> List[Card]:
    """按牌值排序手牌（从小到大）"""
    return sorted(cards, key=lambda c: c.value)
