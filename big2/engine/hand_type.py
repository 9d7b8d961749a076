"""牌型定义 - 锄大地的单张、对子与五张组合牌"""

from enum import Enum
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from .card import Card, Rank


class HandKind(str, Enum):
    """出牌大类：同一轮内只能跟同一大类"""
    SINGLE = "SINGLE"   # 单张
    DOUBLE = "DOUBLE"   # 对子
    COMBO = "COMBO"     # 五张组合


class ComboType(str, Enum):
    """五张组合的具体牌型"""
    STRAIGHT = "STRAIGHT"               # 顺子
    FLUSH = "FLUSH"                     # 同花
    FULL_HOUSE = "FULL_HOUSE"           # 葫芦（三带二）
    BOMB = "BOMB"                       # 炸弹（四带一）
    STRAIGHT_FLUSH = "STRAIGHT_FLUSH"   # 同花顺
    ROYAL_FLUSH = "ROYAL_FLUSH"         # 皇家同花顺


# 牌力公式中的指数，与枚举声明顺序无关
COMBO_EXPONENT: Dict[ComboType, int] = {
    ComboType.STRAIGHT: 1,
    ComboType.FLUSH: 3,
    ComboType.FULL_HOUSE: 5,
    ComboType.BOMB: 7,
    ComboType.STRAIGHT_FLUSH: 9,
    ComboType.ROYAL_FLUSH: 11,
}

# 皇家同花顺固定点数：10 J Q K A
ROYAL_FLUSH_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})


@dataclass(frozen=True)
class Hand:
    """
    一手已校验的出牌。

    只应通过 detect_hand() 构造。不同大类各有子类，
    跨大类比较大小会抛出 TypeError。
    """
    cards: Tuple[Card, ...]
    strength: float
    player: Optional[int]       # 出牌玩家 id，仅作记录

    kind: ClassVar[HandKind]
    size: ClassVar[int]

    @property
    def combo(self) -> Optional[ComboType]:
        return None

    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: "Hand") -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: "Hand") -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: "Hand") -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: "Hand") -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self.strength >= other.strength

    @property
    def label(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        cards_str = " ".join(c.display for c in self.cards)
        return f"[{self.label}] {cards_str}"


@dataclass(frozen=True, repr=False)
class SingleHand(Hand):
    kind: ClassVar[HandKind] = HandKind.SINGLE
    size: ClassVar[int] = 1


@dataclass(frozen=True, repr=False)
class DoubleHand(Hand):
    kind: ClassVar[HandKind] = HandKind.DOUBLE
    size: ClassVar[int] = 2


@dataclass(frozen=True, repr=False)
class ComboHand(Hand):
    combo_type: ComboType
    kind: ClassVar[HandKind] = HandKind.COMBO
    size: ClassVar[int] = 5

    @property
    def combo(self) -> Optional[ComboType]:
        return self.combo_type

    @property
    def label(self) -> str:
        return f"{self.kind.value}/{self.combo_type.value}"


