"""出牌堆状态机 - 一轮（trick）内只接受同大类、牌力更大的出牌"""

import logging
from enum import Enum
from dataclasses import dataclass
from typing import Iterable, List, Optional

from big2.engine.card import Card
from big2.engine.hand_type import ComboType, Hand, HandKind
from big2.engine.hand_detector import detect_hand

logger = logging.getLogger(__name__)


class RejectReason(str, Enum):
    """出牌被拒绝的原因"""
    KIND_MISMATCH = "kind mismatch"   # 与本轮大类不同
    TOO_WEAK = "too weak"             # 没有压过上一手


@dataclass(frozen=True)
class AddResult:
    """一次 add() 的结果：被拒绝是正常流程，不抛异常"""
    accepted: bool
    hand: Hand
    reason: Optional[RejectReason] = None

    def __bool__(self) -> bool:
        return self.accepted


class PlayPile:
    """
    一轮出牌的牌堆。

    状态：空 → 单张/对子/组合（首手牌锁定大类）→ 空（clear()）。
    组合大类内部的具体牌型可以随出牌变化。
    """

    def __init__(self) -> None:
        self._hands: List[Hand] = []
        self.kind: Optional[HandKind] = None
        self.combo: Optional[ComboType] = None

    @property
    def hands(self) -> List[Hand]:
        return list(self._hands)

    @property
    def top(self) -> Optional[Hand]:
        """当前最大的一手牌"""
        return self._hands[-1] if self._hands else None

    @property
    def owner(self) -> Optional[int]:
        """当前最大一手牌的出牌玩家"""
        top = self.top
        return top.player if top is not None else None

    @property
    def is_empty(self) -> bool:
        return not self._hands

    def __len__(self) -> int:
        return len(self._hands)

    def add(self, cards: Iterable[Card], player: int) -> AddResult:
        """
        尝试把一手牌加入牌堆。
        牌型非法时 InvalidHand 直接抛出；大类不符或牌力不足时返回被拒绝的结果，牌堆不变。
        """
        hand = detect_hand(cards, player=player)

        if self.kind is not None and hand.kind != self.kind:
            logger.debug("拒绝 %r: 本轮为 %s", hand, self.kind.value)
            return AddResult(False, hand, RejectReason.KIND_MISMATCH)

        top = self.top
        if top is not None and not hand.strength > top.strength:
            logger.debug("拒绝 %r: 未压过 %r", hand, top)
            return AddResult(False, hand, RejectReason.TOO_WEAK)

        self.kind = hand.kind
        self.combo = hand.combo
        self._hands.append(hand)
        return AddResult(True, hand)

    def clear(self) -> None:
        """本轮结束：清空牌堆并解除大类锁定"""
        self._hands.clear()
        self.kind = None
        self.combo = None

    def __repr__(self) -> str:
        mode = self.kind.value if self.kind else "EMPTY"
        if self.combo is not None:
            mode = f"{mode} ({self.combo.value})"
        return f"PlayPile({mode}, {len(self._hands)} hands)"
