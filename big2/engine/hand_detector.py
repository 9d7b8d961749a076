"""牌型检测器 - 识别一组牌的牌型、计算牌力并构建 Hand"""

from typing import Iterable, List, Optional
from collections import Counter

from .card import Card
from .errors import InvalidHand
from .hand_type import (
    COMBO_EXPONENT,
    ROYAL_FLUSH_RANKS,
    ComboHand,
    ComboType,
    DoubleHand,
    Hand,
    HandKind,
    SingleHand,
)


def detect_hand(cards: Iterable[Card], player: Optional[int] = None) -> Hand:
    """
    识别一组牌的牌型。
    返回对应大类的 Hand，非法牌型抛出 InvalidHand。
    """
    cards = list(cards)
    n = len(cards)

    # 每张牌在一副牌中只有一张
    if len(set(cards)) != n:
        raise InvalidHand("duplicate cards")

    if n == SingleHand.size:
        return SingleHand(
            cards=tuple(cards),
            strength=calc_strength(HandKind.SINGLE, cards),
            player=player,
        )

    if n == DoubleHand.size:
        if cards[0].rank != cards[1].rank:
            raise InvalidHand("ranks differ")
        return DoubleHand(
            cards=tuple(cards),
            strength=calc_strength(HandKind.DOUBLE, cards),
            player=player,
        )

    if n == ComboHand.size:
        combo = detect_combo(cards)
        if combo is None:
            raise InvalidHand("not a recognized 5-card combo")
        return ComboHand(
            cards=tuple(cards),
            strength=calc_strength(HandKind.COMBO, cards, combo),
            player=player,
            combo_type=combo,
        )

    raise InvalidHand("bad length")


def detect_combo(cards: List[Card]) -> Optional[ComboType]:
    """识别五张组合的牌型，按优先级依次尝试，都不匹配返回 None"""
    if len(cards) != ComboHand.size:
        return None

    rank_counts = Counter(c.rank for c in cards)
    flush = _is_flush(cards)
    straight = _is_straight(rank_counts)

    # 皇家同花顺 > 同花顺 > 炸弹 > 葫芦 > 顺子 > 同花
    if flush and set(rank_counts) == ROYAL_FLUSH_RANKS:
        return ComboType.ROYAL_FLUSH
    if flush and straight:
        return ComboType.STRAIGHT_FLUSH
    if sorted(rank_counts.values()) == [1, 4]:
        return ComboType.BOMB
    if sorted(rank_counts.values()) == [2, 3]:
        return ComboType.FULL_HOUSE
    if straight:
        return ComboType.STRAIGHT
    if flush:
        return ComboType.FLUSH
    return None


# ============================================================
#  辅助函数
# ============================================================

def _is_flush(cards: List[Card]) -> bool:
    """五张同花色"""
    return len({c.suit for c in cards}) == 1


def _is_straight(rank_counts: Counter) -> bool:
    """五个点数各不相同且权重连续"""
    if len(rank_counts) != 5:
        return False
    ranks = sorted(rank_counts)
    return ranks[-1] - ranks[0] == 4


def _main_group(cards: List[Card], count: int) -> List[Card]:
    """取出恰好出现 count 次的点数对应的牌（葫芦的三条 / 炸弹的四条）"""
    rank_counts = Counter(c.rank for c in cards)
    return [c for c in cards if rank_counts[c.rank] == count]


# ============================================================
#  牌力计算
# ============================================================

def calc_strength(
    kind: HandKind, cards: List[Card], combo: Optional[ComboType] = None
) -> float:
    """
    计算一手牌的牌力（只在同一大类之间比较）。
    单张：牌值；对子：2 × 较大牌值；
    组合：base ** 指数 × 5，base 为最大牌值（葫芦/炸弹取三条/四条中的最大牌）。
    """
    if not cards:
        raise InvalidHand("no cards to gauge")

    if kind == HandKind.SINGLE:
        return cards[0].value
    if kind == HandKind.DOUBLE:
        return 2 * max(c.value for c in cards)

    if combo is None:
        raise InvalidHand("combo hand without combo type")

    if combo == ComboType.FULL_HOUSE:
        selected = _main_group(cards, 3)
    elif combo == ComboType.BOMB:
        selected = _main_group(cards, 4)
    else:
        selected = cards
    if not selected:
        # 已通过校验的牌型不应走到这里
        raise InvalidHand(f"no {combo.value} core cards in {cards}")

    base = max(c.value for c in selected)
    return base ** COMBO_EXPONENT[combo] * 5


def gauge(hand: Hand) -> float:
    """重新计算一手牌的牌力"""
    return calc_strength(hand.kind, list(hand.cards), hand.combo)


# ============================================================
#  牌型比较
# ============================================================

def can_beat(current: Hand, previous: Hand) -> bool:
    """
    判断 current 能否压过 previous。
    规则：大类必须相同，且牌力严格更大。
    组合牌之间不区分具体牌型，直接比较牌力。
    """
    if current.kind != previous.kind:
        return False
    return current > previous
