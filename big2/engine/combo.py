"""组合牌生成器 - 从任意手牌中枚举所有可能的对子/三条/四条与五张组合"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations, islice, product
from typing import Callable, Dict, Iterable, List, Optional

from .card import Card, Rank, Suit, sort_cards

logger = logging.getLogger(__name__)

# 一组候选牌
Candidate = List[Card]
# 牌型名 → 候选列表；缺少某个键表示该牌型没有候选
ComboMap = Dict[str, List[Candidate]]


# ============================================================
#  辅助函数
# ============================================================

def _group_by_rank(cards: Iterable[Card]) -> Dict[Rank, List[Card]]:
    """按点数分组，组内按牌值排序，键按点数升序"""
    groups: Dict[Rank, List[Card]] = {}
    for card in sort_cards(list(cards)):
        groups.setdefault(card.rank, []).append(card)
    return groups


def _group_by_suit(cards: Iterable[Card]) -> Dict[Suit, List[Card]]:
    """按花色分组，组内按牌值排序"""
    groups: Dict[Suit, List[Card]] = {}
    for card in sort_cards(list(cards)):
        groups.setdefault(card.suit, []).append(card)
    return groups


def _find_runs(rank_groups: Dict[Rank, List[Card]]) -> List[List[List[Card]]]:
    """
    找出所有点数权重连续的最长序列。
    序列中每个位置是该点数持有的全部牌（多于一张即为可替换的重复牌）。
    """
    runs: List[List[List[Card]]] = []
    current: List[List[Card]] = []
    last_rank: Optional[Rank] = None

    for rank, group in rank_groups.items():
        if last_rank is not None and rank - last_rank == 1:
            current.append(group)
        else:
            if current:
                runs.append(current)
            current = [group]
        last_rank = rank
    if current:
        runs.append(current)
    return runs


# ============================================================
#  对子 / 三条 / 四条
# ============================================================

def find_duplicates(cards: Iterable[Card], size: int) -> List[Candidate]:
    """
    找出所有同点数的 size 张组合。
    某点数持有 ≥ size 张时，输出该点数所有不计顺序的 size 张子集。
    """
    duplicates: List[Candidate] = []
    for group in _group_by_rank(cards).values():
        if len(group) >= size:
            duplicates.extend(list(comb) for comb in combinations(group, size))
    return duplicates


# ============================================================
#  五张组合
# ============================================================

def find_bombs(cards: Iterable[Card]) -> List[Candidate]:
    """炸弹：每个四条 × 每张其他点数的单牌"""
    cards = list(cards)
    bombs: List[Candidate] = []
    for quad in find_duplicates(cards, 4):
        quad_rank = quad[0].rank
        for kicker in sort_cards(cards):
            if kicker.rank != quad_rank:
                bombs.append(quad + [kicker])
    return bombs


def find_full_houses(cards: Iterable[Card]) -> List[Candidate]:
    """葫芦：每个三条 + 从剩余牌中找出的每个对子"""
    cards = list(cards)
    full_houses: List[Candidate] = []
    for triple in find_duplicates(cards, 3):
        remaining = [c for c in cards if c not in triple]
        for pair in find_duplicates(remaining, 2):
            full_houses.append(triple + pair)
    return full_houses


def find_straights(cards: Iterable[Card]) -> List[Candidate]:
    """
    顺子：在每段连续点数中取所有 5 张滑动窗口。
    窗口内某点数持有多张时，对每个这样的位置换入其他花色，
    输出所有组合（各位置的笛卡尔积）。不足 5 张的序列忽略。
    """
    straights: List[Candidate] = []
    for run in _find_runs(_group_by_rank(cards)):
        if len(run) < 5:
            continue
        for start in range(len(run) - 4):
            window = run[start:start + 5]
            straights.extend(list(choice) for choice in product(*window))
    return straights


def find_flushes(cards: Iterable[Card]) -> List[Candidate]:
    """同花：同花色 ≥ 5 张时，输出该花色所有 5 张子集"""
    flushes: List[Candidate] = []
    for group in _group_by_suit(cards).values():
        if len(group) >= 5:
            flushes.extend(list(comb) for comb in combinations(group, 5))
    return flushes


# 牌型名与对应生成器
COMBO_FINDERS: Dict[str, Callable[[List[Card]], List[Candidate]]] = {
    "straights": find_straights,
    "full_houses": find_full_houses,
    "bombs": find_bombs,
    "flushes": find_flushes,
}


def _merge(results: Iterable, limit: Optional[int]) -> Optional[ComboMap]:
    """合并各生成器结果，去掉空牌型；全部为空返回 None"""
    combos: ComboMap = {}
    for name, found in results:
        if limit is not None:
            found = list(islice(found, limit))
        if found:
            combos[name] = found
    logger.debug("组合牌统计: %s", {k: len(v) for k, v in combos.items()})
    return combos or None


def find_combos(cards: Iterable[Card], limit: Optional[int] = None) -> Optional[ComboMap]:
    """
    并发生成所有五张组合。
    四个生成器各自处理一份手牌副本，互不共享可变状态，全部完成后合并。
    返回 {牌型名: 候选列表}，没有任何组合时返回 None。
    limit 限制每种牌型最多保留的候选数（默认不限）。
    """
    cards = list(cards)
    with ThreadPoolExecutor(max_workers=len(COMBO_FINDERS)) as pool:
        futures = {
            name: pool.submit(finder, list(cards))
            for name, finder in COMBO_FINDERS.items()
        }
        results = [(name, fut.result()) for name, fut in futures.items()]
    return _merge(results, limit)


async def find_combos_async(
    cards: Iterable[Card], limit: Optional[int] = None
) -> Optional[ComboMap]:
    """find_combos 的异步版本，供已在事件循环中的调用方 await"""
    cards = list(cards)
    names = list(COMBO_FINDERS)
    found = await asyncio.gather(*(
        asyncio.to_thread(COMBO_FINDERS[name], list(cards)) for name in names
    ))
    return _merge(zip(names, found), limit)
