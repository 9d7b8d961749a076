"""规则引擎 AI - 基于组合牌生成与牌力的出牌策略"""

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set

from big2.engine.card import Card
from big2.engine.combo import Candidate, find_combos, find_duplicates
from big2.engine.errors import InvalidHand
from big2.engine.hand_type import Hand, HandKind
from big2.engine.hand_detector import detect_hand, can_beat
from big2.game.config import ENDGAME_THRESHOLD
from big2.game.player import Player
from big2.game.game_state import GameState

logger = logging.getLogger(__name__)

# 自由出牌时的大类优先级
OPENING_ORDER = (HandKind.COMBO, HandKind.DOUBLE, HandKind.SINGLE)


class RuleAI:
    """
    基于简单规则的 AI 策略。

    - 无对手临近出完时：保留每类最强的对子/组合，用最小的牌压过上家；
    - 任一对手剩余牌数 ≤ endgame_threshold 时：不再保留，出最大的牌压制。
    """

    def __init__(self, endgame_threshold: int = ENDGAME_THRESHOLD):
        self.endgame_threshold = endgame_threshold

    def decide_play(self, player: Player, state: GameState) -> Optional[List[Card]]:
        """出牌决策：返回要出的牌列表，None=不出(PASS)"""
        if not player.hand:
            return None
        hand = self.choose_move(
            player.hand, player, state.last_play, player.id, state.cards_left
        )
        return list(hand.cards) if hand is not None else None

    def choose_move(
        self,
        cards: Sequence[Card],
        player: Player,
        prev_hand: Optional[Hand],
        current_pos: int,
        n_cards_left: Sequence[int],
    ) -> Optional[Hand]:
        """
        选出一手合法的牌。
        prev_hand 为 None 表示自由出牌；返回 None 表示不出。
        """
        cards = list(cards)
        pressure = self._endgame_pressure(current_pos, n_cards_left)

        doubles = self._to_hands(find_duplicates(cards, 2), player.id)
        combos_by_name = {
            name: self._to_hands(found, player.id)
            for name, found in (find_combos(cards) or {}).items()
        }
        candidates: Dict[HandKind, List[Hand]] = {
            HandKind.SINGLE: self._to_hands(([c] for c in cards), player.id),
            HandKind.DOUBLE: doubles,
            HandKind.COMBO: self._dedupe(
                h for found in combos_by_name.values() for h in found
            ),
        }
        saved: Set[Card] = set()
        if not pressure:
            saved = self._cards_worth_saving([doubles, *combos_by_name.values()])

        if prev_hand is None:
            for kind in OPENING_ORDER:
                choice = self._pick(candidates[kind], saved, pressure)
                if choice is not None:
                    logger.debug("玩家%d 自由出牌: %r", player.id, choice)
                    return choice
            return None

        legal = [h for h in candidates[prev_hand.kind] if can_beat(h, prev_hand)]
        choice = self._pick(legal, saved, pressure)
        logger.debug(
            "玩家%d 跟 %r: %d 个可选, 选择 %r (残局=%s)",
            player.id, prev_hand, len(legal), choice, pressure,
        )
        return choice

    # ============================================================
    #  决策辅助方法
    # ============================================================

    def _endgame_pressure(self, current_pos: int, n_cards_left: Sequence[int]) -> bool:
        """任一对手剩余牌数不超过阈值"""
        return any(
            n <= self.endgame_threshold
            for i, n in enumerate(n_cards_left)
            if i != current_pos
        )

    @staticmethod
    def _to_hands(groups: Iterable[Candidate], player_id: int) -> List[Hand]:
        """把候选牌组识别为 Hand，跳过非法的组合"""
        hands: List[Hand] = []
        for group in groups:
            try:
                hands.append(detect_hand(group, player=player_id))
            except InvalidHand:
                continue
        return hands

    @staticmethod
    def _dedupe(hands: Iterable[Hand]) -> List[Hand]:
        """去掉由相同牌组成的重复候选（同花顺会同时出现在顺子和同花里）"""
        unique: List[Hand] = []
        seen: Set[FrozenSet[Card]] = set()
        for hand in hands:
            key = frozenset(hand.cards)
            if key not in seen:
                seen.add(key)
                unique.append(hand)
        return unique

    @staticmethod
    def _cards_worth_saving(categories: Iterable[List[Hand]]) -> Set[Card]:
        """值得保留的牌：对子及每种组合牌型中，最强一手所用的牌"""
        saved: Set[Card] = set()
        for hands in categories:
            if hands:
                saved.update(max(hands, key=lambda h: h.strength).cards)
        return saved

    @staticmethod
    def _pick(hands: List[Hand], saved: Set[Card], pressure: bool) -> Optional[Hand]:
        """
        优先选不动用保留牌的候选（全部都动用时不过滤），
        残局出最大，否则出最小。
        """
        if not hands:
            return None
        preferred = [h for h in hands if not saved.intersection(h.cards)] or hands
        ordered = sorted(preferred, key=lambda h: h.strength)
        return ordered[-1] if pressure else ordered[0]
