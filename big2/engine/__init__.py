# 游戏引擎模块
from .card import (
    Card, Rank, Suit, create_deck, shuffle_deck, divide_deck, sort_cards,
)
from .errors import InvalidHand, DeckError
from .hand_type import (
    HandKind, ComboType, Hand, SingleHand, DoubleHand, ComboHand, COMBO_EXPONENT,
)
from .hand_detector import detect_hand, calc_strength, gauge, can_beat
from .combo import (
    find_duplicates, find_bombs, find_full_houses, find_straights,
    find_flushes, find_combos, find_combos_async,
)
