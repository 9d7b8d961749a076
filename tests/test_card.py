"""牌与牌堆单元测试"""

import random

import pytest
from big2.engine.card import (
    Card, Rank, Suit, DECK_SIZE, create_deck, shuffle_deck, divide_deck, sort_cards,
)
from big2.engine.errors import DeckError


def c(rank: Rank, suit: Suit = Suit.SPADE) -> Card:
    """快捷构造一张牌"""
    return Card(rank=rank, suit=suit)


class TestCardValue:
    """牌值与大小比较"""

    def test_values_are_distinct(self):
        values = {card.value for card in create_deck()}
        assert len(values) == 52

    def test_value_range(self):
        values = [card.value for card in create_deck()]
        assert min(values) == pytest.approx(1.1)
        assert max(values) == pytest.approx(13.4)

    def test_lowest_and_highest_card(self):
        assert c(Rank.THREE, Suit.DIAMOND).value == pytest.approx(1.1)
        assert c(Rank.TWO, Suit.SPADE).value == pytest.approx(13.4)

    def test_suit_breaks_tie(self):
        assert c(Rank.ACE, Suit.CLUB) < c(Rank.ACE, Suit.SPADE)
        assert c(Rank.ACE, Suit.DIAMOND) < c(Rank.ACE, Suit.HEART)

    def test_rank_dominates_suit(self):
        assert c(Rank.KING, Suit.SPADE) < c(Rank.ACE, Suit.DIAMOND)
        assert c(Rank.TWO, Suit.DIAMOND) > c(Rank.ACE, Suit.SPADE)

    def test_equality_and_hash(self):
        assert c(Rank.TEN, Suit.HEART) == Card(Rank.TEN, Suit.HEART)
        assert len({c(Rank.TEN, Suit.HEART), Card(Rank.TEN, Suit.HEART)}) == 1

    def test_display(self):
        assert c(Rank.ACE, Suit.SPADE).display == "♠A"
        assert c(Rank.TEN, Suit.DIAMOND).display == "♦10"

    def test_sort_cards(self):
        cards = [c(Rank.TWO, Suit.DIAMOND), c(Rank.THREE, Suit.SPADE), c(Rank.THREE, Suit.CLUB)]
        assert sort_cards(cards) == [
            c(Rank.THREE, Suit.CLUB), c(Rank.THREE, Suit.SPADE), c(Rank.TWO, Suit.DIAMOND),
        ]


class TestDeck:
    """建牌、洗牌与分牌"""

    def test_create_deck(self):
        deck = create_deck()
        assert len(deck) == DECK_SIZE == 52
        assert len(set(deck)) == 52

    def test_shuffle_is_permutation(self):
        deck = create_deck()
        shuffled = shuffle_deck(deck, random.Random(7))
        assert sorted(shuffled) == sorted(deck)
        # 原牌堆不变
        assert deck == create_deck()

    def test_shuffle_with_seed_is_repeatable(self):
        deck = create_deck()
        assert shuffle_deck(deck, random.Random(3)) == shuffle_deck(deck, random.Random(3))

    @pytest.mark.parametrize("n", [1, 2, 4, 13, 26, 52])
    def test_divide_evenly(self, n):
        deck = create_deck()
        chunks = divide_deck(deck, n)
        assert len(chunks) == n
        assert all(len(chunk) == 52 // n for chunk in chunks)
        assert [card for chunk in chunks for card in chunk] == deck

    @pytest.mark.parametrize("n", [0, -1, 3, 5, 53])
    def test_divide_invalid(self, n):
        with pytest.raises(DeckError):
            divide_deck(create_deck(), n)
