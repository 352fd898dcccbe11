"""
Unit tests for card ids, suits, ranks and deck sizes.
"""

import pytest

from card_deck.domain.value_objects.card import (
    DeckSize,
    Rank,
    Suit,
    canonical_cards,
    rank_of,
    suit_of,
)


class TestDeckSize:
    def test_card_counts(self):
        assert DeckSize.SMALL.card_count == 32
        assert DeckSize.NORMAL.card_count == 52

    def test_requesting_32_cards_gives_small_deck(self):
        assert DeckSize.from_requested_count(32) is DeckSize.SMALL

    @pytest.mark.parametrize("count", [52, 0, 31, 40, 54, -52])
    def test_any_other_count_gives_normal_deck(self, count):
        assert DeckSize.from_requested_count(count) is DeckSize.NORMAL

    def test_contains_rejects_out_of_range_ids(self):
        assert not DeckSize.NORMAL.contains(-1)
        assert not DeckSize.NORMAL.contains(52)
        assert DeckSize.NORMAL.contains(0)
        assert DeckSize.NORMAL.contains(51)


class TestCanonicalCards:
    def test_normal_set_is_full_range(self):
        assert canonical_cards(DeckSize.NORMAL) == list(range(52))

    def test_small_set_has_eight_ranks_per_suit(self):
        cards = canonical_cards(DeckSize.SMALL)

        assert len(cards) == 32
        for suit in Suit:
            ranks = [rank_of(card) for card in cards if suit_of(card) is suit]
            assert ranks == [
                Rank.ACE,
                Rank.SEVEN,
                Rank.EIGHT,
                Rank.NINE,
                Rank.TEN,
                Rank.JACK,
                Rank.QUEEN,
                Rank.KING,
            ]

    def test_small_set_excludes_two_to_six(self):
        cards = set(canonical_cards(DeckSize.SMALL))

        assert not cards & {1, 2, 3, 4, 5, 14, 18, 27, 44}


class TestSuitAndRank:
    @pytest.mark.parametrize(
        "card, suit, rank",
        [
            (0, Suit.CLUBS, Rank.ACE),
            (12, Suit.CLUBS, Rank.KING),
            (13, Suit.DIAMONDS, Rank.ACE),
            (35, Suit.HEARTS, Rank.TEN),
            (51, Suit.SPADES, Rank.KING),
        ],
    )
    def test_suit_and_rank_of(self, card, suit, rank):
        assert suit_of(card) is suit
        assert rank_of(card) is rank
