"""Unit tests for the Bid and Sale value objects."""

import uuid
from dataclasses import FrozenInstanceError

import pytest

from lot_auction.domain.models import Bid, Sale, bid


class TestBidOrdering:
    """Test that bids rank and compare by amount only."""

    def test_bids_order_by_amount(self):
        """Test comparison operators use the amount.

        Given - Two bids at different prices
        When - They are compared
        Then - The higher amount ranks higher regardless of quantity
        """
        high = Bid(amount=20, quantity=1)
        low = Bid(amount=10, quantity=50)

        assert high > low
        assert low < high
        assert high >= low
        assert low <= high
        assert max([low, high]) is high

    def test_equal_amounts_compare_equal(self):
        """Test equal-amount bids are interchangeable for ranking.

        Given - Two bids with the same amount but different quantities
        When - They are compared for equality
        Then - They are equal even though their ids differ
        """
        first = Bid(amount=10, quantity=1)
        second = Bid(amount=10, quantity=3)

        assert first == second
        assert first.id != second.id
        assert not first.is_same_bid(second)
        assert first <= second and first >= second

    def test_hash_follows_amount(self):
        """Test that deduplication merges bids at the same price.

        Given - Two distinct bids at the same amount
        When - They are placed in a set
        Then - Only one price level survives
        """
        bids = {Bid(amount=10, quantity=1), Bid(amount=10, quantity=2)}

        assert len(bids) == 1

    def test_comparison_with_other_types_is_not_supported(self):
        """Test that bids are not equal to plain numbers."""
        assert Bid(amount=10) != 10
        with pytest.raises(TypeError):
            Bid(amount=10) < 10


class TestBidConstruction:
    """Test bid creation and immutability."""

    def test_each_bid_gets_unique_id(self):
        """Test ids are generated per bid and never reused."""
        ids = {bid(10, 1).id for _ in range(100)}

        assert len(ids) == 100
        assert all(isinstance(bid_id, uuid.UUID) for bid_id in ids)

    def test_default_quantity_is_one(self):
        """Test the default quantity of a bid is a single unit."""
        assert Bid(amount=10).quantity == 1
        assert bid(10).quantity == 1

    def test_negative_and_zero_values_accepted(self):
        """Test the model does not validate amounts or quantities."""
        negative = Bid(amount=-5, quantity=0)

        assert negative.amount == -5
        assert negative.quantity == 0

    def test_bid_is_immutable(self):
        """Test that a bid cannot be modified after creation."""
        original = Bid(amount=10, quantity=2)

        with pytest.raises(FrozenInstanceError):
            original.quantity = 1

    def test_with_quantity_creates_new_bid(self):
        """Test partial bids are new values that keep the identity.

        Given - A bid for two units
        When - A one-unit copy is created
        Then - The copy keeps id and amount and the original is untouched
        """
        original = Bid(amount=10, quantity=2)

        partial = original.with_quantity(1)

        assert partial is not original
        assert partial.quantity == 1
        assert partial.amount == original.amount
        assert partial.is_same_bid(original)
        assert original.quantity == 2


class TestSale:
    """Test the Sale value object."""

    def test_sale_value(self):
        """Test sale value is amount times quantity."""
        sale = Sale(bidder_id=uuid.uuid4(), amount=25, quantity=4)

        assert sale.value == 100

    def test_sale_is_immutable(self):
        """Test that a sale cannot be modified after creation."""
        sale = Sale(bidder_id=uuid.uuid4(), amount=25, quantity=4)

        with pytest.raises(FrozenInstanceError):
            sale.amount = 1
