"""
Unit tests for the deck service with an in-memory repository.
"""

import random
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from card_deck.application.services.deck_service import DeckService
from card_deck.application.unit_of_work import UnitOfWork
from card_deck.domain.exceptions import (
    ConcurrentModificationError,
    DeckNotFoundError,
    ErrorKind,
)
from card_deck.domain.value_objects.card import DeckSize
from tests._helpers.fakes import FakeDeckRepository


@pytest.fixture
def deck_repo():
    return FakeDeckRepository()


@pytest.fixture
def session():
    return AsyncMock()


@pytest.fixture
def service(session, deck_repo):
    uow = UnitOfWork(session=session, deck_repo=deck_repo)
    return DeckService(uow=uow, max_attempts=3, rng=random.Random(7))


class TestCreateAndGet:
    @pytest.mark.asyncio
    async def test_create_persists_fresh_deck(self, service, deck_repo, session):
        deck = await service.create(DeckSize.SMALL)

        stored = deck_repo.stored(deck.id)
        assert stored is not None
        assert stored.draw == deck.draw
        assert len(stored.draw) == 32
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_returns_stored_deck(self, service):
        created = await service.create()

        loaded = await service.get(created.id)

        assert loaded.id == created.id
        assert loaded.draw == list(range(52))

    @pytest.mark.asyncio
    async def test_get_unknown_deck_raises_not_found(self, service):
        with pytest.raises(DeckNotFoundError) as exc_info:
            await service.get(uuid4())

        assert exc_info.value.kind is ErrorKind.NOT_FOUND


class TestMutations:
    @pytest.mark.asyncio
    async def test_take_persists_and_bumps_version(self, service, deck_repo):
        created = await service.create()

        deck = await service.take(created.id, lifo=False, length=1)

        assert deck.discard == [51]
        assert deck.version == 2
        stored = deck_repo.stored(created.id)
        assert stored.discard == [51]
        assert stored.draw == list(range(51))

    @pytest.mark.asyncio
    async def test_put_moves_cards_back(self, service):
        created = await service.create()
        await service.take(created.id, lifo=True, length=5, move_as_block=True)

        deck = await service.put(created.id, lifo=True, length=5, move_as_block=True)

        assert deck.draw == list(range(52))
        assert deck.discard == []
        assert deck.version == 3

    @pytest.mark.asyncio
    async def test_shuffle_only_touches_selected_pile(self, service):
        created = await service.create()
        await service.take(created.id, lifo=False, length=10)

        deck = await service.shuffle(created.id, shuffle_discard=False)

        assert deck.discard == list(range(42, 52))
        assert sorted(deck.draw) == list(range(42))
        assert deck.draw != list(range(42))

    @pytest.mark.asyncio
    async def test_zero_length_take_still_saves_unchanged_deck(self, service):
        created = await service.create()

        deck = await service.take(created.id, lifo=True, length=0)

        assert deck.draw == list(range(52))
        assert deck.discard == []

    @pytest.mark.asyncio
    async def test_mutating_unknown_deck_raises_not_found(self, service, session):
        with pytest.raises(DeckNotFoundError):
            await service.take(uuid4())

        session.commit.assert_not_awaited()
        session.rollback.assert_awaited()


class TestOptimisticConcurrency:
    @pytest.mark.asyncio
    async def test_stale_update_is_retried_on_fresh_state(self, service, deck_repo):
        created = await service.create()
        deck_repo.conflicts = 2

        deck = await service.take(created.id, lifo=False, length=1)

        assert deck_repo.update_calls == 3
        assert deck.discard == [51]
        assert deck_repo.stored(created.id).discard == [51]

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, service, deck_repo, session):
        created = await service.create()
        session.commit.reset_mock()
        deck_repo.conflicts = 3

        with pytest.raises(ConcurrentModificationError) as exc_info:
            await service.put(created.id, lifo=True, length=1)

        assert exc_info.value.kind is ErrorKind.CONFLICT
        assert exc_info.value.attempts == 3
        assert deck_repo.update_calls == 3
        session.commit.assert_not_awaited()

    def test_max_attempts_must_be_positive(self, session, deck_repo):
        with pytest.raises(ValueError):
            DeckService(uow=UnitOfWork(session, deck_repo), max_attempts=0)


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_removes_deck(self, service, deck_repo):
        created = await service.create()

        await service.delete(created.id)

        assert deck_repo.stored(created.id) is None
        with pytest.raises(DeckNotFoundError):
            await service.get(created.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_deck_raises_not_found(self, service):
        with pytest.raises(DeckNotFoundError):
            await service.delete(uuid4())
