"""
Card deck endpoints: create, read, shuffle, take, put, delete.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Request, Response, status

from card_deck.api.errors import request_locale
from card_deck.api.schemas import DeckResponse, ErrorResponse, MoveCardsParams
from card_deck.application.ports import CardPresenterPort
from card_deck.domain.entities.deck import Deck
from card_deck.domain.exceptions import InvalidDeckIdError
from card_deck.domain.value_objects.card import DeckSize
from card_deck.infra.config.dependencies import CardPresenterDep, DeckServiceDep
from card_deck.infra.config.logging_config import bind_context, get_logger

router = APIRouter(
    prefix="/cards",
    tags=["cards"],
    responses={
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
log = get_logger("api.cards")


def parse_deck_id(deck_id: str) -> UUID:
    try:
        parsed = UUID(deck_id)
    except ValueError:
        raise InvalidDeckIdError(deck_id) from None
    bind_context(deck_id=str(parsed))
    return parsed


def present(
    request: Request, deck: Deck, presenter: CardPresenterPort
) -> DeckResponse:
    return DeckResponse.from_deck(deck, presenter, request_locale(request))


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def create_deck(
    request: Request,
    service: DeckServiceDep,
    presenter: CardPresenterDep,
    size: Annotated[
        int, Query(description="32 for a small deck, anything else for a normal one")
    ] = DeckSize.NORMAL.card_count,
) -> DeckResponse:
    """Create a new deck with every card in the draw pile, in ascending order."""
    deck = await service.create(DeckSize.from_requested_count(size))
    return present(request, deck, presenter)


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck(
    deck_id: str,
    request: Request,
    service: DeckServiceDep,
    presenter: CardPresenterDep,
) -> DeckResponse:
    deck = await service.get(parse_deck_id(deck_id))
    return present(request, deck, presenter)


@router.post("/{deck_id}/shuffle", response_model=DeckResponse)
async def shuffle_deck(
    deck_id: str,
    request: Request,
    service: DeckServiceDep,
    presenter: CardPresenterDep,
    shuffle_discarded: bool = False,
) -> DeckResponse:
    """Shuffle the draw pile, or the discard pile when ``shuffle_discarded``."""
    deck = await service.shuffle(parse_deck_id(deck_id), shuffle_discarded)
    return present(request, deck, presenter)


@router.post("/{deck_id}/take", response_model=DeckResponse)
async def take_cards(
    deck_id: str,
    request: Request,
    service: DeckServiceDep,
    presenter: CardPresenterDep,
    params: Annotated[MoveCardsParams, Query()],
) -> DeckResponse:
    """Move cards from the top of the draw pile to the discard pile."""
    deck = await service.take(
        parse_deck_id(deck_id), params.lifo, params.length, params.move_as_block
    )
    return present(request, deck, presenter)


@router.post("/{deck_id}/put", response_model=DeckResponse)
async def put_cards(
    deck_id: str,
    request: Request,
    service: DeckServiceDep,
    presenter: CardPresenterDep,
    params: Annotated[MoveCardsParams, Query()],
) -> DeckResponse:
    """Move cards from the top of the discard pile to the draw pile."""
    deck = await service.put(
        parse_deck_id(deck_id), params.lifo, params.length, params.move_as_block
    )
    return present(request, deck, presenter)


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deck(deck_id: str, service: DeckServiceDep) -> Response:
    await service.delete(parse_deck_id(deck_id))
    log.info("deck.delete.success")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
