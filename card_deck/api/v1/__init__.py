"""API v1 routers"""

from fastapi import APIRouter

from card_deck.api.routers import cards_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(cards_router)
