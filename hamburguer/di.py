"""Wiring of use cases and controllers to their concrete dependencies."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from hamburguer.config import Config
from hamburguer.controller import ReviewController
from hamburguer.llm_gateway import ItemLLMGateway, ReviewLLMGateway
from hamburguer.repository import ItemDatabase, ReviewDatabase
from hamburguer.scraper import ItemScraper
from hamburguer.usecases import ItemUseCase, ReviewUseCase


def new_item_use_case(engine: Engine, config: Config) -> ItemUseCase:
    """Build the item use case backed by the model, the menu page and *engine*."""
    return ItemUseCase(
        ItemLLMGateway(config.openai_api_key),
        ItemScraper(),
        ItemDatabase(engine),
    )


def new_review_controller(engine: Engine, config: Config) -> ReviewController:
    """Build the review controller backed by the model and *engine*."""
    return ReviewController(
        ReviewUseCase(
            ReviewLLMGateway(config.openai_api_key),
            ReviewDatabase(engine),
        )
    )