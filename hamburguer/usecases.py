"""Use cases for menu items and participant reviews."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from hamburguer.domain import (
    Item,
    ItemDatabaseRepository,
    ItemLLMGateway,
    ItemScraperGateway,
    ReviewDatabaseRepository,
    ReviewLLMGateway,
)
from hamburguer.dto import ReviewInput, Tool
from hamburguer.tools import default_tools, recommendation_tools

logger = logging.getLogger(__name__)

ITEMS_FUNCTION = "get_hamburger_items"
ALEXA_RESPONSE_FUNCTION = "get_alexa_response"


class ItemUseCase:
    """Keeps the menu in sync and asks the model for an order."""

    def __init__(
        self,
        llm_gateway: ItemLLMGateway,
        scraper_gateway: ItemScraperGateway,
        repository: ItemDatabaseRepository,
        tools: Optional[Iterable[Tool]] = None,
    ) -> None:
        self.llm_gateway = llm_gateway
        self.scraper_gateway = scraper_gateway
        self.repository = repository
        self.tools = list(default_tools() if tools is None else tools)

    def sync(self) -> None:
        """Scrape the menu and store every item that has a price."""
        for item in self.scraper_gateway.scrape_items():
            if item.price > 0:
                self.repository.save(item)

    def fetch_all_from_last_sync(self) -> list[Item]:
        """Return the items stored during the last day."""
        return self.repository.fetch_all_from_last_sync()

    def get_recommendation(self) -> Optional[str]:
        """Ask the model for an order; return the text Alexa should say, if any."""
        items = self.repository.fetch_all_from_last_sync()
        functions = self.llm_gateway.generate_recommendation(
            recommendation_tools(self.tools), items
        )
        for function in functions:
            if function.name == ITEMS_FUNCTION:
                ordered = function.parameters.get("items")
                if not isinstance(ordered, list):
                    raise ValueError(f"{ITEMS_FUNCTION} did not return a list of items")
                logger.info("model ordered %d items", len(ordered))
            elif function.name == ALEXA_RESPONSE_FUNCTION:
                message = function.parameters.get("response")
                if not isinstance(message, str):
                    raise ValueError(f"{ALEXA_RESPONSE_FUNCTION} did not return a text response")
                return message
        return None


class ReviewUseCase:
    """Stores reviews and announces the best ones."""

    def __init__(
        self,
        llm_gateway: ReviewLLMGateway,
        repository: ReviewDatabaseRepository,
    ) -> None:
        self.llm_gateway = llm_gateway
        self.repository = repository

    def get_top3_reviews(self) -> str:
        """Let the model pick the best stored reviews and return its announcement."""
        reviews = self.repository.fetch()
        return self.llm_gateway.get_top3_reviews(reviews)

    def save(self, review: ReviewInput) -> None:
        self.repository.save(review)

    def count(self) -> int:
        return self.repository.count()