import pytest

from hamburguer.domain import Item, Review
from hamburguer.dto import Function, ReviewInput, new_tool
from hamburguer.usecases import ItemUseCase, ReviewUseCase


class FakeItemRepository:
    def __init__(self, items=()):
        self.items = list(items)
        self.saved = []

    def save(self, item):
        self.saved.append(item)
        return item

    def fetch_all_from_last_sync(self):
        return list(self.items)


class FakeScraper:
    def __init__(self, items=(), error=None):
        self.items = list(items)
        self.error = error

    def scrape_items(self):
        if self.error is not None:
            raise self.error
        return list(self.items)


class FakeItemLLM:
    def __init__(self, functions=()):
        self.functions = list(functions)
        self.calls = []

    def generate_recommendation(self, tools, items):
        self.calls.append((tools, items))
        return list(self.functions)


class FakeReviewRepository:
    def __init__(self, reviews=(), error=None):
        self.reviews = list(reviews)
        self.saved = []
        self.error = error

    def fetch(self):
        if self.error is not None:
            raise self.error
        return list(self.reviews)

    def save(self, review):
        if self.error is not None:
            raise self.error
        self.saved.append(review)

    def count(self):
        if self.error is not None:
            raise self.error
        return len(self.reviews)


class FakeReviewLLM:
    def __init__(self, answer="Parabéns"):
        self.answer = answer
        self.received = None

    def get_top3_reviews(self, reviews):
        self.received = reviews
        return self.answer


def _item_use_case(items=(), functions=(), scraped=(), error=None, tools=None):
    repository = FakeItemRepository(items)
    llm = FakeItemLLM(functions)
    scraper = FakeScraper(scraped, error)
    return ItemUseCase(llm, scraper, repository, tools), repository, llm


def test_sync_saves_only_priced_items():
    priced = Item(name="X-Bacon", price=25.9)
    free = Item(name="Sachê", price=0.0)
    negative = Item(name="Desconto", price=-1.0)
    use_case, repository, _ = _item_use_case(scraped=[priced, free, negative])
    use_case.sync()
    assert repository.saved == [priced]


def test_sync_propagates_scraper_error():
    use_case, repository, _ = _item_use_case(error=RuntimeError("site down"))
    with pytest.raises(RuntimeError, match="site down"):
        use_case.sync()
    assert repository.saved == []


def test_fetch_all_from_last_sync_returns_repository_items():
    items = [Item(id=1, name="X-Salada", price=20.0)]
    use_case, _, _ = _item_use_case(items=items)
    assert use_case.fetch_all_from_last_sync() == items


def test_get_recommendation_returns_alexa_response():
    items = [Item(id=1, name="X-Bacon", price=25.9)]
    functions = [
        Function(name="get_hamburger_items", parameters={"items": ["X-Bacon"]}),
        Function(name="get_alexa_response", parameters={"response": "Pedi um X-Bacon"}),
    ]
    use_case, _, llm = _item_use_case(items=items, functions=functions)
    assert use_case.get_recommendation() == "Pedi um X-Bacon"
    tools, passed_items = llm.calls[0]
    assert passed_items == items
    assert [tool.function.name for tool in tools] == ["get_alexa_response", "get_hamburger_items"]


def test_get_recommendation_returns_first_alexa_response():
    functions = [
        Function(name="get_alexa_response", parameters={"response": "primeira"}),
        Function(name="get_alexa_response", parameters={"response": "segunda"}),
    ]
    use_case, _, _ = _item_use_case(functions=functions)
    assert use_case.get_recommendation() == "primeira"


def test_get_recommendation_without_alexa_response_is_none():
    functions = [Function(name="get_hamburger_items", parameters={"items": ["X-Tudo"]})]
    use_case, _, _ = _item_use_case(functions=functions)
    assert use_case.get_recommendation() is None


def test_get_recommendation_rejects_non_text_response():
    functions = [Function(name="get_alexa_response", parameters={"response": 42})]
    use_case, _, _ = _item_use_case(functions=functions)
    with pytest.raises(ValueError):
        use_case.get_recommendation()


def test_get_recommendation_rejects_missing_item_list():
    functions = [Function(name="get_hamburger_items", parameters={})]
    use_case, _, _ = _item_use_case(functions=functions)
    with pytest.raises(ValueError):
        use_case.get_recommendation()


def test_get_recommendation_passes_only_recommendation_tools():
    wanted = new_tool("a", "recomendation", "d", {})
    other = new_tool("b", "other", "d", {})
    use_case, _, llm = _item_use_case(tools=[wanted, other])
    use_case.get_recommendation()
    assert llm.calls[0][0] == [wanted]


def test_review_get_top3_passes_reviews_to_model():
    reviews = [Review(id=1, name="Ana", description="Ótima palestra")]
    llm = FakeReviewLLM("Ana venceu")
    use_case = ReviewUseCase(llm, FakeReviewRepository(reviews))
    assert use_case.get_top3_reviews() == "Ana venceu"
    assert llm.received == reviews


def test_review_get_top3_propagates_repository_error():
    use_case = ReviewUseCase(FakeReviewLLM(), FakeReviewRepository(error=RuntimeError("db")))
    with pytest.raises(RuntimeError, match="db"):
        use_case.get_top3_reviews()


def test_review_save_and_count():
    repository = FakeReviewRepository([Review(id=1), Review(id=2)])
    use_case = ReviewUseCase(FakeReviewLLM(), repository)
    review = ReviewInput(name="Bia", description="Muito bom")
    use_case.save(review)
    assert repository.saved == [review]
    assert use_case.count() == len(repository.reviews)