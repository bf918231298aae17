"""Chat-completion gateways for menu recommendations and review awards."""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Iterable, Optional

import httpx

from hamburguer.domain import Item, Review
from hamburguer.dto import Function, Response, Tool, ToolArgumentsError, tools_to_openai

logger = logging.getLogger(__name__)

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o"

_TAB_WIDTH = 8
_PADDING = 1

ITEM_PROMPT = """
Você é um atendente de restaurante.
Sempre monte um cardápio para pedir seguindo essa lista de produtos: {menu}.
Informe os itens que você pediu pedir para comer e o preço total da compra.
Não dê mais informações do que o necessário.
Sempre seja gentil.
Seja sucinto!
Diversifique sempre os pedidos para não ser toda vez a mesma coisa.
Coloque uma pequena frase legal no final.
Escreva os números por extenso sempre.
Escreva tudo por extenso para leitura da Alexa.
Escreva tudo em uma frase, respeitando o portugues.
Não coloque caracteres especiais.
Fale sempre em primeira pessoa.
Use os tools sempre.
Sempre retorne bebidas para o número de pessoas conseguir tomar sem faltar.
Sempre retorne o valor total da compra por extenso.
Sempre retorne uma frase legal no final informando os produtos junto.
Sempre retorne tudo no mesmo array de itens.
Fale como você já tivesse pedido os itens.
"""

ITEM_USER_PROMPT = "Peça items para 2 pessoas jantar retornando os itens nos 2 tools"

REVIEW_PROMPT = """
Você é um assistente de inteligência artificial animado e divertido, ajudando na hora de premiar os destaques de uma palestra!

Você receberá várias respostas de participantes sobre o evento. Sua missão é simples:
- Filtrar só as respostas positivas — aquelas que mostram que a galera curtiu mesmo!
- Escolher as 3 melhores avaliações positivas.
- Verificar se os nomes são apropriados e não ofensivos.
- Ignorar qualquer conteúdo de cunho político, seja nos nomes ou nas avaliações.
- Falar apenas os nomes dos vencedores (até 3), sem explicações nem justificativas, porque aqui a emoção fala mais alto! sem usar números ou enumeração na frente dos nomes, para que a Alexa fale como uma pessoa naturalmente — nada de “1 Fulano, 2 Ciclano”! Adicione pausa entre os nomes para ficar natural!
- Ler em voz alta a melhor resposta entre as escolhidas, com destaque e entre aspas duplas.

Importante: não mencione que as respostas foram filtradas ou que são apenas positivas. Apenas celebre os nomes e leia a melhor como se fosse natural!

Ah, e finalize com aquele entusiasmo de premiação:
- Se houver 3 vencedores, convide os três a subirem ao palco para receber um brinde especial do nosso querido palestrante Bosca.
- Se houver apenas 2, convide os dois.
- Se houver só 1, chame essa pessoa com ainda mais destaque.

Tudo em texto plano, estilo fala de palco, para a Alexa narrar em primeira pessoa com aquele entusiasmo de premiação!
"""

REVIEW_USER_PROMPT = "Retorne as analises de acordo com as respostas {reviews}"


class LLMError(Exception):
    """Raised when the model cannot be reached or answers with something unusable."""


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == int(value) and abs(value) < 1e21:
        return "-0" if value == 0 and math.copysign(1.0, value) < 0 else str(int(value))
    return repr(value)


def _right_aligned_table(rows: Iterable[tuple[str, str]]) -> str:
    """Lay out rows of (first cell, rest of line), padding the first column with tabs."""
    rows = list(rows)
    if not rows:
        return ""
    width = max(len(cell) for cell, _ in rows) + _PADDING
    cell_width = -(-width // _TAB_WIDTH) * _TAB_WIDTH
    lines = []
    for cell, rest in rows:
        tabs = -(-(cell_width - len(cell)) // _TAB_WIDTH)
        lines.append("\t" * tabs + cell + rest + "\n")
    return "".join(lines)


def format_items(items: Iterable[Item]) -> str:
    """Render the menu as the table handed to the model."""
    return _right_aligned_table(
        (f"Nome: {item.name}", f"Preço: {_format_number(item.price)}") for item in items
    )


def format_reviews(reviews: Iterable[Review]) -> str:
    """Render the reviews as the table handed to the model."""
    return _right_aligned_table(
        (f"Nome: {review.name}", f"Descrição: {review.description}") for review in reviews
    )


class _ChatGateway:
    def __init__(
        self,
        api_key: str,
        client: Optional[httpx.Client] = None,
        url: str = OPENAI_CHAT_URL,
        model: str = DEFAULT_MODEL,
        timeout: Optional[float] = 120.0,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self._client = client

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        try:
            body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise LLMError(f"error marshaling payload: {exc}") from exc
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        try:
            if self._client is not None:
                return self._client.post(self.url, content=body, headers=headers)
            with httpx.Client(timeout=self.timeout) as client:
                return client.post(self.url, content=body, headers=headers)
        except httpx.HTTPError as exc:
            raise LLMError(f"error making request: {exc}") from exc


class ItemLLMGateway(_ChatGateway):
    """Asks the model to put together an order from the menu."""

    def generate_recommendation(self, tools: list[Tool], items: list[Item]) -> list[Function]:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "assistant", "content": ITEM_PROMPT.format(menu=format_items(items))},
                {"role": "user", "content": ITEM_USER_PROMPT},
            ],
            "tools": tools_to_openai(tools) or None,
            "tool_choice": "auto",
        }
        response = self._post(payload)
        if response.status_code != 200:
            raise LLMError(
                f"API request failed with status {response.status_code}: {response.text}"
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise LLMError(f"error parsing JSON response: {exc}") from exc
        if not isinstance(data, dict):
            raise LLMError("error parsing JSON response: expected a JSON object")
        parsed = Response.from_dict(data)
        if not parsed.choices:
            raise LLMError("no choices in response")
        try:
            return parsed.functions()
        except ToolArgumentsError as exc:
            raise LLMError(f"error getting functions: {exc}") from exc


class ReviewLLMGateway(_ChatGateway):
    """Asks the model to pick and announce the best reviews."""

    def get_top3_reviews(self, reviews: list[Review]) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "assistant", "content": REVIEW_PROMPT},
                {
                    "role": "user",
                    "content": REVIEW_USER_PROMPT.format(reviews=format_reviews(reviews)),
                },
            ],
        }
        response = self._post(payload)
        try:
            data = response.json()
        except ValueError as exc:
            raise LLMError(f"error decoding response: {exc}") from exc
        logger.debug("review model response: %s", data)

        choices = data.get("choices") if isinstance(data, dict) else None
        if not isinstance(choices, list) or not choices:
            raise LLMError("no choices found in response")
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            raise LLMError("no message found in response")
        content = message.get("content")
        if not isinstance(content, str):
            raise LLMError("no content found in response")
        return content