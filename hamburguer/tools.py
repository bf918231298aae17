"""The tools offered to the model when asking for a menu recommendation."""

from __future__ import annotations

from hamburguer.dto import Tool, new_tool

RECOMMENDATION_PURPOSE = "recomendation"


def _hamburger_items_tool() -> Tool:
    return new_tool(
        "get_hamburger_items",
        RECOMMENDATION_PURPOSE,
        "Obter a lista de nomes dos hamburgueres disponíveis para pedido. "
        "Retorne apenas os nomes exatos dos itens como aparecem no site, "
        "sem descrições adicionais, para permitir a realização do pedido",
        {
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "description": "The list of hamburger items",
                    "items": {"type": "string"},
                },
            },
            "required": ["items"],
        },
    )


def _alexa_response_tool() -> Tool:
    return new_tool(
        "get_alexa_response",
        RECOMMENDATION_PURPOSE,
        "Gere uma resposta amigável e envolvente para a Alexa dizer ao "
        "confirmar ou reconhecer pedidos dos clientes. A resposta deve "
        "ser natural, conversacional e apropriada para o contexto. Sempre use esse tool",
        {
            "type": "object",
            "properties": {
                "response": {
                    "type": "string",
                    "description": "Uma resposta amigável para a Alexa dizer",
                },
            },
            "required": ["response"],
        },
    )


def default_tools() -> list[Tool]:
    """Return a fresh list of every tool the application knows."""
    return [_alexa_response_tool(), _hamburger_items_tool()]


def recommendation_tools(tools: list[Tool]) -> list[Tool]:
    """Keep only the tools meant for menu recommendations."""
    return [tool for tool in tools if tool.purpose == RECOMMENDATION_PURPOSE]