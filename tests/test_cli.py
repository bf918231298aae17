import json
import sqlite3
from unittest.mock import patch

import httpx
import respx

from hamburguer.cli import build_parser, main
from hamburguer.llm_gateway import OPENAI_CHAT_URL


def write_config(tmp_path):
    db_path = tmp_path / "app.db"
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            "CREATE TABLE item (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT, "
            "price REAL, inserted_at TEXT DEFAULT CURRENT_TIMESTAMP)"
        )
        conn.execute("INSERT INTO item (name, price) VALUES ('X-Burger', 25.9)")
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "database": {"url": f"sqlite:///{db_path}"},
        "openai": {"api_key": "placeholder"},
    }))
    return config_path


def chat_reply(function_name, arguments):
    return httpx.Response(200, json={"choices": [{"message": {
        "content": "",
        "tool_calls": [{"function": {"name": function_name, "arguments": json.dumps(arguments)}}],
    }}]})


def test_parser_reads_command_and_config():
    args = build_parser().parse_args(["--config", "other.json", "sync"])
    assert args.command == "sync"
    assert args.config == "other.json"


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "serve" in out and "sync" in out


def test_missing_config_fails(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json"), "sync"]) == 1
    assert "missing.json" in capsys.readouterr().err


def test_sync_prints_recommendation(tmp_path, capsys):
    config_path = write_config(tmp_path)
    with respx.mock:
        route = respx.post(OPENAI_CHAT_URL).mock(
            return_value=chat_reply("get_alexa_response", {"response": "Pedi dois lanches"})
        )
        code = main(["--config", str(config_path), "sync"])
    assert code == 0
    assert capsys.readouterr().out == "Pedi dois lanches\n"
    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer placeholder"
    assert "X-Burger" in request.content.decode("utf-8")


def test_sync_reports_api_error(tmp_path, capsys):
    config_path = write_config(tmp_path)
    with respx.mock:
        respx.post(OPENAI_CHAT_URL).mock(return_value=httpx.Response(500, text="boom"))
        code = main(["--config", str(config_path), "sync"])
    assert code == 1
    assert "boom" in capsys.readouterr().out


def test_sync_without_response_fails(tmp_path):
    config_path = write_config(tmp_path)
    with respx.mock:
        respx.post(OPENAI_CHAT_URL).mock(
            return_value=chat_reply("get_hamburger_items", {"items": ["X-Burger"]})
        )
        assert main(["--config", str(config_path), "sync"]) == 1


def test_serve_starts_server(tmp_path):
    config_path = write_config(tmp_path)
    with patch("uvicorn.run") as run:
        assert main(["--config", str(config_path), "serve"]) == 0
    assert run.call_args.kwargs["port"] == 3000