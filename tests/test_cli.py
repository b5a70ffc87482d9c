from __future__ import annotations

import csv
import json

import casegen.cli as cli_module
from casegen.llm.base import LLMClient
from casegen.models import LLMResponse


class FixedLLM(LLMClient):
    def generate(self, prompt: str, temperature: float = 0.0) -> LLMResponse:
        text = json.dumps([{"testCaseId": "TC-1", "description": "From CLI"}])
        body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
        return LLMResponse(status_code=200, body=json.dumps(body))


def test_generate_command_writes_csv(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr("casegen.llm.factory.GeminiClient", lambda **kwargs: FixedLLM())
    scenarios_file = tmp_path / "scenarios.txt"
    scenarios_file.write_text("Search by name\n\nSearch by tag\n", encoding="utf-8")
    output = tmp_path / "cases.csv"

    exit_code = cli_module.main(
        [
            "generate",
            "--scenarios-file",
            str(scenarios_file),
            "--scenario",
            "Search with empty query",
            "--output",
            str(output),
            "--api-key",
            "secret",
        ]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Wrote 3 test case(s) from 3 scenario(s)." in captured.out
    assert "Progress: 100%" in captured.err
    with open(output, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert len(rows) == 4
    assert [row[1] for row in rows[1:]] == ["Search with empty query", "Search by name", "Search by tag"]


def test_generate_command_fails_without_key(tmp_path, capsys) -> None:
    exit_code = cli_module.main(
        ["generate", "--scenario", "a", "--api-key", "", "--output", str(tmp_path / "x.csv")]
    )

    assert exit_code == 2
    assert "API key is not configured" in capsys.readouterr().out
    assert not (tmp_path / "x.csv").exists()


def test_generate_command_rejects_invalid_temperature(capsys) -> None:
    exit_code = cli_module.main(["generate", "--scenario", "a", "--api-key", "k", "--temperature", "3"])

    assert exit_code == 2
    assert "casegen error" in capsys.readouterr().err
