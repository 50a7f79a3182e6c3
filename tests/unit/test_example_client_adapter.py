"""Tests for ExampleClientAdapter (template/reference adapter)."""

import json

from assetlens.extraction.example_client_adapter import ExampleClientAdapter


class TestExampleClientAdapter:
    def test_returns_assets_wrapper(self) -> None:
        adapter = ExampleClientAdapter()
        result = adapter.create_chat_completion(
            model="any",
            temperature=0.0,
            system_prompt="sys",
            user_prompt="user",
        )
        parsed = json.loads(result)
        assert isinstance(parsed["assets"], list)
        assert parsed["assets"][0]["Computer Name"] == "EXAMPLE-PC"

    def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        first = adapter.create_chat_completion(
            model="a", temperature=0.0, system_prompt="", user_prompt="x"
        )
        second = adapter.create_chat_completion(
            model="b", temperature=0.9, system_prompt="s", user_prompt="y"
        )
        assert first == second
