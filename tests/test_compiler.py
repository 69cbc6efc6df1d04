"""Tests for the question compiler (core/compiler.py)."""

from __future__ import annotations

from typing import Any

import pytest

from rung_cli.core import types
from rung_cli.core.compiler import compile_question, compile_questions, normalize_parameters
from rung_cli.core.models import ParameterConfig, PromptDescriptor, WidgetKind
from rung_cli.core.types import TypeDescriptor
from rung_cli.core.validators import PatternValidator
from rung_cli.exceptions import ConfigurationError


def _suggest(text: str) -> list[str]:
    return [city for city in ("Paris", "Porto") if city.startswith(text)]


def _declarations() -> dict[str, Any]:
    return {
        "name": {"description": "What is your name?", "type": types.String},
        "age": {"description": "Age", "type": types.Integer, "required": True},
        "rating": {"description": "Rating", "type": types.IntegerRange(1, 10), "default": 5},
        "side": {"description": "Side", "type": types.OneOf(["left", "right"])},
        "code": {"description": "Code", "type": types.Char(3)},
        "country": {"description": "Country", "type": types.SelectBox({"br": "Brazil"})},
    }


class TestNormalize:
    def test_plain_dicts_become_configs(self) -> None:
        configs = normalize_parameters(_declarations())
        assert [config.name for config in configs] == [
            "name", "age", "rating", "side", "code", "country",
        ]
        assert configs[1].required is True
        assert configs[2].default == 5

    def test_missing_type_means_string(self) -> None:
        (config,) = normalize_parameters({"x": {"description": "X"}})
        assert config.type == types.String

    def test_unknown_keys_go_to_extra(self) -> None:
        (config,) = normalize_parameters(
            {"x": {"description": "X", "type": types.Url, "env": "production"}},
        )
        assert config.extra == {"env": "production"}

    def test_string_type_tag_is_accepted(self) -> None:
        (config,) = normalize_parameters({"x": {"description": "X", "type": "Integer"}})
        assert config.type == types.Integer

    def test_config_instances_pass_through(self) -> None:
        config = ParameterConfig("x", "X")
        assert normalize_parameters({"x": config}) == [config]


class TestCompileQuestions:
    def test_one_descriptor_per_parameter_in_order(self) -> None:
        questions = compile_questions(_declarations())
        assert [q.name for q in questions] == list(_declarations())

    def test_description_becomes_message(self) -> None:
        (question,) = compile_questions({"n": {"description": "Name?"}})
        assert question.message == "Name?"
        assert question.name == "n"

    def test_default_and_extra_are_carried(self) -> None:
        (question,) = compile_questions(
            {"n": {"description": "N", "type": types.Integer, "default": 3, "env": "x"}},
        )
        assert question.default == 3
        assert question.extra == {"env": "x"}

    def test_extra_fields_never_clobber_type_fields(self) -> None:
        (question,) = compile_questions(
            {"n": {"description": "N", "type": types.Integer, "validate": None, "kind": "list"}},
        )
        assert question.kind is WidgetKind.INPUT
        assert isinstance(question.validate, PatternValidator)

    def test_unknown_type_compiles_like_string(self) -> None:
        unknown = compile_questions({"n": {"description": "N", "type": TypeDescriptor("Txet")}})
        string = compile_questions({"n": {"description": "N", "type": types.String}})
        assert unknown == string

    def test_compilation_is_idempotent(self) -> None:
        assert compile_questions(_declarations()) == compile_questions(_declarations())


class TestAutoComplete:
    def test_source_is_attached(self) -> None:
        question = compile_question(
            ParameterConfig("city", "City", type=types.AutoComplete),
            {"city": _suggest},
        )
        assert question.kind is WidgetKind.AUTOCOMPLETE
        assert question.source is _suggest

    def test_missing_source_is_fatal(self) -> None:
        with pytest.raises(ConfigurationError, match="city") as exc_info:
            compile_questions(
                {"city": {"description": "City", "type": types.AutoComplete}},
                {"other": _suggest},
            )
        assert exc_info.value.hint is not None
        assert "autocomplete/city.py" in exc_info.value.hint

    def test_missing_source_fails_even_after_valid_parameters(self) -> None:
        declarations = {
            "name": {"description": "Name"},
            "city": {"description": "City", "type": types.AutoComplete},
        }
        with pytest.raises(ConfigurationError):
            compile_questions(declarations)

    def test_result_type(self) -> None:
        (question,) = compile_questions({"n": {"description": "N"}})
        assert isinstance(question, PromptDescriptor)
