"""questionary-backed implementation of :class:`~rung_cli.core.protocols.PromptEngine`.

Each :class:`~rung_cli.core.models.PromptDescriptor` is rendered with
the questionary prompt matching its widget kind:

* ``INPUT`` / ``COLOR`` — ``questionary.text``
* ``DATETIME`` — ``questionary.text`` checked against the date format
* ``LIST`` — ``questionary.select``
* ``CHECKBOX`` — ``questionary.checkbox``
* ``CONFIRM`` — ``questionary.confirm``
* ``PATH`` — ``questionary.path``
* ``AUTOCOMPLETE`` — ``questionary.text`` with a prompt_toolkit completer

Blank text always passes validation: deciding what an empty answer
means (default or ``None``) is the resolver's job.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Any

from rung_cli.core.models import PromptDescriptor, SuggestionSource, WidgetKind
from rung_cli.core.validators import DateFormatValidator, ValidationResult, Validator
from rung_cli.exceptions import EnvironmentError, PromptAbortedError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _build_completer(source: SuggestionSource) -> Any:
    """Wrap a suggestion source into a prompt_toolkit ``Completer``."""
    from prompt_toolkit.completion import Completer, Completion

    class SuggestionCompleter(Completer):
        def get_completions(self, document: Any, complete_event: Any) -> Any:
            text = document.text_before_cursor
            for suggestion in source(text):
                yield Completion(str(suggestion), start_position=-len(text))

    return SuggestionCompleter()


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _allow_blank(validate: Validator | None) -> Callable[[str], ValidationResult] | None:
    """Accept empty input, otherwise defer to *validate*."""
    if validate is None:
        return None

    def check(text: str) -> ValidationResult:
        if not text.strip():
            return True
        return validate(text)

    return check


def _text_default(question: PromptDescriptor) -> str:
    """Render a default value as the pre-filled text of a text prompt."""
    default = question.default
    if default is None:
        return ""
    if isinstance(default, date) and question.date_format:
        return default.strftime(question.date_format)
    return str(default)


def _date_validator(question: PromptDescriptor) -> Validator:
    if question.validate is not None:
        return question.validate
    return DateFormatValidator(question.date_format or "%m/%d/%y")


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class QuestionaryPromptEngine:
    """Ask questions one after another in the terminal."""

    def ask(self, questions: Sequence[PromptDescriptor]) -> dict[str, Any]:
        """Prompt each question in order.

        Raises
        ------
        PromptAbortedError
            If the user cancels a prompt (questionary returns ``None``).
        EnvironmentError
            If questionary is not installed.
        """
        questionary = _import_questionary()
        answers: dict[str, Any] = {}
        for question in questions:
            answer = self._build_prompt(questionary, question).ask()
            if answer is None:
                raise PromptAbortedError(
                    f"No answer given for '{question.name}'.",
                    hint="Answer every question, or press Ctrl+C to quit.",
                )
            answers[question.name] = answer
        return answers

    @staticmethod
    def _build_prompt(questionary: Any, question: PromptDescriptor) -> Any:
        kind = question.kind
        message = question.message

        if kind is WidgetKind.LIST:
            values = [choice.value for choice in question.choices]
            return questionary.select(
                message,
                choices=[
                    questionary.Choice(title=choice.label, value=choice.value)
                    for choice in question.choices
                ],
                default=question.default if question.default in values else None,
            )

        if kind is WidgetKind.CHECKBOX:
            checked = question.default or ()
            return questionary.checkbox(
                message,
                choices=[
                    questionary.Choice(
                        title=choice.label,
                        value=choice.value,
                        checked=choice.value in checked,
                    )
                    for choice in question.choices
                ],
            )

        if kind is WidgetKind.CONFIRM:
            return questionary.confirm(message, default=bool(question.default))

        if kind is WidgetKind.PATH:
            return questionary.path(message, default=_text_default(question))

        if kind is WidgetKind.DATETIME:
            return questionary.text(
                message,
                default=_text_default(question),
                validate=_allow_blank(_date_validator(question)),
            )

        if kind is WidgetKind.AUTOCOMPLETE and question.source is not None:
            return questionary.text(
                message,
                default=_text_default(question),
                validate=_allow_blank(question.validate),
                completer=_build_completer(question.source),
            )

        return questionary.text(
            message,
            default=_text_default(question),
            validate=_allow_blank(question.validate),
        )
