"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from rung_cli.core.boilerplate_service import BoilerplateService
from rung_cli.core.compiler import compile_question, compile_questions
from rung_cli.core.interview_service import InterviewService
from rung_cli.core.models import (
    Category,
    Choice,
    GeneratedFile,
    ParameterConfig,
    PromptDescriptor,
    WidgetKind,
)
from rung_cli.core.protocols import CategoryProvider, FileReader, ProjectWriter, PromptEngine
from rung_cli.core.resolver import resolve_answers, resolve_value
from rung_cli.core.types import TypeDescriptor

__all__: list[str] = [
    "BoilerplateService",
    "Category",
    "CategoryProvider",
    "Choice",
    "FileReader",
    "GeneratedFile",
    "InterviewService",
    "ParameterConfig",
    "ProjectWriter",
    "PromptDescriptor",
    "PromptEngine",
    "TypeDescriptor",
    "WidgetKind",
    "compile_question",
    "compile_questions",
    "resolve_answers",
    "resolve_value",
]
