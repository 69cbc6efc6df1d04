"""Pure builders for the ``rung boilerplate`` starter project.

Nothing here touches the filesystem: the questions are compiled from
ordinary parameter declarations and the project is returned as a list
of :class:`GeneratedFile` for a writer to materialise.
"""

from __future__ import annotations

import json
import posixpath
import textwrap
from collections.abc import Mapping, Sequence
from dataclasses import replace
from string import Template
from typing import Any

from rung_cli.core.compiler import compile_questions
from rung_cli.core.models import Category, GeneratedFile, ParameterConfig, PromptDescriptor
from rung_cli.core.types import SelectBox
from rung_cli.core.validators import SEMVER_PATTERN, PatternValidator

DEFAULT_CATEGORY = Category(name="Miscellaneous", alias="miscellaneous")
INFO_FOLDER = "info"
DEFAULT_PROJECT_NAME = "rung-extension"
LOCALES: tuple[str, ...] = ("en", "es", "pt_BR")
MANIFEST_FIELDS: tuple[str, ...] = ("name", "version", "license", "category")

_README_TEMPLATE = Template(
    """
    # Rung ─ $title

    # Development

    - Use `pip install rung-cli` to install the dependencies
    - Use `rung run` to start the CLI wizard
    """
)

_INDEX_TEMPLATE = Template(
    '''
    from rung_cli.core.types import String as Text


    def render(name):
        return f"<b>Hello {name}</b>"


    def main(context):
        name = context["params"]["name"]
        return {
            "alerts": [
                {
                    "title": "Welcome",
                    "content": render(name),
                    "resources": [],
                }
            ]
        }


    params = {
        "name": {
            "description": "What is your name?",
            "type": Text,
        }
    }

    extension = {
        "primary_key": True,
        "title": $title,
        "description": $description,
        "preview": render("Trixie"),
    }
    '''
)


def _format(source: str) -> str:
    """Strip the template indentation and leading blank lines."""
    return textwrap.dedent(source).lstrip("\n")


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

def boilerplate_parameters(
    default_name: str,
    categories: Sequence[Category],
) -> dict[str, ParameterConfig]:
    """Declare the questions asked before generating a project."""
    category_values = {category.alias: category.name for category in categories}
    declared = [
        ParameterConfig("name", "Project name", default=default_name or DEFAULT_PROJECT_NAME),
        ParameterConfig("version", "Version", default="1.0.0"),
        ParameterConfig("title", "Title", default="Untitled"),
        ParameterConfig("description", "Description"),
        ParameterConfig(
            "category",
            "Category",
            type=SelectBox(category_values),
            default=DEFAULT_CATEGORY.alias,
        ),
        ParameterConfig("license", "License", default="MIT"),
    ]
    return {config.name: config for config in declared}


def boilerplate_questions(params: Mapping[str, ParameterConfig]) -> list[PromptDescriptor]:
    """Compile *params*, requiring a semantic version for ``version``."""
    semver = PatternValidator(SEMVER_PATTERN, "Please enter a semantic version, e.g. 1.0.0")
    return [
        replace(question, validate=semver) if question.name == "version" else question
        for question in compile_questions(params)
    ]


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def manifest_file(answers: Mapping[str, Any], sdk_version: str) -> GeneratedFile:
    manifest: dict[str, Any] = {field: answers.get(field) for field in MANIFEST_FIELDS}
    manifest["dependencies"] = {"rung-cli": sdk_version}
    return GeneratedFile(
        path=posixpath.join(answers["name"], "rung.json"),
        content=json.dumps(manifest, indent=2) + "\n",
    )


def readme_file(answers: Mapping[str, Any]) -> GeneratedFile:
    content = _format(_README_TEMPLATE.substitute(title=answers.get("title") or ""))
    return GeneratedFile(path=posixpath.join(answers["name"], "README.md"), content=content)


def index_file(answers: Mapping[str, Any]) -> GeneratedFile:
    content = _format(
        _INDEX_TEMPLATE.substitute(
            title=repr(answers.get("title") or ""),
            description=repr(answers.get("description") or ""),
        )
    )
    return GeneratedFile(path=posixpath.join(answers["name"], "index.py"), content=content)


def info_files(answers: Mapping[str, Any]) -> list[GeneratedFile]:
    return [
        GeneratedFile(path=posixpath.join(answers["name"], INFO_FOLDER, f"{locale}.md"), content="")
        for locale in LOCALES
    ]


def project_files(answers: Mapping[str, Any], sdk_version: str) -> list[GeneratedFile]:
    """Every file of the starter project, paths relative to the working directory."""
    return [
        manifest_file(answers, sdk_version),
        readme_file(answers),
        index_file(answers),
        *info_files(answers),
    ]
