"""
Test configuration utilities.

Ensures the project root is available on ``sys.path`` so imports such as
``promptdeck.promptdeck_lib`` and ``promptdeck_commons`` resolve correctly during
pytest collection.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from promptdeck_commons.api_schema.prompt_schema import (  # noqa: E402
    Prompt,
    Project,
    PromptSet,
    Variable,
)


@pytest.fixture
def sample_prompt_set() -> PromptSet:
    """Prompt set with three variables and two prompts"""
    return PromptSet(
        id="set1",
        name="greetings",
        variables=[
            Variable(id="v1", name="name", value="Ana"),
            Variable(id="v2", name="role", value="guide"),
            Variable(id="v3", name="task", value="plan a trip"),
        ],
        prompts=[
            Prompt(id="p1", content="Hello {name}, you are {role}"),
            Prompt(id="p2", content="Please help me {task}"),
        ],
    )


@pytest.fixture
def sample_project(sample_prompt_set) -> Project:
    return Project(
        id="project1",
        name="Travel",
        prompt_sets=[
            sample_prompt_set,
            PromptSet(
                id="set2",
                name="empty",
                prompts=[Prompt(id="p1", content="nothing to fill")],
            ),
        ],
    )
