import pytest

from promptdeck_commons.api_schema.prompt_schema import Prompt
from promptdeck.services.prompt_service import (
    DEFAULT_PROMPT_CONTENT,
    add_prompt,
    remove_prompt,
    reorder_prompts,
    update_prompt,
)


@pytest.fixture
def prompts():
    return [
        Prompt(id="p1", content="Hello {name}"),
        Prompt(id="p2", content="Bye {name}"),
    ]


def test_add_prompt(prompts):
    result = add_prompt(prompts)
    assert len(result) == 3
    assert result[-1].content == DEFAULT_PROMPT_CONTENT
    assert result[-1].id.startswith("prompt-")


def test_update_prompt_stores_content_verbatim(prompts):
    for content in ["", "{unclosed", "{{double}}", "plain"]:
        assert update_prompt(prompts, "p1", content)[0].content == content


def test_update_unknown_prompt_is_noop(prompts):
    assert update_prompt(prompts, "missing", "x") is prompts


def test_remove_prompt_can_empty_collection(prompts):
    result = remove_prompt(remove_prompt(prompts, "p1"), "p2")
    assert result == []


def test_reorder_prompts(prompts):
    result = reorder_prompts(prompts, 0, 1)
    assert [prompt.id for prompt in result] == ["p2", "p1"]
    assert reorder_prompts(result, 1, 0) == prompts
    assert reorder_prompts(prompts, 0, 2) is prompts
