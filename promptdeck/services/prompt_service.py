"""
Operations on the prompt collection of a prompt set
"""

from promptdeck_commons.api_schema.prompt_schema import Prompt
from promptdeck.services.collection_utils import (
    generate_id,
    move_item,
    remove_item,
    replace_item,
)

DEFAULT_PROMPT_CONTENT = "New prompt"


def new_prompt(content: str = DEFAULT_PROMPT_CONTENT) -> Prompt:
    return Prompt(id=generate_id("prompt"), content=content)


def add_prompt(prompts: list[Prompt]) -> list[Prompt]:
    return prompts + [new_prompt()]


def update_prompt(prompts: list[Prompt], prompt_id: str, content: str) -> list[Prompt]:
    """
    Replace the content of a prompt verbatim.

    No validation is applied: the content may be empty or hold malformed placeholders.

    Args:
        prompts (list[Prompt]): Current prompts
        prompt_id (str): ID of the prompt to update
        content (str): New template text

    Returns:
        list[Prompt]: New prompts list, or ``prompts`` when the id is unknown
    """
    return replace_item(
        prompts,
        prompt_id,
        lambda prompt: prompt
        if prompt.content == content
        else prompt.model_copy(update={"content": content}),
    )


def remove_prompt(prompts: list[Prompt], prompt_id: str) -> list[Prompt]:
    return remove_item(prompts, prompt_id)


def reorder_prompts(
    prompts: list[Prompt], from_index: int, to_index: int
) -> list[Prompt]:
    return move_item(prompts, from_index, to_index)
