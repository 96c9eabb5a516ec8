"""
Placeholder substitution for prompt templates
"""

import logging
from typing import Optional, Protocol, Sequence

from promptdeck_commons.api_schema.prompt_schema import PromptSet

logger = logging.getLogger(__name__)


class Binding(Protocol):
    name: str
    value: str


def placeholder_for(name: str) -> str:
    """
    Build the literal placeholder token for a variable name.

    Args:
        name (str): Variable name

    Returns:
        str: The ``{name}`` token
    """
    return "{" + name + "}"


def render_template(template: str, bindings: Sequence[Binding]) -> str:
    """
    Substitute variable bindings into a template.

    Bindings are applied one after another in sequence order. Each binding replaces
    every literal occurrence of its ``{name}`` token in the working text, so when two
    bindings share a name the first one in the sequence wins. Matching is case-sensitive
    and there is no escaping; placeholders without a binding are left verbatim.

    Args:
        template (str): Template text with ``{name}`` placeholders
        bindings (Sequence[Binding]): Objects exposing ``name`` and ``value``

    Returns:
        str: Rendered text

    Example:
        >>> render_template("{x}{x}", [Variable(id="1", name="x", value="A")])
        'AA'
    """
    result = template
    for binding in bindings:
        if not binding.name:
            continue
        result = result.replace(placeholder_for(binding.name), binding.value)
    return result


def render_prompt(prompt_set: PromptSet, prompt_id: str) -> Optional[str]:
    """
    Render one prompt of a prompt set with the set's own variables.

    Args:
        prompt_set (PromptSet): Prompt set holding the prompt and the variables
        prompt_id (str): ID of the prompt to render

    Returns:
        Optional[str]: Rendered prompt, or None if the prompt is not in the set
    """
    for prompt in prompt_set.prompts:
        if prompt.id == prompt_id:
            return render_template(prompt.content, prompt_set.variables)
    logger.debug("Prompt %s not found in prompt set %s", prompt_id, prompt_set.id)
    return None
