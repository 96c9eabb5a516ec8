"""
Operations on a single prompt set
"""

import logging
from typing import Callable, Optional

from promptdeck_commons.api_schema.prompt_schema import (
    Prompt,
    PromptSet,
    Variable,
    ViewPreferences,
    clamp_split_ratio,
)
from promptdeck.services.collection_utils import generate_id
from promptdeck.services.prompt_service import new_prompt

logger = logging.getLogger(__name__)


def create_prompt_set(name: str) -> PromptSet:
    """
    Build a new prompt set: no variables, one default prompt, default view preferences.

    Args:
        name (str): Name of the prompt set

    Returns:
        PromptSet: The new prompt set
    """
    return PromptSet(
        id=generate_id("set"),
        name=name,
        variables=[],
        prompts=[new_prompt()],
        view_preferences=ViewPreferences(),
    )


def rename_prompt_set(prompt_set: PromptSet, name: str) -> PromptSet:
    if not name or not name.strip():
        logger.debug("Rejected blank name for prompt set %s", prompt_set.id)
        return prompt_set
    if name == prompt_set.name:
        return prompt_set
    return prompt_set.model_copy(update={"name": name})


def update_view_preferences(
    prompt_set: PromptSet,
    split_ratio: Optional[float] = None,
    variables_panel_visible: Optional[bool] = None,
    card_view: Optional[bool] = None,
) -> PromptSet:
    """
    Partially update the view preferences of a prompt set.

    Args:
        prompt_set (PromptSet): Prompt set to update
        split_ratio (float, optional): Editor width in percent, clamped into [20, 80]
        variables_panel_visible (bool, optional): Whether the variables panel is shown
        card_view (bool, optional): Whether prompts are shown as cards

    Returns:
        PromptSet: Updated prompt set, or ``prompt_set`` when nothing changed
    """
    current = prompt_set.view_preferences
    updates = {}
    if split_ratio is not None:
        updates["split_ratio"] = clamp_split_ratio(split_ratio)
    if variables_panel_visible is not None:
        updates["variables_panel_visible"] = variables_panel_visible
    if card_view is not None:
        updates["card_view"] = card_view
    updates = {
        field: value
        for field, value in updates.items()
        if getattr(current, field) != value
    }
    if not updates:
        return prompt_set
    return prompt_set.model_copy(
        update={"view_preferences": current.model_copy(update=updates)}
    )


def update_variables(
    prompt_set: PromptSet, update: Callable[[list[Variable]], list[Variable]]
) -> PromptSet:
    """
    Apply a variable store operation to the variables of a prompt set.

    Args:
        prompt_set (PromptSet): Prompt set to update
        update (Callable[[list[Variable]], list[Variable]]): Variable store operation

    Returns:
        PromptSet: Updated prompt set, or ``prompt_set`` when the operation was a no-op
    """
    variables = update(prompt_set.variables)
    if variables is prompt_set.variables:
        return prompt_set
    return prompt_set.model_copy(update={"variables": variables})


def update_prompts(
    prompt_set: PromptSet, update: Callable[[list[Prompt]], list[Prompt]]
) -> PromptSet:
    prompts = update(prompt_set.prompts)
    if prompts is prompt_set.prompts:
        return prompt_set
    return prompt_set.model_copy(update={"prompts": prompts})
