"""
Operations on the variable store of a prompt set
"""

import logging

from promptdeck_commons.api_schema.prompt_schema import Variable
from promptdeck.services.collection_utils import (
    generate_id,
    move_item,
    remove_item,
    replace_item,
)

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_NAME = "new_variable"


def add_variable(variables: list[Variable]) -> list[Variable]:
    """
    Append a variable with a fresh id, the default name and an empty value.

    Args:
        variables (list[Variable]): Current variables

    Returns:
        list[Variable]: New variables list
    """
    return variables + [
        Variable(id=generate_id("var"), name=DEFAULT_VARIABLE_NAME, value="")
    ]


def rename_variable(
    variables: list[Variable], variable_id: str, new_name: str
) -> list[Variable]:
    """
    Rename a variable. Blank names are rejected and the previous name is kept.

    Args:
        variables (list[Variable]): Current variables
        variable_id (str): ID of the variable to rename
        new_name (str): New placeholder name

    Returns:
        list[Variable]: New variables list, or ``variables`` when nothing changed
    """
    if not new_name or not new_name.strip():
        logger.debug("Rejected blank name for variable %s", variable_id)
        return variables
    return replace_item(
        variables,
        variable_id,
        lambda variable: variable
        if variable.name == new_name
        else variable.model_copy(update={"name": new_name}),
    )


def set_variable_value(
    variables: list[Variable], variable_id: str, new_value: str
) -> list[Variable]:
    return replace_item(
        variables,
        variable_id,
        lambda variable: variable
        if variable.value == new_value
        else variable.model_copy(update={"value": new_value}),
    )


def remove_variable(variables: list[Variable], variable_id: str) -> list[Variable]:
    return remove_item(variables, variable_id)


def clear_all_values(variables: list[Variable]) -> list[Variable]:
    """
    Empty every value, keeping ids, names and order.

    Args:
        variables (list[Variable]): Current variables

    Returns:
        list[Variable]: New variables list, or ``variables`` if all values were already empty
    """
    if all(variable.value == "" for variable in variables):
        return variables
    return [
        variable if variable.value == "" else variable.model_copy(update={"value": ""})
        for variable in variables
    ]


def reorder_variables(
    variables: list[Variable], from_index: int, to_index: int
) -> list[Variable]:
    return move_item(variables, from_index, to_index)
