"""
Export prompt sets and projects to JSON text, and import them back
"""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from promptdeck_commons.api_schema.prompt_schema import Project, PromptSet
from promptdeck_commons.api_schema.service_schemas import (
    ImportProjectResponse,
    ImportPromptSetResponse,
)
from promptdeck.services.collection_utils import generate_id

logger = logging.getLogger(__name__)

RawImportData = Union[str, bytes, dict[str, Any]]

INVALID_PROMPT_SET_MSG = "The JSON does not have the format of a prompt set"
INVALID_PROJECT_MSG = "The JSON does not have the format of a project"


# ==============================
# Export
# ==============================


def export_prompt_set(prompt_set: PromptSet) -> str:
    """
    Serialize a prompt set to pretty-printed JSON.

    Args:
        prompt_set (PromptSet): Prompt set to export

    Returns:
        str: JSON text, suitable for ``import_prompt_set``
    """
    return prompt_set.model_dump_json(by_alias=True, indent=2)


def export_project(project: Project) -> str:
    return project.model_dump_json(by_alias=True, indent=2)


# ==============================
# Import
# ==============================


def import_prompt_set(
    project: Project, raw: RawImportData
) -> ImportPromptSetResponse:
    """
    Validate exported prompt set data and append it to a project under a fresh id.

    Args:
        project (Project): Project receiving the prompt set
        raw (RawImportData): JSON text, or already decoded data

    Returns:
        ImportPromptSetResponse: The updated project on success; the untouched project and
            an error message otherwise
    """
    data, error = _decode(raw)
    if error is None:
        error = _check_shape(data, ("variables", "prompts"), INVALID_PROMPT_SET_MSG)
    prompt_set: Optional[PromptSet] = None
    if error is None:
        try:
            prompt_set = PromptSet.model_validate(data)
        except ValidationError as e:
            error = f"{INVALID_PROMPT_SET_MSG}: {_describe(e)}"

    if error is not None or prompt_set is None:
        logger.warning(
            "Rejected prompt set import into project %s: %s", project.id, error
        )
        return ImportPromptSetResponse(success=False, project=project, message=error)

    # the imported id would collide with the prompt set it was exported from
    prompt_set = prompt_set.model_copy(update={"id": generate_id("set")})
    updated = project.model_copy(
        update={"prompt_sets": project.prompt_sets + [prompt_set]}
    )
    logger.info("Imported prompt set %s into project %s", prompt_set.id, project.id)
    return ImportPromptSetResponse(
        success=True,
        project=updated,
        imported_prompt_set_id=prompt_set.id,
    )


def import_project(
    projects: list[Project], raw: RawImportData
) -> ImportProjectResponse:
    """
    Validate exported project data and append it to the root collection under a fresh id.

    Args:
        projects (list[Project]): Root project collection
        raw (RawImportData): JSON text, or already decoded data

    Returns:
        ImportProjectResponse: The updated collection on success; the untouched collection
            and an error message otherwise
    """
    data, error = _decode(raw)
    if error is None:
        error = _check_shape(data, ("promptSets",), INVALID_PROJECT_MSG)
    project: Optional[Project] = None
    if error is None:
        try:
            project = Project.model_validate(data)
        except ValidationError as e:
            error = f"{INVALID_PROJECT_MSG}: {_describe(e)}"

    if error is not None or project is None:
        logger.warning("Rejected project import: %s", error)
        return ImportProjectResponse(success=False, projects=projects, message=error)

    project = project.model_copy(update={"id": generate_id("project")})
    logger.info("Imported project %s", project.id)
    return ImportProjectResponse(
        success=True,
        projects=projects + [project],
        imported_project_id=project.id,
    )


# ==============================
# Private helpers
# ==============================


def _decode(raw: RawImportData) -> tuple[Any, Optional[str]]:
    if isinstance(raw, (str, bytes)):
        try:
            return json.loads(raw), None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return None, f"Invalid JSON: {e}"
    return raw, None


def _check_shape(
    data: Any, list_fields: tuple[str, ...], message: str
) -> Optional[str]:
    """Check the minimal shape: non-empty id and name, and list-typed collections"""
    if not isinstance(data, dict):
        return f"{message}: expected a JSON object"
    for field in ("id", "name"):
        value = data.get(field)
        if not isinstance(value, str) or not value:
            return f"{message}: missing or empty '{field}'"
    for field in list_fields:
        if not isinstance(data.get(field), list):
            return f"{message}: '{field}' must be a list"
    return None


def _describe(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)
