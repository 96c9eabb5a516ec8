"""
Operations on projects and on the root project collection
"""

import logging
from typing import Callable

from promptdeck_commons.api_schema.prompt_schema import (
    Prompt,
    Project,
    PromptSet,
    Variable,
    ViewPreferences,
)
from promptdeck.services.collection_utils import (
    generate_id,
    move_item,
    remove_item,
    replace_item,
)
from promptdeck.services.prompt_set_service import create_prompt_set

logger = logging.getLogger(__name__)


# ==============================
# Project level
# ==============================


def create_project(name: str) -> Project:
    """
    Build a new project holding a single fresh prompt set.

    Args:
        name (str): Name of the project

    Returns:
        Project: The new project
    """
    return Project(
        id=generate_id("project"),
        name=name,
        prompt_sets=[create_prompt_set("Prompt Set 1")],
    )


def rename_project(project: Project, name: str) -> Project:
    if not name or not name.strip():
        logger.debug("Rejected blank name for project %s", project.id)
        return project
    if name == project.name:
        return project
    return project.model_copy(update={"name": name})


def add_prompt_set(project: Project) -> Project:
    prompt_set = create_prompt_set(f"New Set {len(project.prompt_sets) + 1}")
    return project.model_copy(
        update={"prompt_sets": project.prompt_sets + [prompt_set]}
    )


def delete_prompt_set(project: Project, prompt_set_id: str) -> Project:
    """
    Delete a prompt set from a project. The last remaining prompt set is protected.

    Args:
        project (Project): Project owning the prompt set
        prompt_set_id (str): ID of the prompt set to delete

    Returns:
        Project: Updated project, or ``project`` when the deletion was rejected or the id is unknown
    """
    if len(project.prompt_sets) <= 1:
        logger.info(
            "Refused to delete the last prompt set %s of project %s",
            prompt_set_id,
            project.id,
        )
        return project
    prompt_sets = remove_item(project.prompt_sets, prompt_set_id)
    if prompt_sets is project.prompt_sets:
        return project
    return project.model_copy(update={"prompt_sets": prompt_sets})


def reorder_prompt_sets(project: Project, from_index: int, to_index: int) -> Project:
    prompt_sets = move_item(project.prompt_sets, from_index, to_index)
    if prompt_sets is project.prompt_sets:
        return project
    return project.model_copy(update={"prompt_sets": prompt_sets})


def update_prompt_set(
    project: Project, prompt_set_id: str, update: Callable[[PromptSet], PromptSet]
) -> Project:
    prompt_sets = replace_item(project.prompt_sets, prompt_set_id, update)
    if prompt_sets is project.prompt_sets:
        return project
    return project.model_copy(update={"prompt_sets": prompt_sets})


# ==============================
# Root collection level
# ==============================


def add_project(projects: list[Project]) -> list[Project]:
    return projects + [create_project(f"New Project {len(projects) + 1}")]


def delete_project(projects: list[Project], project_id: str) -> list[Project]:
    """
    Delete a project. The last remaining project is protected.

    Args:
        projects (list[Project]): Root project collection
        project_id (str): ID of the project to delete

    Returns:
        list[Project]: Updated collection, or ``projects`` when the deletion was rejected or the id is unknown
    """
    if len(projects) <= 1:
        logger.info("Refused to delete the last project %s", project_id)
        return projects
    return remove_item(projects, project_id)


def reorder_projects(
    projects: list[Project], from_index: int, to_index: int
) -> list[Project]:
    return move_item(projects, from_index, to_index)


def update_project(
    projects: list[Project], project_id: str, update: Callable[[Project], Project]
) -> list[Project]:
    return replace_item(projects, project_id, update)


def get_default_projects() -> list[Project]:
    """
    Seed collection used when nothing has been stored yet.

    Returns:
        list[Project]: One sample project with one sample prompt set
    """
    return [
        Project(
            id="default",
            name="My First Project",
            prompt_sets=[
                PromptSet(
                    id="set1",
                    name="prompt set",
                    variables=[
                        Variable(id="name", name="name", value="Juan"),
                        Variable(id="role", name="role", value="assistant"),
                        Variable(
                            id="task", name="task", value="create a marketing plan"
                        ),
                    ],
                    prompts=[
                        Prompt(
                            id="prompt1",
                            content="Hello {name}\nYou are {role}\nplease help me with {task}",
                        ),
                        Prompt(
                            id="prompt2",
                            content="Now, as a {role}, for the {task}",
                        ),
                    ],
                    view_preferences=ViewPreferences(),
                )
            ],
        )
    ]
