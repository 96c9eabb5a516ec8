import enum
import logging
from typing import Callable, Optional

from pydantic import TypeAdapter, ValidationError

from promptdeck_commons.api_schema.prompt_schema import Project, PromptSet
from promptdeck_commons.api_schema.service_schemas import (
    ImportProjectResponse,
    ImportPromptSetResponse,
)
from promptdeck.services import (
    import_export_service,
    project_service,
    prompt_service,
    prompt_set_service,
    variable_service,
)
from promptdeck.services.collection_utils import find_index
from promptdeck.services.configurator.configurator import SimpleConfigurator
from promptdeck.services.drag_reorder import DragReorderTracker
from promptdeck.services.storage.storage_base import BaseStorage
from promptdeck.template.template_renderer import render_prompt

logger = logging.getLogger(__name__)

_PROJECTS_ADAPTER = TypeAdapter(list[Project])


class DragCollection(str, enum.Enum):
    PROJECTS = "projects"
    PROMPT_SETS = "prompt_sets"
    VARIABLES = "variables"
    PROMPTS = "prompts"


class PromptDeck:
    """
    Owns the current project tree and exposes one entry point per mutation.

    Every entry point computes a new immutable snapshot from the current one. When
    the snapshot changed it becomes the current state and is handed to the storage;
    a failed write is logged and never rolls the in-memory state back. Operations
    referring to unknown ids, and rejected deletions, return the unchanged snapshot.
    """

    def __init__(
        self,
        storage: Optional[BaseStorage] = None,
        storage_key: Optional[str] = None,
        configurator: Optional[SimpleConfigurator] = None,
    ):
        """Initialize PromptDeck and load the stored projects.

        Args:
            storage (BaseStorage, optional): Storage adapter; created from the configurator when not given
            storage_key (str, optional): Key of the project collection; defaults to the configured key
            configurator (SimpleConfigurator, optional): Configuration source
        """
        self.configurator = configurator or SimpleConfigurator()
        self.storage = storage or self.configurator.create_storage()
        self.storage_key = storage_key or self.configurator.get_storage_key()
        self._projects: list[Project] = self._load_projects()

    # ==============================
    # State
    # ==============================

    @property
    def projects(self) -> list[Project]:
        return self._projects

    def get_project(self, project_id: str) -> Optional[Project]:
        index = find_index(self._projects, project_id)
        return self._projects[index] if index is not None else None

    def get_prompt_set(
        self, project_id: str, prompt_set_id: str
    ) -> Optional[PromptSet]:
        project = self.get_project(project_id)
        if project is None:
            return None
        index = find_index(project.prompt_sets, prompt_set_id)
        return project.prompt_sets[index] if index is not None else None

    def _load_projects(self) -> list[Project]:
        raw = self.storage.load(self.storage_key, None)
        if raw is None:
            logger.info("No stored projects under %s, using defaults", self.storage_key)
            return project_service.get_default_projects()
        try:
            projects = _PROJECTS_ADAPTER.validate_python(raw)
        except ValidationError as e:
            logger.error(
                "Stored projects under %s are invalid, using defaults: %s",
                self.storage_key,
                e,
            )
            return project_service.get_default_projects()
        if not projects:
            logger.warning("Stored project list is empty, using defaults")
            return project_service.get_default_projects()
        return projects

    def _commit(self, projects: list[Project]) -> list[Project]:
        if projects is self._projects:
            return self._projects
        self._projects = projects
        self._persist()
        return self._projects

    def _persist(self) -> None:
        value = _PROJECTS_ADAPTER.dump_python(
            self._projects, mode="json", by_alias=True
        )
        try:
            if not self.storage.save(self.storage_key, value):
                logger.error("Projects were not persisted under %s", self.storage_key)
        except Exception as e:
            logger.error("Failed to persist projects under %s: %s", self.storage_key, e)

    def _update_project(
        self, project_id: str, update: Callable[[Project], Project]
    ) -> list[Project]:
        return self._commit(
            project_service.update_project(self._projects, project_id, update)
        )

    def _update_prompt_set(
        self,
        project_id: str,
        prompt_set_id: str,
        update: Callable[[PromptSet], PromptSet],
    ) -> list[Project]:
        return self._update_project(
            project_id,
            lambda project: project_service.update_prompt_set(
                project, prompt_set_id, update
            ),
        )

    # ==============================
    # Projects
    # ==============================

    def add_project(self) -> list[Project]:
        return self._commit(project_service.add_project(self._projects))

    def delete_project(self, project_id: str) -> list[Project]:
        return self._commit(project_service.delete_project(self._projects, project_id))

    def rename_project(self, project_id: str, name: str) -> list[Project]:
        return self._update_project(
            project_id, lambda project: project_service.rename_project(project, name)
        )

    def reorder_projects(self, from_index: int, to_index: int) -> list[Project]:
        return self._commit(
            project_service.reorder_projects(self._projects, from_index, to_index)
        )

    # ==============================
    # Prompt sets
    # ==============================

    def add_prompt_set(self, project_id: str) -> list[Project]:
        return self._update_project(project_id, project_service.add_prompt_set)

    def delete_prompt_set(self, project_id: str, prompt_set_id: str) -> list[Project]:
        return self._update_project(
            project_id,
            lambda project: project_service.delete_prompt_set(project, prompt_set_id),
        )

    def reorder_prompt_sets(
        self, project_id: str, from_index: int, to_index: int
    ) -> list[Project]:
        return self._update_project(
            project_id,
            lambda project: project_service.reorder_prompt_sets(
                project, from_index, to_index
            ),
        )

    def rename_prompt_set(
        self, project_id: str, prompt_set_id: str, name: str
    ) -> list[Project]:
        return self._update_prompt_set(
            project_id,
            prompt_set_id,
            lambda prompt_set: prompt_set_service.rename_prompt_set(prompt_set, name),
        )

    def update_view_preferences(
        self,
        project_id: str,
        prompt_set_id: str,
        split_ratio: Optional[float] = None,
        variables_panel_visible: Optional[bool] = None,
        card_view: Optional[bool] = None,
    ) -> list[Project]:
        return self._update_prompt_set(
            project_id,
            prompt_set_id,
            lambda prompt_set: prompt_set_service.update_view_preferences(
                prompt_set,
                split_ratio=split_ratio,
                variables_panel_visible=variables_panel_visible,
                card_view=card_view,
            ),
        )

    # ==============================
    # Variables
    # ==============================

    def _update_variables(self, project_id: str, prompt_set_id: str, update):
        return self._update_prompt_set(
            project_id,
            prompt_set_id,
            lambda prompt_set: prompt_set_service.update_variables(prompt_set, update),
        )

    def add_variable(self, project_id: str, prompt_set_id: str) -> list[Project]:
        return self._update_variables(
            project_id, prompt_set_id, variable_service.add_variable
        )

    def rename_variable(
        self, project_id: str, prompt_set_id: str, variable_id: str, name: str
    ) -> list[Project]:
        return self._update_variables(
            project_id,
            prompt_set_id,
            lambda variables: variable_service.rename_variable(
                variables, variable_id, name
            ),
        )

    def set_variable_value(
        self, project_id: str, prompt_set_id: str, variable_id: str, value: str
    ) -> list[Project]:
        return self._update_variables(
            project_id,
            prompt_set_id,
            lambda variables: variable_service.set_variable_value(
                variables, variable_id, value
            ),
        )

    def remove_variable(
        self, project_id: str, prompt_set_id: str, variable_id: str
    ) -> list[Project]:
        return self._update_variables(
            project_id,
            prompt_set_id,
            lambda variables: variable_service.remove_variable(variables, variable_id),
        )

    def clear_all_values(self, project_id: str, prompt_set_id: str) -> list[Project]:
        return self._update_variables(
            project_id, prompt_set_id, variable_service.clear_all_values
        )

    def reorder_variables(
        self, project_id: str, prompt_set_id: str, from_index: int, to_index: int
    ) -> list[Project]:
        return self._update_variables(
            project_id,
            prompt_set_id,
            lambda variables: variable_service.reorder_variables(
                variables, from_index, to_index
            ),
        )

    # ==============================
    # Prompts
    # ==============================

    def _update_prompts(self, project_id: str, prompt_set_id: str, update):
        return self._update_prompt_set(
            project_id,
            prompt_set_id,
            lambda prompt_set: prompt_set_service.update_prompts(prompt_set, update),
        )

    def add_prompt(self, project_id: str, prompt_set_id: str) -> list[Project]:
        return self._update_prompts(
            project_id, prompt_set_id, prompt_service.add_prompt
        )

    def update_prompt(
        self, project_id: str, prompt_set_id: str, prompt_id: str, content: str
    ) -> list[Project]:
        return self._update_prompts(
            project_id,
            prompt_set_id,
            lambda prompts: prompt_service.update_prompt(prompts, prompt_id, content),
        )

    def remove_prompt(
        self, project_id: str, prompt_set_id: str, prompt_id: str
    ) -> list[Project]:
        return self._update_prompts(
            project_id,
            prompt_set_id,
            lambda prompts: prompt_service.remove_prompt(prompts, prompt_id),
        )

    def reorder_prompts(
        self, project_id: str, prompt_set_id: str, from_index: int, to_index: int
    ) -> list[Project]:
        return self._update_prompts(
            project_id,
            prompt_set_id,
            lambda prompts: prompt_service.reorder_prompts(
                prompts, from_index, to_index
            ),
        )

    def render_prompt(
        self, project_id: str, prompt_set_id: str, prompt_id: str
    ) -> Optional[str]:
        """Render a prompt with the variables of its prompt set.

        Args:
            project_id (str): ID of the project
            prompt_set_id (str): ID of the prompt set
            prompt_id (str): ID of the prompt

        Returns:
            Optional[str]: The rendered text, or None if any id is unknown
        """
        prompt_set = self.get_prompt_set(project_id, prompt_set_id)
        if prompt_set is None:
            return None
        return render_prompt(prompt_set, prompt_id)

    # ==============================
    # Drag and drop
    # ==============================

    def end_drag(
        self,
        tracker: DragReorderTracker,
        collection: DragCollection,
        project_id: Optional[str] = None,
        prompt_set_id: Optional[str] = None,
        target_id: Optional[str] = None,
    ) -> list[Project]:
        """Finish a drag gesture and apply the resulting reorder to one collection.

        Args:
            tracker (DragReorderTracker): Tracker holding the gesture
            collection (DragCollection): Which collection the gesture happened on
            project_id (str, optional): Project owning the collection (all but PROJECTS)
            prompt_set_id (str, optional): Prompt set owning the collection (VARIABLES and PROMPTS)
            target_id (str, optional): Drop target reported by the end event

        Returns:
            list[Project]: The new snapshot
        """
        collection = DragCollection(collection)
        if collection is DragCollection.PROJECTS:
            return self._commit(tracker.end(self._projects, target_id))

        if collection is DragCollection.PROMPT_SETS:
            projects = project_service.update_project(
                self._projects,
                project_id or "",
                lambda project: _with_prompt_sets(
                    project, tracker.end(project.prompt_sets, target_id)
                ),
            )
        elif collection is DragCollection.VARIABLES:
            projects = self._drag_in_prompt_set(
                project_id,
                prompt_set_id,
                lambda prompt_set: prompt_set_service.update_variables(
                    prompt_set, lambda variables: tracker.end(variables, target_id)
                ),
            )
        else:
            projects = self._drag_in_prompt_set(
                project_id,
                prompt_set_id,
                lambda prompt_set: prompt_set_service.update_prompts(
                    prompt_set, lambda prompts: tracker.end(prompts, target_id)
                ),
            )
        # the owner may be unknown, in which case the tracker never saw the end event
        tracker.cancel()
        return self._commit(projects)

    def _drag_in_prompt_set(
        self,
        project_id: Optional[str],
        prompt_set_id: Optional[str],
        update: Callable[[PromptSet], PromptSet],
    ) -> list[Project]:
        return project_service.update_project(
            self._projects,
            project_id or "",
            lambda project: project_service.update_prompt_set(
                project, prompt_set_id or "", update
            ),
        )

    # ==============================
    # Import / export
    # ==============================

    def export_project(self, project_id: str) -> Optional[str]:
        project = self.get_project(project_id)
        if project is None:
            return None
        return import_export_service.export_project(project)

    def export_prompt_set(self, project_id: str, prompt_set_id: str) -> Optional[str]:
        prompt_set = self.get_prompt_set(project_id, prompt_set_id)
        if prompt_set is None:
            return None
        return import_export_service.export_prompt_set(prompt_set)

    def import_project(self, raw) -> ImportProjectResponse:
        """Import an exported project as a new project.

        Args:
            raw (Union[str, bytes, dict]): JSON text or decoded data

        Returns:
            ImportProjectResponse: Response with the resulting snapshot and, on failure, the reason
        """
        response = import_export_service.import_project(self._projects, raw)
        if response.success:
            self._commit(response.projects)
        return response

    def import_prompt_set(self, project_id: str, raw) -> ImportPromptSetResponse:
        """Import an exported prompt set into a project.

        Args:
            project_id (str): ID of the project receiving the prompt set
            raw (Union[str, bytes, dict]): JSON text or decoded data

        Returns:
            ImportPromptSetResponse: Response with the resulting project and, on failure, the reason
        """
        project = self.get_project(project_id)
        if project is None:
            return ImportPromptSetResponse(
                success=False, message=f"Project {project_id} not found"
            )
        response = import_export_service.import_prompt_set(project, raw)
        if response.success and response.project is not None:
            updated = response.project
            self._update_project(project_id, lambda _: updated)
        return response


def _with_prompt_sets(project: Project, prompt_sets: list[PromptSet]) -> Project:
    if prompt_sets is project.prompt_sets:
        return project
    return project.model_copy(update={"prompt_sets": prompt_sets})
