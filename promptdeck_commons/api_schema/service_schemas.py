from typing import Optional

from pydantic import BaseModel

from promptdeck_commons.api_schema.prompt_schema import Project


# ===============================
# Import responses
# ===============================

# On failure the untouched input snapshot is returned alongside the message,
# so callers can always re-render from the response.


class ImportPromptSetResponse(BaseModel):
    success: bool
    project: Optional[Project] = None
    imported_prompt_set_id: str = ""
    message: str = ""


class ImportProjectResponse(BaseModel):
    success: bool
    projects: list[Project]
    imported_project_id: str = ""
    message: str = ""
