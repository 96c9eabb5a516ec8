import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from promptdeck_commons.config_schema import (
    SPLIT_RATIO_DEFAULT,
    SPLIT_RATIO_MAX,
    SPLIT_RATIO_MIN,
)


def clamp_split_ratio(split_ratio: float) -> float:
    """Clamp the editor split into [20, 80]; NaN falls back to the default split"""
    if math.isnan(split_ratio):
        return SPLIT_RATIO_DEFAULT
    return min(max(float(split_ratio), SPLIT_RATIO_MIN), SPLIT_RATIO_MAX)


# ===============================
# Data Models
# ===============================

# Snapshots are immutable: every mutation builds new models with model_copy
# and shares the untouched siblings with the previous snapshot.


class Variable(BaseModel):
    """Named binding used to fill ``{name}`` placeholders"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(min_length=1)
    value: str = ""


class Prompt(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    content: str = ""


class ViewPreferences(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    split_ratio: float = Field(
        default=SPLIT_RATIO_DEFAULT,
        alias="splitRatio",
        validation_alias=AliasChoices("splitRatio", "splitPosition", "split_ratio"),
    )
    variables_panel_visible: bool = Field(
        default=True,
        alias="variablesPanelVisible",
        validation_alias=AliasChoices(
            "variablesPanelVisible", "variables_panel_visible"
        ),
    )
    card_view: bool = Field(
        default=False,
        alias="cardView",
        validation_alias=AliasChoices("cardView", "card_view"),
    )

    @field_validator("split_ratio")
    @classmethod
    def _clamp_split_ratio(cls, value: float) -> float:
        return clamp_split_ratio(value)


class PromptSet(BaseModel):
    """Named bundle of variables and prompts sharing one substitution context"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    variables: list[Variable] = Field(default_factory=list)
    prompts: list[Prompt] = Field(default_factory=list)
    # older exports call this block "uiPreferences"
    view_preferences: ViewPreferences = Field(
        default_factory=ViewPreferences,
        alias="viewPreferences",
        validation_alias=AliasChoices(
            "viewPreferences", "uiPreferences", "view_preferences"
        ),
    )


class Project(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    prompt_sets: list[PromptSet] = Field(
        default_factory=list,
        alias="promptSets",
        validation_alias=AliasChoices("promptSets", "prompt_sets"),
    )
