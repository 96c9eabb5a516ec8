"""
Unit tests for the variable store operations
"""

import pytest

from promptdeck_commons.api_schema.prompt_schema import Variable
from promptdeck.services.variable_service import (
    DEFAULT_VARIABLE_NAME,
    add_variable,
    clear_all_values,
    remove_variable,
    rename_variable,
    reorder_variables,
    set_variable_value,
)


@pytest.fixture
def variables():
    return [
        Variable(id="v1", name="name", value="Ana"),
        Variable(id="v2", name="role", value="guide"),
        Variable(id="v3", name="task", value=""),
    ]


class TestVariableService:
    def test_add_variable_appends_default(self, variables):
        result = add_variable(variables)
        assert len(result) == 4
        added = result[-1]
        assert added.name == DEFAULT_VARIABLE_NAME
        assert added.value == ""
        assert added.id not in {variable.id for variable in variables}
        assert result[:3] == variables

    def test_add_to_empty_store(self):
        assert len(add_variable([])) == 1

    def test_add_then_remove_restores(self, variables):
        added = add_variable(variables)
        assert remove_variable(added, added[-1].id) == variables

    def test_rename_variable(self, variables):
        result = rename_variable(variables, "v2", "job")
        assert result[1].name == "job"
        assert result[1].value == "guide"
        assert result[0] is variables[0]

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_rename_rejects_blank_names(self, variables, blank):
        assert rename_variable(variables, "v1", blank) is variables

    def test_rename_unknown_id_is_noop(self, variables):
        assert rename_variable(variables, "missing", "x") is variables

    def test_set_variable_value(self, variables):
        result = set_variable_value(variables, "v3", "write docs")
        assert result[2].value == "write docs"
        assert variables[2].value == ""

    def test_set_empty_value_is_allowed(self, variables):
        assert set_variable_value(variables, "v1", "")[0].value == ""

    def test_set_value_unknown_id_is_noop(self, variables):
        assert set_variable_value(variables, "missing", "x") is variables

    def test_remove_variable(self, variables):
        result = remove_variable(variables, "v2")
        assert [variable.id for variable in result] == ["v1", "v3"]

    def test_remove_unknown_is_noop(self, variables):
        assert remove_variable(variables, "missing") is variables

    def test_store_may_become_empty(self):
        single = [Variable(id="v1", name="a")]
        assert remove_variable(single, "v1") == []

    def test_clear_all_values_keeps_names_ids_and_order(self, variables):
        result = clear_all_values(variables)
        assert [variable.value for variable in result] == ["", "", ""]
        assert [(v.id, v.name) for v in result] == [(v.id, v.name) for v in variables]

    def test_clear_all_values_when_already_empty(self):
        empty_values = [Variable(id="v1", name="a"), Variable(id="v2", name="b")]
        assert clear_all_values(empty_values) is empty_values

    def test_reorder_variables(self, variables):
        result = reorder_variables(variables, 2, 0)
        assert [variable.id for variable in result] == ["v3", "v1", "v2"]

    def test_reorder_out_of_range_is_noop(self, variables):
        assert reorder_variables(variables, 0, 10) is variables
        assert reorder_variables(variables, -2, 1) is variables
