"""Tests for input type expansion."""

import pytest

from gql_opgen.core.inputs import InputTypeExpander


@pytest.fixture
def expander(index, csharp_resolver):
    return InputTypeExpander(index, csharp_resolver)


class TestExpand:
    """Tests for expanding input object types."""

    def test_dependencies_first(self, expander):
        classes, name = expander.expand("CreateUserInput")
        assert name == "CreateUserInput"
        assert [c.name for c in classes] == ["AddressInput", "CreateUserInput"]

    def test_property_types(self, expander):
        classes, _ = expander.expand("CreateUserInput")
        create = classes[-1]
        assert create.find_property("name").type_name == "string"
        assert create.find_property("name").required
        assert create.find_property("address").type_name == "AddressInput"
        assert not create.find_property("address").required

    def test_scalar_is_not_expanded(self, expander):
        assert expander.expand("String") == ([], None)
        assert expander.expand("Role") == ([], None)
        assert expander.expand(None) == ([], None)

    def test_self_reference(self, expander):
        classes, _ = expander.expand("UserFilter")
        names = [c.name for c in classes]
        assert names.count("UserFilter") == 1
        user_filter = classes[-1]
        assert user_filter.find_property("and").type_name == "List<UserFilter>"

    def test_mutual_reference(self, expander):
        classes, _ = expander.expand("TreeNode")
        assert [c.name for c in classes] == ["ParentNode", "TreeNode"]
        assert classes[0].find_property("child").type_name == "TreeNode"

    def test_shared_seen_set(self, expander):
        seen = set()
        first, _ = expander.expand("AddressInput", seen)
        second, name = expander.expand("CreateUserInput", seen)
        assert [c.name for c in first] == ["AddressInput"]
        assert [c.name for c in second] == ["CreateUserInput"]
        assert name == "CreateUserInput"

    def test_python_spelling(self, index, python_resolver):
        classes, _ = InputTypeExpander(index, python_resolver).expand("UserFilter")
        user_filter = classes[-1]
        assert user_filter.find_property("and").name == "and_"
        assert user_filter.find_property("and").type_name == "Optional[List[UserFilter]]"
