"""Tests for the schema index."""

from gql_opgen.core.schema_index import SchemaIndex


class TestLookups:
    """Tests for type lookups by name."""

    def test_find_object_type(self, index):
        user = index.find_object_type("User")
        assert user is not None
        assert user.name.value == "User"

    def test_kinds_are_separate(self, index):
        assert index.find_input_type("User") is None
        assert index.find_object_type("CreateUserInput") is None
        assert index.find_input_type("CreateUserInput") is not None

    def test_none_name(self, index):
        assert index.find_object_type(None) is None
        assert index.find_input_type(None) is None
        assert index.find_fields(None) is None

    def test_find_fields_of_object(self, index):
        fields = index.find_fields("User")
        assert "manager" in fields
        assert fields["id"].type.kind == "non_null_type"

    def test_find_fields_of_interface(self, index):
        assert list(index.find_fields("Node")) == ["id"]

    def test_union_has_no_fields(self, index):
        assert index.find_fields("SearchResult") is None

    def test_find_enum_type(self, index):
        role = index.find_enum_type("Role")
        assert [v.name.value for v in role.values] == ["ADMIN", "MEMBER"]
        assert index.find_enum_type("User") is None
        assert index.find_enum_type(None) is None

    def test_find_scalar_type(self, index):
        assert index.find_scalar_type("Cursor") is not None
        assert index.find_scalar_type("String") is None
        assert index.find_scalar_type(None) is None

    def test_from_sdl(self):
        index = SchemaIndex.from_sdl("type Query { ping: String }")
        assert index.find_object_type("Query") is not None


class TestRootTypes:
    """Tests for operation root type lookup."""

    def test_default_root_names(self, index):
        assert index.root_type("query").name.value == "Query"
        assert index.root_type("mutation").name.value == "Mutation"
        assert index.root_type("subscription").name.value == "Subscription"

    def test_schema_definition_roots(self):
        index = SchemaIndex.from_sdl(
            """
            schema { query: RootQuery }
            type RootQuery { ping: String }
            """
        )
        assert index.root_type("query").name.value == "RootQuery"
        assert index.root_type("mutation") is None
