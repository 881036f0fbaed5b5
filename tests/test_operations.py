"""Tests for operation wrapper emission."""

import pytest
from graphql import parse, print_ast

from gql_opgen.core.operations import OperationWrapperEmitter, operation_source
from gql_opgen.core.typed_selection import InvalidOperationTypeError, collect_fragments


@pytest.fixture
def emit(index, csharp_resolver):
    """Emit wrappers for every operation of a document."""

    def _emit(text, resolver=None):
        document = parse(text)
        emitter = OperationWrapperEmitter(index, resolver or csharp_resolver)
        fragments = collect_fragments(document)
        return [
            emitter.emit(d, fragments, "ops.graphql")
            for d in document.definitions
            if d.kind == "operation_definition"
        ]

    return _emit


class TestGetUser:
    """The basic query wrapper."""

    def test_wrapper(self, emit, get_user):
        (wrapper,) = emit(get_user)
        assert wrapper.name == "queryGetUser"
        assert wrapper.operation_type == "query"
        assert wrapper.operation_name == "GetUser"
        assert wrapper.document_path == "ops.graphql"
        assert wrapper.response.name == "Response"
        assert wrapper.response.find_class("User") is not None

    def test_request(self, emit, get_user):
        (wrapper,) = emit(get_user)
        assert wrapper.request.name == "Request"
        (prop,) = wrapper.request.properties
        assert prop.name == "id"
        assert prop.type_name == "string"
        assert prop.required
        assert wrapper.input_classes == []

    def test_source_is_verbatim(self, emit, get_user):
        (wrapper,) = emit(get_user)
        assert wrapper.source == get_user.rstrip("\n")

    def test_source_keeps_whitespace(self, emit):
        text = 'query   Spaced {\n\tuser(id: "1")   {  id }\n}'
        (wrapper,) = emit(text)
        assert wrapper.source == text


class TestOperationKinds:
    """Tests for mutations, subscriptions and anonymous operations."""

    def test_mutation_with_input(self, emit):
        (wrapper,) = emit(
            "mutation CreateUser($input: CreateUserInput!) { createUser(input: $input) { id } }"
        )
        assert wrapper.name == "mutationCreateUser"
        assert [c.name for c in wrapper.input_classes] == ["AddressInput", "CreateUserInput"]
        assert wrapper.request.find_property("input").type_name == "CreateUserInput"
        assert wrapper.response.find_property("createUser").required

    def test_subscription(self, emit):
        (wrapper,) = emit("subscription OnUser { userCreated { id } }")
        assert wrapper.name == "subscriptionOnUser"
        assert wrapper.request.properties == []

    def test_anonymous_is_skipped(self, emit):
        assert emit('{ user(id: "1") { id } }') == [None]

    def test_input_classes_not_repeated(self, emit):
        (wrapper,) = emit(
            "query Q($a: UserFilter, $b: UserFilter, $c: TreeNode) { users(filter: $a) { id } }"
        )
        names = [c.name for c in wrapper.input_classes]
        assert sorted(names) == ["ParentNode", "TreeNode", "UserFilter"]
        assert len(wrapper.request.properties) == 3

    def test_invalid_kind(self, index, csharp_resolver):
        document = parse("query Q { x }")
        operation = document.definitions[0]
        operation.operation = "fetch"
        with pytest.raises(InvalidOperationTypeError):
            OperationWrapperEmitter(index, csharp_resolver).emit(operation)


class TestVariables:
    """Tests for Request properties."""

    def test_reserved_variable_name(self, emit):
        (wrapper,) = emit('query Q($case: String) { user(id: "1") { id } }')
        prop = wrapper.request.properties[0]
        assert prop.name == "@case"
        assert prop.graphql_name == "case"
        assert not prop.required

    def test_list_variable(self, emit, python_resolver):
        (wrapper,) = emit('query Q($ids: [ID!]!) { user(id: "1") { id } }', python_resolver)
        assert wrapper.request.properties[0].type_name == "List[str]"


class TestFragmentPayload:
    """Tests for the wire payload of operations using fragments."""

    DOCUMENT = (
        'query Q { user(id: "1") { ...UserParts } }\n'
        "\n"
        "fragment Unused on User { id }\n"
        "\n"
        "fragment UserParts on User { id manager { ...ManagerParts } }\n"
        "\n"
        "fragment ManagerParts on User { name }\n"
    )

    def test_used_fragments_are_appended(self, emit):
        (wrapper,) = emit(self.DOCUMENT)
        assert wrapper.source == (
            'query Q { user(id: "1") { ...UserParts } }\n'
            "\n"
            "fragment UserParts on User { id manager { ...ManagerParts } }\n"
            "\n"
            "fragment ManagerParts on User { name }"
        )

    def test_fragment_fields_are_typed(self, emit):
        (wrapper,) = emit(self.DOCUMENT)
        user_class = wrapper.response.find_class("User")
        assert [p.name for p in user_class.properties] == ["id", "manager"]
        assert user_class.find_class("ManagerUser").find_property("name").type_name == "string"

    def test_source_without_location(self):
        document = parse('query Q { user(id: "1") { id } }', no_location=True)
        operation = document.definitions[0]
        assert operation_source(operation) == print_ast(operation)
