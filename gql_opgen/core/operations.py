"""Operation wrapper generation.

For each named operation this produces the response class tree, the
request class, the operation metadata and the literal source text that is
sent over the wire, e.g. for ``query GetUser($id: ID!) { ... }``:

    queryGetUser
        Response      (selection set of the operation)
        Request       (one property per variable)
        OperationType "query"
        Operation     the operation text, byte for byte
"""

import logging

from graphql import (
    FragmentDefinitionNode,
    FragmentSpreadNode,
    NonNullTypeNode,
    OperationDefinitionNode,
    SelectionSetNode,
    VariableDefinitionNode,
    print_ast,
)

from .emitter import ClassEmitter
from .inputs import InputTypeExpander
from .ir import IRClass, IROperationWrapper, IRProperty
from .resolver import TypeNameResolver, UnresolvedType, named_type_name
from .schema_index import SchemaIndex
from .typed_selection import SelectionTypeAnnotator, operation_type_of

log = logging.getLogger(__name__)


def node_source(node) -> str:
    """Return the exact source text of a node, or its printed form without a location."""
    loc = node.loc
    if loc is None or loc.source is None:
        return print_ast(node)
    return loc.source.body[loc.start:loc.end]


def used_fragment_names(
    selection_set: SelectionSetNode | None,
    fragments: dict[str, FragmentDefinitionNode],
    found: list[str] | None = None,
) -> list[str]:
    """Return fragments used by a selection set, transitively, in order of first use."""
    if found is None:
        found = []
    if selection_set is None:
        return found
    for selection in selection_set.selections:
        if isinstance(selection, FragmentSpreadNode):
            name = selection.name.value
            if name in fragments and name not in found:
                found.append(name)
                used_fragment_names(fragments[name].selection_set, fragments, found)
        else:
            used_fragment_names(selection.selection_set, fragments, found)
    return found


def operation_source(
    operation: OperationDefinitionNode,
    fragments: dict[str, FragmentDefinitionNode] | None = None,
) -> str:
    """Return the wire payload: the operation text followed by the fragments it uses."""
    fragments = fragments or {}
    parts = [node_source(operation)]
    for name in used_fragment_names(operation.selection_set, fragments):
        parts.append(node_source(fragments[name]))
    return "\n\n".join(parts)


class OperationWrapperEmitter:
    """Builds an IROperationWrapper for each named operation."""

    def __init__(self, index: SchemaIndex, resolver: TypeNameResolver):
        self.index = index
        self.resolver = resolver
        self.classes = ClassEmitter(resolver)
        self.inputs = InputTypeExpander(index, resolver)

    def emit(
        self,
        operation: OperationDefinitionNode,
        fragments: dict[str, FragmentDefinitionNode] | None = None,
        document_path: str = "",
    ) -> IROperationWrapper | None:
        """Emit the wrapper for an operation.

        Raises:
            InvalidOperationTypeError: If the operation kind is not query,
                mutation or subscription.

        Returns:
            None for anonymous operations, which have no stable name.
        """
        operation_type = operation_type_of(operation)
        if operation.name is None:
            log.debug("Skipping anonymous %s in %s", operation_type, document_path or "<document>")
            return None

        fragments = fragments or {}
        typed_fields = SelectionTypeAnnotator(self.index, fragments).annotate_operation(operation)
        response = self.classes.emit_for_parent(operation, typed_fields)
        request, input_classes = self.emit_request(operation.variable_definitions or ())

        operation_name = operation.name.value
        return IROperationWrapper(
            name=f"{operation_type}{operation_name}",
            operation_type=operation_type,
            operation_name=operation_name,
            source=operation_source(operation, fragments),
            response=response,
            request=request,
            input_classes=input_classes,
            document_path=document_path,
        )

    def emit_request(self, variables) -> tuple[IRClass, list[IRClass]]:
        """Emit the Request class and the input classes its properties need."""
        request = IRClass(name="Request")
        input_classes: list[IRClass] = []
        seen: set[str] = set()
        for variable in variables:
            classes, _ = self.inputs.expand(named_type_name(variable.type), seen)
            input_classes.extend(classes)
            request.properties.append(self._variable_property(variable))
        return request, input_classes

    def _variable_property(self, variable: VariableDefinitionNode) -> IRProperty:
        var_name = variable.variable.name.value
        name = self.resolver.escape(var_name)
        resolved = self.resolver.resolve(variable.type, provenance="variable")
        if isinstance(resolved, UnresolvedType):
            return IRProperty(
                name=name,
                type_name=self.resolver.target.any_type,
                graphql_name=var_name,
                comment=resolved.detail,
            )
        return IRProperty(
            name=name,
            type_name=resolved,
            graphql_name=var_name,
            required=isinstance(variable.type, NonNullTypeNode),
        )
