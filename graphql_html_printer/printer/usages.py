"""
Directive usages applied to schema elements.

graphql-core keeps applied directives only on the SDL AST nodes, so usages
are read from ``ast_node`` and ``extension_ast_nodes``. Schemas built in code
(e.g. with graphene) carry ``deprecation_reason`` and ``specified_by_url``
instead; those are surfaced as the matching specified directive usages.
"""

from dataclasses import dataclass, field
from typing import Any

from graphql import (
    DirectiveNode,
    GraphQLArgument,
    GraphQLDeprecatedDirective,
    GraphQLDirective,
    GraphQLSchema,
    GraphQLSpecifiedByDirective,
    StringValueNode,
    Undefined,
    ValueNode,
    value_from_ast,
)

from ..exceptions import SchemaRenderError


@dataclass
class DirectiveUsage:
    """An application of ``directive`` with the argument values as written."""
    directive: GraphQLDirective
    arguments: dict[str, ValueNode] = field(default_factory=dict)

    @property
    def name(self) -> str:
        return self.directive.name

    def non_default_arguments(self) -> list[tuple[str, ValueNode]]:
        """Supplied arguments whose value differs from the declared default."""
        printable = []
        for name, value in self.arguments.items():
            argument = self.directive.args.get(name)
            if argument is None:
                raise SchemaRenderError(
                    f"Directive '@{self.name}' has no argument '{name}'",
                    element_name=self.name,
                )
            if is_default_value(argument, value):
                continue
            printable.append((name, value))
        return printable


def is_default_value(argument: GraphQLArgument, value: ValueNode) -> bool:
    """Whether ``value`` coerces to the argument's declared default."""
    if argument.default_value is Undefined:
        return False
    coerced = value_from_ast(value, argument.type)
    if coerced is Undefined:
        return False
    return coerced == argument.default_value


def collect_directive_usages(element: Any, schema: GraphQLSchema) -> list[DirectiveUsage]:
    """Directive usages applied to a type, field, argument, enum value or schema."""
    nodes = [getattr(element, "ast_node", None)]
    nodes.extend(getattr(element, "extension_ast_nodes", None) or ())

    usages = [
        _usage_from_node(directive_node, schema)
        for node in nodes
        if node is not None
        for directive_node in (getattr(node, "directives", None) or ())
    ]
    applied = {usage.name for usage in usages}

    deprecation_reason = getattr(element, "deprecation_reason", None)
    if deprecation_reason is not None and GraphQLDeprecatedDirective.name not in applied:
        usages.append(DirectiveUsage(
            _schema_directive(schema, GraphQLDeprecatedDirective),
            {"reason": StringValueNode(value=deprecation_reason)},
        ))

    specified_by_url = getattr(element, "specified_by_url", None)
    if specified_by_url and GraphQLSpecifiedByDirective.name not in applied:
        usages.append(DirectiveUsage(
            _schema_directive(schema, GraphQLSpecifiedByDirective),
            {"url": StringValueNode(value=specified_by_url)},
        ))

    return usages


def _usage_from_node(directive_node: DirectiveNode, schema: GraphQLSchema) -> DirectiveUsage:
    name = directive_node.name.value
    directive = schema.get_directive(name)
    if directive is None:
        raise SchemaRenderError(f"Unknown directive '@{name}'", element_name=name)
    return DirectiveUsage(
        directive,
        {argument.name.value: argument.value for argument in directive_node.arguments or ()},
    )


def _schema_directive(schema: GraphQLSchema, specified: GraphQLDirective) -> GraphQLDirective:
    return schema.get_directive(specified.name) or specified
