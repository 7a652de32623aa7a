"""GraphQL object types exposing migration steps for introspection.

Every step type implements the ``MigrationStep`` interface, whose ``type``
field reports the record's class name. Object types are named after the
record class they expose.
"""

from __future__ import annotations

from typing import Any

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLResolveInfo,
    GraphQLString,
)

from graphcool.schema.steps import (
    CreateEnum,
    CreateField,
    CreateModel,
    DeleteEnum,
    DeleteField,
    DeleteModel,
    MigrationStep,
    UpdateEnum,
    UpdateField,
    UpdateModel,
)


def _step_type_name(step: MigrationStep, _info: GraphQLResolveInfo) -> str:
    return type(step).__name__


def _resolve_type(step: Any, _info: GraphQLResolveInfo, _abstract_type: GraphQLInterfaceType) -> str:
    return type(step).__name__


def _field(type_: GraphQLOutputType, attribute: str) -> GraphQLField:
    def resolve(step: MigrationStep, _info: GraphQLResolveInfo) -> Any:
        return getattr(step, attribute)

    return GraphQLField(type_, resolve=resolve)


def _required(type_: GraphQLOutputType) -> GraphQLNonNull:
    return GraphQLNonNull(type_)


_type_field = GraphQLField(_required(GraphQLString), resolve=_step_type_name)

MigrationStepInterface = GraphQLInterfaceType(
    "MigrationStep",
    lambda: {"type": _type_field},
    description="This is a migration step.",
    resolve_type=_resolve_type,
)


def fields_helper(record: type[MigrationStep], **fields: GraphQLField) -> GraphQLObjectType:
    """Declare the object type exposing ``record`` through the step interface."""
    return GraphQLObjectType(
        record.__name__,
        lambda: {"type": _type_field, **fields},
        interfaces=[MigrationStepInterface],
        description="",
        is_type_of=lambda value, _info: isinstance(value, record),
    )


CreateModelType = fields_helper(
    CreateModel,
    name=_field(_required(GraphQLString), "name"),
)

DeleteModelType = fields_helper(
    DeleteModel,
    name=_field(_required(GraphQLString), "name"),
)

UpdateModelType = fields_helper(
    UpdateModel,
    name=_field(_required(GraphQLString), "name"),
    newName=_field(_required(GraphQLString), "new_name"),
)

CreateEnumType = fields_helper(
    CreateEnum,
    name=_field(_required(GraphQLString), "name"),
    values=_field(_required(GraphQLList(_required(GraphQLString))), "values"),
)

DeleteEnumType = fields_helper(
    DeleteEnum,
    name=_field(_required(GraphQLString), "name"),
)

UpdateEnumType = fields_helper(
    UpdateEnum,
    name=_field(_required(GraphQLString), "name"),
    newName=_field(GraphQLString, "new_name"),
    values=_field(GraphQLList(_required(GraphQLString)), "values"),
)

CreateFieldType = fields_helper(
    CreateField,
    model=_field(_required(GraphQLString), "model"),
    name=_field(_required(GraphQLString), "name"),
    typeName=_field(_required(GraphQLString), "type_name"),
    isRequired=_field(_required(GraphQLBoolean), "is_required"),
    isList=_field(_required(GraphQLBoolean), "is_list"),
    isUnique=_field(_required(GraphQLBoolean), "is_unique"),
    relation=_field(GraphQLString, "relation"),
    defaultValue=_field(GraphQLString, "default_value"),
    enum=_field(GraphQLString, "enum"),
)

DeleteFieldType = fields_helper(
    DeleteField,
    model=_field(_required(GraphQLString), "model"),
    name=_field(_required(GraphQLString), "name"),
)

UpdateFieldType = fields_helper(
    UpdateField,
    model=_field(_required(GraphQLString), "model"),
    name=_field(_required(GraphQLString), "name"),
    newName=_field(GraphQLString, "new_name"),
    typeName=_field(GraphQLString, "type_name"),
    isRequired=_field(GraphQLBoolean, "is_required"),
    isList=_field(GraphQLBoolean, "is_list"),
    isUnique=_field(GraphQLBoolean, "is_unique"),
    relation=_field(GraphQLString, "relation"),
    defaultValue=_field(GraphQLString, "default_value"),
    enum=_field(GraphQLString, "enum"),
)

all_types: list[GraphQLInterfaceType | GraphQLObjectType] = [
    MigrationStepInterface,
    CreateModelType,
    DeleteModelType,
    UpdateModelType,
    CreateEnumType,
    DeleteEnumType,
    UpdateEnumType,
    CreateFieldType,
    UpdateFieldType,
    DeleteFieldType,
]
