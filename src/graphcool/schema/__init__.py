"""GraphQL type declarations for migration steps."""

from graphcool.schema.migration_steps import (
    CreateEnumType,
    CreateFieldType,
    CreateModelType,
    DeleteEnumType,
    DeleteFieldType,
    DeleteModelType,
    MigrationStepInterface,
    UpdateEnumType,
    UpdateFieldType,
    UpdateModelType,
    all_types,
    fields_helper,
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

__all__ = [
    "CreateEnum",
    "CreateEnumType",
    "CreateField",
    "CreateFieldType",
    "CreateModel",
    "CreateModelType",
    "DeleteEnum",
    "DeleteEnumType",
    "DeleteField",
    "DeleteFieldType",
    "DeleteModel",
    "DeleteModelType",
    "MigrationStep",
    "MigrationStepInterface",
    "UpdateEnum",
    "UpdateEnumType",
    "UpdateField",
    "UpdateFieldType",
    "UpdateModel",
    "UpdateModelType",
    "all_types",
    "fields_helper",
]
