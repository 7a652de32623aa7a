"""Records exchanged with the deploy API.

These are pass-through models: the remote service owns and validates them,
so unknown fields are ignored and nothing beyond the wire shape is enforced.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ------------------------------------------------------------------
# Projects
# ------------------------------------------------------------------


class Project(_Record):
    name: str
    stage: str


class SimpleProjectInfo(_Record):
    name: str


class PAT(_Record):
    """Permanent auth token of a project."""

    id: str
    name: str
    token: str


class CustomerUser(_Record):
    id: str


class AuthenticateCustomerPayload(_Record):
    token: str
    user: CustomerUser | None = None


# ------------------------------------------------------------------
# Functions
# ------------------------------------------------------------------


class FunctionStats(_Record):
    request_count: int = Field(default=0, alias="requestCount")
    error_count: int = Field(default=0, alias="errorCount")


class FunctionInfo(_Record):
    id: str
    name: str
    type: str | None = None
    stats: FunctionStats | None = None
    typename: str | None = Field(default=None, alias="__typename")


class FunctionLog(_Record):
    id: str
    request_id: str | None = Field(default=None, alias="requestId")
    duration: float | None = None
    status: str | None = None
    timestamp: str | None = None
    message: str | None = None


# ------------------------------------------------------------------
# Migrations
# ------------------------------------------------------------------


class _Step(_Record):
    type: str | None = None


class CreateEnum(_Step):
    kind: Literal["CreateEnum"] = Field(default="CreateEnum", alias="__typename")
    name: str
    values: list[str] = Field(default_factory=list, alias="ce_values")


class CreateField(_Step):
    kind: Literal["CreateField"] = Field(default="CreateField", alias="__typename")
    model: str
    name: str
    type_name: str | None = Field(default=None, alias="cf_typeName")
    is_required: bool = Field(default=False, alias="cf_isRequired")
    is_list: bool = Field(default=False, alias="cf_isList")
    is_unique: bool = Field(default=False, alias="cf_isUnique")
    relation: str | None = Field(default=None, alias="cf_relation")
    default_value: str | None = Field(default=None, alias="cf_defaultValue")
    enum: str | None = Field(default=None, alias="cf_enum")


class CreateModel(_Step):
    kind: Literal["CreateModel"] = Field(default="CreateModel", alias="__typename")
    name: str


class CreateRelation(_Step):
    kind: Literal["CreateRelation"] = Field(default="CreateRelation", alias="__typename")
    name: str
    left_model: str | None = Field(default=None, alias="leftModel")
    right_model: str | None = Field(default=None, alias="rightModel")


class DeleteEnum(_Step):
    kind: Literal["DeleteEnum"] = Field(default="DeleteEnum", alias="__typename")
    name: str


class DeleteField(_Step):
    kind: Literal["DeleteField"] = Field(default="DeleteField", alias="__typename")
    model: str
    name: str


class DeleteModel(_Step):
    kind: Literal["DeleteModel"] = Field(default="DeleteModel", alias="__typename")
    name: str


class DeleteRelation(_Step):
    kind: Literal["DeleteRelation"] = Field(default="DeleteRelation", alias="__typename")
    name: str


class UpdateEnum(_Step):
    kind: Literal["UpdateEnum"] = Field(default="UpdateEnum", alias="__typename")
    name: str
    new_name: str | None = Field(default=None, alias="newName")
    values: list[str] | None = None


class UpdateField(_Step):
    kind: Literal["UpdateField"] = Field(default="UpdateField", alias="__typename")
    model: str
    name: str
    new_name: str | None = Field(default=None, alias="newName")
    type_name: str | None = Field(default=None, alias="typeName")
    is_required: bool | None = Field(default=None, alias="isRequired")
    is_list: bool | None = Field(default=None, alias="isList")
    is_unique: bool | None = Field(default=None, alias="isUnique")
    relation: str | None = None
    default_value: str | None = Field(default=None, alias="default")
    enum: str | None = None


class UpdateModel(_Step):
    kind: Literal["UpdateModel"] = Field(default="UpdateModel", alias="__typename")
    name: str
    new_name: str | None = Field(default=None, alias="um_newName")


MigrationStep = Annotated[
    Union[
        CreateEnum,
        CreateField,
        CreateModel,
        CreateRelation,
        DeleteEnum,
        DeleteField,
        DeleteModel,
        DeleteRelation,
        UpdateEnum,
        UpdateField,
        UpdateModel,
    ],
    Field(discriminator="kind"),
]


class Migration(_Record):
    revision: int
    steps: list[MigrationStep] = Field(default_factory=list)
    has_been_applied: bool = Field(default=False, alias="hasBeenApplied")


class MigrationStatus(_Record):
    revision: int
    has_been_applied: bool = Field(default=False, alias="hasBeenApplied")

    def reached(self, revision: int) -> bool:
        """Whether ``revision`` has been reached and applied."""
        return self.revision >= revision and self.has_been_applied


class DeployError(_Record):
    type: str
    field: str | None = None
    description: str


class DeployPayload(_Record):
    errors: list[DeployError] = Field(default_factory=list)
    migration: Migration | None = None
