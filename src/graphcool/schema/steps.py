"""Migration-step records as tracked by the deploy service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MigrationStep:
    """Base of all migration steps; the class name is the step type."""


@dataclass(frozen=True)
class CreateModel(MigrationStep):
    name: str


@dataclass(frozen=True)
class DeleteModel(MigrationStep):
    name: str


@dataclass(frozen=True)
class UpdateModel(MigrationStep):
    name: str
    new_name: str


@dataclass(frozen=True)
class CreateEnum(MigrationStep):
    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class DeleteEnum(MigrationStep):
    name: str


@dataclass(frozen=True)
class UpdateEnum(MigrationStep):
    name: str
    new_name: str | None = None
    values: tuple[str, ...] | None = None


@dataclass(frozen=True)
class CreateField(MigrationStep):
    model: str
    name: str
    type_name: str
    is_required: bool
    is_list: bool
    is_unique: bool
    relation: str | None = None
    default_value: str | None = None
    enum: str | None = None


@dataclass(frozen=True)
class DeleteField(MigrationStep):
    model: str
    name: str


@dataclass(frozen=True)
class UpdateField(MigrationStep):
    """Changes to a field; ``None`` means the attribute is left as is.

    ``relation``, ``default_value`` and ``enum`` can also be cleared, which
    is reported the same way as an unchanged value.
    """

    model: str
    name: str
    new_name: str | None = None
    type_name: str | None = None
    is_required: bool | None = None
    is_list: bool | None = None
    is_unique: bool | None = None
    relation: str | None = None
    default_value: str | None = None
    enum: str | None = None
