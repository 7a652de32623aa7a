from __future__ import annotations

from graphcool.models import (
    DeployPayload,
    FunctionInfo,
    Migration,
    MigrationStatus,
    UpdateField,
)


def test_migration_status_reached() -> None:
    assert MigrationStatus.model_validate({"revision": 3, "hasBeenApplied": True}).reached(3)
    assert MigrationStatus.model_validate({"revision": 4, "hasBeenApplied": True}).reached(3)
    assert not MigrationStatus.model_validate({"revision": 3, "hasBeenApplied": False}).reached(3)
    assert not MigrationStatus.model_validate({"revision": 2, "hasBeenApplied": True}).reached(3)


def test_update_field_uses_unaliased_wire_names() -> None:
    step = UpdateField.model_validate(
        {
            "__typename": "UpdateField",
            "type": "UpdateField",
            "model": "Post",
            "name": "title",
            "newName": "headline",
            "isUnique": True,
            "default": "Untitled",
        }
    )

    assert step.new_name == "headline"
    assert step.is_unique is True
    assert step.default_value == "Untitled"
    assert step.is_list is None


def test_migration_steps_dispatch_on_typename() -> None:
    migration = Migration.model_validate(
        {
            "revision": 1,
            "hasBeenApplied": True,
            "steps": [
                {"__typename": "CreateEnum", "type": "CreateEnum", "name": "Role", "ce_values": ["A", "B"]},
                {"__typename": "DeleteRelation", "type": "DeleteRelation", "name": "PostAuthor"},
                {
                    "__typename": "CreateRelation",
                    "type": "CreateRelation",
                    "name": "PostAuthor",
                    "leftModel": "Post",
                    "rightModel": "User",
                },
            ],
        }
    )

    assert [step.kind for step in migration.steps] == ["CreateEnum", "DeleteRelation", "CreateRelation"]
    assert migration.steps[0].values == ["A", "B"]
    assert migration.has_been_applied is True


def test_deploy_payload_defaults() -> None:
    payload = DeployPayload.model_validate({})

    assert payload.errors == []
    assert payload.migration is None


def test_records_ignore_unknown_fields() -> None:
    function = FunctionInfo.model_validate({"id": "f", "name": "hook", "isActive": True})

    assert function.stats is None
    assert function.name == "hook"
