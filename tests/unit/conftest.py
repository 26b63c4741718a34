import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORY_METHODS = {
    "companies": ["get_by_id"],
    "profiles": ["get_by_id", "get_in_company", "get_active_role_assignments"],
    "employees": [
        "get_by_id",
        "get_by_id_for_update",
        "get_by_user_id",
        "get_by_email",
        "list_by_company",
        "count_active",
        "count_by_status",
        "create",
        "update",
    ],
    "tasks": [
        "get_by_id",
        "get_by_ids",
        "list_by_company",
        "get_max_order_sequence",
        "create",
        "update",
    ],
    "assignments": [
        "get_by_id",
        "list_for_employee",
        "get_assigned_task_ids",
        "create_many",
        "update",
    ],
    "invitations": ["get_by_token_hash", "get_open_by_employee", "create", "update"],
    "audit_events": ["create", "get_by_company_paginated"],
}


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repository, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock())
        setattr(uow, repository, repo)

    # Writes hand back what they were given
    uow.employees.create.side_effect = lambda entity: entity
    uow.employees.update.side_effect = lambda entity: entity
    uow.tasks.create.side_effect = lambda entity: entity
    uow.tasks.update.side_effect = lambda entity: entity
    uow.assignments.create_many.side_effect = lambda entities: entities
    uow.assignments.update.side_effect = lambda entity: entity
    uow.invitations.create.side_effect = lambda entity: entity
    uow.invitations.update.side_effect = lambda entity: entity
    uow.audit_events.create.side_effect = lambda entity: entity
    return uow
