"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import bcrypt
import pytest
import pytest_asyncio

from ecosystem_api.auth.tokens import SessionTokenIssuer
from ecosystem_api.store import InMemoryRecordStore, SqlRecordStore

TEST_SECRET = "test-secret-key-for-session-tokens"


def fast_hash(password: str) -> str:
    """bcrypt hash with the lowest cost, for seeding users."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


@pytest.fixture
def issuer() -> SessionTokenIssuer:
    return SessionTokenIssuer(TEST_SECRET)


@pytest.fixture
def sample_records() -> dict[str, list[dict]]:
    """A small ecosystem: two core units with budgets, a roadmap and users."""
    return {
        "core_units": [
            {"id": 1, "code": "SES-001", "name": "Sustainable Ecosystem Scaling",
             "category": "{Technical,Growth}", "short_code": "SES"},
            {"id": 2, "code": "COM-001", "name": "Governance Communications",
             "category": None, "short_code": "COM"},
        ],
        "budget_statements": [
            {"id": 10, "cu_id": 1, "cu_code": "SES-001", "month": "2022-05-01",
             "budget_status": "Final"},
            {"id": 11, "cu_id": 2, "cu_code": "COM-001", "month": "2022-05-01",
             "budget_status": "Draft"},
            {"id": 12, "cu_id": 1, "cu_code": "SES-001", "month": "2022-06-01",
             "budget_status": "Draft"},
        ],
        "budget_statement_ftes": [
            {"id": 1, "budget_statement_id": 10, "month": "2022-05-01", "ftes": 12.5},
        ],
        "budget_statement_wallets": [
            {"id": 20, "budget_statement_id": 10, "name": "Permanent Team",
             "address": "0x0001"},
            {"id": 21, "budget_statement_id": 10, "name": "Incubation", "address": "0x0002"},
        ],
        "budget_statement_line_items": [
            {"id": 30, "budget_statement_wallet_id": 20, "position": 1,
             "budget_category": "Compensation", "actual": 1000.0},
            {"id": 31, "budget_statement_wallet_id": 21, "position": 1,
             "budget_category": "Travel", "actual": 50.0},
            {"id": 32, "budget_statement_wallet_id": 20, "position": 2,
             "budget_category": "Software", "actual": 200.0},
            {"id": 33, "budget_statement_wallet_id": 20, "position": 3,
             "budget_category": "Gas", "actual": 5.0},
        ],
        "roadmaps": [
            {"id": 40, "owner_cu_id": 1, "roadmap_code": "SES-RM-1",
             "roadmap_name": "Incubation Program", "roadmap_status": "InProgress"},
        ],
        "stakeholders": [{"id": 50, "name": "Alice", "stakeholder_cu_code": "SES-001"}],
        "stakeholder_roles": [{"id": 60, "stakeholder_role_name": "Owner"}],
        "roadmap_stakeholders": [
            {"id": 70, "stakeholder_id": 50, "roadmap_id": 40, "stakeholder_role_id": 60},
        ],
        "tasks": [{"id": 80, "task_name": "Launch", "task_status": "Done"}],
        "milestones": [{"id": 90, "roadmap_id": 40, "task_id": 80}],
        "reviews": [
            {"id": 100, "task_id": 80, "review_date": "2022-06-01", "review_outcome": "Green"},
        ],
        "users": [
            {"id": 1, "user_name": "admin", "password": fast_hash("admin-pass")},
            {"id": 2, "user_name": "member", "password": fast_hash("member-pass")},
        ],
        "user_roles": [
            {"id": 1, "user_id": 1, "role_id": 1, "resource": "CoreUnit", "resource_id": 1},
            {"id": 2, "user_id": 2, "role_id": 2, "resource": "CoreUnit", "resource_id": 2},
        ],
        "user_permissions": [
            {"id": 1, "user_id": 1, "resource": "System", "permission": "Manage"},
        ],
    }


@pytest.fixture
def memory_store(sample_records: dict[str, list[dict]]) -> InMemoryRecordStore:
    """In-memory store seeded with the sample ecosystem."""
    return InMemoryRecordStore(sample_records)


@pytest_asyncio.fixture
async def sql_store(tmp_path: Path) -> AsyncGenerator[SqlRecordStore, None]:
    """SQL store over a fresh SQLite file with every table created."""
    from sqlalchemy.ext.asyncio import create_async_engine

    from ecosystem_api.database.connection import create_tables

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ecosystem.db'}")
    await create_tables(engine)
    yield SqlRecordStore(engine)
    await engine.dispose()


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
