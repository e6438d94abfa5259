from __future__ import annotations

from datetime import datetime
from itertools import count

import pytest

from school_dashboard.container import build_container
from school_dashboard.seed.fixtures import demo_snapshot
from school_dashboard.store.store import SchoolStore
from school_dashboard.users.model import SessionUser
from school_dashboard.core.enums import Role


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 30, 0)


@pytest.fixture
def id_factory():
    seq = count(1)
    return lambda: f"id{next(seq)}"


@pytest.fixture
def store(fixed_now, id_factory) -> SchoolStore:
    return SchoolStore(demo_snapshot(fixed_now.date()), clock=lambda: fixed_now, id_factory=id_factory)


@pytest.fixture
def container(fixed_now):
    return build_container(seed_demo_data=True, clock=lambda: fixed_now)


@pytest.fixture
def admin() -> SessionUser:
    return SessionUser(id="u-admin", name="Headmaster", email="hm@school.gov.in", role=Role.ADMIN)


@pytest.fixture
def teacher() -> SessionUser:
    return SessionUser(id="u-teacher", name="Mrs. Kavitha S", email="kavitha@school.gov.in", role=Role.TEACHER)


@pytest.fixture
def student() -> SessionUser:
    return SessionUser(id="u-student", name="Karthik Raja", email="karthik@school.gov.in", role=Role.STUDENT)
