"""Pytest configuration and fixtures for neo-authz tests."""

import pytest
from unittest.mock import AsyncMock

from neo_authz.config.constants import HIDDEN_PERMISSIONS, HIGH_RISK_PERMISSIONS
from neo_authz.config.settings import AuthzSettings
from neo_authz.features.catalog import load_catalog
from neo_authz.features.grants import (
    BasicGrantSet,
    CategoryMapper,
    GranularGrantSet,
    Principal,
)
from neo_authz.features.permissions import RoleResolver
from neo_authz.features.presets import PresetEngine, PresetRegistry


def _record(code, subcategory=None, risk_level="low", **overrides):
    record = {
        "id": None,
        "code": code,
        "name": code,
        "name_ko": "",
        "description": None,
        "category": code.split(":", 1)[0],
        "subcategory": subcategory,
        "risk_level": risk_level,
        "requires_approval": False,
        "is_active": True,
        "display_order": 0,
    }
    record.update(overrides)
    return record


@pytest.fixture
def catalog_records():
    """Raw catalog rows as returned by the catalog source."""
    records = [
        _record("service:view", "view", name_ko="서비스 조회"),
        _record("service:create", "create", name_ko="서비스 생성"),
        _record("service:update", "update", name_ko="서비스 수정"),
        _record("service:delete", "delete", "critical", name_ko="서비스 삭제"),
        _record("service:build:view", "view", name_ko="빌드 조회"),
        _record("service:build:execute", "execute", "medium", name_ko="빌드 실행",
                description="Run a pipeline build"),
        _record("service:operate:restart", "execute", "medium", name_ko="서비스 재시작"),
        _record("service:operate:logs", "view", name_ko="로그 조회"),
        _record("service:operate:exec", "execute", "critical", name_ko="컨테이너 접속"),
        _record("service:build:cancel", "execute", name_ko="빌드 취소"),
        _record("infra:view", "view", name_ko="인프라 조회"),
        _record("infra:k8s:manage", "manage", "high", name_ko="쿠버네티스 관리"),
        _record("infra:docker:view", "view", name_ko="도커 조회"),
        _record("backup:view", "view", name_ko="백업 조회"),
        _record("backup:create", "create", name_ko="백업 생성"),
        _record("backup:restore", "execute", "critical", requires_approval=True,
                name_ko="백업 복구"),
        _record("backup:download", "other", name_ko="백업 다운로드"),
        _record("device:view", "view", name_ko="장비 조회"),
        _record("device:create", "create", name_ko="장비 생성"),
        _record("database:view", "view", name_ko="DB 조회"),
        _record("database:test", "execute", name_ko="연결 테스트"),
        _record("database:migrate:execute", "execute", "critical", name_ko="마이그레이션"),
        _record("device:delete", "delete", "high", is_active=False),
        _record("storage:view", "view"),
        _record("database:update", None, name_ko="DB 수정"),
    ]
    for index, record in enumerate(records, start=1):
        record["id"] = index
        record["display_order"] = index
    return records


@pytest.fixture
def catalog(catalog_records):
    """Catalog snapshot built from the sample rows with the default hidden list."""
    return load_catalog(catalog_records, hidden_permissions=HIDDEN_PERMISSIONS)


@pytest.fixture
def settings():
    """Settings with defaults only (no .env file)."""
    return AuthzSettings(_env_file=None)


@pytest.fixture
def mapper():
    return CategoryMapper()


@pytest.fixture
def resolver(mapper):
    """Resolver with the shipped high-risk list and deny-unknown policy."""
    return RoleResolver(high_risk_permissions=HIGH_RISK_PERMISSIONS, mapper=mapper)


@pytest.fixture
def preset_engine(mapper):
    return PresetEngine(registry=PresetRegistry.default(), mapper=mapper)


@pytest.fixture
def owner():
    return Principal(role="Owner", grants=GranularGrantSet())


@pytest.fixture
def manager():
    return Principal(role="Manager", grants=GranularGrantSet())


@pytest.fixture
def member():
    """Member with two explicit grants, one of them a hidden code."""
    return Principal(
        role="Member",
        grants=GranularGrantSet.of("service:view", "backup:download"),
    )


@pytest.fixture
def basic_member():
    """Member holding the basic 'device' grant."""
    return Principal(role="Member", grants=BasicGrantSet.of("device"))


@pytest.fixture
def mock_catalog_source(catalog_records):
    """Catalog source whose fetch is an AsyncMock returning the sample rows."""
    source = AsyncMock()
    source.fetch_permissions = AsyncMock(return_value=catalog_records)
    return source
