from datetime import datetime, timezone

import pytest

from employee_admin.domain.mappers.employee_converter import (
    copy_all_fields,
    delete_flag_to_stored,
    delete_flag_to_view,
    is_known_delete_flag,
    is_known_role,
    role_to_stored,
    role_to_view,
    to_persistence,
    to_presentation,
    to_presentation_list,
)
from employee_admin.domain.models import (
    Employee,
    EmployeeView,
    StoredDeleteFlag,
    StoredRole,
    ViewDeleteFlag,
    ViewRole,
)

CREATED = datetime(2024, 4, 1, 9, 0, tzinfo=timezone.utc)
UPDATED = datetime(2024, 4, 2, 18, 30, tzinfo=timezone.utc)


def _employee(admin_flag=StoredRole.GENERAL, delete_flag=StoredDeleteFlag.ACTIVE, **kwargs) -> Employee:
    values = dict(
        id=7,
        code="E001",
        name="Taro Yamada",
        password="hashed",
        admin_flag=admin_flag,
        created_at=CREATED,
        updated_at=UPDATED,
        delete_flag=delete_flag,
    )
    values.update(kwargs)
    return Employee(**values)


def _view(admin_flag=ViewRole.GENERAL, delete_flag=ViewDeleteFlag.ACTIVE, **kwargs) -> EmployeeView:
    values = dict(
        id=7,
        code="E001",
        name="Taro Yamada",
        password="hashed",
        admin_flag=admin_flag,
        created_at=CREATED,
        updated_at=UPDATED,
        delete_flag=delete_flag,
    )
    values.update(kwargs)
    return EmployeeView(**values)


@pytest.mark.parametrize("role", [StoredRole.ADMIN, StoredRole.GENERAL, None])
@pytest.mark.parametrize("delete_flag", [StoredDeleteFlag.ACTIVE, StoredDeleteFlag.DELETED, None])
def test_round_trip_keeps_categorical_fields(role, delete_flag):
    employee = _employee(admin_flag=role, delete_flag=delete_flag)

    restored = to_persistence(to_presentation(employee))

    assert restored.admin_flag is role
    assert restored.delete_flag is delete_flag
    assert restored == employee


def test_to_presentation_of_none_is_none():
    assert to_presentation(None) is None


def test_to_presentation_translates_flags_and_copies_fields():
    view = to_presentation(_employee(admin_flag=StoredRole.ADMIN, delete_flag=StoredDeleteFlag.DELETED))

    assert view == EmployeeView(
        id=7,
        code="E001",
        name="Taro Yamada",
        password="hashed",
        admin_flag=1,
        created_at=CREATED,
        updated_at=UPDATED,
        delete_flag=1,
    )


def test_to_presentation_keeps_absent_flags_absent():
    view = to_presentation(_employee(admin_flag=None, delete_flag=None))

    assert view.admin_flag is None
    assert view.delete_flag is None


def test_to_persistence_keeps_absent_flags_absent():
    employee = to_persistence(_view(admin_flag=None, delete_flag=None))

    assert employee.admin_flag is None
    assert employee.delete_flag is None


def test_to_persistence_accepts_plain_integers():
    employee = to_persistence(_view(admin_flag=1, delete_flag=0))

    assert employee.admin_flag is StoredRole.ADMIN
    assert employee.delete_flag is StoredDeleteFlag.ACTIVE


@pytest.mark.parametrize("raw", [2, -1, 99])
def test_out_of_domain_integers_are_coerced(raw):
    employee = to_persistence(_view(admin_flag=raw, delete_flag=raw))

    assert employee.admin_flag is StoredRole.GENERAL
    assert employee.delete_flag is StoredDeleteFlag.ACTIVE
    assert not is_known_role(raw)
    assert not is_known_delete_flag(raw)


def test_known_flag_values():
    assert is_known_role(0) and is_known_role(1)
    assert is_known_delete_flag(0) and is_known_delete_flag(1)
    assert not is_known_role(None)


def test_flag_conversions_per_direction():
    assert role_to_stored(ViewRole.ADMIN) is StoredRole.ADMIN
    assert role_to_stored(ViewRole.GENERAL) is StoredRole.GENERAL
    assert role_to_stored(None) is None
    assert role_to_view(StoredRole.ADMIN) is ViewRole.ADMIN
    assert role_to_view(StoredRole.GENERAL) is ViewRole.GENERAL
    assert role_to_view(None) is None

    assert delete_flag_to_stored(ViewDeleteFlag.DELETED) is StoredDeleteFlag.DELETED
    assert delete_flag_to_stored(ViewDeleteFlag.ACTIVE) is StoredDeleteFlag.ACTIVE
    assert delete_flag_to_stored(None) is None
    assert delete_flag_to_view(StoredDeleteFlag.DELETED) is ViewDeleteFlag.DELETED
    assert delete_flag_to_view(StoredDeleteFlag.ACTIVE) is ViewDeleteFlag.ACTIVE
    assert delete_flag_to_view(None) is None


def test_to_presentation_list_preserves_order_and_length():
    employees = [
        _employee(id=3, code="E003", admin_flag=StoredRole.ADMIN),
        _employee(id=1, code="E001", admin_flag=None),
        _employee(id=2, code="E002", delete_flag=StoredDeleteFlag.DELETED),
    ]

    views = to_presentation_list(employees)

    assert [v.code for v in views] == ["E003", "E001", "E002"]
    assert views == [to_presentation(e) for e in employees]


def test_to_presentation_list_of_empty_input():
    assert to_presentation_list([]) == []


def test_copy_all_fields_copies_flags_untranslated():
    destination = _employee(id=1, code="OLD", admin_flag=StoredRole.GENERAL)
    source = _view(id=9, code="E009", name="Hanako", password="", admin_flag=1, delete_flag=0)

    copy_all_fields(destination, source)

    assert destination.id == 9
    assert destination.code == "E009"
    assert destination.name == "Hanako"
    assert destination.password == ""
    assert destination.admin_flag == 1
    assert not isinstance(destination.admin_flag, StoredRole)
    assert destination.delete_flag == 0
    assert destination.created_at == CREATED
    assert destination.updated_at == UPDATED
