from pathlib import Path

import pytest

from employee_admin.domain.models import EmployeeView
from employee_admin.infra.sources.csv_utils import CsvFormatError, parseNull
from employee_admin.infra.sources.employee_csv_reader import EmployeeCsvSource


def _write(path: Path, lines: list[str]) -> str:
    path.write_text("\n".join(lines), encoding="utf-8")
    return str(path)


def test_reads_rows_with_header(tmp_path):
    csv_path = _write(
        tmp_path / "employees.csv",
        [
            "id,code,name,password,admin_flag,delete_flag",
            ",E001,Taro Yamada,secret,1,0",
            "5,E002, Hanako ,,null,",
        ],
    )

    rows = list(EmployeeCsvSource(csv_path, has_header=True))

    assert rows == [
        (2, EmployeeView(id=None, code="E001", name="Taro Yamada", password="secret", admin_flag=1, delete_flag=0)),
        (3, EmployeeView(id=5, code="E002", name="Hanako", password=None, admin_flag=None, delete_flag=None)),
    ]


def test_header_subset_leaves_missing_columns_absent(tmp_path):
    csv_path = _write(tmp_path / "employees.csv", ["code,name", "E001,Taro"])

    [(_, view)] = list(EmployeeCsvSource(csv_path, has_header=True))

    assert view == EmployeeView(code="E001", name="Taro")


def test_reads_rows_without_header(tmp_path):
    csv_path = _write(tmp_path / "employees.csv", ["1,E001,Taro,pw,0,1"])

    [(line_no, view)] = list(EmployeeCsvSource(csv_path, has_header=False))

    assert line_no == 1
    assert view.id == 1
    assert view.delete_flag == 1


def test_unknown_header_column_is_format_error(tmp_path):
    csv_path = _write(tmp_path / "employees.csv", ["code,name,email", "E001,Taro,t@example.com"])

    with pytest.raises(CsvFormatError, match="Unknown columns"):
        list(EmployeeCsvSource(csv_path, has_header=True))


def test_extra_values_are_format_error(tmp_path):
    csv_path = _write(tmp_path / "employees.csv", ["code,name", "E001,Taro,extra"])

    with pytest.raises(CsvFormatError, match="Invalid column count at line 2"):
        list(EmployeeCsvSource(csv_path, has_header=True))


def test_non_integer_flag_is_format_error(tmp_path):
    csv_path = _write(tmp_path / "employees.csv", ["code,name,admin_flag", "E001,Taro,admin"])

    with pytest.raises(CsvFormatError, match="admin_flag"):
        list(EmployeeCsvSource(csv_path, has_header=True))


def test_parse_null():
    assert parseNull(None) is None
    assert parseNull("  ") is None
    assert parseNull("NULL") is None
    assert parseNull(" E001 ") == "E001"
