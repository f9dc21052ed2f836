import pytest

from employee_admin.domain.messages import DEFAULT_CATALOG, MessageCatalog, MessageKey
from employee_admin.errors import AppError
from employee_admin.infra.messages_loader import load_message_catalog


def test_default_catalog_has_distinct_message_per_key():
    messages = [DEFAULT_CATALOG.get(key) for key in MessageKey]

    assert len(set(messages)) == len(MessageKey)
    assert DEFAULT_CATALOG.get(MessageKey.E_EMP_CODE_EXIST) == "code already exists"


def test_overrides_replace_only_given_keys():
    catalog = MessageCatalog({"E_NOPASSWORD": "password is required"})

    assert catalog.get(MessageKey.E_NOPASSWORD) == "password is required"
    assert catalog.get(MessageKey.E_NONAME) == "missing name"


def test_unknown_key_is_rejected():
    with pytest.raises(ValueError, match="Unknown message key"):
        MessageCatalog({"E_UNKNOWN": "?"})


def test_catalog_mapping_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CATALOG._messages[MessageKey.E_NONAME] = "changed"


def test_load_without_path_returns_defaults():
    assert load_message_catalog(None) is DEFAULT_CATALOG


def test_load_from_yaml(tmp_path):
    path = tmp_path / "messages.yml"
    path.write_text('E_NOEMP_CODE: "社員番号を入力してください。"\n', encoding="utf-8")

    catalog = load_message_catalog(str(path))

    assert catalog.get(MessageKey.E_NOEMP_CODE) == "社員番号を入力してください。"
    assert catalog.as_dict()["E_NONAME"] == "missing name"


def test_load_missing_file_raises_config_error(tmp_path):
    with pytest.raises(AppError) as excinfo:
        load_message_catalog(str(tmp_path / "absent.yml"))

    assert excinfo.value.category == "config"
    assert excinfo.value.code == "MESSAGES_FILE_NOT_FOUND"


def test_load_non_mapping_raises_config_error(tmp_path):
    path = tmp_path / "messages.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(AppError) as excinfo:
        load_message_catalog(str(path))

    assert excinfo.value.code == "MESSAGES_FILE_INVALID"


def test_load_malformed_yaml_raises_config_error(tmp_path):
    path = tmp_path / "messages.yml"
    path.write_text("E_NONAME: [unclosed\n", encoding="utf-8")

    with pytest.raises(AppError) as excinfo:
        load_message_catalog(str(path))

    assert excinfo.value.category == "config"
    assert excinfo.value.code == "MESSAGES_FILE_INVALID"
