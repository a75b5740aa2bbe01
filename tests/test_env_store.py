from __future__ import annotations

from pathlib import Path

import pytest

from momo_provision.adapters import env_store
from momo_provision.adapters.env_store import DotenvConfigStore
from momo_provision.core.config import (
    PRODUCT_ENV_VAR,
    REGISTER_ID_URL_ENV_VAR,
    AppSettings,
    is_protected_environment,
    load_settings,
    parse_env_lines,
    read_env_vars,
    write_env_vars,
)
from momo_provision.core.domain.product import Product
from momo_provision.core.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "MOMO_PRODUCT",
        "MOMO_ENVIRONMENT",
        "MOMO_COLLECTION_ID",
        "MOMO_COLLECTION_CALLBACK_URI",
        "MOMO_BASE_URI",
        "MOMO_REGISTER_ID_URI",
    ):
        monkeypatch.delenv(name, raising=False)


def test_parse_env_lines_skips_comments_and_strips_quotes() -> None:
    text = '# comment\n\nMOMO_A="1"\nMOMO_B=\'two\'\nnot-a-pair\n MOMO_C = x=y \n'

    assert parse_env_lines(text) == {"MOMO_A": "1", "MOMO_B": "two", "MOMO_C": "x=y"}


def test_write_env_vars_merges_and_sorts(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("MOMO_Z=1\nMOMO_A=old\n", encoding="utf-8")

    write_env_vars(env_path, {"MOMO_A": "new", "MOMO_M": "2", "MOMO_SKIP": None})

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == ["MOMO_A=new", "MOMO_M=2", "MOMO_Z=1"]


def test_store_reads_file_and_static_settings(tmp_path: Path) -> None:
    env_path = tmp_path / "store.env"
    env_path.write_text("MOMO_COLLECTION_ID=persisted\n", encoding="utf-8")
    settings = AppSettings(product=Product.REMITTANCE, base_uri="https://api.example/", register_id_uri="v1_0/apiuser")

    store = DotenvConfigStore(settings, env_path=env_path)

    assert store.get("MOMO_COLLECTION_ID") == "persisted"
    assert store.get(PRODUCT_ENV_VAR) == "remittance"
    assert store.get(REGISTER_ID_URL_ENV_VAR) == "https://api.example/v1_0/apiuser"
    assert store.get("MOMO_MISSING") is None


def test_process_env_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "store.env"
    env_path.write_text("MOMO_COLLECTION_ID=from-file\n", encoding="utf-8")
    monkeypatch.setenv("MOMO_COLLECTION_ID", "from-env")

    store = DotenvConfigStore(AppSettings(), env_path=env_path)

    assert store.get("MOMO_COLLECTION_ID") == "from-env"


def test_set_writes_live_and_file(tmp_path: Path) -> None:
    env_path = tmp_path / "store.env"
    store = DotenvConfigStore(AppSettings(), env_path=env_path)

    store.set("MOMO_COLLECTION_ID", "abc")

    assert store.get("MOMO_COLLECTION_ID") == "abc"
    assert read_env_vars(env_path) == {"MOMO_COLLECTION_ID": "abc"}


def test_no_write_keeps_value_in_memory_only(tmp_path: Path) -> None:
    env_path = tmp_path / "store.env"
    store = DotenvConfigStore(AppSettings(), env_path=env_path, write=False)

    store.set("MOMO_COLLECTION_ID", "abc")

    assert store.get("MOMO_COLLECTION_ID") == "abc"
    assert not env_path.exists()


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOMO_ENVIRONMENT", "Production")
    monkeypatch.setenv("MOMO_PRODUCT", "disbursement")

    settings = AppSettings()

    assert settings.is_protected_environment
    assert settings.product is Product.DISBURSEMENT
    assert settings.register_id_url == "https://sandbox.momodeveloper.mtn.com/v1_0/apiuser"


def test_product_env_var_names() -> None:
    assert Product.COLLECTION.id_env_var == "MOMO_COLLECTION_ID"
    assert Product.COLLECTION.callback_env_var == "MOMO_COLLECTION_CALLBACK_URI"
    assert Product.REMITTANCE.id_config_key == "products.remittance.id"


def test_project_env_file_is_read_when_target_is_elsewhere(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "MOMO_COLLECTION_ID=from-project\nMOMO_COLLECTION_CALLBACK_URI=https://project.example/cb\n",
        encoding="utf-8",
    )
    env_path = tmp_path / "target.env"
    env_path.write_text("MOMO_COLLECTION_CALLBACK_URI=https://target.example/cb\n", encoding="utf-8")

    store = DotenvConfigStore(AppSettings(), env_path=env_path)

    assert store.get("MOMO_COLLECTION_ID") == "from-project"
    assert store.get("MOMO_COLLECTION_CALLBACK_URI") == "https://target.example/cb"


def test_update_writes_all_keys_at_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_path = tmp_path / "store.env"
    calls: list[dict[str, str]] = []

    def recording_write(path: Path, values):  # noqa: ANN001, ANN202
        calls.append(dict(values))
        return write_env_vars(path, values)

    monkeypatch.setattr(env_store, "write_env_vars", recording_write)
    store = DotenvConfigStore(AppSettings(), env_path=env_path)

    store.update({"MOMO_COLLECTION_ID": "abc", "MOMO_COLLECTION_CALLBACK_URI": "https://example.com/cb"})

    assert calls == [{"MOMO_COLLECTION_ID": "abc", "MOMO_COLLECTION_CALLBACK_URI": "https://example.com/cb"}]
    assert read_env_vars(env_path) == calls[0]


@pytest.mark.parametrize(
    ("environment", "protected"),
    [("production", True), (" Prod ", True), ("LIVE", True), ("sandbox", False), ("", False), (None, False)],
)
def test_is_protected_environment(environment: str | None, protected: bool) -> None:
    assert is_protected_environment(environment) is protected


def test_load_settings_reports_invalid_product_as_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOMO_PRODUCT", "savings")

    with pytest.raises(ConfigError, match="MOMO_PRODUCT"):
        load_settings()
