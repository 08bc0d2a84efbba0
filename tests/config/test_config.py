from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from subnetctl.config import MissingConfigurationError, get_aws_config, get_storage_config
from subnetctl.config.env import first_env_var, optional_env_var
from subnetctl.config.storage import STATE_DB_FILENAME


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None


def test_first_env_var_lists_candidates_when_all_missing(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("MISSING_A", raising=False)
    monkeypatch.setenv("MISSING_B", "")

    with pytest.raises(MissingConfigurationError) as exc:
        first_env_var(["MISSING_A", "MISSING_B"])

    assert "MISSING_A, MISSING_B" in str(exc.value)


def test_aws_config_prefers_aws_region(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("SUBNETCTL_AWS_ENDPOINT_URL", "http://localhost:4566")
    monkeypatch.delenv("AWS_PROFILE", raising=False)

    config = get_aws_config()

    assert config.region == "eu-west-1"
    assert config.endpoint_url == "http://localhost:4566"
    assert config.profile is None


def test_aws_config_falls_back_to_default_region(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")

    assert get_aws_config().region == "us-east-1"


def test_aws_config_requires_a_region(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

    with pytest.raises(MissingConfigurationError):
        get_aws_config()


def test_storage_config_uses_uri_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATE_DATABASE_URI", "sqlite:///override.db")

    assert get_storage_config().state_database_uri() == "sqlite:///override.db"


def test_storage_config_defaults_to_sqlite_in_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("STATE_DATABASE_URI", raising=False)
    monkeypatch.setenv("SUBNETCTL_DATA_DIR", str(tmp_path / "data-dir"))

    uri = get_storage_config().state_database_uri()

    expected_path = (tmp_path / "data-dir" / STATE_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_storage_config_follows_xdg_data_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("SUBNETCTL_DATA_DIR", raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert get_storage_config().data_dir == tmp_path / "subnetctl"
