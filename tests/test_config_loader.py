from __future__ import annotations

import os
from unittest.mock import call, Mock

from dns_failover import config_loader


def test_env_file_candidates_orders_explicit_file_first(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "from-config-path.env"))
    monkeypatch.chdir(tmp_path)

    candidates = config_loader.env_file_candidates(tmp_path / "explicit.env")

    assert candidates == [
        (tmp_path / "explicit.env").resolve(),
        (tmp_path / "from-config-path.env").resolve(),
        config_loader.Path("/config/.env").resolve(),
        (tmp_path / ".env").resolve(),
    ]


def test_env_file_candidates_drops_duplicates(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / ".env"))
    monkeypatch.chdir(tmp_path)

    candidates = config_loader.env_file_candidates(str(tmp_path / ".env"))

    assert candidates.count((tmp_path / ".env").resolve()) == 1


def test_env_file_candidates_expands_user_home(monkeypatch, tmp_path) -> None:
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.delenv("CONFIG_PATH", raising=False)

    candidates = config_loader.env_file_candidates("~/failover.env")

    assert candidates[0] == (fake_home / "failover.env").resolve()


def test_load_environment_reads_only_existing_files(monkeypatch, tmp_path) -> None:
    present = tmp_path / "present.env"
    present.write_text("A=1", encoding="utf-8")
    missing = tmp_path / "missing.env"

    fake_loader: Mock = Mock()
    monkeypatch.setattr(config_loader, "load_dotenv", fake_loader)
    monkeypatch.setattr(config_loader, "env_file_candidates", lambda extra_path=None: [missing, present])

    assert config_loader.load_environment() == [present]
    assert fake_loader.call_args_list == [call(present, override=False)]


def test_load_environment_prefers_explicit_file(monkeypatch, tmp_path) -> None:
    explicit = tmp_path / "failover.env"
    explicit.write_text("DNS_ZONE=from-file.example\n", encoding="utf-8")
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    # registered first so monkeypatch removes the loaded value afterwards
    monkeypatch.setenv("DNS_ZONE", "placeholder")
    monkeypatch.delenv("DNS_ZONE")
    monkeypatch.chdir(tmp_path)

    loaded = config_loader.load_environment(explicit)

    assert explicit.resolve() in loaded
    assert os.environ["DNS_ZONE"] == "from-file.example"


def test_load_environment_does_not_override_process_values(monkeypatch, tmp_path) -> None:
    env_file = tmp_path / "failover.env"
    env_file.write_text("DNS_ZONE=from-file.example\n", encoding="utf-8")
    monkeypatch.setenv("DNS_ZONE", "from-env.example")
    monkeypatch.setenv("CONFIG_PATH", str(env_file))
    monkeypatch.chdir(tmp_path)

    config_loader.load_environment()

    assert os.environ["DNS_ZONE"] == "from-env.example"
