from __future__ import annotations

import yaml

import create_yaml_config
from utils.config import AppConfig


def test_windows_host_maps_to_windows() -> None:
    assert create_yaml_config.build_config("Windows") == {"os_type": "Windows", "log_level": "info"}


def test_other_hosts_map_to_mac() -> None:
    assert create_yaml_config.build_config("Darwin")["os_type"] == "Mac"
    assert create_yaml_config.build_config("Linux")["os_type"] == "Mac"


def test_main_writes_readable_config(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(create_yaml_config.platform, "system", lambda: "Windows")
    output = tmp_path / "config.yaml"
    data = create_yaml_config.main(output)

    assert yaml.safe_load(output.read_text(encoding="utf-8")) == data
    assert AppConfig(output).os_type() == "Windows"
    assert str(output) in capsys.readouterr().out
