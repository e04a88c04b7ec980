from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from slnadd.config import (
    CSHARP_PROJECT_GUID,
    FSHARP_PROJECT_GUID,
    SlnAddConfig,
    load_config,
    placement_from_config,
    serialize_config,
)
from slnadd.errors import CONFIG_001, CONFIG_002, CONFIG_003, ConfigError
from slnadd.placement import FixedFolders, Inferred, InRoot


def test_default_config_loads_without_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = load_config()
    assert config.placement.in_root is False
    assert config.placement.solution_folder is None
    assert config.project_types[".csproj"] == CSHARP_PROJECT_GUID
    assert config.project_types[".fsproj"] == FSHARP_PROJECT_GUID
    assert config.log_level == "WARNING"


def test_default_file_in_working_directory_is_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "slnadd.yaml").write_text("log_level: DEBUG\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_config().log_level == "DEBUG"


def test_yaml_overrides_and_cli_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "slnadd.yaml"
    config_path.write_text(
        yaml.safe_dump({"placement": {"solution_folder": "src"}, "log_level": "INFO"}),
        encoding="utf-8",
    )
    config = load_config(config_path, {"placement": {"solution_folder": "tools/build"}})
    assert config.placement.solution_folder == "tools/build"
    assert config.log_level == "INFO"


def test_project_types_are_normalized(tmp_path: Path) -> None:
    config_path = tmp_path / "slnadd.yaml"
    config_path.write_text(
        yaml.safe_dump({"project_types": {"PYPROJ": "888888a0-9f3d-457c-b088-3a5042f75d52"}}),
        encoding="utf-8",
    )
    config = load_config(config_path)
    assert config.project_types == {".pyproj": "{888888A0-9F3D-457C-B088-3A5042F75D52}"}


def test_missing_config_file_raises_config_002(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path / "missing.yaml")
    assert excinfo.value.code == CONFIG_002


def test_invalid_yaml_raises_config_003(tmp_path: Path) -> None:
    config_path = tmp_path / "slnadd.yaml"
    config_path.write_text("placement: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert excinfo.value.code == CONFIG_003


def test_non_mapping_yaml_raises_config_003(tmp_path: Path) -> None:
    config_path = tmp_path / "slnadd.yaml"
    config_path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert excinfo.value.code == CONFIG_003


def test_invalid_field_type_raises_config_003(tmp_path: Path) -> None:
    config_path = tmp_path / "slnadd.yaml"
    config_path.write_text("placement:\n  in_root: maybe\n", encoding="utf-8")
    with pytest.raises(ConfigError) as excinfo:
        load_config(config_path)
    assert excinfo.value.code == CONFIG_003


class TestPlacementFromConfig:
    def test_default_is_inferred(self) -> None:
        assert placement_from_config(SlnAddConfig()) == Inferred()

    def test_in_root(self) -> None:
        config = SlnAddConfig.model_validate({"placement": {"in_root": True}})
        assert placement_from_config(config) == InRoot()

    def test_solution_folder_is_split(self) -> None:
        config = SlnAddConfig.model_validate({"placement": {"solution_folder": "tools/build"}})
        assert placement_from_config(config) == FixedFolders(("tools", "build"))

    def test_empty_solution_folder_is_inferred(self) -> None:
        config = SlnAddConfig.model_validate({"placement": {"solution_folder": ""}})
        assert placement_from_config(config) == Inferred()

    def test_both_options_raise_config_001(self) -> None:
        config = SlnAddConfig.model_validate({"placement": {"in_root": True, "solution_folder": "src"}})
        with pytest.raises(ConfigError) as excinfo:
            placement_from_config(config)
        assert excinfo.value.code == CONFIG_001


def test_serialize_config_is_plain_data() -> None:
    payload = serialize_config(SlnAddConfig())
    assert payload["placement"] == {"in_root": False, "solution_folder": None}
    assert yaml.safe_load(yaml.safe_dump(payload)) == payload
