import pytest
from pathlib import Path
from unittest.mock import patch
from nuget_diagnostics.components.nuget_config.config_inspector import NuGetConfigInspector
from nuget_diagnostics.exceptions import ConfigInspectionError


NUGET_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <packageSources>
    <add key="nuget.org" value="https://api.nuget.org/v3/index.json" />
  </packageSources>
</configuration>
"""


@pytest.fixture
def inspector():
    return NuGetConfigInspector()


def test_run_local_config_with_source(tmp_path, inspector):
    local = tmp_path / "nuget.config"
    local.write_text(NUGET_CONFIG)
    state = inspector.run(config_path=local, home=tmp_path / "home")
    assert state.local_exists is True
    assert state.local_has_source is True
    assert state.local_path == str(local)


def test_run_local_config_without_source(tmp_path, inspector):
    local = tmp_path / "nuget.config"
    local.write_text("<configuration><packageSources /></configuration>")
    state = inspector.run(config_path=local, home=tmp_path / "home")
    assert state.local_exists is True
    assert state.local_has_source is False


def test_run_falls_back_to_global_config(tmp_path, inspector):
    home = tmp_path / "home"
    global_config = home / ".nuget" / "NuGet" / "NuGet.Config"
    global_config.parent.mkdir(parents=True)
    global_config.write_text(NUGET_CONFIG)
    state = inspector.run(config_path=tmp_path / "missing.config", home=home)
    assert state.local_exists is False
    assert state.local_has_source is None
    assert state.global_exists is True
    assert state.global_path == str(global_config)


def test_run_no_config_is_not_an_error(tmp_path, inspector):
    state = inspector.run(config_path=tmp_path / "missing.config", home=tmp_path)
    assert state.local_exists is False
    assert state.global_exists is False


def test_run_unreadable_config_reports_unknown(tmp_path, inspector):
    local = tmp_path / "nuget.config"
    local.write_text(NUGET_CONFIG)
    with patch.object(NuGetConfigInspector, "_read_config", side_effect=ConfigInspectionError("denied")):
        state = inspector.run(config_path=local, home=tmp_path)
    assert state.local_exists is True
    assert state.local_has_source is None


def test_read_config_wraps_os_errors(tmp_path, inspector):
    with pytest.raises(ConfigInspectionError):
        inspector._read_config(Path(tmp_path))


def test_execute_skips_when_disabled(inspector):
    state = inspector._execute({"check_config": False})
    assert state["nuget_config"] is None
