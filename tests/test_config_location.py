import pytest

from common.config_location import (
    find_workspace_config,
    get_config_location,
    global_folder,
    load_global_config,
    make_locator,
)
from common.errors import ConfigParseError
from common.settings import ConfigSearchMode, ConfigType, GlobalConfig


def test_current_dir_mode_ignores_parents(tmp_path):
    (tmp_path / ".0L").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_workspace_config(nested, ConfigSearchMode.CURRENT_DIR) == nested / ".0L"


def test_parents_mode_finds_ancestor(tmp_path):
    (tmp_path / ".0L").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_workspace_config(nested, ConfigSearchMode.CURRENT_DIR_AND_PARENTS) == tmp_path / ".0L"


def test_parents_mode_prefers_nearest(tmp_path):
    (tmp_path / ".0L").mkdir()
    (tmp_path / "a" / ".0L").mkdir(parents=True)
    nested = tmp_path / "a" / "b"
    nested.mkdir()
    assert find_workspace_config(nested, ConfigSearchMode.CURRENT_DIR_AND_PARENTS) == tmp_path / "a" / ".0L"


def test_parents_mode_skips_plain_file(tmp_path):
    (tmp_path / ".0L").write_text("not a folder")
    nested = tmp_path / "a"
    nested.mkdir()
    found = find_workspace_config(nested, ConfigSearchMode.CURRENT_DIR_AND_PARENTS)
    assert found == nested / ".0L"


def test_parents_mode_falls_back_to_start(tmp_path):
    nested = tmp_path / "x"
    nested.mkdir()
    found = find_workspace_config(nested, ConfigSearchMode.CURRENT_DIR_AND_PARENTS)
    assert found == nested / ".0L"


def test_global_config_defaults_to_workspace(tmp_path):
    cfg = load_global_config(home=tmp_path)
    assert cfg.resolved_config_type() == ConfigType.WORKSPACE


def test_global_type_redirects_every_mode(tmp_path):
    home = tmp_path / "home"
    work = tmp_path / "work"
    work.mkdir()
    (home / ".0L").mkdir(parents=True)
    (home / ".0L" / "global_config.yaml").write_text("config_type: Global\n")
    locate = make_locator(cwd=work, home=home)
    for mode in ConfigSearchMode:
        assert locate(mode) == home / ".0L"


def test_workspace_locator_uses_cwd(tmp_path):
    home = tmp_path / "home"
    work = tmp_path / "work"
    work.mkdir()
    locate = make_locator(cwd=work, home=home)
    assert locate(ConfigSearchMode.CURRENT_DIR) == work / ".0L"


def test_get_config_location_defaults_to_process_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    loc = get_config_location(GlobalConfig(), ConfigSearchMode.CURRENT_DIR, home=tmp_path)
    assert loc.resolve() == (tmp_path / ".0L").resolve()


def test_global_folder_uses_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    assert global_folder() == tmp_path / ".0L"


def test_bad_global_config(tmp_path):
    (tmp_path / ".0L").mkdir()
    (tmp_path / ".0L" / "global_config.yaml").write_text("config_type: Sideways\n")
    with pytest.raises(ConfigParseError):
        load_global_config(home=tmp_path)
