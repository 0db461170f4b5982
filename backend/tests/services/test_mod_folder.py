import pytest

from nethermod_manager.services.mod_folder import (
    disabled_name,
    enabled_name,
    list_server_mods,
    toggle_mod,
)


@pytest.fixture
def server_dir(tmp_path):
    mods = tmp_path / "mods"
    mods.mkdir()
    (mods / "create-1.20.1.jar").write_bytes(b"12345")
    (mods / "jei-1.20.1.jar.disabled").write_bytes(b"1")
    (mods / "configs").mkdir()
    return tmp_path


class TestListServerMods:
    def test_lists_files_sorted(self, server_dir):
        entries = list_server_mods(str(server_dir))
        assert [e.name for e in entries] == ["create-1.20.1.jar", "jei-1.20.1.jar.disabled"]

    def test_reports_size_and_state(self, server_dir):
        create, jei = list_server_mods(str(server_dir))
        assert create.size == 5
        assert create.enabled is True
        assert jei.enabled is False

    def test_creates_missing_folder(self, tmp_path):
        assert list_server_mods(str(tmp_path)) == []
        assert (tmp_path / "mods").is_dir()


class TestToggleMod:
    def test_disable(self, server_dir):
        result = toggle_mod(str(server_dir), "create-1.20.1.jar", enabled=False)
        assert result.new_name == "create-1.20.1.jar.disabled"
        assert (server_dir / "mods" / "create-1.20.1.jar.disabled").exists()
        assert not (server_dir / "mods" / "create-1.20.1.jar").exists()

    def test_enable(self, server_dir):
        result = toggle_mod(str(server_dir), "jei-1.20.1.jar.disabled", enabled=True)
        assert result.new_name == "jei-1.20.1.jar"
        assert (server_dir / "mods" / "jei-1.20.1.jar").exists()

    def test_already_in_state_is_noop(self, server_dir):
        result = toggle_mod(str(server_dir), "create-1.20.1.jar", enabled=True)
        assert result.old_name == result.new_name == "create-1.20.1.jar"

    def test_missing_file_raises(self, server_dir):
        with pytest.raises(FileNotFoundError):
            toggle_mod(str(server_dir), "absent.jar", enabled=False)

    def test_path_outside_mods_folder_rejected(self, server_dir):
        (server_dir / "server.properties").write_text("motd=hi")
        with pytest.raises(ValueError):
            toggle_mod(str(server_dir), "../server.properties", enabled=False)
        assert (server_dir / "server.properties").exists()
        assert not (server_dir / "server.properties.disabled").exists()

    def test_nested_path_rejected(self, server_dir):
        with pytest.raises(ValueError):
            toggle_mod(str(server_dir), "configs/../create-1.20.1.jar", enabled=False)
        assert (server_dir / "mods" / "create-1.20.1.jar").exists()


class TestNames:
    def test_disabled_name_idempotent(self):
        assert disabled_name("a.jar") == "a.jar.disabled"
        assert disabled_name("a.jar.disabled") == "a.jar.disabled"

    def test_enabled_name(self):
        assert enabled_name("a.jar.disabled") == "a.jar"
        assert enabled_name("a.jar") == "a.jar"
