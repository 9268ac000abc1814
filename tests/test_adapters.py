"""
Tests for adapters — command resolver, executable probe, PATH stores.
"""

import errno
import shutil
import stat
import sys
from pathlib import Path

import pytest

from devready.adapters.mock import MemoryPathStore
from devready.adapters.registry import (
    UnknownStoreError,
    default_store_name,
    get_store,
)
from devready.adapters.shell.command import CommandResolver
from devready.adapters.shell.filesystem import ExecutableProbe
from devready.adapters.stores.environment_file import EnvironmentFilePathStore
from devready.adapters.stores.windows_registry import WindowsRegistryPathStore

# ── Command Resolver ─────────────────────────────────────────────────


class TestCommandResolver:
    def test_resolves_from_given_environment(self, tmp_path, make_executable, tool_name):
        exe = make_executable(tmp_path / "bin" / tool_name)
        receipt = CommandResolver({"PATH": str(exe.parent)}).resolve(tool_name)
        assert receipt.ok
        assert Path(receipt.value) == exe

    def test_not_found(self, empty_env, tool_name):
        receipt = CommandResolver(empty_env).resolve(tool_name)
        assert receipt.not_found

    def test_missing_path_variable(self, tool_name):
        assert CommandResolver({}).resolve(tool_name).not_found

    def test_sees_later_environment_changes(self, tmp_path, make_executable, tool_name):
        exe = make_executable(tmp_path / "bin" / tool_name)
        env = {"PATH": ""}
        resolver = CommandResolver(env)
        assert resolver.resolve(tool_name).not_found
        env["PATH"] = str(exe.parent)
        assert resolver.resolve(tool_name).ok

    def test_lookup_exception_is_captured(self, monkeypatch, tool_name):
        def boom(*args, **kwargs):
            raise OSError("broken lookup")

        monkeypatch.setattr(shutil, "which", boom)
        receipt = CommandResolver({"PATH": "/x"}).resolve(tool_name)
        assert receipt.failed
        assert "broken lookup" in receipt.error


# ── Executable Probe ─────────────────────────────────────────────────


class TestExecutableProbe:
    def test_exists(self, tmp_path, make_executable):
        make_executable(tmp_path / "git")
        receipt = ExecutableProbe().exists(str(tmp_path), "git")
        assert receipt.ok
        assert receipt.value == str(tmp_path / "git")

    def test_missing(self, tmp_path):
        assert ExecutableProbe().exists(str(tmp_path), "git").not_found

    def test_directory_named_like_executable(self, tmp_path):
        (tmp_path / "git").mkdir()
        assert ExecutableProbe().exists(str(tmp_path), "git").not_found

    def test_empty_directory_string(self):
        assert ExecutableProbe().exists("", "git").not_found


# ── Memory Store ─────────────────────────────────────────────────────


class TestMemoryPathStore:
    def test_read_write(self):
        store = MemoryPathStore(value="A")
        assert store.read().value == "A"
        assert store.write("A;B").ok
        assert store.value == "A;B"
        assert store.writes == ["A;B"]

    def test_unset(self):
        assert MemoryPathStore(value=None).read().not_found

    def test_failures(self):
        store = MemoryPathStore(value="A")
        store.set_read_failure("nope")
        store.set_write_failure("denied")
        assert store.read().failed
        assert store.write("B").failed
        assert store.value == "A"

    def test_reset(self):
        store = MemoryPathStore(value="A")
        store.set_write_failure()
        store.reset()
        assert store.write("B").ok


# ── Environment File Store ──────────────────────────────────────────


class TestEnvironmentFilePathStore:
    def test_read_quoted(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text('LANG=C\nPATH="/usr/bin:/bin"\n')
        receipt = EnvironmentFilePathStore(f).read()
        assert receipt.ok
        assert receipt.value == "/usr/bin:/bin"

    def test_read_unquoted(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text("PATH=/usr/bin\n")
        assert EnvironmentFilePathStore(f).read().value == "/usr/bin"

    def test_read_missing_file(self, tmp_path):
        assert EnvironmentFilePathStore(tmp_path / "nope").read().not_found

    def test_read_no_path_line(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text("LANG=C\n")
        assert EnvironmentFilePathStore(f).read().not_found

    def test_read_unreadable(self, tmp_path):
        receipt = EnvironmentFilePathStore(tmp_path).read()
        assert receipt.failed

    def test_write_preserves_other_lines_and_quotes(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text('# comment\nPATH="/usr/bin:/bin"\nLANG=C\n')
        store = EnvironmentFilePathStore(f)

        assert store.write("/usr/bin:/bin:/opt/git/bin").ok
        assert f.read_text() == '# comment\nPATH="/usr/bin:/bin:/opt/git/bin"\nLANG=C\n'

    def test_write_appends_path_line(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text("LANG=C")
        assert EnvironmentFilePathStore(f).write("/opt/git/bin").ok
        assert f.read_text() == 'LANG=C\nPATH="/opt/git/bin"\n'

    def test_write_creates_file(self, tmp_path):
        f = tmp_path / "environment"
        assert EnvironmentFilePathStore(f).write("/x").ok
        assert EnvironmentFilePathStore(f).read().value == "/x"

    def test_write_permission_denied(self, tmp_path, monkeypatch):
        f = tmp_path / "environment"
        f.write_text('PATH="/usr/bin"\n')

        def denied(self, *args, **kwargs):
            raise PermissionError("Permission denied")

        monkeypatch.setattr(Path, "write_text", denied)
        receipt = EnvironmentFilePathStore(f).write("/usr/bin:/x")

        assert receipt.failed
        assert "sudo" in receipt.error
        monkeypatch.undo()
        assert f.read_bytes() == b'PATH="/usr/bin"\n'
        assert [p.name for p in tmp_path.iterdir()] == ["environment"]

    def test_read_non_utf8_file(self, tmp_path):
        f = tmp_path / "environment"
        f.write_bytes(b"LANG=fr\xe9\nPATH=/usr/bin\n")
        receipt = EnvironmentFilePathStore(f).read()
        assert receipt.failed
        assert str(f) in receipt.error

    def test_write_non_utf8_file_untouched(self, tmp_path):
        f = tmp_path / "environment"
        original = b"LANG=fr\xe9\nPATH=/usr/bin\n"
        f.write_bytes(original)
        receipt = EnvironmentFilePathStore(f).write("/usr/bin:/x")
        assert receipt.failed
        assert f.read_bytes() == original

    def test_failed_write_keeps_original(self, tmp_path, monkeypatch):
        f = tmp_path / "environment"
        original = b'LANG=C\nPATH="/usr/bin:/bin"\n'
        f.write_bytes(original)

        def disk_full(self, *args, **kwargs):
            raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(Path, "write_text", disk_full)
        receipt = EnvironmentFilePathStore(f).write("/usr/bin:/bin:/x")
        monkeypatch.undo()

        assert receipt.failed
        assert "No space left" in receipt.error
        assert f.read_bytes() == original
        assert [p.name for p in tmp_path.iterdir()] == ["environment"]

    def test_write_keeps_file_mode(self, tmp_path):
        f = tmp_path / "environment"
        f.write_text('PATH="/usr/bin"\n')
        f.chmod(0o640)
        assert EnvironmentFilePathStore(f).write("/usr/bin:/x").ok
        assert stat.S_IMODE(f.stat().st_mode) == 0o640

    def test_available_when_directory_exists(self, tmp_path):
        assert EnvironmentFilePathStore(tmp_path / "environment").is_available()
        assert not EnvironmentFilePathStore(tmp_path / "nope" / "environment").is_available()

    def test_delimiter(self, tmp_path):
        assert EnvironmentFilePathStore(tmp_path / "e").delimiter == ":"


# ── Windows Registry Store ──────────────────────────────────────────


class TestWindowsRegistryPathStore:
    def test_delimiter(self):
        assert WindowsRegistryPathStore().delimiter == ";"

    @pytest.mark.skipif(sys.platform == "win32", reason="registry exists on Windows")
    def test_unavailable_off_windows(self):
        store = WindowsRegistryPathStore()
        assert not store.is_available()
        assert store.read().failed
        assert store.write("X").failed


# ── Store Registry ──────────────────────────────────────────────────


class TestStoreRegistry:
    def test_default_names(self):
        assert default_store_name("win32") == "windows-registry"
        assert default_store_name("linux") == "environment-file"

    def test_auto(self, tmp_path):
        store = get_store("auto", environment_file=tmp_path / "env", platform="linux")
        assert isinstance(store, EnvironmentFilePathStore)
        assert store.path == tmp_path / "env"
        assert isinstance(get_store("auto", platform="win32"), WindowsRegistryPathStore)

    def test_explicit(self):
        assert isinstance(get_store("windows-registry"), WindowsRegistryPathStore)

    def test_unknown(self):
        with pytest.raises(UnknownStoreError):
            get_store("nvram")
