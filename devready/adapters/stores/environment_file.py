"""
Environment file store — the machine-scope PATH on POSIX systems.

``/etc/environment`` is read by pam_env at login and holds plain
``NAME=value`` lines, optionally quoted. Only the ``PATH`` line is
rewritten; every other line is preserved byte-for-byte.

Rewrites go through a temp file and a rename so a failed write
never leaves the file truncated.
"""

from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from pathlib import Path

from devready.adapters.base import PathStore
from devready.core.models.receipt import Receipt

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT_FILE = Path("/etc/environment")

_PATH_LINE = re.compile(r"^(?P<prefix>\s*(?:export\s+)?PATH\s*=\s*)(?P<value>.*?)\s*$")


def _unquote(raw: str) -> tuple[str, str]:
    """Split a raw value into (value, quote character)."""
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("'", '"'):
        return raw[1:-1], raw[0]
    return raw, ""


class EnvironmentFilePathStore(PathStore):
    """PATH stored as a ``PATH=...`` line in an environment file."""

    def __init__(self, path: Path | str = DEFAULT_ENVIRONMENT_FILE):
        self._path = Path(path)

    @property
    def name(self) -> str:
        return "environment-file"

    @property
    def delimiter(self) -> str:
        return ":"

    @property
    def path(self) -> Path:
        return self._path

    def is_available(self) -> bool:
        # A missing file is created on first write
        return self._path.is_file() or self._path.parent.is_dir()

    def read(self) -> Receipt:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Receipt.missing(source=self.name, metadata={"file": str(self._path)})
        except (OSError, UnicodeDecodeError) as e:
            return Receipt.failure(source=self.name, error=f"Cannot read {self._path}: {e}")

        for line in text.splitlines():
            match = _PATH_LINE.match(line)
            if match:
                value, _ = _unquote(match.group("value"))
                return Receipt.success(
                    source=self.name, value=value, metadata={"file": str(self._path)},
                )

        return Receipt.missing(source=self.name, metadata={"file": str(self._path)})

    def write(self, value: str) -> Receipt:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""
        except (OSError, UnicodeDecodeError) as e:
            return Receipt.failure(source=self.name, error=f"Cannot read {self._path}: {e}")

        lines = text.splitlines(keepends=True)
        replaced = False
        for i, line in enumerate(lines):
            match = _PATH_LINE.match(line)
            if match:
                _, quote = _unquote(match.group("value"))
                ending = "\n" if line.endswith("\n") else ""
                lines[i] = f"{match.group('prefix')}{quote}{value}{quote}{ending}"
                replaced = True
                break

        if not replaced:
            if lines and not lines[-1].endswith("\n"):
                lines[-1] += "\n"
            lines.append(f'PATH="{value}"\n')

        content = "".join(lines)
        try:
            mode = stat.S_IMODE(self._path.stat().st_mode)
        except FileNotFoundError:
            mode = 0o644
        except OSError as e:
            return Receipt.failure(source=self.name, error=f"Cannot stat {self._path}: {e}")

        # Atomic write: temp file in same directory, then rename
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=".environment_",
                suffix=".tmp",
            )
            os.close(fd)
            tmp = Path(tmp_path)
            try:
                tmp.write_text(content, encoding="utf-8")
                tmp.chmod(mode)
                tmp.replace(self._path)
            except Exception:
                tmp.unlink(missing_ok=True)
                raise
        except PermissionError as e:
            return Receipt.failure(
                source=self.name,
                error=f"Permission denied writing {self._path} (run with sudo): {e}",
            )
        except (OSError, UnicodeError) as e:
            return Receipt.failure(source=self.name, error=f"Cannot write {self._path}: {e}")

        logger.info("Updated PATH in %s", self._path)
        return Receipt.success(source=self.name, value=value, metadata={"file": str(self._path)})
