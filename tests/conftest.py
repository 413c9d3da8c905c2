import json
import os
import stat
import sys
from pathlib import Path

import pytest

from implibgen.domain.host import HostContext

FAKE_DLLTOOL = """\
import json
import sys
from pathlib import Path

args = sys.argv[1:]
Path({record!r}).write_text(json.dumps(args))
for flag in ("--output-lib", "-l"):
    if flag in args:
        Path(args[args.index(flag) + 1]).write_bytes(b"!<arch>\\n")
for arg in args:
    if arg.startswith("/OUT:"):
        Path(arg[len("/OUT:"):]).write_bytes(b"!<arch>\\n")
sys.exit({exit_code})
"""


class FakeTool:
    def __init__(self, script: Path, record: Path):
        self.script = script
        self.record = record

    @property
    def argv(self) -> list[str]:
        return json.loads(self.record.read_text())


@pytest.fixture
def linux_host() -> HostContext:
    return HostContext(environ={}, system="Linux", machine="x86_64")


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is the only entry on `PATH`."""
    path = tmp_path / "bin"
    path.mkdir()
    monkeypatch.setenv("PATH", str(path))
    return path


@pytest.fixture
def fake_script(tmp_path: Path):
    def _fake_script(name: str, exit_code: int = 0) -> FakeTool:
        scripts = tmp_path / "scripts"
        scripts.mkdir(exist_ok=True)
        record = scripts / f"{name}.json"
        script = scripts / f"{name}.py"
        script.write_text(FAKE_DLLTOOL.format(record=str(record), exit_code=exit_code))
        return FakeTool(script, record)

    return _fake_script


@pytest.fixture
def fake_executable(fake_script):
    """Writes an executable at `program` that records its arguments."""
    if os.name == "nt":
        pytest.skip("fake dlltool executables are shell scripts")

    def _fake_executable(program: Path, exit_code: int = 0) -> FakeTool:
        tool = fake_script(program.name, exit_code)
        program.parent.mkdir(parents=True, exist_ok=True)
        program.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{tool.script}" "$@"\n')
        program.chmod(program.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return tool

    return _fake_executable


@pytest.fixture
def fake_dlltool(bin_dir: Path, fake_executable):
    """Puts an executable `name` on `PATH` that records its arguments."""

    def _fake_dlltool(name: str, exit_code: int = 0) -> FakeTool:
        return fake_executable(bin_dir / name, exit_code)

    return _fake_dlltool
