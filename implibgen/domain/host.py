from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping
import os
import platform
import re
import subprocess

from returns.context import RequiresContext
from returns.maybe import Maybe, Nothing
from returns.result import safe

from implibgen.types import Arch, Cmd

LIB_MSVC = "lib.exe"

VC_TOOLS_COMPONENT = "Microsoft.VisualStudio.Component.VC.Tools.x86.x64"

# `split_ascii_whitespace()`: space, tab, LF, FF, CR
ASCII_WHITESPACE = re.compile(r"[ \t\n\f\r]+")

MSVC_TARGETS = {
    "x86_64": "x86_64-pc-windows-msvc",
    "x86": "i686-pc-windows-msvc",
    "aarch64": "aarch64-pc-windows-msvc",
}

# `VC/Tools/MSVC/<version>/bin/Host<host>/<target>` directory names
MSVC_TARGET_DIRS = {
    "x86_64-pc-windows-msvc": "x64",
    "i686-pc-windows-msvc": "x86",
    "aarch64-pc-windows-msvc": "arm64",
}

MSVC_HOST_DIRS = {
    "amd64": "Hostx64",
    "x86_64": "Hostx64",
    "x86": "Hostx86",
    "i386": "Hostx86",
    "i686": "Hostx86",
    "arm64": "Hostarm64",
    "aarch64": "Hostarm64",
}


@dataclass(frozen=True)
class HostContext:
    """Snapshot of everything the resolver may look at on the build host."""

    environ: Mapping[str, str] = field(default_factory=dict)
    system: str = ""
    machine: str = ""

    @classmethod
    def from_environment(cls) -> "HostContext":
        return cls(
            environ=MappingProxyType(dict(os.environ)),
            system=platform.system(),
            machine=platform.machine(),
        )


def zig_command() -> RequiresContext[Maybe[Cmd], HostContext]:
    """Reads `ZIG_COMMAND` (set when `zig cc` is the linker, e.g. `maturin --zig`).

    The value may be a plain `zig`, a full path, or a whole commandlet such as
    `python3 -m ziglang`. It is split like a shell would split an unquoted
    word list.
    """

    def _inner(host: HostContext) -> Maybe[Cmd]:
        tokens = tuple(
            filter(None, ASCII_WHITESPACE.split(host.environ.get("ZIG_COMMAND", "")))
        )
        return Maybe.from_optional(tokens or None)

    return RequiresContext(_inner)


def _vswhere_tools_dir(host: HostContext) -> Path | None:
    vswhere = Path(
        host.environ.get("ProgramFiles(x86)", r"C:\Program Files (x86)"),
        "Microsoft Visual Studio",
        "Installer",
        "vswhere.exe",
    )
    if not vswhere.is_file():
        return None

    res = subprocess.run(
        (
            str(vswhere),
            "-latest",
            "-products",
            "*",
            "-requires",
            VC_TOOLS_COMPONENT,
            "-property",
            "installationPath",
        ),
        capture_output=True,
        text=True,
    )
    install_dir = res.stdout.strip()
    if res.returncode != 0 or not install_dir:
        return None

    version_file = Path(
        install_dir, "VC", "Auxiliary", "Build", "Microsoft.VCToolsVersion.default.txt"
    )
    if not version_file.is_file():
        return None
    return Path(install_dir, "VC", "Tools", "MSVC", version_file.read_text().strip())


@safe((OSError, UnicodeDecodeError))
def _locate_lib_exe(host: HostContext, target_dir: str) -> Path | None:
    host_dir = MSVC_HOST_DIRS.get(host.machine.lower())
    if host_dir is None:
        return None

    # A developer command prompt already points at the active toolset.
    tools_dir = (
        Path(host.environ["VCToolsInstallDir"])
        if host.environ.get("VCToolsInstallDir")
        else _vswhere_tools_dir(host)
    )
    if tools_dir is None:
        return None

    lib_exe = tools_dir / "bin" / host_dir / target_dir / LIB_MSVC
    return lib_exe if lib_exe.is_file() else None


def find_lib_exe(arch: Arch) -> RequiresContext[Maybe[str], HostContext]:
    """Finds Visual Studio `lib.exe` for the `arch` MSVC target.

    Only ever succeeds on Windows hosts; everywhere else (and on any OS error
    while looking) the result is `Nothing`.
    """

    def _inner(host: HostContext) -> Maybe[str]:
        if host.system != "Windows":
            return Nothing
        return (
            Maybe.from_optional(MSVC_TARGETS.get(arch))
            .bind_optional(MSVC_TARGET_DIRS.get)
            .bind(
                lambda target_dir: _locate_lib_exe(host, target_dir)
                .map(Maybe.from_optional)
                .value_or(Nothing)
            )
            .map(str)
        )

    return RequiresContext(_inner)
