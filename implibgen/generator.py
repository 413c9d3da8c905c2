"""Windows import library generator for the Python DLL.

Generates the `python3.dll` or `pythonXY.dll` import library directly from
the `.def` files shipped with this package for a MinGW-w64 or MSVC compile
target. No Python distribution for the target has to be installed on the
(cross-)compile host, but one of the `dlltool` flavors has to be:

- MinGW-w64 `x86_64-w64-mingw32-dlltool` / `i686-w64-mingw32-dlltool`
  for `*-pc-windows-gnu` targets,
- Visual Studio `lib.exe` (Windows hosts) or `llvm-dlltool` on `PATH`
  for `*-pc-windows-msvc` targets,
- `zig dlltool` when `ZIG_COMMAND` is set (`zig cc` is used as the linker).

Every function returns a `returns` container instead of raising, e.g.::

    generate_implib_for_target(Path("target/python3-dll"), "x86_64", "gnu").unwrap()
"""

from dataclasses import dataclass, replace
from pathlib import Path
import subprocess

from returns.io import IOFailure, IOResultE, IOSuccess, impure_safe
from returns.result import Result

from implibgen.domain.command import build
from implibgen.domain.definitions import lookup
from implibgen.domain.entities import (
    DefinitionAsset,
    ImportLibraryArtifact,
    TargetDescriptor,
    ToolCommand,
    implib_artifact,
)
from implibgen.domain.host import HostContext
from implibgen.domain.toolchain import ToolchainVariant, resolve
from implibgen.errors import GenerationError, ToolExitedWithFailure, ToolInvocationFailed
from implibgen.types import Arch, Env, Version


@dataclass(frozen=True)
class _Plan:
    def_path: Path
    asset: DefinitionAsset
    artifact: ImportLibraryArtifact
    variant: ToolchainVariant


@impure_safe
def _create_out_dir(out_dir: Path) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


@impure_safe
def _write_def_file(plan: _Plan) -> Path:
    plan.def_path.write_bytes(plan.asset.content)
    return plan.def_path


def _plan(
    out_dir: Path, target: TargetDescriptor, host: HostContext
) -> Result[_Plan, GenerationError]:
    return lookup(target.version).bind(
        lambda asset: resolve(target.arch, target.env)(host).map(
            lambda variant: _Plan(
                def_path=Path(out_dir, asset.file_name),
                asset=asset,
                artifact=implib_artifact(out_dir, target),
                variant=variant,
            )
        )
    )


def _run_command(cmd: ToolCommand, verbose: bool = False) -> IOResultE[Path]:
    if verbose:
        print(f"Generating: {cmd.output_path.name}")
        print(cmd)
    try:
        returncode = subprocess.run(cmd.command).returncode
    except OSError as e:
        return IOFailure(ToolInvocationFailed(cmd.command, e))
    if returncode != 0:
        return IOFailure(ToolExitedWithFailure(cmd.command, returncode))
    return IOSuccess(cmd.output_path)


def generate(
    out_dir: Path,
    arch: Arch,
    env: Env,
    version: Version | None = None,
    *,
    host: HostContext | None = None,
    verbose: bool = False,
) -> IOResultE[Path]:
    """Generates the Python DLL import library in `out_dir`.

    `arch` and `env` are the target triple components (`x86_64`, `x86`,
    `aarch64`; `gnu`, `msvc`). The version-agnostic `python3.dll` import
    library is generated unless `version` names a `pythonXY.dll`.

    Returns the import library path. Nothing is written besides `out_dir`
    itself when the version or the target is not supported.
    """
    target = TargetDescriptor(
        arch=arch,
        env=env,
        version=None if version is None else tuple(version),  # type: ignore
    )
    host = host or HostContext.from_environment()
    return (
        _create_out_dir(Path(out_dir))
        .bind_result(lambda directory: _plan(directory, target, host))
        .bind(
            lambda plan: _write_def_file(plan).map(
                lambda def_path: build(plan.variant, def_path, plan.artifact.path)
            )
        )
        .bind(lambda cmd: _run_command(cmd, verbose=verbose))
    )


def generate_implib_for_target(out_dir: Path, arch: Arch, env: Env) -> IOResultE[Path]:
    """Generates the `python3.dll` import library (`python3.dll.a` or `python3.lib`)."""
    return generate(out_dir, arch, env)


@dataclass(frozen=True)
class ImportLibraryGenerator:
    arch: Arch
    env: Env
    version: Version | None = None

    def with_version(self, version: Version | None) -> "ImportLibraryGenerator":
        return replace(self, version=version)

    def generate(
        self,
        out_dir: Path,
        *,
        host: HostContext | None = None,
        verbose: bool = False,
    ) -> IOResultE[Path]:
        return generate(
            out_dir, self.arch, self.env, self.version, host=host, verbose=verbose
        )
