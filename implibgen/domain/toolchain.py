from dataclasses import dataclass

from returns.context import RequiresContextResult
from returns.maybe import Some
from returns.result import Failure, Result, Success

from implibgen.domain.host import HostContext, find_lib_exe, zig_command
from implibgen.errors import UnsupportedTarget
from implibgen.types import Arch, Cmd, Env

# Canonical MinGW-w64 `dlltool` program names
DLLTOOL_GNU = "x86_64-w64-mingw32-dlltool"
DLLTOOL_GNU_32 = "i686-w64-mingw32-dlltool"

# `dlltool` for the MSVC environment ABI when `lib.exe` is not around
DLLTOOL_MSVC = "llvm-dlltool"

LLVM_MACHINES = {
    "x86_64": "i386:x86-64",
    "x86": "i386",
    "aarch64": "arm64",
}

MSVC_MACHINES = {
    "x86_64": "X64",
    "x86": "X86",
    "aarch64": "ARM64",
}


@dataclass(frozen=True)
class MinGW:
    program: str


@dataclass(frozen=True)
class LLVM:
    program: str
    machine: str


@dataclass(frozen=True)
class VendorLib:
    program: str
    machine: str


@dataclass(frozen=True)
class ZigWrapper:
    command: Cmd
    machine: str


ToolchainVariant = MinGW | LLVM | VendorLib | ZigWrapper


def llvm_machine(arch: Arch) -> str:
    """Machine name understood by MinGW, LLVM and Zig `dlltool`."""
    return LLVM_MACHINES.get(arch, arch)


def vendor_machine(arch: Arch) -> str:
    """Machine name understood by MSVC `lib.exe /MACHINE:`."""
    return MSVC_MACHINES.get(arch, arch)


def _resolve_for_host(
    arch: Arch, env: Env, host: HostContext
) -> Result[ToolchainVariant, UnsupportedTarget]:
    # If `zig cc` is used as the linker, `zig dlltool` is the best choice.
    match zig_command()(host):
        case Some(command):
            return Success(ZigWrapper(command=command, machine=llvm_machine(arch)))

    match (arch, env):
        # 64-bit MinGW-w64 (aka `x86_64-pc-windows-gnu`)
        case ("x86_64", "gnu"):
            return Success(MinGW(DLLTOOL_GNU))

        # 32-bit MinGW-w64 (aka `i686-pc-windows-gnu`)
        case ("x86", "gnu"):
            return Success(MinGW(DLLTOOL_GNU_32))

        # MSVC ABI (multiarch)
        case (_, "msvc"):
            match find_lib_exe(arch)(host):
                case Some(lib_exe):
                    return Success(VendorLib(lib_exe, vendor_machine(arch)))
            return Success(LLVM(DLLTOOL_MSVC, llvm_machine(arch)))

        case _:
            return Failure(UnsupportedTarget(arch, env))


def resolve(
    arch: Arch, env: Env
) -> RequiresContextResult[ToolchainVariant, UnsupportedTarget, HostContext]:
    """Picks the best matching `dlltool` flavor for the `arch`/`env` target."""
    return RequiresContextResult(lambda host: _resolve_for_host(arch, env, host))
