from pathlib import Path

from implibgen.domain.entities import ToolCommand
from implibgen.domain.toolchain import LLVM, MinGW, ToolchainVariant, VendorLib, ZigWrapper
from implibgen.types import Cmd


def _llvm_args(machine: str, def_path: Path, lib_path: Path) -> Cmd:
    return ("-m", machine, "-d", str(def_path), "-l", str(lib_path))


def build(variant: ToolchainVariant, def_path: Path, lib_path: Path) -> ToolCommand:
    """Generates the complete `dlltool` invocation for `variant`."""
    match variant:
        case MinGW(program):
            command: Cmd = (
                program,
                "--input-def",
                str(def_path),
                "--output-lib",
                str(lib_path),
            )
        case LLVM(program, machine):
            command = (program, *_llvm_args(machine, def_path, lib_path))
        case VendorLib(program, machine):
            command = (
                program,
                f"/MACHINE:{machine}",
                f"/DEF:{def_path}",
                f"/OUT:{lib_path}",
            )
        case ZigWrapper(zig, machine):
            # Same as `llvm-dlltool`, but invoked as `zig dlltool`.
            command = (*zig, "dlltool", *_llvm_args(machine, def_path, lib_path))
        case _:
            raise TypeError(f"Unknown toolchain variant: {variant!r}")

    return ToolCommand(output_path=lib_path, command=command)
