from dataclasses import dataclass
from pathlib import Path

from implibgen.errors import command_line
from implibgen.types import Arch, Cmd, Env, Extension, Version

IMPLIB_EXT_GNU: Extension = ".dll.a"
IMPLIB_EXT_MSVC: Extension = ".lib"


@dataclass(frozen=True)
class TargetDescriptor:
    arch: Arch
    env: Env
    version: Version | None = None

    @property
    def library_name(self) -> str:
        """`python3` or `python{major}{minor}`"""
        if self.version is None:
            return "python3"
        major, minor = self.version
        return f"python{major}{minor}"


@dataclass(frozen=True)
class DefinitionAsset:
    file_name: str
    content: bytes


@dataclass(frozen=True)
class ImportLibraryArtifact:
    path: Path
    extension: Extension


@dataclass(frozen=True)
class ToolCommand:
    output_path: Path
    command: Cmd

    @property
    def program(self) -> str:
        return self.command[0]

    def __str__(self) -> str:
        return command_line(self.command)


def implib_extension(env: Env) -> Extension:
    return IMPLIB_EXT_MSVC if env == "msvc" else IMPLIB_EXT_GNU


def implib_artifact(out_dir: Path, target: TargetDescriptor) -> ImportLibraryArtifact:
    extension = implib_extension(target.env)
    return ImportLibraryArtifact(
        path=Path(out_dir, f"{target.library_name}{extension}"),
        extension=extension,
    )
