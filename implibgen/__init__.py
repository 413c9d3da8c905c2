from implibgen.domain.definitions import lookup, supported_versions
from implibgen.domain.entities import (
    DefinitionAsset,
    ImportLibraryArtifact,
    TargetDescriptor,
    ToolCommand,
)
from implibgen.domain.host import HostContext, find_lib_exe
from implibgen.domain.toolchain import (
    LLVM,
    MinGW,
    ToolchainVariant,
    VendorLib,
    ZigWrapper,
    resolve,
)
from implibgen.errors import (
    GenerationError,
    ToolExitedWithFailure,
    ToolInvocationFailed,
    UnsupportedTarget,
    UnsupportedVersion,
)
from implibgen.generator import (
    ImportLibraryGenerator,
    generate,
    generate_implib_for_target,
)

__all__ = [
    "DefinitionAsset",
    "GenerationError",
    "HostContext",
    "ImportLibraryArtifact",
    "ImportLibraryGenerator",
    "LLVM",
    "MinGW",
    "TargetDescriptor",
    "ToolCommand",
    "ToolExitedWithFailure",
    "ToolInvocationFailed",
    "ToolchainVariant",
    "UnsupportedTarget",
    "UnsupportedVersion",
    "VendorLib",
    "ZigWrapper",
    "find_lib_exe",
    "generate",
    "generate_implib_for_target",
    "lookup",
    "resolve",
    "supported_versions",
]
