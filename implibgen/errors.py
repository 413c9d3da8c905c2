from implibgen.types import Cmd, Version


def command_line(command: Cmd) -> str:
    return " ".join(map(str, command))


class GenerationError(Exception):
    """Base class of every failure reported by the generator."""


class UnsupportedVersion(GenerationError):
    def __init__(self, version: Version):
        self.version = version
        super().__init__(f"Unsupported Python version: {version}")


class UnsupportedTarget(GenerationError):
    def __init__(self, arch: str, env: str):
        self.arch = arch
        self.env = env
        super().__init__(f"Unsupported target arch '{arch}' or env ABI '{env}'")


class ToolInvocationFailed(GenerationError):
    """The dlltool program could not be started at all."""

    def __init__(self, command: Cmd, error: OSError):
        self.command = command
        self.error = error
        super().__init__(f"'{command_line(command)}' failed with {error}")


class ToolExitedWithFailure(GenerationError):
    """The dlltool program ran but returned a non-zero exit status."""

    def __init__(self, command: Cmd, returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"'{command_line(command)}' failed with exit status {returncode}"
        )
