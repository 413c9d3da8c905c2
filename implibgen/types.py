from typing import Literal

Arch = str
Env = str
Extension = Literal[".dll.a", ".lib"]


Cmd = tuple[str, ...]
Version = tuple[int, int]
