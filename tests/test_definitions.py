import pytest

from implibgen.domain.definitions import DEFINITIONS, lookup, supported_versions
from implibgen.errors import UnsupportedVersion


def test_supported_versions():
    assert supported_versions() == ((3, 7), (3, 8), (3, 9), (3, 10), (3, 11))


def test_lookup_version_agnostic():
    asset = lookup(None).unwrap()
    assert asset.file_name == "python3.def"
    assert asset.content.startswith(b'LIBRARY "python3.dll"\nEXPORTS\n')


@pytest.mark.parametrize("minor", range(7, 12))
def test_lookup_versioned(minor):
    asset = lookup((3, minor)).unwrap()
    assert asset.file_name == f"python3{minor}.def"
    assert asset.content.startswith(f'LIBRARY "python3{minor}.dll"'.encode())


def test_lookup_accepts_list_version():
    assert lookup([3, 9]).unwrap().file_name == "python39.def"  # type: ignore


@pytest.mark.parametrize("version", [(3, 99), (3, 6), (2, 7), (4, 0)])
def test_lookup_unsupported(version):
    error = lookup(version).failure()
    assert isinstance(error, UnsupportedVersion)
    assert error.version == version
    assert str(version) in str(error)


def test_definitions_are_read_only():
    with pytest.raises(TypeError):
        DEFINITIONS[(3, 12)] = DEFINITIONS[None]  # type: ignore


def test_stable_abi_exports():
    content = lookup(None).unwrap().content.decode()
    assert "\nPy_Initialize\n" in content
    assert "\nPyExc_TypeError DATA\n" in content
