from gumble.version import Version


def test_semantic_version_components():
    assert Version(0x010203).semantic_version() == (1, 2, 3)


def test_semantic_version_all_bits():
    assert Version(0xFFFFFFFF).semantic_version() == (0xFFFF, 0xFF, 0xFF)


def test_semantic_version_round_trip():
    major, minor, patch = Version(0x00041A07).semantic_version()
    assert (major << 16) | (minor << 8) | patch == 0x00041A07


def test_defaults_are_empty():
    version = Version()
    assert version.semantic_version() == (0, 0, 0)
    assert (version.release, version.os, version.os_version) == ("", "", "")