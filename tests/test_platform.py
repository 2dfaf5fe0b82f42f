import pytest

from carthage_tasks.platform import PlatformType, carthage_platform_name


@pytest.mark.parametrize("platform_type, expected", [
    (PlatformType.IOS, "iOS"),
    (PlatformType.MACOS, "Mac"),
    (PlatformType.TVOS, "tvOS"),
    (PlatformType.WATCHOS, "watchOS"),
])
def test_known_platforms_map_to_carthage_names(platform_type, expected):
    assert carthage_platform_name(platform_type) == expected


@pytest.mark.parametrize("platform_type", [None, "iOS", "linux", 42, object()])
def test_anything_else_maps_to_all(platform_type):
    assert carthage_platform_name(platform_type) == "all"


def test_platform_type_lookup_ignores_case():
    assert PlatformType.from_string("ios") is PlatformType.IOS
    assert PlatformType.from_string("MACOS") is PlatformType.MACOS
    assert PlatformType.from_string("watchOS") is PlatformType.WATCHOS


@pytest.mark.parametrize("value", [None, "", "visionOS", "Macintosh"])
def test_platform_type_lookup_returns_none_for_unknown_names(value):
    assert PlatformType.from_string(value) is None


def test_carthage_spelling_of_macos_is_accepted():
    assert PlatformType.from_string("Mac") is PlatformType.MACOS
    assert carthage_platform_name(PlatformType.from_string("mac")) == "Mac"
