import pytest

from carthage_tasks.config import ConfigError, ConfigLoader
from carthage_tasks.platform import PlatformType


def test_defaults(project_dir):
    settings = ConfigLoader(project_dir).load()

    assert settings.project_dir == project_dir.resolve()
    assert settings.root_dir == settings.project_dir
    assert settings.derived_data_path == settings.project_dir / "build" / "DerivedData"
    assert settings.platform_type is None
    assert settings.cache is False
    assert settings.archive is False
    assert settings.xcode_version is None
    assert settings.serialize_debugging is False


def test_file_values_are_read(project_dir):
    (project_dir / "carthage.yaml").write_text(
        "type: tvOS\n"
        "cache: true\n"
        "xcode_version: 12\n"
        "derived_data_path: DerivedData\n"
    )

    settings = ConfigLoader(project_dir).load()

    assert settings.platform_type is PlatformType.TVOS
    assert settings.cache is True
    assert settings.xcode_version == "12"
    assert settings.derived_data_path == settings.project_dir / "DerivedData"


def test_overrides_replace_file_values(project_dir):
    (project_dir / "carthage.yaml").write_text("type: tvOS\ncache: true\n")

    settings = ConfigLoader(project_dir).load(type="iOS", cache=False, archive=None)

    assert settings.platform_type is PlatformType.IOS
    assert settings.cache is False
    assert settings.archive is False


def test_numeric_xcode_version_becomes_string(project_dir):
    (project_dir / "carthage.yaml").write_text("xcode_version: 12.5\n")

    assert ConfigLoader(project_dir).load().xcode_version == "12.5"


def test_empty_file(project_dir):
    (project_dir / "carthage.yaml").write_text("")

    assert ConfigLoader(project_dir).load().cache is False


def test_invalid_yaml(project_dir):
    (project_dir / "carthage.yaml").write_text("type: [iOS\n")

    with pytest.raises(ConfigError):
        ConfigLoader(project_dir).load()


def test_non_mapping_file(project_dir):
    (project_dir / "carthage.yaml").write_text("- iOS\n")

    with pytest.raises(ConfigError, match="must contain a mapping"):
        ConfigLoader(project_dir).load()


def test_unknown_key(project_dir):
    (project_dir / "carthage.yaml").write_text("platforms: iOS\n")

    with pytest.raises(ConfigError):
        ConfigLoader(project_dir).load()


def test_explicit_config_file(project_dir, tmp_path):
    config_file = tmp_path / "ci.yaml"
    config_file.write_text("archive: true\n")

    assert ConfigLoader(project_dir, config_file).load().archive is True
