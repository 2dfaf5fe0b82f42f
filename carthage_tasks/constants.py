"""Constant variables"""

ACTION_BOOTSTRAP = "bootstrap"
ACTION_UPDATE = "update"
ACTION_BUILD = "build"
ACTION_CLEAN = "clean"

ARGUMENT_ARCHIVE = "--archive"
ARGUMENT_CACHE_BUILDS = "--cache-builds"
ARGUMENT_PLATFORM = "--platform"
ARGUMENT_DERIVED_DATA = "--derived-data"

CARTHAGE_TOOL = "carthage"
CARTHAGE_FILE = "Cartfile"
CARTHAGE_FILE_RESOLVED = "Cartfile.resolved"
CARTHAGE_DIR = "Carthage"
CARTHAGE_BUILD_DIR = "Build"
CARTHAGE_DERIVED_DATA_DIR = "carthage"
CARTHAGE_USR_BIN_DIR = "/usr/local/bin"
CARTHAGE_USR_BIN_PATH = f"{CARTHAGE_USR_BIN_DIR}/{CARTHAGE_TOOL}"

CARTHAGE_PLATFORM_IOS = "iOS"
CARTHAGE_PLATFORM_MACOS = "Mac"
CARTHAGE_PLATFORM_TVOS = "tvOS"
CARTHAGE_PLATFORM_WATCHOS = "watchOS"
CARTHAGE_PLATFORM_ALL = "all"

XCODE_XCCONFIG_FILE = "XCODE_XCCONFIG_FILE"
"""Environment variable Carthage passes on to xcodebuild"""
XCCONFIG_WORKAROUND_FILE = "gradle-xc12-carthage.xcconfig"
XCCONFIG_WORKAROUND_XCODE_MAJOR = 12
XCCONFIG_SIMULATORS = ("iphonesimulator", "appletvsimulator")
XCCONFIG_EXCLUDED_ARCHS_VALUE = "arm64 arm64e armv7 armv7s armv6 armv8"

DEVELOPER_DIR = "DEVELOPER_DIR"
XCODE_BUNDLE_IDENTIFIER = "com.apple.dt.Xcode"
XCODE_APPLICATIONS_DIR = "/Applications"

CONFIG_FILE_NAME = "carthage.yaml"
DEFAULT_DERIVED_DATA = "build/DerivedData"
