"""Build targets and build option flags understood by the build engine.

Both sets are closed. The resolver only ever sees them as data (a set of
names and a parser function), so an engine with a different catalogue can
pass its own.
"""
from __future__ import annotations

import enum

BUILD_TARGETS: frozenset[str] = frozenset(
    {
        "StandaloneOSX",
        "StandaloneWindows",
        "StandaloneWindows64",
        "StandaloneLinux64",
        "iOS",
        "Android",
        "WebGL",
        "WSAPlayer",
        "PS4",
        "PS5",
        "XboxOne",
        "tvOS",
        "Switch",
        "GameCoreXboxSeries",
        "GameCoreXboxOne",
        "LinuxHeadlessSimulation",
        "EmbeddedLinux",
        "QNX",
        "VisionOS",
        "NoTarget",
    }
)


class BuildOptions(enum.IntFlag):
    None_ = 0
    Development = 1 << 0
    AutoRunPlayer = 1 << 2
    ShowBuiltPlayer = 1 << 3
    BuildAdditionalStreamedScenes = 1 << 4
    AcceptExternalModificationsToPlayer = 1 << 5
    InstallInBuildFolder = 1 << 6
    CleanBuildCache = 1 << 7
    ConnectWithProfiler = 1 << 8
    AllowDebugging = 1 << 9
    SymlinkSources = 1 << 10
    UncompressedAssetBundle = 1 << 11
    ConnectToHost = 1 << 12
    CustomConnectionID = 1 << 13
    BuildScriptsOnly = 1 << 15
    PatchPackage = 1 << 16
    CompressWithLz4 = 1 << 17
    CompressWithLz4HC = 1 << 18
    ComputeCRC = 1 << 20
    StrictMode = 1 << 21
    IncludeTestAssemblies = 1 << 22
    NoUniqueIdentifier = 1 << 23
    WaitForPlayerConnection = 1 << 25
    EnableCodeCoverage = 1 << 26
    EnableDeepProfilingSupport = 1 << 28
    DetailedBuildReport = 1 << 29


# "None" is a keyword in Python, so the empty set is spelled None_ in code.
_OPTION_ALIASES = {"None": BuildOptions.None_}

_ALL_OPTION_BITS = 0
for _member in BuildOptions:
    _ALL_OPTION_BITS |= int(_member)


def format_build_options(options: BuildOptions) -> str:
    if not options:
        return "None"
    names = [m.name for m in BuildOptions if m.value and m in options]
    return ", ".join(names)


def parse_build_options(text: str) -> BuildOptions:
    """Parse a member name, a comma-separated list of names, or an integer.

    Names are matched case-sensitively. Raises ``ValueError`` for anything
    that does not map onto defined bits.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty build options value")

    if raw.isascii() and raw.isdigit():
        value = int(raw)
        if value & ~_ALL_OPTION_BITS:
            raise ValueError(f"undefined build option bits in {text!r}")
        return BuildOptions(value)

    result = BuildOptions.None_
    for part in raw.split(","):
        name = part.strip()
        if name in _OPTION_ALIASES:
            result |= _OPTION_ALIASES[name]
            continue
        member = BuildOptions.__members__.get(name)
        if member is None or not member.value:
            raise ValueError(f"unknown build option {name!r}")
        result |= member
    return result
