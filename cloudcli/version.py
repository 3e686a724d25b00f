"""Version information of the tool and of the running interpreter."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from importlib import metadata

_DISTRIBUTION = "cloudcli"


@dataclass(frozen=True)
class Version:
    """Build and runtime version details."""

    major: str = ""
    minor: str = ""
    patch: str = ""
    git_commit: str = ""
    build_date: str = ""
    python_version: str = ""
    compiler: str = ""
    platform: str = ""

    def __str__(self) -> str:
        return (
            f"version {self.major}.{self.minor}, git_commit {self.git_commit}, "
            f"build_date {self.build_date}, python_version {self.python_version}, "
            f"compiler {self.compiler}, platform {self.platform}"
        )


def _release_parts() -> tuple[str, str, str]:
    try:
        release = metadata.version(_DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "", "", ""
    parts = (release.split(".") + ["", "", ""])[:3]
    return parts[0], parts[1], parts[2]


def current_version() -> Version:
    """Describe the installed release and the interpreter running it."""
    major, minor, patch = _release_parts()
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        git_commit=os.environ.get("CLOUDCLI_GIT_COMMIT", ""),
        build_date=os.environ.get("CLOUDCLI_BUILD_DATE", ""),
        python_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=f"{platform.system().lower()}/{platform.machine()}",
    )