"""
Release checks against the GitHub releases API.

Only the checking half of an upgrade lives here: parse and compare
versions, and find the release asset built for this machine. Replacing
the installed package is left to the user's installer.
"""

from __future__ import annotations

import logging
import platform

import httpx
from pydantic import BaseModel, Field

from peon.errors import UnsupportedPlatformError, VersionParseError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com/repos/tonyyont/peon-ping/releases/latest"


class GitHubAsset(BaseModel):
    name: str
    browser_download_url: str


class GitHubRelease(BaseModel):
    tag_name: str
    assets: list[GitHubAsset] = Field(default_factory=list)


def parse_version_tag(tag: str) -> str:
    """Strip a leading ``v`` from a release tag (``v1.2.0`` -> ``1.2.0``)."""
    return tag.removeprefix("v")


def parse_semver(version: str) -> tuple[int, int, int]:
    """
    Parse a strict MAJOR.MINOR.PATCH version.

    Raises:
        VersionParseError: If the version does not have three numeric parts
    """
    parts = version.split(".")
    if len(parts) != 3:
        raise VersionParseError(version, "invalid semver")

    numbers = []
    for label, part in zip(("major", "minor", "patch"), parts, strict=True):
        if not part.isdigit():
            raise VersionParseError(version, f"invalid {label} version '{part}'")
        numbers.append(int(part))
    return numbers[0], numbers[1], numbers[2]


def is_version_up_to_date(current: str, latest: str) -> bool:
    """
    Check whether ``current`` is at least ``latest``.

    Raises:
        VersionParseError: If either version is malformed
    """
    return parse_semver(current) >= parse_semver(latest)


def get_asset_name(os_name: str | None = None, arch: str | None = None) -> str:
    """
    Get the release asset name for an OS and CPU architecture.

    Args:
        os_name: OS name, e.g. ``macos``/``Darwin`` (default: this machine)
        arch: Architecture, e.g. ``aarch64``/``arm64``/``x86_64`` (default: this machine)

    Returns:
        Asset name such as ``peon-aarch64-apple-darwin``

    Raises:
        UnsupportedPlatformError: If no asset is published for the platform
    """
    os_name = (os_name or platform.system()).lower()
    arch = (arch or platform.machine()).lower()

    arch_map = {"aarch64": "aarch64", "arm64": "aarch64", "x86_64": "x86_64", "amd64": "x86_64"}
    target_arch = arch_map.get(arch)
    if target_arch is None:
        raise UnsupportedPlatformError(f"unsupported architecture: {arch}")

    if os_name in ("macos", "darwin"):
        return f"peon-{target_arch}-apple-darwin"
    raise UnsupportedPlatformError(f"unsupported OS: {os_name}")


def find_matching_asset(release: GitHubRelease, asset_name: str) -> GitHubAsset | None:
    return next((a for a in release.assets if a.name == asset_name), None)


def fetch_latest_release(timeout: float = 10.0) -> GitHubRelease:
    """
    Fetch the latest release from GitHub.

    Raises:
        httpx.HTTPError: On connection failures or non-2xx responses
        pydantic.ValidationError: If the response is not a release object
    """
    response = httpx.get(
        GITHUB_API_URL,
        headers={
            "Accept": "application/vnd.github+json",
            "User-Agent": "peon-ping-upgrade",
        },
        timeout=timeout,
        follow_redirects=True,
    )
    response.raise_for_status()
    release = GitHubRelease.model_validate(response.json())
    logger.debug(f"Latest release: {release.tag_name} ({len(release.assets)} assets)")
    return release
