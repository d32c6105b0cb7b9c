"""Exception hierarchy for peon-ping."""

from pathlib import Path


class PeonError(Exception):
    """Base exception for peon-ping errors."""

    pass


class HookEventParseError(PeonError):
    """Raised when a hook event payload cannot be decoded."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to parse hook event: {reason}")


class ManifestLoadError(PeonError):
    """Error loading a pack manifest from disk."""

    def __init__(self, message: str, path: str | Path | None = None):
        self.path = str(path) if path else None
        super().__init__(f"{message}" + (f": {path}" if path else ""))


class VersionParseError(PeonError):
    """Raised when a version string is not MAJOR.MINOR.PATCH."""

    def __init__(self, version: str, reason: str):
        self.version = version
        self.reason = reason
        super().__init__(f"{reason}: {version}")


class UnsupportedPlatformError(PeonError):
    """Raised when no release asset exists for the running OS/architecture."""

    pass
