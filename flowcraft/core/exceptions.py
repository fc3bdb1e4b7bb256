"""FlowCraft service exceptions."""


class FlowCraftError(Exception):
    """Base exception for FlowCraft."""


class ConfigError(FlowCraftError):
    """Invalid or missing configuration."""


class UserCancelled(FlowCraftError):
    """File picker was dismissed without a selection. Not a failure."""


class IOFailure(FlowCraftError):
    """Read, write or create-directory failure on a diagram file or the state file."""


class CorruptSnapshot(FlowCraftError):
    """Persisted recent-files snapshot exists but cannot be decoded."""


class LockUnavailable(FlowCraftError):
    """Recent-files lock could not be acquired in time."""


class UnsupportedFormat(FlowCraftError):
    """Export format is not one of the supported formats."""
