"""Exception hierarchy for mimels.

Every fatal condition of a run is raised as a subclass of MimelsError
and reported by the CLI entry point.
"""


class MimelsError(Exception):
    """Base exception for all mimels errors."""


class ConfigError(MimelsError):
    """Raised when the configuration file content is invalid."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file does not exist."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


class ClassifierInitError(MimelsError):
    """Raised when the content-type classifier cannot be initialised."""


class ClassificationError(MimelsError):
    """Raised when a file's content type cannot be determined."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'libmagic error for "{path}": {reason}')
        self.path = path
        self.reason = reason


class RootAccessError(MimelsError):
    """Raised when a root path cannot be accessed at all."""

    def __init__(self, root: str, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f'"{root}": {reason}')
        self.root = root
        self.error = error


class NothingToListError(MimelsError):
    """Raised when a completed scan recorded no entries."""

    def __init__(self) -> None:
        super().__init__("Nothing to list")
