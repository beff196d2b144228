"""Exception hierarchy shared by resolvers, installers and the CLI."""


class SetupJavaError(Exception):
    """Base class for every failure surfaced by the installer."""


class ConfigurationError(SetupJavaError):
    """Invalid version syntax, unsupported architecture, package type or platform."""


class ResolutionError(SetupJavaError):
    """No candidate in the vendor catalog satisfies the requested range."""


class TransportError(SetupJavaError):
    """HTTP failure or malformed catalog payload."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class LocalFileError(SetupJavaError):
    """Problems with a caller-supplied JDK archive."""
