class InfoDistError(Exception):
    pass


class ConfigurationError(InfoDistError, ValueError):
    """Invalid compressor construction arguments."""


class BackendError(InfoDistError):
    """The underlying compression library failed."""

    def __init__(self, backend: str, message: str) -> None:
        super().__init__(f"{backend}: {message}")
        self.backend = backend


class CompressorContractError(InfoDistError):
    """A compressor reported lengths the distance formula cannot use."""
