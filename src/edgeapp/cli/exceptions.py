"""Custom exceptions for the edgeapp CLI."""


class CLIError(Exception):
    """Exception for expected CLI errors that should show clean user-facing messages."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ConflictingOptionsError(CLIError):
    """Raised when mutually exclusive arguments or options are combined."""

    def __init__(self, message: str, exit_code: int = 2):
        super().__init__(message, exit_code)


class MissingInputError(CLIError):
    """A required value was not given and prompting is disabled."""


class InputError(CLIError):
    """An interactive prompt could not be completed."""


class ResolutionError(CLIError):
    """An app identifier could not be resolved to an app id."""


class SecretNotFoundError(CLIError):
    """The requested secret does not exist for the app."""


class APIError(CLIError):
    """Transport, authentication or server-side failure talking to the API."""


class LocalIOError(CLIError):
    """Local filesystem or working directory access failed."""


class UnsupportedFormatError(CLIError):
    """The requested output format cannot be used for this output."""
