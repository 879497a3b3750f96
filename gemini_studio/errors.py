"""Error taxonomy shared by clients, services and app controllers."""


class GeminiStudioError(Exception):
    """Base class for every failure raised by this package."""
    pass


class ConfigurationError(GeminiStudioError):
    """Missing credential or configuration."""
    pass


class GenerationError(GeminiStudioError):
    """Remote model call failed."""
    pass


class EmptyResponseError(GenerationError):
    """Model returned no text."""
    pass


class ResponseValidationError(GenerationError):
    """Model reply did not match the declared result schema."""
    def __init__(self, message: str, raw_output: str):
        self.raw_output = raw_output
        super().__init__(message)


class SessionStateError(GeminiStudioError):
    """Chat session used outside its lifecycle."""
    pass


class SessionNotStartedError(SessionStateError):
    """send() called on a session that was never started."""
    pass


class MediaReadError(GeminiStudioError):
    """Image file could not be read."""
    pass


class MediaDecodeError(MediaReadError):
    """File was read but is not a supported image."""
    pass
