class ConfigurationError(RuntimeError):
    """Raised when the completion service cannot be configured (e.g. no credential)."""


class GenerationError(RuntimeError):
    """Base class for failures of a single completion call."""


class EmptyResponse(GenerationError):
    """The service answered without any content."""


class MalformedResponse(GenerationError):
    """The content could not be decoded into a quiz payload."""


class UpstreamError(GenerationError):
    """The transport or the service call itself failed."""
