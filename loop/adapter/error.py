"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class MediaUploadError(ProviderError):
    """The media store rejected or failed an upload."""

    pass


class RealtimeError(ProviderError):
    """The real-time transport failed to publish an event."""

    pass
