"""Exception taxonomy for the study-aid client.

Rate-limit and other remote-service failures are not wrapped: they surface as
the transport's own exceptions so callers see exactly what the service said.
"""


class StudyAidError(RuntimeError):
    """Base class for errors raised by this package."""


class ConfigurationError(StudyAidError):
    """The Gemini credential is missing. Never retried."""


class AudioValidationError(StudyAidError):
    """Audio is empty or over the size ceiling. Raised before any network call."""


class EmptyTranscriptionError(StudyAidError):
    """The service answered but the transcript is empty or whitespace-only."""
