"""
Exceptions raised by the provider plumbing.

The UI layer catches all of these at the action site and turns them into
toast notifications.
"""

from __future__ import annotations

from .config import EXPIRED_CREDENTIAL_MARKER


class CreativeLabError(Exception):
    """Base class for all Viral Creative Lab errors."""


class MissingApiKeyError(CreativeLabError):
    pass


class ProviderError(CreativeLabError):
    """A call to the generative-AI provider failed."""


class AnalysisError(ProviderError):
    """The analysis response could not be turned into a ProductAnalysis."""


class NoImageGeneratedError(ProviderError):
    pass


class VideoGenerationError(ProviderError):
    pass


def is_expired_credential(exc: BaseException) -> bool:
    """True if the provider rejected a linked key that is no longer valid."""
    return EXPIRED_CREDENTIAL_MARKER in str(exc)
