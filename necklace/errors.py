"""
ADD NECKLACE Errors - Failure kinds raised while generating an image.
"""

from typing import Optional


class NecklaceError(Exception):
    """Base class for all application errors."""

    kind: str = "NecklaceError"


class ValidationError(NecklaceError):
    """Generation was attempted without both images selected."""

    kind = "ValidationError"


class NoImageReturned(NecklaceError):
    """The service responded but supplied no inline image part."""

    kind = "NoImageReturned"


class ServiceError(NecklaceError):
    """Network, transport or service-side failure."""

    kind = "ServiceError"


class GenerationError(NecklaceError):
    """
    User-facing failure of one orchestration step.

    The message names the step that failed; the underlying error is
    chained as __cause__.
    """

    kind = "GenerationError"

    def __init__(self, message: str, stage=None):
        super().__init__(message)
        self.message = message
        self.stage = stage

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    @property
    def cause_kind(self) -> Optional[str]:
        """Kind of the underlying error, e.g. 'NoImageReturned'."""
        cause = self.__cause__
        if cause is None:
            return None
        if isinstance(cause, NecklaceError):
            return cause.kind
        return ServiceError.kind
