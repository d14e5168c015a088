"""
ADD NECKLACE Session - Browser session state behind the Streamlit page.
"""

from typing import Optional

from necklace.errors import GenerationError
from necklace.images import EncodedImage
from necklace.orchestrator import STATUS_MESSAGES, NecklaceOrchestrator

MISSING_IMAGES_MESSAGE = "Please upload both a person and a necklace image."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during image generation."


class SessionState:
    """Selected images, busy flag, status and error text, and the result."""

    def __init__(self):
        self.reset()

    def reset(self):
        """Back to an empty session, as after a page reload."""
        self.person_image: Optional[EncodedImage] = None
        self.necklace_image: Optional[EncodedImage] = None
        self.result_image: Optional[EncodedImage] = None
        self.busy = False
        self.status_text = ''
        self.error_text: Optional[str] = None

    def select_person(self, image: Optional[EncodedImage]):
        self.person_image = image
        self.result_image = None

    def select_necklace(self, image: Optional[EncodedImage]):
        self.necklace_image = image
        self.result_image = None

    @property
    def can_generate(self) -> bool:
        return (
            self.person_image is not None
            and self.necklace_image is not None
            and not self.busy
        )

    def _on_stage(self, stage):
        self.status_text = STATUS_MESSAGES.get(stage, '')

    def generate(self, orchestrator: NecklaceOrchestrator) -> bool:
        """
        Run one generation and record its outcome.

        Returns:
            True if a result image was produced
        """
        if self.busy:
            return False

        if self.person_image is None or self.necklace_image is None:
            self.error_text = MISSING_IMAGES_MESSAGE
            return False

        self.busy = True
        self.error_text = None
        self.result_image = None

        previous_callback = orchestrator.on_stage
        orchestrator.on_stage = self._chain_stage(previous_callback)
        try:
            self.result_image = orchestrator.generate(self.person_image, self.necklace_image)
        except GenerationError as e:
            self.error_text = e.message
        except Exception as e:
            self.error_text = str(e) or UNKNOWN_ERROR_MESSAGE
        finally:
            orchestrator.on_stage = previous_callback
            self.busy = False
            self.status_text = ''

        return self.result_image is not None

    def _chain_stage(self, callback):
        def on_stage(stage):
            self._on_stage(stage)
            if callback:
                callback(stage)
        return on_stage
