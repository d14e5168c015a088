#!/usr/bin/env python3
"""
ADD NECKLACE Orchestrator - Two-step necklace swap
Removes any necklace the person is wearing, then puts the new necklace on.
"""

import base64
import sys
from enum import Enum
from typing import Callable, Optional

from necklace.editor import BaseImageEditor
from necklace.errors import GenerationError, ValidationError
from necklace.images import EncodedImage

REMOVE_NECKLACE_PROMPT = (
    "Carefully remove any necklace the person is wearing. "
    "Reconstruct the neck and chest area to look natural and as if no necklace was ever there. "
    "Do not alter the person's face or clothing otherwise."
)

ADD_NECKLACE_PROMPT = (
    "Take the necklace from the second image and place it realistically and naturally "
    "around the neck of the person in the first image. "
    "The necklace should be scaled and positioned correctly to look like it is being worn. "
    "Preserve the original quality and details of both the person and the necklace."
)

# The model is assumed to answer the removal step with PNG data.
INTERMEDIATE_MEDIA_TYPE = "image/png"
RESULT_MEDIA_TYPE = "image/png"

REMOVE_FAILED_MESSAGE = "Failed to remove the necklace. Please try again."
ADD_FAILED_MESSAGE = "Failed to add the necklace. Please try again."


class Stage(Enum):
    IDLE = "idle"
    REMOVING_NECKLACE = "removing_necklace"
    ADDING_NECKLACE = "adding_necklace"
    DONE = "done"


STATUS_MESSAGES = {
    Stage.REMOVING_NECKLACE: "Removing existing necklace...",
    Stage.ADDING_NECKLACE: "Adding the new necklace...",
}


class NecklaceOrchestrator:
    """Runs the remove-then-add edit sequence against an image editor."""

    def __init__(
        self,
        editor: BaseImageEditor,
        on_stage: Optional[Callable[[Stage], None]] = None
    ):
        self.editor = editor
        self.on_stage = on_stage
        self.stage = Stage.IDLE

    def _enter(self, stage: Stage):
        self.stage = stage
        if self.on_stage:
            self.on_stage(stage)

    def remove_necklace(self, person: EncodedImage) -> EncodedImage:
        """
        Erase any necklace from the person photo.

        Returns:
            The edited person photo, typed as INTERMEDIATE_MEDIA_TYPE
        """
        self._enter(Stage.REMOVING_NECKLACE)
        try:
            data = self.editor.edit([person], REMOVE_NECKLACE_PROMPT)
        except Exception as e:
            print(f"Error removing necklace: {e}", file=sys.stderr)
            self._enter(Stage.IDLE)
            raise GenerationError(REMOVE_FAILED_MESSAGE, Stage.REMOVING_NECKLACE) from e

        return EncodedImage(base64.standard_b64encode(data).decode('ascii'), INTERMEDIATE_MEDIA_TYPE)

    def add_necklace(self, person: EncodedImage, necklace: EncodedImage) -> EncodedImage:
        """Put the necklace from the second image on the person in the first."""
        self._enter(Stage.ADDING_NECKLACE)
        try:
            data = self.editor.edit([person, necklace], ADD_NECKLACE_PROMPT)
        except Exception as e:
            print(f"Error adding necklace: {e}", file=sys.stderr)
            self._enter(Stage.IDLE)
            raise GenerationError(ADD_FAILED_MESSAGE, Stage.ADDING_NECKLACE) from e

        return EncodedImage(base64.standard_b64encode(data).decode('ascii'), RESULT_MEDIA_TYPE)

    def generate(
        self,
        person: Optional[EncodedImage],
        necklace: Optional[EncodedImage]
    ) -> EncodedImage:
        """
        Compose the necklace onto the person.

        Args:
            person: Photo of the person, possibly already wearing a necklace
            necklace: Photo of the necklace to try on

        Returns:
            The final composed image

        Raises:
            ValidationError: an input is missing (no service call is made)
            GenerationError: a step failed; .stage names which one
        """
        if person is None or necklace is None:
            raise ValidationError("Please upload both a person and a necklace image.")

        without_necklace = self.remove_necklace(person)
        result = self.add_necklace(without_necklace, necklace)

        self._enter(Stage.DONE)
        return result
