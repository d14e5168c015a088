"""
ADD NECKLACE Editor - Image edit service
Sends images plus an instruction to Gemini Image Editing and returns the edited image.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Sequence

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from necklace.config import DEFAULT_MODEL, Config
from necklace.errors import NoImageReturned, ServiceError
from necklace.images import EncodedImage


class BaseImageEditor(ABC):
    """Narrow interface to an image-edit model."""

    @abstractmethod
    def edit(self, images: Sequence[EncodedImage], instruction: str) -> bytes:
        """
        Edit one or more images according to a natural-language instruction.

        Returns:
            Bytes of the first image returned by the model

        Raises:
            NoImageReturned: the model answered without an image
            ServiceError: transport or service failure
        """


class GeminiImageEditor(BaseImageEditor):
    """Image edits through Gemini's image generation models."""

    def __init__(self, api_key: str, model: Optional[str] = None):
        """Initialize the Editor with Gemini API credentials."""
        self.client = genai.Client(api_key=api_key)
        self.model_name = model or DEFAULT_MODEL

    @classmethod
    def from_config(cls, config: Config) -> 'GeminiImageEditor':
        return cls(config.api_key, model=config.model)

    def _build_contents(self, images: Sequence[EncodedImage], instruction: str) -> list:
        """Inline image parts in order, followed by the instruction."""
        parts = [
            types.Part.from_bytes(data=image.raw, mime_type=image.media_type)
            for image in images
        ]
        parts.append(types.Part.from_text(text=instruction))
        return parts

    def _build_generate_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(response_modalities=["IMAGE"])

    def _iter_response_parts(self, response) -> Iterable[Any]:
        """Yield parts from a Gemini response, handling multiple response shapes."""
        candidates = getattr(response, "candidates", None)
        if candidates:
            content = getattr(candidates[0], "content", None)
            parts = getattr(content, "parts", None)
            if parts:
                return parts
        parts = getattr(response, "parts", None)
        if parts:
            return parts
        return []

    def _extract_image_bytes(self, response) -> Optional[bytes]:
        """Return the first inline image payload in the response."""
        for part in self._iter_response_parts(response):
            inline_data = getattr(part, "inline_data", None)
            if not inline_data:
                continue
            data = getattr(inline_data, "data", None)
            if data:
                return data
        return None

    def edit(self, images: Sequence[EncodedImage], instruction: str) -> bytes:
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=self._build_contents(images, instruction),
                config=self._build_generate_config(),
            )
        except (genai_errors.APIError, httpx.HTTPError) as e:
            raise ServiceError(str(e)) from e

        image_data = self._extract_image_bytes(response)
        if not image_data:
            raise NoImageReturned("The model returned no image")
        return image_data
