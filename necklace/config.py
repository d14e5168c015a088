"""
ADD NECKLACE Config - Settings read from the environment.
"""

import os
from typing import Mapping, Optional

DEFAULT_MODEL = 'gemini-2.5-flash-image'


class Config:
    """Explicit settings handed to the image editor."""

    def __init__(self, api_key: str, model: Optional[str] = None):
        if not api_key:
            raise ValueError("An API key is required")
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """
        Build settings from environment variables.

        GEMINI_API_KEY is preferred; API_KEY is accepted as a fallback.
        GEMINI_IMAGE_MODEL overrides the default image model.
        """
        env = os.environ if environ is None else environ

        api_key = env.get('GEMINI_API_KEY') or env.get('API_KEY')
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable not set")

        model = (env.get('GEMINI_IMAGE_MODEL') or '').strip() or None
        return cls(api_key=api_key, model=model)

    def __repr__(self):
        return f"Config(model={self.model!r})"
