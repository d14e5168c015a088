"""
ADD NECKLACE Images - Image intake.
Converts selected files into in-memory base64 images with a media type.
"""

import base64
import io
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

DEFAULT_MEDIA_TYPE = "image/jpeg"

_SUFFIX_MEDIA_TYPES = {
    '.jpg': "image/jpeg",
    '.jpeg': "image/jpeg",
    '.png': "image/png",
    '.gif': "image/gif",
    '.webp': "image/webp",
}


class EncodedImage:
    """Image content as base64 text plus its declared media type."""

    __slots__ = ('_data', '_media_type')

    def __init__(self, data: str, media_type: str):
        object.__setattr__(self, '_data', data)
        object.__setattr__(self, '_media_type', media_type)

    def __setattr__(self, name, value):
        raise AttributeError("EncodedImage is immutable")

    @property
    def data(self) -> str:
        return self._data

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    def raw(self) -> bytes:
        """Decoded image bytes."""
        return base64.b64decode(self._data)

    def data_uri(self) -> str:
        return f"data:{self._media_type};base64,{self._data}"

    def dimensions(self) -> Optional[Tuple[int, int]]:
        """Pixel size of the image, or None if Pillow cannot read it."""
        try:
            with Image.open(io.BytesIO(self.raw)) as img:
                return img.size
        except Exception:
            return None

    def __eq__(self, other):
        if not isinstance(other, EncodedImage):
            return NotImplemented
        return self._data == other._data and self._media_type == other._media_type

    def __hash__(self):
        return hash((self._data, self._media_type))

    def __repr__(self):
        return f"EncodedImage(media_type={self._media_type!r}, size={len(self._data)})"


def is_image_media_type(media_type: Optional[str]) -> bool:
    """Drag-and-drop acceptance rule: any image/* type."""
    return bool(media_type) and media_type.startswith('image/')


def accepts_upload(uploaded) -> bool:
    """
    Whether a selection should replace the held image.

    Cleared selections and files without a declared type are accepted;
    files declaring a non-image type are ignored.
    """
    if uploaded is None:
        return True
    media_type = getattr(uploaded, 'type', None)
    return not media_type or is_image_media_type(media_type)


def encode_image(content: bytes, media_type: Optional[str] = None) -> EncodedImage:
    """
    Encode raw file content.

    Args:
        content: Full binary content of the file
        media_type: Declared content type; falls back to DEFAULT_MEDIA_TYPE

    Returns:
        EncodedImage with base64 text data
    """
    data = base64.standard_b64encode(content).decode('ascii')
    return EncodedImage(data, media_type or DEFAULT_MEDIA_TYPE)


def encode_upload(uploaded) -> Optional[EncodedImage]:
    """Encode a Streamlit UploadedFile. A cleared selection gives None."""
    if uploaded is None:
        return None
    return encode_image(uploaded.getvalue(), getattr(uploaded, 'type', None))


def media_type_for_path(path: Path) -> str:
    return _SUFFIX_MEDIA_TYPES.get(path.suffix.lower(), DEFAULT_MEDIA_TYPE)


def encode_path(path: Path) -> EncodedImage:
    """Read an image file from disk."""
    path = Path(path)
    return encode_image(path.read_bytes(), media_type_for_path(path))
