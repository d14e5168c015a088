"""Tests for images module."""

import base64
import io
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from PIL import Image

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from necklace.images import (
    DEFAULT_MEDIA_TYPE,
    EncodedImage,
    accepts_upload,
    encode_image,
    encode_path,
    encode_upload,
    is_image_media_type,
)


def make_png_bytes(size=(40, 30), color='red'):
    buffer = io.BytesIO()
    Image.new('RGB', size, color=color).save(buffer, format='PNG')
    return buffer.getvalue()


class FakeUpload:
    """Stand-in for a Streamlit UploadedFile."""

    def __init__(self, content, type=''):
        self._content = content
        self.type = type

    def getvalue(self):
        return self._content


class TestEncodeImage:
    """Tests for encode_image."""

    def test_encodes_content_as_base64(self):
        """Data should be the base64 text of the full content."""
        image = encode_image(b'\x89PNG raw bytes', 'image/png')

        assert image.data == base64.b64encode(b'\x89PNG raw bytes').decode('ascii')
        assert image.raw == b'\x89PNG raw bytes'
        assert image.media_type == 'image/png'

    def test_missing_media_type_falls_back(self):
        """No declared type should fall back to image/jpeg."""
        assert encode_image(b'abc').media_type == DEFAULT_MEDIA_TYPE
        assert encode_image(b'abc', '').media_type == DEFAULT_MEDIA_TYPE
        assert DEFAULT_MEDIA_TYPE == 'image/jpeg'

    def test_no_content_validation(self):
        """Arbitrary bytes are accepted as-is."""
        image = encode_image(b'not an image at all', 'image/png')

        assert image.raw == b'not an image at all'

    def test_data_uri(self):
        image = encode_image(b'hello', 'image/png')

        assert image.data_uri() == 'data:image/png;base64,aGVsbG8='


class TestEncodedImage:
    """Tests for the EncodedImage value."""

    def test_is_immutable(self):
        image = EncodedImage('aGVsbG8=', 'image/png')

        with pytest.raises(AttributeError):
            image.media_type = 'image/jpeg'

    def test_equality(self):
        assert EncodedImage('aGVsbG8=', 'image/png') == EncodedImage('aGVsbG8=', 'image/png')
        assert EncodedImage('aGVsbG8=', 'image/png') != EncodedImage('aGVsbG8=', 'image/jpeg')

    def test_dimensions_reads_image(self):
        """dimensions should report width and height."""
        image = encode_image(make_png_bytes(size=(40, 30)), 'image/png')

        assert image.dimensions() == (40, 30)

    def test_dimensions_of_undecodable_data(self):
        """Undecodable data should give None rather than raise."""
        assert encode_image(b'garbage', 'image/png').dimensions() is None


class TestEncodeUpload:
    """Tests for encode_upload."""

    def test_none_gives_none(self):
        """A cleared selection should produce no image."""
        assert encode_upload(None) is None

    def test_uses_declared_type(self):
        image = encode_upload(FakeUpload(b'data', type='image/webp'))

        assert image.media_type == 'image/webp'
        assert image.raw == b'data'

    def test_empty_type_falls_back(self):
        image = encode_upload(FakeUpload(b'data', type=''))

        assert image.media_type == DEFAULT_MEDIA_TYPE

    def test_missing_type_attribute_falls_back(self):
        uploaded = SimpleNamespace(getvalue=lambda: b'data')

        assert encode_upload(uploaded).media_type == DEFAULT_MEDIA_TYPE


class TestEncodePath:
    """Tests for encode_path."""

    @pytest.mark.parametrize("suffix,expected", [
        ('.png', 'image/png'),
        ('.PNG', 'image/png'),
        ('.jpg', 'image/jpeg'),
        ('.jpeg', 'image/jpeg'),
        ('.webp', 'image/webp'),
        ('.gif', 'image/gif'),
        ('.bmp', DEFAULT_MEDIA_TYPE),
    ])
    def test_media_type_from_suffix(self, tmp_path, suffix, expected):
        path = tmp_path / f"photo{suffix}"
        path.write_bytes(b'content')

        image = encode_path(path)

        assert image.media_type == expected
        assert image.raw == b'content'


class TestAcceptsUpload:
    """Tests for which selections replace the held image."""

    def test_non_image_type_is_ignored(self):
        assert accepts_upload(FakeUpload(b'%PDF', type='application/pdf')) is False

    def test_any_image_type_is_accepted(self):
        assert accepts_upload(FakeUpload(b'BM', type='image/bmp')) is True
        assert accepts_upload(FakeUpload(b'II*', type='image/tiff')) is True

    def test_cleared_selection_is_accepted(self):
        assert accepts_upload(None) is True

    def test_undeclared_type_is_accepted(self):
        assert accepts_upload(FakeUpload(b'data', type='')) is True


class TestIsImageMediaType:
    """Tests for the drag-and-drop acceptance rule."""

    def test_accepts_any_image_type(self):
        assert is_image_media_type('image/png')
        assert is_image_media_type('image/heic')

    def test_rejects_other_types(self):
        assert not is_image_media_type('application/pdf')
        assert not is_image_media_type('text/plain')
        assert not is_image_media_type('')
        assert not is_image_media_type(None)
