import json

import pytest

from ogcard.services.structured_data import (
    JSONBlockError,
    StructuredDataExtractor,
    classify_json_error,
    normalize_image_value,
)


def _decode_error(text: str) -> Exception:
    try:
        json.loads(text)
    except ValueError as e:
        return e
    raise AssertionError(f"{text!r} decoded without error")


class TestStructuredDataExtractor:
    """Unit tests for StructuredDataExtractor"""

    def setup_method(self):
        self.extractor = StructuredDataExtractor()

    def test_first_block_with_image_wins(self):
        """Test scanning stops at the first block carrying an image."""
        # Arrange
        blocks = [
            '{"@type": "Organization", "name": "Acme"}',
            '{"@type": "Product", "image": "https://example.com/first.jpg"}',
            '{"@type": "Product", "image": "https://example.com/second.jpg"}',
        ]

        # Act
        result = self.extractor.find_image(blocks)

        # Assert
        assert result == "https://example.com/first.jpg"

    def test_malformed_block_is_skipped(self):
        """Test a broken block does not stop later blocks from being read."""
        # Arrange
        blocks = [
            '{"image": "https://example.com/broken.jpg",',
            '  {"image": "https://example.com/good.jpg"}  \n',
        ]

        # Act
        result = self.extractor.find_image(blocks)

        # Assert
        assert result == "https://example.com/good.jpg"

    def test_no_image_returns_none(self):
        """Test None is returned when no block declares an image."""
        blocks = ['{"@type": "WebSite"}', '[{"image": "in-a-list.jpg"}]', 'not json']

        assert self.extractor.find_image(blocks) is None

    def test_image_object_and_list(self):
        """Test ImageObject and list image values are reduced to a URL."""
        assert self.extractor.find_image(
            ['{"image": {"@type": "ImageObject", "url": "https://example.com/obj.jpg"}}']
        ) == "https://example.com/obj.jpg"
        assert self.extractor.find_image(
            ['{"image": ["https://example.com/a.jpg", "https://example.com/b.jpg"]}']
        ) == "https://example.com/a.jpg"

    def test_lone_surrogate_is_skipped(self):
        """Test text that is not valid UTF-8 is skipped rather than raised."""
        blocks = ['{"image": "\ud800.jpg"}', '{"image": "ok.jpg"}']

        assert self.extractor.find_image(blocks) == "ok.jpg"


class TestJSONErrorClassification:
    """Unit tests for classify_json_error"""

    def test_syntax_error(self):
        assert classify_json_error(_decode_error('{"a": }')) == JSONBlockError.SYNTAX_ERROR

    def test_trailing_data_is_state_mismatch(self):
        assert classify_json_error(_decode_error('{"a": 1}}')) == JSONBlockError.STATE_MISMATCH

    def test_control_character(self):
        assert classify_json_error(_decode_error('{"a": "line\x01"}')) == JSONBlockError.CONTROL_CHAR

    def test_depth_exceeded(self):
        assert classify_json_error(RecursionError()) == JSONBlockError.DEPTH_EXCEEDED

    def test_malformed_utf8(self):
        error = UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed")
        assert classify_json_error(error) == JSONBlockError.MALFORMED_UTF8


@pytest.mark.parametrize("value,expected", [
    ("https://example.com/a.jpg", "https://example.com/a.jpg"),
    ("  ", None),
    ([], None),
    ({"contentUrl": "https://example.com/c.jpg"}, "https://example.com/c.jpg"),
    (42, None),
])
def test_normalize_image_value(value, expected):
    assert normalize_image_value(value) == expected
