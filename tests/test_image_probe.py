from io import BytesIO

import httpx
from PIL import Image

from ogcard.core.models import ImageSize
from ogcard.services.image_probe import HttpImageProber


def png_bytes(width: int, height: int) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height)).save(buffer, format="PNG")
    return buffer.getvalue()


def make_prober(handler, **kwargs) -> HttpImageProber:
    return HttpImageProber(transport=httpx.MockTransport(handler), **kwargs)


class TestHttpImageProber:
    """Unit tests for HttpImageProber"""

    def test_probe_reads_dimensions(self):
        """Test the pixel size is read from the downloaded image."""
        # Arrange
        data = png_bytes(640, 480)
        prober = make_prober(lambda request: httpx.Response(200, content=data))

        # Act
        result = prober.probe("https://cdn.example.com/a.png")

        # Assert
        assert result == ImageSize(width=640, height=480)

    def test_probe_with_byte_cap(self):
        """Test a truncated download still yields the header dimensions."""
        data = png_bytes(800, 600)
        prober = make_prober(lambda request: httpx.Response(200, content=data), max_bytes=64)

        assert prober.probe("https://cdn.example.com/big.png") == ImageSize(width=800, height=600)

    def test_probe_http_error(self):
        prober = make_prober(lambda request: httpx.Response(404))

        assert prober.probe("https://cdn.example.com/missing.png") is None

    def test_probe_not_an_image(self):
        prober = make_prober(lambda request: httpx.Response(200, content=b"<html></html>"))

        assert prober.probe("https://cdn.example.com/page.html") is None

    def test_probe_transport_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        assert make_prober(handler).probe("https://cdn.example.com/slow.png") is None

    def test_probe_skips_relative_urls(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200)

        assert make_prober(handler).probe("img/relative.png") is None
        assert calls == []

    def test_refuses_private_and_loopback_hosts(self):
        """Test image URLs pointing into the local network are never fetched."""
        # Arrange
        calls = []

        def handler(request):
            calls.append(str(request.url))
            return httpx.Response(200, content=png_bytes(640, 480))

        prober = make_prober(handler)

        # Act
        results = [prober.probe("http://169.254.169.254/latest/meta-data/"),
                   prober.probe("http://127.0.0.1:6379/"),
                   prober.probe("http://localhost/a.png")]

        # Assert
        assert results == [None, None, None]
        assert calls == []

    def test_refuses_redirect_into_private_network(self):
        """Test a public image URL redirecting to a private host is not followed."""
        calls = []

        def handler(request):
            calls.append(str(request.url))
            if request.url.host == "cdn.example.com":
                return httpx.Response(302, headers={"Location": "http://10.0.0.5/secret.png"})
            return httpx.Response(200, content=png_bytes(640, 480))

        assert make_prober(handler).probe("https://cdn.example.com/a.png") is None
        assert calls == ["https://cdn.example.com/a.png"]

    def test_uses_injected_validator(self):
        class DenyAll:
            def validate(self, url):
                return False

        prober = make_prober(lambda request: httpx.Response(200, content=png_bytes(640, 480)),
                             url_validator=DenyAll())

        assert prober.probe("https://cdn.example.com/a.png") is None
