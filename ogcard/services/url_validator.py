import ipaddress
from abc import ABC, abstractmethod
from urllib.parse import urlparse


BLOCKED_HOSTNAMES = ("localhost", "localhost.localdomain")


class URLValidatorInterface(ABC):
    """Interface for URL validation following the Dependency Inversion Principle"""

    @abstractmethod
    def validate(self, url: str) -> bool:
        """
        Validate a URL before it is fetched.

        Args:
            url: The URL string to validate

        Returns:
            True if the URL may be fetched, False otherwise
        """
        pass


class URLValidator(URLValidatorInterface):
    """
    Accepts public http(s) URLs only.
    Loopback, private and link-local hosts are refused to prevent SSRF.
    """

    def validate(self, url: str) -> bool:
        if not url or not isinstance(url, str):
            return False

        try:
            parsed = urlparse(url.strip())
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                return False
            # Raises ValueError for out-of-range ports
            parsed.port
        except ValueError:
            return False

        hostname = (parsed.hostname or "").lower()
        if not hostname or hostname in BLOCKED_HOSTNAMES or hostname.endswith(".localhost"):
            return False

        try:
            address = ipaddress.ip_address(hostname)
        except ValueError:
            # Not an IP literal
            return True

        return not (address.is_private or address.is_loopback or address.is_link_local
                    or address.is_reserved or address.is_unspecified)
