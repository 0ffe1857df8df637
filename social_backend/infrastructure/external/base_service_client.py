# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class BaseServiceClient:
    """
    Base class for clients of external HTTP services.

    Provides common initialization for base_url, timeout and the HTTP client.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base service client.

        Args:
            base_url: Base URL of the external service.
            timeout: Request timeout in seconds.
            http_client: Client to send requests with. Defaults to the shared pooled client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client
