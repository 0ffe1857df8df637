# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from .base_service_client import BaseServiceClient
from ...core.config import get_settings
from ...domain.exceptions import ExternalServiceError, InvalidInputError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class RenderClient(BaseServiceClient):
    """
    HTTP client for the headless-browser render service.

    The service loads a page, waits for the network to settle and returns a
    full-page PNG.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = 60.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or settings.render_service_url,
            timeout=timeout,
            http_client=http_client,
        )
        self.token = token if token is not None else settings.render_service_token

    async def capture(self, url: str) -> bytes:
        """
        Capture a full-page screenshot of a URL.

        Args:
            url: Absolute http(s) URL of the page to render

        Returns:
            PNG image bytes

        Raises:
            InvalidInputError: If the URL is not an http(s) URL
            ExternalServiceError: If the render service fails or returns something other than a PNG
        """
        if not url or not url.lower().startswith(("http://", "https://")):
            raise InvalidInputError("A valid http(s) URL is required")

        payload = {
            "url": url,
            "gotoOptions": {"waitUntil": "networkidle2"},
            "options": {"fullPage": True, "type": "png"},
        }
        params = {"token": self.token} if self.token else None

        logger.info(f"Requesting screenshot of {url} from render service at {self.base_url}")
        try:
            response = await self.http_client.post(
                f"{self.base_url}/screenshot",
                json=payload,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while rendering {url}: {e}")
            raise ExternalServiceError("Screenshot service timed out", service_name="render")
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Render service returned {e.response.status_code} for {url}: {e.response.text}"
            )
            raise ExternalServiceError("Screenshot service failed", service_name="render")
        except httpx.HTTPError as e:
            logger.error(f"Error contacting render service for {url}: {e}", exc_info=True)
            raise ExternalServiceError("Screenshot service unavailable", service_name="render")

        image = response.content
        if not image.startswith(PNG_SIGNATURE):
            logger.error(f"Render service returned a non-PNG body for {url}")
            raise ExternalServiceError("Screenshot service returned an invalid image", service_name="render")
        return image
