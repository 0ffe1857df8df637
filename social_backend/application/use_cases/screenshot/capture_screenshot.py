# Local application imports
from ....infrastructure.external.render_client import RenderClient


class CaptureScreenshotUseCase:
    """Use case for rendering a full-page PNG preview of a URL"""

    def __init__(self, render_client: RenderClient) -> None:
        self.render_client = render_client

    async def execute(self, url: str) -> bytes:
        """
        Render a page

        Args:
            url: Absolute page URL (already decoded from the request path)

        Returns:
            PNG image bytes
        """
        return await self.render_client.capture(url)
