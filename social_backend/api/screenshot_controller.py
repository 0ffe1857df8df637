# External package imports
from fastapi import APIRouter
from fastapi.responses import Response

# Local application imports
from ..application.use_cases.screenshot.capture_screenshot import CaptureScreenshotUseCase
from ..di.container import get_container


router = APIRouter(tags=["screenshots"])


@router.get("/screenshot/{url:path}", response_class=Response)
async def screenshot(url: str) -> Response:
    """
    Render a full-page PNG preview of a URL

    Args:
        url: Page URL, usually percent-encoded into the path
    """
    container = get_container()
    capture_use_case = container.get(CaptureScreenshotUseCase)

    image = await capture_use_case.execute(url)
    return Response(content=image, media_type="image/png")
