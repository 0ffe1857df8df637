from typing import TYPE_CHECKING
from ...infrastructure.external.render_client import RenderClient
from ...application.use_cases.screenshot.capture_screenshot import CaptureScreenshotUseCase
from ...application.use_cases.contact.send_contact_message import SendContactMessageUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ExternalServiceProvider:
    """Registers clients for the render service and mail relay, and the use cases wrapping them"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        # Register RenderClient as singleton if not already registered
        try:
            container.get(RenderClient)
        except ValueError:
            container.register_singleton(RenderClient, RenderClient())

        container.register_factory(
            CaptureScreenshotUseCase,
            lambda: CaptureScreenshotUseCase(
                render_client=container.get(RenderClient)
            )
        )

        container.register_factory(
            SendContactMessageUseCase,
            lambda: SendContactMessageUseCase()
        )
