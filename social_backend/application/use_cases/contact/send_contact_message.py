# Standard library imports
from typing import Awaitable, Callable, Optional

# Local application imports
from ....utils.email_service import send_contact_email_async
from ...dto.contact_dto import ContactRequest, ContactResponse

ContactSender = Callable[[str, str, Optional[str], str], Awaitable[None]]


class SendContactMessageUseCase:
    """Use case for forwarding a contact form submission by email"""

    def __init__(self, sender: ContactSender = send_contact_email_async) -> None:
        self.sender = sender

    async def execute(self, request: ContactRequest) -> ContactResponse:
        """
        Deliver the submission to the configured recipient

        Args:
            request: Contact form fields

        Returns:
            ContactResponse with success=True

        Raises:
            ExternalServiceError: If delivery fails
        """
        await self.sender(request.name, str(request.email), request.phone, request.message)
        return ContactResponse(success=True)
