# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ..application.dto.contact_dto import ContactRequest, ContactResponse
from ..application.use_cases.contact.send_contact_message import SendContactMessageUseCase
from ..domain.exceptions import ExternalServiceError
from ..di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])


@router.post("/send-email", response_model=ContactResponse)
async def send_email(request: ContactRequest):
    """
    Forward a contact form submission to the site owner

    Args:
        request: Contact form fields

    Returns:
        {"success": true} on delivery, {"success": false, "error": ...} with 500 otherwise
    """
    container = get_container()
    send_use_case = container.get(SendContactMessageUseCase)

    try:
        return await send_use_case.execute(request)
    except ExternalServiceError as exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ContactResponse(success=False, error=exception.message).model_dump(),
        )
