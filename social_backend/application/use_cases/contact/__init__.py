from .send_contact_message import SendContactMessageUseCase

__all__ = ["SendContactMessageUseCase"]
