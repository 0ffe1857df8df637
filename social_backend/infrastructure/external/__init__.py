"""External service clients for communicating with external systems"""

from .render_client import RenderClient

__all__ = [
    "RenderClient",
]
