from .capture_screenshot import CaptureScreenshotUseCase

__all__ = ["CaptureScreenshotUseCase"]
