"""KisanMitra client services.

This package provides the client-side integration layer of the KisanMitra
farming assistant: a Gemini-backed chat service, a Gemini Vision plant
disease diagnosis service, and a mock data provider standing in for the
backend.
"""

from .config import AssistantConfig  # noqa: F401
from .services.chat import ChatService  # noqa: F401
from .services.vision import VisionDiagnosisService  # noqa: F401
from .utils.language import detect_language  # noqa: F401

__all__ = ["AssistantConfig", "ChatService", "VisionDiagnosisService", "detect_language"]
