"""Core data models returned by the KisanMitra services."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Same text keyed by UI language tag ("en", "hi", "te").
LocalizedText = Dict[str, str]
LocalizedList = Dict[str, List[str]]


@dataclass(slots=True)
class ChatReply:
    """Reply from the chat service; the shape is identical on failure."""

    reply: str
    suggestions: List[str] = field(default_factory=list)


@dataclass(slots=True)
class VisionDiagnosis:
    """Structured result of a Gemini Vision plant analysis."""

    disease: str
    confidence: float
    is_healthy: bool
    full_analysis: str
    success: bool = True
    method: str = "gemini_vision"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "disease": self.disease,
            "confidence": self.confidence,
            "isHealthy": self.is_healthy,
            "fullAnalysis": self.full_analysis,
            "method": self.method,
        }


@dataclass(slots=True)
class OtpResult:
    """Outcome of a mock OTP send or verify call."""

    success: bool
    message: str
    otp: Optional[str] = None
    token: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.otp is not None:
            data["otp"] = self.otp
        if self.token is not None:
            data["token"] = self.token
        return data


@dataclass(slots=True)
class DiseaseReport:
    """Mock disease detection report with localized fields."""

    id: str
    name: LocalizedText
    severity: str
    confidence: int
    description: LocalizedText
    cure_steps: LocalizedList

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": dict(self.name),
            "severity": self.severity,
            "confidence": self.confidence,
            "description": dict(self.description),
            "cureSteps": {lang: list(steps) for lang, steps in self.cure_steps.items()},
        }


@dataclass(slots=True)
class ForecastDay:
    day: str
    temp: int


@dataclass(slots=True)
class WeatherSnapshot:
    """Mock current weather with a short forecast."""

    temp: int
    condition: str
    forecast: List[ForecastDay] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "temp": self.temp,
            "condition": self.condition,
            "forecast": [{"day": item.day, "temp": item.temp} for item in self.forecast],
        }


@dataclass(slots=True)
class NewsItem:
    """A single localized news card."""

    id: str
    image_url: str
    category: str
    title: LocalizedText
    summary: LocalizedText
    date: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "imageUrl": self.image_url,
            "category": self.category,
            "title": dict(self.title),
            "summary": dict(self.summary),
            "date": self.date,
        }
