"""Fixed-value stand-in for the KisanMitra backend used during development."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, List

from ..types import DiseaseReport, ForecastDay, NewsItem, OtpResult, WeatherSnapshot
from ..utils.language import localize

logger = logging.getLogger(__name__)

MOCK_OTP = "1234"


def send_otp(phone: str) -> OtpResult:
    """Pretend to send an OTP; the mock code is echoed back for testing."""
    logger.debug("Mock OTP sent to %s", phone)
    return OtpResult(success=True, message="OTP sent successfully", otp=MOCK_OTP)


def verify_otp(phone: str, otp: str) -> OtpResult:
    """Accept only the mock OTP; no lockout, retry counting or expiry."""
    if otp == MOCK_OTP:
        return OtpResult(
            success=True,
            message="OTP verified successfully",
            token=f"mock_token_{int(time.time() * 1000)}",
        )
    logger.debug("Mock OTP rejected for %s", phone)
    return OtpResult(success=False, message="Invalid OTP")


def detect_disease(image: str | Path | bytes | None = None) -> DiseaseReport:
    """Return a canned healthy-crop report regardless of ``image``."""
    return DiseaseReport(
        id="disease_1",
        name={
            "en": "Healthy Crop",
            "hi": "स्वस्थ फसल",
            "te": "ఆరోగ్యకరమైన పంట",
        },
        severity="none",
        confidence=99,
        description={
            "en": "Your crop appears healthy based on the visual analysis.",
            "hi": "दृश्य विश्लेषण के आधार पर आपकी फसल स्वस्थ दिखाई दे रही है।",
            "te": "దృశ్య విశ్లేషణ ఆధారంగా మీ పంట ఆరోగ్యంగా ఉన్నట్లు కనిపిస్తోంది.",
        },
        cure_steps={
            "en": ["Continue regular monitoring", "Ensure proper irrigation"],
            "hi": ["नियमित निगरानी जारी रखें", "उचित सिंचाई सुनिश्चित करें"],
            "te": ["రెగ్యులర్ పర్యవేక్షణను కొనసాగించండి", "సరైన నీటి పారుదలని నిర్ధారించుకోండి"],
        },
    )


def fetch_weather(lat: float, lon: float) -> WeatherSnapshot:
    """Return a fixed sunny snapshot for any coordinates."""
    return WeatherSnapshot(temp=32, condition="Sunny", forecast=[ForecastDay(day="Mon", temp=32)])


def get_news() -> List[NewsItem]:
    """Return the three fixed news cards."""
    return [
        NewsItem(
            id="1",
            image_url="https://images.unsplash.com/photo-1592982531416-04ca7277800c?q=80&w=2070&auto=format&fit=crop",
            category="scheme",
            title={
                "en": "PM-Kisan Samman Nidhi Update",
                "hi": "पीएम-किसान सम्मान निधि अपडेट",
                "te": "పిఎం-కిసాన్ సమ్మాన్ నిధి అప్‌డేట్",
            },
            summary={
                "en": "The government has released the latest installment for PM-Kisan scheme beneficiaries.",
                "hi": "सरकार ने पीएम-किसान योजना के लाभार्थियों के लिए नवीनतम किस्त जारी की है।",
                "te": "పిఎం-కిసాన్ పథకం లబ్ధిదారుల కోసం ప్రభుత్వం తాజా విడతను విడుదల చేసింది.",
            },
            date="2024-03-20T10:00:00Z",
        ),
        NewsItem(
            id="2",
            image_url="https://images.unsplash.com/photo-1495107333217-fe9d80d22aa0?q=80&w=2070&auto=format&fit=crop",
            category="news",
            title={
                "en": "Sustainable Farming Techniques 2024",
                "hi": "सतत खेती तकनीक 2024",
                "te": "స్థిరమైన వ్యవసాయ పద్ధతులు 2024",
            },
            summary={
                "en": "New organic farming methods are proving to increase yields by 20% in dry regions.",
                "hi": "नई जैविक खेती के तरीके शुष्क क्षेत्रों में पैदावार में 20% की वृद्धि करने के लिए सिद्ध हो रहे हैं।",
                "te": "ఆధునిక సేంద్రీయ వ్యవసాయ పద్ధతులు పొడి ప్రాంతాలలో దిగుబడిని 20% పెంచుతున్నట్లు నిరూపిస్తున్నాయి.",
            },
            date="2024-03-19T14:30:00Z",
        ),
        NewsItem(
            id="3",
            image_url="https://images.unsplash.com/photo-1586771107445-d3ca888129ff?q=80&w=2072&auto=format&fit=crop",
            category="price",
            title={
                "en": "Market Pulse: Cotton Prices Rise",
                "hi": "मार्केट पल्स: कपास की कीमतों में वृद्धि",
                "te": "మార్కెట్ పల్స్: పత్తి ధరలు పెరిగాయి",
            },
            summary={
                "en": "Cotton prices see a steady climb in major mandis across India this week.",
                "hi": "इस सप्ताह भारत भर की प्रमुख मंडियों में कपास की कीमतों में निरंतर वृद्धि देखी गई है।",
                "te": "ఈ వారం భారతదేశవ్యాప్తంగా ప్రధాన మండీలలో పత్తి ధరలు స్థిరంగా పెరుగుతున్నాయి.",
            },
            date="2024-03-18T09:15:00Z",
        ),
    ]


def get_localized_news(language: str) -> List[Dict[str, str]]:
    """Flatten the news cards to a single language, falling back to English."""
    return [
        {
            "id": item.id,
            "category": item.category,
            "title": localize(item.title, language),
            "summary": localize(item.summary, language),
            "date": item.date,
            "imageUrl": item.image_url,
        }
        for item in get_news()
    ]


__all__ = [
    "MOCK_OTP",
    "detect_disease",
    "fetch_weather",
    "get_localized_news",
    "get_news",
    "send_otp",
    "verify_otp",
]
