"""Tests for the fixed-value mock backend."""

from __future__ import annotations

import unittest

from kisanmitra.services import mock_api
from kisanmitra.utils.language import SUPPORTED_LANGUAGES


class OtpTest(unittest.TestCase):
    def test_send_otp_echoes_mock_code(self) -> None:
        result = mock_api.send_otp("9876543210")
        self.assertTrue(result.success)
        self.assertEqual(result.otp, "1234")

    def test_verify_accepts_mock_code(self) -> None:
        result = mock_api.verify_otp("9876543210", "1234")
        self.assertTrue(result.success)
        self.assertEqual(result.message, "OTP verified successfully")
        self.assertTrue(result.token.startswith("mock_token_"))
        self.assertNotIn("otp", result.as_dict())

    def test_verify_rejects_other_codes(self) -> None:
        result = mock_api.verify_otp("9876543210", "0000")
        self.assertFalse(result.success)
        self.assertEqual(result.as_dict(), {"success": False, "message": "Invalid OTP"})


class FixtureShapeTest(unittest.TestCase):
    def test_disease_report_is_fully_localized(self) -> None:
        report = mock_api.detect_disease(b"ignored")
        for field in (report.name, report.description, report.cure_steps):
            self.assertEqual(set(field), set(SUPPORTED_LANGUAGES))
        self.assertEqual(report.as_dict()["cureSteps"]["en"][0], "Continue regular monitoring")

    def test_weather_snapshot(self) -> None:
        weather = mock_api.fetch_weather(17.38, 78.48)
        self.assertEqual(
            weather.as_dict(),
            {"temp": 32, "condition": "Sunny", "forecast": [{"day": "Mon", "temp": 32}]},
        )

    def test_news_items(self) -> None:
        news = mock_api.get_news()
        self.assertEqual([item.id for item in news], ["1", "2", "3"])
        self.assertEqual([item.category for item in news], ["scheme", "news", "price"])
        for item in news:
            self.assertEqual(set(item.title), set(SUPPORTED_LANGUAGES))
            self.assertEqual(set(item.summary), set(SUPPORTED_LANGUAGES))
            self.assertIn("imageUrl", item.as_dict())

    def test_localized_news(self) -> None:
        news = mock_api.get_localized_news("te")
        self.assertEqual(news[2]["title"], "మార్కెట్ పల్స్: పత్తి ధరలు పెరిగాయి")
        self.assertEqual(news[0]["category"], "scheme")

    def test_localized_news_falls_back_to_english(self) -> None:
        news = mock_api.get_localized_news("fr")
        self.assertEqual(news[0]["title"], "PM-Kisan Samman Nidhi Update")


if __name__ == "__main__":
    unittest.main()
