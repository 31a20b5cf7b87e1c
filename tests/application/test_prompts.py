"""Tests for the scoring prompts."""

from price_factor.application.scoring.prompts import SYSTEM_PROMPT, build_user_prompt


class TestPrompts:
    def test_prices_use_four_decimals_and_change_two(self):
        prompt = build_user_prompt("sonic-3", 0.123456, 12.5, -3.14159)
        assert "Token: sonic-3" in prompt
        assert "7-Day Moving Average: $0.1235" in prompt
        assert "30-Day Moving Average: $12.5000" in prompt
        assert "1-Day Price Change: -3.14%" in prompt

    def test_integers_are_padded(self):
        prompt = build_user_prompt("bitcoin", 50, 50, 0)
        assert "7-Day Moving Average: $50.0000" in prompt
        assert "1-Day Price Change: 0.00%" in prompt

    def test_rubric_demands_price_factor_json(self):
        assert '"priceFactor"' in SYSTEM_PROMPT
        assert "JSON object" in SYSTEM_PROMPT
        for tier in ("0.7-1.0", "0.3-0.7", "0.0-0.3", "1.0-1.3", "1.3-1.7", "1.7-1.9"):
            assert tier in SYSTEM_PROMPT
