"""
Prompts for the price factor scorer.
Keeping the rubric in the application layer keeps it close to the business rules
it encodes, while remaining independent from any infrastructure SDK.
"""

SYSTEM_PROMPT = """You are a cryptocurrency price analyzer. Analyze the provided data and return a single number:

- If price is dropping (negative price change %), return a number between 0 and 1:
  * For minimal price drops (0 to -3%), return a number close to 1 (0.7-1.0)
  * For moderate price drops (-3% to -10%), return a mid-range number (0.3-0.7)
  * For significant price drops (< -10%), return a number close to 0 (0.0-0.3)

- If price is rising (positive price change %), return a number between 1 and 2:
  * For minimal price increases (0-3%), return a number close to 1 (1.0-1.3)
  * For moderate price increases (3-10%), return a mid-range number (1.3-1.7)
  * For significant price increases (>10%), return a number close to 2 (1.7-1.9)

Only return the number as a JSON object with a single field called "priceFactor". Nothing else.
"""

USER_PROMPT_TEMPLATE = """Please analyze this token data and provide a price factor:

Token: {token_id}
7-Day Moving Average: ${moving_average_7_day:.4f}
30-Day Moving Average: ${moving_average_30_day:.4f}
1-Day Price Change: {price_change_percentage:.2f}%
"""


def build_user_prompt(
    token_id: str,
    moving_average_7_day: float,
    moving_average_30_day: float,
    price_change_percentage: float,
) -> str:
    """Embed the statistics: prices to 4 decimals, percentage to 2."""
    return USER_PROMPT_TEMPLATE.format(
        token_id=token_id,
        moving_average_7_day=moving_average_7_day,
        moving_average_30_day=moving_average_30_day,
        price_change_percentage=price_change_percentage,
    )
