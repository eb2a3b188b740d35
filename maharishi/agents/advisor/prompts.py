"""
Advisor Prompt Templates

Contains the persona prompt for the Maharishi chat and the prompt builder
for structured crop recommendations.

Architecture:
- Crop recommendations: single Gemini call, structured JSON output
  (response_schema), temperature 0.7
- Agri Q&A chat: stateful Gemini chat session with a fixed persona,
  streamed replies, temperature 0.5

Prompt Engineering Pattern:
- Uses XML tags for structured content
- System prompt defines the persona and its guardrails
- User prompt contains the farm context for a single recommendation request
"""

from maharishi.utils.constants import RECOMMENDATION_COUNT

# =============================================================================
# CHAT PERSONA
# =============================================================================

CHAT_DISCLAIMER = (
    "Disclaimer: Please consult a local agricultural expert before making farming decisions."
)

MAHARISHI_SYSTEM_PROMPT = f"""You are 'Maharishi', an AI agricultural assistant for Indian farmers.
- Provide safe, practical, and concise advice.
- Answer in simple, easy-to-understand language.
- Do not recommend harmful chemical practices or unsafe techniques.
- If asked about topics outside of farming, agriculture, or rural life, politely decline to answer.
- Start every conversation with a friendly greeting in a mix of English and Hindi, like "Namaste! I am Maharishi, your AI farming assistant. How can I help you today?". But after the first message, answer only in the language of the user's question.
- Your advice is for informational purposes only. Always end your responses with a disclaimer: "{CHAT_DISCLAIMER}"
"""


# =============================================================================
# CROP RECOMMENDATION PROMPT
# =============================================================================

def build_crop_recommendation_prompt(
    location: str,
    soil_type: str,
    season: str,
    count: int = RECOMMENDATION_COUNT,
) -> str:
    """
    Build the prompt for a single crop recommendation request.

    Soil type and season are forwarded verbatim; validation against the
    fixed option sets happens at the HTTP layer.

    Args:
        location: Pincode of the farm (India)
        soil_type: Soil category (e.g., "Alluvial")
        season: Farming season label (e.g., "Rabi (Winter)")
        count: Number of crops to ask for

    Returns:
        str: Formatted prompt ready to be sent to Gemini
    """
    return f"""As an agricultural expert for Indian farmers, recommend {count} profitable and suitable crops for the following conditions.

<farm_context>
Pincode: {location} (India)
Soil Type: {soil_type}
Farming Season: {season}
</farm_context>

<instructions>
For each crop, provide a concise reason for the recommendation, the expected yield in 'kg per acre', and the expected profit in INR.
The reason should be practical and easy for a farmer to understand.
Return exactly {count} recommendations in the "recommendations" array.
</instructions>"""
