"""
Fixed option sets and user-facing fallback messages.

SOIL_TYPES and SEASONS are the only values the recommendation form offers.
The fallback messages are returned verbatim to the farmer.
"""

SOIL_TYPES = [
    'Alluvial', 'Black', 'Red', 'Laterite', 'Arid', 'Forest', 'Peaty', 'Saline',
]

SEASONS = [
    'Kharif (Monsoon)', 'Rabi (Winter)', 'Zaid (Summer)',
]

# Shown when GOOGLE_API_KEY is missing
AI_DISABLED_MESSAGE = "AI features are disabled. Please configure the API key."

# Recommendation failures (network, auth and schema alike)
RECOMMENDATION_ERROR_MESSAGE = (
    "Failed to get recommendations from AI. Please check your API key and try again."
)

# Substituted for a chat reply that failed mid-stream
CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

# First message sent on behalf of the farmer when a chat session opens
CHAT_GREETING_PROMPT = "Hello"

RECOMMENDATION_COUNT = 3
