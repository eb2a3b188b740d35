"""
Maharishi agri assistant backend.

FastAPI service behind the farmer-facing assistant: Gemini-powered crop
recommendations and Agri Q&A chat, plus the demo dashboard, marketplace
and weather pages.
"""

__version__ = "0.1.0"
