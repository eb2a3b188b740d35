"""
FastAPI routers for all API endpoints.

Each module defines a router for one page of the assistant
(recommendations, chat, marketplace, weather, auth) plus health.
"""
