"""
FastAPI routers for all API endpoints.

Each module defines a router for one area: AI suggestions, opportunities,
courses / learning hub, and health.
"""
