"""
FastAPI routers for all API endpoints.

Each module defines a router for one area (recommendation, quiz responses,
quiz options, health). All routes live under /api.
"""
