"""
Database access layer for the Code & Coffee backend.

DO NOT define table schemas or migrations here. The `quiz_responses`
table is managed in the Supabase project.
"""

from .client import get_supabase_client

__all__ = ["get_supabase_client"]
