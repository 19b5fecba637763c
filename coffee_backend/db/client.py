"""
Supabase client factory.

The quiz has no user accounts: every request uses the same client built
from the publishable key. Row Level Security on `quiz_responses` must
allow anonymous insert/select/delete for this to work.
"""

import logging
from functools import lru_cache

from supabase import Client, create_client

from coffee_backend.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Return the shared Supabase client.

    Built on first use and reused afterwards; used as a FastAPI dependency
    so tests can replace it with app.dependency_overrides.

    Returns:
        A Supabase client using SUPABASE_PUBLISHABLE_KEY
    """
    client: Client = create_client(
        supabase_url=settings.SUPABASE_URL,
        supabase_key=settings.SUPABASE_PUBLISHABLE_KEY
    )

    logger.debug("Created Supabase client for quiz_responses")

    return client
