"""
Supabase client for Docubot
Holds the connection used for documentation chunk vector search
"""

import os
import logging
from typing import Any, Dict, List, Optional

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions

logger = logging.getLogger(__name__)

class SupabaseClient:
    """
    Supabase client wrapper for Docubot operations
    Exposes the RPC call used to run similarity search functions
    """

    def __init__(self, url: Optional[str] = None, key: Optional[str] = None, client: Optional[Client] = None):
        """
        Initialize Supabase client

        Args:
            url: Supabase project URL
            key: Supabase service role key
            client: Optional pre-built client, mainly for tests
        """
        if client is not None:
            self.client = client
            return

        self.url = url or os.getenv("SUPABASE_URL")
        self.key = key or os.getenv("SUPABASE_SERVICE_ROLE_KEY")

        if not self.url or not self.key:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables are required")

        options = ClientOptions(
            postgrest_client_timeout=30,
            storage_client_timeout=30
        )

        self.client: Client = create_client(self.url, self.key, options)

        logger.info("Initialized Supabase client successfully")

    def rpc(self, function_name: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Call a Postgres function and return its rows

        Args:
            function_name: Name of the SQL function
            params: Function arguments

        Returns:
            List[Dict[str, Any]]: Returned rows (empty list when none)
        """
        response = self.client.rpc(function_name, params).execute()
        return response.data or []

def create_supabase_client(url: Optional[str] = None, key: Optional[str] = None) -> SupabaseClient:
    """Factory function to create Supabase client"""
    return SupabaseClient(url, key)

__all__ = ["SupabaseClient", "create_supabase_client"]
