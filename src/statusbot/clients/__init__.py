"""
External Service Clients

Thin HTTP clients for the recognizer and the project status search index.
"""

from statusbot.clients.base_client import BaseClient
from statusbot.clients.recognizer_client import RecognizerClient
from statusbot.clients.search_client import SearchClient

__all__ = [
    "BaseClient",
    "RecognizerClient",
    "SearchClient",
]
