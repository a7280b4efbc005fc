"""
Search HTTP Client

Queries the project status search index and decodes matched documents into
SearchRecords, following continuation pages until the result set is exhausted.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from statusbot.clients.base_client import BaseClient
from statusbot.config import Settings, get_settings
from statusbot.contracts.search import SearchRecord
from statusbot.contracts.search_contracts import parse_search_page
from statusbot.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

MAX_PAGES = 50


class SearchClient(BaseClient):
    """HTTP client for the search index."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None
    ):
        self.settings = settings or get_settings()
        super().__init__(
            base_url=self.settings.SEARCH_ENDPOINT or "",
            headers={"api-key": self.settings.SEARCH_API_KEY or ""},
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return self.settings.search_configured

    def search(self, query: str) -> List[SearchRecord]:
        """
        Run a query and return every matched record in index order.

        Raises:
            ConfigurationError: If endpoint or key is missing
            UpstreamError: On network failures or HTTP errors
            ContractViolation: If a response page is malformed
        """
        if not self.is_configured:
            raise ConfigurationError("Search endpoint and API key must be configured")

        path = f"/indexes/{self.settings.SEARCH_INDEX_NAME}/docs/search"
        params = {"api-version": self.settings.SEARCH_API_VERSION}
        payload: Dict[str, Any] = {
            "search": query,
            "queryType": self.settings.SEARCH_QUERY_TYPE,
            "count": True,
        }

        records: List[SearchRecord] = []
        for _ in range(MAX_PAGES):
            response = self._request("POST", path, json=payload, params=params)
            page_records, next_page = parse_search_page(response)
            records.extend(page_records)
            if not next_page:
                break
            payload = next_page
        else:
            logger.warning(
                "Stopped paging after %d pages for query %s", MAX_PAGES, query
            )

        logger.info("Search returned %d records", len(records), extra={"query": query})
        return records
