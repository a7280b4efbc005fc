"""
Search Contract Assertions

Decodes one page of a search response into typed SearchRecords.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from statusbot.contracts.search import SearchRecord
from statusbot.errors.exceptions import ContractViolation


def parse_search_page(
    response: Dict[str, Any]
) -> Tuple[List[SearchRecord], Optional[Dict[str, Any]]]:
    """
    Decode a docs/search response page.

    Returns:
        (records in index order, next page parameters or None)

    Raises:
        ContractViolation: If "value" is missing or a document is not an object
    """
    if not isinstance(response, dict):
        raise ContractViolation(
            f"Response must be a dict, got {type(response)}"
        )

    documents = response.get("value")
    if not isinstance(documents, list):
        raise ContractViolation("Contract violation: value must be a list")

    records: List[SearchRecord] = []
    for index, document in enumerate(documents):
        if not isinstance(document, dict):
            raise ContractViolation(
                f"Contract violation: document {index} must be a dict, got {type(document)}"
            )
        try:
            records.append(SearchRecord(**_string_fields(document)))
        except ValidationError as e:
            raise ContractViolation(
                f"Contract violation: document {index} is invalid: {e}"
            ) from e

    next_page = response.get("@search.nextPageParameters")
    if next_page is not None and not isinstance(next_page, dict):
        raise ContractViolation(
            "Contract violation: @search.nextPageParameters must be a dict"
        )
    return records, next_page


def _string_fields(document: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """Project the known fields, stringifying scalars the index may type loosely."""
    decoded: Dict[str, Optional[str]] = {}
    for name in SearchRecord.model_fields:
        value = document.get(name)
        if value is None or isinstance(value, str):
            decoded[name] = value
        elif isinstance(value, (int, float, bool)):
            decoded[name] = str(value)
        else:
            decoded[name] = value
    return decoded
