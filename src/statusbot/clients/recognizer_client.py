"""
Recognizer HTTP Client

Calls the Conversational Language Understanding analyze-conversations
endpoint and decodes the top intent and entities.
"""

import logging
from typing import Optional

import httpx

from statusbot.clients.base_client import BaseClient
from statusbot.config import Settings, get_settings
from statusbot.contracts.recognizer_contracts import parse_recognizer_response
from statusbot.contracts.slots import RecognizerResult
from statusbot.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/language/:analyze-conversations"


class RecognizerClient(BaseClient):
    """HTTP client for the recognizer service."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None
    ):
        self.settings = settings or get_settings()
        super().__init__(
            base_url=self.settings.CLU_ENDPOINT or "",
            headers={"Ocp-Apim-Subscription-Key": self.settings.CLU_API_KEY or ""},
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return self.settings.recognizer_configured

    def recognize(self, utterance: str) -> RecognizerResult:
        """
        Recognize one utterance.

        Args:
            utterance: User message text

        Returns:
            RecognizerResult with the top intent and extracted entities

        Raises:
            ConfigurationError: If the recognizer is not configured
            UpstreamError: On network failures or HTTP errors
            ContractViolation: If the response is malformed
        """
        if not self.is_configured:
            raise ConfigurationError("Recognizer is not configured")

        payload = {
            "kind": "Conversation",
            "analysisInput": {
                "conversationItem": {
                    "id": "1",
                    "participantId": "user",
                    "text": utterance,
                }
            },
            "parameters": {
                "projectName": self.settings.CLU_PROJECT_NAME,
                "deploymentName": self.settings.CLU_DEPLOYMENT_NAME,
                "stringIndexType": "TextElement_V8",
            },
        }
        response = self._request(
            "POST",
            ANALYZE_PATH,
            json=payload,
            params={"api-version": self.settings.CLU_API_VERSION},
        )
        result = parse_recognizer_response(response)
        logger.info(
            "Recognized intent %s",
            result.top_intent,
            extra={"entities": result.entities, "score": result.score},
        )
        return result
