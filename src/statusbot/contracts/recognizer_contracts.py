"""
Recognizer Contract Assertions

Validates a Conversational Language Understanding analyze-conversations
response and decodes it into a RecognizerResult. Fail fast on violations.

Expected shape:
{
    "result": {
        "prediction": {
            "topIntent": str,
            "intents": [{"category": str, "confidenceScore": float}, ...],
            "entities": [{"category": str, "text": str, ...}, ...]
        }
    }
}
"""

from typing import Any, Dict

from statusbot.contracts.slots import RecognizerResult
from statusbot.errors.exceptions import ContractViolation


def parse_recognizer_response(response: Dict[str, Any]) -> RecognizerResult:
    """
    Decode a recognizer response.

    Raises:
        ContractViolation: If the response does not carry a prediction with a
            top intent, or entities are malformed
    """
    if not isinstance(response, dict):
        raise ContractViolation(
            f"Response must be a dict, got {type(response)}"
        )

    result = response.get("result")
    if not isinstance(result, dict):
        raise ContractViolation("Contract violation: result is missing")

    prediction = result.get("prediction")
    if not isinstance(prediction, dict):
        raise ContractViolation("Contract violation: result.prediction is missing")

    top_intent = prediction.get("topIntent")
    if not isinstance(top_intent, str):
        raise ContractViolation(
            "Contract violation: result.prediction.topIntent is missing"
        )

    score = None
    for intent in prediction.get("intents") or []:
        if isinstance(intent, dict) and intent.get("category") == top_intent:
            score = intent.get("confidenceScore")
            break

    entities_raw = prediction.get("entities")
    if entities_raw is None:
        entities_raw = []
    if not isinstance(entities_raw, list):
        raise ContractViolation(
            f"Contract violation: entities must be a list, got {type(entities_raw)}"
        )

    entities: Dict[str, str] = {}
    for entity in entities_raw:
        if not isinstance(entity, dict):
            raise ContractViolation(
                f"Contract violation: entity must be a dict, got {type(entity)}"
            )
        category = entity.get("category")
        text = entity.get("text")
        if not category or text is None:
            raise ContractViolation(
                "Contract violation: entity requires category and text"
            )
        # Keep the first (highest ranked) value per category
        entities.setdefault(str(category), str(text))

    return RecognizerResult(top_intent=top_intent, entities=entities, score=score)
