"""
Message API Endpoint

FastAPI endpoints for delivering user messages and resetting conversations.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

# Loads .env files and configures logging
import statusbot.app  # noqa: F401

from statusbot.errors.exceptions import ContractViolation, UpstreamError
from statusbot.orchestration.orchestrator import handle_message
from statusbot.session import clear_session

router = APIRouter()


class MessageRequest(BaseModel):
    """Request model for /messages endpoint."""
    conversation_id: str
    text: str


class Message(BaseModel):
    text: str
    input_hint: str


class MessageResponse(BaseModel):
    """Response model for /messages endpoint."""
    success: bool
    messages: List[Message] = []
    outcome: Optional[dict] = None
    error: Optional[str] = None
    message: Optional[str] = None


@router.post("/messages", response_model=MessageResponse)
def post_message(request: MessageRequest):
    """
    Process a user message through the conversation.

    Args:
        request: Message request with conversation_id and text

    Returns:
        Message response with outbound messages and outcome or error
    """
    try:
        result = handle_message(
            conversation_id=request.conversation_id,
            text=request.text,
        )
    except ContractViolation as e:
        raise HTTPException(
            status_code=400,
            detail={
                "success": False,
                "error": "contract_violation",
                "message": str(e)
            }
        )
    except UpstreamError as e:
        raise HTTPException(
            status_code=502,
            detail={
                "success": False,
                "error": "upstream_error",
                "message": str(e)
            }
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail={
                "success": False,
                "error": "internal_error",
                "message": str(e)
            }
        )

    return MessageResponse(
        success=result.get("success", False),
        messages=result.get("messages", []),
        outcome=result.get("outcome"),
        error=result.get("error"),
        message=result.get("message")
    )


@router.delete("/conversations/{conversation_id}")
def delete_conversation(conversation_id: str):
    """Forget a conversation's dialog state."""
    clear_session(conversation_id)
    return {"success": True, "conversation_id": conversation_id}
