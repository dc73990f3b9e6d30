"""
API response models using Pydantic.

Catalog records and recommendation results are returned as the domain
models themselves; only the error envelope is defined here.
"""
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Error envelope shared by every non-2xx response."""
    message: str = Field(
        description="Human-readable error message",
        examples=["Barangay not found"]
    )


def error_responses(*status_codes: int) -> dict:
    """OpenAPI ``responses`` entries for the given error status codes."""
    descriptions = {
        400: "Invalid input",
        404: "Not found",
        429: "Rate limit exceeded",
        500: "Internal server error",
    }
    responses = {}
    for code in status_codes:
        responses[code] = {"description": descriptions[code]}
        # 429 bodies come from slowapi, not the message envelope
        if code != 429:
            responses[code]["model"] = MessageResponse
    return responses
