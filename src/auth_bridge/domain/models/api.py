"""Bridge API Models

Purpose: Response models for the login bridge endpoints

These models keep the JSON contracts of the HTTP surface consistent
and documented in the OpenAPI schema.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class VerifyTokenResponse(BaseModel):
    """Custom token issued after a successful provider login"""

    token: str = Field(
        ...,
        description="Identity platform custom token for client sign-in",
        examples=["eyJhbGciOiJSUzI1NiIsInR5cCI6IkpXVCJ9..."],
    )

    model_config = {
        "json_schema_extra": {"examples": [{"token": "eyJhbGciOiJSUzI1NiIsInR5cCI6IkpXVCJ9..."}]}
    }


class ErrorResponse(BaseModel):
    """Error response

    Structured error information for failed login stages.
    """

    error: str = Field(..., description="Error code", examples=["provider_token_error"])
    message: str = Field(
        ...,
        description="Human-readable error description",
        examples=["Token exchange failed: 400"],
    )
    correlation_id: Optional[str] = Field(None, description="Request correlation ID for debugging")
    upstream: Optional[Dict[str, Any]] = Field(
        None, description="Error body returned by the upstream provider, if any"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "provider_token_error",
                    "message": "Token exchange failed: 400",
                    "correlation_id": "550e8400-e29b-41d4-a716-446655440000",
                    "upstream": {"error": "invalid_grant", "error_code": "KOE320"},
                }
            ]
        }
    }
