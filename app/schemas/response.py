"""
Generic response schemas untuk UserAuth API.
Menangani response format yang konsisten.
"""

from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """
    Simple message response schema.
    """
    message: str = Field(
        ...,
        description="Response message"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "User registered successfully"
            }
        }
    )


class ErrorResponse(BaseModel):
    """
    Error response schema untuk application exceptions.
    """
    detail: str = Field(
        ...,
        description="Error message"
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code"
    )
    request_id: Optional[str] = Field(
        None,
        description="Request ID for correlation"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "Invalid credentials",
                "error_code": "BAD_CREDENTIALS",
                "request_id": "550e8400-e29b-41d4-a716-446655440000"
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """
    Health check response schema.
    """
    status: str = Field(
        ...,
        description="Health status"
    )
    timestamp: datetime = Field(
        ...,
        description="Check timestamp"
    )
    version: str = Field(
        ...,
        description="API version"
    )
    service: str = Field(
        ...,
        description="Service name"
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional health details"
    )
