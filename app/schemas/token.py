"""
Token schemas untuk UserAuth API.
Identity claim yang di-embed di dalam session token.
"""

from pydantic import BaseModel, ConfigDict, Field


class IdentityClaim(BaseModel):
    """
    Identitas minimal user yang dibawa oleh session token.

    Claim tidak membawa scope otorisasi: claim yang valid hanya berarti
    "user ini sudah terautentikasi".
    """
    id: str = Field(
        ...,
        min_length=1,
        description="Durable unique user identifier"
    )
    email: str = Field(
        ...,
        min_length=1,
        description="User email address"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "email": "john@example.com"
            }
        }
    )
