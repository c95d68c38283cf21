"""
Pad schemas - what the update endpoint sends back
"""

from pydantic import BaseModel, Field


class PadUpdateResponse(BaseModel):
    """Acknowledgement for a pad write."""

    message: str = Field(default="ok", description="Status marker")
    padname: str = Field(description="Identifier of the written pad")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "ok",
                "padname": "gY7kq"
            }
        }
