"""
API-specific data models for the coin ranking service.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..coins.models import PriceHistoryPoint


class ErrorResponse(BaseModel):
    """Model for error responses."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    error: Annotated[str, Field(description="Error code")]
    message: Annotated[str, Field(description="Human-readable error message")]


class ChartResponse(BaseModel):
    """Price history ready for charting: priced points, oldest first."""

    uuid: Annotated[str, Field(description="Coin identifier")]
    change: Annotated[str | None, Field(description="Change over the period")] = None
    history: list[PriceHistoryPoint]
