"""
Pydantic schemas for the finances API.
"""

from datetime import date

from pydantic import BaseModel, Field


class ProcessRecurringRequest(BaseModel):
    """Request schema for the recurring processor.

    Attributes:
        today: Reference date. Omit to use the server's current date.
    """

    today: date | None = Field(
        None, description="Reference date (YYYY-MM-DD); defaults to today"
    )


class ProcessRecurringResponse(BaseModel):
    """Response schema summarizing one processor run.

    `errors` is null when every due template succeeded.
    """

    success: bool = True
    processed: int
    skipped: int
    errors: list[str] | None = None
