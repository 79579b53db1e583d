"""
Message model produced by transcript segmentation.

A Message is one header line of an exported chat plus any continuation lines
folded into it.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class Message(BaseModel):
    """A single timestamped, attributed chat message."""

    model_config = {'frozen': True}

    timestamp: datetime = Field(
        ..., description='Instant parsed from the header line (falls back to parse time)'
    )
    author: str | None = Field(
        default=None, description='Display name of the sender, absent for system lines'
    )
    body: str = Field(
        ..., min_length=1, description='Message text including folded continuation lines'
    )

    @property
    def is_system(self) -> bool:
        """True for unattributed lines, which never yield quotations."""
        return self.author is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'timestamp': self.timestamp.isoformat(),
            'author': self.author,
            'body': self.body,
        }
