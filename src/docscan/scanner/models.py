"""Data models for scanned invoices."""
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class FilenameFields(BaseModel):
    """Raw fields cut out of an invoice filename, before date validation."""
    model_config = ConfigDict(frozen=True)

    group: str = Field(description="Report group, the token after the keyword prefix")
    establishment: str = Field(description="Vendor or merchant name")
    category: str = Field(default="", description="Free-text category, may contain hyphens")
    price: str = Field(description="Price token, kept verbatim")
    date: str = Field(description="Date in YYYY-MM-DD format")


@dataclass(frozen=True)
class Record:
    """One accepted invoice file."""
    group: str
    date: date
    price: str
    establishment: str
    category: str
