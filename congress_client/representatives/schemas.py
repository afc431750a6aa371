"""Representative lookup schemas."""

from pydantic import BaseModel, field_validator


class RepresentativeSchema(BaseModel):
    """One member returned for a ZIP code."""

    name: str
    party: str | None = None
    state: str | None = None
    district: str | None = None
    phone: str | None = None
    office: str | None = None
    link: str | None = None

    @field_validator("district", mode="before")
    @classmethod
    def _district_text(cls, value):
        return None if value is None else str(value)
