"""Bill metadata schemas."""

from pydantic import BaseModel, Field


class TitleSchema(BaseModel):
    """One of a bill's titles."""

    title: str | None = None
    title_type: str | None = Field(alias="titleType", default=None)

    class Config:
        populate_by_name = True


class SummarySchema(BaseModel):
    """CRS summary of a bill version. `text` carries HTML markup."""

    text: str | None = None
    action_desc: str | None = Field(alias="actionDesc", default=None)
    update_date: str | None = Field(alias="updateDate", default=None)

    class Config:
        populate_by_name = True
