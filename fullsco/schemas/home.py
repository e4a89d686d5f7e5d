"""Home page blocks: statistics, partners and newsletter subscribers."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from fullsco.schemas.common import Name


class StatisticCreate(BaseModel):
    title: Name
    value: str = Field(min_length=1, max_length=100)
    description: str | None = None
    icon: str = Field(min_length=1, max_length=100)
    color: str | None = None
    # Appended after the current last statistic when omitted
    order: int | None = None
    is_active: bool = True


class StatisticUpdate(BaseModel):
    title: Name | None = None
    value: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    icon: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = None
    order: int | None = None
    is_active: bool | None = None


class StatisticResponse(BaseModel):
    id: int
    title: str
    value: str
    description: str | None
    icon: str
    color: str | None
    order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ReorderRequest(BaseModel):
    ids: list[int] = Field(min_length=1)


class PartnerCreate(BaseModel):
    name: Name
    logo_url: str | None = None
    website_url: str | None = None
    description: str | None = None
    is_active: bool = True


class PartnerUpdate(BaseModel):
    name: Name | None = None
    logo_url: str | None = None
    website_url: str | None = None
    description: str | None = None
    is_active: bool | None = None


class PartnerResponse(BaseModel):
    id: int
    name: str
    logo_url: str | None
    website_url: str | None
    description: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SubscriberCreate(BaseModel):
    email: EmailStr


class SubscriberUpdate(BaseModel):
    email: EmailStr | None = None


class SubscriberResponse(BaseModel):
    id: int
    email: str
    created_at: datetime

    model_config = {"from_attributes": True}
