from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict, Field

from .blood_group import BloodGroup, UrgencyLevel


class Donor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    blood_group: BloodGroup
    location: str
    phone: str | None = None
    profile_picture: str | None = None
    last_donation_date: datetime.date | None = None
    urgency_level: UrgencyLevel | None = None


class Donation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: datetime.date
    location: str


class Profile(BaseModel):
    """The signed-in user's own record; edited in place, never part of a roster."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    blood_group: BloodGroup | None = None
    location: str = ""
    phone: str | None = None
    profile_picture: str | None = None
    last_donation_date: datetime.date | None = None


class ProfileUpdate(BaseModel):
    name: str | None = None
    blood_group: BloodGroup | None = None
    location: str | None = None
    phone: str | None = None
    profile_picture: str | None = None
    last_donation_date: datetime.date | None = None
