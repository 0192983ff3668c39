from __future__ import annotations

from datetime import date
from typing import List

import pytest

from bloodlink.database import Settings
from bloodlink.models.blood_group import BloodGroup
from bloodlink.models.donor import Donor


@pytest.fixture
def fast_settings() -> Settings:
    return Settings(
        search_debounce_ms=20,
        profile_load_latency_ms=0,
        refresh_latency_ms=0,
        roster_load_latency_ms=0,
    )


@pytest.fixture
def all_groups_roster() -> List[Donor]:
    return [
        Donor(id=str(index), name=f"Donor {group.value}", blood_group=group, location="Naria")
        for index, group in enumerate(BloodGroup, start=1)
    ]


@pytest.fixture
def two_donor_roster() -> List[Donor]:
    return [
        Donor(id="1", name="John Doe", blood_group=BloodGroup.A_POSITIVE, location="Dhaka"),
        Donor(
            id="2",
            name="Jane Smith",
            blood_group=BloodGroup.O_POSITIVE,
            location="Chittagong",
            last_donation_date=date(2025, 7, 15),
        ),
    ]
