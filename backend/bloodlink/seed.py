from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from .models.blood_group import BloodGroup, UrgencyLevel
from .models.donor import Donation, Donor, Profile

SHARIATPUR_THANAS: List[str] = [
    "Shariatpur Sadar",
    "Zajira",
    "Naria",
    "Sokhipur",
    "Gosairhat",
    "Padma Bridge South",
    "Damudya",
    "Bhedargonj",
]

HOME_LOCATIONS: List[str] = [
    "Dhaka",
    "Chittagong",
    "Sylhet",
    "Rajshahi",
    "Barisal",
    "Rangpur",
    "Khulna",
    "Mymensingh",
]

PROFILE_LOCATIONS: List[str] = [*SHARIATPUR_THANAS, "Dhaka"]

_HOME_ROWS = [
    ("John Doe", "A+", "Dhaka"),
    ("Jane Smith", "O+", "Chittagong"),
    ("Rahim Khan", "B+", "Sylhet"),
    ("Ibrahim Khan", "AB-", "Rajshahi"),
    ("Nusrat Jahan", "A-", "Barisal"),
    ("Kamal Uddin", "O-", "Rangpur"),
    ("Shila Akter", "B-", "Khulna"),
    ("Mehedi Hasan", "AB+", "Mymensingh"),
    ("Tania Rahman", "A+", "Dhaka"),
    ("Faruk Ahmed", "O+", "Chittagong"),
    ("Samira Islam", "B+", "Sylhet"),
    ("Rafiq Hossain", "AB-", "Rajshahi"),
    ("Sadia Karim", "A-", "Barisal"),
    ("Mahmudul Alam", "O-", "Rangpur"),
    ("Parvin Sultana", "B-", "Khulna"),
    ("Arif Chowdhury", "AB+", "Mymensingh"),
    ("Lamia Akter", "A+", "Dhaka"),
    ("Sajid Hossain", "O+", "Chittagong"),
    ("Nabila Noor", "B+", "Sylhet"),
    ("Tanvir Hasan", "AB-", "Rajshahi"),
]

_EMERGENCY_ROWS: List[Dict[str, Any]] = [
    {"name": "John Doe", "blood_group": "A+", "location": "Shariatpur Sadar", "urgency_level": "high", "last_donation_date": "2025-08-01"},
    {"name": "Jane Smith", "blood_group": "O+", "location": "Zajira", "urgency_level": "medium", "last_donation_date": "2025-07-15"},
    {"name": "Rahim Khan", "blood_group": "B+", "location": "Naria", "urgency_level": "low", "last_donation_date": "2025-06-20"},
    {"name": "Ibrahim Khan", "blood_group": "AB-", "location": "Sokhipur", "urgency_level": "high", "last_donation_date": "2025-09-01"},
    {"name": "Nusrat Jahan", "blood_group": "A-", "location": "Gosairhat", "urgency_level": "medium", "last_donation_date": "2025-08-10"},
    {"name": "Kamal Uddin", "blood_group": "O-", "location": "Padma Bridge South", "urgency_level": "high", "last_donation_date": "2025-07-30"},
    {"name": "Shila Akter", "blood_group": "B-", "location": "Damudya", "urgency_level": "low", "last_donation_date": "2025-06-15"},
    {"name": "Mehedi Hasan", "blood_group": "AB+", "location": "Bhedargonj", "urgency_level": "medium", "last_donation_date": "2025-08-20"},
]


def home_roster() -> List[Donor]:
    return [
        Donor(id=str(index), name=name, blood_group=BloodGroup(group), location=location)
        for index, (name, group, location) in enumerate(_HOME_ROWS, start=1)
    ]


def emergency_roster() -> List[Donor]:
    donors = []
    for index, row in enumerate(_EMERGENCY_ROWS, start=1):
        donors.append(
            Donor(
                id=str(index),
                name=row["name"],
                blood_group=BloodGroup(row["blood_group"]),
                location=row["location"],
                phone=f"+88012345678{89 + index}",
                urgency_level=UrgencyLevel(row["urgency_level"]),
                last_donation_date=date.fromisoformat(row["last_donation_date"]),
            )
        )
    return donors


DEFAULT_PROFILE = Profile(
    name="Your Name",
    blood_group=BloodGroup.O_POSITIVE,
    location="Dhaka",
    phone="+8801234567890",
    profile_picture="https://placehold.co/100x100",
    last_donation_date=date(2025, 8, 15),
)

DEFAULT_DONATION_HISTORY: List[Donation] = [
    Donation(id="1", date=date(2025, 8, 15), location="Dhaka"),
    Donation(id="2", date=date(2025, 5, 10), location="Dhaka"),
    Donation(id="3", date=date(2025, 2, 20), location="Dhaka"),
]
