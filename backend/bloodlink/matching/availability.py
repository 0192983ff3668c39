from __future__ import annotations

from datetime import date, datetime, timedelta

DONATION_COOLDOWN_DAYS = 90


def _as_date(moment: date | datetime) -> date:
    return moment.date() if isinstance(moment, datetime) else moment


def is_available_to_donate(
    last_donation_date: date | None,
    now: date | datetime,
    cooldown_days: int = DONATION_COOLDOWN_DAYS,
) -> bool:
    """
    A donor may give again once three months have passed since the last donation.

    Months are counted as 30 days, so the threshold is ``cooldown_days`` (90)
    whole days between the two calendar dates.
    """
    if last_donation_date is None:
        return True
    elapsed = _as_date(now) - last_donation_date
    return elapsed.days >= cooldown_days


def next_eligible_date(
    last_donation_date: date | None, cooldown_days: int = DONATION_COOLDOWN_DAYS
) -> date | None:
    if last_donation_date is None:
        return None
    return last_donation_date + timedelta(days=cooldown_days)
