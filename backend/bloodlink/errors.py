from __future__ import annotations

from typing import Iterable, Tuple


class BloodLinkError(Exception):
    """Base class for every error raised by the donor matching core."""


class InvalidBloodGroup(BloodLinkError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Unrecognized blood group: {value!r}")
        self.value = value


class RequiredFieldMissing(BloodLinkError, ValueError):
    user_message = "All fields are required."

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: Tuple[str, ...] = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class PageOutOfRange(BloodLinkError, IndexError):
    def __init__(self, page: int, total_pages: int) -> None:
        super().__init__(f"Page {page} is outside 1..{total_pages}")
        self.page = page
        self.total_pages = total_pages


class DonorUnavailable(BloodLinkError):
    pass


class NoPhoneNumber(BloodLinkError):
    pass


class OnboardingStoreError(BloodLinkError):
    pass

