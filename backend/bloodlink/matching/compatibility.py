"""
Blood group compatibility.

The table is keyed by the donor's group and lists the recipient groups that
donor may give to. Search screens use the same table to widen a blood-group
filter: picking ``O-`` surfaces donors of every group.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, List, Mapping

from pydantic import BaseModel

from ..models.blood_group import BLOOD_GROUPS, BloodGroup

BG = BloodGroup

COMPATIBILITY: Mapping[BloodGroup, FrozenSet[BloodGroup]] = MappingProxyType(
    {
        BG.A_POSITIVE: frozenset({BG.A_POSITIVE, BG.AB_POSITIVE}),
        BG.A_NEGATIVE: frozenset({BG.A_POSITIVE, BG.A_NEGATIVE, BG.AB_POSITIVE, BG.AB_NEGATIVE}),
        BG.B_POSITIVE: frozenset({BG.B_POSITIVE, BG.AB_POSITIVE}),
        BG.B_NEGATIVE: frozenset({BG.B_POSITIVE, BG.B_NEGATIVE, BG.AB_POSITIVE, BG.AB_NEGATIVE}),
        BG.AB_POSITIVE: frozenset({BG.AB_POSITIVE}),  # universal recipient
        BG.AB_NEGATIVE: frozenset({BG.AB_POSITIVE, BG.AB_NEGATIVE}),
        BG.O_POSITIVE: frozenset({BG.A_POSITIVE, BG.B_POSITIVE, BG.AB_POSITIVE, BG.O_POSITIVE}),
        BG.O_NEGATIVE: frozenset(BLOOD_GROUPS),  # universal donor
    }
)


def compatible_groups(group: BloodGroup | str) -> FrozenSet[BloodGroup]:
    """
    Return the groups compatible with ``group``.

    Raises:
        InvalidBloodGroup: ``group`` is not one of the eight groups.
    """
    return COMPATIBILITY[BloodGroup.parse(group)]


def is_compatible(donor: BloodGroup | str, recipient: BloodGroup | str) -> bool:
    return BloodGroup.parse(recipient) in compatible_groups(donor)


def donor_groups_for(recipient: BloodGroup | str) -> List[BloodGroup]:
    """Groups that can give to ``recipient``, in canonical order."""
    target = BloodGroup.parse(recipient)
    return [donor for donor in BLOOD_GROUPS if target in COMPATIBILITY[donor]]


def ordered_compatible_groups(group: BloodGroup | str) -> List[BloodGroup]:
    matches = compatible_groups(group)
    return [candidate for candidate in BLOOD_GROUPS if candidate in matches]


def compatibility_label(group: BloodGroup | str) -> str:
    return ", ".join(candidate.value for candidate in ordered_compatible_groups(group)) or "None"


class CompatibilityView(BaseModel):
    blood_group: BloodGroup
    compatible: List[BloodGroup]
    label: str


def compatibility_view(group: BloodGroup | str) -> CompatibilityView:
    target = BloodGroup.parse(group)
    return CompatibilityView(
        blood_group=target,
        compatible=ordered_compatible_groups(target),
        label=compatibility_label(target),
    )
