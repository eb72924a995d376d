from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .enums import ApplicantCategory

FREE_PAGES = 30
FREE_CLAIMS = 10
FREE_PRIORITIES = 1
SEQUENCE_PAGE_LIMIT = 150


@dataclass(frozen=True)
class FeeSchedule:
    name: str
    basic: int
    per_extra_page: int
    per_extra_claim: int
    per_extra_priority: int
    examination: int
    per_sequence_page: int
    sequence_cap: int


STANDARD_TIER = FeeSchedule(
    name="standard",
    basic=1600,
    per_extra_page=160,
    per_extra_claim=320,
    per_extra_priority=1600,
    examination=4000,
    per_sequence_page=160,
    sequence_cap=24000,
)

HIGH_TIER = FeeSchedule(
    name="high",
    basic=8000,
    per_extra_page=800,
    per_extra_claim=1600,
    per_extra_priority=8000,
    examination=20000,
    per_sequence_page=800,
    sequence_cap=120000,
)


@dataclass(frozen=True)
class FeeBreakdown:
    basic_fee: int = 0
    extra_page_count: int = 0
    extra_page_fee: int = 0
    extra_claim_count: int = 0
    extra_claim_fee: int = 0
    extra_priority_count: int = 0
    extra_priority_fee: int = 0
    examination_fee: int = 0
    sequence_fee: int = 0

    @property
    def total_fee(self) -> int:
        return (
            self.basic_fee
            + self.extra_page_fee
            + self.extra_claim_fee
            + self.extra_priority_fee
            + self.examination_fee
            + self.sequence_fee
        )

    def to_dict(self) -> Dict[str, int]:
        out = asdict(self)
        out["total_fee"] = self.total_fee
        return out


def tier_for(category: Optional[ApplicantCategory]) -> FeeSchedule:
    # Natural person, small entity, startup and education all share one table.
    if category == ApplicantCategory.OTHER:
        return HIGH_TIER
    return STANDARD_TIER


def _extra(count: int, allowance: int) -> int:
    return max(0, int(count or 0) - allowance)


def sequence_fee(sequence_pages: int, tier: FeeSchedule) -> int:
    pages = max(0, int(sequence_pages or 0))
    if pages == 0:
        return 0
    if pages <= SEQUENCE_PAGE_LIMIT:
        return pages * tier.per_sequence_page
    return tier.sequence_cap


def compute_fees(
    applicant_category: Optional[ApplicantCategory],
    total_pages: int = 0,
    number_of_claims: int = 0,
    number_of_priorities: int = 0,
    request_examination: bool = False,
    sequence_pages: int = 0,
) -> FeeBreakdown:
    """Official filing fees for one application.

    Thirty pages, ten claims and one priority are covered by the basic fee;
    each unit beyond that is charged at the tier's rate. Sequence listings
    are charged per page up to 150 pages and at a flat cap beyond that.
    """
    tier = tier_for(applicant_category)
    extra_pages = _extra(total_pages, FREE_PAGES)
    extra_claims = _extra(number_of_claims, FREE_CLAIMS)
    extra_priorities = _extra(number_of_priorities, FREE_PRIORITIES)
    return FeeBreakdown(
        basic_fee=tier.basic,
        extra_page_count=extra_pages,
        extra_page_fee=extra_pages * tier.per_extra_page,
        extra_claim_count=extra_claims,
        extra_claim_fee=extra_claims * tier.per_extra_claim,
        extra_priority_count=extra_priorities,
        extra_priority_fee=extra_priorities * tier.per_extra_priority,
        examination_fee=tier.examination if request_examination else 0,
        sequence_fee=sequence_fee(sequence_pages, tier),
    )


def fees_for_record(record) -> FeeBreakdown:
    return compute_fees(
        record.applicant_category,
        total_pages=record.total_pages,
        number_of_claims=record.number_of_claims,
        number_of_priorities=record.number_of_priorities,
        request_examination=record.request_examination,
        sequence_pages=record.sequence_pages,
    )


def sum_of_pages(record) -> int:
    # Cosmetic running total; deliberately not reconciled with total_pages.
    return (
        record.description_pages
        + record.claim_pages
        + record.drawing_pages
        + record.abstract_pages
        + record.form2_pages
    )
