"""
Fee computation
"""
import pytest

from patent_forms.core.enums import ApplicantCategory
from patent_forms.core.fee_schedule import (
    HIGH_TIER,
    STANDARD_TIER,
    FeeBreakdown,
    compute_fees,
    sequence_fee,
    tier_for,
)

STANDARD_CATEGORIES = [
    ApplicantCategory.NATURAL_PERSON,
    ApplicantCategory.SMALL_ENTITY,
    ApplicantCategory.STARTUP,
    ApplicantCategory.EDUCATION,
    None,
]


class TestTiers:

    @pytest.mark.parametrize("category", STANDARD_CATEGORIES)
    def test_standard_basic_fee(self, category):
        assert tier_for(category) is STANDARD_TIER
        assert compute_fees(category).basic_fee == 1600

    def test_other_is_high_tier(self):
        assert tier_for(ApplicantCategory.OTHER) is HIGH_TIER
        assert compute_fees(ApplicantCategory.OTHER).basic_fee == 8000


class TestExtras:

    def test_allowances_are_free(self):
        fees = compute_fees(ApplicantCategory.SMALL_ENTITY, total_pages=30, number_of_claims=10,
                            number_of_priorities=1)
        assert fees.extra_page_count == 0
        assert fees.extra_claim_count == 0
        assert fees.extra_priority_count == 0
        assert fees.total_fee == 1600

    def test_extra_pages_monotonic(self):
        previous = -1
        for pages in range(0, 80, 5):
            count = compute_fees(None, total_pages=pages).extra_page_count
            assert count == max(0, pages - 30)
            assert count >= previous
            previous = count

    def test_negative_counts_are_clamped(self):
        fees = compute_fees(None, total_pages=-5, number_of_claims=-1, number_of_priorities=-3, sequence_pages=-2)
        assert fees == compute_fees(None)

    def test_examination_only_on_request(self):
        assert compute_fees(None).examination_fee == 0
        assert compute_fees(None, request_examination=True).examination_fee == 4000
        assert compute_fees(ApplicantCategory.OTHER, request_examination=True).examination_fee == 20000


class TestSequenceListing:

    def test_zero_pages(self):
        assert sequence_fee(0, STANDARD_TIER) == 0

    def test_per_page_up_to_limit(self):
        assert sequence_fee(150, STANDARD_TIER) == 150 * 160
        assert sequence_fee(150, HIGH_TIER) == 150 * 800

    def test_flat_cap_above_limit(self):
        assert sequence_fee(151, STANDARD_TIER) == 24000
        assert sequence_fee(151, HIGH_TIER) == 120000
        assert sequence_fee(5000, HIGH_TIER) == 120000


class TestTotals:

    def test_end_to_end_other_category(self):
        fees = compute_fees(
            ApplicantCategory.OTHER,
            total_pages=45,
            number_of_claims=14,
            number_of_priorities=2,
            request_examination=True,
            sequence_pages=0,
        )
        assert fees.extra_page_fee == 12000
        assert fees.extra_claim_fee == 6400
        assert fees.extra_priority_fee == 8000
        assert fees.examination_fee == 20000
        assert fees.total_fee == 54400

    def test_total_is_sum_of_components(self):
        fees = compute_fees(ApplicantCategory.STARTUP, total_pages=61, number_of_claims=33,
                            number_of_priorities=4, request_examination=True, sequence_pages=151)
        assert fees.total_fee == (fees.basic_fee + fees.extra_page_fee + fees.extra_claim_fee
                                  + fees.extra_priority_fee + fees.examination_fee + fees.sequence_fee)

    def test_to_dict_includes_total(self):
        out = compute_fees(None).to_dict()
        assert out["total_fee"] == 1600
        assert out["basic_fee"] == 1600

    def test_breakdown_is_frozen(self):
        fees = FeeBreakdown(basic_fee=1600)
        with pytest.raises(Exception):
            fees.basic_fee = 1
