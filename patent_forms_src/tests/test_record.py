"""
Application record: store boundary, repeated lists and derived fees
"""
import datetime

import pytest

from patent_forms.core.enums import ApplicantCategory, ApplicationType, Jurisdiction
from patent_forms.core.form_common import DocumentKind, nationality_phrase
from patent_forms.core.record import (
    FEE_INPUT_FIELDS,
    ApplicationRecord,
    Party,
    PriorityClaim,
    add_entry,
    new_record,
    record_from_dict,
    record_to_dict,
    remove_entry,
    update_entry,
)
from patent_forms.core.transform import build_view_model


# =============================================================================
# BOUNDARY SANITIZER
# =============================================================================

class TestRecordFromDict:

    def test_none_is_missing_record(self):
        assert record_from_dict(None) is None

    @pytest.mark.parametrize("raw", [[1, 2, 3], "DOC-1", 42])
    def test_non_mapping_is_missing_record(self, raw):
        assert record_from_dict(raw) is None

    def test_store_names_are_mapped(self, record):
        assert record.docket_no == "ANV-2024-017"
        assert record.jurisdiction is Jurisdiction.MUMBAI
        assert record.application_type is ApplicationType.CONVENTION
        assert record.applicant_category is ApplicantCategory.OTHER
        assert record.description_pages == 30
        assert record.claim_pages == 5
        assert record.number_of_drawings == 8
        assert record.deposit_date == datetime.date(2024, 3, 5)
        assert record.priorities[0].priority_date == datetime.date(2023, 9, 14)

    def test_flags(self, record):
        assert record.claiming_priority is True
        assert record.request_examination is True
        assert record.sequence_listing is False
        assert record.inventors_same_as_applicant is False

    def test_inventor_citizen_country_is_nationality(self, record):
        assert record.inventors[0].nationality == "GERMANY"

    @pytest.mark.parametrize("raw, expected", [("12", 12), ("7.9", 7), (3.2, 3), ("abc", 0), (None, 0),
                                               (-4, 0), ("", 0), (True, 0)])
    def test_count_coercion(self, raw, expected):
        assert record_from_dict({"number_of_claims": raw}).number_of_claims == expected

    def test_unparsable_date_becomes_none(self):
        rec = record_from_dict({"deposit_date": "sometime next week"})
        assert rec.deposit_date is None

    def test_empty_lists_get_template_entry(self):
        rec = record_from_dict({"applicants": [], "inventors": None})
        assert rec.applicants == [Party()]
        assert rec.inventors == [Party()]
        assert rec.priorities == [PriorityClaim()]

    def test_unknown_enums_default(self):
        rec = record_from_dict({"jurisdiction": "Atlantis", "application_type": "weird", "applicant_category": "x"})
        assert rec.jurisdiction is Jurisdiction.NEW_DELHI
        assert rec.application_type is ApplicationType.ORDINARY
        assert rec.applicant_category is None

    def test_extensions_are_whitelisted(self, store_record):
        store_record["extensions"] = {"publication_date": "12/07/2024", "favourite_colour": "blue"}
        rec = record_from_dict(store_record)
        assert rec.extensions == {"publication_date": "12/07/2024", "client_ref": "TD-881"}

    def test_stored_fee_columns_are_ignored(self, record):
        assert record.fee_breakdown.total_fee == 54400

    def test_round_trip_dict(self, record):
        out = record_to_dict(record)
        assert out["docket_no"] == "ANV-2024-017"
        assert out["application_type"] == "CONVENTION"
        assert out["deposit_date"] == "2024-03-05"
        assert out["priorities"][0]["priority_date"] == "2023-09-14"
        assert out["fee_breakdown"]["total_fee"] == 54400
        assert out["sum_of_pages"] == 30 + 5 + 6 + 1 + 1
        assert record_from_dict(out).fee_breakdown == record.fee_breakdown


# =============================================================================
# REPEATED LISTS
# =============================================================================

class TestRepeatedLists:

    def test_new_record_has_one_blank_entry_each(self):
        rec = new_record(" D-1 ")
        assert rec.docket_no == "D-1"
        assert len(rec.applicants) == len(rec.inventors) == len(rec.priorities) == 1

    def test_add_entry_appends_template(self):
        rec = new_record()
        entry = add_entry(rec, "priorities")
        assert isinstance(entry, PriorityClaim)
        assert len(rec.priorities) == 2

    def test_remove_last_entry_is_rejected(self):
        rec = new_record()
        assert remove_entry(rec, "applicants", 0) is False
        assert len(rec.applicants) == 1

    def test_remove_preserves_order(self):
        rec = new_record()
        for name in ("B", "C"):
            add_entry(rec, "inventors").name = name
        rec.inventors[0].name = "A"
        assert remove_entry(rec, "inventors", 1) is True
        assert [i.name for i in rec.inventors] == ["A", "C"]

    def test_remove_out_of_range(self):
        rec = new_record()
        add_entry(rec, "applicants")
        with pytest.raises(IndexError):
            remove_entry(rec, "applicants", 5)

    def test_update_entry(self):
        rec = new_record()
        update_entry(rec, "applicants", 0, "name", "Jane Doe")
        update_entry(rec, "priorities", 0, "priority_date", "2023-01-02")
        assert rec.applicants[0].name == "Jane Doe"
        assert rec.priorities[0].priority_date == datetime.date(2023, 1, 2)

    def test_update_entry_stores_text(self):
        rec = new_record("ANV-1")
        rec.inventors_same_as_applicant = True
        update_entry(rec, "applicants", 0, "name", 42)
        update_entry(rec, "applicants", 0, "address", None)
        assert rec.applicants[0].name == "42"
        assert rec.applicants[0].address == ""
        for kind in DocumentKind:
            view = build_view_model(kind, rec)
            assert view.empty is False

    def test_update_unknown_field(self):
        with pytest.raises(ValueError):
            update_entry(new_record(), "applicants", 0, "shoe_size", "9")

    def test_unknown_list(self):
        with pytest.raises(ValueError):
            add_entry(new_record(), "assignees")


# =============================================================================
# DERIVED FEES
# =============================================================================

class TestDeriveOnChange:

    def test_fee_recomputed_on_assignment(self):
        rec = new_record()
        assert rec.fee_breakdown.total_fee == 1600
        rec.total_pages = 40
        assert rec.fee_breakdown.extra_page_fee == 1600
        rec.applicant_category = ApplicantCategory.OTHER
        assert rec.fee_breakdown.basic_fee == 8000
        assert rec.fee_breakdown.extra_page_fee == 8000
        rec.request_examination = True
        assert rec.fee_breakdown.total_fee == 8000 + 8000 + 20000

    @pytest.mark.parametrize("name, value, expected_total", [
        ("applicant_category", ApplicantCategory.OTHER, 8000),
        ("total_pages", 40, 1600 + 1600),
        ("number_of_claims", 12, 1600 + 640),
        ("number_of_priorities", 3, 1600 + 3200),
        ("request_examination", True, 1600 + 4000),
        ("sequence_pages", 10, 1600 + 1600),
    ])
    def test_each_fee_input_triggers_recompute(self, name, value, expected_total):
        rec = new_record()
        setattr(rec, name, value)
        assert rec.fee_breakdown.total_fee == expected_total

    def test_every_fee_input_is_covered(self):
        covered = {"applicant_category", "total_pages", "number_of_claims",
                   "number_of_priorities", "request_examination", "sequence_pages"}
        assert covered == set(FEE_INPUT_FIELDS)

    def test_string_category_is_coerced(self):
        rec = ApplicationRecord(applicant_category="Other")
        assert rec.applicant_category is ApplicantCategory.OTHER
        assert rec.fee_breakdown.basic_fee == 8000
        rec.applicant_category = "Natural"
        assert rec.is_natural_person
        assert rec.fee_breakdown.basic_fee == 1600

    def test_string_enums_are_coerced(self):
        rec = ApplicationRecord(jurisdiction="Mumbai", application_type="CONVENTION")
        assert rec.jurisdiction is Jurisdiction.MUMBAI
        assert rec.is_convention

    def test_nationality_phrase_accepts_plain_string(self):
        assert nationality_phrase("Natural", "GERMANY") == "a citizen of GERMANY"

    def test_fee_breakdown_cannot_be_assigned(self, record):
        with pytest.raises(AttributeError):
            record.fee_breakdown = None

    def test_sum_of_pages_not_reconciled_with_total(self, record):
        assert record.sum_of_pages == 43
        assert record.total_pages == 45
