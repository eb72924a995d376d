from __future__ import annotations

from string import ascii_lowercase
from typing import Dict, List, Optional

from .enums import ApplicantCategory
from .fee_schedule import FeeBreakdown
from .form_common import (
    DASH,
    DocumentKind,
    DocumentResult,
    EmptyResult,
    applicant_nationality,
    claimed_priorities,
    inventor_parties,
    inventor_row,
    nationality_phrase,
    new_view,
    office_upper,
    party_row,
)
from .record import ApplicationRecord
from .text_format import (
    DOTTED_DATE_PLACEHOLDER,
    count_with_words,
    dated_clause,
    format_date_long,
    format_date_short,
    number_to_words,
)

PRIORITY_FILLER = ".................."
DASHED_CELL = "------------------------"
FORM3_PRIORITY_ROWS = 3

SPECIFICATION_PREAMBLE = (
    "The following specification particularly describes the invention and the manner "
    "in which it is to be performed."
)
SPECIFICATION_BODY_PLACEHOLDER = (
    "[Technical Field, Background, Summary, Detailed Description, Claims, Abstract to be added here]"
)


def _inr(amount: int) -> str:
    return f"INR {amount}"


# ----------------------------------------------------------------------------
# Form 1
# ----------------------------------------------------------------------------

def _category_ticks(category: Optional[ApplicantCategory]) -> Dict[str, bool]:
    return {
        "natural_person": category is ApplicantCategory.NATURAL_PERSON,
        "small_entity": category is ApplicantCategory.SMALL_ENTITY,
        "startup": category is ApplicantCategory.STARTUP,
        "education": category is ApplicantCategory.EDUCATION,
        "other": category is ApplicantCategory.OTHER,
    }


def _form1_fee_rows(record: ApplicationRecord, fees: FeeBreakdown) -> List[Dict[str, str]]:
    form2_pages = record.form2_pages or 1
    abstract_pages = record.abstract_pages or 1
    return [
        {
            "item": "Complete specification (description only)",
            "details": f"No. of pages: {record.description_pages}; Form 2 page: {form2_pages}",
            "fee": _inr(fees.basic_fee),
            "remarks": "Application Fee",
        },
        {
            "item": "Extra pages",
            "details": f"Total pages: {record.total_pages}",
            "fee": _inr(fees.extra_page_fee),
            "remarks": f"Fee For Extra {fees.extra_page_count} Pages",
        },
        {
            "item": "No. of Claim(s)",
            "details": f"No. of claims: {record.number_of_claims}; No. of pages: {record.claim_pages}",
            "fee": _inr(fees.extra_claim_fee),
            "remarks": f"Fee For Extra {fees.extra_claim_count} claims",
        },
        {
            "item": "Abstract",
            "details": f"No. of page: {abstract_pages}",
            "fee": _inr(fees.extra_priority_fee),
            "remarks": f"Fee For Extra {fees.extra_priority_count} priority",
        },
        {
            "item": "No. of Drawing(s)",
            "details": f"No. of drawings: {record.number_of_drawings} and No. of pages: {record.drawing_pages}",
            "fee": _inr(fees.examination_fee),
            "remarks": "Fee For Examination",
        },
        {
            "item": "Sequence listing",
            "details": f"No. of pages: {record.sequence_pages}" if record.sequence_listing else DASH,
            "fee": _inr(fees.sequence_fee),
            "remarks": "Fee For Sequence Listing",
        },
        {
            "item": "",
            "details": "",
            "fee": _inr(fees.total_fee),
            "remarks": "TOTAL FEE",
        },
    ]


def _form1_attachments(record: ApplicationRecord) -> List[str]:
    items = [
        f"Complete Specification comprising, No. of Claims – {count_with_words(record.number_of_claims)} "
        f"with No. of Pages – {count_with_words(record.total_pages)}",
        f"Drawings - No. of sheets – {count_with_words(record.drawing_pages)}",
        "Statement and undertaking on Form 3",
        "Declaration of inventorship on Form 5",
    ]
    if record.request_examination:
        items.append("Request for Examination on Form 18")
    if record.claiming_priority:
        items.append("Copy of certified Priority Document")
    items.append("Copy of executed Form 1/Copy of deed of Assignment")
    if record.claiming_priority:
        items.append("Verified English translation of Priority document")
        items.append("Submission of DAS code (****)")
    items.append("Copy of General Power of Authority.")
    # (a) is the fee table itself.
    return [f"({ascii_lowercase[i + 1]}) {text}" for i, text in enumerate(items)]


def deposit_line(fees: FeeBreakdown) -> str:
    total = fees.total_fee
    return f"Deposit of Total fee INR {total}/- ({number_to_words(total)} only) - via electronic transfer."


def grant_request(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.GRANT_REQUEST
    if record is None:
        return EmptyResult(kind)

    category = record.applicant_category
    same = record.inventors_same_as_applicant
    priorities = claimed_priorities(record)
    if not priorities:
        priorities = [dict.fromkeys(("country", "application_no", "date", "applicant_name", "title"), DASH)]

    declarants = inventor_parties(record)
    fields = {
        "docket_no": record.docket_no,
        "office": office_upper(record),
        "application_type": {
            "ordinary": not (record.is_convention or record.is_pct),
            "convention": record.is_convention,
            "pct_national_phase": record.is_pct,
        },
        "category": _category_ticks(category),
        "applicants": [party_row(a, category) for a in record.applicants],
        "inventors_same_as_applicant": same,
        "inventors": [] if same else [inventor_row(i) for i in record.inventors],
        "invention_title": f'"{record.title}"',
        "priorities": priorities,
        "pct": {
            "international_application_no": (record.international_application_no or DASH) if record.is_pct else DASH,
            "international_filing_date": format_date_short(record.international_filing_date) if record.is_pct else DASH,
        },
        "inventor_declaration_names": [p.name for p in declarants],
        "include_assignee_clause": not same,
        "include_convention_clauses": record.is_convention,
        "include_pct_clause": record.is_pct,
        "fee_rows": _form1_fee_rows(record, fees),
        "total_fee": str(fees.total_fee),
        "attachments": _form1_attachments(record),
        "deposit_line": deposit_line(fees),
        "dated": dated_clause(record.deposit_date),
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Form 2
# ----------------------------------------------------------------------------

def complete_specification(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.COMPLETE_SPECIFICATION
    if record is None:
        return EmptyResult(kind)

    applicants = []
    for a in record.applicants:
        row = {"name": a.name}
        if a.nationality:
            row["nationality"] = f"Nationality: {a.nationality}"
        if a.address:
            row["address"] = f"Address: {a.address}"
        applicants.append(row)

    fields = {
        "invention_title": f'"{record.title}"',
        "applicants": applicants,
        "preamble_heading": "COMPLETE SPECIFICATION",
        "preamble": SPECIFICATION_PREAMBLE,
        "body_placeholder": SPECIFICATION_BODY_PLACEHOLDER,
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Form 3
# ----------------------------------------------------------------------------

def _form3_priority_rows(record: ApplicationRecord) -> List[Dict[str, str]]:
    filler = {
        "country": DASHED_CELL,
        "date": DASHED_CELL,
        "application_no": DASHED_CELL,
        "status": DASH,
        "publication_date": DASH,
        "disposal_date": DASH,
    }
    rows = [
        {
            "country": p["country"],
            "date": p["date"],
            "application_no": p["application_no"],
            "status": DASH,
            "publication_date": DASH,
            "disposal_date": DASH,
        }
        for p in claimed_priorities(record)
    ]
    if not rows:
        rows.append(dict(filler))
    while len(rows) < FORM3_PRIORITY_ROWS:
        rows.append(dict(filler))
    return rows


def statement_and_undertaking(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.STATEMENT_AND_UNDERTAKING
    if record is None:
        return EmptyResult(kind)

    applicant = record.first_applicant
    statement = nationality_phrase(record.applicant_category, applicant_nationality(record))
    filing_date = format_date_long(record.deposit_date)
    first_priority_no = record.priorities[0].priority_no if record.priorities else ""

    fields = {
        "applicant_name": applicant.name,
        "nationality_statement": statement,
        "applicant_address": applicant.address,
        "declaration": (
            f"I/We, {applicant.name} {statement}, having address at {applicant.address}; "
            "do hereby declare:"
        ),
        "filing_date": filing_date,
        "application_statement": (
            "(i) that I/we who have made the Application for patent number.................. in India, "
            f"dated {filing_date}, based on {first_priority_no or PRIORITY_FILLER}, alone/jointly with.............."
        ),
        "no_foreign_filing_statement": (
            "(ii) that I/We have not made any application for the same/substantially the same "
            "invention outside India"
        ),
        "foreign_filing_statement": (
            "(iii) that I/We have made for the same/substantially same invention, application(s) for "
            "patent in the other countries, the particulars of which are given below:"
        ),
        "priority_rows": _form3_priority_rows(record),
        "assignee_statement": (
            f"(i) that the rights in the application(s) has/have been assigned to {applicant.name} "
            f"{statement}, having address at {applicant.address};"
        ),
        "undertaking": (
            "(ii) that I/We undertake that up to the date of grant of the patent by the Controller, I/We "
            "would keep him informed in writing the details regarding corresponding applications for "
            "patents filed outside India in accordance with the provisions contained in section 8 and rule 12"
        ),
        "dated": dated_clause(record.deposit_date),
        "office": office_upper(record),
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Form 5
# ----------------------------------------------------------------------------

def inventorship_declaration(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.INVENTORSHIP_DECLARATION
    if record is None:
        return EmptyResult(kind)

    applicant = record.first_applicant
    filing_date = format_date_long(record.deposit_date)
    inventors = [inventor_row(p) for p in inventor_parties(record) if p.name.strip()]

    fields = {
        "applicant": {
            "name": applicant.name,
            "nationality": nationality_phrase(record.applicant_category, applicant_nationality(record)),
            "address": applicant.address,
        },
        "filing_date": filing_date,
        "declaration": (
            "hereby declare that the true and first inventor(s) of the invention disclosed in the complete "
            "specification filed in pursuance of our application numbered _________________ dated "
            f"{filing_date} is/are:"
        ),
        "inventors": inventors,
        "has_inventors": bool(inventors),
        "inventors_note": "" if inventors else "No inventors specified",
        "dated": dated_clause(record.deposit_date),
        "include_convention_declaration": record.is_convention,
        "convention_declaration": (
            "We the applicant(s) in the convention country hereby declare that our right to apply for a "
            "patent in India is by way of assignment from the true and first inventor(s)."
        ),
        "statement": (
            "We assent to the invention referred to in the above declaration, being included in the "
            "complete specification filed in pursuance of the stated application."
        ),
        "statement_dated": f"Dated this {DOTTED_DATE_PLACEHOLDER}",
        "office": office_upper(record),
    }
    return new_view(kind, record, fields)
