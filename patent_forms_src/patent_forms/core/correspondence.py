"""
Client-facing correspondence: the filing cover letter and the status report.

Both documents quote the official fee from the same FeeBreakdown that Form 1
uses, together with the record's actual claim, page and priority counts.
"""
from __future__ import annotations

import datetime
from typing import Dict, List, Optional

from .enums import ApplicationType
from .fee_schedule import FREE_CLAIMS, FREE_PAGES, FREE_PRIORITIES, FeeBreakdown
from .form_common import (
    BLANK,
    DocumentKind,
    DocumentResult,
    EmptyResult,
    applicant_names,
    new_view,
    office_title,
)
from .record import ApplicationRecord
from .text_format import add_months, count_with_words, format_date_short, number_to_words, parse_date

DEFAULT_CLIENT_REF = "PLEASE ADVICE"
PENDING_APPLICATION_NO = "TBA"

RFE_MONTHS = 31
FORM3_MONTHS = 6
FORM3_EXTENDED_MONTHS = 9
POA_MONTHS = 6


def format_inr(amount: int) -> str:
    return f"INR {amount:,}"


def fee_rows(fees: FeeBreakdown) -> List[Dict[str, str]]:
    """Itemized official fee; extra rows appear only when something is charged."""
    rows = [
        {
            "label": (
                f"Application Filing Fee (with {FREE_PAGES} Pages, {FREE_CLAIMS} Claims "
                f"and {FREE_PRIORITIES} Priority)"
            ),
            "amount": format_inr(fees.basic_fee),
        }
    ]
    if fees.extra_page_count > 0:
        rows.append({
            "label": f"Fee for Extra {fees.extra_page_count} Pages in addition to {FREE_PAGES}",
            "amount": format_inr(fees.extra_page_fee),
        })
    if fees.extra_claim_count > 0:
        rows.append({
            "label": f"Fee for Extra {fees.extra_claim_count} Claims in addition to {FREE_CLAIMS}",
            "amount": format_inr(fees.extra_claim_fee),
        })
    if fees.extra_priority_count > 0:
        rows.append({
            "label": f"Fee for Extra {fees.extra_priority_count} Priority in addition to {FREE_PRIORITIES}",
            "amount": format_inr(fees.extra_priority_fee),
        })
    rows.append({"label": "Fee for Request for Examination", "amount": format_inr(fees.examination_fee)})
    rows.append({"label": "Fee for Sequence Listing", "amount": format_inr(fees.sequence_fee)})
    return rows


def _fee_fields(fees: FeeBreakdown) -> Dict[str, object]:
    return {
        "fee_rows": fee_rows(fees),
        "total_fee": str(fees.total_fee),
        "total_fee_display": format_inr(fees.total_fee),
        "total_fee_words": f"{number_to_words(fees.total_fee)} only",
    }


def pct_application_no(record: ApplicationRecord) -> str:
    return record.extension("pct_app_no") or record.international_application_no or BLANK


def internal_ref(record: ApplicationRecord) -> str:
    return record.extension("internal_ref") or record.docket_no


def _date_line(record: ApplicationRecord) -> str:
    return f"{format_date_short(record.deposit_date)} | {office_title(record)}, India"


def _application_label(record: ApplicationRecord) -> str:
    if record.is_pct:
        return "PCT-NATIONAL-PHASE"
    if record.is_convention:
        return "CONVENTION"
    return "ORDINARY"


def _basis(record: ApplicationRecord) -> str:
    if record.is_pct:
        return f"out of Application No. {pct_application_no(record)}"
    if record.is_convention:
        first = record.priorities[0].priority_no if record.priorities else ""
        return f"claiming priority of Application No. {first or BLANK}"
    return "for letters patent"


def _subject(record: ApplicationRecord) -> str:
    label = _application_label(record)
    if record.application_type is ApplicationType.ORDINARY:
        return f"Re: NEW {label} APPLICATION FOR PATENT - INDIA"
    return f"Re: NEW {label} APPLICATION - INDIA {_basis(record).upper()}"


def _enclosures(record: ApplicationRecord) -> List[str]:
    items = ["Form 1,", "Form 2 - Complete Specification,", "Form 3,", "Form 5,"]
    if record.request_examination:
        items.append("FORM 18")
    if record.is_pct:
        items.append(
            "Copy of Notification of the International Application Number and of the "
            "International Filing Date RO/105"
        )
        items.append("Copy of Notification Concerning Submission or Transmittal of Priority Document IB/304")
        items.append("Copy of notification of the Recording of a Change IB/306")
    if record.claiming_priority:
        items.append("Certified copy of the Priority Document(s)")
    items.append("Proof of right")
    items.append("FORM 26")
    return items


def cover_letter(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.COVER_LETTER
    if record is None:
        return EmptyResult(kind)

    label = _application_label(record)
    names = applicant_names(record)
    claims = count_with_words(record.number_of_claims)
    pages = count_with_words(record.total_pages)
    priorities = count_with_words(record.number_of_priorities)

    fields = {
        "date_line": _date_line(record),
        "internal_ref": internal_ref(record),
        "subject": _subject(record),
        "pct_application_no": pct_application_no(record),
        "applicant_names": names,
        "salutation": "Dear Sir,",
        "introduction": (
            f"We have the honor to submit herewith {label} – INDIA for the application for letters patent "
            "under The Patents (Amendment) Act, 2005 for an invention:"
        ),
        "particulars": (
            f'{label} application in India {_basis(record)} in the name of {names}; titled '
            f'"{record.title}" with {claims} claims, {pages} pages and {priorities} Priority.'
        ),
        "counts": {"claims": claims, "pages": pages, "priorities": priorities},
        "fee_heading": "Details of the Fee:",
        **_fee_fields(fees),
        "closing": "The Controller is respectfully requested to take that on record.",
        "valediction": "Yours faithfully,",
        "enclosures": _enclosures(record),
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Status report
# ----------------------------------------------------------------------------

def _rfe_base_date(record: ApplicationRecord) -> Optional[datetime.date]:
    explicit = parse_date(record.extension("priority_date"))
    if explicit:
        return explicit
    if record.claiming_priority:
        dates = [p.priority_date for p in record.priorities if p.priority_date]
        if dates:
            return min(dates)
    return record.deposit_date


def deadlines(record: ApplicationRecord) -> Dict[str, str]:
    deposit = record.deposit_date
    return {
        "rfe": format_date_short(add_months(_rfe_base_date(record), RFE_MONTHS)),
        "form3": format_date_short(add_months(deposit, FORM3_MONTHS)),
        "form3_extended": format_date_short(add_months(deposit, FORM3_EXTENDED_MONTHS)),
        "poa": format_date_short(add_months(deposit, POA_MONTHS)),
    }


def status_report(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.STATUS_REPORT
    if record is None:
        return EmptyResult(kind)

    label = _application_label(record)
    client_ref = record.extension("client_ref") or DEFAULT_CLIENT_REF
    ref = internal_ref(record)
    pct_no = pct_application_no(record)
    due = deadlines(record)
    filed_on = format_date_short(record.deposit_date)

    if record.request_examination:
        rfe_paragraph = (
            "We are also pleased to report that REQUEST FOR EXAMINATION (FORM 18) has been filed along "
            "with this application on your request."
        )
    else:
        rfe_paragraph = (
            "The applicant is required to file a Request for Examination (RFE) within 31 months from the "
            f"earliest priority date. Accordingly, for the current application, the deadline for filing RFE "
            f"is {due['rfe']}. Please note that the examination does not happen automatically and explicit "
            "request for examination has to be made before patent office."
        )

    fields = {
        "client_ref": client_ref,
        "internal_ref": ref,
        "pct_application_no": pct_no,
        "re_line": (
            f"Your ref: {client_ref} | Our ref: {ref} | Indian Application Number: "
            f"{PENDING_APPLICATION_NO} based on {pct_no} | Application Filed"
        ),
        "application_details": {
            "indian_application_no": PENDING_APPLICATION_NO,
            "international_application_no": pct_no,
            "applicant": f"{applicant_names(record)};",
            "titled": record.title,
            "your_ref": client_ref,
            "our_ref": ref,
            "date_line": _date_line(record),
        },
        "salutation": "Dear Sirs,",
        "particulars": (
            f"We are pleased to report that a {label} patent application in INDIA"
            f"{' based on Application bearing number ' + pct_no if record.is_pct else ''}, "
            f'titled "{record.title}" was successfully submitted at the local Patent Office on '
            f"{filed_on} under application number {PENDING_APPLICATION_NO}."
        ),
        "deadlines": due,
        "rfe_filed": record.request_examination,
        "rfe_paragraph": rfe_paragraph,
        "form3_paragraph": (
            "As per Section 8 of the Indian Patents Act, 1970, the applicant is required to file a "
            "statement and undertaking on the prescribed FORM 3 regarding foreign or family filings within "
            "6 months from the date of application in India. The current deadline for filing the FORM 3 is "
            f"{due['form3']}, extendable until {due['form3_extended']} by an additional three months."
        ),
        "poa_paragraph": (
            "We would require a Power of Attorney (POA/FORM 26) to be executed by the applicants for the "
            "subject application. No legalization or notarization would be required. For the current "
            f"application, the deadline for filing POA is {due['poa']}."
        ),
        "anticipated_action": (
            "We shall now await the publication of the application, which will be further followed by the "
            "issue of examination report by the Indian Patent Office (subject to timely submission of RFE)."
        ),
        "fee_heading": "The itemized record for the official fee (in Indian Rupee) is as below:",
        **_fee_fields(fees),
        "valediction": "Yours sincerely,",
    }
    return new_view(kind, record, fields)
