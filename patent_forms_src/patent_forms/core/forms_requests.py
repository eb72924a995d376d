from __future__ import annotations

from typing import Dict, List, Optional

from .fee_schedule import FeeBreakdown
from .form_common import (
    BLANK,
    DocumentKind,
    DocumentResult,
    EmptyResult,
    applicant_names,
    applicant_nationality,
    inventor_parties,
    nationality_phrase,
    new_view,
    office_title,
    office_upper,
)
from .record import ApplicationRecord
from .text_format import DOTTED_DATE_PLACEHOLDER, dated_clause, format_date_long

NO_APPLICANTS_NOTE = "[Applicant details not provided]"

GENERAL_AUTHORITY_SCOPE = (
    "jointly and severally, to act on our behalf as our agents/advocates for securing from the "
    "Government of India in our name the grant of letters patent under the above-mentioned Act in "
    "respect of inventions and in all matters and proceedings before the Controller of Patents or any "
    "Court of Law or Tribunals or the Government of India in connection therewith or incidental thereto "
    "and in all matters and proceedings subsequent to the grant of any letters patent including the "
    "amendment thereof or of the application, appeals or petitions in respect thereof, specification or "
    "any other document filed in respect thereof, the renewal thereof, the restoration thereof, the "
    "registration and recordal of any licence, mortgage, assignment or transfer of other interest in "
    "respect thereof, the recordal of changes in our name, address or address for service and the filing "
    "of statements of working in respect thereof and in general to perform all acts and take such actions "
    "as the said agents/advocates may in their discretion deem necessary or expedient in the discharge of "
    "their duties including the appointment of a substitute or substitutes"
)

RATIFICATION = (
    "We hereby confirm and ratify previous acts, if any, done by the said agents/advocates in respect of "
    "the said matters or proceedings."
)
REVOCATION = (
    "We hereby revoke all previous authorizations, if any, made by us in respect of the said matters or "
    "proceedings."
)


def _long_dotted(record: ApplicationRecord) -> str:
    return format_date_long(record.deposit_date, DOTTED_DATE_PLACEHOLDER)


# ----------------------------------------------------------------------------
# Form 9
# ----------------------------------------------------------------------------

def publication_request(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.PUBLICATION_REQUEST
    if record is None:
        return EmptyResult(kind)

    applicants: List[Dict[str, str]] = []
    for i, a in enumerate(record.applicants, 1):
        row = {"name": f"{i}. {a.name}"}
        if a.nationality:
            row["nationality"] = f"Nationality: {a.nationality}"
        if a.address:
            row["address"] = f"Address: {a.address}"
        applicants.append(row)
    has_applicants = any(a.name for a in record.applicants)

    filing_date = _long_dotted(record)
    fields = {
        "opening": "We,",
        "applicants": applicants if has_applicants else [],
        "applicants_note": "" if has_applicants else NO_APPLICANTS_NOTE,
        "filing_date": filing_date,
        "request": (
            "hereby request for early publication of our Patent application number ____________ "
            f"dated {filing_date} under section 11A(2) of the Act."
        ),
        "dated": dated_clause(record.deposit_date, DOTTED_DATE_PLACEHOLDER),
        "office": office_upper(record),
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Form 18
# ----------------------------------------------------------------------------

def examination_request(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.EXAMINATION_REQUEST
    if record is None:
        return EmptyResult(kind)

    names = applicant_names(record)
    filing_date = _long_dotted(record)
    same = record.inventors_same_as_applicant
    fields = {
        "applicants": [
            {
                "name": f"(a) Name: {a.name}",
                "address": f"(b) Address: {a.address}",
                "nationality": f"(c) Nationality: {a.nationality}",
            }
            for a in record.applicants
        ],
        # Opaque pass-through; printed as stored.
        "publication_date": record.extension("publication_date") or BLANK,
        "applicant_names": names,
        "inventors_same_as_applicant": same,
        "inventors": [p.name for p in inventor_parties(record) if p.name],
        "filing_date": filing_date,
        "request_statement": (
            f"We, {names}; hereby request that my/our application for Patent No. ____________________ "
            f'filed on {filing_date} for the invention titled "{record.title}" shall be examined under '
            "sections 12 and 13 of the Act."
        ),
        "express_request_statement": (
            "We, _________________________ hereby make an express request that our application for Patent "
            "No. __________________ filed on ___________ based on Patent Cooperation Treaty (PCT) "
            "application no. _______________ dated ___________ made in country ___________ shall be "
            "examined under sections 12 and 13 of the Act, immediately without waiting for the expiry of "
            "31 months as specified in section 11B."
        ),
        "interested_person_statement": (
            "We the interested person request for the examination of the application no. "
            "..................... dated ................. filed by the applicant ................. titled "
            "...................................... under section 12 and 13 of the Act."
        ),
        "dated": dated_clause(record.deposit_date, DOTTED_DATE_PLACEHOLDER),
        "office": office_upper(record),
    }
    return new_view(kind, record, fields)


# ----------------------------------------------------------------------------
# Form 26
# ----------------------------------------------------------------------------

def _grantor_fields(record: ApplicationRecord) -> Dict[str, str]:
    applicant = record.first_applicant
    name = applicant.name or BLANK
    address = applicant.address or BLANK
    nationality = applicant_nationality(record)
    statement = nationality_phrase(record.applicant_category, nationality)
    return {
        "applicant_name": name,
        "applicant_nationality": nationality,
        "nationality_statement": statement,
        "applicant_address": address,
        "grantor_clause": f"We, {name}, {statement} and having address at {address},",
    }


def _attorney_fields(record: ApplicationRecord) -> Dict[str, object]:
    return {
        "include_agent_roster": True,
        "ratification": RATIFICATION,
        "revocation": REVOCATION,
        "dated": dated_clause(record.deposit_date, DOTTED_DATE_PLACEHOLDER),
        "office": office_title(record),
    }


def power_of_attorney_specific(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.POWER_OF_ATTORNEY_SPECIFIC
    if record is None:
        return EmptyResult(kind)

    title = record.title or BLANK
    docket = record.docket_no or BLANK
    fields = {
        **_grantor_fields(record),
        "application": {
            "title": f'"{title}"',
            "docket_no": docket,
            "filing_date": _long_dotted(record),
        },
        "authority_scope": (
            f'jointly and severally, to act on our behalf as our agents/advocates in respect of the '
            f'application for patent titled "{title}" (our reference {docket}) and in all matters and '
            "proceedings before the Controller of Patents in connection therewith or incidental thereto, "
            "including the filing of any document, amendment, reply or request in respect thereof"
        ),
        **_attorney_fields(record),
    }
    return new_view(kind, record, fields)


def power_of_attorney_general(record: Optional[ApplicationRecord], fees: FeeBreakdown) -> DocumentResult:
    kind = DocumentKind.POWER_OF_ATTORNEY_GENERAL
    if record is None:
        return EmptyResult(kind)

    fields = {
        **_grantor_fields(record),
        "authority_scope": GENERAL_AUTHORITY_SCOPE,
        **_attorney_fields(record),
    }
    return new_view(kind, record, fields)
