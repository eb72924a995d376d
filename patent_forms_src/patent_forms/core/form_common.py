from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .enums import ApplicantCategory
from .record import ApplicationRecord, Party
from .text_format import SHORT_DATE_PLACEHOLDER, format_date_short

DEFAULT_NATIONALITY = "INDIA"
BLANK = SHORT_DATE_PLACEHOLDER
DASH = "-"
NO_RECORD_MESSAGE = "No application data available."


class DocumentKind(str, Enum):
    GRANT_REQUEST = "form1"
    COMPLETE_SPECIFICATION = "form2"
    STATEMENT_AND_UNDERTAKING = "form3"
    INVENTORSHIP_DECLARATION = "form5"
    PUBLICATION_REQUEST = "form9"
    EXAMINATION_REQUEST = "form18"
    POWER_OF_ATTORNEY_SPECIFIC = "form26_spa"
    POWER_OF_ATTORNEY_GENERAL = "form26_gpa"
    COVER_LETTER = "cover_letter"
    STATUS_REPORT = "status_report"

    @classmethod
    def parse(cls, raw) -> "DocumentKind":
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower().replace("-", "_")
        for item in cls:
            if key in (item.value, item.name.lower(), item.form_name.lower()):
                return item
        raise ValueError(f"Unknown document kind: {raw!r}")

    @property
    def form_name(self) -> str:
        return _FORM_NAMES[self]

    @property
    def heading(self) -> str:
        return _HEADINGS[self]

    @property
    def is_correspondence(self) -> bool:
        return self in (DocumentKind.COVER_LETTER, DocumentKind.STATUS_REPORT)


_FORM_NAMES = {
    DocumentKind.GRANT_REQUEST: "Form1",
    DocumentKind.COMPLETE_SPECIFICATION: "Form2",
    DocumentKind.STATEMENT_AND_UNDERTAKING: "Form3",
    DocumentKind.INVENTORSHIP_DECLARATION: "Form5",
    DocumentKind.PUBLICATION_REQUEST: "Form9",
    DocumentKind.EXAMINATION_REQUEST: "Form18",
    DocumentKind.POWER_OF_ATTORNEY_SPECIFIC: "Form26_SPA",
    DocumentKind.POWER_OF_ATTORNEY_GENERAL: "Form26_GPA",
    DocumentKind.COVER_LETTER: "CoverLetter",
    DocumentKind.STATUS_REPORT: "Report",
}

_HEADINGS = {
    DocumentKind.GRANT_REQUEST: "APPLICATION FOR GRANT OF PATENT",
    DocumentKind.COMPLETE_SPECIFICATION: "COMPLETE SPECIFICATION",
    DocumentKind.STATEMENT_AND_UNDERTAKING: "STATEMENT AND UNDERTAKING UNDER SECTION 8",
    DocumentKind.INVENTORSHIP_DECLARATION: "DECLARATION AS TO INVENTORSHIP",
    DocumentKind.PUBLICATION_REQUEST: "REQUEST FOR PUBLICATION",
    DocumentKind.EXAMINATION_REQUEST: "REQUEST/EXPRESS REQUEST FOR EXAMINATION OF APPLICATION FOR PATENT",
    DocumentKind.POWER_OF_ATTORNEY_SPECIFIC: "FORM FOR AUTHORISATION OF A PATENT AGENT/ OR ANY PERSON IN A MATTER OR PROCEEDING UNDER THE ACT",
    DocumentKind.POWER_OF_ATTORNEY_GENERAL: "FORM FOR AUTHORISATION OF A PATENT AGENT/ OR ANY PERSON IN A MATTER OR PROCEEDING UNDER THE ACT",
    DocumentKind.COVER_LETTER: "FILING COVER LETTER",
    DocumentKind.STATUS_REPORT: "GENERAL REPORTING",
}


def artifact_name(kind: DocumentKind, docket_no: str, ext: str = "docx") -> str:
    return f"{kind.form_name}_{(docket_no or '').strip() or 'Patent'}.{ext.lstrip('.')}"


@dataclass
class ViewModel:
    """Preformatted content of one document, ready for a renderer."""

    kind: DocumentKind
    template: str
    docket_no: str
    title: str
    fields: Dict[str, Any] = field(default_factory=dict)

    empty = False

    def artifact_name(self, ext: str = "docx") -> str:
        return artifact_name(self.kind, self.docket_no, ext)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "form_name": self.kind.form_name,
            "template": self.template,
            "docket_no": self.docket_no,
            "title": self.title,
            "artifact_name": self.artifact_name(),
            "fields": self.fields,
        }


@dataclass
class EmptyResult:
    kind: DocumentKind
    message: str = NO_RECORD_MESSAGE

    empty = True

    @property
    def title(self) -> str:
        return self.kind.heading

    def artifact_name(self, ext: str = "docx") -> str:
        return artifact_name(self.kind, "", ext)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "empty": True, "message": self.message}


DocumentResult = Union[ViewModel, EmptyResult]


# ----------------------------------------------------------------------------
# Shared phrasing
# ----------------------------------------------------------------------------

def citizen_phrase(country: str) -> str:
    return f"a citizen of {country}"


def nationality_phrase(category: Optional[ApplicantCategory], country: str) -> str:
    if category == ApplicantCategory.NATURAL_PERSON:
        return citizen_phrase(country)
    return f"a company organized and existing under the laws of {country}"


def applicant_nationality(record: ApplicationRecord, party: Optional[Party] = None) -> str:
    p = party or record.first_applicant
    return p.nationality or DEFAULT_NATIONALITY


def applicant_names(record: ApplicationRecord, sep: str = "; ", placeholder: str = BLANK) -> str:
    names = [a.name for a in record.applicants if a.name]
    return sep.join(names) or placeholder


def inventor_parties(record: ApplicationRecord) -> List[Party]:
    return list(record.applicants if record.inventors_same_as_applicant else record.inventors)


def party_row(party: Party, category: Optional[ApplicantCategory]) -> Dict[str, str]:
    return {
        "name": party.name,
        "nationality": nationality_phrase(category, party.nationality),
        "residence": party.residence_country or party.nationality,
        "address": party.address,
    }


def inventor_row(party: Party) -> Dict[str, str]:
    return {
        "name": party.name,
        "nationality": citizen_phrase(party.nationality) if party.nationality else "",
        "residence": party.residence_country or party.nationality,
        "address": party.address,
    }


def resolved_priorities(record: ApplicationRecord) -> List[Dict[str, str]]:
    first = record.first_applicant.name
    rows = []
    for p in record.priorities:
        rows.append({
            "country": p.country,
            "application_no": p.priority_no,
            "date": format_date_short(p.priority_date),
            "applicant_name": p.applicant_name or first,
            "title": p.title_in_priority or record.title,
        })
    return rows


def claimed_priorities(record: ApplicationRecord) -> List[Dict[str, str]]:
    if not record.claiming_priority:
        return []
    return resolved_priorities(record)


def office_upper(record: ApplicationRecord) -> str:
    return record.jurisdiction.upper_label


def office_title(record: ApplicationRecord) -> str:
    return record.jurisdiction.title_label


def new_view(kind: DocumentKind, record: ApplicationRecord, fields: Dict[str, Any]) -> ViewModel:
    return ViewModel(
        kind=kind,
        template=f"{kind.value}.v1",
        docket_no=record.docket_no,
        title=kind.heading,
        fields=fields,
    )
