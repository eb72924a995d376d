from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional

from .enums import ApplicantCategory, ApplicationType, Jurisdiction
from .fee_schedule import FeeBreakdown, fees_for_record, sum_of_pages
from .text_format import parse_date

logger = logging.getLogger(__name__)

FEE_INPUT_FIELDS = frozenset({
    "applicant_category",
    "total_pages",
    "number_of_claims",
    "number_of_priorities",
    "request_examination",
    "sequence_pages",
})

COUNT_FIELDS = (
    "description_pages",
    "claim_pages",
    "drawing_pages",
    "abstract_pages",
    "form2_pages",
    "number_of_drawings",
    "number_of_claims",
    "number_of_priorities",
    "total_pages",
    "sequence_pages",
)

EXTENSION_FIELDS = frozenset({
    "pct_app_no",
    "publication_date",
    "client_ref",
    "internal_ref",
    "priority_date",
})

# Store field name -> record field name.
_STORE_ALIASES = {
    "DOC_NO": "docket_no",
    "inter_appli_no": "international_application_no",
    "inter_filing_date": "international_filing_date",
    "descrip_of_page": "description_pages",
    "claims_page": "claim_pages",
    "drawing_page": "drawing_pages",
    "abstract_page": "abstract_pages",
    "form_2_page": "form2_pages",
    "number_of_drawing": "number_of_drawings",
    "sequence_page": "sequence_pages",
}

# Derived store columns that must never be read back as inputs.
_DERIVED_STORE_FIELDS = frozenset({
    "sum_number_of_page", "basic_fee", "no_of_extra_page", "extra_page_charge",
    "no_of_extra_claims", "extra_claims_charge", "no_of_extra_priorities",
    "extra_priorities_charge", "examination_charge", "sequence_charge",
    "deposit_fee", "fee_breakdown", "sum_of_pages",
})

_TRUE_FLAGS = {"yes", "y", "true", "1", "on"}

_ENUM_FIELDS = {
    "jurisdiction": Jurisdiction.parse,
    "application_type": ApplicationType.parse,
    "applicant_category": ApplicantCategory.parse,
}


@dataclass
class Party:
    name: str = ""
    nationality: str = ""
    residence_country: str = ""
    address: str = ""


@dataclass
class PriorityClaim:
    country: str = ""
    priority_no: str = ""
    priority_date: Optional[datetime.date] = None
    applicant_name: str = ""
    title_in_priority: str = ""


ENTRY_TYPES = {
    "applicants": Party,
    "inventors": Party,
    "priorities": PriorityClaim,
}


@dataclass
class ApplicationRecord:
    """Canonical application record supplied by the store.

    ``fee_breakdown`` is derived: assigning any field in FEE_INPUT_FIELDS
    recomputes it immediately, so readers never see a stale total.
    """

    docket_no: str = ""
    jurisdiction: Jurisdiction = Jurisdiction.NEW_DELHI
    application_type: ApplicationType = ApplicationType.ORDINARY
    applicant_category: Optional[ApplicantCategory] = None
    title: str = ""
    international_application_no: str = ""
    international_filing_date: Optional[datetime.date] = None
    applicants: List[Party] = field(default_factory=lambda: [Party()])
    inventors_same_as_applicant: bool = False
    inventors: List[Party] = field(default_factory=lambda: [Party()])
    claiming_priority: bool = False
    priorities: List[PriorityClaim] = field(default_factory=lambda: [PriorityClaim()])
    description_pages: int = 0
    claim_pages: int = 0
    drawing_pages: int = 0
    abstract_pages: int = 0
    form2_pages: int = 0
    number_of_drawings: int = 0
    number_of_claims: int = 0
    number_of_priorities: int = 0
    total_pages: int = 0
    request_examination: bool = False
    sequence_listing: bool = False
    sequence_pages: int = 0
    deposit_date: Optional[datetime.date] = None
    extensions: Dict[str, str] = field(default_factory=dict)
    fee_breakdown: FeeBreakdown = field(init=False, repr=False, compare=False, default=FeeBreakdown())

    def __post_init__(self) -> None:
        self._refresh_fees()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "fee_breakdown" and "fee_breakdown" in self.__dict__:
            raise AttributeError("fee_breakdown is derived from the record and cannot be assigned")
        if name in _ENUM_FIELDS:
            value = _ENUM_FIELDS[name](value)
        object.__setattr__(self, name, value)
        if name in FEE_INPUT_FIELDS and "fee_breakdown" in self.__dict__:
            self._refresh_fees()

    def _refresh_fees(self) -> None:
        object.__setattr__(self, "fee_breakdown", fees_for_record(self))

    @property
    def sum_of_pages(self) -> int:
        return sum_of_pages(self)

    @property
    def is_pct(self) -> bool:
        return self.application_type is ApplicationType.PCT_NATIONAL_PHASE

    @property
    def is_convention(self) -> bool:
        return self.application_type is ApplicationType.CONVENTION

    @property
    def is_natural_person(self) -> bool:
        return self.applicant_category is ApplicantCategory.NATURAL_PERSON

    @property
    def first_applicant(self) -> Party:
        return self.applicants[0] if self.applicants else Party()

    def extension(self, key: str) -> str:
        return str(self.extensions.get(key, "") or "").strip()


def new_record(docket_no: str = "") -> ApplicationRecord:
    return ApplicationRecord(docket_no=(docket_no or "").strip())


# ----------------------------------------------------------------------------
# Repeated-entity lists
# ----------------------------------------------------------------------------

def _entries(record: ApplicationRecord, kind: str) -> list:
    if kind not in ENTRY_TYPES:
        raise ValueError(f"Unknown list '{kind}'; expected one of {sorted(ENTRY_TYPES)}")
    return getattr(record, kind)


def add_entry(record: ApplicationRecord, kind: str):
    entries = _entries(record, kind)
    entry = ENTRY_TYPES[kind]()
    entries.append(entry)
    return entry


def remove_entry(record: ApplicationRecord, kind: str, index: int) -> bool:
    entries = _entries(record, kind)
    if len(entries) <= 1:
        logger.debug("Refusing to remove the last entry of %s on %s", kind, record.docket_no)
        return False
    if not -len(entries) <= index < len(entries):
        raise IndexError(f"{kind} index {index} out of range")
    del entries[index]
    return True


def update_entry(record: ApplicationRecord, kind: str, index: int, field_name: str, value: Any) -> None:
    entries = _entries(record, kind)
    entry = entries[index]
    allowed = {f.name for f in fields(entry)}
    if field_name not in allowed:
        raise ValueError(f"{kind} entries have no field '{field_name}'")
    if field_name == "priority_date":
        value = parse_date(value)
    else:
        value = _text(value)
    setattr(entry, field_name, value)


# ----------------------------------------------------------------------------
# Store boundary
# ----------------------------------------------------------------------------

def coerce_count(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        n = int(float(str(value).strip()))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Non-numeric count %r coerced to 0", value)
        return 0
    return n if n > 0 else 0


def coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in _TRUE_FLAGS


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _party(raw: Any) -> Party:
    if not isinstance(raw, Mapping):
        return Party()
    return Party(
        name=_text(raw.get("name")),
        nationality=_text(raw.get("nationality") or raw.get("citizen_country")),
        residence_country=_text(raw.get("residence_country")),
        address=_text(raw.get("address")),
    )


def _priority(raw: Any) -> PriorityClaim:
    if not isinstance(raw, Mapping):
        return PriorityClaim()
    return PriorityClaim(
        country=_text(raw.get("country")),
        priority_no=_text(raw.get("priority_no")),
        priority_date=_date(raw.get("priority_date"), "priority_date"),
        applicant_name=_text(raw.get("applicant_name")),
        title_in_priority=_text(raw.get("title_in_priority")),
    )


def _date(value: Any, name: str) -> Optional[datetime.date]:
    parsed = parse_date(value)
    if parsed is None and _text(value):
        logger.debug("Unparsable %s %r dropped", name, value)
    return parsed


def _list(raw: Any, build, template):
    rows = [build(r) for r in raw] if isinstance(raw, (list, tuple)) else []
    return rows or [template()]


def _normalize_keys(raw: Mapping) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    for key, value in raw.items():
        if key in _DERIVED_STORE_FIELDS:
            continue
        data[_STORE_ALIASES.get(key, key)] = value
    return data


def record_from_dict(raw: Optional[Mapping]) -> Optional[ApplicationRecord]:
    """Build a sanitized record from a store document.

    Accepts the store's column names as well as the record's own field
    names. Counts that are not numbers become 0, unparsable dates become
    None, and empty repeated lists get one blank entry. Returns None when
    there is no record at all or the payload is not a mapping.
    """
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        logger.debug("Ignoring non-mapping record payload of type %s", type(raw).__name__)
        return None
    data = _normalize_keys(raw)

    extensions: Dict[str, str] = {}
    raw_ext = data.get("extensions")
    candidates = dict(raw_ext) if isinstance(raw_ext, Mapping) else {}
    for key in EXTENSION_FIELDS:
        if key in data and key not in candidates:
            candidates[key] = data[key]
    for key, value in candidates.items():
        if key not in EXTENSION_FIELDS:
            logger.debug("Dropping unknown extension field %r", key)
            continue
        text = _text(value)
        if text:
            extensions[key] = text

    counts = {name: coerce_count(data.get(name)) for name in COUNT_FIELDS}
    return ApplicationRecord(
        docket_no=_text(data.get("docket_no")),
        jurisdiction=Jurisdiction.parse(data.get("jurisdiction")),
        application_type=ApplicationType.parse(data.get("application_type")),
        applicant_category=ApplicantCategory.parse(data.get("applicant_category")),
        title=_text(data.get("title")),
        international_application_no=_text(data.get("international_application_no")),
        international_filing_date=_date(data.get("international_filing_date"), "international_filing_date"),
        applicants=_list(data.get("applicants"), _party, Party),
        inventors_same_as_applicant=coerce_flag(data.get("inventors_same_as_applicant")),
        inventors=_list(data.get("inventors"), _party, Party),
        claiming_priority=coerce_flag(data.get("claiming_priority")),
        priorities=_list(data.get("priorities"), _priority, PriorityClaim),
        request_examination=coerce_flag(data.get("request_examination")),
        sequence_listing=coerce_flag(data.get("sequence_listing")),
        deposit_date=_date(data.get("deposit_date"), "deposit_date"),
        extensions=extensions,
        **counts,
    )


def _iso(value: Optional[datetime.date]) -> str:
    return value.isoformat() if value else ""


def record_to_dict(record: ApplicationRecord) -> Dict[str, Any]:
    return {
        "docket_no": record.docket_no,
        "jurisdiction": record.jurisdiction.value,
        "application_type": record.application_type.value,
        "applicant_category": record.applicant_category.value if record.applicant_category else "",
        "title": record.title,
        "international_application_no": record.international_application_no,
        "international_filing_date": _iso(record.international_filing_date),
        "applicants": [vars(p).copy() for p in record.applicants],
        "inventors_same_as_applicant": record.inventors_same_as_applicant,
        "inventors": [vars(p).copy() for p in record.inventors],
        "claiming_priority": record.claiming_priority,
        "priorities": [
            {**vars(p), "priority_date": _iso(p.priority_date)} for p in record.priorities
        ],
        **{name: getattr(record, name) for name in COUNT_FIELDS},
        "request_examination": record.request_examination,
        "sequence_listing": record.sequence_listing,
        "deposit_date": _iso(record.deposit_date),
        "extensions": dict(record.extensions),
        "sum_of_pages": record.sum_of_pages,
        "fee_breakdown": record.fee_breakdown.to_dict(),
    }
