from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Optional

from .correspondence import cover_letter, status_report
from .fee_schedule import FeeBreakdown, fees_for_record
from .form_common import DocumentKind, DocumentResult
from .forms_filing import (
    complete_specification,
    grant_request,
    inventorship_declaration,
    statement_and_undertaking,
)
from .forms_requests import (
    examination_request,
    power_of_attorney_general,
    power_of_attorney_specific,
    publication_request,
)
from .record import ApplicationRecord

logger = logging.getLogger(__name__)

Transformer = Callable[[Optional[ApplicationRecord], FeeBreakdown], DocumentResult]

TRANSFORMERS: Dict[DocumentKind, Transformer] = {
    DocumentKind.GRANT_REQUEST: grant_request,
    DocumentKind.COMPLETE_SPECIFICATION: complete_specification,
    DocumentKind.STATEMENT_AND_UNDERTAKING: statement_and_undertaking,
    DocumentKind.INVENTORSHIP_DECLARATION: inventorship_declaration,
    DocumentKind.PUBLICATION_REQUEST: publication_request,
    DocumentKind.EXAMINATION_REQUEST: examination_request,
    DocumentKind.POWER_OF_ATTORNEY_SPECIFIC: power_of_attorney_specific,
    DocumentKind.POWER_OF_ATTORNEY_GENERAL: power_of_attorney_general,
    DocumentKind.COVER_LETTER: cover_letter,
    DocumentKind.STATUS_REPORT: status_report,
}


def _fees(record: Optional[ApplicationRecord]) -> FeeBreakdown:
    if record is None:
        return FeeBreakdown()
    return record.fee_breakdown


def build_view_model(
    kind,
    record: Optional[ApplicationRecord],
    fees: Optional[FeeBreakdown] = None,
) -> DocumentResult:
    kind = DocumentKind.parse(kind)
    if fees is None:
        fees = _fees(record)
    result = TRANSFORMERS[kind](record, fees)
    logger.debug("Built %s for %s (empty=%s)", kind.value, getattr(record, "docket_no", None), result.empty)
    return result


def build_packet(
    record: Optional[ApplicationRecord],
    kinds: Optional[Iterable] = None,
) -> Dict[DocumentKind, DocumentResult]:
    """Build several documents from one fee computation so their figures agree."""
    selected = [DocumentKind.parse(k) for k in kinds] if kinds else list(DocumentKind)
    fees = fees_for_record(record) if record is not None else FeeBreakdown()
    return {kind: TRANSFORMERS[kind](record, fees) for kind in selected}
