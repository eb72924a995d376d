from __future__ import annotations

import io
import logging
from typing import Any, Dict, List, Optional

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from .firm_profile import FirmProfile, get_firm_profile
from .form_common import DocumentKind, DocumentResult, EmptyResult

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_ACT_LINES = ["THE PATENTS ACT, 1970", "(39 of 1970)", "and", "THE PATENTS RULES, 2003"]

# (form number, rule citation) for the statutory header block.
_STATUTORY = {
    DocumentKind.GRANT_REQUEST: ("FORM 1", "[See Section 7, 54 and 135 and sub-rule (1) of rule 20]"),
    DocumentKind.COMPLETE_SPECIFICATION: ("FORM 2", "(See section 10 and rule 13)"),
    DocumentKind.STATEMENT_AND_UNDERTAKING: ("FORM 3", "(See sub-rule (2) and (3) of Rule 12)"),
    DocumentKind.INVENTORSHIP_DECLARATION: ("FORM 5", "[See section 10 (6) and rule 13 (6)]"),
    DocumentKind.PUBLICATION_REQUEST: ("FORM 9", "[See section 11A (2); rule 24A]"),
    DocumentKind.EXAMINATION_REQUEST: ("FORM 18", "[See section 11B and rules 20 (4) (ii), 24B (1) (i)]"),
    DocumentKind.POWER_OF_ATTORNEY_SPECIFIC: ("FORM 26", "[See sections 127 and 132; and rule 135]"),
    DocumentKind.POWER_OF_ATTORNEY_GENERAL: ("FORM 26", "[See sections 127 and 132; and rule 135]"),
}

_POWER_OF_ATTORNEY = (DocumentKind.POWER_OF_ATTORNEY_SPECIFIC, DocumentKind.POWER_OF_ATTORNEY_GENERAL)

# Laid out explicitly rather than by the generic field walk.
_RESERVED = {"office", "dated", "grantor_clause", "authority_scope", "include_agent_roster"}

_LABELS = {
    "pct": "PCT particulars",
    "pct_application_no": "PCT application no.",
    "internal_ref": "Our ref",
    "client_ref": "Your ref",
    "re_line": "RE",
}


def _para(
    doc: Document,
    text: str = "",
    bold: bool = False,
    size_pt: int = 11,
    italic: bool = False,
    align=None,
) -> None:
    p = doc.add_paragraph()
    p.paragraph_format.space_after = Pt(4)
    if align is not None:
        p.paragraph_format.alignment = align
    if text:
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size_pt)


def _labelled(doc: Document, label: str, text: str) -> None:
    p = doc.add_paragraph()
    p.paragraph_format.space_after = Pt(4)
    head = p.add_run(f"{label}: ")
    head.bold = True
    head.font.size = Pt(11)
    body = p.add_run(text)
    body.font.size = Pt(11)


def _heading(doc: Document, text: str) -> None:
    p = doc.add_paragraph()
    p.paragraph_format.space_before = Pt(10)
    p.paragraph_format.space_after = Pt(4)
    r = p.add_run(text)
    r.bold = True
    r.font.size = Pt(11)


def _placeholder(doc: Document, text: str) -> None:
    p = doc.add_paragraph()
    p.paragraph_format.space_after = Pt(4)
    r = p.add_run(text)
    r.italic = True
    r.font.size = Pt(11)


def _gap(doc: Document, pts: int = 6) -> None:
    doc.add_paragraph().paragraph_format.space_after = Pt(pts)


def _label(key: str) -> str:
    if key in _LABELS:
        return _LABELS[key]
    return key.replace("_", " ").capitalize()


def _table(doc: Document, rows: List[Dict[str, Any]]) -> None:
    columns: List[str] = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    table = doc.add_table(rows=1, cols=len(columns))
    table.style = "Table Grid"
    for cell, key in zip(table.rows[0].cells, columns):
        cell.text = _label(key)
        if cell.paragraphs and cell.paragraphs[0].runs:
            cell.paragraphs[0].runs[0].bold = True
    for row in rows:
        cells = table.add_row().cells
        for cell, key in zip(cells, columns):
            cell.text = str(row.get(key, ""))


def _ticks(doc: Document, label: str, flags: Dict[str, bool]) -> None:
    marks = "   ".join(f"[{'X' if on else ' '}] {_label(k)}" for k, on in flags.items())
    _labelled(doc, label, marks)


def _render_field(doc: Document, key: str, value: Any) -> None:
    if key.startswith("include_") or isinstance(value, bool):
        return
    if isinstance(value, str):
        if value:
            _labelled(doc, _label(key), value)
        return
    if isinstance(value, dict):
        if value and all(isinstance(v, bool) for v in value.values()):
            _ticks(doc, _label(key), value)
            return
        _heading(doc, _label(key).upper())
        for k, v in value.items():
            _render_field(doc, k, v)
        return
    if isinstance(value, list):
        if not value:
            return
        _heading(doc, _label(key).upper())
        if all(isinstance(v, dict) for v in value):
            _table(doc, value)
        else:
            for item in value:
                _para(doc, str(item))
        return
    _labelled(doc, _label(key), str(value))


def _statutory_header(doc: Document, kind: DocumentKind, heading: str) -> None:
    number, citation = _STATUTORY[kind]
    _para(doc, number, bold=True, size_pt=14, align=WD_ALIGN_PARAGRAPH.CENTER)
    for line in _ACT_LINES:
        _para(doc, line, align=WD_ALIGN_PARAGRAPH.CENTER)
    _para(doc, heading, bold=True, align=WD_ALIGN_PARAGRAPH.CENTER)
    _para(doc, citation, align=WD_ALIGN_PARAGRAPH.CENTER)
    _gap(doc, 8)


def _letterhead(doc: Document, firm: FirmProfile) -> None:
    _para(doc, firm.firm_short_name, bold=True, size_pt=16)
    _para(doc, firm.firm_name)
    for line in firm.address_lines:
        _para(doc, line, size_pt=9)
    _para(doc, f"{firm.city} – {firm.pin_code}, {firm.country}", size_pt=9)
    _para(doc, f"Tel: {firm.phone} | Fax: {firm.fax}", size_pt=9)
    _para(doc, f"Email: {firm.email} | Web: {firm.website}", size_pt=9)
    _gap(doc, 8)


def _signature(doc: Document, firm: FirmProfile, firm_label: str = "") -> None:
    _gap(doc, 6)
    _para(doc, "Signature: _______________________")
    for i, line in enumerate(firm.signature_lines(firm_label)):
        _para(doc, line, bold=(i == 0 or i == 3))


def _addressee(doc: Document, office: str) -> None:
    _gap(doc, 6)
    for line in ["To,", "The Controller of Patents,", "The Patent Office,", f"At {office}"]:
        _para(doc, line)


def _authorisation(doc: Document, fields: Dict[str, Any], firm: FirmProfile) -> None:
    roster = firm.agent_roster if fields.get("include_agent_roster") else firm.agent_name_upper
    _para(
        doc,
        f"{fields.get('grantor_clause', '')} hereby authorize and appoint {roster}, agents and advocates of "
        f"{firm.firm_short_name}, of {firm.postal_address}, {fields.get('authority_scope', '')}, and we "
        "request that all notices, requisitions and communications relating to the matters identified "
        f"herein be sent to such agents/advocates at {firm.postal_address}.",
    )


def _service_address(doc: Document, firm: FirmProfile) -> None:
    _heading(doc, "ADDRESS FOR SERVICE")
    _para(doc, firm.firm_name)
    for line in firm.address_lines:
        _para(doc, line)
    _para(doc, f"{firm.city} – {firm.pin_code}, {firm.country}")
    _para(doc, f"Telephone No.: {firm.phone}   Mobile No.: {firm.mobile}   E-mail: {firm.email}")


def _professional_fees(doc: Document, firm: FirmProfile) -> None:
    _heading(doc, "PROFESSIONAL FEES")
    _para(doc, f"Filing a Request for Examination: USD {firm.rfe_fee_usd} (inclusive of professional, "
               "official, disbursement and applicable taxes).")
    _para(doc, f"Filing a FORM 3 or FORM 26: USD {firm.misc_fee_usd}.")
    _para(doc, f"Extension of the FORM 3 deadline: USD {firm.extension_fee_usd} per month.")


def _render_office_form(doc: Document, view, firm: FirmProfile) -> None:
    fields = view.fields
    kind = view.kind
    _statutory_header(doc, kind, view.title)
    if kind in _POWER_OF_ATTORNEY:
        _authorisation(doc, fields, firm)
    for key, value in fields.items():
        if key not in _RESERVED:
            _render_field(doc, key, value)
    if kind is DocumentKind.EXAMINATION_REQUEST:
        _service_address(doc, firm)
    if fields.get("dated"):
        _gap(doc, 6)
        _para(doc, fields["dated"], bold=True)
    if kind is not DocumentKind.COMPLETE_SPECIFICATION:
        _signature(doc, firm)
    if fields.get("office"):
        _addressee(doc, fields["office"])


def _render_correspondence(doc: Document, view, firm: FirmProfile) -> None:
    _letterhead(doc, firm)
    _heading(doc, view.title)
    for key, value in view.fields.items():
        _render_field(doc, key, value)
    if view.kind is DocumentKind.STATUS_REPORT:
        _professional_fees(doc, firm)
        _gap(doc, 6)
        _para(doc, firm.agent_name)
        _para(doc, f"of {firm.firm_short_name}")
    else:
        _signature(doc, firm, firm.firm_short_name)


def render_docx(view: DocumentResult, firm: Optional[FirmProfile] = None) -> Document:
    """Lay a built document out as a draft Word file."""
    firm = firm or get_firm_profile()
    doc = Document()
    doc.styles["Normal"].font.name = "Times New Roman"
    doc.styles["Normal"].font.size = Pt(11)

    if isinstance(view, EmptyResult):
        _placeholder(doc, view.message)
        return doc

    if view.kind.is_correspondence:
        _render_correspondence(doc, view, firm)
    else:
        _render_office_form(doc, view, firm)
    logger.debug("Rendered %s with %d paragraphs", view.artifact_name(), len(doc.paragraphs))
    return doc


def render_docx_bytes(view: DocumentResult, firm: Optional[FirmProfile] = None) -> io.BytesIO:
    bio = io.BytesIO()
    render_docx(view, firm).save(bio)
    bio.seek(0)
    return bio
