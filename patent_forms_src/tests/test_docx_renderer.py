"""
Draft DOCX rendering
"""
import pytest

from patent_forms.core.docx_renderer import render_docx, render_docx_bytes
from patent_forms.core.form_common import DocumentKind, EmptyResult
from patent_forms.core.transform import build_view_model


def _text(doc) -> str:
    parts = [p.text for p in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            parts.extend(cell.text for cell in row.cells)
    return "\n".join(parts)


def test_empty_result_renders_placeholder(firm):
    doc = render_docx(EmptyResult(DocumentKind.PUBLICATION_REQUEST), firm)
    texts = [p.text for p in doc.paragraphs if p.text]
    assert texts == ["No application data available."]
    assert not doc.tables


def test_times_new_roman(record, firm):
    doc = render_docx(build_view_model(DocumentKind.GRANT_REQUEST, record), firm)
    assert doc.styles["Normal"].font.name == "Times New Roman"


def test_form1_layout(record, firm):
    doc = render_docx(build_view_model(DocumentKind.GRANT_REQUEST, record), firm)
    text = _text(doc)
    assert "FORM 1" in text
    assert "APPLICATION FOR GRANT OF PATENT" in text
    assert "Deposit of Total fee INR 54400/-" in text
    assert "TEST AGENT" in text
    assert "At MUMBAI" in text
    assert "Thermal Dynamics GmbH" in text
    assert len(doc.tables) >= 2


def test_include_flags_are_not_printed(record, firm):
    text = _text(render_docx(build_view_model(DocumentKind.GRANT_REQUEST, record), firm))
    assert "Include" not in text


def test_power_of_attorney_uses_firm(record, firm):
    text = _text(render_docx(build_view_model(DocumentKind.POWER_OF_ATTORNEY_GENERAL, record), firm))
    assert "agents and advocates of testIP" in text
    assert "At Mumbai" in text


def test_status_report_professional_fees(record, firm):
    text = _text(render_docx(build_view_model(DocumentKind.STATUS_REPORT, record), firm))
    assert "USD 350" in text
    assert "testIP" in text
    assert "INR 54,400" in text


@pytest.mark.parametrize("kind", list(DocumentKind))
def test_every_kind_renders(kind, record, firm):
    bio = render_docx_bytes(build_view_model(kind, record), firm)
    assert bio.getvalue()[:2] == b"PK"
