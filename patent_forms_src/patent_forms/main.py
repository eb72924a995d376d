from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from patent_forms.core.docx_renderer import DOCX_MEDIA_TYPE, render_docx_bytes
from patent_forms.core.firm_profile import get_firm_profile, settings
from patent_forms.core.form_common import DocumentKind
from patent_forms.core.record import ApplicationRecord, record_from_dict
from patent_forms.core.transform import build_packet, build_view_model

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins_list, allow_credentials=True,
                   allow_methods=["*"], allow_headers=["*"])


class DocumentRequest(BaseModel):
    record: Optional[Any] = None


class PacketRequest(BaseModel):
    record: Optional[Any] = None
    kinds: Optional[List[str]] = None


def _kind_or_404(raw: str) -> DocumentKind:
    try:
        return DocumentKind.parse(raw)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown document kind '{raw}'.")


def _record_or_422(raw: Any) -> Optional[ApplicationRecord]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise HTTPException(status_code=422, detail="record must be a JSON object.")
    return record_from_dict(raw)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/documents")
def list_documents():
    return [{"kind": k.value, "form_name": k.form_name, "title": k.heading} for k in DocumentKind]


@app.post("/api/fees")
def compute_fees(record: Any = Body(...)):
    rec = _record_or_422(record)
    if rec is None:
        raise HTTPException(status_code=422, detail="record must be a JSON object.")
    return {
        "fees": rec.fee_breakdown.to_dict(),
        "sum_of_pages": rec.sum_of_pages,
        "total_pages": rec.total_pages,
    }


@app.post("/api/documents/{kind}")
def build_document(kind: str, body: DocumentRequest):
    doc_kind = _kind_or_404(kind)
    record = _record_or_422(body.record)
    result = build_view_model(doc_kind, record)
    logger.info("Built %s for docket %s", doc_kind.value, record.docket_no if record else "-")
    return result.to_dict()


@app.post("/api/documents/{kind}/docx")
def download_document(kind: str, body: DocumentRequest):
    doc_kind = _kind_or_404(kind)
    record = _record_or_422(body.record)
    result = build_view_model(doc_kind, record)
    bio = render_docx_bytes(result, get_firm_profile())
    filename = result.artifact_name("docx")
    logger.info("Rendered %s", filename)
    return StreamingResponse(bio,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'})


@app.post("/api/packet")
def build_document_packet(body: PacketRequest):
    kinds = [_kind_or_404(k) for k in body.kinds] if body.kinds else None
    record = _record_or_422(body.record)
    documents = build_packet(record, kinds)
    fees = record.fee_breakdown.to_dict() if record else None
    return {
        "fees": fees,
        "documents": {k.value: r.to_dict() for k, r in documents.items()},
    }
