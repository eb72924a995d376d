import datetime

import requests
import streamlit as st

from patent_forms.core.viewer import DocumentViewer

st.set_page_config(page_title="Patent Filing Forms", page_icon="DOC", layout="wide")

BACKEND = st.sidebar.text_input("Backend URL", "http://127.0.0.1:8000")

st.title("Patent Filing Forms")
st.caption("Enter the application once; fees and all filing documents are derived from it.")

JURISDICTIONS = ["New Delhi", "Mumbai", "Kolkata", "Chennai"]
APPLICATION_TYPES = ["ORDINARY", "CONVENTION", "PCT-NATIONAL-PHASE"]
CATEGORIES = ["Natural", "Small", "Start", "education", "Other"]

for key in ("applicants", "inventors", "priorities"):
    if f"{key}_count" not in st.session_state:
        st.session_state[f"{key}_count"] = 1
if "viewer" not in st.session_state:
    st.session_state.viewer = DocumentViewer()
viewer: DocumentViewer = st.session_state.viewer


def _error_message(resp: requests.Response) -> str:
    try:
        payload = resp.json()
        if isinstance(payload, dict):
            detail = payload.get("detail", "")
            if isinstance(detail, str) and detail.strip():
                return detail.strip()
    except ValueError:
        pass
    text = (resp.text or "").strip()
    return text or f"Request failed with status {resp.status_code}"


def _iso(value) -> str:
    return value.isoformat() if isinstance(value, datetime.date) else ""


def _rows(kind: str, label: str, fields):
    """Repeated entries with add/remove; the last entry can never be removed."""
    st.markdown(f"#### {label}")
    count = st.session_state[f"{kind}_count"]
    rows = []
    for idx in range(count):
        cols = st.columns(len(fields))
        row = {}
        for col, (name, title) in zip(cols, fields):
            with col:
                if name.endswith("_date"):
                    row[name] = _iso(st.date_input(f"{title} #{idx + 1}", value=None, key=f"{kind}_{idx}_{name}"))
                else:
                    row[name] = st.text_input(f"{title} #{idx + 1}", key=f"{kind}_{idx}_{name}").strip()
        rows.append(row)

    add_col, remove_col = st.columns(2)
    with add_col:
        if st.button(f"+ Add {label[:-1]}", key=f"add_{kind}", use_container_width=True):
            st.session_state[f"{kind}_count"] += 1
            st.rerun()
    with remove_col:
        if st.button("- Remove last", key=f"remove_{kind}", disabled=count <= 1, use_container_width=True):
            st.session_state[f"{kind}_count"] -= 1
            st.rerun()
    return rows


col_left, col_right = st.columns(2)

with col_left:
    st.markdown("### 1) Application")
    docket = st.text_input("Docket No.")
    title = st.text_input("Title of the invention")
    jurisdiction = st.selectbox("Patent office", JURISDICTIONS)
    application_type = st.selectbox("Application type", APPLICATION_TYPES)
    category = st.selectbox("Applicant category", CATEGORIES)
    deposit_date = st.date_input("Filing (deposit) date", value=None)

    applicants = _rows("applicants", "Applicants", [
        ("name", "Name"), ("nationality", "Nationality"),
        ("residence_country", "Residence"), ("address", "Address"),
    ])
    same = st.checkbox("Inventors same as applicants")
    inventors = []
    if not same:
        inventors = _rows("inventors", "Inventors", [
            ("name", "Name"), ("citizen_country", "Citizenship"),
            ("residence_country", "Residence"), ("address", "Address"),
        ])

    claiming_priority = st.checkbox("Claiming priority")
    priorities = []
    if claiming_priority:
        priorities = _rows("priorities", "Priorities", [
            ("country", "Country"), ("priority_no", "Number"), ("priority_date", "Date"),
            ("applicant_name", "Applicant"), ("title_in_priority", "Title"),
        ])

    inter_appli_no = inter_filing_date = ""
    pct_app_no = ""
    if application_type == "PCT-NATIONAL-PHASE":
        inter_appli_no = st.text_input("International application no.")
        inter_filing_date = _iso(st.date_input("International filing date", value=None))
        pct_app_no = st.text_input("PCT application no. (for correspondence)", value=inter_appli_no)

with col_right:
    st.markdown("### 2) Pages and claims")
    c1, c2, c3 = st.columns(3)
    with c1:
        descrip_of_page = st.number_input("Description pages", min_value=0, step=1)
        claims_page = st.number_input("Claim pages", min_value=0, step=1)
        drawing_page = st.number_input("Drawing pages", min_value=0, step=1)
    with c2:
        abstract_page = st.number_input("Abstract pages", min_value=0, step=1, value=1)
        form_2_page = st.number_input("Form 2 pages", min_value=0, step=1, value=1)
        number_of_drawing = st.number_input("No. of drawings", min_value=0, step=1)
    with c3:
        total_pages = st.number_input("Total pages", min_value=0, step=1)
        number_of_claims = st.number_input("No. of claims", min_value=0, step=1)
        number_of_priorities = st.number_input("No. of priorities", min_value=0, step=1)

    request_examination = st.checkbox("Request examination (Form 18)")
    sequence_listing = st.checkbox("Sequence listing")
    sequence_page = st.number_input("Sequence pages", min_value=0, step=1) if sequence_listing else 0

    st.markdown("### 3) Correspondence")
    client_ref = st.text_input("Client reference")
    internal_ref = st.text_input("Internal reference (defaults to docket)")
    publication_date = st.text_input("Publication date under Section 11A (as published)")

record = {
    "DOC_NO": docket,
    "title": title,
    "jurisdiction": jurisdiction,
    "application_type": application_type,
    "applicant_category": category,
    "deposit_date": _iso(deposit_date),
    "applicants": applicants,
    "inventors_same_as_applicant": "yes" if same else "no",
    "inventors": inventors,
    "claiming_priority": "yes" if claiming_priority else "no",
    "priorities": priorities,
    "inter_appli_no": inter_appli_no,
    "inter_filing_date": inter_filing_date,
    "descrip_of_page": descrip_of_page,
    "claims_page": claims_page,
    "drawing_page": drawing_page,
    "abstract_page": abstract_page,
    "form_2_page": form_2_page,
    "number_of_drawing": number_of_drawing,
    "total_pages": total_pages,
    "number_of_claims": number_of_claims,
    "number_of_priorities": number_of_priorities,
    "request_examination": "yes" if request_examination else "no",
    "sequence_listing": "yes" if sequence_listing else "no",
    "sequence_page": sequence_page,
    "extensions": {
        "pct_app_no": pct_app_no,
        "client_ref": client_ref,
        "internal_ref": internal_ref,
        "publication_date": publication_date,
    },
}

with col_right:
    st.markdown("### 4) Official fee")
    try:
        r = requests.post(f"{BACKEND}/api/fees", json=record, timeout=10)
    except requests.RequestException as exc:
        st.warning(f"Backend not reachable: {exc}")
    else:
        if r.status_code != 200:
            st.error(_error_message(r))
        else:
            payload = r.json()
            fees = payload["fees"]
            st.metric("Total fee (INR)", f"{fees['total_fee']:,}")
            st.caption(
                f"Sum of pages entered: {payload['sum_of_pages']} | Total pages: {payload['total_pages']}"
            )
            st.json(fees, expanded=False)

st.divider()
st.markdown("### 5) Documents")

try:
    kinds = requests.get(f"{BACKEND}/api/documents", timeout=10).json()
except requests.RequestException:
    kinds = []

button_cols = st.columns(5)
for i, item in enumerate(kinds):
    with button_cols[i % 5]:
        if st.button(item["form_name"], key=f"open_{item['kind']}", use_container_width=True):
            viewer.open(item["kind"])

if viewer.is_open:
    kind = viewer.current.value
    head, close = st.columns([5, 1])
    with head:
        st.markdown(f"#### Preview - {viewer.current.form_name} {docket}")
    with close:
        if st.button("Close", key="close_viewer"):
            viewer.close()
            st.rerun()

    r = requests.post(f"{BACKEND}/api/documents/{kind}", json={"record": record})
    if r.status_code != 200:
        st.error(_error_message(r))
    else:
        view = r.json()
        if view.get("empty"):
            st.info(view["message"])
        else:
            st.json(view["fields"])
            d = requests.post(f"{BACKEND}/api/documents/{kind}/docx", json={"record": record})
            if d.status_code != 200:
                st.error(_error_message(d))
            else:
                st.download_button(
                    "Download DOCX",
                    data=d.content,
                    file_name=view["artifact_name"],
                    mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                )
