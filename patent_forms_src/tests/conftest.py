"""
Pytest configuration and shared fixtures for the patent forms tests.
"""
import pytest
from fastapi.testclient import TestClient

from patent_forms.core.firm_profile import FirmProfile
from patent_forms.core.record import record_from_dict
from patent_forms.main import app


@pytest.fixture
def client():
    """Return a TestClient for the FastAPI app so tests run without a server."""
    return TestClient(app)


@pytest.fixture
def store_record():
    """A convention application as the store keeps it (store column names, string flags)."""
    return {
        "DOC_NO": "  ANV-2024-017  ",
        "jurisdiction": "Mumbai",
        "application_type": "CONVENTION",
        "applicant_category": "Other",
        "title": "Heat Exchanger With Helical Baffles",
        "applicants": [
            {
                "name": "Thermal Dynamics GmbH",
                "nationality": "GERMANY",
                "residence_country": "",
                "address": "Industriestrasse 4, Munich",
            },
            {
                "name": "Acme Cooling Ltd",
                "nationality": "UNITED KINGDOM",
                "residence_country": "UNITED KINGDOM",
                "address": "1 High Street, Leeds",
            },
        ],
        "inventors_same_as_applicant": "no",
        "inventors": [
            {"name": "Anna Weber", "citizen_country": "GERMANY", "residence_country": "", "address": "Munich"},
            {"name": "  ", "citizen_country": "", "residence_country": "", "address": ""},
        ],
        "claiming_priority": "yes",
        "priorities": [
            {
                "country": "GERMANY",
                "priority_no": "DE102023000123",
                "priority_date": "2023-09-14",
                "applicant_name": "",
                "title_in_priority": "",
            },
            {
                "country": "EP",
                "priority_no": "EP23190001",
                "priority_date": "2023-08-01",
                "applicant_name": "Acme Cooling Ltd",
                "title_in_priority": "Helical baffle",
            },
        ],
        "descrip_of_page": "30",
        "claims_page": 5,
        "drawing_page": 6,
        "abstract_page": 1,
        "form_2_page": 1,
        "number_of_drawing": 8,
        "number_of_claims": 14,
        "number_of_priorities": 2,
        "total_pages": 45,
        "request_examination": "yes",
        "sequence_listing": "no",
        "sequence_page": 0,
        "deposit_date": "2024-03-05",
        "deposit_fee": 99999,
        "client_ref": "TD-881",
    }


@pytest.fixture
def record(store_record):
    return record_from_dict(store_record)


@pytest.fixture
def firm():
    return FirmProfile(agent_name="Test Agent", registration_no="IN/PA-9999", firm_short_name="testIP")
