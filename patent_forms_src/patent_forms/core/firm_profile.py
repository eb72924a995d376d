"""
Firm letterhead, agent details and service settings loaded from the environment
"""
from __future__ import annotations

import json
from functools import lru_cache
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirmProfile(BaseSettings):
    """
    Agent and letterhead details printed on forms and correspondence.
    Override any field with a FIRM_-prefixed variable, e.g. FIRM_AGENT_NAME
    (FIRM_ADDRESS_LINES takes a JSON list).
    """

    agent_name: str = "Amit Aswal"
    registration_no: str = "IN/PA-2XXX"
    firm_name: str = "ANOVIP CONSULTANTS LLP"
    firm_short_name: str = "anovIP"
    address_lines: List[str] = [
        "161-B/4, 6th Floor, Gulmohar House,",
        "Yusuf Sarai Community Center, Gautam Nagar,",
        "Green Park,",
    ]
    city: str = "New Delhi"
    pin_code: str = "110049"
    country: str = "India"
    phone: str = "+91-11-XXXXXXXX"
    mobile: str = "+91-XXXXXXXXXX"
    fax: str = "+91-11-XXXXXXXX"
    email: str = "info@anovip.com"
    website: str = "www.anovip.com"
    agent_roster: str = (
        "AMIT ASWAL (IN/PA-2XXX), DUSHYANT RASTOGI (IN/PA No. 1448), SWEETY SHARMA (IN/PA No. 3628), "
        "Faisal Ahmad (IN/PA No. 3631) ABHISHEK NANDY (IN/PA No. 3173) DIPANKAR ROY (IN/PA No. 3448), "
        "RISHABH SETH (IN/PA No. 4771), DEEPTI (IN/PA No. 4604), EKTA ASWAL, NIDHI CHAUDHARY, "
        "PRIYANKA MISHRA, RANITA DAS and SHIVANI TIWARI"
    )

    # Professional fees quoted to clients in the status report.
    rfe_fee_usd: int = 350
    misc_fee_usd: int = 125
    extension_fee_usd: int = 50

    model_config = SettingsConfigDict(
        env_prefix="FIRM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def agent_name_upper(self) -> str:
        return self.agent_name.upper()

    @property
    def street_address(self) -> str:
        return " ".join(line.strip() for line in self.address_lines if line.strip())

    @property
    def postal_address(self) -> str:
        return f"{self.street_address} {self.city} – {self.pin_code}, {self.country}"

    def signature_lines(self, firm: str = "") -> List[str]:
        return [
            self.agent_name_upper,
            f"(IN/PA No. {self.registration_no})",
            f"of {firm or self.firm_name}",
            "AGENT FOR THE APPLICANT(S)",
        ]


class Settings(BaseSettings):
    """
    Service settings (PATENT_FORMS_ prefix)
    """

    app_name: str = "Patent Filing Forms"
    log_level: str = "INFO"
    cors_origins: str = '["*"]'

    model_config = SettingsConfigDict(
        env_prefix="PATENT_FORMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from a JSON list or a comma separated string"""
        raw = (self.cors_origins or "").strip()
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except ValueError:
                return ["*"]
            return [str(x) for x in parsed] or ["*"]
        return [part.strip() for part in raw.split(",") if part.strip()] or ["*"]


@lru_cache(maxsize=1)
def get_firm_profile() -> FirmProfile:
    return FirmProfile()


settings = Settings()
