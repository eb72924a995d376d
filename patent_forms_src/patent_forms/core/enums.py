from __future__ import annotations

from enum import Enum
from typing import Optional


class Jurisdiction(str, Enum):
    NEW_DELHI = "New Delhi"
    MUMBAI = "Mumbai"
    KOLKATA = "Kolkata"
    CHENNAI = "Chennai"

    @classmethod
    def parse(cls, raw) -> "Jurisdiction":
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower().replace("_", " ")
        for item in cls:
            if key in (item.value.lower(), item.name.lower().replace("_", " ")):
                return item
        return cls.NEW_DELHI

    @property
    def title_label(self) -> str:
        return self.value

    @property
    def upper_label(self) -> str:
        return self.value.upper()


class ApplicationType(str, Enum):
    ORDINARY = "ORDINARY"
    CONVENTION = "CONVENTION"
    PCT_NATIONAL_PHASE = "PCT-NATIONAL-PHASE"

    @classmethod
    def parse(cls, raw) -> "ApplicationType":
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().upper().replace("_", "-")
        for item in cls:
            if key in (item.value, item.name.replace("_", "-")):
                return item
        return cls.ORDINARY


class ApplicantCategory(str, Enum):
    NATURAL_PERSON = "Natural"
    SMALL_ENTITY = "Small"
    STARTUP = "Start"
    EDUCATION = "education"
    OTHER = "Other"

    @classmethod
    def parse(cls, raw) -> Optional["ApplicantCategory"]:
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        if not key:
            return None
        for item in cls:
            if key in (item.value.lower(), item.name.lower()):
                return item
        return None

    @property
    def is_natural_person(self) -> bool:
        return self is ApplicantCategory.NATURAL_PERSON
