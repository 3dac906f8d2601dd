from __future__ import annotations

from enum import Enum


class FieldId(str, Enum):
    FULL_NAME = "fullName"
    EMAIL = "email"
    PHONE = "phone"
    LOCATION = "location"
    PRIMARY_ROLE = "primaryRole"
    CUSTOM_ROLE = "customRole"
    EXPERIENCE = "experience"
    SKILLS = "skills"
    PORTFOLIO = "portfolio"
    AVAILABILITY = "availability"
    UK_HOURS = "ukHours"
    OFFICE_WORK = "officeWork"
    SALARY_RANGE = "salaryRange"
    SUMMARY = "summary"
    UK_CLIENTS = "ukClients"
    UK_CLIENTS_DETAILS = "ukClientsDetails"
    INTEREST = "interest"
    ACCURACY_CONSENT = "accuracyConsent"
    DATA_CONSENT = "dataConsent"
    CV = "cv"


# Multipart part names the intake endpoint may report errors under.
_PART_ALIASES: dict[str, FieldId] = {
    "portfolioLinks": FieldId.PORTFOLIO,
    "availabilityOther": FieldId.AVAILABILITY,
}


def parse_field_id(raw: str | None) -> FieldId | None:
    if raw is None:
        return None
    name = raw.strip()
    if name in _PART_ALIASES:
        return _PART_ALIASES[name]
    try:
        return FieldId(name)
    except ValueError:
        return None


OTHER = "Other"
YES = "Yes"
NO = "No"

PRIMARY_ROLES: tuple[str, ...] = (
    "UI/UX Designer",
    "Front-End Developer",
    "Back-End Developer",
    "Full-Stack Developer",
    "Mobile App Developer (Flutter)",
    "Mobile App Developer (React Native)",
    "Mobile App Developer (iOS)",
    "Mobile App Developer (Android)",
    "DevOps Engineer",
    "SEO Specialist",
    "Product Manager",
    "Digital Marketer",
    "Content Writer",
    "Data Analyst",
    "Data Scientist",
    "QA / Test Engineer",
    "Game Developer",
    "Blockchain Developer",
    OTHER,
)

EXPERIENCE_BRACKETS: tuple[str, ...] = ("0–1", "1–3", "3–5", "5+")
AVAILABILITY_OPTIONS: tuple[str, ...] = ("Immediate", "2 weeks", "1 month", OTHER)
UK_HOURS_OPTIONS: tuple[str, ...] = (YES, "Partially", NO)
OFFICE_WORK_OPTIONS: tuple[str, ...] = (YES, NO, "Hybrid")
SALARY_RANGES: tuple[str, ...] = (
    "Below ₦400,000",
    "₦400,000 – ₦600,000",
    "₦600,000 – ₦900,000",
    "₦900,000 – ₦1,500,000",
    "₦1,500,000+",
)
UK_CLIENTS_OPTIONS: tuple[str, ...] = (YES, NO)

PRESET_SKILLS: tuple[str, ...] = (
    "JavaScript",
    "React",
    "Figma",
    "WordPress",
    "Node.js",
    "Flutter",
    "Kotlin",
    "Webflow",
    "SEO",
    "Vue.js",
    "Python",
    "TypeScript",
    "Adobe XD",
    "PHP",
    "Laravel",
    "Next.js",
    "Tailwind CSS",
    "MongoDB",
)


# Fields picked from a fixed list; "" means nothing chosen yet.
FIELD_OPTIONS: dict[FieldId, tuple[str, ...]] = {
    FieldId.PRIMARY_ROLE: PRIMARY_ROLES,
    FieldId.EXPERIENCE: EXPERIENCE_BRACKETS,
    FieldId.AVAILABILITY: AVAILABILITY_OPTIONS,
    FieldId.UK_HOURS: UK_HOURS_OPTIONS,
    FieldId.OFFICE_WORK: OFFICE_WORK_OPTIONS,
    FieldId.SALARY_RANGE: SALARY_RANGES,
    FieldId.UK_CLIENTS: UK_CLIENTS_OPTIONS,
}

TEXT_FIELDS: frozenset[FieldId] = frozenset(
    {
        FieldId.FULL_NAME,
        FieldId.EMAIL,
        FieldId.PHONE,
        FieldId.LOCATION,
        FieldId.CUSTOM_ROLE,
        FieldId.SUMMARY,
        FieldId.UK_CLIENTS_DETAILS,
        FieldId.INTEREST,
    }
)

CONSENT_FIELDS: frozenset[FieldId] = frozenset({FieldId.ACCURACY_CONSENT, FieldId.DATA_CONSENT})


def is_allowed_option(field: FieldId, value: str) -> bool:
    options = FIELD_OPTIONS.get(field)
    if options is None:
        return False
    return value == "" or value in options
