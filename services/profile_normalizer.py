from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from models.display_model import (
    CertificationEntry,
    Contributor,
    DisplayModel,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    LocaleMetadata,
    MediaItem,
    ProfileMetadata,
    ProjectEntry,
)
from models.raw_profile import (
    Certification,
    DatePart,
    Education,
    Position,
    Project,
    ProjectsCollection,
    RawProfileDocument,
    Unparseable,
)
from services.handle_resolver import profile_url_for
from utils.fallback import first_present


PLACEHOLDER_TITLE = "LinkedIn User"
PLACEHOLDER_INITIALS = "LN"
PLACEHOLDER_TEXT = "—"
ONGOING_LABEL = "Present"
DETAILS_SEPARATOR = " • "
MAX_CONTRIBUTORS = 8

# Sort sentinels. A position without an end year is still held, i.e. it is
# infinitely recent; this models "ongoing", it is not a data-quality fallback.
ONGOING_END_YEAR = 9999
# A missing start year ranks last among positions sharing an end year.
UNKNOWN_START_YEAR = 0


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _join_present(parts: Iterable[Any], sep: str) -> str:
    return sep.join(p.strip() for p in parts if isinstance(p, str) and p.strip())


def initials_of(name: Optional[str]) -> str:
    words = (name or "").split()[:2]
    if not words:
        return PLACEHOLDER_INITIALS
    return "".join(w[0].upper() for w in words)


def year_value(part: Optional[DatePart]) -> Optional[int]:
    """Usable year of a date-part; 0, negatives and non-integers count as missing."""
    if part is None:
        return None
    year = part.year
    if isinstance(year, bool) or not isinstance(year, int) or year <= 0:
        return None
    return year


def _as_date_part(part: Union[DatePart, Mapping[str, Any], None]) -> Optional[DatePart]:
    if part is None or isinstance(part, DatePart):
        return part
    if isinstance(part, Mapping):
        return DatePart.model_validate(dict(part))
    return None


def format_date_part(part: Union[DatePart, Mapping[str, Any], None]) -> Optional[str]:
    """Render a partial date as ``YYYY`` or ``YYYY-MM``; None without a year."""
    part = _as_date_part(part)
    year = year_value(part)
    if year is None:
        return None
    month = part.month
    if isinstance(month, int) and not isinstance(month, bool) and month > 0:
        return f"{year}-{month:02d}"
    return str(year)


def format_date_range(
    start: Union[DatePart, Mapping[str, Any], None],
    end: Union[DatePart, Mapping[str, Any], None],
    ongoing_label: Optional[str] = ONGOING_LABEL,
) -> str:
    """``start – end``; an open end renders as ``ongoing_label`` (omitted when None)."""
    parts = [format_date_part(start), "–", format_date_part(end) or ongoing_label]
    return " ".join(p for p in parts if p)


def is_ongoing(position: Position) -> bool:
    return year_value(position.end) is None


def sort_positions(positions: Iterable[Position]) -> List[Position]:
    """Most recent first: end year desc, then start year desc. Stable for ties."""

    def _key(p: Position):
        end = year_value(p.end)
        start = year_value(p.start)
        return (
            end if end is not None else ONGOING_END_YEAR,
            start if start is not None else UNKNOWN_START_YEAR,
        )

    return sorted(positions, key=_key, reverse=True)


def select_positions(doc: RawProfileDocument) -> List[Position]:
    # The full list supersedes the short one whenever the upstream sends it
    if doc.full_positions is not None:
        return list(doc.full_positions)
    return list(doc.position or [])


def _experience_entry(p: Position) -> ExperienceEntry:
    company = _text(p.company_name)
    return ExperienceEntry(
        title=_text(p.title),
        company_name=company,
        company_url=_text(p.company_url),
        company_logo=_text(p.company_logo),
        company_initials=initials_of(company) if company else None,
        company_industry=_text(p.company_industry),
        company_staff_count_range=_text(p.company_staff_count_range),
        location=_text(p.location),
        location_type=_text(p.location_type),
        employment_type=_text(p.employment_type),
        description=_text(p.description),
        start_year=year_value(p.start),
        end_year=year_value(p.end),
        start=format_date_part(p.start),
        end=format_date_part(p.end),
        date_range=format_date_range(p.start, p.end),
        details=_join_present(
            [p.location, p.employment_type, p.location_type, p.company_industry],
            DETAILS_SEPARATOR,
        ),
        is_current=is_ongoing(p),
    )


def _education_entry(e: Education) -> EducationEntry:
    school = _text(e.school_name)
    logos = e.logo or []
    return EducationEntry(
        school_name=school,
        school_logo=next((_text(logo.url) for logo in logos if _text(logo.url)), None),
        school_initials=initials_of(school) if school else None,
        degree=_text(e.degree),
        field_of_study=_text(e.field_of_study),
        grade=_text(e.grade),
        activities=_text(e.activities),
        description=_text(e.description),
        url=_text(e.url),
        date_range=format_date_range(e.start, e.end, ongoing_label=None),
    )


def _certification_entry(c: Certification) -> CertificationEntry:
    return CertificationEntry(
        name=first_present(lambda: c.name, lambda: c.title, default="Certification"),
        issuer=_text(c.issuer),
        date=first_present(
            lambda: c.date,
            lambda: c.issued,
            lambda: str(c.year) if c.year is not None else None,
        ),
        url=_text(c.url),
    )


def _contributor(raw: Dict[str, Any]) -> Contributor:
    name = first_present(
        lambda: _text(raw.get("fullName")),
        lambda: _join_present([raw.get("firstName"), raw.get("lastName")], " "),
        lambda: _text(raw.get("username")),
        default="User",
    )
    pictures = raw.get("profilePicture")
    picture_url = None
    if isinstance(pictures, list):
        picture_url = next(
            (_text(pp.get("url")) for pp in pictures if isinstance(pp, dict) and _text(pp.get("url"))),
            None,
        )
    return Contributor(display_name=name, initials=initials_of(name), picture_url=picture_url)


def _project_entry(p: Project) -> ProjectEntry:
    contributors = [_contributor(c) for c in (p.contributors or [])[:MAX_CONTRIBUTORS]]
    return ProjectEntry(
        name=first_present(lambda: p.name, lambda: p.title, default="Project"),
        description=_text(p.description),
        url=_text(p.url),
        contributors=contributors,
    )


def project_items(projects: Any) -> Union[List[Project], Unparseable, None]:
    """Flatten the two accepted project shapes into one list.

    None when absent; ``Unparseable`` when present in any other shape,
    including a wrapper object without an ``items`` list.
    """
    if projects is None:
        return None
    if isinstance(projects, Unparseable):
        return projects
    if isinstance(projects, ProjectsCollection):
        if projects.items is None:
            return Unparseable(raw=projects.model_dump(by_alias=True, exclude_none=True))
        return list(projects.items)
    if isinstance(projects, list):
        return list(projects)
    return Unparseable(raw=projects)


def _certifications(doc: RawProfileDocument) -> Union[List[CertificationEntry], Unparseable, None]:
    certs = doc.certifications
    if certs is None or isinstance(certs, Unparseable):
        return certs
    return [_certification_entry(c) for c in certs]


def _projects(doc: RawProfileDocument) -> Union[List[ProjectEntry], Unparseable, None]:
    items = project_items(doc.projects)
    if items is None or isinstance(items, Unparseable):
        return items
    return [_project_entry(p) for p in items]


def _locale_label(locale: Any) -> str:
    if isinstance(locale, str):
        return locale
    return json.dumps(locale, sort_keys=True, ensure_ascii=False)


def _badges(doc: RawProfileDocument) -> List[str]:
    flags = [
        (doc.is_premium, "Premium"),
        (doc.is_open_to_work, "Open to work"),
        (doc.is_hiring, "Hiring"),
    ]
    return [label for flag, label in flags if flag]


def coerce_document(doc: Union[RawProfileDocument, Mapping[str, Any], None]) -> RawProfileDocument:
    if isinstance(doc, RawProfileDocument):
        return doc
    if isinstance(doc, Mapping):
        return RawProfileDocument.model_validate(dict(doc))
    logging.warning(f"Profile document is not an object ({type(doc).__name__}); normalizing as empty")
    return RawProfileDocument()


def normalize(doc: Union[RawProfileDocument, Mapping[str, Any], None]) -> DisplayModel:
    """Derive the display model from an upstream profile document.

    Never raises for missing or oddly shaped optional fields: every derived
    value has a fallback chain ending in an empty or placeholder value.
    """
    raw = coerce_document(doc)
    geo = raw.geo
    pictures = raw.profile_pictures or []

    handle = _text(raw.username)
    title = first_present(
        lambda: _join_present([raw.first_name, raw.last_name], " "),
        lambda: handle,
        default=PLACEHOLDER_TITLE,
    )
    location = first_present(
        lambda: geo.full if geo else None,
        lambda: _join_present([geo.city, geo.country], ", ") if geo else None,
    )
    avatar_url = first_present(
        lambda: raw.profile_picture,
        lambda: next((img.url for img in pictures if _text(img.url)), None),
    )

    positions = sort_positions(select_positions(raw))
    experience = [_experience_entry(p) for p in positions]
    current = next((e for e in experience if e.is_current), None)

    skills = [name for name in (_text(s.name) for s in raw.skills or []) if name]

    certifications = _certifications(raw)
    projects = _projects(raw)
    if isinstance(projects, Unparseable):
        logging.debug("Projects present but could not be parsed", extra={"handle": handle or "-"})
    if isinstance(certifications, Unparseable):
        logging.debug("Certifications present but could not be parsed", extra={"handle": handle or "-"})

    return DisplayModel(
        handle=handle,
        title=title,
        initials=initials_of(title),
        headline=_text(raw.headline),
        summary=_text(raw.summary),
        location=location,
        avatar_url=avatar_url,
        profile_url=profile_url_for(handle),
        badges=_badges(raw),
        media=[
            MediaItem(url=img.url.strip(), width=img.width or 80, height=img.height or 80)
            for img in pictures
            if _text(img.url)
        ],
        experience=experience,
        current=current,
        skills=skills,
        educations=[_education_entry(e) for e in raw.educations or []],
        languages=[
            LanguageEntry(
                name=_text(lang.name) or PLACEHOLDER_TEXT,
                proficiency=_text(lang.proficiency) or PLACEHOLDER_TEXT,
            )
            for lang in raw.languages or []
        ],
        certifications=certifications,
        projects=projects,
        locales=LocaleMetadata(
            supported_locales=[_locale_label(loc) for loc in raw.supported_locales or []],
            first_name=raw.multi_locale_first_name,
            last_name=raw.multi_locale_last_name,
            headline=raw.multi_locale_headline,
        ),
        metadata=ProfileMetadata(
            id=raw.id,
            urn=_text(raw.urn),
            username=handle,
            geo=location or PLACEHOLDER_TEXT,
            country_code=_text(geo.country_code) if geo else None,
        ),
    )
