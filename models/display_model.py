from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.raw_profile import Unparseable


class DisplayEntry(BaseModel):
    """Render-ready shape: derived once, never mutated."""

    model_config = ConfigDict(frozen=True)


class MediaItem(DisplayEntry):
    url: str
    width: int = 80
    height: int = 80


class ExperienceEntry(DisplayEntry):
    title: Optional[str] = None
    company_name: Optional[str] = None
    company_url: Optional[str] = None
    company_logo: Optional[str] = None
    company_initials: Optional[str] = None
    company_industry: Optional[str] = None
    company_staff_count_range: Optional[str] = None
    location: Optional[str] = None
    location_type: Optional[str] = None
    employment_type: Optional[str] = None
    description: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    start: Optional[str] = None
    end: Optional[str] = None
    date_range: str = ""
    details: str = ""
    is_current: bool = False


class EducationEntry(DisplayEntry):
    school_name: Optional[str] = None
    school_logo: Optional[str] = None
    school_initials: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    grade: Optional[str] = None
    activities: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    date_range: str = ""


class LanguageEntry(DisplayEntry):
    name: str = "—"
    proficiency: str = "—"


class CertificationEntry(DisplayEntry):
    name: str
    issuer: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None


class Contributor(DisplayEntry):
    display_name: str
    initials: str
    picture_url: Optional[str] = None


class ProjectEntry(DisplayEntry):
    name: str
    description: Optional[str] = None
    url: Optional[str] = None
    contributors: List[Contributor] = Field(default_factory=list)


class LocaleMetadata(DisplayEntry):
    supported_locales: List[str] = Field(default_factory=list)
    first_name: Optional[Dict[str, str]] = None
    last_name: Optional[Dict[str, str]] = None
    headline: Optional[Dict[str, str]] = None


class ProfileMetadata(DisplayEntry):
    id: Optional[int] = None
    urn: Optional[str] = None
    username: Optional[str] = None
    geo: str = "—"
    country_code: Optional[str] = None


class DisplayModel(DisplayEntry):
    """Normalized view of one profile document.

    ``certifications`` and ``projects`` are None when the upstream omitted
    them and ``Unparseable`` when they were present in an unknown shape.
    """

    handle: Optional[str] = None
    title: str
    initials: str
    headline: Optional[str] = None
    summary: Optional[str] = None
    location: Optional[str] = None
    avatar_url: Optional[str] = None
    profile_url: Optional[str] = None
    badges: List[str] = Field(default_factory=list)
    media: List[MediaItem] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    current: Optional[ExperienceEntry] = None
    skills: List[str] = Field(default_factory=list)
    educations: List[EducationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)
    certifications: Optional[Union[List[CertificationEntry], Unparseable]] = None
    projects: Optional[Union[List[ProjectEntry], Unparseable]] = None
    locales: LocaleMetadata = Field(default_factory=LocaleMetadata)
    metadata: ProfileMetadata = Field(default_factory=ProfileMetadata)
