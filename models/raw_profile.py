from __future__ import annotations

import types
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator


class Unparseable(BaseModel):
    """Marker for a field that is present but has none of the accepted shapes."""

    raw: Any

    model_config = ConfigDict(extra="forbid", frozen=True)


def _is_list_annotation(annotation: Any) -> bool:
    origin = get_origin(annotation)
    if origin is list:
        return True
    if origin is Union or origin is types.UnionType:
        return any(_is_list_annotation(arg) for arg in get_args(annotation))
    return False


class LenientModel(BaseModel):
    """Upstream payload shape: every field optional, unknown keys kept.

    A field whose value fails validation degrades instead of failing the
    document: lists keep their valid entries, other fields named in
    ``UNPARSEABLE_FIELDS`` become an ``Unparseable`` marker, anything else
    becomes None.
    """

    UNPARSEABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _absorb_shape_drift(cls, value: Any, handler, info: ValidationInfo) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields.get(info.field_name)
            if isinstance(value, list) and field is not None and _is_list_annotation(field.annotation):
                kept: List[Any] = []
                for item in value:
                    try:
                        kept.extend(handler([item]))
                    except ValidationError:
                        continue
                return kept
            if info.field_name in cls.UNPARSEABLE_FIELDS:
                return Unparseable(raw=value)
            return None


class DatePart(LenientModel):
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None


class ImageItem(LenientModel):
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Geo(LenientModel):
    country: Optional[str] = None
    city: Optional[str] = None
    full: Optional[str] = None
    country_code: Optional[str] = Field(default=None, alias="countryCode")


class Skill(LenientModel):
    name: Optional[str] = None


class Language(LenientModel):
    name: Optional[str] = None
    proficiency: Optional[str] = None


class Certification(LenientModel):
    name: Optional[str] = None
    title: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None
    issued: Optional[str] = None
    year: Optional[Union[int, str]] = None
    url: Optional[str] = None


class Project(LenientModel):
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    contributors: Optional[List[Dict[str, Any]]] = None


class ProjectsCollection(LenientModel):
    total: Optional[int] = None
    items: Optional[List[Project]] = None


class Education(LenientModel):
    start: Optional[DatePart] = None
    end: Optional[DatePart] = None
    field_of_study: Optional[str] = Field(default=None, alias="fieldOfStudy")
    degree: Optional[str] = None
    grade: Optional[str] = None
    school_name: Optional[str] = Field(default=None, alias="schoolName")
    description: Optional[str] = None
    activities: Optional[str] = None
    url: Optional[str] = None
    school_id: Optional[Union[int, str]] = Field(default=None, alias="schoolId")
    logo: Optional[List[ImageItem]] = None


class Position(LenientModel):
    company_id: Optional[Union[int, str]] = Field(default=None, alias="companyId")
    company_name: Optional[str] = Field(default=None, alias="companyName")
    company_username: Optional[str] = Field(default=None, alias="companyUsername")
    company_url: Optional[str] = Field(default=None, alias="companyURL")
    company_logo: Optional[str] = Field(default=None, alias="companyLogo")
    company_industry: Optional[str] = Field(default=None, alias="companyIndustry")
    company_staff_count_range: Optional[str] = Field(default=None, alias="companyStaffCountRange")
    title: Optional[str] = None
    multi_locale_title: Optional[Dict[str, str]] = Field(default=None, alias="multiLocaleTitle")
    multi_locale_company_name: Optional[Dict[str, str]] = Field(default=None, alias="multiLocaleCompanyName")
    location: Optional[str] = None
    location_type: Optional[str] = Field(default=None, alias="locationType")
    description: Optional[str] = None
    employment_type: Optional[str] = Field(default=None, alias="employmentType")
    start: Optional[DatePart] = None
    end: Optional[DatePart] = None


class RawProfileDocument(LenientModel):
    """Profile payload as returned by the upstream people-data API."""

    UNPARSEABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset({"projects", "certifications"})

    id: Optional[int] = None
    urn: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    is_premium: Optional[bool] = Field(default=None, alias="isPremium")
    is_open_to_work: Optional[bool] = Field(default=None, alias="isOpenToWork")
    is_hiring: Optional[bool] = Field(default=None, alias="isHiring")
    profile_picture: Optional[str] = Field(default=None, alias="profilePicture")
    profile_pictures: Optional[List[ImageItem]] = Field(default=None, alias="profilePictures")
    summary: Optional[str] = None
    headline: Optional[str] = None
    geo: Optional[Geo] = None
    skills: Optional[List[Skill]] = None
    educations: Optional[List[Education]] = None
    position: Optional[List[Position]] = None
    full_positions: Optional[List[Position]] = Field(default=None, alias="fullPositions")
    languages: Optional[List[Language]] = None
    certifications: Optional[Union[List[Certification], Unparseable]] = None
    projects: Optional[Union[List[Project], ProjectsCollection, Unparseable]] = None
    supported_locales: Optional[List[Union[str, Dict[str, Any]]]] = Field(default=None, alias="supportedLocales")
    multi_locale_first_name: Optional[Dict[str, str]] = Field(default=None, alias="multiLocaleFirstName")
    multi_locale_last_name: Optional[Dict[str, str]] = Field(default=None, alias="multiLocaleLastName")
    multi_locale_headline: Optional[Dict[str, str]] = Field(default=None, alias="multiLocaleHeadline")
