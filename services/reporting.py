from __future__ import annotations

import json
from typing import Any, List, Optional

from models.display_model import DisplayModel, ExperienceEntry
from models.raw_profile import Unparseable


RULE = "=" * 60
SUBRULE = "-" * 60


def _role_heading(role: ExperienceEntry) -> str:
    heading = role.title or "—"
    if role.company_name:
        heading += f" @ {role.company_name}"
        if role.company_url:
            heading += f" ({role.company_url})"
    return heading


def _current_lines(role: ExperienceEntry) -> List[str]:
    lines = [f"  {_role_heading(role)}"]
    lines.append("  " + (" • ".join(p for p in [role.location, role.employment_type] if p) or "—"))
    lines.append(f"  {role.date_range}")
    if role.description:
        lines.append(f"  {role.description}")
    extras = " • ".join(
        p
        for p in [
            role.company_industry,
            f"Staff: {role.company_staff_count_range}" if role.company_staff_count_range else None,
            role.location_type,
        ]
        if p
    )
    if extras:
        lines.append(f"  {extras}")
    return lines


def _pretty(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_profile(display: DisplayModel) -> str:
    """Plain-text profile card for terminal output."""
    out: List[str] = [RULE, display.title]
    if display.headline:
        out.append(display.headline)
    if display.location:
        out.append(display.location)
    if display.badges:
        out.append(" | ".join(f"[{b}]" for b in display.badges))
    if display.handle and display.profile_url:
        out.append(f"@{display.handle}  {display.profile_url}")
    out.append(RULE)

    if display.summary:
        out += ["About", f"  {display.summary}", ""]

    if display.media:
        out.append("Profile media")
        out += [f"  {m.url} ({m.width}x{m.height})" for m in display.media]
        out.append("")

    if display.current:
        out.append("Current role")
        out += _current_lines(display.current)
        out.append("")

    if display.experience:
        out.append("Experience")
        for role in display.experience:
            out.append(f"  {_role_heading(role)}")
            out.append(f"    {role.date_range}")
            if role.details:
                out.append(f"    {role.details}")
            if role.description:
                out.append(f"    {role.description}")
        out.append("")

    if display.skills:
        out += [SUBRULE, "Skills", "  " + ", ".join(display.skills), ""]

    if display.educations:
        out += [SUBRULE, "Education"]
        for edu in display.educations:
            heading = edu.school_name or "—"
            if edu.degree:
                heading += f" • {edu.degree}"
            if edu.field_of_study:
                heading += f", {edu.field_of_study}"
            out.append(f"  {heading}")
            out.append(f"    {edu.date_range}")
            if edu.grade:
                out.append(f"    Grade: {edu.grade}")
            if edu.activities:
                out.append(f"    {edu.activities}")
            if edu.description:
                out.append(f"    {edu.description}")
        out.append("")

    if display.languages:
        out += [SUBRULE, "Languages"]
        out += [f"  {lang.name}: {lang.proficiency}" for lang in display.languages]
        out.append("")

    out += [SUBRULE, "Certifications"]
    if isinstance(display.certifications, Unparseable):
        out.append(_pretty(display.certifications.raw))
    elif display.certifications:
        for cert in display.certifications:
            out.append(f"  {cert.name}")
            if cert.issuer:
                out.append(f"    Issuer: {cert.issuer}")
            if cert.date:
                out.append(f"    {cert.date}")
    else:
        out.append("  No certifications")
    out.append("")

    out += [SUBRULE, "Projects"]
    if isinstance(display.projects, Unparseable):
        out.append("  Projects are present but could not be parsed.")
    elif display.projects:
        for project in display.projects:
            out.append(f"  {project.name}" + (f" ({project.url})" if project.url else ""))
            if project.description:
                out.append(f"    {project.description}")
            if project.contributors:
                names = ", ".join(c.display_name for c in project.contributors)
                out.append(f"    Contributors: {names}")
    else:
        out.append("  No projects")
    out.append("")

    locales = display.locales
    out += [SUBRULE, "Internationalization"]
    out.append("  Supported locales: " + (", ".join(locales.supported_locales) or "—"))
    for label, values in [
        ("First name", locales.first_name),
        ("Last name", locales.last_name),
        ("Headline", locales.headline),
    ]:
        if values:
            out.append(f"  {label}: {json.dumps(values, ensure_ascii=False)}")
    out.append("")

    meta = display.metadata
    out += [SUBRULE, "Profile metadata"]
    out.append(f"  ID: {meta.id if meta.id is not None else '—'}")
    out.append(f"  URN: {meta.urn or '—'}")
    out.append(f"  Username: {meta.username or '—'}")
    out.append(f"  Geo: {meta.geo}" + (f" (Code: {meta.country_code})" if meta.country_code else ""))
    out.append(RULE)
    return "\n".join(out)


def print_profile(display: DisplayModel, raw: Optional[dict] = None, show_raw: bool = False) -> None:
    """Print the profile card, or the raw upstream payload when requested."""
    if show_raw:
        print(_pretty(raw if raw is not None else {}))
        return
    print(format_profile(display))
