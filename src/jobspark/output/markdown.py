"""Markdown output formatting."""

from pathlib import Path

from jobspark.models.cv import CVSection, Education, Experience, ParsedCV, Skill, StructuredCV

CONTACT_SEPARATOR = " | "


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _heading(text: str, depth: int) -> str:
    # ATX headings hold a single line; multi-line titles use the setext form
    if "\n" in text:
        underline = "=" if depth == 1 else "-"
        return f"{text}\n{underline * 3}\n"
    return f"{'#' * depth} {text}\n"


def cv_to_markdown(parsed: ParsedCV) -> str:
    """Render a parsed CV back into a single Markdown document.

    The name becomes an H1, the contact line an H3 (or a paragraph when it
    spans several lines) and each section an H2 followed by its content, so
    parsing the result gives back the same CV.
    """
    blocks: list[str] = []
    if parsed.name:
        blocks.append(_heading(parsed.name, 1))
    if parsed.contact:
        multi_line = "\n" in parsed.contact
        blocks.append(f"{parsed.contact}\n" if multi_line else _heading(parsed.contact, 3))
    for section in parsed.sections:
        blocks.append(_heading(section.title, 2))
        if section.content.strip():
            blocks.append(section.content.rstrip("\n") + "\n")
    return "\n".join(blocks)


def _format_dates(start: str | None, end: str | None, is_current: bool = False) -> str:
    start = (start or "").strip()
    end = "Present" if is_current else (end or "").strip()
    if start and end:
        return f"{start} - {end}"
    return start or end


def _description_lines(description: str | None) -> list[str]:
    if not description:
        return []
    return [line.strip() for line in description.splitlines() if line.strip()]


def _format_experience(exp: Experience) -> str:
    lines = [f"**{exp.title} at {exp.company}**"]
    details = [
        part
        for part in (exp.location, _format_dates(exp.start_date, exp.end_date, exp.is_current))
        if part
    ]
    if details:
        lines.append(CONTACT_SEPARATOR.join(details))
    lines.extend(_description_lines(exp.description))
    return "\n".join(lines)


def _format_education(edu: Education) -> str:
    lines = [f"**{edu.degree}**"]
    details = [part for part in (edu.institution, edu.location, edu.graduation_year) if part]
    lines.append(CONTACT_SEPARATOR.join(details))
    lines.extend(_description_lines(edu.description))
    return "\n".join(lines)


def _format_skill(skill: Skill) -> str:
    return f"- {skill.name} ({skill.level})" if skill.level else f"- {skill.name}"


def build_cv_document(cv: StructuredCV) -> ParsedCV:
    """Compose a structured CV into the name/contact/sections document form.

    Empty parts are left out: a CV without education gets no Education
    section.

    Args:
        cv: Structured CV from the CV builder.

    Returns:
        ParsedCV ready for rendering.
    """
    info = cv.personal_info
    contact = CONTACT_SEPARATOR.join(
        part for part in (info.email, info.phone, info.location) if part
    )

    sections: list[CVSection] = []
    summary = (info.professional_summary or "").strip()
    if summary:
        sections.append(CVSection(title="Professional Summary", content=summary + "\n"))
    if cv.experiences:
        body = "\n\n".join(_format_experience(exp) for exp in cv.experiences)
        sections.append(CVSection(title="Experience", content=body + "\n"))
    if cv.education:
        body = "\n\n".join(_format_education(edu) for edu in cv.education)
        sections.append(CVSection(title="Education", content=body + "\n"))
    if cv.skills:
        body = "\n".join(_format_skill(skill) for skill in cv.skills)
        sections.append(CVSection(title="Skills", content=body + "\n"))

    return ParsedCV(name=(info.full_name or "").strip(), contact=contact, sections=tuple(sections))
