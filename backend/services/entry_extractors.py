"""Turn section text into structured education, experience, skill and project entries.

Education, experience and project extraction each run a two-state machine
over the section's lines: NO_ENTRY until the first line that opens an
entry, then IN_ENTRY, with an explicit flush whenever a new entry opens
and once more at end of input.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from models.resume import EducationEntry, ExperienceEntry, ProjectEntry, SkillGroup
from services.section_parser import (
    find_date_span,
    is_bullet,
    is_current,
    split_lines,
    strip_bullet,
)

logger = logging.getLogger(__name__)


class EntryState(Enum):
    NO_ENTRY = "no_entry"
    IN_ENTRY = "in_entry"


# Abbreviations are case-sensitive so "be", "ms" or "ma" in prose never match,
# and ignored after ", " where "MA" or "MS" is a state code ("Boston, MA")
DEGREE_RE = re.compile(
    r"(?<!\w)(?:(?<!, )(?:B\.?Sc|B\.?S|B\.?A|B\.?Tech|B\.?E|M\.?Sc|M\.?S|M\.?A|M\.?Tech|MBA)|"
    r"(?i:ph\.?d|bachelor(?:'?s)?|master(?:'?s)?|doctor(?:ate)?|associate(?:'?s)?|diploma))"
    r"\.?(?!\w)"
)
GPA_LINE_RE = re.compile(r"\bC?GPA\b", re.IGNORECASE)
GPA_VALUE_RE = re.compile(r"\d+(?:\.\d+)?(?:\s*/\s*\d+(?:\.\d+)?)?")

SKILL_ITEM_SPLIT_RE = re.compile(r"[,;|]")
SKILL_LIST_SPLIT_RE = re.compile(r"[,;|•●▪]")
TECH_PAREN_RE = re.compile(r"\(([^)]+)\)")
TECH_PIPE_RE = re.compile(r"\|\s*(.+)$")

_SEPARATORS = " \t,;:|-–—@"


def _remove_span(line: str, span: tuple[int, int]) -> str:
    return (line[: span[0]] + " " + line[span[1]:]).strip()


def _tidy(text: str) -> str:
    """Collapse whitespace and trim separator punctuation at both ends."""
    return re.sub(r"\s+", " ", text).strip(_SEPARATORS)


# ---------------------------------------------------------------------------
# Education
# ---------------------------------------------------------------------------

@dataclass
class _EducationDraft:
    institution: str = ""
    degree: str = ""
    study_field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    highlights: list[str] = field(default_factory=list)

    def set_dates(self, line: str) -> str:
        """Take the line's date range if none is set; return the line without it."""
        dates = find_date_span(line)
        if dates is None or self.start_date:
            return line
        self.start_date, self.end_date = dates.start, dates.end
        return _remove_span(line, dates.span)

    def set_degree(self, line: str, match: re.Match) -> None:
        self.degree = line[: match.end()].strip()
        self.study_field = _tidy(line[match.end():])

    def build(self) -> EducationEntry:
        return EducationEntry(
            institution=self.institution,
            degree=self.degree,
            field=self.study_field,
            start_date=self.start_date,
            end_date=self.end_date,
            gpa=self.gpa,
            highlights=self.highlights,
        )


def extract_education(text: str) -> list[EducationEntry]:
    """Parse an education section. Always returns at least one entry."""
    entries: list[EducationEntry] = []
    state = EntryState.NO_ENTRY
    draft = _EducationDraft()

    for line in split_lines(text):
        degree_match = DEGREE_RE.search(line)

        if degree_match and state is EntryState.IN_ENTRY and draft.institution and not draft.degree:
            # Institution-first layout: the degree belongs to the open entry
            line = draft.set_dates(line)
            degree_match = DEGREE_RE.search(line)
            if degree_match:
                draft.set_degree(line, degree_match)
        elif degree_match or (state is EntryState.NO_ENTRY and len(line) > 5):
            if state is EntryState.IN_ENTRY and draft.institution:
                entries.append(draft.build())
            draft = _EducationDraft()
            state = EntryState.IN_ENTRY

            line = draft.set_dates(line)
            degree_match = DEGREE_RE.search(line)
            if degree_match:
                draft.set_degree(line, degree_match)
            else:
                draft.institution = _tidy(line)
        elif state is EntryState.IN_ENTRY:
            if GPA_LINE_RE.search(line):
                gpa = GPA_VALUE_RE.search(line)
                if gpa:
                    draft.gpa = gpa.group().strip()
                continue
            line = _tidy(draft.set_dates(line))
            if not line:
                continue
            if not draft.institution and len(line) > 3:
                draft.institution = line
            else:
                draft.highlights.append(line)

    if state is EntryState.IN_ENTRY and (draft.institution or draft.degree):
        entries.append(draft.build())

    logger.debug("Extracted %d education entries", len(entries))
    return entries or [EducationEntry()]


# ---------------------------------------------------------------------------
# Experience
# ---------------------------------------------------------------------------

@dataclass
class _ExperienceDraft:
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: list[str] = field(default_factory=list)

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            position=self.position,
            start_date=self.start_date,
            end_date=self.end_date,
            current=self.current,
            description=self.description or [""],
        )


def extract_experience(text: str) -> list[ExperienceEntry]:
    """Parse an experience section. A non-bullet line with dates opens an entry."""
    entries: list[ExperienceEntry] = []
    state = EntryState.NO_ENTRY
    draft = _ExperienceDraft()

    for line in split_lines(text):
        if is_bullet(line):
            bullet = strip_bullet(line)
            if bullet:
                draft.description.append(bullet)
            continue

        dates = find_date_span(line)
        if dates is not None:
            if state is EntryState.IN_ENTRY and (draft.company or draft.position):
                entries.append(draft.build())
                draft = _ExperienceDraft()
            state = EntryState.IN_ENTRY

            draft.start_date = dates.start
            draft.end_date = dates.end or "Present"
            draft.current = is_current(draft.end_date)
            remainder = _tidy(_remove_span(line, dates.span).replace("|", " ").replace(",", " "))
            if remainder:
                draft.position = remainder
        elif state is EntryState.IN_ENTRY:
            if not draft.company and len(line) > 2:
                draft.company = line
            elif not draft.position and len(line) > 2:
                draft.position = line
            elif len(line) > 10:
                draft.description.append(line)

    if state is EntryState.IN_ENTRY and (draft.company or draft.position):
        entries.append(draft.build())

    logger.debug("Extracted %d experience entries", len(entries))
    return entries


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------

def _split_items(raw: str, pattern: re.Pattern, min_length: int = 1) -> list[str]:
    return [item.strip() for item in pattern.split(raw) if len(item.strip()) >= min_length]


def extract_skills(text: str) -> list[SkillGroup]:
    """Parse "Category: a, b, c" lines and bare comma lists into skill groups.

    Always returns at least one (possibly empty) group.
    """
    groups: list[SkillGroup] = []

    for line in split_lines(text):
        if ":" in line:
            category, items = line.split(":", 1)
            parsed = _split_items(items, SKILL_ITEM_SPLIT_RE)
            if parsed:
                groups.append(SkillGroup(category=category.strip(), items=parsed))
        else:
            parsed = _split_items(strip_bullet(line), SKILL_LIST_SPLIT_RE, min_length=2)
            if len(parsed) > 1:
                groups.append(SkillGroup(category="Technical Skills", items=parsed))

    logger.debug("Extracted %d skill groups", len(groups))
    return groups or [SkillGroup()]


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

@dataclass
class _ProjectDraft:
    name: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)

    def build(self) -> ProjectEntry:
        return ProjectEntry(
            name=self.name,
            description=self.description,
            technologies=self.technologies,
            highlights=self.highlights,
        )


def _parse_technologies(line: str) -> list[str]:
    match = TECH_PAREN_RE.search(line) or TECH_PIPE_RE.search(line)
    if not match:
        return []
    return _split_items(match.group(1), re.compile(r"[,;]"))


def extract_projects(text: str) -> list[ProjectEntry]:
    """Parse a projects section. Short plain lines name projects, bullets are highlights."""
    projects: list[ProjectEntry] = []
    state = EntryState.NO_ENTRY
    draft = _ProjectDraft()

    for line in split_lines(text):
        if is_bullet(line):
            highlight = strip_bullet(line)
            if highlight:
                draft.highlights.append(highlight)
        elif 3 < len(line) < 100:
            if state is EntryState.IN_ENTRY and draft.name:
                projects.append(draft.build())
                draft = _ProjectDraft()
            state = EntryState.IN_ENTRY
            draft.name = re.sub(r"\|.*$", "", line).strip()
            draft.technologies = _parse_technologies(line)
        elif state is EntryState.IN_ENTRY and not draft.description and len(line) > 10:
            draft.description = line

    if state is EntryState.IN_ENTRY and draft.name:
        projects.append(draft.build())

    logger.debug("Extracted %d projects", len(projects))
    return projects
