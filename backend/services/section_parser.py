"""Resume section segmentation and personal info extraction."""

import logging
import re
from typing import NamedTuple

from models.resume import PersonalInfo

logger = logging.getLogger(__name__)

# Section header patterns, tested in declaration order; first match wins.
SECTION_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("education", re.compile(r"\b(?:education|academics?|qualifications?)\b", re.IGNORECASE)),
    ("experience", re.compile(
        r"\b(?:experience|employment|work\s+history|career\s+history)\b", re.IGNORECASE
    )),
    ("skills", re.compile(
        r"\b(?:skills|competencies|technologies|proficiencies)\b", re.IGNORECASE
    )),
    ("projects", re.compile(r"\b(?:projects|portfolio)\b", re.IGNORECASE)),
    ("certifications", re.compile(
        r"\b(?:certifications?|licen[sc]es?|credentials)\b", re.IGNORECASE
    )),
    ("summary", re.compile(
        r"\b(?:summary|objective|profile|about\s+me)\b", re.IGNORECASE
    )),
    ("contact", re.compile(
        r"\b(?:contact|personal\s+info(?:rmation)?)\b", re.IGNORECASE
    )),
]

# Lines longer than this are prose, even if they mention a section keyword
MAX_HEADER_TOKENS = 6

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}")
PHONE_RE = re.compile(
    r"(?<![\w/])(?:\+?\d{1,3}[-.\s]?)?(?:\(?\d{2,4}\)?[-.\s]?)?\d{3,4}[-.\s]?\d{3,4}(?![\w/])"
)
# Compact year ranges ("2019-2021") look like phone numbers
YEAR_RANGE_RE = re.compile(r"(?:19|20)\d{2}\s*[-–]\s*(?:19|20)\d{2}")
MIN_PHONE_DIGITS = 7
LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
URL_RE = re.compile(r"https?://\S+|www\.\S+|\b[\w-]+\.(?:com|io|dev|org|net)/\S*", re.IGNORECASE)
# "San Francisco, CA" / "Austin, Texas"
LOCATION_RE = re.compile(r"\b[A-Z][a-z]+(?: [A-Z][a-z]+)*, ?(?:[A-Z]{2}\b|[A-Z][a-z]+)")

# Bullet glyphs that prefix description lines
BULLET_RE = re.compile(r"^[•●▪*-]\s*")

# Date ranges: "Jan 2019 - Present", "2020 - 2023", "03/2018 – 11/2022"
_MONTHS = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|Jun(?:e)?|"
    r"Jul(?:y)?|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_DATED_POINT = rf"(?:\b{_MONTHS}\.?,?\s*\d{{4}}|\d{{1,2}}/\d{{4}})"
_YEAR = r"(?:19|20)\d{2}"
_POINT = rf"(?:{_DATED_POINT}|{_YEAR})"
DATE_RANGE_RE = re.compile(
    rf"(?<![\w/])(?P<start>{_POINT})"
    r"\s*(?:[-–—]|\bto\b)\s*"
    rf"(?P<end>present|current|now|{_POINT})(?![\w/])",
    re.IGNORECASE,
)
# A lone month-year or mm/yyyy; bare years only count inside a range
SINGLE_DATE_RE = re.compile(rf"(?<![\w/])(?P<start>{_DATED_POINT})(?![\w/])", re.IGNORECASE)
CURRENT_RE = re.compile(r"present|current|now", re.IGNORECASE)


class DateSpan(NamedTuple):
    start: str
    end: str  # "" when the text only carries one boundary
    span: tuple[int, int]


def find_date_span(line: str) -> DateSpan | None:
    """Locate the first date range (or single dated point) in a line."""
    match = DATE_RANGE_RE.search(line)
    if match:
        return DateSpan(match.group("start").strip(), match.group("end").strip(), match.span())
    match = SINGLE_DATE_RE.search(line)
    if match:
        return DateSpan(match.group("start").strip(), "", match.span())
    return None


def is_current(end_date: str) -> bool:
    return bool(CURRENT_RE.search(end_date))


def is_bullet(line: str) -> bool:
    return bool(BULLET_RE.match(line.strip()))


def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line.strip(), count=1).strip()


def split_lines(text: str) -> list[str]:
    """Non-empty, trimmed lines of a block of text."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def match_section_header(line: str) -> str | None:
    """Return the section name a line introduces, or None for content lines."""
    if len(line.split()) > MAX_HEADER_TOKENS:
        return None
    for section_name, pattern in SECTION_PATTERNS:
        if pattern.search(line):
            return section_name
    return None


def parse_sections(text: str) -> dict[str, str]:
    """Split resume text into named sections.

    Returns a dict mapping section name -> section text content.
    Lines before the first recognised header go into 'header'. Header
    lines themselves are consumed; a repeated section replaces the
    earlier content under the same name.
    """
    sections: dict[str, str] = {}
    current_section = "header"
    current_lines: list[str] = []

    for line in split_lines(text):
        matched_section = match_section_header(line)
        if matched_section:
            if current_lines:
                sections[current_section] = "\n".join(current_lines)
            current_section = matched_section
            current_lines = []
        else:
            current_lines.append(line)

    if current_lines:
        sections[current_section] = "\n".join(current_lines)

    logger.debug("Segmented sections: %s", sorted(sections))
    return sections


def _first_match(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return match.group().strip() if match else ""


def _find_phone(text: str) -> str:
    for match in PHONE_RE.finditer(text):
        candidate = match.group().strip()
        digits = sum(ch.isdigit() for ch in candidate)
        if digits >= MIN_PHONE_DIGITS and not YEAR_RANGE_RE.fullmatch(candidate):
            return candidate
    return ""


def _looks_like_name(line: str) -> bool:
    if EMAIL_RE.search(line) or PHONE_RE.search(line) or URL_RE.search(line):
        return False
    return 2 < len(line) < 60


def extract_personal_info(header_text: str, full_text: str) -> PersonalInfo:
    """Pull contact details from the header block and the full text.

    Any field that cannot be matched is left empty; this never raises.
    """
    linkedin = _first_match(LINKEDIN_RE, full_text)
    github = _first_match(GITHUB_RE, full_text)

    full_name = next(
        (line for line in split_lines(header_text) if _looks_like_name(line)), ""
    )

    return PersonalInfo(
        full_name=full_name,
        email=_first_match(EMAIL_RE, full_text),
        phone=_find_phone(full_text),
        location=_first_match(LOCATION_RE, full_text),
        linkedin=f"https://www.{linkedin}" if linkedin else "",
        github=f"https://www.{github}" if github else "",
    )
