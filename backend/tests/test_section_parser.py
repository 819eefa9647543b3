from services.section_parser import (
    extract_personal_info,
    find_date_span,
    is_bullet,
    is_current,
    match_section_header,
    parse_sections,
    split_lines,
    strip_bullet,
)


def test_parse_sections_detects_all(sample_resume_text):
    sections = parse_sections(sample_resume_text)
    assert set(sections) == {"header", "summary", "experience", "education", "skills", "projects"}


def test_parse_sections_content(sample_resume_text):
    sections = parse_sections(sample_resume_text)
    assert "REST APIs" in sections["experience"]
    assert "Computer Science" in sections["education"]
    assert "Python" in sections["skills"]
    assert sections["header"].startswith("Jane Smith")


def test_parse_sections_empty():
    assert parse_sections("") == {}
    assert parse_sections("\n   \n") == {}


def test_parse_sections_without_headers_goes_to_header():
    text = "Jane Smith\nSome line of text\nAnother line"
    assert parse_sections(text) == {"header": "Jane Smith\nSome line of text\nAnother line"}


def test_parse_sections_keeps_every_content_line(sample_resume_text):
    sections = parse_sections(sample_resume_text)
    header_lines = {"Summary", "Experience", "Education", "Skills", "Projects"}
    expected = [line for line in split_lines(sample_resume_text) if line not in header_lines]
    joined = [line for text in sections.values() for line in text.split("\n")]
    assert sorted(joined) == sorted(expected)


def test_long_line_with_keyword_is_not_a_header():
    text = "Experience\nGained experience with distributed systems at scale here"
    sections = parse_sections(text)
    assert sections == {"experience": "Gained experience with distributed systems at scale here"}


def test_first_declared_pattern_wins():
    # Matches both education and experience; education is declared first
    assert match_section_header("Education and Experience") == "education"
    assert match_section_header("Work History") == "experience"
    assert match_section_header("Technical Skills") == "skills"
    assert match_section_header("Just a name") is None


def test_repeated_section_replaces_content():
    text = "Skills\nPython, Go\nSkills\nRust, Zig"
    assert parse_sections(text) == {"skills": "Rust, Zig"}


# --- Personal info ---

def test_extract_personal_info(sample_resume_text):
    sections = parse_sections(sample_resume_text)
    info = extract_personal_info(sections["header"], sample_resume_text)
    assert info.full_name == "Jane Smith"
    assert info.email == "jane.smith@email.com"
    assert info.phone == "(555) 123-4567"
    assert info.location == "San Francisco, CA"
    assert info.linkedin == "https://www.linkedin.com/in/janesmith"
    assert info.github == "https://www.github.com/janesmith"
    assert info.summary == ""


def test_extract_personal_info_skips_contact_lines_for_name():
    header = "john@doe.com\n+1 555 123 4567\nhttps://johndoe.dev\nJohn Doe"
    info = extract_personal_info(header, header)
    assert info.full_name == "John Doe"


def test_year_range_is_not_a_phone_number():
    text = "Jane Doe\nEngineer 2019-2021"
    assert extract_personal_info(text, text).phone == ""


def test_phone_found_after_year_range():
    text = "Jane Doe\nEngineer 2019-2021\nCall 555-123-4567"
    assert extract_personal_info(text, text).phone == "555-123-4567"


def test_extract_personal_info_empty():
    info = extract_personal_info("", "")
    assert info.model_dump() == {
        "full_name": "",
        "email": "",
        "phone": "",
        "location": "",
        "linkedin": "",
        "github": "",
        "portfolio": "",
        "summary": "",
    }


# --- Date and bullet helpers ---

def test_find_date_span_range():
    dates = find_date_span("Engineer | Jan 2020 - Present")
    assert (dates.start, dates.end) == ("Jan 2020", "Present")


def test_find_date_span_numeric_range():
    dates = find_date_span("2015 – 2019")
    assert (dates.start, dates.end) == ("2015", "2019")


def test_find_date_span_single_boundary():
    dates = find_date_span("Graduated May 2019")
    assert (dates.start, dates.end) == ("May 2019", "")


def test_find_date_span_ignores_bare_year_and_words():
    assert find_date_span("Grew visitors from 1000 - 5000") is None
    assert find_date_span("Served 2000 customers") is None
    assert find_date_span("Marketing lead") is None


def test_is_current():
    assert is_current("Present")
    assert is_current("current")
    assert not is_current("Dec 2020")


def test_bullets():
    assert is_bullet("• Built APIs")
    assert is_bullet("- Led team")
    assert is_bullet("* Shipped")
    assert not is_bullet("Built APIs")
    assert strip_bullet("▪  Built APIs") == "Built APIs"
