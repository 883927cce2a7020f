from services.section_parser import (
    EDUCATION_EXIT,
    EDUCATION_KEYWORDS,
    SKILLS_EXIT,
    SKILLS_KEYWORDS,
    ScanState,
    SectionScanner,
    extract_personal_info,
    find_date_range,
    is_date_range_line,
    mentions_location,
    section_lines,
    split_lines,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567
Austin, TX

Skills
Python, JavaScript, React

Experience
Senior Software Engineer | TechCorp | 2021 - Present
"""


def test_split_lines_drops_blank_and_trims():
    assert split_lines("  a \n\n\t\n b  \n") == ["a", "b"]
    assert split_lines("") == []


class TestSectionScanner:
    def test_collects_until_foreign_header(self):
        lines = ["Skills", "Python, React", "Experience", "Dev at X"]
        assert section_lines(lines, SKILLS_KEYWORDS, SKILLS_EXIT) == ["Python, React"]

    def test_done_is_terminal(self):
        lines = ["Skills", "Python", "Experience", "Dev at X", "Skills", "Go"]
        assert section_lines(lines, SKILLS_KEYWORDS, SKILLS_EXIT) == ["Python"]

    def test_repeated_header_inside_section_is_skipped(self):
        lines = ["Skills", "Python", "Technical Skills", "Docker", "Education"]
        assert section_lines(lines, SKILLS_KEYWORDS, SKILLS_EXIT) == ["Python", "Docker"]

    def test_entry_checked_before_exit(self):
        lines = ["Skills", "Python", "Skills and Experience", "Docker"]
        assert section_lines(lines, SKILLS_KEYWORDS, SKILLS_EXIT) == ["Python", "Docker"]

    def test_missing_header_yields_nothing(self):
        assert section_lines(["Python", "Docker"], SKILLS_KEYWORDS, SKILLS_EXIT) == []

    def test_case_insensitive_substring_match(self):
        lines = ["ACADEMIC BACKGROUND:", "State University", "WORK EXPERIENCE"]
        assert section_lines(lines, EDUCATION_KEYWORDS, EDUCATION_EXIT) == ["State University"]

    def test_state_transitions(self):
        scanner = SectionScanner(SKILLS_KEYWORDS, SKILLS_EXIT)
        assert scanner.state is ScanState.BEFORE
        assert scanner.feed("John Doe") is False
        assert scanner.feed("Skills") is False
        assert scanner.state is ScanState.IN_SECTION
        assert scanner.feed("Python") is True
        assert scanner.feed("Education") is False
        assert scanner.state is ScanState.DONE
        assert scanner.feed("Skills") is False
        assert scanner.state is ScanState.DONE


class TestPersonalInfo:
    def test_john_doe(self):
        info = extract_personal_info(["John Doe", "john@x.com", "+1 555-123-4567"])
        assert info.name == "John Doe"
        assert info.email == "john@x.com"
        assert "555-123-4567" in info.phone

    def test_sample_resume(self):
        info = extract_personal_info(split_lines(SAMPLE_RESUME))
        assert info.name == "John Doe"
        assert info.email == "john.doe@email.com"
        assert info.phone == "(555) 123-4567"
        assert info.location == "Austin, TX"

    def test_name_skips_resume_heading_and_long_lines(self):
        lines = ["Resume", "Curriculum vitae of a very experienced person", "Jane Roe"]
        assert extract_personal_info(lines).name == "Jane Roe"

    def test_short_digit_runs_are_not_phones(self):
        info = extract_personal_info(["Jane Roe", "Class of 2019 - 2020"])
        assert info.phone is None

    def test_location_from_contact_segment(self):
        lines = ["Jane Roe", "Jane Roe | San Francisco, CA | jane@x.com"]
        assert extract_personal_info(lines).location == "San Francisco, CA"

    def test_nothing_found(self):
        info = extract_personal_info([])
        assert info.name is None
        assert info.email is None
        assert info.phone is None
        assert info.location is None


def test_mentions_location():
    assert mentions_location("Springfield, IL")
    assert mentions_location("Remote")
    assert mentions_location("Bangalore, India")
    assert not mentions_location("Acme Corporation")


def test_date_ranges():
    assert find_date_range("Software Engineer | Jan 2020 - Present") == "Jan 2020 - Present"
    assert find_date_range("March 2018 to Nov 2022") == "March 2018 to Nov 2022"
    assert find_date_range("No dates here") is None
    assert is_date_range_line("2019 - 2021")
    assert is_date_range_line("(2019 - 2021)")
    assert not is_date_range_line("Software Engineer | 2019 - 2021")
