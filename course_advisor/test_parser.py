from course_advisor.course import Course, normalize_course_number
from course_advisor.diagnostics import DiagnosticKind
from course_advisor.parser import ParsedRecord, Rejected, is_blank, parse_line, split_fields


def test_normalize_trims_and_uppercases():
    assert normalize_course_number("  cs200 ") == "CS200"
    assert normalize_course_number("Math201\t") == "MATH201"
    assert normalize_course_number(None) == ""


def test_normalize_only_folds_ascii():
    assert normalize_course_number("straße1") == "STRAßE1"


def test_course_prerequisites_are_a_tuple():
    course = Course("CS201", "Data Structures", ["CS101"])
    assert course.prerequisites == ("CS101",)


def test_trailing_comma_gives_empty_field():
    assert split_fields("CS101,Intro,") == ["CS101", "Intro", ""]


def test_blank_lines():
    assert is_blank("")
    assert is_blank("   \t\n")
    assert not is_blank(" x ")


def test_parse_course_with_prerequisites():
    record = parse_line(" csci300 , Introduction to Algorithms , csci200,MATH201\n")
    assert record == ParsedRecord("CSCI300", "Introduction to Algorithms", ("CSCI200", "MATH201"))


def test_parse_keeps_title_case():
    assert parse_line("cs101,intro to CS").title == "intro to CS"


def test_parse_drops_empty_prerequisites_in_order():
    record = parse_line("CS400,Capstone,, cs300 ,,cs100,")
    assert record.prerequisites == ("CS300", "CS100")


def test_parse_trailing_comma_has_no_prerequisites():
    assert parse_line("CS101,Intro,").prerequisites == ()


def test_single_field_is_bad_format():
    assert parse_line("CS101") == Rejected(DiagnosticKind.BAD_FORMAT)


def test_missing_course_number():
    assert parse_line("  ,Intro") == Rejected(DiagnosticKind.MISSING_REQUIRED_FIELD)


def test_missing_title():
    assert parse_line("CS101,   ,CS100") == Rejected(DiagnosticKind.MISSING_REQUIRED_FIELD)
