# === parser.py ===
from collections import namedtuple

from course_advisor.course import normalize_course_number
from course_advisor.diagnostics import DiagnosticKind

DELIMITER = ","

ParsedRecord = namedtuple("ParsedRecord", ["course_number", "title", "prerequisites"])
Rejected = namedtuple("Rejected", ["reason"])


def is_blank(line):
    return not line.strip()


def split_fields(line):
    # no quoting; "a,b," -> ["a", "b", ""]
    return [field.strip() for field in line.split(DELIMITER)]


def parse_line(line):
    """Parse one non-blank line: courseNumber,title[,prereq]*

    Returns a ParsedRecord with normalized identifiers, or Rejected(kind).
    Empty prerequisite fields are dropped.
    """
    fields = split_fields(line)
    if len(fields) < 2:
        return Rejected(DiagnosticKind.BAD_FORMAT)

    course_number = normalize_course_number(fields[0])
    title = fields[1]
    if not course_number or not title:
        return Rejected(DiagnosticKind.MISSING_REQUIRED_FIELD)

    prerequisites = []
    for field in fields[2:]:
        prereq = normalize_course_number(field)
        if prereq:
            prerequisites.append(prereq)

    return ParsedRecord(course_number, title, tuple(prerequisites))
