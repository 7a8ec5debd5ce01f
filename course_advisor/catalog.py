# === catalog.py ===
import logging
from collections import namedtuple

from course_advisor import diagnostics
from course_advisor.course import Course, normalize_course_number
from course_advisor.diagnostics import SourceUnreadable
from course_advisor.parser import Rejected, is_blank, parse_line
from course_advisor.sources import DEFAULT_ENCODING, DEFAULT_TIMEOUT, line_reader

log = logging.getLogger(__name__)


class LoadResult(namedtuple("LoadResult", ["table", "diagnostics", "error"])):
    __slots__ = ()

    def __new__(cls, table, diagnostics, error=None):
        return super().__new__(cls, table, diagnostics, error)

    @property
    def ok(self):
        return self.error is None


CourseDetail = namedtuple("CourseDetail", ["course", "prerequisites"])  # prerequisites: [(number, title or None)]


def _parsed_lines(lines, found):
    """Yield (line_number, record) for parseable lines; rejections go to found."""
    for line_number, line in enumerate(lines, 1):
        if is_blank(line):
            continue
        record = parse_line(line)
        if isinstance(record, Rejected):
            found.append(diagnostics.for_rejection(line_number, record.reason))
            continue
        yield line_number, record


def collect_course_numbers(lines, found):
    """Pass 1: the universe of course numbers, and the line that owns each one.

    Later lines repeating an accepted course number are reported and ignored.
    """
    owners = {}  # course number -> line number of first occurrence
    for line_number, record in _parsed_lines(lines, found):
        if record.course_number in owners:
            found.append(diagnostics.duplicate_course_number(line_number, record.course_number))
            continue
        owners[record.course_number] = line_number
    return owners


def build_table(lines, owners, found):
    """Pass 2: admit every owning line whose prerequisites are all in the universe."""
    table = {}
    for line_number, record in _parsed_lines(lines, found):
        if owners.get(record.course_number) != line_number:
            continue  # duplicate, already reported in pass 1

        unknown = next((p for p in record.prerequisites if p not in owners), None)
        if unknown is not None:
            found.append(diagnostics.unknown_prerequisite(line_number, record.course_number, unknown))
            continue

        assert record.course_number not in table, f"{record.course_number} admitted twice"
        table[record.course_number] = Course(record.course_number, record.title, record.prerequisites)
    return table


def load(source, timeout=DEFAULT_TIMEOUT, encoding=DEFAULT_ENCODING):
    """Load a course file in two passes.

    `source` is a path, an http(s) URL, or an iterable of lines. Returns a
    LoadResult with a fresh table and one diagnostic per skipped line or
    dropped course. If the source cannot be read the table is empty and
    `error` holds the SourceUnreadable.
    """
    found = []
    try:
        read = line_reader(source, timeout=timeout, encoding=encoding)
        owners = collect_course_numbers(read(), found)
        log.debug("pass 1: %d course numbers accepted", len(owners))
        table = build_table(read(), owners, found)
        log.debug("pass 2: %d courses admitted, %d diagnostics", len(table), len(found))
    except SourceUnreadable as e:
        return LoadResult({}, [], e)
    return LoadResult(table, found)


def list_sorted(table):
    return [(number, table[number].title) for number in sorted(table)]


def detail(table, course_number):
    """Course plus its prerequisites resolved to (number, title); None if unknown."""
    course = table.get(normalize_course_number(course_number))
    if course is None:
        return None
    resolved = []
    for prereq in course.prerequisites:
        other = table.get(prereq)
        resolved.append((prereq, other.title if other else None))
    return CourseDetail(course, resolved)


class CourseCatalog:
    def __init__(self, timeout=DEFAULT_TIMEOUT, encoding=DEFAULT_ENCODING):
        self.courses = {}  # course number -> Course
        self.diagnostics = []
        self.error = None
        self.timeout = timeout
        self.encoding = encoding

    def load(self, source):
        """Replace the current table with a fresh load of `source`."""
        result = load(source, timeout=self.timeout, encoding=self.encoding)
        self.courses = result.table
        self.diagnostics = result.diagnostics
        self.error = result.error
        return result

    @property
    def loaded(self):
        return bool(self.courses)

    def list_sorted(self):
        return list_sorted(self.courses)

    def detail(self, course_number):
        return detail(self.courses, course_number)
