from course_advisor.catalog import CourseCatalog, LoadResult, detail, list_sorted, load
from course_advisor.course import Course, normalize_course_number
from course_advisor.diagnostics import Diagnostic, DiagnosticKind, SourceUnreadable

__version__ = "0.1.0"
