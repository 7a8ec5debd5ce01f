# === diagnostics.py ===
from collections import namedtuple
from enum import Enum


class DiagnosticKind(Enum):
    SOURCE_UNREADABLE = "source_unreadable"
    BAD_FORMAT = "bad_format"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    DUPLICATE_COURSE_NUMBER = "duplicate_course_number"
    UNKNOWN_PREREQUISITE = "unknown_prerequisite"


class Diagnostic(namedtuple("Diagnostic", ["line_number", "kind", "message", "course_number", "prerequisite"])):
    """One skipped line or dropped course. Never fatal to a load."""
    __slots__ = ()

    def __str__(self):
        return self.message


def bad_format(line_number):
    return Diagnostic(line_number, DiagnosticKind.BAD_FORMAT,
                      f"Bad format on line {line_number} (skipping line)", None, None)


def missing_required_field(line_number):
    return Diagnostic(line_number, DiagnosticKind.MISSING_REQUIRED_FIELD,
                      f"Missing course number/title on line {line_number} (skipping line)", None, None)


def duplicate_course_number(line_number, course_number):
    return Diagnostic(line_number, DiagnosticKind.DUPLICATE_COURSE_NUMBER,
                      f"Duplicate course number '{course_number}' on line {line_number} (skipping line)",
                      course_number, None)


def unknown_prerequisite(line_number, course_number, prerequisite):
    return Diagnostic(line_number, DiagnosticKind.UNKNOWN_PREREQUISITE,
                      f"Line {line_number} invalid prerequisite '{prerequisite}' "
                      f"for course '{course_number}' (skipping course)",
                      course_number, prerequisite)


def for_rejection(line_number, kind):
    if kind is DiagnosticKind.BAD_FORMAT:
        return bad_format(line_number)
    if kind is DiagnosticKind.MISSING_REQUIRED_FIELD:
        return missing_required_field(line_number)
    raise ValueError(f"Not a line rejection: {kind}")


class SourceUnreadable(Exception):
    """The whole source could not be opened or read."""

    kind = DiagnosticKind.SOURCE_UNREADABLE

    def __init__(self, source, cause=None):
        self.source = source
        self.cause = cause
        super().__init__(f"Could not open file: {source}")
