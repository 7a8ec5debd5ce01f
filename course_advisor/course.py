# === course.py ===
import string
from collections import namedtuple

# str.upper() would also fold non-ASCII letters
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def normalize_course_number(value):
    """Trim and ASCII-uppercase a course number ("  cs200 " -> "CS200")."""
    if value is None:
        return ""
    return value.strip().translate(_ASCII_UPPER)


class Course(namedtuple("Course", ["course_number", "title", "prerequisites"])):
    __slots__ = ()

    def __new__(cls, course_number, title, prerequisites=()):
        return super().__new__(cls, course_number, title, tuple(prerequisites))
