# === cli.py ===
import argparse
import logging
import sys

from course_advisor.catalog import CourseCatalog
from course_advisor.catalog_db import prerequisite_rows, print_tables, to_duckdb
from course_advisor.config import ConfigError, courses_path, load_config
from course_advisor.course import normalize_course_number

MENU = """
Menu:
  1. Load Data Structure
  2. Print Course List
  3. Print Course
  4. Print Course Table
  9. Exit"""

CHOICES = "1, 2, 3, 4, or 9"


def ask(prompt):
    """input() that returns None on end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def parse_choice(text):
    try:
        return int(text.strip())
    except ValueError:
        return None


def print_diagnostics(result):
    if result.error is not None:
        print(f"ERROR: {result.error}", file=sys.stderr)
    for diagnostic in result.diagnostics:
        print(f"ERROR: {diagnostic}", file=sys.stderr)


def print_course_list(catalog):
    for number, title in catalog.list_sorted():
        print(f"{number}, {title}")


def print_course(catalog, course_number):
    info = catalog.detail(course_number)
    if info is None:
        print(f"Course not found: {normalize_course_number(course_number)}")
        return

    course = info.course
    print(f"{course.course_number}, {course.title}")
    if not info.prerequisites:
        print("Prerequisites: None")
        return

    print("Prerequisites:")
    for number, title in info.prerequisites:
        if title is None:
            print(f"  {number} (missing info)")
        else:
            print(f"  {number}, {title}")


def print_course_table(catalog):
    con = to_duckdb(catalog.courses)
    try:
        print_tables(con)
        print("\n=== PREREQUISITE TITLES ===")
        for number, _, prereq, title in prerequisite_rows(con):
            print(f"  {number} <- {prereq}, {title or '(missing info)'}")
    finally:
        con.close()


def run(file_name="", config=None):
    config = config or load_config()
    catalog = CourseCatalog(timeout=config["request_timeout"], encoding=config["encoding"])

    print("Welcome to ABCU Advising Program")
    file_name = (file_name or courses_path(config)).strip()
    if not file_name:
        file_name = (ask("Enter the course data file name: ") or "").strip()

    while True:
        print(MENU)
        raw = ask("Enter your choice: ")
        if raw is None:
            print("\nGoodbye.")
            return 0

        choice = parse_choice(raw)
        if choice is None:
            print(f"Invalid input. Please enter {CHOICES}.")
            continue

        if choice == 1:
            if not file_name:
                file_name = (ask("Enter the course data file name: ") or "").strip()
            result = catalog.load(file_name)
            print_diagnostics(result)
            if catalog.loaded:
                print(f"Data loaded successfully ({len(catalog.courses)} courses).")
            else:
                print("No courses loaded. Check errors above and try again.")

        elif choice in (2, 3, 4):
            if not catalog.loaded:
                print("Please load data first (Option 1).")
                continue
            if choice == 2:
                print_course_list(catalog)
            elif choice == 3:
                course_number = ask("Enter a course number (e.g., CS200): ")
                if course_number is None:
                    print("\nGoodbye.")
                    return 0
                print_course(catalog, course_number)
            else:
                print_course_table(catalog)

        elif choice == 9:
            print("Goodbye.")
            return 0

        else:
            print(f"Invalid option. Please enter {CHOICES}.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="ABCU advising lookup: load a course file and browse it.")
    parser.add_argument("--file", default="", help="Course data file (path or http(s) URL)")
    parser.add_argument("--config", default=None, help="Path to a JSON config file")
    parser.add_argument("--verbose", action="store_true", help="Log loader details")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2

    return run(args.file, config)


if __name__ == "__main__":
    raise SystemExit(main())
