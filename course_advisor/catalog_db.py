import duckdb

from course_advisor.catalog import list_sorted

TABLES = ["courses", "prerequisites"]


def to_duckdb(table, con=None):
    """Mirror a loaded course table into DuckDB (in-memory unless `con` is given)."""
    if con is None:
        con = duckdb.connect()

    con.execute("CREATE OR REPLACE TABLE courses (course_number TEXT PRIMARY KEY, title TEXT)")
    con.execute("CREATE OR REPLACE TABLE prerequisites (course_number TEXT, position INT, prereq_number TEXT)")

    for number, title in list_sorted(table):
        con.execute("INSERT INTO courses VALUES (?, ?)", (number, title))
        for position, prereq in enumerate(table[number].prerequisites):
            con.execute("INSERT INTO prerequisites VALUES (?, ?, ?)", (number, position, prereq))

    return con


def prerequisite_rows(con, course_number=None):
    """(course, position, prereq, prereq title) rows, ordered by course then position."""
    sql = """
        SELECT p.course_number, p.position, p.prereq_number, c.title
        FROM prerequisites p
        LEFT JOIN courses c ON c.course_number = p.prereq_number
    """
    params = []
    if course_number is not None:
        sql += " WHERE p.course_number = ?"
        params.append(course_number)
    sql += " ORDER BY p.course_number, p.position"
    if params:
        return con.execute(sql, params).fetchall()
    return con.execute(sql).fetchall()


def print_tables(con, limit=1000):
    for table in TABLES:
        print(f"\n=== {table.upper()} ===")
        try:
            results = con.execute(f"SELECT * FROM {table} ORDER BY 1, 2 LIMIT {int(limit)}").fetchall()
            for row in results:
                print(row)
        except duckdb.Error as e:
            print(f"Error querying {table}: {e}")
