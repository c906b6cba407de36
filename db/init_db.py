"""
db/init_db.py
-------------
Makes sure the five roster tables exist before any query runs.
A table that is missing is created and seeded with sample rows;
a table that already exists is left untouched, seed rows included.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

COHORT_SQL = """
CREATE TABLE cohort (
    id              SERIAL PRIMARY KEY,
    name            TEXT NOT NULL UNIQUE CHECK (name <> '')
);
"""

INSTRUCTOR_SQL = """
CREATE TABLE instructor (
    id              SERIAL PRIMARY KEY,
    first_name      VARCHAR(80) NOT NULL,
    last_name       VARCHAR(80) NOT NULL,
    slack_handle    VARCHAR(80) NOT NULL,
    specialty       VARCHAR(80),
    cohort_id       INTEGER NOT NULL REFERENCES cohort(id)
);
"""

EXERCISE_SQL = """
CREATE TABLE exercise (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(50) NOT NULL CHECK (name <> ''),
    language        VARCHAR(20) NOT NULL CHECK (language <> '')
);
"""

STUDENT_SQL = """
CREATE TABLE student (
    id              SERIAL PRIMARY KEY,
    first_name      VARCHAR(80) NOT NULL,
    last_name       VARCHAR(80) NOT NULL,
    slack_handle    VARCHAR(80) NOT NULL,
    cohort_id       INTEGER NOT NULL REFERENCES cohort(id)
);
"""

STUDENT_EXERCISE_SQL = """
CREATE TABLE student_exercise (
    id              SERIAL PRIMARY KEY,
    student_id      INTEGER NOT NULL REFERENCES student(id),
    exercise_id     INTEGER NOT NULL REFERENCES exercise(id),
    instructor_id   INTEGER NOT NULL REFERENCES instructor(id)
);
"""

# Parents are resolved by natural key so seeds never depend on generated ids.
_INSTRUCTOR_SEED = """
INSERT INTO instructor (first_name, last_name, slack_handle, specialty, cohort_id)
SELECT %s, %s, %s, %s, c.id FROM cohort c WHERE c.name = %s;
"""

_STUDENT_SEED = """
INSERT INTO student (first_name, last_name, slack_handle, cohort_id)
SELECT %s, %s, %s, c.id FROM cohort c WHERE c.name = %s;
"""

_STUDENT_EXERCISE_SEED = """
INSERT INTO student_exercise (student_id, exercise_id, instructor_id)
SELECT s.id, e.id, i.id
FROM student s, exercise e, instructor i
WHERE s.slack_handle = %s AND e.name = %s AND i.slack_handle = %s;
"""

SEED_COHORTS = [
    "Evening Cohort 1",
    "Day Cohort 10",
    "Day Cohort 11",
    "Day Cohort 12",
    "Day Cohort 13",
    "Day Cohort 21",
    "Day Cohort 26",
]

SEED_INSTRUCTORS = [
    ("Steve", "Brownlee", "@coach", "Dad jokes", "Evening Cohort 1"),
    ("Joe", "Shepherd", "@joes", "Analogies", "Day Cohort 13"),
    ("Jisie", "David", "@jisie", "Student success", "Day Cohort 21"),
]

SEED_EXERCISES = [
    ("Kill Nickelback", "C#"),
    ("Family Dictionary", "C#"),
    ("Dream Team", "C#"),
    ("Nutshell", "JavaScript"),
    ("Dynamic Cards", "JavaScript"),
    ("CSS Variables", "CSS"),
    ("Personality Webpage", "HTML"),
]

SEED_STUDENTS = [
    ("Seth", "Dana", "@sdana", "Day Cohort 26"),
    ("Robert", "Leedy", "@rleedy", "Day Cohort 26"),
    ("Adelaide", "Yoder", "@coderYoder", "Day Cohort 26"),
    ("The", "Dude", "@WheresMyRug", "Day Cohort 13"),
    ("Jordan", "Castello", "@jcast", "Day Cohort 21"),
]

# (student slack handle, exercise name, instructor slack handle)
SEED_STUDENT_EXERCISES = [
    ("@sdana", "Nutshell", "@coach"),
]

# Creation order follows the foreign keys: parents first.
TABLES: list[tuple[str, str, str, list[tuple]]] = [
    ("cohort", COHORT_SQL, "INSERT INTO cohort (name) VALUES (%s);",
     [(name,) for name in SEED_COHORTS]),
    ("instructor", INSTRUCTOR_SQL, _INSTRUCTOR_SEED, SEED_INSTRUCTORS),
    ("exercise", EXERCISE_SQL, "INSERT INTO exercise (name, language) VALUES (%s, %s);",
     SEED_EXERCISES),
    ("student", STUDENT_SQL, _STUDENT_SEED, SEED_STUDENTS),
    ("student_exercise", STUDENT_EXERCISE_SQL, _STUDENT_EXERCISE_SEED,
     SEED_STUDENT_EXERCISES),
]


def table_exists(cur, table: str) -> bool:
    """Return True if `table` is visible on the connection's search path."""
    cur.execute("SELECT to_regclass(%s);", (table,))
    row = cur.fetchone()
    return row is not None and row[0] is not None


def ensure_schema() -> list[str]:
    """
    Create and seed every roster table that does not exist yet.
    Safe to call multiple times; existing tables are never touched.

    Returns:
        Names of the tables that were created by this call, in creation order.
    """
    created: list[str] = []
    conn = get_connection()
    try:
        for table, create_sql, seed_sql, seed_rows in TABLES:
            try:
                with conn.cursor() as cur:
                    if table_exists(cur, table):
                        continue
                    cur.execute(create_sql)
                    cur.executemany(seed_sql, seed_rows)
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to create table '{table}': {e}")
                raise
            created.append(table)
            logger.info(f"Created table '{table}' with {len(seed_rows)} seed rows.")
        return created
    finally:
        release_connection(conn)


if __name__ == "__main__":
    tables = ensure_schema()
    print(f"✅ Created: {', '.join(tables) or 'nothing, schema already present'}")
