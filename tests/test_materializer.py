import pytest

from mapping.materializer import (
    Collect,
    Enrich,
    JoinPlan,
    RowShapeError,
    materialize,
    materialize_list,
)
from models.cohort import Cohort
from models.exercise import Exercise
from models.instructor import Instructor
from models.student import Student
from models.student_exercise import StudentExercise


def instructor(id: int, first: str, cohort_id: int = 1) -> Instructor:
    return Instructor(first, "Last", f"@{first.lower()}", cohort_id, id=id)


def student(id: int, first: str, cohort_id: int = 1) -> Student:
    return Student(first, "Last", f"@{first.lower()}", cohort_id, id=id)


COHORT_INSTRUCTORS = JoinPlan(shape=(Cohort, Instructor), collect=(Collect(1, "instructors"),))
STUDENT_EXERCISES = JoinPlan(shape=(Student, Exercise), collect=(Collect(1, "assigned_exercises"),))
INSTRUCTOR_COHORT = JoinPlan(shape=(Instructor, Cohort), enrich=(Enrich(1, "cohort"),))


def test_one_to_many_groups_children_under_each_cohort():
    rows = [
        (Cohort("A", id=1), instructor(10, "X")),
        (Cohort("A", id=1), instructor(11, "Y")),
        (Cohort("B", id=2), instructor(12, "Z")),
    ]

    cohorts = materialize(rows, COHORT_INSTRUCTORS)

    assert list(cohorts) == [1, 2]
    assert cohorts[1].name == "A"
    assert [i.first_name for i in cohorts[1].instructors] == ["X", "Y"]
    assert [i.first_name for i in cohorts[2].instructors] == ["Z"]


def test_many_to_many_keeps_students_apart_sharing_an_exercise():
    rows = [
        (student(1, "S"), Exercise("E1", "C#", id=5)),
        (student(1, "S"), Exercise("E2", "C#", id=6)),
        (student(2, "T"), Exercise("E1", "C#", id=5)),
    ]

    students = materialize(rows, STUDENT_EXERCISES)

    assert len(students) == 2
    assert [e.name for e in students[1].assigned_exercises] == ["E1", "E2"]
    assert [e.name for e in students[2].assigned_exercises] == ["E1"]
    assert students[1].assigned_exercises[0] == students[2].assigned_exercises[0]
    assert students[1] is not students[2]


def test_interleaved_roots_are_isolated_by_id():
    rows = [
        (student(1, "S"), Exercise("E1", "C#", id=5)),
        (student(2, "T"), Exercise("E2", "C#", id=6)),
        (student(1, "S"), Exercise("E3", "CSS", id=7)),
        (student(2, "T"), Exercise("E4", "HTML", id=8)),
    ]

    students = materialize(rows, STUDENT_EXERCISES)

    assert list(students) == [1, 2]
    assert [e.id for e in students[1].assigned_exercises] == [5, 7]
    assert [e.id for e in students[2].assigned_exercises] == [6, 8]


def test_first_root_instance_stays_resident():
    first = Cohort("A", id=1)
    rows = [
        (first, instructor(10, "X")),
        (Cohort("A", id=1), instructor(11, "Y")),
    ]

    cohorts = materialize(rows, COHORT_INSTRUCTORS)

    assert cohorts[1] is first
    assert len(first.instructors) == 2


def test_missing_child_is_skipped_without_touching_root():
    rows = [
        (Cohort("A", id=1), instructor(10, "X")),
        (Cohort("A", id=1), None),
        (Cohort("B", id=2), None),
    ]

    cohorts = materialize(rows, COHORT_INSTRUCTORS)

    assert [i.id for i in cohorts[1].instructors] == [10]
    assert cohorts[1].name == "A"
    assert cohorts[2].instructors == []


def test_single_valued_enrichment_is_last_write_wins():
    rows = [
        (instructor(1, "Steve"), Cohort("Evening Cohort 1", id=1)),
        (instructor(1, "Steve"), Cohort("Day Cohort 13", id=5)),
    ]

    instructors = materialize(rows, INSTRUCTOR_COHORT)

    assert len(instructors) == 1
    assert instructors[1].cohort.name == "Day Cohort 13"


def test_empty_enrichment_value_keeps_previous_value():
    rows = [
        (instructor(1, "Steve"), Cohort("Evening Cohort 1", id=1)),
        (instructor(1, "Steve"), None),
    ]

    instructors = materialize(rows, INSTRUCTOR_COHORT)

    assert instructors[1].cohort.name == "Evening Cohort 1"


def test_multi_level_fold_fills_every_collection_and_child_enrichment():
    plan = JoinPlan(
        shape=(StudentExercise, Instructor, Student, Exercise, Cohort),
        collect=(Collect(2, "assigned_students"), Collect(1, "assigners")),
        enrich=(Enrich(4, "cohort", target=2), Enrich(3, "exercise")),
    )
    nutshell = Exercise("Nutshell", "JavaScript", id=4)
    rows = [
        (StudentExercise(1, 4, 1, id=1), instructor(1, "Steve"), student(1, "Seth", 7),
         nutshell, Cohort("Day Cohort 26", id=7)),
        (StudentExercise(1, 4, 2, id=1), instructor(2, "Joe"), student(1, "Seth", 7),
         nutshell, Cohort("Day Cohort 26", id=7)),
        (StudentExercise(2, 3, 3, id=2), instructor(3, "Jisie"), student(5, "Jordan", 6),
         Exercise("Dream Team", "C#", id=3), Cohort("Day Cohort 21", id=6)),
    ]

    assignments = materialize(rows, plan)

    first = assignments[1]
    assert first.exercise is nutshell
    assert [s.first_name for s in first.assigned_students] == ["Seth", "Seth"]
    assert all(s.cohort.name == "Day Cohort 26" for s in first.assigned_students)
    assert [i.first_name for i in first.assigners] == ["Steve", "Joe"]
    assert assignments[2].exercise.name == "Dream Team"
    assert assignments[2].assigned_students[0].cohort.id == 6


def test_materialize_consumes_a_generator_once():
    rows = ((Cohort("A", id=1), instructor(n, f"I{n}")) for n in range(1, 4))

    cohorts = materialize_list(rows, COHORT_INSTRUCTORS)

    assert len(cohorts) == 1
    assert [i.id for i in cohorts[0].instructors] == [1, 2, 3]


def test_empty_input_gives_empty_mapping():
    assert materialize([], COHORT_INSTRUCTORS) == {}


def test_each_call_builds_its_own_mapping():
    rows = [(Cohort("A", id=1), instructor(10, "X"))]

    assert materialize(rows, COHORT_INSTRUCTORS) is not materialize([], COHORT_INSTRUCTORS)


@pytest.mark.parametrize(
    "row, message",
    [
        ((instructor(10, "X"), Cohort("A", id=1)), "slot 0"),
        ((Cohort("A", id=1),), "expected 2 slots"),
        ((None, instructor(10, "X")), "root slot is empty"),
        ((Cohort("A"), instructor(10, "X")), "has no id"),
        ("not a row", "expected a tuple"),
    ],
)
def test_malformed_rows_fail_fast(row, message):
    with pytest.raises(RowShapeError, match=message):
        materialize([row], COHORT_INSTRUCTORS)


def test_row_shape_error_is_a_type_error():
    assert issubclass(RowShapeError, TypeError)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"shape": ()},
        {"shape": (Cohort, Instructor), "collect": (Collect(0, "instructors"),)},
        {"shape": (Cohort, Instructor), "collect": (Collect(2, "instructors"),)},
        {"shape": (Cohort, Instructor), "enrich": (Enrich(1, "cohort", target=1),)},
        {"shape": (Cohort, Instructor), "enrich": (Enrich(3, "cohort"),)},
        {"shape": (Cohort, Instructor), "collect": (Collect(1, "instructor"),)},
        {"shape": (Instructor, Cohort), "enrich": (Enrich(1, "cohrt"),)},
        {"shape": (Student, Cohort, Exercise), "enrich": (Enrich(1, "cohort", target=2),)},
    ],
)
def test_invalid_plans_are_rejected(kwargs):
    with pytest.raises(ValueError):
        JoinPlan(**kwargs)


def test_plan_accepts_lists_and_exposes_root_type():
    plan = JoinPlan(shape=[Cohort, Instructor], collect=[Collect(1, "instructors")])

    assert plan.shape == (Cohort, Instructor)
    assert plan.root_type is Cohort


def test_misspelled_attribute_is_rejected_when_plan_is_built():
    with pytest.raises(ValueError, match="'instructor' is not a field of Cohort"):
        JoinPlan(shape=(Cohort, Instructor), collect=(Collect(1, "instructor"),))


def test_missing_child_is_skipped_per_collection():
    plan = JoinPlan(
        shape=(Cohort, Student, Instructor),
        collect=(Collect(1, "students"), Collect(2, "instructors")),
    )
    rows = [
        (Cohort("A", id=1), student(1, "Seth"), None),
        (Cohort("A", id=1), None, instructor(10, "X")),
        (Cohort("A", id=1), student(2, "Robert"), instructor(11, "Y")),
    ]

    cohorts = materialize(rows, plan)

    assert [s.first_name for s in cohorts[1].students] == ["Seth", "Robert"]
    assert [i.first_name for i in cohorts[1].instructors] == ["X", "Y"]
    assert None not in cohorts[1].students
    assert None not in cohorts[1].instructors


def test_repeated_root_keeps_first_seen_scalar_fields():
    rows = [
        (Cohort("A", id=1), instructor(10, "X")),
        (Cohort("B", id=1), instructor(11, "Y")),
    ]

    cohorts = materialize(rows, COHORT_INSTRUCTORS)

    assert cohorts[1].name == "A"
    assert len(cohorts[1].instructors) == 2
