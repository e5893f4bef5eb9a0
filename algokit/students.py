"""A small student register with an interactive menu."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, fields, replace

COURSES_PER_STUDENT = 5
MAX_STUDENTS = 50


@dataclass(frozen=True)
class Student:
    """One student's record."""

    first_name: str
    last_name: str
    roll: int
    cgpa: float
    courses: tuple[int, ...]

    def __post_init__(self) -> None:
        courses = tuple(self.courses)
        if len(courses) != COURSES_PER_STUDENT:
            raise ValueError(f"a student takes exactly {COURSES_PER_STUDENT} courses")
        object.__setattr__(self, "courses", courses)


_FIELDS = frozenset(f.name for f in fields(Student))


class StudentRegistry:
    """Holds up to ``capacity`` students in the order they were added."""

    def __init__(self, capacity: int = MAX_STUDENTS) -> None:
        self.capacity = capacity
        self._students: list[Student] = []

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def add(self, student: Student) -> None:
        """Add a student; raises ValueError when the register is full."""
        if len(self._students) >= self.capacity:
            raise ValueError("the register is full")
        self._students.append(student)

    def find_by_roll(self, roll: int) -> Student | None:
        """Return the first student with this roll number, or None."""
        return next((s for s in self._students if s.roll == roll), None)

    def find_by_first_name(self, name: str) -> list[Student]:
        """Return every student with this first name."""
        return [s for s in self._students if s.first_name == name]

    def find_by_course(self, course_id: int) -> list[Student]:
        """Return every student enrolled in this course."""
        return [s for s in self._students if course_id in s.courses]

    def remaining(self) -> int:
        """Return how many more students fit in the register."""
        return self.capacity - len(self._students)

    def delete(self, roll: int) -> int:
        """Remove every student with this roll number; return how many were removed."""
        before = len(self._students)
        self._students = [s for s in self._students if s.roll != roll]
        return before - len(self._students)

    def update(self, roll: int, **kwargs) -> int:
        """Change fields of every student with this roll number; return how many changed.

        Raises TypeError for a keyword that is not a student field.
        """
        unknown = set(kwargs) - _FIELDS
        if unknown:
            raise TypeError(f"unknown student fields: {', '.join(sorted(unknown))}")
        changed = 0
        for index, student in enumerate(self._students):
            if student.roll == roll:
                self._students[index] = replace(student, **kwargs)
                changed += 1
        return changed


_MENU = """The Task that you want to perform
1. Add the Student Details
2. Find the Student Details by Roll Number
3. Find the Student Details by First Name
4. Find the Student Details by Course Id
5. Find the Total number of Students
6. Delete the Students Details by Roll Number
7. Update the Students Details by Roll Number
8. To Exit
Enter your choice to find the task"""

_UPDATE_MENU = """1. first name
2. last name
3. roll no.
4. CGPA
5. courses"""


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream) -> None:
        self._words = (word for line in stream for word in line.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError from None

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())


def _describe(student: Student) -> str:
    lines = [
        "The Students Details are",
        f"The First name is {student.first_name}",
        f"The Last name is {student.last_name}",
        f"The Roll Number is {student.roll}",
        f"The CGPA is {student.cgpa:f}",
    ]
    lines += [f"The course ID are {course}" for course in student.courses]
    return "\n".join(lines)


def _add(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Add the Students Details")
    print("-------------------------")
    print("Enter the first name of student")
    first = tokens.word()
    print("Enter the last name of student")
    last = tokens.word()
    print("Enter the Roll Number")
    roll = tokens.integer()
    print("Enter the CGPA you obtained")
    cgpa = tokens.number()
    print("Enter the course ID of each course")
    courses = tuple(tokens.integer() for _ in range(COURSES_PER_STUDENT))
    try:
        registry.add(Student(first, last, roll, cgpa, courses))
    except ValueError as error:
        print(error)


def _find_roll(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Enter the Roll Number of the student")
    student = registry.find_by_roll(tokens.integer())
    print(_describe(student) if student else "The Roll Number not Found")


def _find_name(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Enter the First Name of the student")
    found = registry.find_by_first_name(tokens.word())
    print("\n".join(map(_describe, found)) if found else "The First Name not Found")


def _find_course(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Enter the course ID ")
    found = registry.find_by_course(tokens.integer())
    print("\n".join(map(_describe, found)) if found else "The Course ID not Found")


def _total(registry: StudentRegistry, tokens: _Tokens) -> None:
    print(f"The total number of Student is {len(registry)}")
    print(f"\n you can have a max of {registry.capacity} students")
    print(f"you can have {registry.remaining()} more students")


def _delete(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Enter the Roll Number which you want to delete")
    if registry.delete(tokens.integer()):
        print("The Roll Number is removed Successfully")
    else:
        print("The Roll Number not Found")


def _update(registry: StudentRegistry, tokens: _Tokens) -> None:
    print("Enter the roll number to update the entry : ")
    roll = tokens.integer()
    if registry.find_by_roll(roll) is None:
        print("The Roll Number not Found")
        return
    print(_UPDATE_MENU)
    choice = tokens.integer()
    readers = {
        1: ("first_name", "Enter the new first name : ", tokens.word),
        2: ("last_name", "Enter the new last name : ", tokens.word),
        3: ("roll", "Enter the new roll number : ", tokens.integer),
        4: ("cgpa", "Enter the new CGPA : ", tokens.number),
        5: (
            "courses",
            "Enter the new courses ",
            lambda: tuple(tokens.integer() for _ in range(COURSES_PER_STUDENT)),
        ),
    }
    if choice in readers:
        field, prompt, read = readers[choice]
        print(prompt)
        registry.update(roll, **{field: read()})
    print("UPDATED SUCCESSFULLY.")


_ACTIONS = {
    1: _add,
    2: _find_roll,
    3: _find_name,
    4: _find_course,
    5: _total,
    6: _delete,
    7: _update,
}


def main(argv=None) -> int:
    """Run the menu-driven register on standard input and output."""
    registry = StudentRegistry()
    tokens = _Tokens(sys.stdin)
    try:
        while True:
            print(_MENU)
            try:
                choice = tokens.integer()
            except ValueError:
                continue
            if choice == 8:
                return 0
            action = _ACTIONS.get(choice)
            if action is not None:
                try:
                    action(registry, tokens)
                except ValueError:
                    print("Invalid input")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())