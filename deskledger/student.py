"""Student marks kept in a pipe-delimited text file, with letter grades."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

DEFAULT_FILE = "students.txt"

_GRADE_BOUNDS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


class StudentError(Exception):
    """Base class for student record errors."""


class DuplicateStudentError(StudentError):
    """A record with the requested id already exists."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Student with ID {student_id} already exists")
        self.student_id = student_id


class StudentNotFoundError(StudentError, LookupError):
    """No record with the requested id exists."""

    def __init__(self, student_id: int) -> None:
        super().__init__(f"Record ID {student_id} not found")
        self.student_id = student_id


class InvalidMarksError(StudentError, ValueError):
    """Marks lie outside 0 to 100."""


def grade_for(marks: float) -> str:
    """Return the letter grade for the given marks."""
    for bound, letter in _GRADE_BOUNDS:
        if marks >= bound:
            return letter
    return "F"


def _check_marks(marks: float) -> None:
    if not 0 <= marks <= 100:
        raise InvalidMarksError(f"marks must be between 0 and 100, got {marks}")


@dataclass
class Student:
    """One student's id, name and marks."""

    student_id: int
    name: str
    marks: float

    @property
    def grade(self) -> str:
        return grade_for(self.marks)

    def to_record(self) -> str:
        """Return the student as one line of the data file, without newline."""
        return f"{self.student_id}|{self.name}|{self.marks:g}|{self.grade}"

    @classmethod
    def from_record(cls, line: str) -> "Student":
        """Parse one line of the data file."""
        try:
            student_id, rest = line.rstrip("\n").split("|", 1)
            name, rest = rest.split("|", 1)
            marks, _grade = rest.split("|", 1)
            return cls(int(student_id), name, float(marks))
        except ValueError as exc:
            raise StudentError(f"malformed student record: {line!r}") from exc


def format_table(students: Iterable[Student]) -> str:
    """Render students as a fixed-width table with a header."""
    lines = [
        f"{'ID':<10}{'Name':<20}{'Marks':<10}Grade",
        "---------------------------------------------------",
    ]
    lines.extend(
        f"{s.student_id:<10}{s.name:<20}{s.marks:<10g}{s.grade}" for s in students
    )
    return "\n".join(lines)


class StudentManager:
    """Student records stored one per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_FILE) -> None:
        self.path = Path(path)

    def _save(self, students: Iterable[Student]) -> None:
        self.path.write_text(
            "".join(f"{s.to_record()}\n" for s in students), encoding="utf-8"
        )

    def records(self) -> list[Student]:
        """Return every stored record, in file order."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [Student.from_record(line) for line in text.splitlines() if line.strip()]

    def id_exists(self, student_id: int) -> bool:
        return any(s.student_id == student_id for s in self.records())

    def add_record(self, student_id: int, name: str, marks: float) -> Student:
        """Append a new record; the id must be unused and marks within 0 to 100."""
        if self.id_exists(student_id):
            raise DuplicateStudentError(student_id)
        _check_marks(marks)
        student = Student(student_id, name, float(marks))
        with self.path.open("a", encoding="utf-8") as out:
            out.write(f"{student.to_record()}\n")
        return student

    def update_record(self, student_id: int, name: str, marks: float) -> Student:
        """Replace the name and marks of an existing record."""
        students = self.records()
        targets = [s for s in students if s.student_id == student_id]
        if not targets:
            raise StudentNotFoundError(student_id)
        _check_marks(marks)
        for student in targets:
            student.name = name
            student.marks = float(marks)
        self._save(students)
        return targets[0]

    def delete_record(self, student_id: int) -> None:
        students = self.records()
        remaining = [s for s in students if s.student_id != student_id]
        if len(remaining) == len(students):
            raise StudentNotFoundError(student_id)
        self._save(remaining)


_MENU = (
    "\n--- Student Management System (Refined) ---\n"
    "1. Add Student\n2. View All\n3. Update\n4. Delete\n5. Exit"
)


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _parse_float(text: str) -> Optional[float]:
    try:
        return float(text.strip())
    except ValueError:
        return None


def _add(manager: StudentManager) -> None:
    student_id = _parse_int(input("Enter ID: "))
    if student_id is None:
        print("Invalid ID format!")
        return
    if manager.id_exists(student_id):
        print(f"Error: Student with ID {student_id} already exists!")
        return
    name = input("Enter Name: ")
    marks = _parse_float(input("Enter Marks (0-100): "))
    try:
        if marks is None:
            raise InvalidMarksError("marks are not a number")
        manager.add_record(student_id, name, marks)
    except InvalidMarksError:
        print("Invalid marks! Add aborted.")
        return
    print("Record saved successfully!")


def _view(manager: StudentManager) -> None:
    if not manager.path.exists():
        print("Database empty or file missing.", file=sys.stderr)
        return
    print()
    print(format_table(manager.records()))


def _update(manager: StudentManager) -> None:
    student_id = _parse_int(input("ID to update: "))
    if student_id is None:
        print("Invalid input. Enter a number.")
        return
    if not manager.path.exists():
        print("Database not found!")
        return
    current = next((s for s in manager.records() if s.student_id == student_id), None)
    if current is None:
        print(f"Record ID {student_id} not found.")
        return
    print(f"Record Found! Current Name: {current.name}")
    name = input("Enter New Name: ")
    marks = _parse_float(input("Enter New Marks (0-100): "))
    try:
        if marks is None:
            raise InvalidMarksError("marks are not a number")
        manager.update_record(student_id, name, marks)
    except InvalidMarksError:
        print("Invalid marks. Update rejected.")
        return
    print("File successfully updated.")


def _delete(manager: StudentManager) -> None:
    student_id = _parse_int(input("ID to delete: "))
    if student_id is None:
        print("Invalid input. Enter a number.")
        return
    if not manager.path.exists():
        print("Database not found!")
        return
    try:
        manager.delete_record(student_id)
    except StudentNotFoundError:
        print(f"Record ID {student_id} not found.")
        return
    print("Record deleted.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive student records menu."""
    parser = argparse.ArgumentParser(description="Interactive student record manager.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="student data file")
    args = parser.parse_args(argv)
    manager = StudentManager(args.file)
    actions = {1: _add, 2: _view, 3: _update, 4: _delete}
    try:
        while True:
            print(_MENU)
            choice = _parse_int(input("Enter choice: "))
            if choice is None:
                print("Invalid input. Enter a number.")
                continue
            if choice == 5:
                return 0
            action = actions.get(choice)
            if action is None:
                print("Invalid option.")
            else:
                action(manager)
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())