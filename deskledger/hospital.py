"""Doctors, patients, appointments and billing kept in pipe-delimited text files."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

DOCTOR_FILE = "doctors.txt"
PATIENT_FILE = "patients.txt"
APPOINTMENT_FILE = "appointments.txt"

SERVICE_CHARGE = 100.0


class HospitalError(Exception):
    """Base class for hospital record errors."""


class DoctorNotFoundError(HospitalError, LookupError):
    """No doctor with the requested id is registered."""

    def __init__(self, doctor_id: int) -> None:
        super().__init__(f"doctor {doctor_id} not found")
        self.doctor_id = doctor_id


@dataclass
class Person:
    """Anyone on the hospital's books: an id and a name."""

    id: int
    name: str


@dataclass
class Patient(Person):
    """A registered patient."""

    age: int
    ailment: str

    def to_record(self) -> str:
        """Return the patient as one line of the patient file, without newline."""
        return f"{self.id}|{self.name}|{self.age}|{self.ailment}"


@dataclass
class Doctor(Person):
    """A consulting doctor and the fee they charge."""

    specialty: str
    fees: float

    def to_record(self) -> str:
        """Return the doctor as one line of the doctor file, without newline."""
        return f"{self.id}|{self.name}|{self.specialty}|{self.fees:g}"


@dataclass
class Appointment:
    """A booked consultation with the total bill charged for it."""

    patient_id: str
    doctor_name: str
    date: str
    bill: float

    def to_record(self) -> str:
        """Return the appointment as one line of the appointment file, without newline."""
        return f"{self.patient_id}|{self.doctor_name}|{self.date}|{self.bill:g}"


@dataclass(frozen=True)
class Report:
    """Summary of every recorded appointment."""

    appointments: tuple[Appointment, ...]

    @property
    def count(self) -> int:
        return len(self.appointments)

    @property
    def total_revenue(self) -> float:
        return sum(a.bill for a in self.appointments)


def _fields(line: str, count: int) -> list[str]:
    parts = line.split("|", count - 1)
    return parts + [""] * (count - len(parts))


def _parse_doctor(line: str) -> Doctor:
    doctor_id, name, specialty, fees = _fields(line, 4)
    try:
        return Doctor(int(doctor_id), name, specialty, float(fees))
    except ValueError as exc:
        raise HospitalError(f"malformed doctor record: {line!r}") from exc


def _parse_appointment(line: str) -> Optional[Appointment]:
    patient_id, doctor_name, date, bill = _fields(line, 4)
    bill = bill.split("|", 1)[0]
    if not bill:
        return None
    try:
        value = float(bill)
    except ValueError:
        return None
    return Appointment(patient_id, doctor_name, date, value)


def _lines(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    return [line for line in text.splitlines() if line]


def _append(path: Path, record: str) -> None:
    with path.open("a", encoding="utf-8") as out:
        out.write(f"{record}\n")


def format_doctors(doctors: Iterable[Doctor]) -> str:
    """Render doctors as a fixed-width table with a title and header."""
    lines = [
        "--- Registered Doctors ---",
        f"{'ID':<10}{'Name':<20}{'Specialty':<20}Fees",
    ]
    lines.extend(
        f"{d.id:<10}{d.name:<20}{d.specialty:<20}${d.fees:g}" for d in doctors
    )
    return "\n".join(lines)


def format_report(report: Report) -> str:
    """Render the summary report as fixed-width text."""
    rule = "-" * 60
    lines = [
        "========== HOSPITAL SUMMARY REPORT ==========",
        f"{'Patient ID':<15}{'Doctor':<20}{'Date':<15}Bill Amount",
        rule,
    ]
    lines.extend(
        f"{a.patient_id:<15}{a.doctor_name:<20}{a.date:<15}${a.bill:.2f}"
        for a in report.appointments
    )
    lines.extend(
        [
            rule,
            f"Total Appointments: {report.count}",
            f"Total Revenue Generated: ${report.total_revenue:.2f}",
            "=" * 45,
        ]
    )
    return "\n".join(lines)


class HospitalManager:
    """Doctor, patient and appointment files kept in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.doctor_path = self.directory / DOCTOR_FILE
        self.patient_path = self.directory / PATIENT_FILE
        self.appointment_path = self.directory / APPOINTMENT_FILE

    def add_doctor(self, doctor: Doctor) -> None:
        _append(self.doctor_path, doctor.to_record())

    def doctors(self) -> list[Doctor]:
        """Return every registered doctor, in file order."""
        return [_parse_doctor(line) for line in _lines(self.doctor_path)]

    def find_doctor(self, doctor_id: int) -> Doctor:
        for doctor in self.doctors():
            if doctor.id == doctor_id:
                return doctor
        raise DoctorNotFoundError(doctor_id)

    def register_patient(self, patient: Patient) -> None:
        _append(self.patient_path, patient.to_record())

    def book_appointment(self, doctor_id: int, patient_id: str, date: str) -> Appointment:
        """Book a consultation; the bill is the doctor's fee plus the service charge."""
        doctor = self.find_doctor(doctor_id)
        appointment = Appointment(
            str(patient_id), doctor.name, date, doctor.fees + SERVICE_CHARGE
        )
        _append(self.appointment_path, appointment.to_record())
        return appointment

    def appointments(self) -> list[Appointment]:
        """Return every well-formed appointment; lines without a valid bill are skipped."""
        parsed = (_parse_appointment(line) for line in _lines(self.appointment_path))
        return [a for a in parsed if a is not None]

    def report(self) -> Report:
        return Report(tuple(self.appointments()))


_MENU = (
    "\n--- Hospital Information System ---\n"
    "1. Manage Doctors (Add/View)\n"
    "2. Register New Patient\n"
    "3. Book Appointment & Generate Bill\n"
    "4. View Full Hospital Report\n"
    "5. Exit"
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


def _view_doctors(manager: HospitalManager) -> None:
    if not manager.doctor_path.exists():
        print("No doctors registered.")
        return
    print()
    print(format_doctors(manager.doctors()))


def _add_doctor(manager: HospitalManager) -> None:
    doctor_id = _parse_int(input("Enter Doctor ID: "))
    name = input("Enter Name: Dr. ")
    specialty = input("Enter Specialty: ")
    fees = _parse_float(input("Enter Consultation Fees: "))
    if doctor_id is None or fees is None:
        print("Invalid input.")
        return
    manager.add_doctor(Doctor(doctor_id, name, specialty, fees))
    print("Doctor record added!")


def _register_patient(manager: HospitalManager) -> None:
    patient_id = _parse_int(input("Enter Patient ID: "))
    name = input("Enter Name: ")
    age = _parse_int(input("Enter Age: "))
    ailment = input("Enter Ailment: ")
    if patient_id is None or age is None:
        print("Invalid input.")
        return
    manager.register_patient(Patient(patient_id, name, age, ailment))
    print("Patient registered successfully!")


def _book(manager: HospitalManager) -> None:
    _view_doctors(manager)
    doctor_id = _parse_int(input("\nEnter Doctor ID to book with: "))
    try:
        if doctor_id is None:
            raise DoctorNotFoundError(-1)
        manager.find_doctor(doctor_id)
    except DoctorNotFoundError:
        print("Doctor not found!")
        return
    patient_id = input("Enter Patient ID: ").strip()
    date = input("Enter Date (DD-MM-YYYY): ").strip()
    appointment = manager.book_appointment(doctor_id, patient_id, date)
    print("\n--- Appointment Booked ---")
    print(f"Consultant: Dr. {appointment.doctor_name}\nTotal Fees: ${appointment.bill:.2f}")


def _report(manager: HospitalManager) -> None:
    if not manager.appointment_path.exists():
        print("No data available for reports.")
        return
    print()
    print(format_report(manager.report()))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive hospital menu."""
    parser = argparse.ArgumentParser(description="Interactive hospital information system.")
    parser.add_argument("--dir", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)
    manager = HospitalManager(args.dir)
    try:
        while True:
            print(_MENU)
            choice = _parse_int(input("Selection: "))
            if choice is None:
                continue
            if choice == 1:
                sub = _parse_int(input("1. Add Doctor\n2. View Doctors\nChoice: "))
                if sub == 1:
                    _add_doctor(manager)
                else:
                    _view_doctors(manager)
            elif choice == 2:
                _register_patient(manager)
            elif choice == 3:
                _book(manager)
            elif choice == 4:
                _report(manager)
            elif choice == 5:
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())