import pytest

from deskledger.hospital import (
    SERVICE_CHARGE,
    Appointment,
    Doctor,
    DoctorNotFoundError,
    HospitalError,
    HospitalManager,
    Patient,
    Report,
    format_doctors,
    format_report,
    main,
)


@pytest.fixture
def manager(tmp_path):
    return HospitalManager(tmp_path)


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_doctor_record_format():
    assert Doctor(7, "Ada", "Cardiology", 500.0).to_record() == "7|Ada|Cardiology|500"


def test_patient_record_format():
    assert Patient(3, "Bob", 42, "Flu").to_record() == "3|Bob|42|Flu"


def test_appointment_record_format():
    assert Appointment("3", "Ada", "01-02-2024", 600.0).to_record() == "3|Ada|01-02-2024|600"


def test_add_and_list_doctors_round_trip(manager):
    doctors = [Doctor(1, "Ada", "Cardiology", 500.0), Doctor(2, "Lin", "Neurology", 750.5)]
    for doctor in doctors:
        manager.add_doctor(doctor)
    assert manager.doctors() == doctors
    assert manager.find_doctor(2) == doctors[1]


def test_no_doctors_without_file(manager):
    assert manager.doctors() == []


def test_find_missing_doctor_raises(manager):
    manager.add_doctor(Doctor(1, "Ada", "Cardiology", 500.0))
    with pytest.raises(DoctorNotFoundError):
        manager.find_doctor(9)


def test_malformed_doctor_raises(manager):
    manager.doctor_path.write_text("abc|Ada|Cardiology|500\n", encoding="utf-8")
    with pytest.raises(HospitalError):
        manager.doctors()


def test_register_patient_writes_record(manager):
    manager.register_patient(Patient(3, "Bob", 42, "Flu"))
    assert manager.patient_path.read_text(encoding="utf-8") == "3|Bob|42|Flu\n"


def test_book_appointment_adds_service_charge(manager):
    manager.add_doctor(Doctor(1, "Ada", "Cardiology", 500.0))
    appointment = manager.book_appointment(1, "3", "01-02-2024")
    assert appointment.bill == 500.0 + SERVICE_CHARGE
    assert appointment.doctor_name == "Ada"
    assert manager.appointments() == [appointment]


def test_book_with_missing_doctor_writes_nothing(manager):
    with pytest.raises(DoctorNotFoundError):
        manager.book_appointment(5, "3", "01-02-2024")
    assert manager.appointments() == []
    assert not manager.appointment_path.exists()


def test_malformed_appointment_lines_skipped(manager):
    manager.appointment_path.write_text(
        "1|Ada|01-01-2024|600\n2|Lin|02-01-2024|\n3|Ada|03-01-2024|abc\n\n",
        encoding="utf-8",
    )
    appointments = manager.appointments()
    assert [a.patient_id for a in appointments] == ["1"]


def test_report_totals_match_appointments(manager):
    manager.add_doctor(Doctor(1, "Ada", "Cardiology", 500.0))
    manager.add_doctor(Doctor(2, "Lin", "Neurology", 250.0))
    manager.book_appointment(1, "3", "01-02-2024")
    manager.book_appointment(2, "4", "02-02-2024")
    report = manager.report()
    assert report.count == 2
    assert report.total_revenue == sum(a.bill for a in manager.appointments())


def test_format_doctors_layout():
    text = format_doctors([Doctor(1, "Ada", "Cardiology", 500.0)])
    lines = text.splitlines()
    assert lines[0] == "--- Registered Doctors ---"
    assert lines[1].startswith("ID        Name")
    assert lines[2] == f"{'1':<10}{'Ada':<20}{'Cardiology':<20}$500"


def test_format_report_layout():
    report = Report((Appointment("3", "Ada", "01-02-2024", 600.0),))
    lines = format_report(report).splitlines()
    assert lines[0] == "========== HOSPITAL SUMMARY REPORT =========="
    assert lines[3] == f"{'3':<15}{'Ada':<20}{'01-02-2024':<15}$600.00"
    assert "Total Appointments: 1" in lines
    assert "Total Revenue Generated: $600.00" in lines


def test_empty_report():
    report = Report(())
    assert report.count == 0
    assert report.total_revenue == 0
    assert "Total Appointments: 0" in format_report(report)


def test_main_books_appointment(tmp_path, monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["1", "1", "1", "Ada", "Cardiology", "500", "3", "1", "3", "01-02-2024", "5"],
    )
    assert main(["--dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Doctor record added!" in out
    assert "Consultant: Dr. Ada" in out
    assert HospitalManager(tmp_path).report().count == 1


def test_main_report_without_data(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["4"])
    assert main(["--dir", str(tmp_path)]) == 0
    assert "No data available for reports." in capsys.readouterr().out


def test_main_unknown_doctor(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["3", "9", "5"])
    assert main(["--dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "No doctors registered." in out
    assert "Doctor not found!" in out