# deskledger

Three small record keepers. Each one stores its data in plain text files,
one record per line with fields separated by `|`.

- `deskledger.bank`: open accounts, deposit, withdraw, check balances and
  close accounts. Every change is appended to a timestamped transaction log.
- `deskledger.student`: keep student records with marks from 0 to 100 and a
  letter grade (A from 90, B from 80, C from 70, D from 60, F below).
- `deskledger.hospital`: register doctors and patients, book appointments
  and print a revenue report. The bill for an appointment is the doctor's fee
  plus a fixed service charge of 100.

## Installation

```
pip install .
```

## Interactive use

Each record keeper has a menu-driven command. Choose an option by number
and answer the prompts. Invalid input is reported and the menu is shown
again. End of input (Ctrl-D) leaves the menu.

```
deskledger-bank [--data FILE] [--log FILE]
deskledger-student [--file FILE]
deskledger-hospital [--dir DIRECTORY]
```

- `deskledger-bank` keeps accounts in `bank_data.txt` and the log in
  `transactions.txt` by default. Log lines look like
  `[Mon Jan  1 09:30:00 2024] Acc: 42 | Deposit: $50`.
- `deskledger-student` keeps records in `students.txt` by default.
- `deskledger-hospital` keeps `doctors.txt`, `patients.txt` and
  `appointments.txt` in the given directory, the current one by default.

## Library use

The same operations are available from Python. Failures raise exceptions
rather than printing messages.

### Students

```python
from deskledger.student import StudentManager, format_table, grade_for

manager = StudentManager("students.txt")
manager.add_record(1, "Ada Lovelace", 93.5)
manager.update_record(1, "Ada Lovelace", 88)
print(format_table(manager.records()))
manager.delete_record(1)

grade_for(72)  # "C"
```

`Student` has `student_id`, `name`, `marks` and a computed `grade`.
`StudentManager` also offers `id_exists`. Adding an existing ID raises
`DuplicateStudentError`, marks outside 0–100 raise `InvalidMarksError`, and
updating or deleting an unknown ID raises `StudentNotFoundError`. All of them
derive from `StudentError`.

### Bank accounts

```python
from deskledger.bank import AccountManager

bank = AccountManager("bank_data.txt", "transactions.txt")
bank.create_account(42, "Grace Hopper", 100.0)
bank.deposit(42, 50.0)
account = bank.withdraw(42, 30.0)
print(account.balance)  # 120.0
bank.delete_account(42)
```

`AccountManager` also offers `accounts`, `account_exists` and `find`, and
takes an optional `clock` callable used for log timestamps. A duplicate
account number raises `DuplicateAccountError` and an unknown one
`AccountNotFoundError`. A negative initial deposit, or a deposit or
withdrawal that is not positive, raises `InvalidAmountError`; a withdrawal
larger than the balance raises `InsufficientFundsError`. All of them derive
from `BankError`.

### Hospital

```python
from deskledger.hospital import Doctor, HospitalManager, Patient, format_doctors, format_report

hospital = HospitalManager(".")
hospital.add_doctor(Doctor(7, "Grey", "Surgery", 250.0))
hospital.register_patient(Patient(100, "Sam Doe", 34, "Fracture"))
appointment = hospital.book_appointment(7, "100", "01-02-2024")
print(appointment.bill)  # 350.0
print(format_doctors(hospital.doctors()))
print(format_report(hospital.report()))
```

`HospitalManager` also offers `find_doctor` and `appointments`; a `Report`
gives `appointments`, `count` and `total_revenue`. Booking with an unknown
doctor raises `DoctorNotFoundError`, a subclass of `HospitalError`.
Appointment lines without a readable bill are skipped when reading.

## Limitations

- Patients are only appended to `patients.txt`; there is no way to list,
  look up, change or remove them, and bookings do not check that the patient
  exists.
- Doctor IDs are not checked for duplicates, and doctors and appointments
  cannot be changed or removed.
- Files are rewritten in place with no locking, so they should not be shared
  by several running programs at once.

## Running the tests

```
pip install .[test]
pytest
```