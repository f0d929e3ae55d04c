# healthsys

healthsys keeps a small set of patient records in memory. It reads the records
from a CSV file. You can search them by name or CPF prefix and list them one page
at a time, from an interactive menu in the terminal.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Start the menu with the path of the patient file:

```
healthsys pacientes.csv
```

If you leave out the path, the command reads `bd_paciente.csv` from the current
directory. If the file cannot be loaded, the command prints the reason and a
warning on standard error. The menu then starts with the records that were loaded,
if any.

The menu accepts exactly one character per line:

- `1`: opens the search submenu. Choose `1` to search by name, `2` to search by
  CPF or `3` to return to the main menu. Then type a prefix. Every patient whose
  field starts with that prefix is shown.
- `5`: lists every patient, five per page. Press Enter to see the next page. Type
  `Q` and press Enter to stop the listing.
- `Q` (or `q`): quits.

The menu ends when the input ends.

## CSV format

The first line is a header and is skipped. Each line after it holds one record:

```
id,cpf,name,age,registration_date
1,CPF-EXAMPLE-01,Maria Example,42,2024-01-15
```

The id and the age are integers. The CPF can be up to 14 characters long and the
name up to 99. Neither can contain a comma. The registration date is read up to
the first whitespace, and at most 10 characters of it are kept.

A line that does not match this form is logged as a warning and skipped. The
database holds at most 100 records. If the file has more, the first 100 are kept
and a warning is printed.

## Library use

```python
from healthsys.database import PatientDatabase, format_header

db = PatientDatabase()
count = db.load_csv("pacientes.csv")
print(format_header())
for patient in db.search_by_name("Mar"):
    print(patient.format_row())
```

`healthsys.database` provides these names:

- `Patient`: a dataclass with the fields `patient_id`, `cpf`, `name`, `age` and
  `registered_on`. `Patient.from_csv_line(line)` parses one record line and raises
  `ValueError` if the line is malformed. `format_row()` returns the record as a
  fixed-width row.
- `PatientDatabase`: an ordered collection that holds at most 100 patients. It
  supports `len()` and iteration.
  - `load_csv(path)` replaces the contents with the records in the file and
    returns the number of records loaded.
  - `search_by_name(prefix)` and `search_by_cpf(prefix)` return the matching
    patients in file order.
- `format_header()`: returns the column header and the separator line that go
  above the rows.
- `CsvLoadError`: raised by `load_csv` if the file cannot be opened or has no
  header line.
- `CapacityExceeded`: a subclass of `CsvLoadError`, raised by `load_csv` if the
  file holds more records than the database can store. The records that fit are
  already loaded when it is raised.

`healthsys.cli` provides the menu functions `show_menu`, `query_patients` and
`print_patient_list`. They take the input and output streams as arguments.
`main(argv=None)` is the entry point of the command.

## Limitations

healthsys only reads and displays records. It cannot add, update or remove
patients, and it never writes anything back to the CSV file.