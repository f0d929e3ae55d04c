import pytest

from healthsys.database import (
    MAX_PATIENTS,
    CapacityExceeded,
    CsvLoadError,
    Patient,
    PatientDatabase,
    format_header,
)

HEADER = "ID,CPF,Nome,Idade,Data_Cadastro\n"


def write_csv(tmp_path, body, header=HEADER, newline="\n"):
    path = tmp_path / "patients.csv"
    path.write_bytes((header + body).replace("\n", newline).encode("utf-8"))
    return path


def make_patient(patient_id, name="Ana Souza", cpf="111.222.333-44"):
    return Patient(patient_id, cpf, name, 30, "2024-01-15")


def test_from_csv_line_parses_all_fields():
    p = Patient.from_csv_line("1,111.222.333-44,Ana Souza,30,2024-01-15")
    assert p == Patient(1, "111.222.333-44", "Ana Souza", 30, "2024-01-15")


def test_from_csv_line_truncates_date_to_ten_characters():
    p = Patient.from_csv_line("2,111.222.333-44,Bruno,41,2024-01-15EXTRA")
    assert p.registered_on == "2024-01-15"


def test_from_csv_line_reports_missing_fields():
    with pytest.raises(ValueError, match="itens lidos: 3"):
        Patient.from_csv_line("4,111.222.333-44,Daniel")


def test_from_csv_line_rejects_non_numeric_id():
    with pytest.raises(ValueError, match="itens lidos: 0"):
        Patient.from_csv_line("x,111.222.333-44,Eva,50,2024-01-15")


def test_from_csv_line_rejects_empty_field():
    with pytest.raises(ValueError, match="Linha mal formatada"):
        Patient.from_csv_line("5,,Fabio,50,2024-01-15")


def test_format_row_places_fields_in_columns():
    p = Patient(7, "111.222.333-44", "Ana Souza", 30, "2024-01-15")
    row = p.format_row()
    assert row[:5].rstrip() == "7"
    assert row[6:21].rstrip() == "111.222.333-44"
    assert row[22:52].rstrip() == "Ana Souza"
    assert row[53:58].rstrip() == "30"
    assert row[59:].rstrip() == "2024-01-15"


def test_format_header_has_titles_and_separator():
    title, separator = format_header().split("\n")
    assert title.split() == ["ID", "CPF", "Nome", "Idade", "Data_Cadastro"]
    assert set(separator) == {"-"}


def test_load_csv_skips_header_and_malformed_lines(tmp_path):
    path = write_csv(
        tmp_path,
        "1,111.222.333-44,Ana Souza,30,2024-01-15\n"
        "broken line\n"
        "2,555.666.777-88,Bruno Lima,45,2023-06-01\n",
    )
    db = PatientDatabase()
    assert db.load_csv(path) == 2
    assert [p.name for p in db] == ["Ana Souza", "Bruno Lima"]


def test_load_csv_handles_crlf_line_endings(tmp_path):
    path = write_csv(
        tmp_path, "1,111.222.333-44,Ana Souza,30,2024-01-15\n", newline="\r\n"
    )
    db = PatientDatabase()
    db.load_csv(path)
    assert next(iter(db)).registered_on == "2024-01-15"


def test_load_csv_replaces_existing_contents(tmp_path):
    path = write_csv(tmp_path, "9,111.222.333-44,Zeca,60,2020-02-02\n")
    db = PatientDatabase([make_patient(1), make_patient(2)])
    db.load_csv(path)
    assert [p.patient_id for p in db] == [9]


def test_load_csv_missing_file_raises(tmp_path):
    with pytest.raises(CsvLoadError):
        PatientDatabase().load_csv(tmp_path / "absent.csv")


def test_load_csv_empty_file_raises_and_keeps_contents(tmp_path):
    path = write_csv(tmp_path, "", header="")
    db = PatientDatabase([make_patient(1)])
    with pytest.raises(CsvLoadError, match="vazio"):
        db.load_csv(path)
    assert len(db) == 1


def test_load_csv_exactly_capacity_is_fine(tmp_path):
    body = "".join(
        f"{i},111.222.333-44,Paciente {i},20,2024-01-15\n" for i in range(MAX_PATIENTS)
    )
    db = PatientDatabase()
    assert db.load_csv(write_csv(tmp_path, body)) == MAX_PATIENTS


def test_load_csv_over_capacity_raises_after_loading(tmp_path):
    body = "".join(
        f"{i},111.222.333-44,Paciente {i},20,2024-01-15\n"
        for i in range(MAX_PATIENTS + 1)
    )
    db = PatientDatabase()
    with pytest.raises(CapacityExceeded):
        db.load_csv(write_csv(tmp_path, body))
    assert len(db) == MAX_PATIENTS
    assert [p.patient_id for p in db] == list(range(MAX_PATIENTS))


def test_constructor_rejects_too_many_patients():
    with pytest.raises(CapacityExceeded):
        PatientDatabase(make_patient(i) for i in range(MAX_PATIENTS + 1))


def test_search_by_name_prefix_keeps_order():
    db = PatientDatabase(
        [make_patient(1, "Ana Souza"), make_patient(2, "Bruno"), make_patient(3, "Ana Lima")]
    )
    assert [p.patient_id for p in db.search_by_name("Ana")] == [1, 3]
    assert db.search_by_name("ana") == []


def test_search_by_cpf_prefix():
    db = PatientDatabase(
        [make_patient(1, cpf="111.222.333-44"), make_patient(2, cpf="555.666.777-88")]
    )
    assert [p.patient_id for p in db.search_by_cpf("555")] == [2]


def test_empty_prefix_matches_everyone():
    patients = [make_patient(i) for i in range(4)]
    db = PatientDatabase(patients)
    assert db.search_by_name("") == patients
    assert db.search_by_cpf("") == patients