"""Patient records and an in-memory patient database loaded from CSV."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO

MAX_NAME = 100
MAX_CPF = 15
MAX_DATE = 11
MAX_PATIENTS = 100
MAX_LINE_CSV = 256

SEPARATOR = "-" * 79

logger = logging.getLogger(__name__)

_INT = re.compile(r"\s*([+-]?\d+)")
_CPF = re.compile(r"[^,]{1,%d}" % (MAX_CPF - 1))
_NAME = re.compile(r"[^,]{1,%d}" % (MAX_NAME - 1))
_DATE = re.compile(r"\s*(\S{1,%d})" % (MAX_DATE - 1))


class CsvLoadError(Exception):
    """The patient CSV file could not be read."""


class CapacityExceeded(CsvLoadError):
    """The CSV file holds more records than the database can store."""


def _scan_fields(line: str) -> list:
    """Read id, CPF, name, age and date from a line, stopping at the first mismatch."""
    values: list = []
    match = _INT.match(line)
    if not match:
        return values
    values.append(int(match.group(1)))
    pos = match.end()

    for pattern in (_CPF, _NAME):
        if not line.startswith(",", pos):
            return values
        match = pattern.match(line, pos + 1)
        if not match:
            return values
        values.append(match.group(0))
        pos = match.end()

    if not line.startswith(",", pos):
        return values
    match = _INT.match(line, pos + 1)
    if not match:
        return values
    values.append(int(match.group(1)))
    pos = match.end()

    if not line.startswith(",", pos):
        return values
    match = _DATE.match(line, pos + 1)
    if match:
        values.append(match.group(1))
    return values


def format_header() -> str:
    """Return the column header and separator used in patient listings."""
    title = f"{'ID':<5} {'CPF':<15} {'Nome':<30} {'Idade':<5} {'Data_Cadastro':<15}"
    return f"{title}\n{SEPARATOR}"


@dataclass
class Patient:
    """A single patient record."""

    patient_id: int
    cpf: str
    name: str
    age: int
    registered_on: str

    @classmethod
    def from_csv_line(cls, line: str) -> "Patient":
        """Parse a line of the form ``id,cpf,name,age,date``."""
        values = _scan_fields(line)
        if len(values) != 5:
            items_read = len(values) if values or line.strip() else -1
            raise ValueError(
                "Aviso: Linha mal formatada ou dados incompletos no CSV: "
                f"'{line}' (itens lidos: {items_read})"
            )
        return cls(*values)

    def format_row(self) -> str:
        """Return the record as one fixed-width listing row."""
        return (
            f"{self.patient_id:<5d} {self.cpf:<15} {self.name:<30} "
            f"{self.age:<5d} {self.registered_on:<15}"
        )


def _read_chunks(handle: TextIO, size: int = MAX_LINE_CSV - 1) -> Iterator[str]:
    """Yield the file's lines, splitting any longer than the line buffer."""
    for line in handle:
        while len(line) > size:
            yield line[:size]
            line = line[size:]
        if line:
            yield line


def _strip_line_end(line: str) -> str:
    return line.split("\n", 1)[0].split("\r", 1)[0]


class PatientDatabase:
    """A bounded, ordered collection of patients."""

    capacity = MAX_PATIENTS

    def __init__(self, patients: Iterable[Patient] = ()) -> None:
        self._patients: list[Patient] = list(patients)
        if len(self._patients) > self.capacity:
            raise CapacityExceeded(
                f"at most {self.capacity} patients can be stored"
            )

    def load_csv(self, path) -> int:
        """Replace the contents with the records of a CSV file with a header line.

        Malformed lines are logged and skipped. Returns the number of
        patients loaded. Raises CsvLoadError if the file cannot be read or
        has no header, and CapacityExceeded (after loading as many records
        as fit) if the file holds more than the capacity.
        """
        try:
            handle = open(path, encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            raise CsvLoadError(
                f"Erro ao abrir arquivo CSV: {exc.strerror or exc}"
            ) from exc

        with handle:
            lines = _read_chunks(handle)
            if next(lines, None) is None:
                raise CsvLoadError(
                    "Erro: Arquivo CSV vazio ou erro ao ler o cabeçalho."
                )
            self._patients.clear()
            if len(self._patients) < self.capacity:
                for raw in lines:
                    try:
                        self._patients.append(
                            Patient.from_csv_line(_strip_line_end(raw))
                        )
                    except ValueError as exc:
                        logger.warning("%s", exc)
                    if len(self._patients) >= self.capacity:
                        break
            if len(self._patients) == self.capacity and next(lines, None) is not None:
                raise CapacityExceeded(
                    "Aviso: O arquivo CSV contém mais registros que o maximo "
                    f"permitido ({self.capacity}). Alguns registros podem nao "
                    "ter sido carregados."
                )
        return len(self._patients)

    def search_by_name(self, prefix: str) -> list[Patient]:
        """Return the patients whose name starts with ``prefix``."""
        return [p for p in self._patients if p.name.startswith(prefix)]

    def search_by_cpf(self, prefix: str) -> list[Patient]:
        """Return the patients whose CPF starts with ``prefix``."""
        return [p for p in self._patients if p.cpf.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._patients)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)