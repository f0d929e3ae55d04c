"""Interactive menu for querying and listing patients."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from healthsys.database import (
    SEPARATOR,
    CsvLoadError,
    PatientDatabase,
    format_header,
)

DEFAULT_CSV = "bd_paciente.csv"
RECORDS_PER_PAGE = 5
MAX_TERM = 99

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def show_menu(output: TextIO) -> None:
    """Write the main menu."""
    output.write(
        "\nHealthSys - Gerenciamento de Pacientes (Parte I)\n"
        "1 - Consultar paciente\n"
        "5 - Imprimir lista de pacientes\n"
        "Escolha uma opção: "
    )
    output.flush()


def _read_choice(input_stream: TextIO) -> int | None:
    """Read a number from the next non-blank line; None if it does not start with one."""
    while True:
        line = input_stream.readline()
        if not line:
            raise EOFError
        if line.strip():
            break
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def query_patients(db: PatientDatabase, input_stream: TextIO, output: TextIO) -> None:
    """Run the search submenu until the user returns or input ends."""
    while True:
        output.write(
            "\n[Sistema] Escolha o modo de consulta:\n"
            "1 - Por nome\n"
            "2 - Por CPF\n"
            "3 - Retornar ao menu principal\n"
            "Opção: "
        )
        output.flush()
        try:
            choice = _read_choice(input_stream)
        except EOFError:
            return
        if choice is None:
            output.write("Entrada inválida. Por favor, digite um número.\n")
            continue
        if choice == 3:
            return
        if choice not in (1, 2):
            output.write("Opção inválida. Tente novamente.\n")
            continue

        field = "nome" if choice == 1 else "CPF"
        output.write(f"[Sistema] Digite o {field} para busca (prefixo): ")
        output.flush()
        line = input_stream.readline()
        if not line:
            output.write("Erro ao ler termo de busca.\n")
            return
        term = line.split("\n", 1)[0][:MAX_TERM]

        search = db.search_by_name if choice == 1 else db.search_by_cpf
        output.write(format_header() + "\n")
        found = search(term)
        for patient in found:
            output.write(patient.format_row() + "\n")
        if not found:
            output.write(f"Nenhum paciente encontrado com o {field} informado.\n")
        output.write(SEPARATOR + "\n")


def print_patient_list(db: PatientDatabase, input_stream: TextIO, output: TextIO) -> None:
    """List every patient, pausing after each page of records."""
    output.write("\n[Sistema] Imprimindo lista de pacientes...\n")
    total = len(db)
    if total == 0:
        output.write("Nenhum paciente cadastrado.\n")
        return

    output.write(format_header() + "\n")
    for count, patient in enumerate(db, start=1):
        output.write(patient.format_row() + "\n")
        if count % RECORDS_PER_PAGE == 0 and count < total:
            output.write(
                "Pressione Enter para continuar ou Q e Enter para sair da listagem..."
            )
            output.flush()
            answer = input_stream.readline()
            if answer[:1].upper() == "Q":
                output.write(SEPARATOR + "\n")
                return
            output.write(format_header() + "\n")
    output.write(SEPARATOR + "\n")
    output.write("Fim da lista de pacientes.\n")


def main(argv=None) -> int:
    """Load the patient file and run the main menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="healthsys", description="Consulta e listagem de pacientes."
    )
    parser.add_argument("csv", nargs="?", default=DEFAULT_CSV, help="arquivo CSV de pacientes")
    args = parser.parse_args(argv)

    stdin, stdout = sys.stdin, sys.stdout
    db = PatientDatabase()
    try:
        db.load_csv(args.csv)
    except CsvLoadError as exc:
        print(exc, file=sys.stderr)
        print(
            f"Aviso: Não foi possível carregar todos os dados de '{args.csv}'.",
            file=sys.stderr,
        )

    while True:
        show_menu(stdout)
        line = stdin.readline()
        if not line:
            stdout.write("Erro ao ler opção ou fim de entrada.\n")
            break
        option = line[:-1] if line.endswith("\n") else line
        if len(option) != 1:
            stdout.write("Opção inválida. Por favor, digite apenas '1', '5' ou 'Q' :)\n")
            continue
        option = option.upper()
        if option == "1":
            query_patients(db, stdin, stdout)
        elif option == "5":
            print_patient_list(db, stdin, stdout)
        elif option == "Q":
            stdout.write("Desligando...\n")
            return 0
        else:
            stdout.write("Opção inválida. Tente novamente.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())