"""
Command‑line interface for the SmartHealth symptom matcher.
Loads the disease list (falling back to built-in sample data), collects a
patient's symptoms and prints the best-matching diseases.
"""

import click
import logging
import pathlib
import sys
import typing

from stairval.notepad import Notepad, create_notepad

from .engine import DEFAULT_TOP_N, DiagnosisEngine
from .loader import patients_from_table, read_patient_input_file, read_patient_table
from .patient import Patient, parse_age, parse_patient_name
from .report import BANNER, DISCLAIMER, diagnoses_to_frame, format_diagnoses, format_patient_info

DEFAULT_DISEASE_FILE = "disease_symptoms.csv"

LOGGER = logging.getLogger(__name__)


def _disease_file_option(func):
    return click.option(
        "-d",
        "--diseases",
        "disease_path",
        default=DEFAULT_DISEASE_FILE,
        show_default=True,
        envvar="SMARTHEALTH_DISEASES",
        type=click.Path(),
        help="disease list, one '<name>,<symptom>;<symptom>…' record per line",
    )(func)


def _top_n_option(func):
    return click.option(
        "-n",
        "--top-n",
        default=DEFAULT_TOP_N,
        show_default=True,
        envvar="SMARTHEALTH_TOP_N",
        type=click.IntRange(min=1),
        help="maximum number of diagnoses to show per patient",
    )(func)


@click.group()
@click.option("--verbose-logging", is_flag=True, help="Also emit debug logs to stderr")
@click.option(
    "--log-file-path",
    type=click.Path(dir_okay=False, writable=True),
    help="Append timestamped logs to this file",
)
def main(verbose_logging: bool = False, log_file_path: typing.Optional[str] = None):
    """SmartHealth: educational symptom matching. Not a medical diagnostic system."""
    _configure_logging(verbose_logging, log_file_path)


@main.command(name="diagnose")
@_disease_file_option
@_top_n_option
@click.option(
    "-i",
    "--input-file",
    "input_file",
    type=click.Path(dir_okay=False),
    help="patient file: name, age and symptoms on the first three lines",
)
@click.option("--name", default=None, help="patient name (skips the prompt)")
@click.option("--age", default=None, help="patient age in years (skips the prompt)")
@click.option("--symptoms", default=None, help="symptoms separated by ',' or ';' (skips the prompt)")
def diagnose(
    disease_path: str,
    top_n: int,
    input_file: typing.Optional[str] = None,
    name: typing.Optional[str] = None,
    age: typing.Optional[str] = None,
    symptoms: typing.Optional[str] = None,
):
    """
    Diagnose one patient:
      - load the disease list (or the built-in sample data)
      - read the patient from --input-file, the options, or interactive prompts
      - print the top-N matching diseases
    """
    click.echo(BANNER)
    click.echo("Goal: SDG 3 – Good Health and Well-being")
    click.echo(f"Loading data from '{disease_path}'...\n")

    engine = _load_engine(disease_path, create_notepad("diseases"), announce=True)

    patient = _collect_patient(input_file, name, age, symptoms)

    click.echo("")
    for line in format_patient_info(patient):
        click.echo(line)

    results = engine.diagnose(patient, top_n)

    click.echo("")
    for line in format_diagnoses(results):
        click.echo(line)

    click.echo(f"\n{DISCLAIMER}")


@main.command(name="diagnose-batch")
@click.argument("table_path", type=click.Path(exists=True, dir_okay=False))
@_disease_file_option
@_top_n_option
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    help="write results as CSV here instead of printing a table",
)
def diagnose_batch(table_path: str, disease_path: str, top_n: int, output_path: typing.Optional[str] = None):
    """
    Diagnose every patient of a CSV or Excel table with
    'name', 'age' and 'symptoms' columns.
    """
    engine = _load_engine(disease_path, create_notepad("diseases"), announce=False)

    notepad = create_notepad("patients")
    table = read_patient_table(table_path, notepad)
    patients = patients_from_table(table, notepad) if table is not None else []
    _report_issues(notepad)
    if notepad.has_errors(include_subsections=True):
        sys.exit(1)

    results = [(patient, engine.diagnose(patient, top_n)) for patient in patients]
    frame = diagnoses_to_frame(results)

    if output_path:
        frame.to_csv(output_path, index=False)
        click.echo(f"Wrote {len(frame)} result rows for {len(patients)} patients to {output_path}")
    elif frame.empty:
        click.echo("No patients found in table.")
    else:
        click.echo(frame.to_string(index=False))

    click.echo(f"\n{DISCLAIMER}")


@main.command(name="list-diseases")
@_disease_file_option
def list_diseases(disease_path: str):
    """Print every loaded disease record and any problems found while loading."""
    notepad = create_notepad("diseases")
    engine = _load_engine(disease_path, notepad, announce=False)
    for disease in engine.diseases:
        click.echo(str(disease))
    click.echo(f"Loaded {len(engine)} diseases")
    _report_issues(notepad)


def _configure_logging(verbose_logging: bool, log_file_path: typing.Optional[str]) -> None:
    handlers: list[logging.Handler] = []
    if log_file_path:
        handlers.append(logging.FileHandler(log_file_path, mode="a", encoding="utf-8"))
    if verbose_logging:
        handlers.append(logging.StreamHandler(sys.stderr))
    if handlers:
        logging.basicConfig(
            level=logging.DEBUG if verbose_logging else logging.INFO,
            format="%(asctime)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
            force=True,
        )


def _load_engine(disease_path: str, notepad: Notepad, announce: bool) -> DiagnosisEngine:
    # an unreadable disease file is never fatal: fall back to the sample data
    engine = DiagnosisEngine()
    try:
        engine.load_file(disease_path, notepad)
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.info("Failed to read '%s': %s", disease_path, e)
        message = f"⚠ Error: Could not load '{disease_path}'. Using sample data..."
        click.echo(click.style(message, fg="yellow"), err=not announce)
        engine.load_sample_data()
    else:
        if announce:
            click.echo("✔ Loaded disease data successfully.\n")
    return engine


def _collect_patient(
    input_file: typing.Optional[str],
    name: typing.Optional[str],
    age: typing.Optional[str],
    symptoms: typing.Optional[str],
) -> Patient:
    raw_name, raw_age, symptoms_line = "", "", ""

    if input_file:
        try:
            raw_name, raw_age, symptoms_line = read_patient_input_file(pathlib.Path(input_file))
        except (OSError, UnicodeDecodeError):
            click.echo(f"Could not read test input file '{input_file}'. Falling back to interactive mode.")

    # explicit options win over the input file
    if name is not None:
        raw_name = name.strip()
    if age is not None:
        raw_age = age
    if symptoms is not None:
        symptoms_line = symptoms

    if not raw_name and not symptoms_line:
        raw_name = click.prompt("Enter patient name", default="", show_default=False).strip()
        raw_age = click.prompt("Enter age", default="", show_default=False)
        click.echo("\nEnter symptoms (comma separated, e.g., fever, cough, fatigue):")
        symptoms_line = click.prompt("Symptoms", default="", show_default=False)

    patient = Patient(parse_patient_name(raw_name), parse_age(raw_age))
    patient.add_symptoms_from_line(symptoms_line)
    return patient


def _report_issues(notepad: Notepad) -> None:
    # if there were errors, show them
    if notepad.has_errors(include_subsections=True):
        click.echo("Errors found while loading:")
        for err in notepad.errors():
            click.echo(f"- {err.message}")
    # show any warnings but keep going
    if notepad.has_warnings(include_subsections=True):
        click.echo("Warnings found while loading:")
        for w in notepad.warnings():
            click.echo(f"- {w.message}")


if __name__ == "__main__":
    main()
