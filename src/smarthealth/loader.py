"""
Input loaders.

- disease list: one `<name>,<symptoms>` record per line
- patient input file: name / age / symptom line on the first three lines
- patient table (CSV or Excel) for batch diagnosis
"""

import logging
import pathlib
import re
import typing
import zipfile

import pandas as pd
from stairval.notepad import Notepad

from .disease import Disease
from .patient import Patient, parse_age, parse_patient_name

LOGGER = logging.getLogger(__name__)

# Disease lines
CHRONIC_PREFIX = "chronic:"
DEFAULT_CHRONIC_DURATION_MONTHS = 12
_DISEASE_SYMPTOM_SEPARATORS = re.compile(r"[;|,]")

# Batch patient tables
PATIENT_KEY_COLUMNS = {"name", "age", "symptoms"}
EXCEL_SUFFIXES = {".xlsx", ".xlsm"}

# Column aliases → canonical patient table columns
RENAME_MAP = {
    "patient": "name",
    "patient_name": "name",
    "years": "age",
    "symptom": "symptoms",
    "reported_symptoms": "symptoms",
}


class PatientInput(typing.NamedTuple):
    """Raw, unparsed values read from a patient input file."""

    name: str
    age: str
    symptoms_line: str


def parse_disease_line(
    line: typing.Optional[str],
    notepad: typing.Optional[Notepad] = None,
    line_number: typing.Optional[int] = None,
) -> typing.Optional[Disease]:
    """
    Parse one disease record.

    The name field ends at the first ','; the rest is split on ';', '|' or ','.
    A name starting with 'chronic:' (any case) yields the chronic variant.
    Returns None for blank lines and lines without a ',' separator.
    """
    if line is None or not line.strip():
        return None

    where = f"Line {line_number}" if line_number is not None else "Line"
    name_field, separator, symptoms_field = line.partition(",")
    if not separator:
        LOGGER.debug("%s: no ',' separator, skipping %r", where, line)
        if notepad is not None:
            notepad.add_warning(f"{where}: missing ',' between disease name and symptoms: {line.strip()!r}")
        return None

    symptoms = [token.strip() for token in _DISEASE_SYMPTOM_SEPARATORS.split(symptoms_field)]
    symptoms = [token for token in symptoms if token]

    name = name_field.strip()
    chronic = name.lower().startswith(CHRONIC_PREFIX)
    if chronic:
        name = name[len(CHRONIC_PREFIX):].strip()

    if not name:
        LOGGER.debug("%s: blank disease name in %r", where, line)
        if notepad is not None:
            notepad.add_warning(f"{where}: blank disease name: {line.strip()!r}")

    if chronic:
        return Disease.chronic_variant(name, symptoms, DEFAULT_CHRONIC_DURATION_MONTHS)
    return Disease(name, symptoms)


def read_disease_lines(
    lines: typing.Iterable[str], notepad: typing.Optional[Notepad] = None
) -> list[Disease]:
    diseases: list[Disease] = []
    for line_number, line in enumerate(lines, start=1):
        disease = parse_disease_line(line, notepad, line_number)
        if disease is not None:
            diseases.append(disease)
    return diseases


def read_disease_file(
    path: typing.Union[str, pathlib.Path], notepad: typing.Optional[Notepad] = None
) -> list[Disease]:
    """
    Read every disease record from a text file.
    Raises OSError (or UnicodeDecodeError) when the file cannot be read.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    diseases = read_disease_lines(lines, notepad)
    LOGGER.info("Read %d disease records from %s", len(diseases), path)
    return diseases


def read_patient_input_file(path: typing.Union[str, pathlib.Path]) -> PatientInput:
    """
    Read the non-interactive patient file:
    line 1 = name, line 2 = age, line 3 = symptoms. Missing lines stay empty.
    """
    with open(path, encoding="utf-8") as handle:
        lines = handle.read().splitlines()
    name = lines[0].strip() if len(lines) > 0 else ""
    age = lines[1].strip() if len(lines) > 1 else ""
    symptoms_line = lines[2] if len(lines) > 2 else ""
    return PatientInput(name, age, symptoms_line)


def load_patient_table(table_path: typing.Union[str, pathlib.Path]) -> pd.DataFrame:
    """
    Read a patient table into a DataFrame:
      - '.xlsx'/'.xlsm' via openpyxl (first sheet), anything else as CSV
      - every cell as a string, missing cells as ''
      - headers normalized to snake_case lowercase
      - aliases from RENAME_MAP applied
    """
    table_path = pathlib.Path(table_path)
    if table_path.suffix.lower() in EXCEL_SUFFIXES:
        df = pd.read_excel(table_path, sheet_name=0, header=0, dtype=str, engine="openpyxl",
                           keep_default_na=False)
    else:
        df = pd.read_csv(table_path, header=0, dtype=str, keep_default_na=False)
    df = df.fillna("")

    # CLEAN & NORMALIZE headers:
    df.columns = (
        df.columns.astype(str)
        .str.strip()
        .str.replace(r"\s*\(.*?\)", "", regex=True)  # drop any "(…)"
        .str.replace(r"\s+", "_", regex=True)  # spaces → underscore
        .str.lower()
    )

    df = df.rename(
        columns={
            orig: target
            for orig, target in RENAME_MAP.items()
            if orig in df.columns and target not in df.columns
        }
    )
    return df


def read_patient_table(
    table_path: typing.Union[str, pathlib.Path], notepad: Notepad
) -> typing.Optional[pd.DataFrame]:
    """
    Like `load_patient_table`, but an unreadable or malformed table becomes a
    notepad error and None instead of an exception.
    """
    try:
        return load_patient_table(table_path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, ValueError,
            OSError, zipfile.BadZipFile) as e:
        LOGGER.debug("Failed to read patient table %s: %s", table_path, e)
        notepad.add_error(f"Patient table {str(table_path)!r}: cannot be read: {e}")
        return None


def patients_from_table(df: pd.DataFrame, notepad: Notepad) -> list[Patient]:
    """
    Build one Patient per table row.
    Missing key columns are an error; rows with neither name nor symptoms are skipped with a warning.
    """
    missing = PATIENT_KEY_COLUMNS - set(df.columns)
    if missing:
        notepad.add_error(f"Patient table: missing required columns: {sorted(missing)}")
        return []

    patients: list[Patient] = []
    for index, row in df.iterrows():
        raw_name = str(row["name"]).strip()
        symptoms_line = str(row["symptoms"])
        if not raw_name and not symptoms_line.strip():
            notepad.add_warning(f"Patient table, row {index}: empty row skipped")
            continue

        patient = Patient(parse_patient_name(raw_name), parse_age(row["age"]))
        patient.add_symptoms_from_line(symptoms_line)
        if not patient.reported_symptoms:
            notepad.add_warning(f"Patient table, row {index}: {patient.name!r} reports no symptoms")
        patients.append(patient)

    LOGGER.info("Built %d patients from table", len(patients))
    return patients
