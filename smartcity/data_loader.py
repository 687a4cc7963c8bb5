"""Loading the city's CSV data files into rows of string fields."""

from __future__ import annotations

from typing import Optional

_WHITESPACE = " \t\n\r\f\v"


class DataFileError(OSError):
    """Raised when a data file cannot be opened for reading."""


def trim(text: str) -> str:
    """Strip ASCII whitespace from both ends of ``text``."""
    return text.strip(_WHITESPACE)


def count_fields(line: str) -> int:
    """Number of comma-separated fields, ignoring commas inside quotes."""
    if not line:
        return 0
    count = 1
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            count += 1
    return count


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    Quoted fields may contain commas, and a doubled quote inside a quoted
    field stands for a single quote character.
    """
    if not line:
        return []
    expected = count_fields(line)
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    chars = iter(enumerate(line))
    for position, char in chars:
        if char == '"':
            if in_quotes and line[position + 1 : position + 2] == '"':
                current.append('"')
                next(chars, None)
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append(trim("".join(current)))
            current = []
        else:
            current.append(char)
    fields.append(trim("".join(current)))
    fields = fields[:expected]
    fields.extend([""] * (expected - len(fields)))
    return fields


def split_comma_list(text: str) -> list[str]:
    """Split a comma-separated list such as subjects or specialisations."""
    if not text:
        return []
    trimmed = trim(text)
    if len(trimmed) >= 2 and trimmed[0] == '"' and trimmed[-1] == '"':
        trimmed = trimmed[1:-1]
    return [trim(item) for item in trimmed.split(",")]


def load_rows(
    filename: str, min_fields: int, max_rows: Optional[int] = None
) -> list[list[str]]:
    """Read a CSV file with a header line and return its data rows.

    Blank lines and rows with fewer than ``min_fields`` fields are skipped;
    reading stops once ``max_rows`` rows have been collected.
    """
    try:
        handle = open(filename, encoding="utf-8")
    except OSError as exc:
        raise DataFileError(f"Could not open file {filename!r}") from exc
    rows: list[list[str]] = []
    with handle:
        handle.readline()
        for raw in handle:
            if max_rows is not None and len(rows) >= max_rows:
                break
            line = raw.removesuffix("\n")
            if not line:
                continue
            row = parse_csv_line(line)
            if len(row) >= min_fields:
                rows.append(row)
    return rows


def load_schools(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """SchoolID,Name,Sector,Rating,Subjects"""
    return load_rows(filename, 4, max_rows)


def load_hospitals(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """HospitalID,Name,Sector,EmergencyBeds,Specialization"""
    return load_rows(filename, 4, max_rows)


def load_pharmacies(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """PharmacyID,Name,Sector,MedicineName,Formula,Price"""
    return load_rows(filename, 3, max_rows)


def load_stops(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """StopID,Name,Coordinates"""
    return load_rows(filename, 3, max_rows)


def load_buses(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """BusNo,Company,CurrentStop,Route"""
    return load_rows(filename, 3, max_rows)


def load_school_buses(
    filename: str, max_rows: Optional[int] = None
) -> list[list[str]]:
    """BusNo,Company,CurrentStop,SchoolID,MaxCapacity,Route"""
    return load_rows(filename, 6, max_rows)


def load_population(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """CNIC,Name,Gender,Age,Sector,Street,HouseNo,Occupation"""
    return load_rows(filename, 5, max_rows)


def load_malls(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """MallID,Name,Sector,Coordinates,Categories"""
    return load_rows(filename, 4, max_rows)


def load_products(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """ProductID,MallID,ProductName,Category,Price"""
    return load_rows(filename, 5, max_rows)


def load_facilities(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """FacilityID,Name,Type,Sector,Coordinates"""
    return load_rows(filename, 5, max_rows)


def load_airports(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """AirportID,Name,Code,City,Coordinates"""
    return load_rows(filename, 5, max_rows)


def load_railways(filename: str, max_rows: Optional[int] = None) -> list[list[str]]:
    """StationID,Name,Code,City,Coordinates"""
    return load_rows(filename, 5, max_rows)


def format_rows(rows: list[list[str]], title: str) -> str:
    """Describe loaded rows, one line per row, for inspection."""
    lines = [f"=== {title} (Loaded {len(rows)} rows) ==="]
    if not rows:
        lines.append("No data loaded.")
        return "\n".join(lines)
    for number, row in enumerate(rows, start=1):
        fields = " | ".join(f"[{index}]={value}" for index, value in enumerate(row))
        lines.append(f"Row {number}: {fields}")
    return "\n".join(lines)