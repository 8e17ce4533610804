"""Filename parsing and date validation.

Invoice filenames follow a fixed hyphen-delimited convention::

    <keyword>-<group>-<establishment>[-<category>...]-<price>-<YYYY>-<MM>-<DD>.<ext>

Fields are assigned by position: the last three tokens form the date, the
fourth-from-last is the price, and anything between the establishment and the
price is the category. A category that itself ends in numeric, hyphen-joined
fragments shifts those positions and misparses; that case is not detected.
"""
import re
from datetime import date
from typing import Sequence

from .models import FilenameFields, Record
from ..utils.exceptions import MalformedFilename, InvalidDate

SEPARATOR = "-"
MIN_TOKENS = 6
ESTABLISHMENT_INDEX = 2

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def strip_extension(name: str) -> str:
    """Drop everything from the last dot of the base name onwards."""
    dot = name.rfind(".")
    if dot < 0:
        return name
    return name[:dot]


def split_tokens(stem: str) -> list[str]:
    """Split an extension-less filename into its hyphen-delimited tokens."""
    return stem.split(SEPARATOR)


def fields_from_tokens(tokens: Sequence[str], source: str = "") -> FilenameFields:
    """
    Assign filename tokens to fields by position.

    Args:
        tokens: Hyphen-delimited tokens of the filename, extension removed
        source: Name used in the error message

    Returns:
        FilenameFields with the date still unvalidated

    Raises:
        MalformedFilename: If there are fewer than MIN_TOKENS tokens, or so
            few that the price would be the establishment token
    """
    n = len(tokens)
    name = source or SEPARATOR.join(tokens)
    if n < MIN_TOKENS:
        raise MalformedFilename(f"file {name} does not have enough parts", filename=name)

    # With exactly MIN_TOKENS tokens the price slot falls on the establishment
    if n - 4 <= ESTABLISHMENT_INDEX:
        raise MalformedFilename(
            f"file {name} does not have enough parts: no price after the establishment",
            filename=name
        )

    return FilenameFields(
        group=tokens[1],
        establishment=tokens[ESTABLISHMENT_INDEX],
        category=SEPARATOR.join(tokens[3:n - 4]),
        price=tokens[n - 4],
        date=SEPARATOR.join(tokens[n - 3:])
    )


def extract_fields(filename: str) -> FilenameFields:
    """Strip the extension from a base name and cut it into fields."""
    stem = strip_extension(filename)
    return fields_from_tokens(split_tokens(stem), source=stem)


def parse_date(text: str, filename: str = "") -> date:
    """
    Parse a strict YYYY-MM-DD calendar date.

    Raises:
        InvalidDate: On wrong width, wrong separators or a non-existent day
    """
    if not DATE_PATTERN.fullmatch(text):
        raise InvalidDate(
            f'invalid date: "{text}" does not match YYYY-MM-DD',
            filename=filename
        )

    year, month, day = (int(part) for part in text.split(SEPARATOR))
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(f'invalid date: "{text}": {e}', filename=filename) from e


def build_record(fields: FilenameFields, filename: str = "") -> Record:
    """Validate the date of parsed fields and freeze them into a Record."""
    return Record(
        group=fields.group,
        date=parse_date(fields.date, filename=filename),
        price=fields.price,
        establishment=fields.establishment,
        category=fields.category
    )


def parse_filename(filename: str) -> Record:
    """Run the parser and the date validator on one base name."""
    return build_record(extract_fields(filename), filename=filename)
