"""Decoding of 14-digit Egyptian national identifiers.

Layout (0-based positions)::

    C YY MM DD GG ... S .
    0 12 34 56 78     12

C is the century code, YY/MM/DD the birth date, GG the governorate and S the
gender digit (odd for male, even for female).
"""

import re

from recruitment_portal.core.exceptions import (
    InvalidDate,
    InvalidFormat,
    UnknownCentury,
    UnknownGovernorate,
)
from recruitment_portal.schemas.enums import Century, Gender, Governorate
from recruitment_portal.schemas.national_id_schema import DecodedId

NATIONAL_ID_PATTERN = re.compile(r"^\d{14}$")

GENDER_DIGIT = 12


def is_well_formed(national_id: str) -> bool:
    # re's \d also matches non-ASCII digits
    return bool(NATIONAL_ID_PATTERN.match(national_id or "")) and national_id.isascii()


def gender_of(national_id: str) -> Gender:
    if not is_well_formed(national_id):
        raise InvalidFormat(national_id)
    return Gender.MALE if int(national_id[GENDER_DIGIT]) % 2 else Gender.FEMALE


def build_national_id(
    year: int,
    month: int,
    day: int,
    governorate: Governorate,
    gender: Gender = Gender.MALE,
    serial: int = 0,
    check_digit: int = 1,
) -> str:
    """Assemble an identifier with the given fields (used for seeding)."""
    century = next((c for c in Century if c.base_year <= year < c.base_year + 100), None)
    if century is None:
        raise ValueError(f"Year {year} cannot be encoded")
    # serial is 3 digits; the gender digit follows it
    gender_digit = (serial % 5) * 2 + (1 if gender is Gender.MALE else 0)
    return (
        f"{century.value}{year - century.base_year:02d}{month:02d}{day:02d}"
        f"{governorate.value}{serial % 1000:03d}{gender_digit}{check_digit % 10}"
    )


def decode(national_id: str) -> DecodedId:
    """Decode ``national_id`` or raise a :class:`DecodeError` subclass.

    Month and day are range-checked only; calendar correctness (e.g. 31
    February) is not verified.
    """
    if not isinstance(national_id, str) or not is_well_formed(national_id):
        raise InvalidFormat(national_id if isinstance(national_id, str) else None)

    try:
        century = Century(national_id[0])
    except ValueError:
        raise UnknownCentury(national_id)

    month = int(national_id[3:5])
    day = int(national_id[5:7])
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        raise InvalidDate(national_id)

    try:
        governorate = Governorate(national_id[7:9])
    except ValueError:
        raise UnknownGovernorate(national_id)

    return DecodedId(
        national_id=national_id,
        century=century,
        birth_year=century.base_year + int(national_id[1:3]),
        birth_month=month,
        birth_day=day,
        gender=gender_of(national_id),
        governorate=governorate,
    )
