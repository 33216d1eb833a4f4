"""Tests for national ID decoding."""

import pytest

from recruitment_portal.core.exceptions import (
    DecodeError,
    InvalidDate,
    InvalidFormat,
    UnknownCentury,
    UnknownGovernorate,
)
from recruitment_portal.schemas.enums import Century, Gender, Governorate
from recruitment_portal.services.national_id import (
    build_national_id,
    decode,
    gender_of,
    is_well_formed,
)


class TestDecode:
    """Business behaviour: every field is read from a fixed digit position."""

    def test_decodes_known_identifier(self) -> None:
        decoded = decode("29001010100158")

        assert decoded.century is Century.C1900
        assert (decoded.birth_year, decoded.birth_month, decoded.birth_day) == (1990, 1, 1)
        assert decoded.governorate is Governorate.CAIRO
        assert decoded.gender is Gender.MALE
        assert decoded.date_of_birth == "1990-01-01"

    def test_even_gender_digit_is_female(self) -> None:
        assert decode("29001010100148").gender is Gender.FEMALE

    @pytest.mark.parametrize(
        ("national_id", "year"),
        [
            ("19912312100011", 1899),
            ("20001012100011", 1900),
            ("30507082100011", 2005),
            ("40001012100011", 2100),
        ],
    )
    def test_century_digit_selects_base_year(self, national_id: str, year: int) -> None:
        assert decode(national_id).birth_year == year

    @pytest.mark.parametrize("governorate", list(Governorate), ids=lambda g: g.value)
    @pytest.mark.parametrize("century", list(Century), ids=lambda c: c.value)
    @pytest.mark.parametrize(("month", "day"), [(1, 1), (1, 31), (12, 1), (12, 31), (2, 31)])
    def test_digit_groups_are_reproduced(
        self, governorate: Governorate, century: Century, month: int, day: int
    ) -> None:
        national_id = f"{century.value}07{month:02d}{day:02d}{governorate.value}12391"
        decoded = decode(national_id)

        rebuilt = (
            f"{decoded.century.value}{decoded.birth_year - decoded.century.base_year:02d}"
            f"{decoded.birth_month:02d}{decoded.birth_day:02d}{decoded.governorate.value}"
        )
        assert rebuilt == national_id[:9]
        assert decoded.birth_year == century.base_year + 7
        assert decoded.gender is Gender.MALE

    def test_born_abroad_code(self) -> None:
        assert decode("31212318800071").governorate.label == "Born Abroad"

    def test_day_range_is_not_calendar_checked(self) -> None:
        decoded = decode("29502310100011")

        assert (decoded.birth_month, decoded.birth_day) == (2, 31)

    def test_result_is_immutable(self) -> None:
        decoded = decode("29001010100158")

        with pytest.raises(Exception):
            decoded.birth_year = 2000

    def test_decoding_is_deterministic(self) -> None:
        assert decode("29001010100158") == decode("29001010100158")


class TestDecodeFailures:
    """Business behaviour: decoding fails as a whole with a typed error."""

    @pytest.mark.parametrize(
        "national_id",
        ["", "2900101010015", "290010101001588", "29001010100l58", " 29001010100158", "٢٩٠٠١٠١٠١٠٠١٥٨"],
    )
    def test_malformed_input_is_invalid_format(self, national_id: str) -> None:
        with pytest.raises(InvalidFormat):
            decode(national_id)

    def test_non_string_is_invalid_format(self) -> None:
        with pytest.raises(InvalidFormat):
            decode(29001010100158)

    @pytest.mark.parametrize("first_digit", ["0", "5", "9"])
    def test_unknown_century(self, first_digit: str) -> None:
        with pytest.raises(UnknownCentury):
            decode(first_digit + "9001010100158")

    @pytest.mark.parametrize("national_id", ["29000010100158", "29013010100158", "29001000100158", "29001320100158"])
    def test_out_of_range_month_or_day(self, national_id: str) -> None:
        with pytest.raises(InvalidDate):
            decode(national_id)

    @pytest.mark.parametrize("code", ["00", "05", "20", "30", "36", "99"])
    def test_unknown_governorate(self, code: str) -> None:
        with pytest.raises(UnknownGovernorate):
            decode(f"2900101{code}00158")

    def test_errors_carry_readable_message(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode("abc")

        assert exc_info.value.message == "National ID must be exactly 14 digits"


class TestHelpers:
    def test_is_well_formed(self) -> None:
        assert is_well_formed("12345678901234")
        assert not is_well_formed("1234")
        assert not is_well_formed("")

    def test_gender_of_requires_format(self) -> None:
        assert gender_of("00000000000010") is Gender.MALE
        with pytest.raises(InvalidFormat):
            gender_of("123")

    def test_governorate_table_has_28_codes(self) -> None:
        assert len(Governorate) == 28

    def test_build_national_id_decodes_back(self) -> None:
        national_id = build_national_id(2001, 7, 4, Governorate.LUXOR, Gender.FEMALE, serial=42)
        decoded = decode(national_id)

        assert len(national_id) == 14
        assert decoded.date_of_birth == "2001-07-04"
        assert decoded.governorate is Governorate.LUXOR
        assert decoded.gender is Gender.FEMALE

    def test_build_national_id_rejects_unencodable_year(self) -> None:
        with pytest.raises(ValueError):
            build_national_id(1750, 1, 1, Governorate.CAIRO)
