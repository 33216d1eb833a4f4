from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Century(Enum):
    """First digit of a national ID and the base year it encodes."""

    C1800 = "1"
    C1900 = "2"
    C2000 = "3"
    C2100 = "4"

    @property
    def base_year(self) -> int:
        return _CENTURY_BASE_YEARS[self]


_CENTURY_BASE_YEARS = {
    Century.C1800: 1800,
    Century.C1900: 1900,
    Century.C2000: 2000,
    Century.C2100: 2100,
}


class Governorate(Enum):
    """Governorate codes carried in digits 7-8 of a national ID."""

    CAIRO = "01"
    ALEXANDRIA = "02"
    PORT_SAID = "03"
    SUEZ = "04"
    DAMIETTA = "11"
    DAKAHLIA = "12"
    SHARQIA = "13"
    QALYUBIA = "14"
    KAFR_EL_SHEIKH = "15"
    GHARBIA = "16"
    MONUFIA = "17"
    BEHEIRA = "18"
    ISMAILIA = "19"
    GIZA = "21"
    BENI_SUEF = "22"
    FAYOUM = "23"
    MINYA = "24"
    ASYUT = "25"
    SOHAG = "26"
    QENA = "27"
    ASWAN = "28"
    LUXOR = "29"
    RED_SEA = "31"
    NEW_VALLEY = "32"
    MATROUH = "33"
    NORTH_SINAI = "34"
    SOUTH_SINAI = "35"
    BORN_ABROAD = "88"

    @property
    def label(self) -> str:
        return _GOVERNORATE_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "Governorate":
        for governorate, name in _GOVERNORATE_LABELS.items():
            if name == label:
                return governorate
        raise ValueError(f"Unknown governorate: {label!r}")


_GOVERNORATE_LABELS = {
    Governorate.CAIRO: "Cairo",
    Governorate.ALEXANDRIA: "Alexandria",
    Governorate.PORT_SAID: "Port Said",
    Governorate.SUEZ: "Suez",
    Governorate.DAMIETTA: "Damietta",
    Governorate.DAKAHLIA: "Dakahlia",
    Governorate.SHARQIA: "Sharqia",
    Governorate.QALYUBIA: "Qalyubia",
    Governorate.KAFR_EL_SHEIKH: "Kafr El Sheikh",
    Governorate.GHARBIA: "Gharbia",
    Governorate.MONUFIA: "Monufia",
    Governorate.BEHEIRA: "Beheira",
    Governorate.ISMAILIA: "Ismailia",
    Governorate.GIZA: "Giza",
    Governorate.BENI_SUEF: "Beni Suef",
    Governorate.FAYOUM: "Fayoum",
    Governorate.MINYA: "Minya",
    Governorate.ASYUT: "Asyut",
    Governorate.SOHAG: "Sohag",
    Governorate.QENA: "Qena",
    Governorate.ASWAN: "Aswan",
    Governorate.LUXOR: "Luxor",
    Governorate.RED_SEA: "Red Sea",
    Governorate.NEW_VALLEY: "New Valley",
    Governorate.MATROUH: "Matrouh",
    Governorate.NORTH_SINAI: "North Sinai",
    Governorate.SOUTH_SINAI: "South Sinai",
    Governorate.BORN_ABROAD: "Born Abroad",
}


class RequestType(str, Enum):
    NEW_ENLISTMENT = "New Enlistment"
    DEFERMENT = "Deferment"
    EXEMPTION = "Exemption"
    SERVICE_CERTIFICATE = "Service Certificate"
    DATA_UPDATE = "Data Update"


class RequestStatus(str, Enum):
    UNDER_REVIEW = "Under Review"
