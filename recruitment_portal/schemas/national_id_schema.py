from pydantic import BaseModel, ConfigDict

from recruitment_portal.schemas.enums import Century, Gender, Governorate


class DecodedId(BaseModel):
    model_config = ConfigDict(frozen=True)

    national_id: str
    century: Century
    birth_year: int
    birth_month: int
    birth_day: int
    gender: Gender
    governorate: Governorate

    @property
    def date_of_birth(self) -> str:
        # not a datetime.date: day 31 is accepted for every month
        return f"{self.birth_year:04d}-{self.birth_month:02d}-{self.birth_day:02d}"

    @property
    def is_male(self) -> bool:
        return self.gender is Gender.MALE


class EligibilityResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int | None = None
    reasons: tuple[str, ...] = ()

    @property
    def eligible(self) -> bool:
        return not self.reasons
