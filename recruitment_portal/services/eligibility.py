import logging
from datetime import date

from recruitment_portal.core.config import settings
from recruitment_portal.core.exceptions import DecodeError, InvalidFormat
from recruitment_portal.schemas.enums import Gender
from recruitment_portal.schemas.national_id_schema import DecodedId, EligibilityResult
from recruitment_portal.services.national_id import decode, gender_of

logger = logging.getLogger(__name__)

NOT_MALE = "Only male applicants are eligible"


def age_on(decoded: DecodedId, as_of: date) -> int:
    age = as_of.year - decoded.birth_year
    if (as_of.month, as_of.day) < (decoded.birth_month, decoded.birth_day):
        age -= 1
    return age


def check_eligibility(
    decoded: DecodedId,
    as_of: date,
    min_age: int | None = None,
    max_age: int | None = None,
) -> EligibilityResult:
    """Apply the registration rules to a decoded ID.

    Every rule is evaluated; the result lists all that failed. A governorate
    that does not resolve never gets this far: decoding rejects it.
    """
    min_age = settings.MIN_AGE if min_age is None else min_age
    max_age = settings.MAX_AGE if max_age is None else max_age

    reasons = []
    if not decoded.is_male:
        reasons.append(NOT_MALE)

    age = age_on(decoded, as_of)
    if not min_age <= age <= max_age:
        reasons.append(f"Age must be between {min_age} and {max_age} (currently {age})")

    return EligibilityResult(age=age, reasons=tuple(reasons))


def assess_national_id(
    national_id: str,
    as_of: date,
    min_age: int | None = None,
    max_age: int | None = None,
) -> EligibilityResult:
    try:
        decoded = decode(national_id)
    except DecodeError as e:
        logger.debug("National ID rejected during decoding: %s", type(e).__name__)
        return EligibilityResult(reasons=(e.message,))
    return check_eligibility(decoded, as_of, min_age=min_age, max_age=max_age)


def check_login_identity(national_id: str) -> list[str]:
    """Narrower check used at login: format and gender only."""
    try:
        gender = gender_of(national_id)
    except InvalidFormat as e:
        return [e.message]
    if gender is not Gender.MALE:
        return [NOT_MALE]
    return []
