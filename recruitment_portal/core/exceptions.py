class PortalError(Exception):
    """Base class for every error raised by the portal core."""


class FieldValidationError(PortalError):
    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Invalid fields: {fields}")


class DuplicateNationalIdException(PortalError):
    def __init__(self, national_id: str | None = None):
        self.national_id = national_id
        super().__init__("A user with this National ID already exists.")


class InvalidCredentialsException(PortalError):
    def __init__(self):
        super().__init__("Invalid National ID or password.")


class UnauthenticatedException(PortalError):
    def __init__(self):
        super().__init__("You must be logged in to perform this action.")


class ForbiddenOperation(PortalError):
    pass


class StoreCorruptedError(PortalError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Stored value under '{key}' is not a valid JSON collection.")


# ------------------ National ID decoding ------------------ #

class DecodeError(PortalError):
    message = "National ID could not be decoded"

    def __init__(self, national_id: str | None = None):
        self.national_id = national_id
        super().__init__(self.message)


class InvalidFormat(DecodeError):
    message = "National ID must be exactly 14 digits"


class UnknownCentury(DecodeError):
    message = "National ID has an unknown century code"


class InvalidDate(DecodeError):
    message = "National ID contains an invalid birth date"


class UnknownGovernorate(DecodeError):
    message = "National ID has an unknown governorate code"
