from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """Record persisted in the key-value store as a camelCase JSON object."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Flatten a pydantic ValidationError into ``{field: message}``.

    Only the first message per field is kept.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("form",)
        errors.setdefault(str(loc[0]), error["msg"])
    return errors
