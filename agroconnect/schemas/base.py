from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    # snake_case in Python, camelCase on the wire; either is accepted on input
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class InputSchema(BaseSchema):
    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)


class TimestampSchema(BaseSchema):
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Stored naive in UTC; serialized with a "Z" suffix
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
