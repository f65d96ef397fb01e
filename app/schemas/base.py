import datetime
from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Annotated, ClassVar


# camelCase on the wire, snake_case in Python; both accepted on input
class CatalogModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def trim_required(v: object, field: str) -> object:
    """Strip surrounding whitespace and refuse blank strings."""
    if isinstance(v, str):
        v = v.strip()
        if not v:
            raise ValueError(f"{field} cannot be empty")
    return v


def as_utc(v: datetime.datetime) -> datetime.datetime:
    """Timestamps are stored in UTC; SQLite hands them back naive."""
    if v.tzinfo is None:
        return v.replace(tzinfo=datetime.timezone.utc)
    return v.astimezone(datetime.timezone.utc)


UtcDatetime = Annotated[datetime.datetime, AfterValidator(as_utc)]
