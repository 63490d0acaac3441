from pydantic import BaseModel, ConfigDict, StrictStr


class User(BaseModel):
    """A stored user. Fields keep the camelCase names used on the wire and in the table."""

    model_config = ConfigDict(extra="ignore")

    email: StrictStr = ""
    firstName: StrictStr = ""
    lastName: StrictStr = ""

    @property
    def is_empty(self) -> bool:
        return self.email == ""

    def to_item(self) -> dict:
        return self.model_dump()
