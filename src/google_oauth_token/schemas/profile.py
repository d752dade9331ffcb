from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

GoogleProvider = Literal["google"]


class ProfileBase(BaseModel):
    """Serializes with camelCase aliases, still accepts snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileName(ProfileBase):
    given_name: str | None = None
    family_name: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.given_name is None and self.family_name is None


class ProfileEmail(ProfileBase):
    value: str
    verified: bool = False


class ProfilePhoto(ProfileBase):
    value: str


class GoogleProfile(ProfileBase):
    """
    Canonical Google profile handed to the verification callback.

    ``raw`` holds the payload exactly as serialized by Google (or as dumped
    from an already-parsed mapping); ``raw_json`` holds the parsed form.
    """

    provider: GoogleProvider = "google"
    id: str
    display_name: str = ""
    name: ProfileName = Field(default_factory=ProfileName)
    emails: list[ProfileEmail] = Field(default_factory=list)
    photos: list[ProfilePhoto] = Field(default_factory=list)
    phone_numbers: list[str] | None = None
    raw: str = Field(default="", alias="_raw")
    raw_json: Any = Field(default=None, alias="_json")

    @property
    def primary_email(self) -> str | None:
        return self.emails[0].value if self.emails else None
