"""Oracle response models - the structured answer returned by the model.

Validation is strict: every field is a required non-blank string, nothing is
coerced and nothing is defaulted. Accepted strings are kept exactly as sent.
Field names on the wire are camelCase.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


RequiredText = Annotated[str, StringConstraints(strict=True, min_length=1), AfterValidator(_reject_blank)]


class _OracleModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BookContext(_OracleModel):
    """Page 1: the book and the scene that mirrors the reader's struggle."""

    title: RequiredText
    author: RequiredText
    summary: RequiredText


class Reflection(_OracleModel):
    """Page 2: a quote from the book and what it means for the reader."""

    quote: RequiredText
    analysis: RequiredText


class OracleResponse(_OracleModel):
    """Complete book recommendation rendered as a two-page spread."""

    empathy: RequiredText
    book_context: BookContext = Field(alias="bookContext")
    reflection: Reflection
    tiny_step: RequiredText = Field(alias="tinyStep")

    @classmethod
    def from_json(cls, payload: str) -> "OracleResponse":
        """Parse and validate a raw JSON document.

        Raises:
            pydantic.ValidationError: If the payload is not JSON or misses a field.
        """
        return cls.model_validate_json(payload)

    def to_json(self) -> str:
        """Serialize using the wire (camelCase) field names."""
        return self.model_dump_json(by_alias=True)
