"""Dictionary entry model."""

from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    """A single read-only dictionary entry."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Unique entry identifier")
    word: str = Field(..., description="Headword")
    definition: str = Field("", description="Definition text")
    ipa_uk: str = Field("", description="British pronunciation (IPA)")
    ipa_us: str = Field("", description="American pronunciation (IPA)")
