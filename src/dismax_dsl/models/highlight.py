"""
Highlight Models

Pydantic model for keyword highlighting options.
"""

from pydantic import BaseModel, ConfigDict, Field


class HighlightOptions(BaseModel):
    """Highlighting options (None = let the engine default apply)"""

    # Unknown options are rejected rather than ignored.
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_snippets: int | None = Field(
        None, ge=0, description="Maximum number of highlighted snippets per field"
    )
    fragment_size: int | None = Field(
        None, ge=0, description="Number of characters considered for a fragment"
    )
    merge_continuous_fragments: bool | None = Field(
        None, description="Collapse continuous fragments into a single fragment"
    )
    phrase_highlighter: bool | None = Field(
        None,
        description="Highlight phrase terms only when they appear within the query phrase",
    )
    require_field_match: bool | None = Field(
        None,
        description="Only highlight a field if the query matched in that field",
    )

    def to_params(self) -> dict[str, str]:
        """Map the options that are set to their highlighting parameter names."""
        params: dict[str, str] = {}
        if self.max_snippets is not None:
            params["hl.snippets"] = str(self.max_snippets)
        if self.fragment_size is not None:
            params["hl.fragsize"] = str(self.fragment_size)
        if self.merge_continuous_fragments is not None:
            params["hl.mergeContiguous"] = _flag(self.merge_continuous_fragments)
        if self.phrase_highlighter is not None:
            params["hl.usePhraseHighlighter"] = _flag(self.phrase_highlighter)
        if self.require_field_match is not None:
            params["hl.requireFieldMatch"] = _flag(self.require_field_match)
        return params


def _flag(value: bool) -> str:
    return "true" if value else "false"
