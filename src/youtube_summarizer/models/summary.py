"""Summary models returned by the language-model backend."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

PARSE_FAILURE_SUMMARY = "Failed to parse response. Please try again."


class TechnicalTerm(BaseModel):
    """A term mentioned in the video together with its explanation."""

    term: str
    explanation: str


class StructuredSummary(BaseModel):
    """Structured summary as requested from the model in JSON form."""

    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., description="Brief summary of main points")
    key_points: List[str] = Field(..., alias="keyPoints", description="Important points")
    technical_terms: List[TechnicalTerm] = Field(
        ...,
        alias="technicalTerms",
        description="Technical terms with explanations"
    )
    conclusion: str = Field(..., description="Brief conclusion")

    @classmethod
    def parse_failure(cls) -> "StructuredSummary":
        """Placeholder returned when the model output cannot be used."""
        return cls(summary=PARSE_FAILURE_SUMMARY, key_points=[], technical_terms=[], conclusion="")

    @property
    def is_parse_failure(self) -> bool:
        return self.summary == PARSE_FAILURE_SUMMARY and not self.key_points

    def to_markdown(self) -> str:
        """Render the summary as markdown sections."""
        parts = ["## Summary", self.summary]

        if self.key_points:
            parts.append("\n## Key Points")
            parts.extend(f"- {point}" for point in self.key_points)

        if self.technical_terms:
            parts.append("\n## Technical Terms")
            parts.extend(f"- **{item.term}**: {item.explanation}" for item in self.technical_terms)

        if self.conclusion:
            parts.append("\n## Conclusion")
            parts.append(self.conclusion)

        return "\n".join(parts)
