"""Prompt construction for transcript summaries."""

DEFAULT_PROMPT = """Please analyze video transcript and provide:
1. Main topic and key message
2. Important points in bullet points
3. Key takeaways
4. Any technical terms explained
5. Brief conclusion"""

STRUCTURED_RESPONSE_FORMAT = """Please provide the response in the following JSON format:
{
    "summary": "Brief summary of main points",
    "keyPoints": ["point1", "point2", ...],
    "technicalTerms": [{"term": "term1", "explanation": "explanation1"}, ...],
    "conclusion": "brief conclusion"
}"""


class PromptService:
    """Builds model prompts from a user-customizable instruction."""

    def __init__(self, custom_prompt: str = DEFAULT_PROMPT):
        self.custom_prompt = custom_prompt or DEFAULT_PROMPT

    def build_prompt(self, transcript_text: str) -> str:
        """Instruction followed by the transcript."""
        return f"{self.custom_prompt}\n\nTranscript:\n{transcript_text}"

    def build_structured_prompt(self, transcript_text: str) -> str:
        """Like build_prompt, asking the model to answer in a fixed JSON shape."""
        return f"{self.build_prompt(transcript_text)}\n\n{STRUCTURED_RESPONSE_FORMAT}"
