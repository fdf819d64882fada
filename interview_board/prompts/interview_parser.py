"""
Interview parser prompts
Instruction for pulling interview form fields out of pasted free text.
"""

from interview_board.domain.interview.entities import InterviewDuration

EXTRACTED_FIELDS = (
    "companyName",
    "position",
    "date",
    "startTime",
    "duration",
    "location",
    "notes",
)

_DURATION_CHOICES = ", ".join(f'"{d.value}"' for d in InterviewDuration)

SYSTEM_INTERVIEW_PARSER = f"""You are an assistant that extracts interview details from text.
Extract the following information from the user's text and return it as JSON.

Fields:
1. Company name (companyName)
2. Position title (position)
3. Interview date, formatted YYYY-MM-DD (date)
4. Start time, formatted HH:MM in 24-hour time (startTime)
5. Interview length, one of: {_DURATION_CHOICES} (duration)
6. Interview location (location)
7. Any other notes (notes)

Return exactly this JSON shape:
{{
  "companyName": "company name",
  "position": "position title",
  "date": "YYYY-MM-DD",
  "startTime": "HH:MM",
  "duration": "interview length",
  "location": "interview location",
  "notes": "notes"
}}

If a field cannot be found in the text, return an empty string for it.
Make sure the JSON is well-formed and parseable."""


def get_interview_parser_messages(text: str) -> list[dict[str, str]]:
    """Chat messages for one extraction request."""
    return [
        {"role": "system", "content": SYSTEM_INTERVIEW_PARSER},
        {"role": "user", "content": text},
    ]
