"""All magic values live here — no inline literals anywhere else."""

# Gemini
GEMINI_MODEL = "gemini-flash-latest"

# Retry on rate limit (HTTP 429).
# Delays double per attempt: 2000, 4000, 8000 ms.
RATE_LIMIT_STATUS = 429
DEFAULT_RETRY_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_MS = 2000

# Audio
MAX_AUDIO_BYTES = 20 * 1024 * 1024
DEFAULT_AUDIO_MIME = "audio/webm"
DATA_URI_PREFIX = "data:"
# Priority order matters: first matching substring wins.
AUDIO_MIME_TABLE: tuple[tuple[tuple[str, ...], str], ...] = (
    (("webm",), "audio/webm"),
    (("mp3", "mpeg"), "audio/mpeg"),
    (("wav",), "audio/wav"),
    (("ogg",), "audio/ogg"),
    (("aac", "m4a"), "audio/aac"),
)

# Quiz
DEFAULT_QUIZ_QUESTIONS = 3
QUIZ_OPTION_COUNT = 4
DIFFICULTY_DESCRIPTIONS = {
    "easy": "foundational facts and basic concepts",
    "medium": "application and understanding of concepts",
    "hard": "deep theoretical knowledge and complex analysis",
}

# Prompts
TRANSCRIPTION_PROMPT = (
    "Transcribe this audio lecture word-for-word. Provide a complete, accurate "
    "transcription of everything that was said. Include all details, concepts, "
    "and explanations."
)

SUMMARY_PROMPT = """You are an expert educational assistant. Based on the following lecture transcription, provide a concise, precise summary in plain text format.

Transcription:
{transcript}

Instructions:
- Keep the response brief and focused (aim for 200-400 words total)
- Provide only the most important concepts and key points
- Use clear, direct language - avoid unnecessary elaboration
- Use plain text only - NO markdown formatting (no ###, ####, **, or any markdown symbols)
- Use simple line breaks and bullet points with dashes (-) only
- Include only essential definitions and terms
- Skip redundant explanations

Format:
1. Brief title (one line, no formatting)
2. Key concepts (2-3 bullet points max per concept, use dashes)
3. Important terms (brief definitions only)
4. Main takeaway (1-2 sentences)

Be precise and concise. Do not add filler content. Use plain text only - no markdown symbols."""

QUIZ_PROMPT = """You are an expert teacher. Create a quiz based strictly on the following transcript.

Transcript:
"{transcript}"

Difficulty Level: {difficulty} ({description})

Instructions:
1. Generate {count} multiple-choice questions.
2. Each question must be directly answerable from the transcript.
3. Provide 4 options for each question.
4. Indicate the correct answer index (0-3).
5. Output valid JSON ONLY. Do not add any markdown formatting or explanations.

JSON Schema:
[
  {{
    "question": "Question text here",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correctAnswer": 0
  }}
]"""

# Errors
MSG_ERR_NO_API_KEY = "Gemini API key not found in environment variables."
MSG_ERR_AUDIO_TOO_LARGE = "Audio file is too large. Please record a shorter lecture (max 20MB)."
MSG_ERR_AUDIO_EMPTY = "Audio file is empty. Please record again."
MSG_ERR_AUDIO_UNREADABLE = "Audio data is not valid base64. Please record again."
MSG_ERR_EMPTY_TRANSCRIPTION = (
    "Received empty transcription. The audio might be too quiet or unclear."
)
MSG_ERR_UNKNOWN_DIFFICULTY = "Unknown difficulty: %r (expected easy, medium or hard)"

# Log messages
MSG_CLIENT_INIT = "Gemini service initializing…"
MSG_API_KEY_PRESENT = "API key present: %s"
MSG_API_KEY_MISSING = "GEMINI_API_KEY is missing from environment variables"
MSG_RATE_LIMITED = "Rate limit hit. Retrying in %dms... (%d retries left)"
MSG_TRANSCRIBING = "Transcribing audio: mime=%s size=%.2f KB reported=%s"
MSG_RAW_QUIZ = "Raw Gemini quiz response: %s"
MSG_QUIZ_PARSE_FAILED = "Failed to parse quiz JSON: %s"
MSG_QUIZ_ITEM_DROPPED = "Dropping malformed quiz item at position %d: %s"
MSG_PROCESS_FAILED = "Error processing lecture audio: %s"

# Terminal front end
MSG_APP_STARTING = "Processing lecture %s…"
MSG_TRANSCRIPT_TITLE = "Transcript"
MSG_SUMMARY_TITLE = "Summary"
MSG_QUIZ_TITLE = "%s Quiz — question %d of %d"
MSG_QUIZ_GENERATING = "Generating %s level questions based on your lecture…"
MSG_NO_QUESTIONS = "No questions available. Unable to generate quiz questions — please try again."
MSG_ANSWER_PROMPT = "Your answer"
MSG_CORRECT = "Correct!"
MSG_INCORRECT = "Incorrect — the answer was: %s"
MSG_QUIZ_SCORE = "You scored %d out of %d on %s mode."
MSG_FAILED = "Error: %s"
MSG_ERR_QUESTION_COUNT = "number of questions must be a whole number of at least 1, got %r"
