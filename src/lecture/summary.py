"""SummaryClient — plain-text lecture summary with markdown stripped."""
import re
from functools import reduce

from src.constants import DEFAULT_RETRY_ATTEMPTS, DEFAULT_RETRY_DELAY_MS, SUMMARY_PROMPT
from src.retry import with_retry
from src.transport.client import GenerationTransport, TextPart

# Applied in order: longer markers before shorter ones so no stray symbols remain.
_MARKDOWN_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"###+\s*"), ""),
    (re.compile(r"####+\s*"), ""),
    (re.compile(r"\*\*"), ""),
    (re.compile(r"\*"), ""),
    (re.compile(r"`"), ""),
    (re.compile(r"#{1,6}\s+"), ""),
    (re.compile(r"\n{3,}"), "\n\n"),
)


def _strip_markdown(text: str) -> str:
    return reduce(
        lambda acc, rule: rule[0].sub(rule[1], acc),
        _MARKDOWN_RULES,
        text,
    ).strip()


def sanitize_summary(text: str) -> str:
    """Strip markdown until nothing changes; removing `*` or backticks can join `#` runs."""
    cleaned = _strip_markdown(text)
    while cleaned != text:
        text, cleaned = cleaned, _strip_markdown(cleaned)
    return cleaned


def build_summary_prompt(transcript: str) -> str:
    return SUMMARY_PROMPT.format(transcript=transcript)


class SummaryClient:

    def __init__(
        self,
        transport: GenerationTransport,
        retries: int = DEFAULT_RETRY_ATTEMPTS,
        delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    ) -> None:
        self._transport = transport
        self._retries = retries
        self._delay_ms = delay_ms

    async def summarize(self, transcript: str) -> str:
        parts = [TextPart(text=build_summary_prompt(transcript))]

        @with_retry(retries=self._retries, delay_ms=self._delay_ms)
        async def attempt() -> str:
            return sanitize_summary(await self._transport.generate(parts))

        return await attempt()
