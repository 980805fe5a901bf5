"""Entry point — wires Config → StudyAidClient → terminal quiz."""
import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt

from src.audio.encoder import AudioCapture
from src.config import Config
from src.constants import (
    MSG_ANSWER_PROMPT,
    MSG_APP_STARTING,
    MSG_CORRECT,
    MSG_ERR_QUESTION_COUNT,
    MSG_FAILED,
    MSG_INCORRECT,
    MSG_NO_QUESTIONS,
    MSG_QUIZ_GENERATING,
    MSG_QUIZ_TITLE,
    MSG_SUMMARY_TITLE,
    MSG_TRANSCRIPT_TITLE,
)
from src.lecture.quiz import Difficulty
from src.quiz_session import QuizSession
from src.study_client import StudyAidClient

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _question_count(raw: str) -> int:
    try:
        count = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(MSG_ERR_QUESTION_COUNT % raw) from None
    match count:
        case n if n < 1:
            raise argparse.ArgumentTypeError(MSG_ERR_QUESTION_COUNT % raw)
        case _:
            return count


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lecture-quiz",
        description="Transcribe a recorded lecture, summarize it, and quiz yourself.",
    )
    parser.add_argument("lecture", type=Path, help="recorded lecture audio file")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
    )
    parser.add_argument("--questions", type=_question_count, default=None, help="number of quiz questions")
    parser.add_argument("--no-quiz", action="store_true", help="stop after the summary")
    return parser.parse_args(argv)


def load_capture(path: Path) -> AudioCapture:
    mime_type, _ = mimetypes.guess_type(path.name)
    return AudioCapture(data=path.read_bytes(), mime_type=mime_type)


def play_quiz(session: QuizSession, console: Console) -> None:
    while not session.finished:
        question = session.current
        console.print(Panel(
            question.text,
            title=MSG_QUIZ_TITLE % (
                session.difficulty.value.capitalize(), question.id, len(session.questions),
            ),
        ))
        list(map(
            lambda pair: console.print(f"  {pair[0] + 1}. {pair[1]}"),
            enumerate(question.options),
        ))
        choice = IntPrompt.ask(
            MSG_ANSWER_PROMPT,
            choices=[str(n) for n in range(1, len(question.options) + 1)],
            console=console,
        )
        session.select(choice - 1)
        match session.verify():
            case True:
                console.print(f"[green]{MSG_CORRECT}[/green]")
            case _:
                console.print(
                    f"[red]{MSG_INCORRECT % question.options[question.correct_answer]}[/red]"
                )
        session.advance()
    console.print(Panel(session.summary_line()))


async def run(args: argparse.Namespace, config: Config, console: Console) -> None:
    client = StudyAidClient.from_config(config)
    logger.info(MSG_APP_STARTING, args.lecture)

    result = await client.process_lecture_audio(load_capture(args.lecture))
    console.print(Panel(result.transcript, title=MSG_TRANSCRIPT_TITLE))
    console.print(Panel(result.explanation, title=MSG_SUMMARY_TITLE))

    match args.no_quiz:
        case True:
            return
        case False:
            pass

    difficulty = Difficulty.parse(args.difficulty)
    console.print(MSG_QUIZ_GENERATING % difficulty.value)
    questions = await client.generate_quiz_questions(
        result.transcript,
        difficulty,
        config.quiz_question_count if args.questions is None else args.questions,
    )
    session = QuizSession(questions=questions, difficulty=difficulty)
    match session.is_empty:
        case True:
            console.print(MSG_NO_QUESTIONS)
        case False:
            play_quiz(session, console)


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = Config.from_env()
    _setup_logging(config.log_level)
    args = _parse_args(argv)
    console = Console()
    try:
        asyncio.run(run(args, config, console))
    except Exception as e:
        console.print(f"[red]{MSG_FAILED % e}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
