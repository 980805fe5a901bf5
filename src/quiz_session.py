"""QuizSession — play-through state for one generated quiz set."""
from dataclasses import dataclass
from typing import Optional

from src.constants import MSG_QUIZ_SCORE
from src.lecture.quiz import Difficulty, QuizQuestion


@dataclass
class QuizSession:
    questions: list[QuizQuestion]
    difficulty: Difficulty
    step: int = 0
    selected: Optional[int] = None
    answered: bool = False
    score: int = 0
    finished: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.questions

    @property
    def current(self) -> Optional[QuizQuestion]:
        match (self.is_empty, self.finished):
            case (False, False):
                return self.questions[self.step]
            case _:
                return None

    @property
    def progress(self) -> float:
        match self.questions:
            case []:
                return 0.0
            case qs:
                return (self.step + 1) / len(qs)

    def select(self, index: int) -> None:
        """Choose an option. Ignored once the current question has been verified."""
        match self.answered:
            case True:
                return
            case False:
                self.selected = index

    def verify(self) -> Optional[bool]:
        """Lock in the selection; None when nothing is selected."""
        question = self.current
        match (self.selected, question):
            case (None, _) | (_, None):
                return None
            case (chosen, q) if self.answered:
                return chosen == q.correct_answer
            case (chosen, q):
                self.answered = True
                correct = chosen == q.correct_answer
                self.score += int(correct)
                return correct

    def advance(self) -> None:
        match self.step < len(self.questions) - 1:
            case True:
                self.step += 1
                self.selected = None
                self.answered = False
            case False:
                self.finished = True

    def summary_line(self) -> str:
        return MSG_QUIZ_SCORE % (self.score, len(self.questions), self.difficulty.value)
