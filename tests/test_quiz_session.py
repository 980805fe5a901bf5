"""QuizSession: selection, verification, scoring and completion."""
from src.lecture.quiz import Difficulty, QuizQuestion
from src.quiz_session import QuizSession


def make_session(*answers: int) -> QuizSession:
    questions = [
        QuizQuestion(id=i + 1, text=f"Q{i + 1}?", options=("A", "B", "C", "D"), correct_answer=a)
        for i, a in enumerate(answers)
    ]
    return QuizSession(questions=questions, difficulty=Difficulty.EASY)


def test_empty_session():
    session = make_session()

    assert session.is_empty
    assert session.current is None
    assert session.progress == 0.0


def test_verify_without_selection_is_noop():
    session = make_session(1)

    assert session.verify() is None
    assert session.answered is False


def test_correct_answer_scores():
    session = make_session(2, 0)
    session.select(2)

    assert session.verify() is True
    assert session.score == 1


def test_wrong_answer_does_not_score():
    session = make_session(2)
    session.select(1)

    assert session.verify() is False
    assert session.score == 0


def test_selection_locked_after_verify():
    session = make_session(0)
    session.select(0)
    session.verify()
    session.select(3)

    assert session.selected == 0
    assert session.verify() is True
    assert session.score == 1


def test_advance_through_to_finish():
    session = make_session(0, 1)
    session.select(0)
    session.verify()
    session.advance()

    assert session.current.id == 2
    assert session.selected is None
    assert session.progress == 1.0

    session.select(3)
    session.verify()
    session.advance()

    assert session.finished
    assert session.current is None
    assert session.summary_line() == "You scored 1 out of 2 on easy mode."
