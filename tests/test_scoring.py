from ioequiz.models import AnswerStatus, UserAnswer
from ioequiz.scoring import answer_status, answered_count, build_report, correct_count, score

from conftest import mc


def make_answers(correct_ids, wrong_ids):
    answers = {}
    for qid in correct_ids:
        answers[qid] = UserAnswer(question_id=qid, user_response="x", is_correct=True)
    for qid in wrong_ids:
        answers[qid] = UserAnswer(question_id=qid, user_response="y", is_correct=False)
    return answers


class TestScoring:
    def test_ten_points_per_correct(self):
        answers = make_answers([1, 3, 4], [2, 5])
        assert correct_count(answers) == 3
        assert score(answers) == 30
        assert answered_count(answers) == 5

    def test_empty(self):
        assert score({}) == 0
        assert answered_count({}) == 0

    def test_answer_status(self):
        answers = make_answers([1], [2])
        assert answer_status(mc(1, "a"), answers) == AnswerStatus.CORRECT
        assert answer_status(mc(2, "a"), answers) == AnswerStatus.INCORRECT
        assert answer_status(mc(3, "a"), answers) == AnswerStatus.UNANSWERED


class TestReport:
    def test_report_counts(self):
        report = build_report("Linh", make_answers([1, 3, 4], [2, 5]))
        assert report.user_name == "Linh"
        assert report.correct == 3
        assert report.wrong == 2
        assert report.answered == 5
        assert report.percent == 60
        assert report.score == 30
        assert report.has_wrong

    def test_percent_rounds_half_up(self):
        report = build_report("Linh", make_answers([1], [2, 3, 4, 5, 6, 7, 8]))
        assert report.percent == 13

    def test_nothing_answered(self):
        report = build_report("Linh", {})
        assert report.percent == 0
        assert not report.has_wrong
