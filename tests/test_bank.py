from pathlib import Path

from ioequiz.bank import SAMPLE_QUESTIONS, QuestionBank
from ioequiz.models import QuestionType

SHIPPED_FILE = Path(__file__).resolve().parents[1] / "questions" / "ioe_k5.csv"

HEADER = "id,type,question_text,options,rearrange_parts,correct_answer,explanation,image_url,audio_url\n"


def write_csv(tmp_path, body):
    path = tmp_path / "bank.csv"
    path.write_text(HEADER + body, encoding="utf-8")
    return str(path)


class TestQuestionBank:
    def test_loads_rows_in_file_order(self, tmp_path):
        path = write_csv(
            tmp_path,
            "7,multiple_choice,Pick one,a|b|c,,b,,,\n"
            "3,rearrange,Order,,go|I,I go,,img.png,\n"
            "5,fill_in_blank,Fill,,,am,Use am,,sound.mp3\n",
        )
        bank = QuestionBank(path)
        bank.load()
        assert [q.id for q in bank.questions] == [7, 3, 5]
        first, second, third = bank.questions
        assert first.options == ["a", "b", "c"]
        assert first.rearrange_parts is None
        assert second.type == QuestionType.REARRANGE
        assert second.rearrange_parts == ["go", "I"]
        assert second.image_url == "img.png"
        assert third.audio_url == "sound.mp3"
        assert third.explanation == "Use am"

    def test_skips_invalid_and_duplicate_rows(self, tmp_path):
        path = write_csv(
            tmp_path,
            "1,multiple_choice,No options,,,a,,,\n"
            "2,fill_in_blank,Fill,,,am,,,\n"
            "2,fill_in_blank,Again,,,is,,,\n"
            "3,bogus,Unknown,,,x,,,\n",
        )
        bank = QuestionBank(path)
        bank.load()
        assert [q.id for q in bank.questions] == [2]
        assert bank.questions[0].correct_answer == "am"

    def test_missing_file_falls_back_to_sample(self, tmp_path):
        bank = QuestionBank(str(tmp_path / "nope.csv"))
        bank.load()
        assert len(bank) == len(SAMPLE_QUESTIONS)

    def test_missing_columns_falls_back_to_sample(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("word,translation\nHund,dog\n", encoding="utf-8")
        bank = QuestionBank(str(path))
        bank.load()
        assert len(bank) == len(SAMPLE_QUESTIONS)

    def test_shipped_question_file(self):
        bank = QuestionBank(str(SHIPPED_FILE))
        bank.load()
        assert len(bank) == 12
        ids = [q.id for q in bank.questions]
        assert len(set(ids)) == len(ids)
