import pytest
from unittest.mock import MagicMock

from context_engineer.core.assembly import AssemblyPipeline
from context_engineer.core.exceptions import EmptyRequestError, FileReadError, NoFilesError
from context_engineer.core.models import Config, wrap_file, build_request_block


EXPECTED_DOCUMENT = (
    "<a.txt>\n"
    "hello\n"
    "</a.txt>\n"
    "\n"
    "<b.txt>\n"
    "world\n"
    "</b.txt>\n"
    "\n"
    "<request>\n"
    "fix bugs\n"
    "</request>"
)


@pytest.fixture
def pipeline(reader, tokenizer, config):
    return AssemblyPipeline(reader, tokenizer, config)


class TestAssemble:
    def test_exact_document_format(self, pipeline):
        document = pipeline.assemble(["a.txt", "b.txt"], "fix bugs")
        assert document.text == EXPECTED_DOCUMENT
        assert not document.text.endswith("\n")

    def test_request_is_trimmed(self, pipeline):
        document = pipeline.assemble(["a.txt", "b.txt"], "  \n fix bugs \t\n")
        assert document.text == EXPECTED_DOCUMENT

    def test_token_count_is_sum_of_blocks_and_request(self, pipeline):
        document = pipeline.assemble(["a.txt", "b.txt"], "fix bugs")
        expected_files = len(wrap_file("a.txt", "hello")) + len(wrap_file("b.txt", "world"))
        expected_request = len(build_request_block("fix bugs"))
        assert document.token_count == expected_files + expected_request
        assert document.request_tokens == expected_request
        assert document.files_token_total == expected_files

    def test_output_follows_list_order(self, pipeline):
        document = pipeline.assemble(["b.txt", "a.txt"], "go")
        assert document.text.index("<b.txt>") < document.text.index("<a.txt>")
        assert document.files == ("b.txt", "a.txt")

    def test_deterministic(self, pipeline):
        first = pipeline.assemble(["a.txt", "c.txt"], "review")
        second = pipeline.assemble(["a.txt", "c.txt"], "review")
        assert first.text == second.text
        assert first.token_count == second.token_count

    def test_content_is_read_fresh(self, pipeline, text_files):
        before = pipeline.assemble(["a.txt"], "go")
        (text_files / "a.txt").write_text("hello again")
        after = pipeline.assemble(["a.txt"], "go")
        assert "hello again" in after.text
        assert after.token_count == before.token_count + len(" again")

    def test_empty_request_rejected(self, reader, tokenizer):
        reader = MagicMock(wraps=reader)
        pipeline = AssemblyPipeline(reader, tokenizer)
        with pytest.raises(EmptyRequestError):
            pipeline.assemble(["a.txt"], "   \n\t")
        reader.read.assert_not_called()

    def test_no_files_rejected(self, pipeline):
        with pytest.raises(NoFilesError):
            pipeline.assemble([], "fix bugs")

    def test_unreadable_file_aborts(self, pipeline):
        with pytest.raises(FileReadError) as exc_info:
            pipeline.assemble(["a.txt", "missing.txt"], "fix bugs")
        assert exc_info.value.identifier == "missing.txt"


class TestMeasure:
    def test_measure_excludes_request(self, pipeline):
        total = pipeline.measure(["a.txt", "b.txt"])
        assert total == len(wrap_file("a.txt", "hello")) + len(wrap_file("b.txt", "world"))

    def test_measure_unreadable_file_is_fatal(self, pipeline):
        with pytest.raises(FileReadError):
            pipeline.measure(["missing.txt"])

    def test_exceeds_threshold(self, reader, tokenizer):
        pipeline = AssemblyPipeline(reader, tokenizer, Config(token_warning_threshold=10))
        assert pipeline.exceeds_threshold(11)
        assert not pipeline.exceeds_threshold(10)
