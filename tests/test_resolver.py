import os

import pytest

from folder_to_text.exception_handler import ErrorCategory
from folder_to_text.resolver import resolve


def test_resolve_dispatches_files_and_directories(workdir, emitter):
    (workdir / "single.txt").write_text("one", encoding="utf-8")
    (workdir / "tree").mkdir()
    (workdir / "tree" / "nested.txt").write_text("two", encoding="utf-8")

    resolve(["single.txt", "tree"], emitter)

    out = emitter.output.getvalue().decode("utf-8")
    assert "<single.txt>\none\n</single.txt>\n\n" in out
    assert "<tree/nested.txt>\ntwo\n</tree/nested.txt>\n\n" in out.replace(os.sep, "/")
    assert emitter.report.files_written == 2


def test_resolve_missing_path_continues(workdir, emitter, caplog):
    (workdir / "real.txt").write_text("here", encoding="utf-8")

    resolve(["does-not-exist", "real.txt"], emitter)

    assert emitter.output.getvalue().decode("utf-8") == "<real.txt>\nhere\n</real.txt>\n\n"
    [record] = emitter.exception_handler.error_records
    assert record.category == ErrorCategory.PATH_NOT_FOUND
    assert "does-not-exist" in caplog.text


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
def test_resolve_rejects_special_files(workdir, emitter):
    os.mkfifo(workdir / "pipe")

    resolve(["pipe"], emitter)

    [record] = emitter.exception_handler.error_records
    assert record.category == ErrorCategory.PATH_WRONG_KIND
    assert emitter.output.getvalue().decode("utf-8") == ""


def test_resolve_file_argument_inside_git_is_not_filtered(workdir, emitter):
    (workdir / ".git").mkdir()
    (workdir / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")

    resolve([os.path.join(".git", "HEAD")], emitter)

    assert emitter.report.files_written == 1


def test_resolve_absolute_paths_are_labelled_relative_to_base(workdir, emitter):
    (workdir / "abs.txt").write_text("abs", encoding="utf-8")

    resolve([str(workdir / "abs.txt")], emitter)

    assert emitter.output.getvalue().decode("utf-8").startswith("<abs.txt>\n")
