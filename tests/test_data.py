import pytest

from wordtree.data import FileData, read_files, read_words


def test_read_words_splits_on_whitespace(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("alpha\tbeta\n\ngamma   delta\r\nepsilon")
    assert read_words(path) == ["alpha", "beta", "gamma", "delta", "epsilon"]


def test_read_words_accepts_str_path(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("uma frase curta")
    assert read_words(str(path)) == ["uma", "frase", "curta"]


def test_read_words_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert read_words(path) == []


def test_read_words_keeps_punctuation_and_unicode(tmp_path):
    words = ["ação,", "coração!", "(x)"]
    path = tmp_path / "u.txt"
    path.write_text(" ".join(words), encoding="utf-8")
    assert read_words(path) == words


def test_read_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_words(tmp_path / "missing.txt")


def test_read_files_reads_inclusive_range(tmp_path):
    contents = {0: "zero um", 1: "dois", 2: "tres quatro cinco"}
    for file_id, text in contents.items():
        (tmp_path / f"{file_id}.txt").write_text(text)
    files = read_files(2, tmp_path)
    assert [f.file_id for f in files] == list(contents)
    assert [f.words for f in files] == [text.split() for text in contents.values()]
    assert all(isinstance(f, FileData) for f in files)


def test_read_files_missing_document_has_no_words(tmp_path):
    (tmp_path / "0.txt").write_text("presente")
    files = read_files(1, str(tmp_path))
    assert files[0].words == ["presente"]
    assert files[1] == FileData(1, [])


def test_read_files_negative_amount_reads_nothing(tmp_path):
    assert read_files(-1, tmp_path) == []