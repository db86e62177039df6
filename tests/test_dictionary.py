import pytest

from scrabble.dictionary import Dictionary, DictionaryType

WORDS = ["cat", "dog", "quiz", "zebra"]


def write_words(path, words):
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def assets(tmp_path, monkeypatch):
    folder = tmp_path / "assets" / "dictionaries"
    folder.mkdir(parents=True)
    write_words(folder / "csw6.dict", WORDS + ["qi"])
    write_words(folder / "twl6.dict", WORDS)
    monkeypatch.chdir(tmp_path)
    return folder


@pytest.mark.parametrize(
    "kind, name", [(DictionaryType.CSW, "csw6.dict"), (DictionaryType.TWL, "twl6.dict")]
)
def test_every_word_of_file_is_contained(assets, kind, name):
    dictionary = Dictionary(kind)
    lines = (assets / name).read_text(encoding="utf-8").splitlines()
    contained = [line for line in lines if line in dictionary]
    assert len(contained) == len(lines)


def test_default_is_csw(assets):
    dictionary = Dictionary()
    assert "qi" in dictionary
    assert len(dictionary) == len(WORDS) + 1


def test_change_replaces_words(assets):
    dictionary = Dictionary(DictionaryType.CSW)
    dictionary.change(DictionaryType.TWL)
    assert "qi" not in dictionary
    assert len(dictionary) == len(WORDS)


def test_custom_file_is_lowercased(tmp_path):
    path = write_words(tmp_path / "custom.dict", ["HELLO", "World"])
    dictionary = Dictionary(path)
    assert "hello" in dictionary
    assert "world" in dictionary
    assert "HELLO" not in dictionary
    assert len(dictionary) == 2


def test_duplicates_counted_once(tmp_path):
    path = write_words(tmp_path / "dup.dict", ["cat", "CAT", "cat"])
    assert len(Dictionary(str(path))) == 1


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary(tmp_path / "absent.dict")


def test_failed_load_leaves_dictionary_empty(tmp_path):
    dictionary = Dictionary(write_words(tmp_path / "a.dict", WORDS))
    with pytest.raises(FileNotFoundError):
        dictionary.load(tmp_path / "absent.dict")
    assert len(dictionary) == 0
    assert "cat" not in dictionary