from mdsite.titles import format_title, remove_extension


def test_format_title_splits_underscores():
    assert format_title("hello_world.md") == "Hello World"


def test_format_title_without_extension():
    assert format_title("plain") == "Plain"


def test_format_title_removes_only_last_extension():
    assert format_title("a.b.c.txt") == "A.b.c"


def test_format_title_splits_spaces_and_underscores():
    assert format_title("getting started_with mdsite.md") == "Getting Started With Mdsite"


def test_format_title_keeps_tail_case():
    assert format_title("iPhone_HTTP_api.md") == "IPhone HTTP Api"


def test_format_title_keeps_empty_words_in_place():
    assert format_title("a__b.md") == "A  B"
    assert format_title("_lead.md") == " Lead"
    assert format_title("") == ""


def test_remove_extension():
    assert remove_extension("notes.md") == "notes"
    assert remove_extension("archive.tar.gz") == "archive.tar"
    assert remove_extension("README") == "README"
    assert remove_extension(".bashrc") == ""
