from __future__ import annotations


def remove_extension(name: str) -> str:
    idx = name.rfind(".")
    if idx < 0:
        return name
    return name[:idx]


def _capitalize_first(word: str) -> str:
    # str.capitalize() would lowercase the tail
    return word[:1].upper() + word[1:]


def format_title(name: str) -> str:
    """Display title for a filename: ``"hello_world.md"`` -> ``"Hello World"``.

    Empty words left by consecutive separators are kept as empty strings, so
    ``"a__b"`` becomes ``"A  B"``.
    """
    stem = remove_extension(name)
    words = [part for piece in stem.split(" ") for part in piece.split("_")]
    return " ".join(_capitalize_first(word) for word in words)
