"""Reader for bracketed constituency parses, backed by ``nltk.Tree``.

Sentences may carry a Penn-style parse string such as::

    (ROOT (S (NP (NNP Acme)) (VP (VBD reported) (NP (NN profit)))))

TimeSieve only needs the leaves in order, so that token positions in the
parse line up with the sentence's token list, and the label directly above
a leaf, so that the part-of-speech tag of a token can be looked up by index.

Leaves come back as raw surface text: the Penn Treebank bracket escapes
(``-LRB-``, ``-RRB-``, ``-LSB-``, ``-RSB-``, ``-LCB-``, ``-RCB-``) are mapped
back to the characters they stand for. No other escapes are undone.
"""

from __future__ import annotations

from nltk import Tree

PTB_BRACKETS = {
    "-LRB-": "(",
    "-RRB-": ")",
    "-LSB-": "[",
    "-RSB-": "]",
    "-LCB-": "{",
    "-RCB-": "}",
}


def unescape_word(word: str) -> str:
    """Map a Penn Treebank bracket escape back to its surface character."""
    return PTB_BRACKETS.get(word, word)


def read_tree(parse: str) -> Tree:
    """Build an ``nltk.Tree`` from ``parse``.

    Raises
    ------
    ValueError
        If the brackets are unbalanced or the string is not a single tree.
    """
    try:
        return Tree.fromstring(parse)
    except ValueError as e:
        raise ValueError(f"unbalanced or malformed parse {parse!r}: {e}") from e


def tagged_words(parse: str) -> list[tuple[str, str]]:
    """Return the ``(word, tag)`` pairs of ``parse`` in left-to-right order.

    The tag is the label of the node directly dominating the word, so a flat
    constituent like ``(NP Acme Corp)`` yields ``NP`` for both words. An
    empty or blank parse has no words.
    """
    if not parse.strip():
        return []
    return [(unescape_word(word), tag) for word, tag in read_tree(parse).pos()]


def leaves(parse: str) -> list[str]:
    """Return the words of ``parse`` in order."""
    return [word for word, _ in tagged_words(parse)]


def pos_tag(parse: str, index: int) -> str:
    """Return the part-of-speech tag of the leaf at ``index`` (zero-based)."""
    pairs = tagged_words(parse)
    if not 0 <= index < len(pairs):
        raise IndexError(f"leaf index {index} out of range for {len(pairs)} leaves")
    return pairs[index][1]


__all__ = ["leaves", "pos_tag", "read_tree", "tagged_words", "unescape_word"]
