"""
Tests for the foolang lexer
"""
import types

import pytest

from foolang.exceptions import LexError
from foolang.lexer import tokenize

from foolang.tests.utils import token_types


@pytest.mark.parametrize("source", ["", " ", "\n\n", " \t\r\n\f "])
def test_whitespace_only_source_has_no_tokens(source):
    """
    Test that empty and whitespace-only sources yield nothing.
    """
    assert list(tokenize(source)) == []


def test_keywords_symbols_and_literals():
    """
    Test the classification of every token kind.
    """
    source = "func f(a, b) { return a + b; } begin { var x = f(1, 22); x = 3; }"
    assert token_types(source) == [
        'FUNC', 'ID', 'LPAREN', 'ID', 'COMMA', 'ID', 'RPAREN',
        'LBRACE', 'RETURN', 'ID', 'PLUS', 'ID', 'SEMI', 'RBRACE',
        'BEGIN', 'LBRACE', 'VAR', 'ID', 'ASSIGN', 'ID', 'LPAREN',
        'NUMBER', 'COMMA', 'NUMBER', 'RPAREN', 'SEMI',
        'ID', 'ASSIGN', 'NUMBER', 'SEMI', 'RBRACE',
    ]


def test_identifiers_and_literals_keep_source_text():
    """
    Test that identifier and integer tokens carry their raw text.
    """
    tokens = list(tokenize("total = 0042;"))
    assert tokens[0].value == 'total'
    assert tokens[2].type == 'NUMBER'
    assert tokens[2].value == '0042'


def test_keyword_must_be_whole_word():
    """
    Test that a keyword prefix of a longer word is an identifier.
    """
    tokens = list(tokenize("beginning variable funcs returned"))
    assert [t.type for t in tokens] == ['ID', 'ID', 'ID', 'ID']
    assert [t.value for t in tokens] == ['beginning', 'variable', 'funcs', 'returned']


def test_identifiers_are_alphabetic_runs():
    """
    Test that digits end an identifier and start an integer literal.
    """
    tokens = list(tokenize("x1 begin2"))
    assert [(t.type, t.value) for t in tokens] == [
        ('ID', 'x'), ('NUMBER', '1'), ('BEGIN', 'begin'), ('NUMBER', '2'),
    ]


@pytest.mark.parametrize("value", [0, 7, 42, 1000, 4294967295])
def test_integer_literal_round_trip(value):
    """
    Test that the decimal form of an integer tokenizes back to the same value.
    """
    tokens = list(tokenize(str(value)))
    assert len(tokens) == 1
    assert tokens[0].type == 'NUMBER'
    assert int(tokens[0].value) == value


def test_offsets_and_lines():
    """
    Test that tokens record their byte offset and line.
    """
    tokens = list(tokenize("begin {\n  var x = 1;\n}"))
    var_tok = tokens[2]
    assert var_tok.type == 'VAR'
    assert var_tok.offset == 10
    assert var_tok.line == 2
    assert tokens[-1].line == 3


def test_unexpected_character_raises_lex_error():
    """
    Test that an unknown character reports its byte offset.
    """
    with pytest.raises(LexError) as excinfo:
        list(tokenize("var x = 1 @"))
    assert excinfo.value.offset == 10
    assert excinfo.value.char == '@'
    assert excinfo.value.stage == 'lex'


def test_lex_error_offset_counts_bytes():
    """
    Test that offsets are byte offsets, not character indexes.
    """
    with pytest.raises(LexError) as excinfo:
        list(tokenize("é -"))
    assert excinfo.value.offset == 3


def test_underscore_is_not_an_identifier_character():
    """
    Test that underscores are rejected.
    """
    with pytest.raises(LexError) as excinfo:
        list(tokenize("my_var"))
    assert excinfo.value.offset == 2


@pytest.mark.parametrize("source, char, offset", [
    ("begin { var x² = 1; }", '²', 13),
    ("var ½ = 1;", '½', 4),
    ("Ⅻ", 'Ⅻ', 0),
    ("é² = 1;", '²', 2),
])
def test_numeric_characters_are_not_identifier_characters(source, char, offset):
    """
    Test that non-alphabetic numeric characters inside a word are rejected.
    """
    with pytest.raises(LexError) as excinfo:
        list(tokenize(source))
    assert excinfo.value.char == char
    assert excinfo.value.offset == offset


def test_word_before_numeric_character_is_produced():
    """
    Test that the alphabetic part of a word is yielded before the error.
    """
    stream = tokenize("begin²")
    assert next(stream).type == 'BEGIN'
    with pytest.raises(LexError):
        next(stream)


def test_tokenize_is_lazy():
    """
    Test that tokens are produced on demand, before a later error is reached.
    """
    stream = tokenize("begin @")
    assert isinstance(stream, types.GeneratorType)
    assert next(stream).type == 'BEGIN'
    with pytest.raises(LexError):
        next(stream)
