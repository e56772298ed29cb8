import pytest

from minishell.environment import fill_env
from minishell.lexer import (
    Token,
    TokenType,
    add_space_inputs,
    define_token_type,
    split_words,
    tokenize,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("|", TokenType.PIPE),
        ("<", TokenType.REDIR_IN),
        (">", TokenType.REDIR_OUT),
        ("<<", TokenType.HEREDOC),
        (">>", TokenType.APPEND),
        ("ls", TokenType.WORD),
        ("'|'", TokenType.WORD),
    ],
)
def test_define_token_type(text, expected):
    assert define_token_type(text) is expected


def test_token_from_text_sets_type():
    parsed = Token.from_text(">>")
    assert parsed.type is TokenType.APPEND
    assert parsed.text == ">>"


def test_add_space_inputs_leaves_plain_text_alone():
    assert add_space_inputs("echo hello world") == "echo hello world"


def test_add_space_inputs_leaves_quoted_operators_alone():
    text = "echo 'a|b' \"c>d\""
    assert add_space_inputs(text) == text


@pytest.mark.parametrize("text", ["a|b", "a>b", "a<b", "a>>b", "a<<b", "x|y>>z<w"])
def test_add_space_inputs_only_adds_spaces(text):
    result = add_space_inputs(text)
    assert result.replace(" ", "") == text
    assert len(result) > len(text)


def test_add_space_inputs_pads_double_operator_as_one():
    result = add_space_inputs("cat<<EOF")
    assert result.split() == ["cat", "<<", "EOF"]


def test_split_words_collapses_separators():
    assert split_words("  ls   -l  ", " ") == ["ls", "-l"]


def test_split_words_keeps_quoted_sections():
    assert split_words('echo "a b" \'c d\'', " ") == ["echo", '"a b"', "'c d'"]


def test_split_words_unclosed_quote_runs_to_end():
    assert split_words("a 'b c", " ") == ["a", "'b c"]


def test_split_words_only_separators():
    assert split_words(":::", ":") == []


def test_split_words_rejoin_round_trip():
    words = ["/usr/bin", "/bin", "/usr/local/bin"]
    assert split_words(":".join(words), ":") == words


def test_tokenize_pipeline_types():
    lexed = tokenize("ls -l|wc", None)
    assert [t.text for t in lexed] == ["ls", "-l", "|", "wc"]
    assert [t.type for t in lexed] == [
        TokenType.WORD, TokenType.WORD, TokenType.PIPE, TokenType.WORD,
    ]


def test_tokenize_heredoc():
    lexed = tokenize("cat<<EOF", None)
    assert [t.type for t in lexed] == [
        TokenType.WORD, TokenType.HEREDOC, TokenType.WORD,
    ]


def test_tokenize_expands_variables():
    env = fill_env(["HOME=/home/user"])
    lexed = tokenize("echo $HOME", env)
    assert [t.text for t in lexed] == ["echo", "/home/user"]


def test_tokenize_single_quotes_block_expansion():
    env = fill_env(["HOME=/home/user"])
    lexed = tokenize("echo '$HOME'", env)
    assert lexed[1].text == "$HOME"


def test_tokenize_keeps_quotes_without_dollar():
    lexed = tokenize("echo 'x y'", None)
    assert [t.text for t in lexed] == ["echo", "'x y'"]


def test_tokenize_empty_line():
    assert tokenize("   ", None) == []