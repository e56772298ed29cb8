from minishell.cli import build_command_list, main, read_command, read_redirection


def scripted(*answers, asked=None):
    remaining = iter(answers)

    def prompt(text):
        if asked is not None:
            asked.append(text)
        return next(remaining, None)

    return prompt


def eof_input(*answers):
    remaining = iter(answers)

    def fake_input(text=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return fake_input


def test_read_command_collects_arguments():
    assert read_command(scripted("ls", "-l", "/tmp", "")) == ["ls", "-l", "/tmp"]


def test_read_command_end_of_input():
    assert read_command(scripted()) is None


def test_read_command_stops_at_end_of_input():
    assert read_command(scripted("ls", "-a")) == ["ls", "-a"]


def test_read_redirection_output():
    assert read_redirection(scripted(">", "out.txt")) == (">", "out.txt")


def test_read_redirection_skip():
    assert read_redirection(scripted("")) is None


def test_read_redirection_heredoc_asks_delimiter():
    asked = []
    assert read_redirection(scripted("<<", "EOF", asked=asked)) == ("<<", "EOF")
    assert asked[-1] == "Here-document delimiter: "


def test_read_redirection_invalid(capsys):
    assert read_redirection(scripted("<>")) is None
    assert "Invalid redirection operator." in capsys.readouterr().out


def test_build_command_list_with_pipe():
    prompt = scripted("ls", "", "", "y", "wc", "-l", "", ">", "n.txt", "n")
    commands = build_command_list(prompt)
    assert [c.args for c in commands] == [["ls"], ["wc", "-l"]]
    assert (commands[1].redirect, commands[1].target) == (">", "n.txt")
    assert commands[0].redirect is None


def test_build_command_list_end_of_input():
    assert build_command_list(scripted()) == []


def test_main_exit(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", eof_input("exit", "", "", "n"))
    assert main([]) == 0
    assert "Bye 👋" in capsys.readouterr().out


def test_main_runs_builtin_until_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", eof_input("echo", "-n", "hi", "", "", "n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "hi\n" in out
    assert out.rstrip().endswith("exit")


def test_main_reports_redirection_error(monkeypatch, capsys, tmp_path):
    missing = str(tmp_path / "missing")
    monkeypatch.setattr("builtins.input", eof_input("echo", "", "<", missing, "n"))
    assert main([]) == 0
    assert missing in capsys.readouterr().err