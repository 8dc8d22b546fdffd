from letterboxed.cli import main


def _write_wordlist(tmp_path, words: list[str]):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n")
    return str(path)


def test_solve_prints_solution(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["ab", "adgj", "jbehk", "kcfil", "adgjbehk"])
    assert main(["solve", "-p", "abc,def,ghi,jkl", "-w", wordlist]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Valid word count: 4",
        "Found a solution with 2 steps:",
        "adgjbehk -> kcfil",
    ]


def test_solve_best_words(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["adgj", "jbehk", "kcfil"])
    assert main(["solve", "--puzzle", "abc,def,ghi,jkl", "--wordlist", wordlist, "--best-words"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == ["Valid word count: 3", "Best Words:", "jbehk", "kcfil"]
    assert out[-1] == "adgj -> jbehk -> kcfil"


def test_solve_no_solution(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["adgjbehk", "cfil"])
    assert main(["solve", "-p", "abc,def,ghi,jkl", "-w", wordlist]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "No solution found"


def test_solve_min_length(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["adgj", "jbehk", "kcfil"])
    assert main(["solve", "-p", "abc,def,ghi,jkl", "-w", wordlist, "--min-length", "5"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Valid word count: 2"
    assert out[-1] == "No solution found"


def test_malformed_puzzle(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["adgj"])
    assert main(["solve", "-p", "aab,cde,fgh,ijk", "-w", wordlist]) == 2
    err = capsys.readouterr().err
    assert "Duplicate character 'a'" in err


def test_missing_wordlist(tmp_path, capsys):
    assert main(["solve", "-p", "abc,def,ghi,jkl", "-w", str(tmp_path / "missing.txt")]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_state_cap(tmp_path, capsys):
    wordlist = _write_wordlist(tmp_path, ["adgj", "jbehk", "kcfil"])
    assert main(["solve", "-p", "abc,def,ghi,jkl", "-w", wordlist, "--max-states", "1"]) == 3
    assert "exceeded" in capsys.readouterr().err


def test_serve_uses_configured_port(monkeypatch):
    import uvicorn
    from letterboxed.settings import settings

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    assert main(["serve"]) == 0
    assert calls == [("letterboxed.server:app", {"host": settings.HOST, "port": settings.PORT})]


def test_serve_port_override(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
    assert main(["serve", "--host", "0.0.0.0", "--port", "8080"]) == 0
    assert calls == [{"host": "0.0.0.0", "port": 8080}]
