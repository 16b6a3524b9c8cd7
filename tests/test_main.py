import json

import posixargs
from posixargs import const


def test_main_parses_tokens(capsys):
    schema = json.dumps({"file": {"short": "f", "type": "string"}})
    code = posixargs.main(["--schema", schema, "--", "-rf", "out.txt", "in.txt"])
    assert code == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {
        "flags": {"r": True, "file": True},
        "values": {"r": True, "file": "out.txt"},
        "positionals": ["in.txt"],
    }


def test_main_without_schema(capsys):
    assert posixargs.main(["a", "--", "--foo=bar"]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["values"] == {"foo": "bar"}
    assert out["positionals"] == ["a"]


def test_main_strict(capsys):
    assert posixargs.main(["--strict", "--", "--foo"]) == 1
    captured = capsys.readouterr()
    assert "Unknown option 'foo'" in captured.err
    assert captured.out.startswith("Usage:")


def test_main_unknown_root_option(capsys):
    assert posixargs.main(["--nope"]) == 1
    assert "Unknown option 'nope'" in capsys.readouterr().err


def test_main_invalid_schema(capsys):
    assert posixargs.main(["-s", "{nope"]) == 1
    assert "Invalid schema" in capsys.readouterr().err


def test_main_schema_not_an_object(capsys):
    assert posixargs.main(["--schema=[]"]) == 1
    assert "options" in capsys.readouterr().err


def test_main_version(capsys):
    assert posixargs.main(["--version"]) == 0
    assert const.VERSION_STR in capsys.readouterr().out


def test_main_usage(capsys):
    assert posixargs.main(["-u"]) == 0
    assert capsys.readouterr().out.startswith(f"Usage: {const.ARGV0}")
