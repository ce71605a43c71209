import pytest

from spedi.cmdline import CmdlineError, Parser, in_range, one_of


def make_parser():
    parser = Parser(program_name="prog")
    parser.add("host", "h", "host name", str)
    parser.add("port", "p", "port number", int, required=False, default=80)
    parser.add_flag("verbose", "v", "verbose mode")
    return parser


def test_duplicate_definition_raises():
    parser = make_parser()
    with pytest.raises(CmdlineError, match="multiple definition: host"):
        parser.add_flag("host")


def test_long_options_with_equals_and_separate_value():
    parser = make_parser()
    assert parser.parse(["prog", "--host=example.com", "--port", "8080", "file"])
    assert parser.get("host") == "example.com"
    assert parser.get("port") == 8080
    assert parser.exists("port")
    assert not parser.exists("verbose")
    assert parser.rest() == ["file"]


def test_default_value_used_when_absent():
    parser = make_parser()
    assert parser.parse(["prog", "--host", "a"])
    assert parser.get("port") == 80
    assert not parser.exists("port")


def test_short_options_combined_and_with_value():
    parser = make_parser()
    assert parser.parse(["prog", "-vh", "server", "-p", "9"])
    assert parser.exists("verbose")
    assert parser.get("host") == "server"
    assert parser.get("port") == 9


def test_missing_required_option():
    parser = make_parser()
    assert not parser.parse(["prog"])
    assert parser.error() == "need option: --host"


def test_undefined_options_are_reported():
    parser = make_parser()
    assert not parser.parse(["prog", "--host=x", "--nope", "-z"])
    assert parser.error_full() == (
        "undefined option: --nope\nundefined short option: -z\n"
    )


def test_invalid_value_is_reported():
    parser = make_parser()
    assert not parser.parse(["prog", "--host=x", "--port=abc"])
    assert parser.error() == "option value is invalid: --port=abc"
    assert parser.get("port") == 80


def test_option_needs_value():
    parser = make_parser()
    assert not parser.parse(["prog", "--host"])
    assert parser.error() == "option needs value: --host"


def test_flag_given_a_value_is_invalid():
    parser = make_parser()
    assert not parser.parse(["prog", "--host=x", "--verbose=1"])
    assert parser.error() == "option value is invalid: --verbose=1"


def test_empty_argument_list():
    parser = make_parser()
    assert not parser.parse([])
    assert parser.error() == "argument number must be longer than 0"


def test_lookup_errors():
    parser = make_parser()
    with pytest.raises(CmdlineError, match="there is no flag: --missing"):
        parser.exists("missing")
    with pytest.raises(CmdlineError, match="type mismatch flag 'verbose'"):
        parser.get("verbose")


def test_ambiguous_short_option():
    parser = Parser()
    parser.add_flag("alpha", "a")
    parser.add_flag("apple", "a")
    assert not parser.parse(["prog"])
    assert parser.error() == "short option 'a' is ambiguous"


def test_range_reader():
    parser = Parser()
    parser.add("level", "l", "level", int, reader=in_range(1, 5))
    assert parser.parse(["prog", "--level=3"])
    assert parser.get("level") == 3
    assert not parser.parse(["prog", "--level=7"])
    assert parser.error() == "option value is invalid: --level=7"


def test_one_of_reader():
    parser = Parser()
    parser.add("mode", "m", "mode", str, reader=one_of("arm", "thumb"))
    assert parser.parse(["prog", "-m", "thumb"])
    assert parser.get("mode") == "thumb"
    assert not parser.parse(["prog", "-m", "x86"])


def test_readers_raise_directly():
    with pytest.raises(CmdlineError, match="range_error"):
        in_range(0, 2)("3")
    with pytest.raises(ValueError):
        in_range(0, 2)("two")


def test_parse_string_quotes_and_escapes():
    parser = make_parser()
    assert parser.parse_string('prog --host "my host" a\\ b')
    assert parser.get("host") == "my host"
    assert parser.rest() == ["a b"]


def test_parse_string_errors():
    parser = make_parser()
    assert not parser.parse_string('prog "open')
    assert parser.error() == "quote is not closed"
    assert not parser.parse_string("prog \\")
    assert parser.error() == "unexpected occurrence of '\\' at end of string"


def test_usage_text():
    parser = make_parser()
    expected = (
        "usage: prog --host=string [options] ... \n"
        "options:\n"
        "  -h, --host       host name (string)\n"
        "  -p, --port       port number (int [=80])\n"
        "  -v, --verbose    verbose mode\n"
    )
    assert parser.usage() == expected


def test_usage_uses_argv0_when_no_program_name():
    parser = Parser(footer="files")
    parser.add_flag("x")
    parser.parse(["tool"])
    assert parser.usage().startswith("usage: tool [options] ... files\n")


def test_parse_check_help_exits_zero(capsys):
    parser = make_parser()
    with pytest.raises(SystemExit) as info:
        parser.parse_check(["prog", "--help"])
    assert info.value.code == 0
    assert "print this message" in capsys.readouterr().err


def test_parse_check_error_exits_one(capsys):
    parser = make_parser()
    with pytest.raises(SystemExit) as info:
        parser.parse_check(["prog", "--bogus"])
    assert info.value.code == 1
    assert capsys.readouterr().err.startswith("undefined option: --bogus\nusage:")


def test_parse_check_success_returns():
    parser = make_parser()
    parser.parse_check(["prog", "-h", "box"])
    assert parser.get("host") == "box"