import io

import pytest

from bugdedup.config_file import ConfigFile, ConfigKeyError, parse_bool


def _load(text, **kwargs):
    config = ConfigFile(**kwargs)
    config.load(io.StringIO(text))
    return config


def test_simple_values_and_comments():
    config = _load("atoms  = 25\nlength = 8.0  # nanometers\nname = Reece Surcher\n")
    assert config.read("atoms", int) == 25
    assert config.get("length", 10.0) == 8.0
    assert config.read("name") == "Reece Surcher"


def test_missing_key_raises_and_default_returned():
    config = _load("a = 1\n")
    with pytest.raises(ConfigKeyError):
        config.read("title")
    with pytest.raises(KeyError):
        config.read("title")
    assert config.get("title", "Untitled") == "Untitled"


def test_multiline_value():
    config = _load("name = first\n  second\nother = x\n")
    assert config.read("name") == "first\n  second"
    assert config.read("other") == "x"


def test_blank_line_ends_value():
    config = _load("a = 1\n\nstray\n")
    assert config.read("a") == "1"
    assert "stray" not in config


def test_comment_inside_multiline_value_is_skipped():
    config = _load("a = x\n# c\n y\n")
    assert config.read("a") == "x\n y"


def test_sentry_stops_reading():
    config = _load("a = 1\nEndConfigFile\nb = 2\n", sentry="EndConfigFile")
    assert "a" in config
    assert "b" not in config


def test_repeated_key_overwrites():
    config = _load("k = first\nk = second\n")
    assert config.read("k") == "second"


@pytest.mark.parametrize("text", ["false", "F", "no", "N", "0", "none"])
def test_parse_bool_false_words(text):
    assert parse_bool(text) is False


@pytest.mark.parametrize("text", ["true", "T", "yes", "y", "1", "-1", "other"])
def test_parse_bool_true_words(text):
    assert parse_bool(text) is True


def test_read_bool_kind():
    config = _load("flag = no\nother = yes\n")
    assert config.read("flag", bool) is False
    assert config.get("other", False) is True


def test_int_read_of_float_text_takes_prefix():
    config = _load("length = 8.5\n")
    assert config.read("length", int) == 8


def test_add_trims_and_remove():
    config = ConfigFile()
    config.add("  key  ", "  value  ")
    assert config.read("key") == "value"
    config.remove("key")
    assert "key" not in config
    with pytest.raises(ConfigKeyError):
        config.remove("key")


def test_add_bool_roundtrip():
    config = ConfigFile()
    config.add("flag", True)
    config.add("off", False)
    assert config.read("flag", bool) is True
    assert config.read("off", bool) is False


def test_dump_and_load_roundtrip():
    config = ConfigFile()
    config.add("b", 2)
    config.add("a", "hello world")
    out = io.StringIO()
    config.dump(out)
    assert out.getvalue().splitlines()[0] == "a = hello world"
    again = _load(out.getvalue())
    assert again.read("a") == "hello world"
    assert again.read("b", int) == 2


def test_from_file(tmp_path):
    path = tmp_path / "settings.inp"
    path.write_text("atoms = 25\nEndConfigFile\nlater = 1\n", encoding="utf-8")
    config = ConfigFile.from_file(str(path))
    assert config.read("atoms", int) == 25
    assert "later" not in config


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigFile.from_file(str(tmp_path / "absent.inp"))


def test_custom_delimiter_and_comment():
    config = _load("key: value ; note\n", delimiter=":", comment=";")
    assert config.read("key") == "value"