"""Tests for the command-line front end."""

import pytest
from symcipher.alphabet import InvalidSymbol
from symcipher.cli import (
    RequestError,
    build_parser,
    key_information,
    main,
    resolve_min_key_length,
    run_encrypt,
    validate_request,
)
from symcipher.cli.main import _min_key_length_from_env


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Run every test without an inherited minimum key length."""
    monkeypatch.delenv("SYMCIPHER_MIN_KEY_LENGTH", raising=False)


class TestValidation:
    """Tests for the caller-side key policy."""

    def test_accepts_valid_request(self):
        validate_request("hello", "key1", 4)

    def test_rejects_all_empty(self):
        with pytest.raises(RequestError) as excinfo:
            validate_request("", "", 4)
        assert excinfo.value.title == "Empty Field!"

    def test_rejects_short_key(self):
        with pytest.raises(RequestError) as excinfo:
            validate_request("hello", "abc", 4)
        assert excinfo.value.title == "Key Error"

    def test_default_minimum(self):
        with pytest.raises(RequestError):
            validate_request("hello", "abc")
        validate_request("hello", "abcd")

    @pytest.mark.parametrize("minimum", [0, -3])
    def test_rejects_non_positive_minimum(self, minimum):
        """A minimum below 1 would let an empty key reach the engine."""
        with pytest.raises(RequestError) as excinfo:
            validate_request("hi", "", minimum)
        assert excinfo.value.title == "Configuration Error"

    def test_empty_message_with_key(self):
        """Only an entirely empty form is rejected."""
        validate_request("", "keykey", 4)
        assert run_encrypt("", "keykey", 4) == ""


class TestRunEncrypt:
    """Tests for run_encrypt."""

    def test_golden_vector(self):
        assert run_encrypt("hello world", "key1", 4) == "31y4c4res0s"

    def test_invalid_symbol(self):
        with pytest.raises(RequestError) as excinfo:
            run_encrypt("Hello", "key1", 4)
        assert excinfo.value.title == "Input Error"
        assert isinstance(excinfo.value.__cause__, InvalidSymbol)

    def test_custom_min_key_length(self):
        assert len(run_encrypt("hi", "k", 1)) == 2
        with pytest.raises(RequestError):
            run_encrypt("hi", "key1", 8)

    def test_env_read_at_call_time(self, monkeypatch):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "6")
        with pytest.raises(RequestError):
            run_encrypt("hello", "key1")
        assert run_encrypt("hello world", "key1", 4) == "31y4c4res0s"


class TestConfig:
    """Tests for the environment override."""

    def test_default(self):
        assert _min_key_length_from_env() == 4
        assert resolve_min_key_length() == 4

    def test_override(self, monkeypatch):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "6")
        assert _min_key_length_from_env() == 6
        assert resolve_min_key_length() == 6

    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "6")
        assert resolve_min_key_length(2) == 2

    @pytest.mark.parametrize("value", ["abc", "0", "-2"])
    def test_invalid_override(self, monkeypatch, value):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", value)
        with pytest.raises(ValueError):
            _min_key_length_from_env()
        with pytest.raises(RequestError) as excinfo:
            resolve_min_key_length()
        assert excinfo.value.title == "Configuration Error"

    def test_key_information(self):
        assert "at least 4 characters" in key_information(4)
        assert "at least 7 characters" in key_information(7)


class TestMain:
    """Tests for the command dispatch."""

    def test_encrypt(self, capsys):
        code = main(["encrypt", "-m", "hello world", "-k", "key1", "--min-key-length", "4"])
        assert code == 0
        assert capsys.readouterr().out == "31y4c4res0s\n"

    def test_encrypt_rejected(self, capsys):
        code = main(["encrypt", "-m", "hello", "-k", "ab", "--min-key-length", "4"])
        assert code == 2
        assert "Key Error" in capsys.readouterr().err

    def test_encrypt_empty_key_zero_minimum(self, capsys):
        code = main(["encrypt", "-m", "hi", "-k", "", "--min-key-length", "0"])
        assert code == 2
        assert "Configuration Error" in capsys.readouterr().err

    def test_encrypt_uses_env_minimum(self, monkeypatch, capsys):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "6")
        assert main(["encrypt", "-m", "hello", "-k", "key1"]) == 2
        assert "Key Error" in capsys.readouterr().err

        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "2")
        assert main(["encrypt", "-m", "hello", "-k", "key"]) == 0

    def test_encrypt_malformed_env(self, monkeypatch, capsys):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "x")
        assert main(["encrypt", "-m", "hello", "-k", "key1"]) == 2
        assert "Configuration Error" in capsys.readouterr().err

    def test_encrypt_prompts(self, monkeypatch, capsys):
        answers = iter(["hello world", "key1"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        code = main(["encrypt", "--min-key-length", "4"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "31y4c4res0s"

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert capsys.readouterr().out.strip() == key_information(4)

    def test_info_follows_minimum(self, monkeypatch, capsys):
        assert main(["info", "--min-key-length", "8"]) == 0
        assert "at least 8 characters" in capsys.readouterr().out

        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "5")
        assert main(["info"]) == 0
        assert "at least 5 characters" in capsys.readouterr().out

    def test_info_malformed_env(self, monkeypatch):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "x")
        assert main(["info"]) == 2

    def test_help_with_malformed_env(self, monkeypatch):
        monkeypatch.setenv("SYMCIPHER_MIN_KEY_LENGTH", "x")
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0

    def test_analyze(self, capsys):
        assert main(["analyze", "-k", "key1", "--length", "256"]) == 0
        out = capsys.readouterr().out
        assert "Chi-square" in out
        assert "Entropy" in out

    def test_analyze_invalid_key(self, capsys):
        assert main(["analyze", "-k", "KEY"]) == 2

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
