"""Tests for CSPRNG password generation."""
import secrets
import string

import pytest

from shared.config import GeneratorConfig
from playground.core.exceptions import InvalidConfigurationError
from playground.core.models import GenerationOptions
from playground.generators.password import PasswordGenerator


@pytest.fixture
def generator():
    return PasswordGenerator()


class TestCharset:

    def test_default_charset(self, generator):
        charset = generator.build_charset(GenerationOptions())
        assert len(charset) == 26 + 26 + 10 + 26
        assert charset.startswith(string.ascii_lowercase)

    def test_lowercase_only(self, generator):
        options = GenerationOptions(uppercase=False, numbers=False, symbols=False)
        assert generator.build_charset(options) == string.ascii_lowercase

    def test_exclude_ambiguous(self, generator):
        charset = generator.build_charset(GenerationOptions(exclude_ambiguous=True))
        assert not set("lIO0") & set(charset)
        assert len(charset) == 88 - 4


class TestGenerate:

    @pytest.mark.parametrize("length", [0, 1, 16, 128])
    def test_exact_length(self, generator, length):
        assert len(generator.generate(length)) == length

    def test_characters_drawn_from_charset(self, generator):
        options = GenerationOptions(symbols=False, exclude_ambiguous=True)
        charset = set(generator.build_charset(options))
        assert set(generator.generate(500, options)) <= charset

    def test_uniform_sampling_stays_in_charset(self):
        gen = PasswordGenerator(uniform=True)
        charset = set(gen.build_charset(GenerationOptions()))
        assert set(gen.generate(300)) <= charset

    def test_uniform_flag_defaults_from_config(self):
        assert PasswordGenerator(GeneratorConfig(uniform_sampling=True)).uniform
        assert not PasswordGenerator().uniform

    def test_modulo_reduction(self, generator, monkeypatch):
        monkeypatch.setattr(secrets, "randbits", lambda bits: 88 + 2)
        assert generator.generate(3) == "ccc"

    def test_rejection_sampling_discards_top_block(self, monkeypatch):
        # 2^32 mod 88 == 48, so anything >= 2^32 - 48 is redrawn
        draws = iter([2**32 - 1, 5])
        monkeypatch.setattr(secrets, "randbits", lambda bits: next(draws))
        assert PasswordGenerator(uniform=True).generate(1) == "f"


class TestGenerateErrors:

    def test_negative_length(self, generator):
        with pytest.raises(InvalidConfigurationError):
            generator.generate(-1)

    def test_empty_charset(self):
        gen = PasswordGenerator(GeneratorConfig(lowercase="l"))
        options = GenerationOptions(
            uppercase=False, numbers=False, symbols=False, exclude_ambiguous=True
        )
        with pytest.raises(InvalidConfigurationError):
            gen.generate(8, options)

    def test_error_is_a_value_error(self, generator):
        with pytest.raises(ValueError):
            generator.generate(-5)
