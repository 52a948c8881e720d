import secrets
from collections import Counter

import pytest

from baremetal_secrets.errors import RandomSourceError
from baremetal_secrets.password import PASSWORD_ALPHABET, PASSWORD_LENGTH, generate_password


def test_alphabet_is_62_alphanumerics():
    assert len(PASSWORD_ALPHABET) == 62
    assert len(set(PASSWORD_ALPHABET)) == 62
    assert PASSWORD_ALPHABET.isalnum() and PASSWORD_ALPHABET.isascii()


def test_password_length_and_charset():
    for _ in range(200):
        pw = generate_password()
        assert len(pw) == PASSWORD_LENGTH == 16
        assert set(pw) <= set(PASSWORD_ALPHABET)


def test_passwords_differ():
    assert len({generate_password() for _ in range(50)}) == 50


def test_symbol_frequencies_close_to_uniform():
    counts = Counter()
    samples = 2000
    for _ in range(samples):
        counts.update(generate_password())

    expected = samples * PASSWORD_LENGTH / len(PASSWORD_ALPHABET)  # ~516
    assert set(counts) == set(PASSWORD_ALPHABET)
    for ch in PASSWORD_ALPHABET:
        # sigma ~ 22.5; a 30% band is ~7 sigma wide
        assert abs(counts[ch] - expected) < expected * 0.3, (ch, counts[ch])


def test_custom_length():
    assert len(generate_password(32)) == 32


def test_non_positive_length_rejected():
    with pytest.raises(ValueError):
        generate_password(0)


def test_entropy_failure_raises_random_source_error(monkeypatch):
    def broken_choice(seq):
        raise OSError("getrandom() failed")

    monkeypatch.setattr(secrets, "choice", broken_choice)

    with pytest.raises(RandomSourceError) as ei:
        generate_password()
    assert isinstance(ei.value.__cause__, OSError)
