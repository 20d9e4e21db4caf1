"""Tests for the exposed field parameters."""

import pytest
from pydantic import ValidationError

from fftfield.config import GENERATOR, MODULUS, N_ROOTS
from fftfield.crypto.params import DEFAULT_PARAMS, FieldParams


def test_defaults_match_config():
    assert DEFAULT_PARAMS.modulus == MODULUS == 4293918721
    assert DEFAULT_PARAMS.generator == GENERATOR == 3925978153
    assert DEFAULT_PARAMS.n_roots == N_ROOTS == 1 << 20


def test_modulus_shape():
    assert MODULUS == 2**32 - 2**20 + 1


def test_two_adicity():
    assert DEFAULT_PARAMS.two_adicity == 20


def test_model_dump():
    assert DEFAULT_PARAMS.model_dump() == {
        "modulus": MODULUS,
        "generator": GENERATOR,
        "n_roots": N_ROOTS,
    }


def test_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_PARAMS.modulus = 7


def test_smaller_root_count_needs_matching_generator():
    with pytest.raises(ValidationError):
        FieldParams(n_roots=1 << 10)


def test_for_roots_derives_generator():
    params = FieldParams.for_roots(1 << 10)
    assert params.n_roots == 1024
    assert params.generator == pow(GENERATOR, 1 << 10, MODULUS)
    assert pow(params.generator, params.n_roots, MODULUS) == 1
    assert pow(params.generator, params.n_roots // 2, MODULUS) == MODULUS - 1


def test_for_roots_trivial_subgroup():
    assert FieldParams.for_roots(1).generator == 1


@pytest.mark.parametrize("n", [0, 3, 1 << 21])
def test_for_roots_invalid(n):
    with pytest.raises(ValueError):
        FieldParams.for_roots(n)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"modulus": 97, "generator": 5, "n_roots": 32},  # another prime
        {"modulus": 4293918720},          # even
        {"modulus": 1 << 33 | 1},         # wider than 32 bits
        {"generator": 1},                 # order 1, not 2^20
        {"generator": MODULUS - 1},       # order 2
        {"generator": 3, "n_roots": 1},   # 3 != 1
        {"generator": 0},
        {"generator": MODULUS},
        {"n_roots": 3 << 10},             # not a power of two
        {"n_roots": 1 << 21},             # does not divide p - 1
    ],
)
def test_invalid_params(kwargs):
    with pytest.raises(ValidationError):
        FieldParams(**kwargs)
