from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest

from concursos.services.cpv_matching import cpv_prefix
from concursos.services.criteria import criteria_type
from concursos.services.deadlines import compute_expired, parse_deadline


@pytest.mark.parametrize("code, prefix", [
    ("72000000", "72"),
    ("72100000", "721"),
    ("45210000", "4521"),
    ("72131000", "72131"),
    ("00000000", ""),
])
def test_cpv_prefix_for_codes_ending_in_zeros(code, prefix):
    assert cpv_prefix(code) == prefix


@pytest.mark.parametrize("code", ["72131001", "72131010", "45000000-7", "abc00"])
def test_cpv_prefix_requires_two_trailing_zeros(code):
    assert cpv_prefix(code) is None


def _factor(name=None, other=None):
    return SimpleNamespace(factor_name=name, other_factor_name=other)


def test_criteria_all_price_factors():
    factors = [_factor("Preço"), _factor("preço mais baixo"), _factor("PRECO global")]
    assert criteria_type(factors) == "precos"


def test_criteria_with_quality_factor():
    factors = [_factor("Preço"), _factor("preço"), _factor("Qualidade")]
    assert criteria_type(factors) == "outros"


def test_criteria_without_factors():
    assert criteria_type([]) == "outros"


def test_criteria_prefers_other_factor_name():
    assert criteria_type([_factor("Outro", other="Preço da proposta")]) == "precos"
    assert criteria_type([_factor("Preço", other="Prazo de execução")]) == "outros"


def test_parse_deadline_formats():
    assert parse_deadline("15-04-2025 17:00") == datetime(2025, 4, 15, 17, 0)
    assert parse_deadline("2025-04-15") == datetime(2025, 4, 15)
    assert parse_deadline("2025-04-15T17:00:00") == datetime(2025, 4, 15, 17, 0)
    assert parse_deadline(date(2025, 4, 15)) == datetime(2025, 4, 15)
    assert parse_deadline("31-02-2025 10:00") is None
    assert parse_deadline("em breve") is None
    assert parse_deadline("") is None
    assert parse_deadline(None) is None


def test_compute_expired():
    now = datetime(2025, 4, 15, 12, 0)
    assert compute_expired("15-04-2025 11:59", now) is True
    assert compute_expired("15-04-2025 12:01", now) is False
    assert compute_expired(None, now) is None
    assert compute_expired("sem prazo", now) is None


def test_compute_expired_with_aware_deadline():
    now = datetime(2025, 4, 15, 12, 0, tzinfo=timezone.utc)
    assert compute_expired("2025-04-14T12:00:00", now) is True
    assert compute_expired("2025-04-16T12:00:00+00:00", now) is False
