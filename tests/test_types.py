from __future__ import annotations

from pathlib import Path

import pytest

from csl_date import DateParts, DatePolicy, RawDate, from_csl, parse_date


def test_date_parts_properties() -> None:
    single = DateParts(((2000, 1),))
    assert single.start == (2000, 1)
    assert single.end is None
    assert not single.is_range


def test_to_csl() -> None:
    assert parse_date("2000-01-02", "2001").to_csl() == {"date-parts": [[2000, 1, 2], [2001]]}
    assert parse_date("foo").to_csl() == {"raw": "foo"}


def test_from_csl_round_trip() -> None:
    for result in (DateParts(((2000, 1, 2), (2001, 3, 4))), DateParts(((-44,),)), RawDate("foo")):
        assert from_csl(result.to_csl()) == result


def test_from_csl_without_date_parts_is_raw() -> None:
    assert from_csl({}) == RawDate(None)
    assert from_csl({"raw": "c. 1900", "date-parts": []}) == RawDate("c. 1900")


def test_from_csl_rejects_malformed() -> None:
    with pytest.raises(TypeError):
        from_csl([[2000]])
    with pytest.raises(ValueError):
        from_csl({"date-parts": [[2000], [2001], [2002]]})
    with pytest.raises(ValueError):
        from_csl({"date-parts": [[2000, 1, 2, 3]]})
    with pytest.raises(ValueError):
        from_csl({"date-parts": [[2000, True]]})
    with pytest.raises(ValueError):
        from_csl({"date-parts": "2000"})


def test_results_are_immutable() -> None:
    result = parse_date("2000")
    with pytest.raises(AttributeError):
        result.parts = ((2001,),)


def test_policy_defaults() -> None:
    policy = DatePolicy()
    assert policy.split_ranges
    assert policy.prefer_american


def test_policy_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CSL_DATE_SPLIT_RANGES", "no")
    monkeypatch.setenv("CSL_DATE_PREFER_AMERICAN", "TRUE")

    policy = DatePolicy.from_env()
    assert policy == DatePolicy(split_ranges=False, prefer_american=True)


def test_policy_from_env_defaults_when_unset(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CSL_DATE_SPLIT_RANGES", raising=False)
    monkeypatch.delenv("CSL_DATE_PREFER_AMERICAN", raising=False)

    assert DatePolicy.from_env() == DatePolicy()


def test_policy_from_env_rejects_garbage(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CSL_DATE_PREFER_AMERICAN", "maybe")

    with pytest.raises(ValueError, match="CSL_DATE_PREFER_AMERICAN"):
        DatePolicy.from_env()
