import pytest
from pydantic import ValidationError

from models import ScanResult


def test_result_must_be_unsafe_when_matches_present():
    with pytest.raises(ValidationError):
        ScanResult(is_safe=True, matches=["x"])


def test_result_must_have_matches_when_unsafe():
    with pytest.raises(ValidationError):
        ScanResult(is_safe=False, matches=[])


def test_default_result_is_safe_and_pair_copies_matches():
    assert ScanResult().as_pair() == (True, [])
    result = ScanResult(is_safe=False, matches=["eval("])
    pair = result.as_pair()
    pair[1].append("x")
    assert result.matches == ["eval("]
