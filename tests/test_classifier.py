"""Tests for division classification and grouping."""

import pytest

from voterblock.civic.classifier import classify_division, group_by_level
from voterblock.data import GovernmentLevel, Representative


@pytest.mark.parametrize(
    ("division_id", "office_name", "expected"),
    [
        ("ocd-division/country:us", "President", GovernmentLevel.FEDERAL),
        ("ocd-division/country:us/state:ca", "Governor", GovernmentLevel.STATE),
        (
            "ocd-division/country:us/state:ca/county:los_angeles",
            "County Supervisor",
            GovernmentLevel.COUNTY,
        ),
        ("ocd-division/country:us/state:ca/place:los_angeles", "Mayor", GovernmentLevel.LOCAL),
        ("ocd-division/country:us/state:ny/city:new_york", "Comptroller", GovernmentLevel.LOCAL),
        ("ocd-division/country:us/state:ca/cd:12", "Representative", GovernmentLevel.FEDERAL),
        (
            "ocd-division/country:us/state:ca/county:unknown_type:x",
            "Dog Catcher",
            GovernmentLevel.OTHER,
        ),
        (
            "ocd-division/country:us/state:ca/school_district:lausd",
            "Dog Catcher",
            GovernmentLevel.OTHER,
        ),
    ],
)
def test_classify_division(
    division_id: str, office_name: str, expected: GovernmentLevel
) -> None:
    assert classify_division(division_id, office_name) == expected


def test_country_segment_only_federal_at_top_level() -> None:
    # A nested country: segment is not a structural match.
    assert classify_division("ocd-division/x/country:us", "Clerk") == GovernmentLevel.OTHER


def test_congressional_district_overrides_structure() -> None:
    assert (
        classify_division("ocd-division/country:us/state:ca/cd:12/county:x", "Delegate")
        == GovernmentLevel.FEDERAL
    )


def test_office_keyword_overrides_state_division() -> None:
    assert (
        classify_division("ocd-division/country:us/state:ca", "U.S. Senator")
        == GovernmentLevel.FEDERAL
    )
    assert (
        classify_division("ocd-division/country:us/state:ca/sldl:45", "State Representative")
        == GovernmentLevel.FEDERAL
    )


def test_office_keyword_is_case_insensitive() -> None:
    assert classify_division("", "VICE PRESIDENT") == GovernmentLevel.FEDERAL


def test_empty_input_is_other() -> None:
    assert classify_division("", "") == GovernmentLevel.OTHER


def _rep(name: str, level: GovernmentLevel) -> Representative:
    return Representative(name=name, office="Office", level=level, division_id="ocd-division")


def test_group_by_level_includes_every_level_in_order() -> None:
    grouped = group_by_level([_rep("A", GovernmentLevel.LOCAL)])

    assert list(grouped) == [
        GovernmentLevel.FEDERAL,
        GovernmentLevel.STATE,
        GovernmentLevel.COUNTY,
        GovernmentLevel.LOCAL,
        GovernmentLevel.OTHER,
    ]
    assert grouped[GovernmentLevel.FEDERAL] == []
    assert [r.name for r in grouped[GovernmentLevel.LOCAL]] == ["A"]


def test_group_by_level_preserves_order_within_bucket() -> None:
    reps = [
        _rep("A", GovernmentLevel.FEDERAL),
        _rep("B", GovernmentLevel.STATE),
        _rep("C", GovernmentLevel.FEDERAL),
    ]
    grouped = group_by_level(reps)

    assert [r.name for r in grouped[GovernmentLevel.FEDERAL]] == ["A", "C"]
    assert [r.name for r in grouped[GovernmentLevel.STATE]] == ["B"]
