"""Classification of Open Civic Data divisions into government levels."""

from collections.abc import Iterable

from voterblock.data import GovernmentLevel, Representative

# Last-segment types, checked in order.
_SEGMENT_LEVELS: tuple[tuple[tuple[str, ...], GovernmentLevel], ...] = (
    (("state",), GovernmentLevel.STATE),
    (("county",), GovernmentLevel.COUNTY),
    (("place", "city"), GovernmentLevel.LOCAL),
)

_FEDERAL_DIVISION_MARKERS = ("cd:", "senate")
_FEDERAL_OFFICE_KEYWORDS = ("president", "senator", "representative")


def _segment_type(segment: str) -> str | None:
    """Return the type of a ``type:id`` segment, or None if it is malformed.

    OCD ids never contain a colon, so ``county:unknown_type:x`` is malformed.
    """
    kind, sep, ident = segment.partition(":")
    if not sep or ":" in ident:
        return None
    return kind


def classify_division(division_id: str, office_name: str) -> GovernmentLevel:
    """Map a division identifier and office name to a government level.

    Examples of division identifiers:
        ``ocd-division/country:us`` (federal)
        ``ocd-division/country:us/state:ca`` (state)
        ``ocd-division/country:us/state:ca/county:los_angeles`` (county)
        ``ocd-division/country:us/state:ca/place:los_angeles`` (local)

    Structural rules on the last path segment run first. A congressional
    district or senate marker anywhere in the identifier overrides them, and a
    federal keyword in the office name overrides everything, so a
    "Representative" nested under a state division still lands in federal.

    Args:
        division_id: Slash-delimited Open Civic Data division identifier.
        office_name: Display name of the office.

    Returns:
        The government level. Never raises; unmatched input yields OTHER.
    """
    parts = division_id.split("/")
    kind = _segment_type(parts[-1])

    level = GovernmentLevel.OTHER
    if len(parts) == 2 and kind == "country":
        level = GovernmentLevel.FEDERAL
    else:
        for kinds, segment_level in _SEGMENT_LEVELS:
            if kind in kinds:
                level = segment_level
                break

    if any(marker in division_id for marker in _FEDERAL_DIVISION_MARKERS):
        level = GovernmentLevel.FEDERAL

    lowered = office_name.lower()
    if any(keyword in lowered for keyword in _FEDERAL_OFFICE_KEYWORDS):
        level = GovernmentLevel.FEDERAL

    return level


def group_by_level(
    representatives: Iterable[Representative],
) -> dict[GovernmentLevel, list[Representative]]:
    """Bucket representatives by level, keeping input order within each bucket.

    Every level is present in the result, in declaration order, even if empty.
    """
    grouped: dict[GovernmentLevel, list[Representative]] = {level: [] for level in GovernmentLevel}
    for rep in representatives:
        grouped[rep.level].append(rep)
    return grouped
