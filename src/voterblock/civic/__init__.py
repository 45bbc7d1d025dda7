from voterblock.civic.base import CivicAPIError, RepresentativeLookup
from voterblock.civic.classifier import classify_division, group_by_level
from voterblock.civic.google import GoogleCivicClient, parse_representatives

__all__ = [
    "CivicAPIError",
    "GoogleCivicClient",
    "RepresentativeLookup",
    "classify_division",
    "group_by_level",
    "parse_representatives",
]
