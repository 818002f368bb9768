"""Pantry-to-recipe ingredient matching: normalization, exclusions, substitutions."""

from pantry_chef.services.matching.exclusions import FALSE_POSITIVES, is_excluded_pair
from pantry_chef.services.matching.normalizer import normalize, singularize
from pantry_chef.services.matching.resolver import resolve
from pantry_chef.services.matching.substitutions import COMMON_SUBSTITUTIONS, substitutes_for

__all__ = [
    "COMMON_SUBSTITUTIONS",
    "FALSE_POSITIVES",
    "is_excluded_pair",
    "normalize",
    "resolve",
    "singularize",
    "substitutes_for",
]
