"""Maps a coarse Open Graph type onto its schema bucket"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional


# Declared order matters: the first bucket containing a type wins.
TYPES: Mapping[str, FrozenSet[str]] = MappingProxyType({
    "activity": frozenset({"activity", "sport"}),
    "business": frozenset({"bar", "company", "cafe", "hotel", "restaurant"}),
    "group": frozenset({"cause", "sports_league", "sports_team"}),
    "organization": frozenset({"band", "government", "non_profit", "school", "university"}),
    "person": frozenset({
        "actor", "athlete", "author", "director", "musician", "politician", "public_figure"
    }),
    "place": frozenset({"city", "country", "landmark", "state_province"}),
    "product": frozenset({
        "album", "book", "drink", "food", "game", "movie", "product", "song", "tv_show"
    }),
    "website": frozenset({"blog", "website"}),
})


def classify_type(type_value: Optional[str], types: Mapping[str, FrozenSet[str]] = TYPES) -> Optional[str]:
    """
    Return the schema bucket for a type value.

    Args:
        type_value: The (coarsened) ``type`` value of a record
        types: Bucket table to consult, in priority order

    Returns:
        The bucket name, or None when no bucket lists the type
    """
    if not type_value:
        return None
    for schema, subtypes in types.items():
        if type_value in subtypes:
            return schema
    return None
