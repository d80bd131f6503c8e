"""Order-insensitive comparison helpers.

Cronitor returns unordered collections (tags, notify lists, regions, ...) in
whatever order it likes. Feeding that order back into a diff makes every run
look like a change, so observed collections that hold the same elements as
the declared ones are handed back in the declared order.
"""

from collections.abc import Mapping, Sequence


def reorder_to_match[T](
    declared: Sequence[T] | None, observed: Sequence[T] | None
) -> list[T] | None:
    """Return observed in declared's order if both hold the same elements.

    observed is returned unchanged (as a list) when:
    * either side is None, absent is not the same as empty
    * the lengths differ
    * observed contains an element declared does not

    Precondition: elements are unique within each sequence. With equal
    lengths and no foreign element in observed this makes the two equal as
    multisets, so no duplicate counting is done. Feeding sequences with
    duplicates (e.g. declared=[a, a, b], observed=[a, b, b]) would silently
    mask a real difference.

    Example:
        >>> reorder_to_match(["a", "b", "c"], ["c", "a", "b"])
        ['a', 'b', 'c']
        >>> reorder_to_match(["a", "b"], ["a", "x"])
        ['a', 'x']
    """
    if declared is None or observed is None:
        return None if observed is None else list(observed)
    if len(declared) != len(observed):
        return list(observed)
    for item in observed:
        if item not in declared:
            return list(observed)
    return list(declared)


def reorder_keys_to_match[K, V](
    declared: Mapping[K, V] | None, observed: Mapping[K, V] | None
) -> dict[K, V] | None:
    """Same as reorder_to_match, applied to the keys of a mapping.

    Values always come from observed.
    """
    if declared is None or observed is None:
        return None if observed is None else dict(observed)
    keys = reorder_to_match(list(declared), list(observed))
    return {k: observed[k] for k in keys or []}
