from typing import Callable, Iterable, TypeVar

from .exceptions import MultipleMatchesError, ZeroMatchesError


T = TypeVar('T')


def id_and_name(item) -> tuple[str, str]:
    return item.id, item.name


def find_one(
    items: Iterable[T],
    search: str,
    kind: str,
    key: Callable[[T], tuple[str, str]] = id_and_name,
) -> T:
    """
    resolve a single item by id or name:
    exact match on either wins (the last one if several), otherwise a
    unique substring match, otherwise ambiguous / not found
    """
    exact = None
    partial = None
    partial_count = 0

    for item in items:
        item_id, name = key(item)
        if search in (item_id, name):
            exact = item
        elif exact is None and (search in item_id or search in name):
            partial = item
            partial_count += 1

    if exact is not None:
        return exact
    if partial_count == 1:
        return partial
    if partial_count > 1:
        raise MultipleMatchesError(
            f'Unable to find {kind} {search} because there were multiple matches'
        )
    raise ZeroMatchesError(f'Unable to find {kind} {search}, zero matches')
