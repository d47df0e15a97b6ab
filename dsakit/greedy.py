"""Greedy algorithms: handing out cookies and making change at a lemonade stand."""

from __future__ import annotations

from collections.abc import Iterable


def find_content_children(greed: Iterable[int], sizes: Iterable[int]) -> int:
    """Return how many children can be content, one cookie at most each.

    A child with greed ``g`` is content with a cookie of size ``s`` when
    ``g <= s``. The smallest cookies are offered to the least greedy
    children first. The inputs are not modified.
    """
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if children[content] <= size:
            content += 1
    return content


def lemonade_change(bills: Iterable[int]) -> bool:
    """Tell whether every customer can be given correct change.

    Each lemonade costs 5 and the till starts empty. A bill that is neither
    5 nor 10 is handled as a 20: a ten and a five are given back when
    possible, otherwise three fives.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True