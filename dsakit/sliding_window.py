"""Two-pointer and sliding-window algorithms over sequences and strings."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Hashable, Sequence


def _count_sum_at_most(nums: Sequence[int], goal: int) -> int:
    left = total = count = 0
    for right, value in enumerate(nums):
        total += value
        while total > goal and left <= right:
            total -= nums[left]
            left += 1
        count += right - left + 1
    return count


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Count contiguous subarrays of a 0/1 sequence whose sum equals ``goal``."""
    if goal < 0:
        return 0
    return _count_sum_at_most(nums, goal) - _count_sum_at_most(nums, goal - 1)


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays holding exactly ``k`` odd numbers."""
    if k < 0:
        return 0
    odd_positions: deque[int] = deque()
    last_dropped = -1
    count = 0
    for index, value in enumerate(nums):
        if value % 2:
            odd_positions.append(index)
        if len(odd_positions) > k:
            last_dropped = odd_positions.popleft()
        if len(odd_positions) == k:
            first = odd_positions[0] if odd_positions else index
            count += first - last_dropped
    return count


def _longest_with_at_most_distinct(items: Sequence[Hashable], k: int) -> int:
    counts: Counter[Hashable] = Counter()
    left = best = 0
    for right, item in enumerate(items):
        counts[item] += 1
        while len(counts) > k:
            leaving = items[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
            left += 1
        best = max(best, right - left + 1)
    return best


def _count_with_at_most_distinct(items: Sequence[Hashable], k: int) -> int:
    counts: Counter[Hashable] = Counter()
    left = count = 0
    for right, item in enumerate(items):
        counts[item] += 1
        while len(counts) > k:
            leaving = items[left]
            counts[leaving] -= 1
            if counts[leaving] == 0:
                del counts[leaving]
            left += 1
        count += right - left + 1
    return count


def total_fruit(fruits: Sequence[Hashable]) -> int:
    """Return the length of the longest run holding at most two kinds of fruit."""
    return _longest_with_at_most_distinct(fruits, 2)


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one character reachable by changing at most ``k`` characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    counts: Counter[str] = Counter()
    left = best = max_freq = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        if right - left + 1 - max_freq > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = best = 0
    for right, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None and previous >= left:
            left = previous + 1
        best = max(best, right - left + 1)
        last_seen[ch] = right
    return best


def longest_k_distinct_substring(s: str, k: int) -> int:
    """Return the length of the longest substring with at most ``k`` distinct characters."""
    if k < 0:
        raise ValueError("k must not be negative")
    return _longest_with_at_most_distinct(s, k)


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones after flipping at most ``k`` zeros."""
    if k < 0:
        raise ValueError("k must not be negative")
    left = zeros = best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        if zeros <= k:
            best = max(best, right - left + 1)
    return best


def max_card_score(card_points: Sequence[int], k: int) -> int:
    """Return the best total from taking exactly ``k`` cards off the two ends."""
    n = len(card_points)
    if not 0 <= k <= n:
        raise ValueError("k must be between 0 and the number of cards")
    left_sum = sum(card_points[:k])
    right_sum = 0
    best = left_sum
    for from_left, from_right in zip(
        reversed(card_points[:k]), reversed(card_points[n - k:])
    ):
        left_sum -= from_left
        right_sum += from_right
        best = max(best, left_sum + right_sum)
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` containing every character of ``t``.

    Repeated characters in ``t`` must be matched as often. Returns an empty
    string when there is no such window or ``t`` is empty; among equally
    short windows the leftmost is returned.
    """
    if not s or not t or len(s) < len(t):
        return ""
    needed: Counter[str] = Counter(t)
    missing = len(t)
    best_start, best_len = -1, len(s) + 1
    left = 0
    for right, ch in enumerate(s):
        if needed[ch] > 0:
            missing -= 1
        needed[ch] -= 1
        while missing == 0:
            if right - left + 1 < best_len:
                best_start, best_len = left, right - left + 1
            leaving = s[left]
            needed[leaving] += 1
            if needed[leaving] > 0:
                missing += 1
            left += 1
    return "" if best_start < 0 else s[best_start:best_start + best_len]


def number_of_substrings(s: str) -> int:
    """Count substrings of an a/b/c string holding each of 'a', 'b' and 'c'."""
    last_seen = {"a": -1, "b": -1, "c": -1}
    count = 0
    for index, ch in enumerate(s):
        if ch not in last_seen:
            raise ValueError(f"unexpected character {ch!r}; only 'a', 'b', 'c' allowed")
        last_seen[ch] = index
        count += min(last_seen.values()) + 1
    return count


def subarrays_with_k_distinct(nums: Sequence[Hashable], k: int) -> int:
    """Count contiguous subarrays holding exactly ``k`` distinct values."""
    if k < 1:
        return 0
    return _count_with_at_most_distinct(nums, k) - _count_with_at_most_distinct(nums, k - 1)