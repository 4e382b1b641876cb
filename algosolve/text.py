"""String algorithms: matching, substrings, brackets, shifts and mention counting."""

from __future__ import annotations

import heapq
import string
from collections import Counter
from itertools import accumulate, groupby
from typing import Iterable, Optional, Sequence

_OFFLINE_SECONDS = 60


def repeated_string_match(a: str, b: str) -> int:
    """Fewest copies of ``a`` joined together that contain ``b``, or -1 if none do."""
    if not a:
        if b:
            raise ValueError("cannot repeat an empty string to match a non-empty one")
        return 1
    copies = max(1, -(-len(b) // len(a)))
    if b in a * copies:
        return copies
    if b in a * (copies + 1):
        return copies + 1
    return -1


def word_subsets(words1: Iterable[str], words2: Iterable[str]) -> list[str]:
    """Words of ``words1`` that contain every word of ``words2`` as a multiset of letters."""
    needed: Counter[str] = Counter()
    for word in words2:
        needed |= Counter(word)
    result = []
    for word in words1:
        have = Counter(word)
        if all(have[letter] >= count for letter, count in needed.items()):
            result.append(word)
    return result


def max_num_of_substrings(s: str) -> list[str]:
    """Most non-overlapping substrings that each hold every occurrence of their letters."""
    first: dict[str, int] = {}
    last: dict[str, int] = {}
    for i, ch in enumerate(s):
        first.setdefault(ch, i)
        last[ch] = i

    def closing(start: int) -> Optional[int]:
        end = last[s[start]]
        j = start
        while j <= end:
            ch = s[j]
            if first[ch] < start:
                return None
            end = max(end, last[ch])
            j += 1
        return end

    ranges = []
    for i, ch in enumerate(s):
        if first[ch] == i:
            end = closing(i)
            if end is not None:
                ranges.append((i, end))
    ranges.sort(key=lambda span: (span[1] - span[0], span[0]))

    used = [False] * len(s)
    result = []
    for start, end in ranges:
        if not any(used[start : end + 1]):
            result.append(s[start : end + 1])
            used[start : end + 1] = [True] * (end - start + 1)
    return result


def are_almost_equal(s1: str, s2: str) -> bool:
    """Whether at most one swap of two characters in one string makes them equal."""
    if s1 == s2:
        return True
    if len(s1) != len(s2):
        return False
    differing = [i for i, (x, y) in enumerate(zip(s1, s2)) if x != y]
    if len(differing) != 2:
        return False
    i, j = differing
    return s1[i] == s2[j] and s1[j] == s2[i]


def can_be_valid(s: str, locked: str) -> bool:
    """Whether the unlocked positions of ``s`` can be changed to make it balanced."""
    if len(s) != len(locked):
        raise ValueError("s and locked must have the same length")
    opens: list[int] = []
    free: list[int] = []
    for i, (ch, lock) in enumerate(zip(s, locked)):
        if lock == "0":
            ch = "*"
        if ch == "(":
            opens.append(i)
        elif ch == "*":
            free.append(i)
        elif opens:
            opens.pop()
        elif free:
            free.pop()
        else:
            return False
    while opens and free and opens[-1] < free[-1]:
        opens.pop()
        free.pop()
    return len(free) % 2 == 0 and not opens


def appeal_sum(s: str) -> int:
    """Sum over all substrings of the number of distinct characters they hold."""
    n = len(s)
    previous: dict[str, int] = {}
    total = 0
    for i, ch in enumerate(s):
        total += (i + 1) * (n - i)
        if ch in previous:
            total -= (previous[ch] + 1) * (n - i)
        previous[ch] = i
    return total


def shifting_letters(s: str, shifts: Iterable[Sequence[int]]) -> str:
    """Apply range shifts ``(start, end, direction)``; direction 1 forward, else back."""
    diff = [0] * (len(s) + 1)
    for start, end, direction in shifts:
        delta = 1 if direction == 1 else -1
        diff[start] += delta
        diff[end + 1] -= delta
    base = ord("a")
    return "".join(
        chr(base + (ord(ch) - base + shift) % 26) for ch, shift in zip(s, accumulate(diff))
    )


def minimum_length(s: str) -> int:
    """Length left after repeatedly deleting a letter's nearest equal neighbours."""
    return sum(2 if count % 2 == 0 else 1 for count in Counter(s).values())


def count_mentions(number_of_users: int, events: Iterable[Sequence[str]]) -> list[int]:
    """Count how often each user is mentioned by ``MESSAGE`` events.

    An ``OFFLINE`` event takes a user offline for 60 time units; ``HERE`` mentions
    only users online at that moment, ``ALL`` mentions everyone.
    """
    ordered = sorted(events, key=lambda event: int(event[1]))
    mentions = [0] * number_of_users
    online = [True] * number_of_users
    returning: list[tuple[int, int]] = []

    for timestamp, grouped in groupby(ordered, key=lambda event: int(event[1])):
        batch = list(grouped)
        while returning and returning[0][0] <= timestamp:
            _, user = heapq.heappop(returning)
            online[user] = True

        for event in batch:
            if event[0] == "OFFLINE":
                user = int(event[2])
                if not 0 <= user < number_of_users:
                    raise ValueError(f"unknown user id {user}")
                online[user] = not online[user]
                heapq.heappush(returning, (timestamp + _OFFLINE_SECONDS, user))

        for event in batch:
            if event[0] != "MESSAGE":
                continue
            target = event[2]
            if target == "ALL":
                mentions = [count + 1 for count in mentions]
            elif target == "HERE":
                mentions = [count + int(is_on) for count, is_on in zip(mentions, online)]
            else:
                for token in target.split():
                    digits = token[2:]
                    if (
                        len(token) >= 3
                        and token.startswith("id")
                        and all(c in string.digits for c in digits)
                    ):
                        user = int(digits)
                        if 0 <= user < number_of_users:
                            mentions[user] += 1
    return mentions