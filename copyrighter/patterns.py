# Copyright (C) 2026 Copyrighter Authors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Include/exclude glob lists.

Each entry is ``+glob`` (include), ``-glob`` (exclude) or a bare ``glob``
(include). Entries are matched against a root-relative POSIX path in order
and the last one that matches decides. A path no entry matches is included.
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Rule:
    glob: str
    include: bool

    @classmethod
    def parse(cls, entry: str) -> "Rule":
        entry = entry.strip()
        if entry.startswith("-"):
            return cls(entry[1:], False)
        if entry.startswith("+"):
            return cls(entry[1:], True)
        return cls(entry, True)

    def matches(self, rel_path: str) -> bool:
        return fnmatchcase(rel_path, self.glob)


@dataclass(frozen=True)
class PatternList:
    rules: Tuple[Rule, ...] = ()

    @classmethod
    def parse(cls, entries: Iterable[str]) -> "PatternList":
        return cls(tuple(Rule.parse(e) for e in entries if e.strip()))

    def allows(self, rel_path: str) -> bool:
        allowed = True
        for rule in self.rules:
            if rule.matches(rel_path):
                allowed = rule.include
        return allowed
