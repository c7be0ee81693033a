"""Matcher for free-form problems."""

import re
from shared.domain.models import Problem
from shared.interfaces.problem_matcher import ProblemMatcher

WILDCARD = "*"


def _normalize_desc(desc: str) -> str:
    return " ".join(desc.split())


def _wildcard_matches(pattern: str, value: str) -> bool:
    """Match ``value`` against ``pattern`` where only ``*`` is special."""
    if WILDCARD not in pattern:
        return False
    regex = ".*".join(re.escape(part) for part in pattern.split(WILDCARD))
    return re.fullmatch(regex, value, flags=re.DOTALL) is not None


class DefaultProblemMatcher(ProblemMatcher):
    """Matches problems of the same form type that share an identity.
    
    Identity is shared when:
    - IDs are equal
    - The stored ID contains ``*`` wildcards and matches the candidate ID,
      so one answer can cover a family of questions. Every other character,
      including ``?`` and brackets, is literal
    - Both descriptions are non-empty and equal after whitespace normalization,
      which catches questions regenerated under a different ID
    """
    
    def matches(self, stored: Problem, candidate: Problem) -> bool:
        if stored.type != candidate.type:
            return False
        return self._same_identity(stored, candidate)
    
    def _same_identity(self, stored: Problem, candidate: Problem) -> bool:
        if stored.id == candidate.id:
            return True
        if _wildcard_matches(stored.id, candidate.id):
            return True
        stored_desc = _normalize_desc(stored.desc)
        return bool(stored_desc) and stored_desc == _normalize_desc(candidate.desc)
