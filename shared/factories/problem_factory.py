"""Constructors for the supported problem form types."""

from typing import List, Optional
from shared.domain.consts import SolutionFormType
from shared.domain.models import Problem


def new_input_problem(
    problem_id: str,
    desc: str,
    hints: Optional[List[str]] = None,
    default: Optional[str] = None,
) -> Problem:
    """Single line free-text question."""
    return Problem(
        id=problem_id,
        type=SolutionFormType.INPUT,
        desc=desc,
        hints=hints or [],
        default=default,
    )


def new_multiline_input_problem(
    problem_id: str,
    desc: str,
    hints: Optional[List[str]] = None,
    default: Optional[str] = None,
) -> Problem:
    """Multi line free-text question."""
    return Problem(
        id=problem_id,
        type=SolutionFormType.MULTILINE_INPUT,
        desc=desc,
        hints=hints or [],
        default=default,
    )


def new_password_problem(problem_id: str, desc: str, hints: Optional[List[str]] = None) -> Problem:
    """Secret question. Passwords never carry a default."""
    return Problem(
        id=problem_id,
        type=SolutionFormType.PASSWORD,
        desc=desc,
        hints=hints or [],
    )


def new_confirm_problem(
    problem_id: str,
    desc: str,
    hints: Optional[List[str]] = None,
    default: bool = False,
) -> Problem:
    """Yes/no question."""
    return Problem(
        id=problem_id,
        type=SolutionFormType.CONFIRM,
        desc=desc,
        hints=hints or [],
        default=default,
    )


def new_select_problem(
    problem_id: str,
    desc: str,
    options: List[str],
    hints: Optional[List[str]] = None,
    default: Optional[str] = None,
) -> Problem:
    """
    Single choice question.
    
    Raises:
        ValueError: If there are no options or the default is not one of them
    """
    if not options:
        raise ValueError(f"Select problem {problem_id} needs at least one option")
    if default is not None and default not in options:
        raise ValueError(f"Default {default!r} of {problem_id} is not among options {options}")
    return Problem(
        id=problem_id,
        type=SolutionFormType.SELECT,
        desc=desc,
        hints=hints or [],
        options=options,
        default=default,
    )


def new_multiselect_problem(
    problem_id: str,
    desc: str,
    options: List[str],
    hints: Optional[List[str]] = None,
    default: Optional[List[str]] = None,
) -> Problem:
    """
    Multiple choice question.
    
    Raises:
        ValueError: If there are no options or a default is not one of them
    """
    if not options:
        raise ValueError(f"MultiSelect problem {problem_id} needs at least one option")
    invalid = [d for d in (default or []) if d not in options]
    if invalid:
        raise ValueError(f"Defaults {invalid} of {problem_id} are not among options {options}")
    return Problem(
        id=problem_id,
        type=SolutionFormType.MULTI_SELECT,
        desc=desc,
        hints=hints or [],
        options=options,
        default=default,
    )
