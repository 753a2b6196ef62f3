from typing import Callable, Sequence, Tuple, TypeVar

Subject = TypeVar('Subject')
Result = TypeVar('Result')

Rule = Tuple[Callable[[Subject], bool], Result]


def first_match(
    subject: Subject,
    rules: Sequence[Rule],
    default: Result,
) -> Result:
    """
    Returns the result of the first rule whose predicate accepts `subject`,
    or `default` when none does. Rules are evaluated in list order.
    """
    for predicate, result in rules:
        if predicate(subject):
            return result
    return default
