"""Filter combinators

Monadic filtering, MonadPlus only."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..definition import MonadDefinition


def m_filter[A, M](
    definition: MonadDefinition[M],
    items: Sequence[A],
    predicate: Callable[[A], M | bool],
) -> M:
    """
    Keep the items whose predicate resolves true within the monad.

    ``predicate`` returns a monadic bool, or a plain bool which is lifted
    with pure. Each kept item becomes ``pure(item)``, each dropped one
    ``zero()``, and the results are combined left to right with plus:

    - List: classical filtering, m_filter(LIST, [1, 2, 3, 4], even) == [2, 4]
    - Maybe: the first kept item, or Nothing when none is kept

    A verdict equal to zero() (an empty list, Nothing) ends the filter with
    zero(); later predicates are never called.

    Raises UnsupportedOperation for monads without zero/plus.
    """
    definition.require_plus("filter")
    zero = definition.zero()

    def verdict(item: A) -> M:
        answer = predicate(item)
        if isinstance(answer, bool):
            return definition.pure(answer)
        return definition.check(answer, "filter")

    result = zero
    for item in items:
        answer = verdict(item)
        if answer == zero:
            return definition.zero()
        kept = definition.bind(
            answer,
            lambda keep, item=item: definition.pure(item) if keep else definition.zero(),
        )
        result = definition.plus(result, kept)
    return result


__all__ = ("m_filter",)
