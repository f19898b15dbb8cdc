"""Path normalization: collapse customary equivalents into shorter paths."""

from typing import Iterable

from nata.kinship.relation_types import CHILD_TYPES, SPOUSE_TYPES, RelationType


def normalize_path(types: Iterable[RelationType]) -> tuple[RelationType, ...]:
    """
    Rewrite a raw relation path into its canonical form.

    A spouse's child is one's own child: a child step replaces the spouse
    step directly before it. Unlike a single pop, every consecutive spouse
    step is dropped, so normalizing twice gives the same path. Every other
    step is kept as is.

        (shreemati, chhora)        -> (chhora,)
        (buwa, shreemati, chhori)  -> (buwa, chhori)
    """
    result: list[RelationType] = []
    for step in types:
        if step in CHILD_TYPES:
            while result and result[-1] in SPOUSE_TYPES:
                result.pop()
        result.append(step)
    return tuple(result)
