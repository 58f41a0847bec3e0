# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from enum import Enum
from dataclasses import dataclass, field

from .backend import ArrayLike, namespace_of_arrays
from .utils import check_pos

class PermutationKind(Enum):
    IDENTITY = 1
    SWAP = 2
    ROTATE = 3

@dataclass(frozen=True)
class PermutationNetwork:
    """
    Round robin schedule of the parallel Jacobi method (Brent & Luk). The 2k indices
    of a block pair are seated at a table with k pairs; after every round index 0
    stays and all others move one seat along the cycle

        top[1] -> top[2] -> ... -> top[k-1] -> bottom[k-1] -> ... -> bottom[0] -> top[1]

    so after 2k-1 rounds every index has met every other index once and the order
    is restored.
    """

    #: Height of the blocks.
    size: int
    kind: PermutationKind = field(init=False)

    def __post_init__(self) -> None:
        check_pos("size", self.size)
        if self.size == 1:
            kind = PermutationKind.IDENTITY
        elif self.size == 2:
            kind = PermutationKind.SWAP
        else:
            kind = PermutationKind.ROTATE
        object.__setattr__(self, "kind", kind)

    @property
    def rounds(self) -> int:
        """Number of rounds after which the permutation cycle closes."""
        return 2 * self.size - 1

    def permute_rows_in_col[T: ArrayLike](self, top: T, bottom: T) -> tuple[T, T]:
        """Permute rows of the vertically stacked blocks [top; bottom]."""
        return self._permute(top, bottom, axis=-2)

    def permute_cols_in_row[T: ArrayLike](self, left: T, right: T) -> tuple[T, T]:
        """Permute columns of the horizontally stacked blocks [left, right]."""
        return self._permute(left, right, axis=-1)

    def _permute[T: ArrayLike](self, first: T, second: T, axis: int) -> tuple[T, T]:
        if self.kind == PermutationKind.IDENTITY:
            return first, second

        xp = namespace_of_arrays(first, second)
        k = self.size
        def cut(arr: T, begin: int, end: int) -> T:
            if axis == -2:
                return arr[..., begin:end, :]
            return arr[..., begin:end]

        if self.kind == PermutationKind.SWAP:
            first_out = xp.concat([cut(first, 0, 1), cut(second, 0, 1)], axis=axis)
        else:
            first_out = xp.concat([cut(first, 0, 1), cut(second, 0, 1), cut(first, 1, k-1)], axis=axis)
        second_out = xp.concat([cut(second, 1, k), cut(first, k-1, k)], axis=axis)
        return first_out, second_out
