# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from dataclasses import dataclass

from .backend import ArrayLike, ArrayNamespace, DType, is_complex

class Arithmetic[T: ArrayLike](Protocol):
    """
    Scalar field of the matrix entries. The rotation and sweep formulas are written
    once against this protocol, the real and complex cases only differ here.
    """

    def conj(self, x: T, /) -> T:
        """Complex conjugate, identity for real fields."""
        ...

    def phase(self, off: T, /) -> tuple[T, T]:
        """Split the off-diagonal pencil entry into its magnitude and the unit phase factor."""
        ...

    def sine(self, sin: T, phase: T, /) -> T:
        """Attach the phase factor to the real sine of the rotation."""
        ...

@dataclass(frozen=True)
class RealArithmetic[T: ArrayLike]:
    xp: ArrayNamespace[T]

    def conj(self, x: T, /) -> T:
        return x

    def phase(self, off: T, /) -> tuple[T, T]:
        return off, self.xp.ones_like(off)

    def sine(self, sin: T, phase: T, /) -> T:
        return sin

@dataclass(frozen=True)
class ComplexArithmetic[T: ArrayLike]:
    xp: ArrayNamespace[T]
    dtype: DType

    def conj(self, x: T, /) -> T:
        return self.xp.conj(x)

    def phase(self, off: T, /) -> tuple[T, T]:
        xp = self.xp
        mag = xp.abs(off)
        zero = mag == 0
        safe = xp.where(zero, xp.ones_like(mag), mag)
        phase = xp.where(zero, xp.ones_like(off), xp.conj(off) / xp.astype(safe, self.dtype))
        return mag, phase

    def sine(self, sin: T, phase: T, /) -> T:
        return self.xp.astype(sin, self.dtype) * phase

def arithmetic_of[T: ArrayLike](xp: ArrayNamespace[T], dtype: DType) -> Arithmetic[T]:
    if is_complex(xp, dtype):
        return ComplexArithmetic(xp, dtype)
    return RealArithmetic(xp)
