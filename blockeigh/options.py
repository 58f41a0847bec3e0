# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Self, overload
from enum import Enum
import threading

from .backend import ArrayNamespace
from .utils import check_non_neg

class OptionType(Enum):
    JACOBI = 0
    REFERENCE = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class JacobiOptions(Options):
    """
    Context manager for the parameters of the block Jacobi eigenvalue decomposition.
    """

    #: Convergence threshold of the relative off-diagonal norm and zero cutoff of the results.
    eps: float
    #: Maximum number of sweeps.
    max_iter: int

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            eps: float = 1e-6,
            max_iter: int = 15):
        check_non_neg("eps", eps)
        check_non_neg("max_iter", max_iter)
        self.eps = eps
        self.max_iter = max_iter
        super().__init__(namespace, OptionType.JACOBI)

class ReferenceOptions(Options):
    """
    Context manager for the reference decomposition of the linalg extension.
    """

    #: Zero cutoff of the results.
    eps: float

    def __init__(self, *, namespace: ArrayNamespace, eps: float = 0.0):
        check_non_neg("eps", eps)
        self.eps = eps
        super().__init__(namespace, OptionType.REFERENCE)

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.JACOBI]) -> JacobiOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.REFERENCE]) -> ReferenceOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: JacobiOptions | ReferenceOptions) -> None:
    global _opts
    _opts[opts.key] = opts
