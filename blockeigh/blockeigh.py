# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Literal, Optional, Type, overload
from dataclasses import dataclass
import h5py

from .backend import ArrayNamespace, get_namespace
from .jacobi import BlockJacobiEigh, BlockEighResult, SweepState
from .eighsolver import EigHSolver
from .options import JacobiOptions, ReferenceOptions, OptionType, get_options, set_options
from .io import write as _write, read as _read

@dataclass(frozen=True)
class BlockEigh[NDArray: Any]:
    """
    Entry point bound to one array namespace. Default options are registered for the
    constructing thread, they can be overwritten with the context managers returned by
    jacobi and reference or with set_options.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))

        set_options(self.jacobi())
        set_options(self.reference())

    #-------------------------------------------------------------------------------------------------
    # decompositions

    def eigh(
            self,
            matrix: Any,
            eps: Optional[float] = None,
            max_iter: Optional[int] = None) -> tuple[NDArray, NDArray]:
        """
        Eigenvalues sorted by descending magnitude and eigenvectors of a real symmetric or
        complex Hermitian matrix with shape (..., n, n). Parameters that are not given are
        taken from the active JacobiOptions.
        """
        res = self.decompose(matrix, eps=eps, max_iter=max_iter)
        return res.values, res.vectors

    def decompose(
            self,
            matrix: Any,
            eps: Optional[float] = None,
            max_iter: Optional[int] = None,
            callback: Optional[Callable[[int, SweepState[NDArray]], bool]] = None
            ) -> BlockEighResult[NDArray]:
        """
        Same as eigh, but returns the full result including iteration counts and norms.
        The callback is called after every sweep, returning True stops the iteration.
        """
        opts = get_options(self.namespace, OptionType.JACOBI)
        solver = self.solver(eps=opts.eps if eps is None else eps,
                             max_iter=opts.max_iter if max_iter is None else max_iter)
        return solver.decompose(self.namespace.asarray(matrix), callback=callback)

    def reference_eigh(self, matrix: Any) -> tuple[NDArray, NDArray]:
        """
        Eigenvalue decomposition with the linalg extension of the namespace, sorted like eigh.
        """
        opts = get_options(self.namespace, OptionType.REFERENCE)
        return self.reference_solver(eps=opts.eps)(self.namespace.asarray(matrix))

    def solver(self, eps: float = 1e-6, max_iter: int = 15) -> BlockJacobiEigh:
        """
        Parallel block Jacobi eigenvalue solver.
        """
        return BlockJacobiEigh(eps=eps, max_iter=max_iter)

    def reference_solver(self, eps: float = 0.0) -> EigHSolver:
        """
        Eigenvalue solver of the linalg extension.
        """
        return EigHSolver(eps=eps)

    #-------------------------------------------------------------------------------------------------
    # options

    def jacobi(self, eps: float = 1e-6, max_iter: int = 15) -> JacobiOptions:
        """
        Options for the block Jacobi decomposition.
        """
        return JacobiOptions(namespace=self.namespace, eps=eps, max_iter=max_iter)

    def reference(self, eps: float = 0.0) -> ReferenceOptions:
        """
        Options for the reference decomposition.
        """
        return ReferenceOptions(namespace=self.namespace, eps=eps)

    @overload
    def get_options(self, otype: Literal[OptionType.JACOBI]) -> JacobiOptions: ...
    @overload
    def get_options(self, otype: Literal[OptionType.REFERENCE]) -> ReferenceOptions: ...
    # implementation
    def get_options(self, otype: OptionType) -> Any:
        """
        Currently active options of the given type.
        """
        return get_options(self.namespace, otype) # type: ignore

    def set_options(self, opts: JacobiOptions | ReferenceOptions) -> None:
        """
        Set the options of the given type, replaces the currently active ones.
        """
        set_options(opts)

    #-------------------------------------------------------------------------------------------------
    # io

    def write(self, group: h5py.Group, obj: BlockEighResult[NDArray]) -> None:
        """
        Write a decomposition result to a h5py group.
        """
        _write(group, obj)

    def read(self, group: h5py.Group, cls: Type[BlockEighResult]) -> BlockEighResult[NDArray]:
        """
        Read a decomposition result from a h5py group.
        """
        return _read(group, cls, self.namespace)
