# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of blockeigh."""

from .array_namespace import ArrayLike, ArrayNamespace
from .blocks import Quadrants
from .rotation import Rotation
from .permutation import PermutationNetwork, PermutationKind
from .sweep import SweepEngine
from .matrixeigenvaluedecomposition import MatrixEigenvalueDecomposition
from .eighsolver import EigHSolver
from .jacobi import BlockJacobiEigh, BlockEighResult, SweepState
from .options import Options, JacobiOptions, ReferenceOptions, OptionType
from .blockeigh import BlockEigh
