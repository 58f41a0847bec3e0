# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging as _logging

from .jacobi import eigh, BlockJacobiEigh, BlockEighResult
from .eighsolver import EigHSolver
from .blockeigh import BlockEigh

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = ["eigh", "BlockJacobiEigh", "BlockEighResult", "EigHSolver", "BlockEigh"]
