"""MatrixMaster - matrix calculator with a symbolic evaluator.

Main namespace package:
- matrixmaster.expression: Expression trees and their renderers
- matrixmaster.linalg: Matrix type, minors, symbolic and numeric operations
- matrixmaster.dispatch: Numeric/symbolic mode dispatcher
- matrixmaster.display: Result formatting
- matrixmaster.core: Configuration and logging
"""

__version__ = "0.1.0"

__all__ = []
