"""
typedefs.py

Type aliases used throughout the pyinterplib package.

Type Aliases:
    ArrayTypes: Numerical sample data, either a numpy array, a list or a tuple.
"""

import numpy as np
from typing import List, Tuple, Union

# Numerical values can be represented as numpy arrays, lists, or tuples
ArrayTypes = Union[np.ndarray, List, Tuple]
