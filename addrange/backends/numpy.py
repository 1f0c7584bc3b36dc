import numpy as np

from ..insert import insert, read_only

# ndarrays have a fixed size; np.append returns a new array
insert.register(np.ndarray, object)(read_only)
