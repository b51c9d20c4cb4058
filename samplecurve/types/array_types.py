from typing import Sequence, TypeAlias, Union
import numpy as np
import numpy.typing as npt

Scalar = int | float
ScalarVector = Sequence[Scalar]

ScalarSamples: TypeAlias = Union[Sequence[Scalar], np.ndarray]
VectorSamples: TypeAlias = Union[Sequence[ScalarVector], np.ndarray]
SampleArray: TypeAlias = npt.NDArray[np.float64]
