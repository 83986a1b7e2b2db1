"""A layer that reshapes each tensor of a batch, as ``Tensor.view`` does."""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from math import prod

import numpy as np

__all__ = ["ViewError", "ViewLayer"]


class ViewError(ValueError):
    """Raised when a view layer cannot be built or cannot run."""


def _is_empty(tensor: np.ndarray | None) -> bool:
    return tensor is None or np.asarray(tensor).size == 0


class ViewLayer:
    """Reshape every input tensor to the shape given by a ``view`` operator.

    The first entry of the shape is the batch size, or ``-1`` for any batch.
    The remaining entries are the shape of each tensor; the last of them
    may be ``-1``, in which case it takes up whatever elements are left.
    """

    layer_name = "view"
    op_type = "Tensor.view"

    def __init__(self, shapes: Sequence[int]) -> None:
        self._shapes = tuple(int(s) for s in shapes)

    @property
    def shapes(self) -> tuple[int, ...]:
        """The shape parameter, batch dimension first."""
        return self._shapes

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "ViewLayer":
        """Build a layer from operator parameters holding a ``shape`` list."""
        if "shape" not in params:
            raise ViewError("view layer missing shape")
        shape = params["shape"]
        if isinstance(shape, (str, bytes)) or not isinstance(shape, Sequence):
            raise ViewError("view layer missing shape")
        if not all(isinstance(s, (int, np.integer)) and not isinstance(s, bool) for s in shape):
            raise ViewError("view layer missing shape")
        return cls(shape)

    def _target_shape(self, total_size: int) -> tuple[int, ...]:
        dims = self._shapes[1:]
        for dim in dims:
            if dim != -1 and dim <= 0:
                raise ViewError(f"invalid dimension {dim} in shape parameter")
        dynamic = [j for j, dim in enumerate(dims) if dim == -1]
        if len(dynamic) > 1:
            raise ViewError("having two minus one in shape arrays")
        if dynamic and dynamic[0] != len(dims) - 1:
            raise ViewError("minus one shape is in the wrong axis, only slice the last axis")

        fixed = [dim for dim in dims if dim != -1]
        current_size = prod(fixed)
        if dynamic:
            if total_size < current_size:
                raise ViewError("input has fewer elements than the shape requires")
            fixed.append(total_size // current_size)
        if prod(fixed) != total_size:
            raise ViewError(
                f"cannot view a tensor of {total_size} elements as {tuple(fixed)}"
            )
        return tuple(fixed)

    def forward(
        self,
        inputs: Sequence[np.ndarray | None],
        outputs: MutableSequence[np.ndarray | None],
    ) -> MutableSequence[np.ndarray | None]:
        """Fill ``outputs`` with reshaped copies of ``inputs`` and return it.

        An output slot that already holds a contiguous tensor of the right
        size receives the data in place; an empty slot gets a fresh copy.
        """
        if not inputs:
            raise ViewError("the input feature map of view layer is empty")
        if len(inputs) != len(outputs):
            raise ViewError("the size of input and output feature map is not adapting")
        if any(_is_empty(tensor) for tensor in inputs):
            raise ViewError("the input feature map of view layer is empty")
        if not self._shapes:
            raise ViewError("the shape parameter is empty")
        batch_size = len(inputs)
        if self._shapes[0] not in (-1, batch_size):
            raise ViewError("the shape parameter is wrong")

        for i, tensor in enumerate(inputs):
            source = np.asarray(tensor, dtype=np.float32)
            target = self._target_shape(source.size)
            existing = outputs[i]
            if _is_empty(existing) or not np.asarray(existing).flags.c_contiguous:
                outputs[i] = source.copy().reshape(target)
                continue
            buffer = np.asarray(existing)
            if buffer.size != source.size:
                raise ViewError("the output tensor does not match the input size")
            buffer.reshape(-1)[:] = source.reshape(-1)
            outputs[i] = buffer.reshape(target)
        return outputs