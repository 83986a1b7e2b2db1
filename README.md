# viewlayer

A view layer for neural-network inference. It reshapes each tensor of a
batch to a target shape, the way a `Tensor.view` operator does in a traced
model graph. Tensors are NumPy arrays of `float32`.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Using it

Everything lives in `viewlayer.view`: the `ViewLayer` class and the
`ViewError` exception.

The shape is given batch first. The first entry is the batch size or `-1`
for any batch size. The other entries are the shape of each item. Each of
them must be positive, except that the last may be `-1`. A `-1` there takes
up whatever elements remain. At most one `-1` may appear after the batch
entry.

```python
import numpy as np
from viewlayer.view import ViewLayer

layer = ViewLayer([1, 3, 32, -1])
inputs = [np.zeros((2, 32, 3), dtype=np.float32)]
outputs = layer.forward(inputs, [None])
print(outputs[0].shape)  # (3, 32, 2)
```

`ViewLayer.shapes` gives the shape parameter back as a tuple.

`forward(inputs, outputs)` needs an output list as long as the input list.
It fills that list and returns it. Each output holds the input's elements,
converted to `float32`, in the new shape and in the same row-major order:

- a slot that is `None`, empty or not C-contiguous gets a fresh copy;
- a slot that already holds a contiguous array of the same number of
  elements is written in place, and a reshaped view of that array is stored
  in the slot.

A layer can also be built from an operator's parameters. These must hold a
list of integers under `"shape"`:

```python
layer = ViewLayer.from_params({"shape": [2, 96]})
```

## Errors

`ViewError`, a subclass of `ValueError`, is raised in these cases:

- `"shape"` is missing from the parameters, or is not a list of integers;
- the input list is empty, or one of its tensors is missing or empty;
- the input and output lists differ in length;
- the shape parameter is empty;
- the batch entry is neither `-1` nor the number of inputs;
- a dimension is zero or negative, other than `-1`;
- there is more than one `-1`, or a `-1` that is not last;
- the shape does not account for every element of an input;
- an output slot holds an array of the wrong size.

## What it does not do

The package provides this one layer and nothing else. It does not load or
run model graphs. It has no registry of layer types and no other layers. It
has no command-line tool.