# mnistnet

`mnistnet` trains a small two-layer neural network on the MNIST
handwritten-digit dataset. Its only dependency is numpy.

The network has three layers:

- an input layer, 784 wide by default;
- one hidden layer of ReLU units, 128 by default;
- 10 softmax outputs.

The weights start from a He-uniform initialisation and the biases start at zero.

Training uses mini-batch gradient descent. The gradients are the
softmax-output gradients (`output - one_hot(label)`), summed over each batch.
Progress is reported as accuracy and mean squared error.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Data

By default the command looks for the four standard MNIST IDX files in an
`MNIST/` directory under the current directory:

```
MNIST/train-images-idx3-ubyte
MNIST/train-labels-idx1-ubyte
MNIST/t10k-images-idx3-ubyte
MNIST/t10k-labels-idx1-ubyte
```

## Command line

```
mnistnet
```

With no options the command does the following, in order:

1. It loads 10,000 test samples and 60,000 training samples.
2. It trains for 25 epochs with a batch size of 20 and a learning rate of 0.025.
3. It prints the training accuracy and MSE loss after each epoch, and a progress line every 1000 batches.
4. It prints the accuracy and loss on the test set.
5. It writes the learned parameters to `model_data/model_parameters.bin`, creating the directory if needed.
6. It prints the CPU time used.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--data-dir PATH` | `MNIST` | directory holding the IDX files |
| `--output PATH` | `model_data/model_parameters.bin` | where to save the trained parameters |
| `--load PATH` | none | load saved parameters and only validate on the test set |
| `--epochs N` | 25 | training epochs |
| `--batch-size N` | 20 | samples per gradient step |
| `--learning-rate X` | 0.025 | gradient-descent step size |
| `--hidden-size N` | 128 | hidden units |
| `--train-size N` | 60000 | training samples to load |
| `--test-size N` | 10000 | test samples to load |
| `--seed N` | random | seed for weight initialisation and shuffling |

If a file is missing or malformed, the command prints `mnistnet: <reason>` to
standard error and exits with status 1.

## Parameter file

The parameter file holds raw little-endian doubles with no header, in this
order:

1. W1, stored as input × hidden
2. b1
3. W2, stored as hidden × output
4. b2

`NeuralNetwork.load` reads such a file into a network of the same shape. It
raises `ValueError` if the file size does not match.

## Library use

```python
import numpy as np

from mnistnet.mnist import load_mnist
from mnistnet.network import NeuralNetwork
from mnistnet.training import train_network, validate_network

rng = np.random.default_rng(0)
train = load_mnist("MNIST/train-images-idx3-ubyte",
                   "MNIST/train-labels-idx1-ubyte", 60000)
test = load_mnist("MNIST/t10k-images-idx3-ubyte",
                  "MNIST/t10k-labels-idx1-ubyte", 10000)

net = NeuralNetwork(784, 128, 10, rng)
history = train_network(net, train, epochs=5, batch_size=20,
                        learning_rate=0.025, rng=rng, log=print)
result = validate_network(net, test, log=print)
print(result.accuracy, result.loss)
net.save("model.bin")
```

### `mnistnet.mnist`

- `load_mnist(image_file, label_file, num_samples=None)` reads samples from a
  pair of IDX files and returns a list of `MNISTSample`. Pass `None` to read
  every sample in the files.
- Each `MNISTSample` has two fields: `image`, the raw pixel bytes, and `label`,
  an int.
- Bad magic numbers, truncated data, or a request for more samples than the
  files hold raise `IdxFormatError`, a subclass of `ValueError`.
- `reverse_int` swaps the byte order of a 32-bit unsigned integer.

### `mnistnet.network`

`NeuralNetwork(input_size, hidden_size, output_size, rng)` has these methods:

- `forward(inputs)` returns the output probabilities and keeps the activations.
- `backward(target_label)` adds this sample's gradients to the accumulators.
- `zero_gradients()` resets the accumulators.
- `apply_gradients(learning_rate)` takes one descent step.
- `save(filename)` and `load(filename)` write and read the parameter file.

### `mnistnet.training`

- `train_network(network, samples, epochs, batch_size, learning_rate, rng, log)`
  shuffles the data each epoch and trains on whole batches. Samples left over
  after the last whole batch are not trained on. It returns one `EpochResult`
  per epoch.
- `validate_network(network, samples, log)` returns a single `EpochResult`.
- An `EpochResult` has the fields `correct`, `total`, `loss` and `epoch`, and
  an `accuracy` property.
- `shuffle_data(samples, rng)` shuffles a list in place.
- `log` is any callable that takes one string; it defaults to `print`.

### `mnistnet.activations`

- `relu`
- `relu_derivative`
- `softmax`
- `argmax`
- `mse_loss`
- `create_one_hot`
- `normalize_input`

## What it does not do

`mnistnet` does not download the MNIST files. It has no command for
classifying your own images. To get a prediction, call
`NeuralNetwork.forward` on a normalised pixel vector and take `argmax` of the
result.