""" Fit the network to a tiny random problem (4 examples, 3 features,
2 outputs) for 100 epochs
"""
import numpy as np

from ffnn import TrainingConfig, train
from ffnn.data.synthetic import random_dataset
from ffnn.visualize import plot_error_history


random_state = np.random.RandomState(1234)

features, targets = random_dataset(
    n_examples=4, n_features=3, n_outputs=2, random_state=random_state)

config = TrainingConfig.from_data(
    features, targets, hidden_sizes=(5, 5), n_epochs=100, learning_rate=1.0)

result = train(features, targets, config=config, random_state=random_state)

print("Error at epoch 0:  {:.7f}".format(result.error_history[0]))
print("Error at epoch 99: {:.7f}".format(result.error_history[-1]))

plot_error_history(result.error_history, 'random-error.png',
                   title="Neural Network (Random Data) Error")
