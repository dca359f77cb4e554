""" Fit the network to the first 100 records of the UCI abalone dataset
and save a chart of the error trajectory.

Download `abalone.data` from the UCI machine learning repository into
the working directory first.
"""
import logging

import numpy as np

from ffnn import TrainingConfig, Trainer
from ffnn.core.logger import setup_logging
from ffnn.data.abalone import load_abalone
from ffnn.util.on_sample import log_errors
from ffnn.visualize import plot_error_history


random_state = np.random.RandomState(1234)

setup_logging(filename='fit-log.txt', stdout=True, level=logging.INFO)

# Load the data ###############################################################

n_examples = 100
features, targets = load_abalone('abalone.data', n_examples=n_examples)

# Set up the trainer and fit ##################################################

config = TrainingConfig(
    n_examples=n_examples, n_features=features.shape[1],
    hidden_sizes=(5, 5), n_outputs=1,
    n_epochs=1000, learning_rate=1.0, sample_interval=1)

trainer = Trainer(features, targets, config=config, random_state=random_state)
result = trainer.train(on_sample=[log_errors()])

# Plot the error ##############################################################

plot_error_history(result.error_history, 'error.png')
