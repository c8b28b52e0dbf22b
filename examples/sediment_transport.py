"""
Sediment transport prediction with a Reduced Kernel Extreme Learning Machine.

Sediment data should be distributed in columns: Cv, Dgr, d/R, lambda_s and
P/B, optionally followed by the target Fr.

Usage:
    python sediment_transport.py -o results train data.csv
    python sediment_transport.py -o results predict data.csv
"""
import os
import logging

import numpy as np
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from pyrkelm.datasets import load_sediment_transport
from pyrkelm.preprocessing import make_normalized_rkelm
from pyrkelm.util import argument_parser, new_logger, timed, save_model, \
    load_model


def train(filename: str, directory: str) -> None:
    dataset = load_sediment_transport(filename)
    if dataset.target is None:
        raise ValueError('{0} has no target column.'.format(filename))
    pipeline = make_normalized_rkelm(
        kernel='rbf', kernel_param=[0.1], regularization_parameter=1000.,
        hidden_layer_size=min(1000, dataset.data.shape[0]), random_state=42)
    pipeline.fit(dataset.data, dataset.target)
    rkelm = pipeline['rkelm'].regressor_
    logger.info('Trained in {0:.4f} s with the {1} form.'
                .format(rkelm.fit_time_, rkelm.solver_))
    y_pred = pipeline.predict(dataset.data)
    logger.info('Training RMSE: {0:.4f}, MAE: {1:.4f}, R2: {2:.4f}'.format(
        np.sqrt(mean_squared_error(dataset.target, y_pred)),
        mean_absolute_error(dataset.target, y_pred),
        r2_score(dataset.target, y_pred)))
    save_model(pipeline, os.path.join(directory, 'rkelm.joblib'))


def predict(filename: str, directory: str) -> None:
    pipeline = load_model(os.path.join(directory, 'rkelm.joblib'))
    dataset = load_sediment_transport(filename)
    y_pred, duration = timed(pipeline.predict, dataset.data)
    logger.info('Predicted {0} samples in {1:.4f} s.'
                .format(y_pred.shape[0], duration))
    if dataset.target is not None:
        logger.info('Test RMSE: {0:.4f}, R2: {1:.4f}'.format(
            np.sqrt(mean_squared_error(dataset.target, y_pred)),
            r2_score(dataset.target, y_pred)))
    frame = dataset.frame.copy()
    frame['Fr_predicted'] = y_pred
    frame.to_csv(os.path.join(directory, 'predicted_data.csv'), index=False)


if __name__ == "__main__":
    args = argument_parser.parse_args()
    directory = args.out or os.getcwd()
    os.makedirs(directory, exist_ok=True)
    logger = new_logger('sediment_transport', directory=directory)
    if len(args.params) != 2 or args.params[0] not in ('train', 'predict'):
        argument_parser.error('expected parameters: train|predict filename')
    command, filename = args.params
    if command == 'train':
        train(filename, directory)
    else:
        predict(filename, directory)
    logging.info('Done.')
