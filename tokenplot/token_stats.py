from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from tokenplot.errors import EmptyTokenSequenceError

# --------------------- CONFIG ---------------------
Z_SCALE = 10.0
PREDICTION_DECIMALS = 2
PREDICTION_QUANTUM = Decimal(1).scaleb(-PREDICTION_DECIMALS)


# --------------------- PLOT DATA ---------------------
def build_plot_points(tokens, rng=None):
    """
    One point per token: x is the token index, y its length and z a random
    value in [0, Z_SCALE). Returned as plain dicts so they serialize to JSON.
    """
    rng = rng if rng is not None else np.random.default_rng()
    z_values = rng.random(len(tokens)) * Z_SCALE
    return [
        {"x": i, "y": len(token), "z": float(z), "text": token}
        for i, (token, z) in enumerate(zip(tokens, z_values))
    ]


def plot_series(points):
    """Column-oriented view of the points, the shape a scatter3d trace expects."""
    return {
        "x": [p["x"] for p in points],
        "y": [p["y"] for p in points],
        "z": [p["z"] for p in points],
        "text": [p["text"] for p in points],
    }


# --------------------- PREDICTION ---------------------
def predict_token_length(tokens):
    """Mean token length rounded to two decimals, e.g. cat/dog/bird -> 3.33"""
    if len(tokens) == 0:
        raise EmptyTokenSequenceError()
    lengths = np.array([len(token) for token in tokens])
    # ties round up: 2.125 -> 2.13, 0.625 -> 0.63
    mean = Decimal(str(float(lengths.mean())))
    return float(mean.quantize(PREDICTION_QUANTUM, rounding=ROUND_HALF_UP))


def format_prediction(value):
    return f"{value:.{PREDICTION_DECIMALS}f}"
