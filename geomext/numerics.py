import logging

import numpy as np

logger = logging.getLogger(__name__)


def _log_fp_error(err, flag):
    logger.debug("floating-point %s propagated (flag=%d)", err, flag)


def ungated():
    """Floating-point error state for division-bearing kernels.

    Division by zero, overflow and invalid operations produce the IEEE result
    (inf or nan) instead of a warning or an exception; each event is logged at
    DEBUG level.
    """
    return np.errstate(
        divide="call", over="call", invalid="call", call=_log_fp_error
    )


def fdiv(numerator, denominator):
    """Divide two scalars, yielding inf or nan for a zero denominator."""
    with ungated():
        return float(np.divide(numerator, denominator))
