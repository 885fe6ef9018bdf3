# flake8: noqa

from .normalize import normalize_input, normalize_matrix
from .on_epoch import collect_errors, log_errors, stop_below
