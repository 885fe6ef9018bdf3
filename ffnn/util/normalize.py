import numpy


def _column_range(reference):
    """ Returns the column minima and the column ranges of `reference`,
    with the range of each constant column set to zero
    """
    col_min = reference.min(axis=0)
    col_range = reference.max(axis=0) - col_min
    return col_min, col_range


def normalize_matrix(matrix):
    """ Min-max normalize each column of `matrix` to the range [0, 1]

    Parameters
    ----------
    matrix: ndarray, shape=(n_samples, n_columns)

    Returns
    -------
    normalized: ndarray, shape=(n_samples, n_columns)
        A new array. Columns with a single repeated value are all zeros.
    """
    matrix = numpy.asarray(matrix, dtype=numpy.float64)

    if matrix.ndim != 2:
        msg = "`matrix` must be 2d (got ndim={:d})"
        raise ValueError(msg.format(matrix.ndim))

    if matrix.shape[0] == 0:
        return matrix.copy()

    return normalize_input(matrix, reference=matrix)


def normalize_input(input, reference):
    """ Min-max normalize `input` using the column minima and maxima of
    `reference`

    Parameters
    ----------
    input: ndarray, shape=(n_columns,) or (n_samples, n_columns)
        A single row (or rows) to normalize.

    reference: ndarray, shape=(n_reference, n_columns)
        The data whose column ranges define the scaling, e.g., the training
        inputs.

    Returns
    -------
    normalized: ndarray, same shape as `input`
        Entries in constant columns of `reference` are set to zero. Values
        outside the reference range fall outside [0, 1].
    """
    input = numpy.asarray(input, dtype=numpy.float64)
    reference = numpy.asarray(reference, dtype=numpy.float64)

    if reference.ndim != 2 or reference.shape[0] == 0:
        raise ValueError("`reference` must be a non-empty 2d array")

    if input.shape[-1] != reference.shape[1]:
        msg = "`input` has {:d} columns but `reference` has {:d}"
        raise ValueError(msg.format(input.shape[-1], reference.shape[1]))

    col_min, col_range = _column_range(reference)
    constant = col_range == 0

    # Divide by one in constant columns; they are zeroed below
    normalized = (input - col_min) / numpy.where(constant, 1.0, col_range)
    normalized[..., constant] = 0.0

    return normalized
