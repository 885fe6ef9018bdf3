import csv
import logging

import numpy


_logger_name = __name__.rsplit('.', 1)[-1]
logger = logging.getLogger(_logger_name)


def load_csv(filename, skip_header=False, delimiter=','):
    """ Load a numeric table from a CSV file

    Parameters
    ----------
    filename: str
        Path to the CSV file.

    skip_header: bool, default=False
        If True, the first line of the file is ignored.

    delimiter: str, default=','
        The field delimiter.

    Returns
    -------
    table: ndarray, shape=(n_rows, n_columns)
        The rows that could be parsed. Rows with a non-numeric cell, and
        rows whose length differs from the first parsed row, are skipped
        and logged as warnings.

    Raises
    ------
    OSError
        If the file cannot be opened.

    ValueError
        If no row could be parsed.
    """
    rows = []
    n_columns = None

    with open(filename, newline='') as f:
        reader = csv.reader(f, delimiter=delimiter)

        for line_number, cells in enumerate(reader, start=1):
            if line_number == 1 and skip_header:
                continue

            # Blank lines
            if not cells or all(not cell.strip() for cell in cells):
                continue

            try:
                row = [float(cell) for cell in cells]
            except ValueError:
                msg = "Skipping line {:d} of {}: non-numeric value in {!r}"
                logger.warning(msg.format(line_number, filename, cells))
                continue

            if n_columns is None:
                n_columns = len(row)
            elif len(row) != n_columns:
                msg = "Skipping line {:d} of {}: {:d} columns, expected {:d}"
                logger.warning(msg.format(
                    line_number, filename, len(row), n_columns))
                continue

            rows.append(row)

    if not rows:
        msg = "No numeric rows could be read from {}"
        raise ValueError(msg.format(filename))

    logger.debug("Loaded {:d} rows from {}".format(len(rows), filename))

    return numpy.array(rows, dtype=numpy.float64)


def split_columns(table, n_targets=1):
    """ Split a table into its input columns and its last `n_targets`
    target columns
    """
    table = numpy.asarray(table, dtype=numpy.float64)

    if not 0 < n_targets < table.shape[1]:
        msg = "`n_targets` must be between 1 and {:d} (got {})"
        raise ValueError(msg.format(table.shape[1] - 1, n_targets))

    return table[:, :-n_targets], table[:, -n_targets:]
