class InvalidTopology(ValueError):
    """ Raised when a network is built from a topology with fewer than two
    layers or with a layer that has no neurons
    """


class DimensionMismatch(ValueError):
    """ Raised when an input or target vector does not match the number of
    neurons in the layer that receives it
    """


class StopTraining(Exception):
    """ Raised by an `on_epoch` function to end training early
    """
    def __init__(self, epoch, error):
        msg = "Stopped at epoch {:d} with error {:.6f}"
        super().__init__(msg.format(epoch, error))
        self.epoch = epoch
        self.error = error
