import logging
import os
from torch.utils.tensorboard import SummaryWriter

def configure_logger(name, log_dir='logs'):
    """
    Configure a logger to save to a file and print to console.
    Calling it again with the same log_dir returns the logger unchanged;
    with another log_dir the handlers are replaced.
    """
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    log_path = os.path.abspath(os.path.join(log_dir, f'{name}.log'))
    if any(getattr(h, 'baseFilename', None) == log_path for h in logger.handlers):
        return logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # File handler
    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(file_handler)

    # Console handler
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(stream_handler)

    return logger

class TensorBoardLogger:
    """A simple wrapper for torch.utils.tensorboard.SummaryWriter."""
    def __init__(self, log_dir='logs/tensorboard'):
        self.writer = SummaryWriter(log_dir)

    def log_scalar(self, tag, value, step):
        self.writer.add_scalar(tag, value, step)

    def log_coverage(self, coverage, step):
        self.log_scalar('hull/size', coverage.hull_size, step)
        self.log_scalar('hull/points', coverage.total, step)
        if coverage.percentage is not None:
            self.log_scalar('hull/coverage', coverage.percentage, step)

    def close(self):
        self.writer.close()
