import logging
from logging import StreamHandler, Formatter


def setup_sitelog_logging(level=logging.INFO, format_string=' -- %(name)s: %(message)s'):
    """Setup logging for the entire sitelogs package"""
    # Configure the parent 'sitelogs' logger
    sitelog_logger = logging.getLogger('sitelogs')

    # Avoid duplicate handlers
    if not sitelog_logger.handlers:
        handler = StreamHandler()
        if level == logging.INFO:
            handler.setFormatter(Formatter(' -- %(message)s'))
        else:
            handler.setFormatter(Formatter(format_string))
        sitelog_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        sitelog_logger.propagate = False

    sitelog_logger.setLevel(level)

    return sitelog_logger
