from .logging_config import ContextFormatter, get_logger, setup_logging
