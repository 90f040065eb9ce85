import logging

from pubthr.errors import ConfigurationError


_LOG_FORMAT = '%(asctime)s %(process)d %(levelname)s %(name)s: %(message)s'
_ROOT_LOGGER = 'pubthr'

_LOG_MANAGER = None


def get_logger(logger_name):
    return logging.getLogger(logger_name)


def get_log_manager():
    global _LOG_MANAGER
    if _LOG_MANAGER is None:
        _LOG_MANAGER = LoggingManager()
    return _LOG_MANAGER


class LoggingManager(object):
    """
    Owns the handlers attached to the pubthr root logger. Calling configure
    again replaces whatever handlers a previous call installed.
    """

    def __init__(self):
        self._root_logger = logging.getLogger(_ROOT_LOGGER)
        self._handlers = list()

    def _add_handler(self, handler):
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        self._root_logger.addHandler(handler)
        self._handlers.append(handler)

    def _clear_handlers(self):
        for handler in self._handlers:
            self._root_logger.removeHandler(handler)
            handler.close()
        self._handlers = list()

    def configure(self, cfg):
        """
        Configures the pubthr loggers from the logging section of a
        PublisherConfiguration.

        :param cfg: An instance of PublisherConfiguration
        """
        self._clear_handlers()

        level = logging.getLevelName(str(cfg.logging.verbosity).upper())
        if not isinstance(level, int):
            level = logging.WARNING
        self._root_logger.setLevel(level)

        if cfg.logging.console:
            self._add_handler(logging.StreamHandler())

        if cfg.logging.logfile:
            try:
                handler = logging.FileHandler(cfg.logging.logfile)
            except OSError as ex:
                raise ConfigurationError('configure_logging', ex)
            self._add_handler(handler)

    @property
    def handlers(self):
        return list(self._handlers)
