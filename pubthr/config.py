import os.path

from collections import namedtuple
from configparser import ConfigParser

from pubthr.errors import ConfigurationError


_CFG_DEFAULTS = {
    'zmq': {
        'io_threads': 1,
        'socket_type': 'push',
        'sndhwm': None,
        'linger': 0
    },
    'logging': {
        'console': True,
        'logfile': None,
        'verbosity': 'WARNING'
    }
}

_SOCKET_TYPES = ('push', 'pub')


PublisherSettings = namedtuple('PublisherSettings', ['endpoint', 'payload_size'])


def load_config(location=None):
    """
    Loads a PublisherConfiguration from the INI file at location. When no
    location is given every option takes its default value.
    """
    cfg = ConfigParser()
    if location is not None:
        if not os.path.isfile(location):
            raise ConfigurationError(
                'load_config',
                'Unable to locate configuration file: {}'.format(location))
        cfg.read(location)
    return PublisherConfiguration(cfg)


class PublisherConfiguration(object):
    """
    A pubthr configuration.
    """
    def __init__(self, cfg):
        self.zmq = ZmqConfiguration(cfg)
        self.logging = LoggingConfiguration(cfg)

    def __getattr__(self, name):
        return None


class ConfigurationObject(object):
    """
    A configuration object is an OO abstraction for a ConfigParser section.
    Subclasses are named after their section followed by the word
    "Configuration" so that ZmqConfiguration reads options from the
    ConfigParser section "zmq". Options missing from the file fall back to
    the values in _CFG_DEFAULTS.
    """
    def __init__(self, cfg):
        self._cfg = cfg
        self._namespace = self._format_namespace()

    def _format_namespace(self):
        return type(self).__name__.replace('Configuration', '').lower()

    def _has_option(self, option):
        return self._cfg.has_option(self._namespace, option)

    def _get_default(self, option):
        return _CFG_DEFAULTS[self._namespace].get(option)

    def _get(self, option):
        if self._has_option(option):
            return self._cfg.get(self._namespace, option)
        return self._get_default(option)

    def _getboolean(self, option):
        if self._has_option(option):
            try:
                return self._cfg.getboolean(self._namespace, option)
            except ValueError:
                raise ConfigurationError(
                    'load_config',
                    'Option {}.{} must be a boolean'.format(
                        self._namespace, option))
        return self._get_default(option)

    def _getint(self, option):
        if self._has_option(option):
            try:
                return self._cfg.getint(self._namespace, option)
            except ValueError:
                raise ConfigurationError(
                    'load_config',
                    'Option {}.{} must be an integer'.format(
                        self._namespace, option))
        return self._get_default(option)


class ZmqConfiguration(ConfigurationObject):
    """
    Class mapping for the configuration section 'zmq'
    """
    @property
    def io_threads(self):
        """
        Returns the number of I/O threads the zmq context is created with.
        If unset, this defaults to 1.

        Example
        --------
        io_threads = 1
        """
        return self._getint('io_threads')

    @property
    def socket_type(self):
        """
        Returns the kind of socket messages are sent on. This value may be
        either push or pub. If unset this value defaults to push.

        Example
        --------
        socket_type = push
        """
        socket_type = self._get('socket_type').lower()
        if socket_type not in _SOCKET_TYPES:
            raise ConfigurationError(
                'load_config',
                'Unsupported socket type: {}'.format(socket_type))
        return socket_type

    @property
    def sndhwm(self):
        """
        Returns the send high water mark set on the socket. If unset the
        transport's own default applies.

        Example
        --------
        sndhwm = 1000
        """
        return self._getint('sndhwm')

    @property
    def linger(self):
        """
        Returns the linger period, in milliseconds, set on the socket. If
        unset this value defaults to 0 and closing the socket discards any
        messages still queued.
        """
        return self._getint('linger')


class LoggingConfiguration(ConfigurationObject):
    """
    Class mapping for the configuration section 'logging'
    """
    @property
    def console(self):
        """
        Returns a boolean representing whether or not pubthr should write
        log records to the console. If unset this value defaults to True.
        """
        return self._getboolean('console')

    @property
    def logfile(self):
        """
        Returns the log file the system should write logs to. If unset this
        value defaults to None.
        """
        return self._get('logfile')

    @property
    def verbosity(self):
        """
        Returns the type of log messages that should be logged. This value may
        be one of the following: DEBUG, INFO, WARNING, ERROR or CRITICAL. If
        unset this value defaults to WARNING.
        """
        return self._get('verbosity')
