import sys
import argparse

import simplejson as json

import pubthr.config as config

from pubthr.log import get_logger, get_log_manager
from pubthr.errors import PublisherError, ConfigurationError
from pubthr.publisher import ThroughputPublisher
from pubthr.transport import ZeroMQChannel


USAGE = 'Usage:\n\t./pubthr -e tcp://127.0.0.1:4505 -p 8'

EXIT_FAILURE = 1
EXIT_CHANNEL_ERROR = 255


_LOG = get_logger(__name__)


def _build_parser():
    # Unknown flags, -h included, are left alone by parse_known_args
    parser = argparse.ArgumentParser(add_help=False, exit_on_error=False)
    parser.add_argument('-e', dest='endpoint')
    parser.add_argument('-p', dest='payload')
    parser.add_argument('-c', dest='config_file')
    return parser


def parse_payload_size(value):
    """
    Reads a payload size the way C's atoi does: leading whitespace, an
    optional sign and as many digits as follow. Anything else reads as 0.
    """
    value = value.lstrip()
    end = 0
    if value[:1] in ('-', '+'):
        end = 1
    while end < len(value) and '0' <= value[end] <= '9':
        end += 1

    digits = value[:end]
    if digits in ('', '-', '+'):
        return 0
    return int(digits)


def parse_args(argv):
    """
    Returns a tuple of PublisherSettings and the configuration file path,
    which may be None. Raises a ConfigurationError when -e or -p is missing.
    """
    try:
        args, _ = _build_parser().parse_known_args(argv)
    except argparse.ArgumentError as ex:
        raise ConfigurationError('parse_args', ex)

    if args.endpoint is None or args.payload is None:
        raise ConfigurationError('parse_args', 'missing required argument')

    settings = config.PublisherSettings(
        endpoint=args.endpoint,
        payload_size=parse_payload_size(args.payload))
    return settings, args.config_file


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings, config_file = parse_args(argv)
    except ConfigurationError:
        print(USAGE)
        return EXIT_FAILURE

    try:
        cfg = config.load_config(config_file)
        get_log_manager().configure(cfg)
        channel = ZeroMQChannel.from_config(cfg.zmq)
    except ConfigurationError as ex:
        print(ex)
        return EXIT_FAILURE

    _LOG.debug('Starting publisher: {}'.format(json.dumps({
        'endpoint': settings.endpoint,
        'payload_size': settings.payload_size,
        'socket_type': cfg.zmq.socket_type,
        'io_threads': channel.io_threads,
        'sndhwm': channel.sndhwm,
        'linger': channel.linger
    })))

    try:
        publisher = ThroughputPublisher(settings, channel)
        publisher.run()
    except PublisherError as ex:
        _LOG.debug('Publisher failed', exc_info=True)
        print(ex)
        return EXIT_CHANNEL_ERROR


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
