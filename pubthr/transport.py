"""
The transport module wraps the ZeroMQ socket that benchmark payloads are
pushed out on. Failures reported by pyzmq are converted into the errors
defined in pubthr.errors so callers can tell which operation broke.
"""

import zmq

from zmq.error import ZMQError

from pubthr.log import get_logger
from pubthr.errors import (
    ChannelInitError, ConnectError, SendError, CloseError)


_LOG = get_logger(__name__)

_SOCKET_TYPES = {
    'push': zmq.PUSH,
    'pub': zmq.PUB
}


class ZeroMQChannel(object):
    """
    ZeroMQChannel owns a single outbound zmq socket and the context it was
    created from. Sends block whenever the socket's high water mark has been
    reached, which is the only throttle applied to a sender.
    """

    def __init__(self, socket_type='push', io_threads=1, sndhwm=None,
                 linger=0):
        """
        Creates an instance of the ZeroMQChannel. No zmq resources are
        allocated until open() is called.

        :param socket_type: Either 'push' or 'pub'
        :param io_threads: Number of I/O threads for the zmq context
        :param sndhwm: Optional send high water mark for the socket
        :param linger: Optional linger period for the socket, in milliseconds
        """
        self.socket_type = _SOCKET_TYPES[socket_type]
        self.io_threads = io_threads
        self.sndhwm = sndhwm
        self.linger = linger
        self.context = None
        self.socket = None
        self.opened = False

    @classmethod
    def from_config(cls, zmq_cfg):
        """
        Builds a channel from the zmq section of a PublisherConfiguration.
        """
        return cls(
            socket_type=zmq_cfg.socket_type,
            io_threads=zmq_cfg.io_threads,
            sndhwm=zmq_cfg.sndhwm,
            linger=zmq_cfg.linger)

    def open(self):
        """
        Create a zmq.Context and a socket of the configured type and apply
        the configured socket options.
        """
        try:
            self.context = zmq.Context(self.io_threads)
        except ZMQError as ex:
            raise ChannelInitError('zmq_init', ex)

        try:
            self.socket = self.context.socket(self.socket_type)
            if self.sndhwm is not None:
                self.socket.setsockopt(zmq.SNDHWM, self.sndhwm)
            if self.linger is not None:
                self.socket.setsockopt(zmq.LINGER, self.linger)
        except ZMQError as ex:
            self.context.destroy()
            self.context = None
            self.socket = None
            raise ChannelInitError('zmq_socket', ex)

        self.opened = True

    def connect(self, endpoint):
        """
        Connect the socket to a transport endpoint such as
        tcp://127.0.0.1:4505
        """
        if not self.opened:
            raise ConnectError('zmq_connect', 'channel is not open')
        try:
            self.socket.connect(endpoint)
        except ZMQError as ex:
            raise ConnectError('zmq_connect', ex)
        _LOG.debug('Connected to {}'.format(endpoint))

    def send(self, buf):
        """
        Sends a message over the socket, blocking until zmq accepts it
        """
        if not self.opened:
            raise SendError('zmq_sendmsg', 'channel is not open')
        try:
            self.socket.send(buf)
        except ZMQError as ex:
            raise SendError('zmq_sendmsg', ex)

    def close(self):
        """
        Close the zmq socket and destroy its context. Closing a channel that
        is not open does nothing.
        """
        if not self.opened:
            return

        socket = self.socket
        context = self.context
        self.socket = None
        self.context = None
        self.opened = False

        try:
            socket.close()
        except ZMQError as ex:
            raise CloseError('zmq_close', ex)
        finally:
            context.destroy()
