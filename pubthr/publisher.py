"""
The publisher module holds the send loop that floods a transport endpoint
with fixed-size payloads. The loop applies no rate limit of its own; the only
throttle is the channel blocking inside send.
"""

from pubthr.log import get_logger
from pubthr.errors import PublisherError, SendError, CloseError
from pubthr.transport import ZeroMQChannel


_LOG = get_logger(__name__)

# Publisher states
STATE_CONNECTING = 0
STATE_STREAMING = 1
STATE_FAILED = 2


class ThroughputPublisher(object):
    """
    ThroughputPublisher owns one outbound channel and sends payloads of
    settings.payload_size bytes over it until the channel reports an error.
    """

    def __init__(self, settings, channel=None):
        """
        Opens the channel and connects it to settings.endpoint exactly once.
        The channel is released again if either step fails.

        :param settings: An instance of PublisherSettings
        :param channel: Optional channel exposing open, connect, send and
            close. A ZeroMQChannel is created when omitted.
        """
        self.settings = settings
        self.state = STATE_CONNECTING

        if channel is None:
            channel = ZeroMQChannel()
        self.channel = channel

        try:
            self.channel.open()
            self.channel.connect(settings.endpoint)
        except PublisherError:
            self.state = STATE_FAILED
            self._release()
            raise

    def _allocate(self):
        try:
            return bytearray(self.settings.payload_size)
        except (ValueError, MemoryError, OverflowError) as ex:
            raise SendError('zmq_msg_init_size', ex)

    def _release(self):
        try:
            self.channel.close()
        except CloseError as ex:
            _LOG.debug('Unable to release channel: {}'.format(ex))

    def run(self):
        """
        Sends messages forever. This only returns by raising the
        PublisherError that stopped the loop, after the channel has been
        released.
        """
        self.state = STATE_STREAMING
        send = self.channel.send
        try:
            while True:
                msg = self._allocate()
                send(msg)
                del msg
        except PublisherError:
            self.state = STATE_FAILED
            raise
        finally:
            self._release()
