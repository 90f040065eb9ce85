"""
The errors module defines the failures a throughput publisher can run into.
Every one of them is fatal. Each error carries the name of the operation that
failed and the underlying transport's description of what went wrong.
"""


class PublisherError(Exception):

    def __init__(self, operation, reason):
        super(PublisherError, self).__init__(operation, reason)
        self.operation = operation
        self.reason = str(reason)

    def __str__(self):
        return 'error in {}: {}'.format(self.operation, self.reason)


class ConfigurationError(PublisherError):
    """
    Raised when required arguments are missing or the configuration file
    can not be used.
    """
    pass


class ChannelInitError(PublisherError):
    """
    Raised when the transport context or socket can not be created.
    """
    pass


class ConnectError(PublisherError):
    pass


class SendError(PublisherError):
    """
    Raised when a message can not be constructed or handed to the transport.
    """
    pass


class CloseError(PublisherError):
    pass
