"""
Request dispatch: serialization of requests and the HTTP clients that send them.
"""
from urlbox.dispatcher.async_client import AsyncUrlboxClient
from urlbox.dispatcher.client import UrlboxClient
from urlbox.dispatcher.serializer import ASYNC_ACCEPTED_MESSAGE

__all__ = ["UrlboxClient", "AsyncUrlboxClient", "ASYNC_ACCEPTED_MESSAGE"]
