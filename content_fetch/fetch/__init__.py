from content_fetch.fetch.base import BaseFetchClient
from content_fetch.fetch.factory import FetchClientFactory
from content_fetch.fetch.models import FetchResult

__all__ = ["BaseFetchClient", "FetchClientFactory", "FetchResult"]
