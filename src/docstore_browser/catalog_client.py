"""
Filename:       catalog_client.py
Author:         jole
Created:        02.10.2025

Description:    Talks to the remote document store. Lists databases ("containers"), the collections inside them,
                and fetches the documents of one collection.

Notes:          Two backends, picked from the URI scheme: MongoDB through pymongo, and a REST gateway (RESTHeart
                style) through requests.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import json
import logging
import requests

from bson           import json_util
from pymongo        import MongoClient
from pymongo.errors import PyMongoError, ConfigurationError, InvalidURI
from typing         import Any, List
from urllib.parse   import quote, urlsplit, urlunsplit

# --- Project defined
from .defs import DEFAULT_TIMEOUT, MONGO_SCHEMES, REST_SCHEMES
# --- END OF Import section --------------------------------------------------------------------------------------------



logger = logging.getLogger(__name__)



class CatalogError(Exception):
    """Base class for everything the catalog client raises."""


class CatalogConnectionError(CatalogError):
    """The URI is malformed, or the store can't be reached."""


class QueryError(CatalogError):
    """A listing or fetch against an open connection failed."""



def redact_uri(_uri: str) -> str:
    """
    Replace the password in a connection URI with '***', so it can be logged and shown.
    """

    try:
        parts = urlsplit(_uri)
    except ValueError:
        return _uri

    if parts.password is None:
        return _uri

    netloc = parts.netloc.replace(f":{parts.password}@", ":***@", 1)
    return urlunsplit(parts._replace(netloc = netloc))
# --- END OF redact_uri() ----------------------------------------------------------------------------------------------



class CatalogClient:
    """
    The interface the navigator talks to. One instance wraps one open store handle.
    """

    def list_top_level_containers(self) -> List[str]:
        raise NotImplementedError

    def list_sub_containers(self, _container: str) -> List[str]:
        raise NotImplementedError

    def fetch_all_records(self, _container: str, _collection: str) -> List[Any]:
        raise NotImplementedError

    def format_record(self, _record: Any) -> str:
        return str(_record)

    def close(self) -> None:
        pass
# --- END OF class CatalogClient ---------------------------------------------------------------------------------------



class MongoCatalog(CatalogClient):
    """
    MongoDB backend. The client is created and pinged once; the same MongoClient is reused for the whole session.
    """

    def __init__(self, _client: MongoClient) -> None:
        self.client = _client
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @classmethod
    def connect(cls, _uri: str, _timeout: float = DEFAULT_TIMEOUT) -> "MongoCatalog":
        timeout_ms = int(_timeout * 1000)
        try:
            client = MongoClient(_uri,
                                 serverSelectionTimeoutMS   = timeout_ms,
                                 connectTimeoutMS           = timeout_ms)
        except (InvalidURI, ConfigurationError, ValueError) as e:
            raise CatalogConnectionError(f"Invalid connection string: {e}") from e

        try:
            # --- MongoClient connects lazily, ping to find out if anybody is home
            client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise CatalogConnectionError(f"Could not reach {redact_uri(_uri)}: {e}") from e

        return cls(client)
    # --- END OF connect() ---------------------------------------------------------------------------------------------



    def list_top_level_containers(self) -> List[str]:
        try:
            return list(self.client.list_database_names())
        except PyMongoError as e:
            raise QueryError(f"Could not list databases: {e}") from e
    # --- END OF list_top_level_containers() ---------------------------------------------------------------------------



    def list_sub_containers(self, _container: str) -> List[str]:
        try:
            return list(self.client[_container].list_collection_names())
        except PyMongoError as e:
            raise QueryError(f"Could not list collections in {_container}: {e}") from e
    # --- END OF list_sub_containers() ---------------------------------------------------------------------------------



    def fetch_all_records(self, _container: str, _collection: str) -> List[Any]:
        """
        Opening the cursor may fail, and that is a QueryError. Once open, a failure while iterating throws away
        what we have so far and gives back an empty list.

        find() is lazy, the server is only asked when the first batch is pulled. So the first document is read
        here, where a failure still counts as "could not open".
        """

        cursor = None
        try:
            cursor = self.client[_container][_collection].find()
            first  = next(cursor, None)
        except PyMongoError as e:
            if cursor is not None:
                cursor.close()
            raise QueryError(f"No cursor found for {_container}/{_collection}: {e}") from e

        if first is None:
            cursor.close()
            return []

        try:
            with cursor:
                return [first] + list(cursor)
        except PyMongoError as e:
            logger.warning(f"Reading {_container}/{_collection} failed mid-stream, showing nothing: {e}")
            return []
    # --- END OF fetch_all_records() -----------------------------------------------------------------------------------



    def format_record(self, _record: Any) -> str:
        return json_util.dumps(_record)



    def close(self) -> None:
        self.client.close()
# --- END OF class MongoCatalog ----------------------------------------------------------------------------------------



class RestCatalog(CatalogClient):
    """
    REST gateway backend.

        GET <base>/                          -> databases
        GET <base>/<db>                      -> collections
        GET <base>/<db>/<collection>         -> documents

    A body is either a JSON array, or an object with the array under "_embedded". Names may be plain strings or
    objects carrying "_id" or "name".
    """

    UA = "Mozilla/5.0 (compatible; DocstoreBrowser/1.0)"

    def __init__(self, _base_url: str, _timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url   = _base_url.rstrip("/")
        self.timeout    = _timeout
        self.session    = requests.Session()
        self.session.headers.update({"User-Agent": self.UA, "Accept": "application/json"})
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @classmethod
    def connect(cls, _uri: str, _timeout: float = DEFAULT_TIMEOUT) -> "RestCatalog":
        if not urlsplit(_uri).hostname:
            raise CatalogConnectionError(f"Invalid connection string: no host in {redact_uri(_uri)}")

        catalog = cls(_uri, _timeout)
        try:
            r = catalog.session.get(catalog._url(), timeout = _timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            catalog.close()
            raise CatalogConnectionError(f"Could not reach {redact_uri(_uri)}: {e}") from e

        return catalog
    # --- END OF connect() ---------------------------------------------------------------------------------------------



    def _url(self, *_parts: str) -> str:
        if not _parts:
            return self.base_url + "/"
        return "/".join([self.base_url] + [quote(p, safe = "") for p in _parts])
    # --- END OF _url() ------------------------------------------------------------------------------------------------



    def _get(self, *_parts: str) -> requests.Response:
        url = self._url(*_parts)
        try:
            r = self.session.get(url, timeout = self.timeout)
            r.raise_for_status()
        except requests.HTTPError as e:
            raise QueryError(f"HTTP {e.response.status_code} {e.response.reason} for {redact_uri(url)}") from e
        except requests.RequestException as e:
            raise QueryError(f"Request to {redact_uri(url)} failed: {e}") from e
        return r
    # --- END OF _get() ------------------------------------------------------------------------------------------------



    @staticmethod
    def _items(_body: Any) -> List[Any]:
        if isinstance(_body, dict):
            _body = _body.get("_embedded", [])
        if not isinstance(_body, list):
            raise ValueError(f"expected a JSON array, got {type(_body).__name__}")
        return _body
    # --- END OF _items() ----------------------------------------------------------------------------------------------



    @staticmethod
    def _name(_item: Any) -> str:
        if isinstance(_item, dict):
            return str(_item.get("_id", _item.get("name", "")))
        return str(_item)



    def _list_names(self, *_parts: str) -> List[str]:
        r = self._get(*_parts)
        try:
            return [self._name(i) for i in self._items(r.json())]
        except ValueError as e:
            raise QueryError(f"Unexpected listing from {redact_uri(r.url)}: {e}") from e
    # --- END OF _list_names() -----------------------------------------------------------------------------------------



    def list_top_level_containers(self) -> List[str]:
        return self._list_names()



    def list_sub_containers(self, _container: str) -> List[str]:
        return self._list_names(_container)



    def fetch_all_records(self, _container: str, _collection: str) -> List[Any]:
        r = self._get(_container, _collection)
        try:
            return self._items(r.json())
        except ValueError as e:
            # --- Body broke off or isn't a document array, don't show half of it
            logger.warning(f"Reading {_container}/{_collection} failed mid-stream, showing nothing: {e}")
            return []
    # --- END OF fetch_all_records() -----------------------------------------------------------------------------------



    def format_record(self, _record: Any) -> str:
        return json.dumps(_record, ensure_ascii = False, default = str)



    def close(self) -> None:
        self.session.close()
# --- END OF class RestCatalog -----------------------------------------------------------------------------------------



def connect(_uri: str, _timeout: float = DEFAULT_TIMEOUT) -> CatalogClient:
    """
    Open a catalog client for the given connection string.

    :param _uri:        mongodb://, mongodb+srv://, http:// or https:// URI
    :param _timeout:    Seconds to wait for the server

    :return:            A connected CatalogClient
    :raises CatalogConnectionError: If the URI is malformed or the store can't be reached
    """

    scheme = _uri.split("://", 1)[0].lower() if "://" in _uri else ""
    logger.info(f"Connecting to {redact_uri(_uri)}")

    if scheme in MONGO_SCHEMES:
        return MongoCatalog.connect(_uri, _timeout)
    if scheme in REST_SCHEMES:
        return RestCatalog.connect(_uri, _timeout)

    raise CatalogConnectionError(f"Invalid connection string: unsupported scheme in {redact_uri(_uri)!r}")
# --- END OF connect() -------------------------------------------------------------------------------------------------
