"""
MizbanCloud HTTP transport
Owns the per-service HTTP clients, the session (token + language),
payload encoding and error normalization
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from mizbancloud.api.exceptions import MizbanCloudError
from mizbancloud.api.form_encoding import encode_form, flatten_form, to_plain_data
from mizbancloud.models.common import ClientConfig, Language, RequestOptions
from mizbancloud.utils.logger import get_logger
from mizbancloud.utils.validators import validate_language, validate_method


logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

AUTH_SERVICE = "auth"
CDN_SERVICE = "cdn"
CLOUD_SERVICE = "cloud"

Payload = Union[Mapping[str, Any], Any, None]
Options = Union[RequestOptions, Mapping[str, Any], None]


@dataclass
class SessionState:
    """Mutable credentials shared by every resource module through HttpClient"""

    token: Optional[str] = None
    language: Language = "en"


class HttpClient:
    """
    Transport for the three MizbanCloud backends (auth/main, CDN, cloud).

    One httpx.AsyncClient per service. Token and language live in a single
    SessionState and are applied to each request right before it is sent.
    No retries are performed: one attempt per call.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the transport.

        Args:
            config: Optional ClientConfig. Defaults to local endpoints.
            transport: Optional httpx transport shared by the three clients
                       (e.g. httpx.MockTransport in tests)
        """
        self.config = config or ClientConfig()
        self.session = SessionState(language=self.config.language)

        # Caller headers win over SDK defaults (case-insensitive)
        default_headers = httpx.Headers({
            "Content-Type": FORM_CONTENT_TYPE,
            "Accept": "application/json",
            "Accept-Language": self.session.language,
        })
        default_headers.update(self.config.headers)

        timeout = httpx.Timeout(self.config.timeout / 1000)
        base_urls = {
            AUTH_SERVICE: self.config.auth_base_url,
            CDN_SERVICE: self.config.cdn_base_url,
            CLOUD_SERVICE: self.config.cloud_base_url,
        }
        self._clients: Dict[str, httpx.AsyncClient] = {
            service: httpx.AsyncClient(
                base_url=base_url,
                timeout=timeout,
                headers=default_headers,
                transport=transport,
            )
            for service, base_url in base_urls.items()
        }

        logger.info(
            f"MizbanCloud client initialized - Auth: {self.config.auth_base_url}, "
            f"CDN: {self.config.cdn_base_url}, Cloud: {self.config.cloud_base_url}"
        )

    # ==================== Session ====================

    def set_token(self, token: Optional[str]) -> None:
        """Set the bearer token; None means unauthenticated"""
        self.session.token = token

    def get_token(self) -> Optional[str]:
        return self.session.token

    def set_language(self, language: Language) -> None:
        """Set the response language ('en' or 'fa') for all subsequent requests"""
        self.session.language = validate_language(language)

    def get_language(self) -> Language:
        return self.session.language

    # ==================== Service primitives ====================

    async def auth_request(
        self,
        method: str,
        path: str,
        data: Payload = None,
        options: Options = None
    ) -> Any:
        """Make a request to the Auth/Main API"""
        return await self._request(AUTH_SERVICE, method, path, data, options)

    async def cdn_request(
        self,
        method: str,
        path: str,
        data: Payload = None,
        options: Options = None
    ) -> Any:
        """Make a request to the CDN API"""
        return await self._request(CDN_SERVICE, method, path, data, options)

    async def cloud_request(
        self,
        method: str,
        path: str,
        data: Payload = None,
        options: Options = None
    ) -> Any:
        """Make a request to the Cloud API"""
        return await self._request(CLOUD_SERVICE, method, path, data, options)

    async def aclose(self) -> None:
        """Close the underlying HTTP clients"""
        for client in self._clients.values():
            await client.aclose()

    # ==================== Pipeline ====================

    async def _request(
        self,
        service: str,
        method: str,
        path: str,
        data: Payload = None,
        options: Options = None
    ) -> Any:
        """
        Build, authorize, send and normalize a single request.

        Args:
            service: One of auth / cdn / cloud
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Endpoint path relative to the service base URL
            data: Payload (form body for non-GET, query params for GET)
            options: Per-call headers, timeout (ms) and query params

        Returns:
            Decoded response envelope

        Raises:
            MizbanCloudError: For every API, transport, timeout or network failure
            ValidationError: If the HTTP method is not supported
        """
        method = validate_method(method)
        client = self._clients[service]

        try:
            request = self._build_request(client, method, path, data, options)
            self._apply_session(request)

            logger.debug(f"{method} {request.url}")
            response = await client.send(request)

            envelope = self._parse_response(response)

            # API-level failure reported with a 2xx status
            if isinstance(envelope, dict) and envelope.get("success") is False:
                message = envelope.get("message")
                raise MizbanCloudError(
                    message if message is not None else "Operation failed",
                    response.status_code,
                    envelope
                )

            return envelope

        except MizbanCloudError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise

        except httpx.TimeoutException as e:
            logger.warning(f"{method} {path} timed out")
            raise MizbanCloudError(
                "Request timeout",
                408,
                {"success": False, "message": "Request timeout"}
            ) from e

        except httpx.HTTPError as e:
            message = str(e) or "Network error"
            logger.warning(f"{method} {path} network error: {message}")
            raise MizbanCloudError(
                message,
                0,
                {"success": False, "message": message}
            ) from e

    def _build_request(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        data: Payload,
        options: Options
    ) -> httpx.Request:
        """Shape the request: form body for writes, query params for reads"""
        if options is not None and not isinstance(options, RequestOptions):
            options = RequestOptions.model_validate(options)

        params: Dict[str, Any] = dict(options.params or {}) if options else {}
        content = None
        data = to_plain_data(data)

        if method != "GET" and data is not None:
            content = encode_form(data)
        elif method == "GET" and data is not None:
            params = {**params, **data}

        kwargs: Dict[str, Any] = {}
        if options and options.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(options.timeout / 1000)

        return client.build_request(
            method,
            path,
            params=flatten_form(params) or None,
            content=content,
            headers=options.headers if options else None,
            **kwargs
        )

    def _apply_session(self, request: httpx.Request) -> None:
        """Stamp the current token and language onto an outgoing request"""
        if self.session.token:
            request.headers["Authorization"] = f"Bearer {self.session.token}"
        request.headers["Accept-Language"] = self.session.language

    def _parse_response(self, response: httpx.Response) -> Any:
        """
        Decode a response, raising MizbanCloudError for non-2xx statuses.

        Args:
            response: httpx response

        Returns:
            Decoded JSON envelope ({} for an empty body)
        """
        if not response.is_success:
            error_data = self._parse_error_response(response)
            message = error_data.get("message") if isinstance(error_data, dict) else None
            raise MizbanCloudError(
                message if message is not None else "An error occurred",
                response.status_code,
                error_data if isinstance(error_data, dict) else {"success": False, "message": "Unknown error"}
            )

        if not response.content:
            return {}

        try:
            return response.json()
        except ValueError:
            raise MizbanCloudError(
                "Invalid response body",
                response.status_code,
                {"success": False, "message": "Invalid response body"}
            )

    def _parse_error_response(self, response: httpx.Response) -> Optional[Any]:
        """
        Parse an error body.

        Args:
            response: Response object

        Returns:
            Decoded body, or None when it is empty or not JSON
        """
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None
