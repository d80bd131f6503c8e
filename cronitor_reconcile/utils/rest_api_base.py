import json
import logging
from typing import Any, Self

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cronitor_reconcile.exceptions import (
    EncodingError,
    RequestBuildError,
    TransportError,
)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiBase:
    """This class provides a common standard for REST API clients.

    Requests are authenticated with HTTP basic auth, using the account key as
    username and an empty password. Nothing is retried and no timeout is
    enforced unless the caller passes one; both are left to whoever drives
    the client.
    """

    def __init__(
        self,
        host: str,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.host = host.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = requests.auth.HTTPBasicAuth(api_key, "")
        for prefix in ["http://", "https://"]:
            self.session.mount(
                prefix,
                requests.adapters.HTTPAdapter(max_retries=0),
            )
        self.session.headers.update(JSON_HEADERS)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.cleanup()

    def cleanup(self) -> None:
        self.session.close()

    def request(
        self, method: str, path: str, body: Any | None = None
    ) -> requests.PreparedRequest:
        """Build a signed request against host + path.

        body is serialized to JSON when given.
        """
        data = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as e:
                raise RequestBuildError(
                    f"failed to marshal request body: {e!s}"
                ) from e
        url = f"{self.host}{path}"
        try:
            return self.session.prepare_request(
                requests.Request(method=method, url=url, data=data)
            )
        except (requests.exceptions.RequestException, ValueError) as e:
            raise RequestBuildError(f"failed to create new request: {e!s}") from e

    def send(self, prepared: requests.PreparedRequest) -> requests.Response:
        """Execute a prepared request.

        Only network level failures raise here; the status code is for the
        caller to judge.
        """
        try:
            response = self.session.send(prepared, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(prepared.url or self.host, e) from e
        logging.debug([
            "cronitor_response",
            prepared.method,
            prepared.url,
            response.status_code,
        ])
        return response

    @staticmethod
    def decode[M: BaseModel](response: requests.Response, model: type[M]) -> M:
        try:
            return model.model_validate(response.json())
        except requests.exceptions.JSONDecodeError as e:
            logging.error(
                f"Failed to decode JSON response from {response.url} "
                f"Response: {response.text}"
            )
            raise EncodingError(f"failed to unmarshal response: {e!s}") from e
        except PydanticValidationError as e:
            raise EncodingError(
                f"unexpected response from {response.url}: {e!s}"
            ) from e
