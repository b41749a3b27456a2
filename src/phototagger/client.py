"""Core PhotoTagger client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

import requests

from .errors import ResponseShapeError, TransportError
from .multipart import MultipartUpload
from .resources.colors import Colors
from .resources.content import Content
from .resources.tagging import Tagging
from .router import DEFAULT_TIMEOUT, RequestDescriptor, TaggingRequest, build_request
from .utils import resolve_authorization
from .workflow import TaggingWorkflow
from .workflow_types import TaggingOutcome

DEFAULT_BASE_URL = os.environ.get("IMAGGA_BASE_URL", "http://api.imagga.com/v1")
DEFAULT_AUTHORIZATION = os.environ.get("IMAGGA_AUTHORIZATION")
IMAGGA_API_KEY = os.environ.get("IMAGGA_API_KEY")
IMAGGA_API_SECRET = os.environ.get("IMAGGA_API_SECRET")
IMAGGA_TIMEOUT = float(os.environ.get("IMAGGA_TIMEOUT", str(DEFAULT_TIMEOUT)))


class PhotoTagger:
    """Resource-grouped client for the Imagga tagging API."""

    content: Content
    tagging: Tagging
    colors: Colors
    workflow: TaggingWorkflow

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        authorization: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        default_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
        executor: Optional[Executor] = None,
        max_workers: int = 4,
    ) -> None:
        """Create a client bound to a tagging service.

        Parameters
        ----------
        base_url
            Service root URL. Defaults to ``IMAGGA_BASE_URL``.
        authorization
            Full ``Authorization`` header value. Defaults to
            ``IMAGGA_AUTHORIZATION``.
        api_key, api_secret
            Used to build a Basic credential when no ``authorization`` is
            available. Default to ``IMAGGA_API_KEY`` / ``IMAGGA_API_SECRET``.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise transport and response-shape errors instead of
            returning None.
        executor
            Executor for :meth:`upload_and_tag`. A thread pool is created on
            first use when omitted.
        max_workers
            Size of the thread pool created when no executor is given.
        """
        self.base_url = base_url or DEFAULT_BASE_URL
        self.authorization = resolve_authorization(
            authorization or DEFAULT_AUTHORIZATION,
            api_key or IMAGGA_API_KEY,
            api_secret or IMAGGA_API_SECRET,
        )
        self.default_timeout = default_timeout or IMAGGA_TIMEOUT
        self.raise_on_error = raise_on_error
        self.max_workers = max_workers
        self._logger = logging.getLogger(__name__)
        self._session = session
        self._executor = executor
        self._owns_executor = executor is None
        self._executor_lock = threading.Lock()

        self.content: Content = Content(self)
        self.tagging: Tagging = Tagging(self)
        self.colors: Colors = Colors(self)
        self.workflow: TaggingWorkflow = TaggingWorkflow(self)

    def __enter__(self) -> "PhotoTagger":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the thread pool created by this client, if any."""
        with self._executor_lock:
            if self._owns_executor and self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None

    def build(self, request: TaggingRequest, *, timeout: Optional[float] = None) -> RequestDescriptor:
        """Return the request descriptor for ``request`` using this client's config."""
        return build_request(
            request,
            base_url=self.base_url,
            authorization=self.authorization,
            timeout=timeout or self.default_timeout,
        )

    def request(
        self,
        request: TaggingRequest,
        *,
        body: Optional[MultipartUpload] = None,
        timeout: Optional[float] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send one tagging request and decode the JSON response.

        Parameters
        ----------
        request
            Operation to send.
        body
            Multipart body for upload requests.
        timeout
            Timeout in seconds for this request.
        raise_on_error
            Overrides the client-level ``raise_on_error`` for this call.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None on failure or a non-JSON body.

        Raises
        ------
        RequestConstructionError
            If the client configuration cannot produce a request.
        TransportError
            On network failure or non-2xx status, when raising is enabled.
        ResponseShapeError
            On an empty or non-JSON body, when raising is enabled.
        """
        should_raise = self.raise_on_error if raise_on_error is None else raise_on_error
        descriptor = self.build(request, timeout=timeout)
        method, url = descriptor.method, descriptor.url

        headers = dict(descriptor.headers)
        if body is not None:
            headers["Content-Type"] = body.content_type

        requester = self._session or requests
        response = None
        try:
            response = requester.request(
                method,
                url,
                params=descriptor.query,
                data=body,
                headers=headers,
                timeout=descriptor.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            failed = response if response is not None else exc.response
            error_msg = str(exc)
            try:
                error_body = failed.json()
                if isinstance(error_body, dict):
                    if "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
                    elif "detail" in error_body:
                        error_msg = f"{exc}\nDetails: {error_body['detail']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            if should_raise:
                raise TransportError(error_msg, status_code=getattr(failed, "status_code", None)) from exc
            return None
        except Exception as exc:  # noqa: BLE001 - surface request failures
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            if should_raise:
                raise TransportError(str(exc)) from exc
            return None

        if not response.content:
            return self._shape_failure(should_raise, "Response from %s %s was empty", method, url)
        try:
            payload = response.json()
        except ValueError:
            return self._shape_failure(should_raise, "Response from %s %s was not JSON", method, url)
        if isinstance(payload, (dict, list)):
            return payload
        return self._shape_failure(should_raise, "Response from %s %s was not a JSON object", method, url)

    def _shape_failure(self, should_raise: bool, message: str, *args: object) -> None:
        self._logger.warning(message, *args)
        if should_raise:
            raise ResponseShapeError(message % args)
        return None

    def _get_executor(self) -> Executor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="phototagger",
                )
            return self._executor

    def upload_and_tag(
        self,
        image: bytes,
        on_progress: Optional[Callable[[float], None]] = None,
        on_complete: Optional[Callable[[list[str]], None]] = None,
    ) -> Future[TaggingOutcome]:
        """Upload ``image`` and fetch its tags in the background.

        ``on_progress`` receives upload fractions in ``[0, 1]``; ``on_complete``
        is called exactly once with the tag list, which is empty when any stage
        fails. Both run on the worker thread.

        Returns
        -------
        Future[TaggingOutcome]
            Resolves to the detailed outcome after ``on_complete`` returns.
        """
        return self._get_executor().submit(self.workflow.run, image, on_progress, on_complete)
