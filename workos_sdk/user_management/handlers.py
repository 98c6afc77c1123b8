"""Endpoint-specific response checks for User Management.

Each handler passes a successful :class:`TrackedResponse` through, turns the
statuses its endpoint documents into an :class:`OperationError` carrying the
decoded body, and falls back to the generic :class:`RequestError` for
anything else. All but the authenticate handler expect
:func:`handle_unauthorized_error` to have run first.
"""
from __future__ import annotations

import httpx

from ..base.errors import UnauthorizedError
from ..base.http import TrackedResponse, decode_operation_error, response_to_request_error
from .errors import (
    AuthenticateErrorWithError,
    CreatePasswordResetError,
    EnrollAuthFactorError,
    ResetPasswordError,
    decode_authenticate_error,
)

_UNAUTHORIZED_CLIENT_ERRORS = frozenset({"invalid_client", "unauthorized_client"})


def handle_create_password_reset_error(response: TrackedResponse) -> TrackedResponse:
    if response.is_success:
        return response
    if response.status_code == httpx.codes.NOT_FOUND:
        raise decode_operation_error(response, CreatePasswordResetError.model_validate)
    raise response_to_request_error(response)


def handle_reset_password_error(response: TrackedResponse) -> TrackedResponse:
    if response.is_success:
        return response
    if response.status_code in (httpx.codes.BAD_REQUEST, httpx.codes.NOT_FOUND):
        raise decode_operation_error(response, ResetPasswordError.model_validate)
    raise response_to_request_error(response)


def handle_enroll_auth_factor_error(response: TrackedResponse) -> TrackedResponse:
    if response.is_success:
        return response
    if response.status_code == httpx.codes.BAD_REQUEST:
        raise decode_operation_error(response, EnrollAuthFactorError.model_validate)
    raise response_to_request_error(response)


def handle_authenticate_error(response: TrackedResponse) -> TrackedResponse:
    """Classify an ``/user_management/authenticate`` response.

    A 400 whose ``error`` is ``invalid_client`` or ``unauthorized_client``
    means the API key was rejected and is reported as
    :class:`UnauthorizedError`. Other 400 and 403 bodies become an
    :class:`OperationError` wrapping the decoded authenticate error.
    """
    if response.is_success:
        return response
    status = response.status_code
    if status not in (httpx.codes.BAD_REQUEST, httpx.codes.FORBIDDEN):
        raise response_to_request_error(response)

    op_error = decode_operation_error(response, decode_authenticate_error)
    if (
        status == httpx.codes.BAD_REQUEST
        and isinstance(op_error.error, AuthenticateErrorWithError)
        and op_error.error.error in _UNAUTHORIZED_CLIENT_ERRORS
    ):
        ctx = response.context
        response.diagnostics.unauthorized(ctx.method, ctx.url, status, ctx.response_headers, ctx.duration)
        raise UnauthorizedError() from op_error
    raise op_error


__all__ = [
    "handle_create_password_reset_error",
    "handle_reset_password_error",
    "handle_enroll_auth_factor_error",
    "handle_authenticate_error",
]
