"""Error type and message builders shared across the SDK."""

from __future__ import annotations


class SdkError(ValueError):
    """Raised when an SDK operation or an input check fails."""


def err_marshal_json(err_msg: str) -> SdkError:
    """Error for a failure while encoding JSON."""
    return SdkError(f"failed. marshal JSON error: {err_msg}")


def err_unmarshal_json(err_msg: str) -> SdkError:
    """Error for a failure while decoding JSON."""
    return SdkError(f"failed. unmarshal JSON error: {err_msg}")


def err_client_query(err_msg: str) -> SdkError:
    """Error for a failed client query."""
    return SdkError(f"failed. client query error: {err_msg}")


def err_filter_data_from_base_response(kind: str, err_msg: str) -> SdkError:
    """Error for a failure to extract data from a backend base response."""
    return SdkError(f"failed. filter {kind} data from base response error: {err_msg}")


def err_filter_data_from_list_response(kind: str, err_msg: str) -> SdkError:
    """Error for a failure to extract data from a backend list response."""
    return SdkError(f"failed. filter {kind} data from list response error: {err_msg}")