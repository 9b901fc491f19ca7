"""
Options handling: validation and defaulting of screenshot requests.
"""
from urlbox.options.defaults import apply_defaults
from urlbox.options.validator import require_credential, validate_async_request, validate_request

__all__ = ["apply_defaults", "require_credential", "validate_request", "validate_async_request"]
