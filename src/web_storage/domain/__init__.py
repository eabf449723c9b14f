from .branding import assert_branded, create_branded, illegal_constructor, is_branded
from .conversions import MISSING, required_arguments, to_dom_string, to_unsigned_long
from .errors import ArgumentError, BrandingError, NotSupportedError, QuotaExceededError, StorageError
from .scope import Scope

__all__ = [
    "MISSING",
    "ArgumentError",
    "BrandingError",
    "NotSupportedError",
    "QuotaExceededError",
    "Scope",
    "StorageError",
    "assert_branded",
    "create_branded",
    "illegal_constructor",
    "is_branded",
    "required_arguments",
    "to_dom_string",
    "to_unsigned_long",
]
